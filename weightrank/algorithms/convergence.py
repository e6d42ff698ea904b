from timeit import default_timer as time
from typing import Optional, Union

from weightrank.measures import Supervised, L1
from weightrank.core import BackendPrimitive


class ConvergenceManager:
    """ Used to keep previous iteration and generally manage convergence of variables. Rankers
    automatically create instances of this class by passing on appropriate parameters.

    Examples:
        >>> convergence = ConvergenceManager()
        >>> convergence.start()
        >>> var = ...
        >>> while not convergence.has_converged(var):
        >>>     ...
        >>>     var = ...
    """

    def __init__(self,
                 tol: float = 1.E-6,
                 error_type: Union[Supervised, str] = L1,
                 max_iters: Optional[int] = None):
        """
        Initializes a convergence manager with a provided tolerance level, error type and number of iterations.

        Args:
            tol: Numerical tolerance to determine the stopping point. Iterations stop once the "error" between
                consecutive iterations becomes less than or equal to this number. Default is 1.E-6.
            error_type: Optional. How to calculate the "error" between consecutive iterations of graph signals.
                If "iters", convergence is reached at iteration *max_iters* without throwing an exception.
                Default is `weightrank.L1`, i.e. the total absolute change of all node values.
            max_iters: Optional. The number of iterations algorithms can run for. If this number is exceeded,
                an exception is thrown. If None (default), iterations continue for as long as needed, so that
                the tolerance alone bounds running time.
        """
        if error_type == "iters" and max_iters is None:
            raise Exception("The 'iters' error type requires a max_iters value")
        self.tol = tol
        self.error_type = error_type
        self.max_iters = max_iters
        self.iteration = 0
        self.last_ranks = None
        self._start_time = None
        self.elapsed_time = None

    def start(self, restart_timer: bool = True):
        """
        Starts the convergence manager

        Args:
            restart_timer: Optional. If True (default) timing information, such as the number of iterations and wall
                clock time measurement, is reset. Otherwise, this only ensures that the convergence manager
                performs one iteration before starting comparing values with previous ones.
        """
        if self.error_type != "iters" and not (self.tol is not None and self.tol > 0):
            raise Exception("Convergence tolerance should be a positive number")
        if restart_timer or self._start_time is None:
            self._start_time = time()
            self.elapsed_time = None
            self.iteration = 0
        self.last_ranks = None

    def has_converged(self, new_ranks: BackendPrimitive) -> bool:
        """
        Checks whether convergence has been achieved by comparing this iteration's numpy array with the
        previous iteration's. The first call after start() only records its argument.

        Args:
            new_ranks: The iteration's numpy array. It should not be edited in-place afterwards.
        """
        if self.last_ranks is not None:
            self.iteration += 1
        converged = False if self.last_ranks is None else self._has_converged(self.last_ranks, new_ranks)
        self.last_ranks = new_ranks
        self.elapsed_time = time()-self._start_time
        if not converged and self.max_iters is not None and self.iteration >= self.max_iters:
            if self.error_type == "iters":
                return True
            raise Exception("Could not converge within "+str(self.max_iters)+" iterations")
        return converged

    def _has_converged(self, prev_ranks: BackendPrimitive, ranks: BackendPrimitive) -> bool:
        if self.error_type == "iters":
            return False
        return self.error_type(prev_ranks)(ranks) <= self.tol

    def __str__(self):
        return str(self.iteration)+" iterations ("+str(self.elapsed_time)+" sec)"
