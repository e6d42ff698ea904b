import inspect


def _parameters(method):
    return inspect.signature(method).parameters


def call(method, kwargs):
    """
    Calls a method with only those entries of a keyword argument dict that appear in its signature.
    Rankers use this to forward their leftover constructor arguments to the components they create.

    Example:
        >>> from weightrank import ConvergenceManager
        >>> convergence = call(ConvergenceManager, {"tol": 1.E-9, "alpha": 0.85})
        >>> print(convergence.tol)
        1e-09
    """
    return method(**{kwarg: kwargs[kwarg] for kwarg in _parameters(method) if kwarg in kwargs})


def ensure_used_args(kwargs, methods=None):
    """
    Makes sure that every keyword argument is consumed by at least one of the given methods,
    so that typos in parameter names raise instead of being silently ignored.
    """
    known = set()
    for method in methods or []:
        known.update(_parameters(method))
    missing = set(kwargs) - known
    if missing:
        raise Exception("No usage of argument(s) "+str(missing)+" found")
