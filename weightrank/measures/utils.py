from weightrank.core import GraphSignalData


class Measure(object):
    def __call__(self, scores: GraphSignalData):
        return self.evaluate(scores)

    def evaluate(self, scores: GraphSignalData):
        raise Exception("Non-abstract subclasses of Measure should implement an evaluate method")
