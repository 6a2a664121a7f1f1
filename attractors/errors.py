class AttractorError(Exception):
    pass


class IterationFault(AttractorError):
    """
    Raised inside a run when the iteration function misbehaves or the trajectory
    stops being a finite point. Never leaves the run: the engine converts it into
    a Faulted outcome.
    """

    def __init__(self, message, point=None, iterationIndex=None):
        super().__init__(message)
        self.point = point
        self.iterationIndex = iterationIndex


class InvalidIterationFunction(AttractorError, ValueError):
    pass


class InvalidParameters(AttractorError, ValueError):
    pass


class ConfigurationError(AttractorError, RuntimeError):
    pass
