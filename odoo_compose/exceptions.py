class SequenceError(Exception):
    """
    Base error raised when the module sequence can't be completed.

    Attributes:
        exit_code (int): The process exit code to use when this error
            reaches the command line. Subclasses set their own code,
            anything else raised from this base exits with 1.
    """
    exit_code = 1


class PreflightError(SequenceError):
    exit_code = 2


class ConflictingAction(PreflightError):
    pass


class MissingAction(PreflightError):
    pass


class MissingDatabase(PreflightError):
    pass


class InvalidPath(PreflightError):
    pass


class StepFailed(SequenceError):
    def __init__(self, result):
        self.result = result
        super().__init__(
            "Step {} failed: {}".format(result.step, result.reason)
        )


class ApplyFailed(StepFailed):
    exit_code = 3


class StopFailed(StepFailed):
    exit_code = 4


class StartFailed(StepFailed):
    exit_code = 5
