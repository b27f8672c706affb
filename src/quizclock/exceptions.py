class QuizError(Exception):
    """Base class for quizclock errors."""


class DataFormatError(QuizError):
    """The problem file is missing, unreadable or malformed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ReadError(QuizError):
    """Standard input failed while the quiz was running."""


class QuizStateError(QuizError):
    """A controller operation was called in the wrong state."""
