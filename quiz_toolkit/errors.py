class QuizError(Exception):
    """Base class for errors raised while preparing or grading a quiz."""


class SourceError(QuizError):
    """The supplied text or document can't be used; the message is shown to the user."""


class GradingError(QuizError):
    pass
