class RecommenderError(Exception):
    """Base class for failures on the recommendation path."""


class EmptyCountryListError(RecommenderError):
    def __init__(self, message: str = "Country list is empty."):
        super().__init__(message)


class EmptyOutputError(RecommenderError):
    def __init__(self, message: str = "AI failed to provide a recommendation."):
        super().__init__(message)


class SubmissionInProgressError(RecommenderError):
    def __init__(self, message: str = "A recommendation request is already in progress."):
        super().__init__(message)


class FormValidationError(RecommenderError):
    """A required form field is missing; the form stays editable."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message
