class SchedulerError(Exception):
    """Base class for every error raised by the booking scheduler."""

    pass


class BookingValidationError(SchedulerError):
    """Raised when the search input is malformed (non-positive duration, empty category path, ...).

    No search is performed when this is raised.
    """

    pass


class SearchExhaustedError(SchedulerError):
    """Raised when no valid start date is found within the allowed number of attempts."""

    def __init__(self, message: str, attempts: int):
        super().__init__(message)
        self.attempts = attempts


class ComputationError(SchedulerError):
    """Raised on an unexpected internal failure, e.g. an instant that cannot be placed on a local day."""

    pass


class FileReadingError(SchedulerError):
    """Raised when there is an error reading a file."""

    pass


class FileContentError(SchedulerError):
    """Raised when the content of a file is not as expected."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    BookingValidationError: 400,
    SearchExhaustedError: 422,
    ComputationError: 500,
    FileReadingError: 500,
    FileContentError: 400,
}
