"""Error hierarchy for the school list client.

Every failure the client can surface derives from SchoolClientError and
carries the user-facing text in ``message``. Callers show that text as-is.
"""

UNKNOWN_ERROR = "Unknown error"
NAME_REQUIRED = "Name is required"


class SchoolClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SchoolValidationError(SchoolClientError):
    """Input rejected locally, before any request is issued."""

    def __init__(self, message: str = NAME_REQUIRED):
        super().__init__(message)


class SchoolHTTPError(SchoolClientError):
    """Server answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class SchoolTransportError(SchoolClientError):
    """Request never completed or the response body could not be parsed."""

    @classmethod
    def from_exception(cls, exc: Exception) -> "SchoolTransportError":
        message = str(exc).strip() or UNKNOWN_ERROR
        return cls(message)


class SchoolNotFoundError(SchoolClientError):
    """No school with the given id in the current list."""

    def __init__(self, school_id: int):
        super().__init__(f"School {school_id} not found")
        self.school_id = school_id
