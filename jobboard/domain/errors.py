"""
Domain error taxonomy.

Client-input errors (MissingField, InvalidEmail, InvalidPhone) map to HTTP 400.
StoreUnavailable is an infrastructure error: 500 on reads, 400 on writes.
Nothing here is retried internally.
"""


class JobBoardError(Exception):
    """Base class for every error raised by the job board core."""


class JobValidationError(JobBoardError, ValueError):
    """A submitted job record failed validation."""


class MissingField(JobValidationError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidEmail(JobValidationError):
    def __init__(self) -> None:
        super().__init__("Invalid email format")


class InvalidPhone(JobValidationError):
    def __init__(self) -> None:
        super().__init__("Invalid phone number format")


class StoreUnavailable(JobBoardError):
    """The job store could not be reached or the query failed."""
