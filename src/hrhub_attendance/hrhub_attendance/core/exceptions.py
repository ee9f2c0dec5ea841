class DomainError(Exception):
    """Base exception for attendance reporting errors."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDateRangeError(ValidationError):
    """Raised when a report range ends before it starts."""

    def __init__(self, start, end):
        super().__init__(f"End date {end} is before start date {start}")
        self.start = start
        self.end = end


class UpstreamFailure(DomainError):
    """Raised when the employee directory, shift catalog or punch source fails."""
