"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class MissingParameterError(AppError):
    """Raised when a required query parameter is absent or empty."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"{parameter} parameter is required", code="MISSING_PARAMETER")


class InvalidDateError(AppError):
    """Raised when a date-like parameter does not parse to a calendar date."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date format: {value!r}", code="INVALID_DATE")


class InternalFailureError(AppError):
    """Raised when filtering or reduction fails unexpectedly."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, code="INTERNAL_ERROR")
