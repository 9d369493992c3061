from typing import Optional


class BookingError(Exception):
    """Base class for failures that end a booking request with a JSON error body."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BookingValidationError(BookingError):
    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message, 400)


class UploadRejectionError(BookingError):
    """Raised by the upload store. Reported to the caller as a generic failure."""

    def __init__(self, message: str):
        super().__init__(message, 500)


class MailSendError(BookingError):
    def __init__(self, details: str, cause: Optional[BaseException] = None):
        self.details = details
        self.cause = cause
        super().__init__("Failed to send email", 500)
