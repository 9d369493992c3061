import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import BookingError, BookingValidationError, MailSendError, UploadRejectionError

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal Server Error"


async def validation_error_handler(request: Request, exc: BookingValidationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def upload_rejection_handler(request: Request, exc: UploadRejectionError) -> JSONResponse:
    logger.warning("❌ Upload rejected: %s", exc.message)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": INTERNAL_ERROR})


async def mail_send_error_handler(request: Request, exc: MailSendError) -> JSONResponse:
    logger.error("❌ Email failed: %s", exc.details)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "details": exc.details},
    )


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("❌ Server Error: %s", exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": INTERNAL_ERROR})


EXCEPTION_HANDLERS = {
    BookingValidationError: validation_error_handler,
    UploadRejectionError: upload_rejection_handler,
    MailSendError: mail_send_error_handler,
    BookingError: booking_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: unexpected_error_handler,
}


def register_exception_handlers(app: FastAPI):
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
