import json
from typing import Optional, Tuple

from fastapi import Depends, Request, UploadFile
from pydantic import ValidationError

from .config import Settings
from .errors import BookingValidationError, UploadRejectionError
from .models import BookingRequest
from .services.email_service import SmtpMailer
from .services.upload_service import UploadStore
from .utils import present_fields

SCREENSHOT_FIELD = "screenshot"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_upload_store(settings: Settings = Depends(get_settings)) -> UploadStore:
    return UploadStore.from_settings(settings)


def get_mailer(settings: Settings = Depends(get_settings)) -> SmtpMailer:
    return SmtpMailer(settings)


async def _read_body(request: Request) -> Tuple[dict, Optional[UploadFile]]:
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise BookingValidationError("Malformed request body")
        if not isinstance(data, dict):
            raise BookingValidationError("Malformed request body")
        return data, None

    form = await request.form()
    fields, upload = {}, None
    for key, value in form.multi_items():
        if not isinstance(value, str):
            if not value.filename:
                continue
            if key != SCREENSHOT_FIELD or upload is not None:
                raise UploadRejectionError(f"Unexpected file field: {key}")
            upload = value
        elif key != SCREENSHOT_FIELD:
            fields[key] = value
    return fields, upload


async def booking_submission(
    request: Request,
    store: UploadStore = Depends(get_upload_store),
) -> Tuple[BookingRequest, Optional[UploadFile]]:
    """Parses a form, multipart or JSON booking body. The upload is checked before the route runs."""
    data, upload = await _read_body(request)

    if upload is not None:
        store.check(upload)

    try:
        booking = BookingRequest.model_validate(present_fields(data))
    except ValidationError:
        raise BookingValidationError("Malformed request body")

    return booking, upload
