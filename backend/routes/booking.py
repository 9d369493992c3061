import logging
from typing import Optional, Tuple

from fastapi import APIRouter, Depends, UploadFile
from fastapi.concurrency import run_in_threadpool

from ..config import Settings
from ..dependencies import booking_submission, get_mailer, get_settings, get_upload_store
from ..errors import BookingValidationError
from ..models import BookingRequest, BookingResponse
from ..services.email_service import SmtpMailer, build_confirmation_email
from ..services.upload_service import UploadStore
from ..utils import generate_ticket_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["booking"])


@router.post("/book", response_model=BookingResponse, response_model_by_alias=True)
async def book_ticket(
    submission: Tuple[BookingRequest, Optional[UploadFile]] = Depends(booking_submission),
    settings: Settings = Depends(get_settings),
    store: UploadStore = Depends(get_upload_store),
    mailer: SmtpMailer = Depends(get_mailer),
):
    booking, upload = submission
    logger.info("📩 Received a booking request (screenshot file: %s)", "yes" if upload else "no")

    missing = booking.missing_fields()
    if missing:
        logger.info("❌ Missing required fields: %s", ", ".join(missing))
        raise BookingValidationError()

    if "\r" in booking.email or "\n" in booking.email:
        raise BookingValidationError("Invalid email address")

    booking = booking.with_event_defaults(settings)

    ticket_id = booking.ticket_id or generate_ticket_id()
    logger.info("🎫 Using ticket ID: %s", ticket_id)

    stored = await store.save(upload) if upload else None

    msg = await run_in_threadpool(build_confirmation_email, settings, booking, ticket_id, stored)
    await mailer.send(msg)

    return BookingResponse(message="Booking successful! Email sent.", ticket_id=ticket_id)
