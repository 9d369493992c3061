import logging
import mimetypes
import smtplib
import ssl
from email.message import EmailMessage
from html import escape
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from ..config import Settings
from ..errors import MailSendError
from ..models import BookingRequest
from .upload_service import StoredUpload

logger = logging.getLogger(__name__)

SUBJECT = "Ticket Booking Confirmation"


def render_confirmation_html(booking: BookingRequest, ticket_id: str, screenshot_note: bool = False) -> str:
    def e(value):
        return escape(value or "")

    semester = (
        f'<p><strong>Semester:</strong> {e(booking.semester)}</p>' if booking.shows_semester else ""
    )
    note = (
        '<p style="text-align: center;">Your payment screenshot has been received.</p>'
        if screenshot_note else ""
    )

    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; border: 1px solid #ddd; border-radius: 5px;">
      <h2 style="color: #333; text-align: center;">Booking Confirmation</h2>
      <p>Hello {e(booking.name)},</p>
      <p>Your ticket has been successfully booked! Here are your details:</p>
      <div style="background-color: #f9f9f9; padding: 15px; border-radius: 5px; margin: 15px 0;">
        <p><strong>Ticket ID:</strong> {e(ticket_id)}</p>
        <p><strong>Name:</strong> {e(booking.name)}</p>
        <p><strong>Email:</strong> {e(booking.email)}</p>
        <p><strong>Phone:</strong> {e(booking.phone)}</p>
        <p><strong>Branch:</strong> {e(booking.branch)}</p>
        {semester}
      </div>
      <div style="background-color: #f0f8ff; padding: 15px; border-radius: 5px; margin: 15px 0;">
        <h3 style="color: #333; margin-top: 0;">Event Details</h3>
        <p><strong>Event:</strong> {e(booking.event_name)}</p>
        <p><strong>Date:</strong> {e(booking.event_date)}</p>
        <p><strong>Time:</strong> {e(booking.event_time)}</p>
        <p><strong>Venue:</strong> {e(booking.event_venue)}</p>
      </div>
      <p>Please keep this email for your records. You may be required to show your ticket ID at the event.</p>
      <p>If you have any questions, please contact us.</p>
      <p style="text-align: center; margin-top: 30px; color: #666;">Thank you for your booking!</p>
    </div>
    {note}
    """


def render_confirmation_text(booking: BookingRequest, ticket_id: str, screenshot_note: bool = False) -> str:
    lines = [
        f"Hello {booking.name},",
        "",
        "Your ticket has been successfully booked! Here are your details:",
        "",
        f"Ticket ID: {ticket_id}",
        f"Name: {booking.name}",
        f"Email: {booking.email}",
        f"Phone: {booking.phone}",
        f"Branch: {booking.branch}",
    ]
    if booking.shows_semester:
        lines.append(f"Semester: {booking.semester}")
    lines += [
        "",
        f"Event: {booking.event_name}",
        f"Date: {booking.event_date}",
        f"Time: {booking.event_time}",
        f"Venue: {booking.event_venue}",
        "",
        "Please keep this email for your records. You may be required to show your ticket ID at the event.",
    ]
    if screenshot_note:
        lines.append("Your payment screenshot has been received.")
    lines += ["", "Thank you for your booking!"]
    return "\n".join(lines)


def build_confirmation_email(
    settings: Settings,
    booking: BookingRequest,
    ticket_id: str,
    attachment: Optional[StoredUpload] = None,
) -> EmailMessage:
    # An uploaded file wins over a screenshot URL.
    screenshot_note = attachment is None and bool(booking.screenshot_url)

    msg = EmailMessage()
    msg["Subject"] = SUBJECT
    if settings.sender:
        msg["From"] = settings.sender
    msg["To"] = booking.email
    msg.set_content(render_confirmation_text(booking, ticket_id, screenshot_note))
    msg.add_alternative(render_confirmation_html(booking, ticket_id, screenshot_note), subtype="html")

    if attachment:
        content_type = attachment.content_type or mimetypes.guess_type(attachment.filename)[0]
        maintype, _, subtype = (content_type or "application/octet-stream").partition("/")
        with open(attachment.path, "rb") as f:
            msg.add_attachment(f.read(), maintype=maintype, subtype=subtype, filename=attachment.filename)

    return msg


class SmtpMailer:
    """Sends one message per call over STARTTLS. Failures raise MailSendError and are not retried."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def deliver(self, msg: EmailMessage):
        s = self.settings
        if not s.smtp_configured:
            raise MailSendError("Missing credentials for SMTP_USER / SMTP_PASSWORD")

        kwargs = {}
        if s.smtp_timeout is not None:
            kwargs["timeout"] = s.smtp_timeout

        try:
            with smtplib.SMTP(s.smtp_server, s.smtp_port, **kwargs) as server:
                server.starttls(context=ssl.create_default_context())
                server.login(s.smtp_user, s.smtp_password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise MailSendError(str(e), e) from e

    async def send(self, msg: EmailMessage):
        await run_in_threadpool(self.deliver, msg)
        logger.info("📧 Email sent successfully to %s", msg["To"])
