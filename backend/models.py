from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import Settings

SEMESTER_NOT_GIVEN = "N/A"
REQUIRED_FIELDS = ("name", "email", "phone")


class BookingRequest(BaseModel):
    """One booking form submission. Defaults apply only to absent fields."""

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    branch: str = "Non-MBCET"
    semester: str = SEMESTER_NOT_GIVEN

    event_name: str = Field("Premam", alias="eventName")
    event_date: str = Field("March 29, 2025", alias="eventDate")
    event_time: str = Field("11:00 AM", alias="eventTime")
    event_venue: str = Field("Vishveshwarya Hall", alias="eventVenue")

    screenshot_url: Optional[str] = Field(None, alias="screenshotURL")
    ticket_id: Optional[str] = Field(None, alias="ticketId")

    def missing_fields(self) -> List[str]:
        return [field for field in REQUIRED_FIELDS if not getattr(self, field)]

    def with_event_defaults(self, settings: Settings) -> "BookingRequest":
        """Fill event fields the submitter left out from the deployment's event settings."""
        defaults = {
            "event_name": settings.event_name,
            "event_date": settings.event_date,
            "event_time": settings.event_time,
            "event_venue": settings.event_venue,
        }
        update = {k: v for k, v in defaults.items() if k not in self.model_fields_set}
        return self.model_copy(update=update)

    @property
    def shows_semester(self) -> bool:
        return self.semester != SEMESTER_NOT_GIVEN


class BookingResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    ticket_id: str = Field(alias="ticketId")
