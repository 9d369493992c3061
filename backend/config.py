import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

MB = 1024 * 1024


def _optional(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value if value else None


def _optional_float(name: str) -> Optional[float]:
    value = _optional(name)
    return float(value) if value is not None else None


@dataclass(frozen=True)
class Settings:
    """Process configuration, read once at startup and passed to collaborators."""

    port: int = 5000
    host: str = "0.0.0.0"

    smtp_user: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_server: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_timeout: Optional[float] = None
    sender_name: Optional[str] = None

    upload_dir: str = "uploads"
    max_upload_bytes: int = 5 * MB

    event_name: str = "Premam"
    event_date: str = "March 29, 2025"
    event_time: str = "11:00 AM"
    event_venue: str = "Vishveshwarya Hall"

    log_level: str = "INFO"

    @property
    def smtp_configured(self) -> bool:
        return bool(self.smtp_user and self.smtp_password)

    @property
    def sender(self) -> Optional[str]:
        if not self.smtp_user:
            return None
        if self.sender_name:
            return f"{self.sender_name} <{self.smtp_user}>"
        return self.smtp_user

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv()

        return cls(
            port=int(os.getenv("PORT") or 5000),
            host=os.getenv("HOST", "0.0.0.0"),
            smtp_user=_optional("SMTP_USER"),
            smtp_password=_optional("SMTP_PASSWORD"),
            smtp_server=os.getenv("SMTP_SERVER") or "smtp.gmail.com",
            smtp_port=int(os.getenv("SMTP_PORT") or 587),
            smtp_timeout=_optional_float("SMTP_TIMEOUT"),
            sender_name=_optional("SENDER_NAME"),
            upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
            max_upload_bytes=int(float(os.getenv("MAX_UPLOAD_MB") or 5) * MB),
            event_name=os.getenv("EVENT_NAME", "Premam"),
            event_date=os.getenv("EVENT_DATE", "March 29, 2025"),
            event_time=os.getenv("EVENT_TIME", "11:00 AM"),
            event_venue=os.getenv("EVENT_VENUE", "Vishveshwarya Hall"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
