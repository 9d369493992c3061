import logging

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Configure logging for the application"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )


def log_startup(settings: Settings):
    # Credentials are reported, never printed; a missing one only fails on send.
    logger.info("📌 SMTP_USER: %s", settings.smtp_user or "❌ Not Found")
    logger.info("📌 SMTP_PASSWORD: %s", "✅ Loaded" if settings.smtp_password else "❌ Not Found")
    if not settings.smtp_configured:
        logger.warning("⚠️ SMTP credentials missing, booking emails will fail until they are set")
