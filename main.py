import logging

import uvicorn

from backend.config import Settings
from backend.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main():
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    logger.info("🚀 Server running on port %s", settings.port)
    uvicorn.run(
        "backend.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
