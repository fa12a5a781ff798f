import logging
import sys

from .console.session import ConsoleSession
from .core.config import settings

def configure_logging() -> None:
    """Configure root logging from settings."""
    log_config = {
        "level": settings.log_level_value,
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    }
    if settings.LOG_FILE:
        log_config["filename"] = settings.LOG_FILE
    logging.basicConfig(**log_config)

logger = logging.getLogger(__name__)

def main() -> int:
    """Console entry point."""
    configure_logging()
    logger.info(f"Starting {settings.APP_NAME} {settings.VERSION}...")
    logger.info(
        f"Credentials file: {settings.CREDENTIALS_FILE}, "
        f"snapshot file: {settings.QUEUE_SNAPSHOT_FILE}"
    )
    
    session = ConsoleSession.from_settings(settings)
    return session.run()

if __name__ == "__main__":
    sys.exit(main())
