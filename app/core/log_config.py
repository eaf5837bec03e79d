import logging
from typing import Optional

from app.core.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging once for the service."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
