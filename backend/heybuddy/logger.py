import logging
from typing import Optional

from heybuddy.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger plus the uvicorn/fastapi loggers once."""
    level = (level or settings.LOG_LEVEL).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Avoid stacking handlers when the app is reloaded
    if not any(getattr(h, "_heybuddy", False) for h in root_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._heybuddy = True
        root_logger.addHandler(handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "fastapi", "heybuddy"]:
        logging.getLogger(logger_name).setLevel(level)
