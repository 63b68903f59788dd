import logging
import sys
from typing import Optional, Union

from tasktrack.core.config import settings


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    logger = logging.getLogger()
    if logger.handlers:
        return  # already configured (uvicorn, pytest)
    if level is None:
        level = settings.log_level.upper()
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s - %(message)s"
    ))
    logger.addHandler(handler)
