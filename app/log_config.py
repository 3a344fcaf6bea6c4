import sys

from loguru import logger

from app.config import settings


def configure_logging():
    """
    Reset loguru sinks: stderr at LOG_LEVEL, plus a rotating file
    when LOG_FILE is set.
    """
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)
    if settings.LOG_FILE:
        logger.add(settings.LOG_FILE, rotation="500 MB", level=settings.LOG_LEVEL)
