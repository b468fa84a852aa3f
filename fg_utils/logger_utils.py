import logging
import sys
from pythonjsonlogger import jsonlogger

from flashgen.infrastructure.config import settings

SERVICE_NAME = "flashgen"


def get_logger(name: str, log_level: str = "INFO"):
    """Return a JSON-formatted stdout logger tagged with the service name."""
    logger = logging.getLogger(name)
    logger.setLevel(log_level.upper())
    logger.propagate = False

    formatter = jsonlogger.JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(module)s %(funcName)s %(message)s',
        static_fields={"service": SERVICE_NAME},
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)

    return logger


def set_log_level(log_level: str) -> None:
    """Apply an explicitly passed Settings.LOG_LEVEL to the shared logger."""
    logger.setLevel(log_level.upper())


# Default logger instance, configured from the environment settings
logger = get_logger(SERVICE_NAME, settings.LOG_LEVEL)
