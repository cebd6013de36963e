"""
Logging for store_orders.

Library modules only bind a name onto loguru's shared logger, so importing
the package leaves the host application's sinks alone. An application that
wants the package's stdout format calls ``AppLogger()`` once at start-up.
"""
from loguru import logger

from store_orders.config import get_config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def _default_name(record) -> bool:
    record["extra"].setdefault("name", record["name"])
    return True


class AppLogger:
    """Replaces loguru's sinks with a single stdout sink at the configured level."""

    def __init__(self) -> None:
        self.sink_id = None
        self.configure()
        self.logger = logger

    def configure(self) -> int:
        log_level = get_config().log_level.upper()
        logger.remove()
        self.sink_id = logger.add(
            sink=lambda msg: print(msg, end=""),
            level=log_level,
            format=LOG_FORMAT,
            filter=_default_name,
        )
        return self.sink_id

    def get_logger(self, name: str = None):
        return get_logger(name)


def get_logger(name: str = None):
    """Return loguru's logger bound to ``name``. Does not add or remove sinks."""
    if name:
        return logger.bind(name=name)
    return logger
