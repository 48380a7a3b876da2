import sys
from typing import Optional
from loguru import logger
from farm_forecast.config import get_config

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

class AppLogger:
    """Global logger configuration for the application.

    Installs one stderr sink at get_config().log_level when created. Only that
    sink is ever replaced afterwards, so sinks added by callers survive.
    """
    def __init__(self) -> None:
        self.logger = logger
        self._handler_id: Optional[int] = None
        # loguru's default stderr sink would duplicate ours
        logger.remove()
        self.configure()

    def configure(self) -> None:
        """(Re)install the application sink using the current config's log level."""
        if self._handler_id is not None:
            self.logger.remove(self._handler_id)
        self._handler_id = self.logger.add(
            sink=sys.stderr,
            level=get_config().log_level.upper(),
            format=LOG_FORMAT,
        )

    def get_logger(self, name: str = None):
        """Get the configured logger instance.

        Args:
            name (str, optional): Name for the logger context. Defaults to None.
        Returns:
            loguru.Logger: The configured logger instance.
        """
        if name:
            return self.logger.bind(name=name)
        return self.logger

_app_logger = AppLogger()

def get_logger(name: str = None):
    """Get the application logger. Binding a name never touches the installed sinks."""
    return _app_logger.get_logger(name)

def configure_logging() -> None:
    """Apply the latest config's log level to the application sink."""
    _app_logger.configure()
