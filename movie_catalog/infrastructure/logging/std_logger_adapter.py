from typing import Optional

from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.infrastructure.logging.logger import Logger


class StdLoggerAdapter(LoggerPort):
    def __init__(self, name: Optional[str] = None):
        self._logger = Logger.get_logger(name)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)
