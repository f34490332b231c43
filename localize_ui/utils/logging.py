"""Logging setup for localize-ui.

Library modules log through ``get_module_logger('<module>')`` and never
install handlers. The CLI (or a host application) calls
:func:`configure_logging` once to decide where records end up.
"""

import logging
import sys
from typing import Optional
from pathlib import Path
from .colors import Colors

ROOT_LOGGER_NAME = 'localize_ui'

CONSOLE_FORMAT = '%(message)s'
FILE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
FILE_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def console_level(verbose: bool = False, quiet: bool = False) -> int:
    """Console threshold for the CLI flags; quiet wins over verbose."""
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


class ColoredFormatter(logging.Formatter):
    """Console formatter that paints each record in its level's color."""

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not self.use_colors:
            return message
        return Colors.paint(message, Colors.for_level(record.levelno))


class Logger:
    """
    Owner of the handlers attached to the ``localize_ui`` logger.

    There is one instance per process. The console handler always exists;
    the file handler only after ``configure(log_file=...)``. The package
    logger itself stays at DEBUG so each handler filters on its own level.
    """

    _instance: Optional['Logger'] = None
    _initialized: bool = False

    def __new__(cls) -> 'Logger':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if Logger._initialized:
            return

        self._logger = logging.getLogger(ROOT_LOGGER_NAME)
        self._logger.setLevel(logging.DEBUG)
        self._logger.handlers = []

        self._console_handler: logging.Handler = self._swap(None, self._console(logging.INFO, True))
        self._file_handler: Optional[logging.FileHandler] = None

        Logger._initialized = True

    @staticmethod
    def _console(level: int, use_colors: bool) -> logging.StreamHandler:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(ColoredFormatter(fmt=CONSOLE_FORMAT, use_colors=use_colors))
        return handler

    @staticmethod
    def _file(file_path: Path) -> logging.FileHandler:
        """File handler at DEBUG; creates missing parent directories."""
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(file_path, encoding='utf-8')
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
        return handler

    def _swap(self, old: Optional[logging.Handler], new: logging.Handler) -> logging.Handler:
        if old is not None:
            self._logger.removeHandler(old)
            old.close()
        self._logger.addHandler(new)
        return new

    def configure(
        self,
        verbose: bool = False,
        quiet: bool = False,
        log_file: Optional[Path] = None,
        use_colors: bool = True
    ) -> None:
        """
        Apply CLI logging options.

        Args:
            verbose: Show DEBUG records on the console
            quiet: Only show WARNING and above on the console
            log_file: Also write every record to this file
            use_colors: Color console output
        """
        self._console_handler = self._swap(
            self._console_handler,
            self._console(console_level(verbose, quiet), use_colors)
        )
        if log_file:
            self._file_handler = self._swap(self._file_handler, self._file(Path(log_file)))

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """The package logger, or its ``name`` child."""
        return get_module_logger(name) if name else self._logger

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)


_logger: Optional[Logger] = None


def get_module_logger(name: str) -> logging.Logger:
    """Child logger ``localize_ui.<name>``; installs no handler."""
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')


def get_logger() -> Logger:
    """The process-wide :class:`Logger`, created on first use."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def configure_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
    use_colors: bool = True
) -> None:
    """Shortcut for ``get_logger().configure(...)``."""
    get_logger().configure(verbose=verbose, quiet=quiet, log_file=log_file, use_colors=use_colors)


def reset_logger() -> None:
    """Close all handlers and drop the singleton (used by tests)."""
    global _logger
    if _logger is not None:
        for handler in list(_logger._logger.handlers):
            handler.close()
            _logger._logger.removeHandler(handler)
    _logger = None
    Logger._instance = None
    Logger._initialized = False
