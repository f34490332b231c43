"""ANSI styles for CLI and console log output."""

import logging


class Colors:
    """ANSI escape sequences plus helpers that wrap text in them."""

    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    @classmethod
    def paint(cls, text: str, *styles: str) -> str:
        """Wrap text in the given styles, resetting afterwards."""
        if not styles:
            return text
        return f"{''.join(styles)}{text}{cls.ENDC}"

    @classmethod
    def for_level(cls, levelno: int) -> str:
        """Style of a log level (unknown levels are unstyled)."""
        if levelno >= logging.CRITICAL:
            return cls.FAIL + cls.BOLD
        return {
            logging.DEBUG: cls.OKCYAN,
            logging.INFO: cls.OKGREEN,
            logging.WARNING: cls.WARNING,
            logging.ERROR: cls.FAIL,
        }.get(levelno, '')

    @classmethod
    def success(cls, text: str) -> str:
        return cls.paint(text, cls.OKGREEN)

    @classmethod
    def error(cls, text: str) -> str:
        return cls.paint(text, cls.FAIL)

    @classmethod
    def warning(cls, text: str) -> str:
        return cls.paint(text, cls.WARNING)

    @classmethod
    def key(cls, text: str) -> str:
        """Localization keys and language codes."""
        return cls.paint(text, cls.BOLD, cls.OKCYAN)

    @classmethod
    def muted(cls, text: str) -> str:
        """Secondary output such as 'unchanged' markers."""
        return cls.paint(text, cls.DIM)
