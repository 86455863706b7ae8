from __future__ import annotations
import logging
from rich.logging import RichHandler
from rich.console import Console

_LOGGER = logging.getLogger("dotazure")
_HANDLER = RichHandler(rich_tracebacks=True, markup=False, show_path=False)
_FORMAT = "%(message)s"
_CONSOLE = Console()

def setup_logger(name: str = "dotazure", verbose: bool = False) -> logging.Logger:
    """Setup logger with Rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=_FORMAT, datefmt="[%X]", handlers=[_HANDLER])
    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger

def log() -> logging.Logger:
    """Get the package logger."""
    return _LOGGER

def console() -> Console:
    """Get the Rich console for styled output."""
    return _CONSOLE
