"""
Logging setup for the Credential API.

Everything logs through ``logging.getLogger(__name__)``; this module
only decides where records go and at which level.  ``DEBUG=true``
lowers the level to ``DEBUG`` whatever ``LOG_LEVEL`` says.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str, debug: bool = False) -> int:
    """Map a level name such as ``"info"`` to its numeric value.

    Unknown names fall back to ``INFO``.
    """
    if debug:
        return logging.DEBUG
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def build_handlers(logfile: Optional[str] = None) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    debug: bool = False,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Attach console (and optional file) handlers to ``logger``.

    Parameters
    ----------
    level : str
        Level name, case insensitive.
    logfile : Optional[str]
        Extra file to write records to.
    debug : bool
        Force the ``DEBUG`` level.
    logger : Optional[logging.Logger]
        Logger to configure; the root logger by default.

    A logger that already has handlers (uvicorn, pytest or an earlier
    ``create_app``) only gets its level updated.
    """
    logger = logger or logging.getLogger()
    logger.setLevel(resolve_level(level, debug))
    if logger.handlers:
        return
    for handler in build_handlers(logfile):
        logger.addHandler(handler)
