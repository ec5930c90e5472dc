from __future__ import annotations

import sys

from loguru import logger

from errwhat.application.reporting import get_logging_info
from errwhat.config import Settings


def configure_logging(settings: Settings) -> int:
    """Replace loguru's default sink with one driven by *settings*.

    Returns the id of the new sink.
    """
    logger.remove()
    return logger.add(
        sys.stderr, level=settings.log_level, serialize=settings.log_json
    )


def log_error(err: BaseException, *, log=logger, level: str = "ERROR") -> None:
    """Emit *err* as one record; callstack and info go to ``extra``."""
    cause, callstack, additional_info = get_logging_info(err)
    log.bind(callstack=callstack, info=additional_info.to_json()).log(
        level, "{}", cause
    )
