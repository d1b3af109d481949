"""Small logging helpers shared by the library and the CLI."""

from __future__ import annotations

import logging
from typing import Union

DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def get_logger(
    name: str = "stintvid",
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Return a configured :class:`logging.Logger` instance.

    ``level`` may be a number or a level name such as ``"DEBUG"``.  A
    ``StreamHandler`` is attached only on the first call for a given name.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger
