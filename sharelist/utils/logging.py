from __future__ import annotations

import logging
import os

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_LEVEL_ENV_VAR = "SHARELIST_LOG_LEVEL"


def configure_root(debug: bool = False) -> int:
    """Set up root logging for the web client and return the level in effect.

    ``SHARELIST_LOG_LEVEL`` (a level name such as ``WARNING``) wins over the
    ``--debug`` flag; an unknown name is ignored.
    """
    level = logging.DEBUG if debug else logging.INFO
    override = getattr(logging, os.getenv(_LEVEL_ENV_VAR, "").strip().upper(), None)
    if isinstance(override, int):
        level = override

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(level)
    return level
