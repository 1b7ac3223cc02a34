"""Diagnostic logging, kept apart from the console feedback in ``reporter``."""
from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

DEBUG_ENV_VAR = "QR_FORGE_DEBUG"
ROOT_LOGGER = "qr_forge"
LOG_FORMAT = "[%(name)s] %(levelname)s %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


def debug_enabled(env: Optional[Mapping[str, str]] = None) -> bool:
    source = os.environ if env is None else env
    return str(source.get(DEBUG_ENV_VAR, "")).strip().lower() in _TRUTHY


def get_logger(name: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> logging.Logger:
    """Return the ``qr_forge`` logger, or its child *name*.

    The package logger gets a single stderr handler on first use. Its level is
    refreshed from ``QR_FORGE_DEBUG`` on every call.
    """

    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.propagate = False

    root.setLevel(logging.DEBUG if debug_enabled(env) else logging.WARNING)
    return root.getChild(name) if name else root
