"""Composition root — wires handlers and resolves runtime settings.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

import logging
import os

from multierr.application.compare_errors import CompareErrorsHandler
from multierr.application.render_errors import RenderErrorsHandler
from multierr.infrastructure.logging import set_global_log_level

LOG_LEVEL_ENV = "MULTIERR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def resolve_log_level(verbose: bool = False) -> int:
    """--verbose wins; otherwise MULTIERR_LOG_LEVEL, otherwise WARNING."""
    if verbose:
        return logging.DEBUG

    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level in {LOG_LEVEL_ENV}: {raw!r}")
    return level


def configure_logging(verbose: bool = False) -> None:
    set_global_log_level(resolve_log_level(verbose))


def render_handler() -> RenderErrorsHandler:
    return RenderErrorsHandler()


def compare_handler() -> CompareErrorsHandler:
    return CompareErrorsHandler()
