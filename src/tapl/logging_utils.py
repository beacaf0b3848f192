"""Runtime logging helpers."""

from __future__ import annotations

import os
import sys
from logging import Handler
from typing import Literal

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

LogProfile = Literal["default", "cli"]
LevelFilter = dict[str | None, str | int | bool]

_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {message}"
_CONFIGURED_PROFILE: LogProfile | None = None


def _build_cli_handler() -> Handler:
    return RichHandler(
        console=get_console(),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def parse_log_filter(filter_env: str | None = None) -> tuple[str, LevelFilter]:
    """Parse TAPL_LOG_FILTER.

    Format: "level" or "level,module1=level,module2=false"
    Examples:
        - "info" - global INFO level
        - "info,tapl.eval=debug" - global INFO, tapl.eval at DEBUG
        - "info,tapl.eval=false" - global INFO, tapl.eval disabled

    Returns:
        (global_level, module_filter_dict)
    """
    if filter_env is None:
        filter_env = os.getenv("TAPL_LOG_FILTER", "info")
    parts = [p.strip() for p in filter_env.lower().split(",") if p.strip()]

    filter_dict: LevelFilter = {}
    global_level = "info"

    for part in parts:
        if "=" in part:
            module, level = part.split("=", 1)
            module = module.strip()
            level = level.strip()
            if level == "false":
                filter_dict[module] = False
            else:
                filter_dict[module] = level.upper()
        else:
            global_level = part

    return global_level, filter_dict


def _sink_filter(global_level: str, module_filter: LevelFilter) -> tuple[int, LevelFilter]:
    """Sink level and loguru filter dict for a parsed TAPL_LOG_FILTER.

    The sink drops records below its level before the filter runs, so the
    sink level is the lowest of all configured levels and the global level
    moves into the filter under the root ("") key.
    """
    levels = [global_level.upper()] + [v for v in module_filter.values() if isinstance(v, str)]
    sink_level = min(logger.level(name).no for name in levels)
    return sink_level, {"": global_level.upper(), **module_filter}


def configure_logging(*, profile: LogProfile = "default") -> None:
    """Configure process-level logging once per profile.

    Log levels controlled by TAPL_LOG_FILTER, see parse_log_filter().
    """
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    sink_level, level_filter = _sink_filter(*parse_log_filter())

    logger.remove()
    logger.enable("tapl")

    if profile == "cli":
        logger.add(
            _build_cli_handler(),
            level=sink_level,
            format="{message}",
            backtrace=False,
            diagnose=False,
            filter=level_filter,
        )
    else:
        logger.add(
            sys.stderr,
            level=sink_level,
            format=_DEFAULT_FORMAT,
            backtrace=False,
            diagnose=False,
            filter=level_filter,
        )

    _CONFIGURED_PROFILE = profile
