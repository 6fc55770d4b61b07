"""
logging_utils.py

Central logging utilities for the Flavor Pairer project.

Log format (one line):
<RunId>|<Date>|<Time>|<Level>|<File:Line>|<Module.Func>|<ModulePurpose>|
<InvokingFunc>|<InvokingFuncPurpose>|<Detail>|<NextStep>|<Resolution>|<END>
"""

from __future__ import annotations

import datetime
import logging
import os
import uuid
from typing import Dict, Optional

from dotenv import find_dotenv, load_dotenv

# .env must be loaded before the first init_logging() reads the log level
load_dotenv(find_dotenv(usecwd=True))

LOG_RUN_ID: str = uuid.uuid4().hex[:8]

_base_logger = logging.getLogger("flavor_pairer")


def _log(
    level: str,
    message: str,
    *,
    invoking_func: str = "",
    invoking_purpose: str = "",
    next_step: str = "",
    resolution: str = "",
    exc: Optional[BaseException] = None,
) -> None:
    init_logging()
    extra = {
        "invoking_func": invoking_func,
        "invoking_purpose": invoking_purpose,
        "next_step": next_step,
        "resolution": resolution,
    }
    if exc is not None:
        message = f"{message} | EXC={repr(exc)}"

    # stacklevel=3 points the record at the caller of log_info/log_error
    if level.upper() == "ERROR":
        _base_logger.error(message, extra=extra, stacklevel=3)
    elif level.upper() == "WARNING":
        _base_logger.warning(message, extra=extra, stacklevel=3)
    else:
        _base_logger.info(message, extra=extra, stacklevel=3)


def log_info(
    message: str,
    *,
    invoking_func: str = "",
    invoking_purpose: str = "",
    next_step: str = "",
    resolution: str = "",
) -> None:
    _log(
        "INFO",
        message,
        invoking_func=invoking_func,
        invoking_purpose=invoking_purpose,
        next_step=next_step,
        resolution=resolution,
    )


def log_error(
    message: str,
    *,
    invoking_func: str = "",
    invoking_purpose: str = "",
    next_step: str = "",
    resolution: str = "",
    exc: Optional[BaseException] = None,
) -> None:
    _log(
        "ERROR",
        message,
        invoking_func=invoking_func,
        invoking_purpose=invoking_purpose,
        next_step=next_step,
        resolution=resolution,
        exc=exc,
    )


# ============================================================================
# StructuredFormatter + get_logger() for Python logging
# ============================================================================

class StructuredFormatter(logging.Formatter):
    """
    Custom formatter that emits a single '|' separated line conforming
    to the project log template.

    Format:
    <RunId>|<Date>|<Time>|<Level>|<File:Line>|<Module.Func>|<ModulePurpose>|
    <InvokingFunc>|<InvokingFuncPurpose>|<Detail>|<NextStep>|<Resolution>|<END>
    """

    # High-level purposes by module name
    MODULE_PURPOSES: Dict[str, str] = {
        "catalog": "Load the ingredient catalog and its direct pairings",
        "supabase_source": "Read ingredients and pairings from Supabase tables",
        "builder": "Build the height-balanced ingredient tree",
        "tree_util": "Search, depth and flatten queries over the ingredient tree",
        "ranker": "Rank transitively related ingredients by co-occurrence",
        "engine": "Aggregate pairing levels 1-3 for a single ingredient",
        "config": "Read settings and create clients from environment variables",
        "pairing_example": "Command line example printing pairings for an ingredient",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        """Format log record into structured pipe-delimited format."""
        dt = datetime.datetime.fromtimestamp(record.created)
        date_str = dt.strftime("%Y-%m-%d")
        time_str = dt.strftime("%H:%M:%S")

        run_id = getattr(record, "run_id", LOG_RUN_ID)

        level = record.levelname
        code_location = f"{record.filename}:{record.lineno}"
        func_name = record.funcName
        module_name = record.module
        module_purpose = self.MODULE_PURPOSES.get(module_name, "")

        # Optional extra context supplied via logger calls
        invoking_func = getattr(record, "invoking_func", "")
        invoking_purpose = getattr(record, "invoking_purpose", "")
        next_step = getattr(record, "next_step", "")
        resolution = getattr(record, "resolution", "")

        detail = record.getMessage()

        return (
            f"{run_id}|{date_str}|{time_str}|{level}|{code_location}|"
            f"{module_name}.{func_name}|{module_purpose}|"
            f"{invoking_func}|{invoking_purpose}|"
            f"{detail}|{next_step}|{resolution}|<END>"
        )


_initialized = False


def _env_log_level() -> int:
    level_name = os.environ.get("FLAVOR_PAIRER_LOG_LEVEL", "INFO").strip().upper()
    return getattr(logging, level_name, logging.INFO)


def init_logging(level: Optional[int] = None) -> None:
    """
    Initialize root logger once with our StructuredFormatter.

    Without an explicit level the first call applies FLAVOR_PAIRER_LOG_LEVEL
    (INFO when unset) and later calls are no-ops. An explicit level is
    always applied, so entry points can override it from Settings. Call
    get_logger() from modules instead of configuring logging everywhere,
    so configuration stays central.
    """
    global _initialized
    root = logging.getLogger()
    if level is None:
        if _initialized:
            return
        level = _env_log_level()

    if not _initialized:
        _initialized = True
        # Host already configured handlers (REPL / pytest) - avoid doubles
        if not root.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(StructuredFormatter())
            root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger configured with structured formatting.

    Usage:
        logger = get_logger(__name__)
        logger.info(
            "Tree constructed",
            extra={
                "invoking_func": "construct_ingredient_tree",
                "next_step": "Serve ranking requests",
            },
        )
    """
    init_logging()
    return logging.getLogger(name)
