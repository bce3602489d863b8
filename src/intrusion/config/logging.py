# topmark:header:start
#
#   project      : Author Intrusion
#   file         : logging.py
#   file_relpath : src/intrusion/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Logging for Author Intrusion.

Library modules obtain their logger through
[`get_logger`][intrusion.config.logging.get_logger] and attach the content
path and analysis name a record concerns with
[`run_context`][intrusion.config.logging.run_context]:

    logger.debug("Resolved %d container(s)", n, extra=run_context(content.path, analysis.name))

[`RunContextFormatter`][intrusion.config.logging.RunContextFormatter] renders
those fields as a ``path [analysis]`` prefix and colors the record by level.
Only applications (or the test suite) call
[`setup_logging`][intrusion.config.logging.setup_logging].
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "INTRUSION_LOG_LEVEL"

# LogRecord attributes set through `run_context`.
CONTENT_FIELD: Final[str] = "intrusion_content"
ANALYSIS_FIELD: Final[str] = "intrusion_analysis"

UNKNOWN_CONTENT: Final[str] = "<unknown>"


class IntrusionLogger(logging.Logger):
    """Logger with a TRACE level below DEBUG for per-token and per-plugin detail."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE, keeping the caller's source location."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(IntrusionLogger)


def run_context(path: str | None, analysis: str | None = None) -> dict[str, object]:
    """Return ``extra`` fields naming the content and, optionally, the analysis.

    Args:
        path (str | None): Path of the content being processed.
        analysis (str | None): Name of the analysis running against it.

    Returns:
        dict[str, object]: Mapping suitable for the ``extra`` logging argument.
    """
    return {CONTENT_FIELD: path or UNKNOWN_CONTENT, ANALYSIS_FIELD: analysis}


def describe_run(record: logging.LogRecord) -> str:
    """Return the ``path [analysis]`` prefix of a record, or "" when it has none."""
    content: object = getattr(record, CONTENT_FIELD, None)
    if content is None:
        return ""
    analysis: object = getattr(record, ANALYSIS_FIELD, None)
    return f"{content} [{analysis}]" if analysis else str(content)


# Lowest level first; a record takes the style of the highest threshold it reaches.
LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


def style_for(level: int) -> Callable[[str], str]:
    """Return the chalk style for a numeric logging level."""
    style: Callable[[str], str] = chalk.dim
    for threshold, candidate in LEVEL_STYLES:
        if level >= threshold:
            style = candidate
    return style


class RunContextFormatter(logging.Formatter):
    """Prefix records with their content path and analysis, colored by level."""

    def __init__(self, fmt: str | None = None, *, color: bool = True) -> None:
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record``, inserting the run prefix after the level name."""
        message = super().format(record)
        prefix = describe_run(record)
        if prefix:
            head, sep, tail = message.partition("] ")
            message = f"{head}{sep}{prefix}: {tail}" if sep else f"{prefix}: {message}"
        return style_for(record.levelno)(message) if self.color else message


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s  (%(name)s:%(lineno)d)"


def resolve_env_log_level() -> int | None:
    """Return the level named by ``INTRUSION_LOG_LEVEL``, or None.

    Accepts level names known to `logging` (including ``TRACE`` and ``WARN``)
    and plain numbers. Unknown names give None.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level: object = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None, *, color: bool = True) -> None:
    """Send ``intrusion`` records to stdout through a `RunContextFormatter`.

    Args:
        level (int | None): Threshold; when None the environment decides, and
            CRITICAL applies if it is silent too.
        color (bool): Color records by level.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        RunContextFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT, color=color)
    )
    root_logger.addHandler(handler)


def get_logger(name: str) -> IntrusionLogger:
    """Return the `IntrusionLogger` registered under ``name``."""
    return cast("IntrusionLogger", logging.getLogger(name))
