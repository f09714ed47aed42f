"""
Structured Logging for MeetingForge.

Every module obtains its logger from here so that analysis runs share one
format and can attach context (meeting id, candidate id, stage) to each line:

    from meetingforge.core.logging import get_logger
    logger = get_logger(__name__)

    logger.bind(meeting_id="m-42")
    logger.info("Summary generated", sentences=12)
    # -> "Summary generated | meeting_id=m-42 | sentences=12"

Logger Types
------------
**StructuredLogger**
    Wraps a stdlib logger. Extra keyword arguments and bound context are
    rendered as ``key=value`` pairs after the message.

**AnalysisLogger**
    Tracks the stages of one transcript analysis (summary, key_points,
    topics, sentiment, confidence) with per-stage durations:

        alog = AnalysisLogger(transcript_id)
        alog.start_stage("summary")
        alog.finish(success=True, word_count=48)

Console output goes through ``rich.logging.RichHandler``; a plain file
handler is added when a log file is configured.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

FIELD_SEPARATOR = " | "

# Must not be an ancestor of any module logger
ANALYSIS_RUN_LOGGER = "meetingforge.analysis.run"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass
class LogConfig:
    """Handler settings shared by all MeetingForge loggers."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%dT%H:%M:%S"
    file_path: Optional[Path] = None
    console: bool = True

    @property
    def numeric_level(self) -> int:
        """Stdlib level for ``level``; unknown names fall back to INFO."""
        return _LEVELS.get(self.level.upper(), logging.INFO)


_default_config = LogConfig()
_loggers: Dict[str, "StructuredLogger"] = {}


def _build_handlers(config: LogConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if config.console:
        # rich is imported lazily; most library callers never enable console output
        from rich.logging import RichHandler

        handlers.append(
            RichHandler(show_path=False, markup=False, rich_tracebacks=True)
        )
    if config.file_path:
        config.file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.file_path, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(config.format, datefmt=config.date_format)
        )
        handlers.append(file_handler)
    for handler in handlers:
        handler.setLevel(config.numeric_level)
    return handlers


class StructuredLogger:
    """Logger that renders bound context and keyword fields with each message."""

    def __init__(self, name: str, config: Optional[LogConfig] = None) -> None:
        self.logger = logging.getLogger(name)
        self.config = config or _default_config
        self._context: Dict[str, Any] = {}
        self.apply(self.config)

    def apply(self, config: LogConfig) -> None:
        """Replace the handlers of the wrapped logger according to config."""
        self.config = config
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
        self.logger.setLevel(config.numeric_level)
        for handler in _build_handlers(config):
            self.logger.addHandler(handler)

    def bind(self, **fields: Any) -> "StructuredLogger":
        """Attach context fields to every subsequent message."""
        self._context.update(fields)
        return self

    def unbind(self, *keys: str) -> "StructuredLogger":
        for key in keys:
            self._context.pop(key, None)
        return self

    def _format_message(self, message: str, **fields: Any) -> str:
        merged = dict(self._context)
        merged.update(fields)
        if not merged:
            return message
        rendered = [f"{key}={value}" for key, value in merged.items()]
        return FIELD_SEPARATOR.join([message] + rendered)

    def log(self, level: int, message: str, **fields: Any) -> None:
        if self.logger.isEnabledFor(level):
            self.logger.log(level, self._format_message(message, **fields))

    def debug(self, message: str, **fields: Any) -> None:
        self.log(logging.DEBUG, message, **fields)

    def info(self, message: str, **fields: Any) -> None:
        self.log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields: Any) -> None:
        self.log(logging.WARNING, message, **fields)

    def error(self, message: str, **fields: Any) -> None:
        self.log(logging.ERROR, message, **fields)

    def exception(self, message: str, **fields: Any) -> None:
        """Log at error level with the active exception's traceback."""
        self.logger.exception(self._format_message(message, **fields))


def get_logger(name: str, config: Optional[LogConfig] = None) -> StructuredLogger:
    """
    Get or create a structured logger.

    Args:
        name: Logger name, normally ``__name__``.
        config: Handler settings for a newly created logger. Defaults to the
            settings passed to the last configure_logging() call.

    Returns:
        The cached StructuredLogger for name.
    """
    structured = _loggers.get(name)
    if structured is None:
        structured = _loggers[name] = StructuredLogger(name, config)
    return structured


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    console: bool = True,
) -> None:
    """
    Set the package-wide logging configuration.

    Loggers created afterwards use the new settings; cached loggers are
    reconfigured in place.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL.
        log_file: Also write records to this file.
        console: Attach a rich console handler.
    """
    global _default_config
    _default_config = LogConfig(level=level, file_path=log_file, console=console)
    logging.getLogger().setLevel(_default_config.numeric_level)
    for structured in _loggers.values():
        structured.apply(_default_config)


class AnalysisLogger:
    """
    Stage-aware logger for a single transcript analysis.

    A stage runs from start_stage() until the next stage starts or finish()
    is called; its wall time lands in ``stage_durations`` (seconds).
    """

    def __init__(self, subject_id: str) -> None:
        self.subject_id = subject_id
        self.logger = get_logger(ANALYSIS_RUN_LOGGER)
        self.stage_durations: Dict[str, float] = {}
        self._running: Optional[str] = None
        self._started_at = 0.0

    def start_stage(self, stage: str) -> None:
        self._close_running()
        self._running = stage
        self._started_at = time.perf_counter()
        self.logger.debug("Stage started", subject=self.subject_id, stage=stage)

    def _close_running(self) -> None:
        if self._running is None:
            return
        elapsed = time.perf_counter() - self._started_at
        self.stage_durations[self._running] = elapsed
        self.logger.debug(
            "Stage done",
            subject=self.subject_id,
            stage=self._running,
            seconds=f"{elapsed:.4f}",
        )
        self._running = None

    def finish(self, success: bool, error: Optional[str] = None, **fields: Any) -> None:
        """Close the running stage and log the outcome."""
        self._close_running()
        total = sum(self.stage_durations.values())
        if success:
            self.logger.info(
                "Analysis completed",
                subject=self.subject_id,
                stages=len(self.stage_durations),
                seconds=f"{total:.4f}",
                **fields,
            )
        else:
            self.logger.error("Analysis failed", subject=self.subject_id, error=error)
