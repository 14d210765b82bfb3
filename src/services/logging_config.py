"""
Logging setup for the SPAC compliance engine.

Two output styles share one set of record fields:
- JsonFormatter, one object per line, for log shipping
- ReadableFormatter, a single coloured line, for local runs

DeadlineRunLogger audits a single generation run and log_performance
times engine entry points.
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

request_id_var: ContextVar[Optional[str]] = ContextVar('request_id', default=None)
entity_id_var: ContextVar[Optional[str]] = ContextVar('entity_id', default=None)

QUIET_LOGGERS = ("httpx", "uvicorn.access")


def record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Ambient request/entity ids followed by the record's own extra_data."""
    fields: Dict[str, Any] = {}
    for key, var in (("request_id", request_id_var), ("entity_id", entity_id_var)):
        value = var.get()
        if value:
            fields[key] = value
    fields.update(getattr(record, 'extra_data', None) or {})
    return fields


class JsonFormatter(logging.Formatter):
    """Serializes each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = dict(
            timestamp=datetime.now(timezone.utc).isoformat(),
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
            location=f"{record.module}.{record.funcName}:{record.lineno}",
        )
        payload.update(record_fields(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ReadableFormatter(logging.Formatter):
    """`HH:MM:SS.mmm LEVEL [logger] message | key=value` lines."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def _level(self, record: logging.LogRecord) -> str:
        label = f"{record.levelname:8s}"
        color = self.LEVEL_COLORS.get(record.levelno)
        if not (self.use_color and color):
            return label
        return f"{color}{label}{self.RESET}"

    def format(self, record: logging.LogRecord) -> str:
        clock = datetime.now().strftime('%H:%M:%S.%f')[:-3]
        parts = [f"{clock} {self._level(record)} [{record.name}] {record.getMessage()}"]
        parts.extend(f"{key}={value}" for key, value in record_fields(record).items())
        line = " | ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class ContextLogger(logging.LoggerAdapter):
    """LoggerAdapter whose bound fields land in every record's extra_data."""

    def process(self, msg: str, kwargs: Dict) -> tuple:
        extra = kwargs.setdefault('extra', {})
        extra['extra_data'] = {**self.extra, **extra.get('extra_data', {})}
        return msg, kwargs


def _build_handlers(json_output: bool, log_file: Optional[Path]) -> List[logging.Handler]:
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(
        JsonFormatter() if json_output else ReadableFormatter(use_color=sys.stdout.isatty())
    )
    handlers: List[logging.Handler] = [console]

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        to_file = logging.FileHandler(path)
        # Files are machine-read
        to_file.setFormatter(JsonFormatter())
        handlers.append(to_file)
    return handlers


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Replace the root logger's handlers.

    Console output is JSON when json_output is set, readable otherwise.
    A log_file, when given, always receives JSON lines.
    """
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    for handler in _build_handlers(json_output, log_file):
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str, **extra) -> ContextLogger:
    """Logger for `name` with `extra` bound to every record."""
    return ContextLogger(logging.getLogger(name), extra)


def _elapsed_ms(started: Optional[float]) -> int:
    if started is None:
        return 0
    return int((time.perf_counter() - started) * 1000)


class DeadlineRunLogger:
    """
    Audit trail for one deadline generation run over a single entity.

    Tracks how many items each source contributed (outer deadline,
    periodic schedule, stage rules) and reports the total on completion.
    """

    def __init__(self, entity_id: str, entity_name: str = ""):
        self.logger = get_logger("deadlines.run", entity_id=entity_id)
        self.entity_id = entity_id
        self.entity_name = entity_name
        self._started: Optional[float] = None
        self._counts: Dict[str, int] = {}

    def start(self, stage: str, today: Any) -> None:
        self._started = time.perf_counter()
        self.logger.debug("Generating deadlines", extra={'extra_data': dict(
            entity_name=self.entity_name, stage=stage, today=str(today),
        )})

    def log_source(self, source: str, count: int) -> None:
        self._counts[source] = self._counts.get(source, 0) + count
        if not count:
            return
        self.logger.debug(
            f"{source} produced {count} deadline(s)",
            extra={'extra_data': dict(source=source, count=count)},
        )

    def log_skipped(self, rule: str, missing_field: str) -> None:
        """A stage rule had no milestone date to anchor on."""
        self.logger.debug(
            f"Skipped {rule}: {missing_field} not set",
            extra={'extra_data': dict(rule=rule, missing_field=missing_field)},
        )

    def complete(self, total: int) -> None:
        self.logger.info(f"Generated {total} deadline(s)", extra={'extra_data': dict(
            total=total, sources=self.counts, duration_ms=_elapsed_ms(self._started),
        )})

    @property
    def counts(self) -> Dict[str, int]:
        return dict(self._counts)


@contextmanager
def timed(label: str, logger: Optional[ContextLogger] = None) -> Iterator[None]:
    """Log how long the enclosed block took; failures are logged and re-raised."""
    logger = logger or get_logger("performance")
    started = time.perf_counter()
    try:
        yield
    except Exception as exc:
        logger.error(f"{label} failed", extra={'extra_data': dict(
            duration_ms=_elapsed_ms(started), error=str(exc),
        )})
        raise
    logger.debug(f"{label} completed", extra={'extra_data': dict(duration_ms=_elapsed_ms(started))})


def log_performance(name: Optional[str] = None) -> Callable:
    """Decorator form of `timed`, labelled with `name` or the function name."""
    def decorator(func: Callable) -> Callable:
        label = name or func.__name__

        @wraps(func)
        def wrapper(*args, **kwargs):
            with timed(label):
                return func(*args, **kwargs)

        return wrapper

    return decorator
