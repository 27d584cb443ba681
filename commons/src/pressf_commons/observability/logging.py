"""Console logging shared by pressf entrypoints."""

from __future__ import annotations

import json
import logging
import os
import traceback
from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from datetime import UTC, datetime
from logging.config import dictConfig
from typing import Any, Literal

from opentelemetry import trace

LogFormat = Literal["auto", "text", "json"]

QUIET_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")

_MANAGED_RUNTIME_ENV = ("K_SERVICE", "KUBERNETES_SERVICE_HOST")


def running_on_managed_runtime() -> bool:
    """Cloud Run and Kubernetes collect stderr lines as structured JSON."""

    return any(os.getenv(name) for name in _MANAGED_RUNTIME_ENV)


def _encode_fallback(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return f"<bytes len={len(value)}>"
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    return str(value)


def _dumps(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=_encode_fallback)


class ExtrasFormatter(logging.Formatter):
    """Render ``extra={"data": {...}}`` after the message, or the whole record as JSON."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        *,
        output: LogFormat = "auto",
    ) -> None:
        super().__init__(fmt, datefmt)
        self._output = output

    @property
    def emits_json(self) -> bool:
        if self._output == "auto":
            return running_on_managed_runtime()
        return self._output == "json"

    def format(self, record: logging.LogRecord) -> str:
        data = getattr(record, "data", None)
        if self.emits_json:
            return _dumps(self._payload(record, data))
        line = super().format(record)
        if data:
            return f"{line} | data={_dumps(data)}"
        return line

    def _payload(self, record: logging.LogRecord, data: Any) -> dict[str, Any]:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        payload: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "severity": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if data:
            payload["data"] = json.loads(_dumps(data))
        for key in ("trace_id", "span_id"):
            value = getattr(record, key, None)
            if value:
                payload[key] = value
        if record.exc_info:
            payload["exception"] = "".join(traceback.format_exception(*record.exc_info)).rstrip()
        return payload


class TraceContextFilter(logging.Filter):
    """Stamp the active OpenTelemetry span ids onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            record.trace_id = f"{span_context.trace_id:032x}"
            record.span_id = f"{span_context.span_id:016x}"
        return True


def build_log_config(
    *,
    level: str,
    output: LogFormat = "auto",
    loggers: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Return a dictConfig mapping with a single stderr console handler.

    ``loggers`` maps logger names to levels; chatty HTTP client loggers are
    held at WARNING unless listed there.
    """

    levels = dict.fromkeys(QUIET_LOGGERS, "WARNING")
    levels.update(loggers or {})
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "()": ExtrasFormatter,
                "fmt": "%(asctime)s %(levelname)s %(name)s: %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
                "output": output,
            }
        },
        "filters": {
            "trace_context": {"()": TraceContextFilter},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stderr",
                "filters": ["trace_context"],
            }
        },
        "root": {"level": level.upper(), "handlers": ["console"]},
        "loggers": {name: {"level": value.upper()} for name, value in levels.items()},
    }


def configure_logging(
    *,
    level: str,
    output: LogFormat = "auto",
    loggers: Mapping[str, str] | None = None,
) -> None:
    dictConfig(build_log_config(level=level, output=output, loggers=loggers))
    logging.getLogger("pressf_commons.observability").debug(
        "configured logging",
        extra={"data": {"level": level.upper(), "output": output}},
    )


__all__ = [
    "ExtrasFormatter",
    "LogFormat",
    "QUIET_LOGGERS",
    "TraceContextFilter",
    "build_log_config",
    "configure_logging",
    "running_on_managed_runtime",
]
