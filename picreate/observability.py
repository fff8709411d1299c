"""Logging and tracing helpers for picreate entry points."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Any, Final, Iterator

from opentelemetry import trace

_TRACER_NAME: Final[str] = "picreate"
_LOG_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"


def _as_bool(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from ``PICREATE_LOG`` (or DEBUG when verbose)."""
    level_name = "DEBUG" if verbose else os.environ.get("PICREATE_LOG", "INFO")
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger("picreate").setLevel(level)


def tracing_enabled() -> bool:
    return not _as_bool(os.environ.get("PICREATE_DISABLE_TRACING"))


@contextmanager
def trace_step(name: str, **attributes: Any) -> Iterator[Any]:
    """Wrap a scaffolding step in a span when tracing is enabled.

    Without an OpenTelemetry SDK configured the API hands back a no-op span.
    """
    if not tracing_enabled():
        yield None
        return
    tracer = trace.get_tracer(_TRACER_NAME)
    with tracer.start_as_current_span(f"picreate.{name}") as span:
        for key, value in attributes.items():
            if value is not None:
                span.set_attribute(f"picreate.{key}", value)
        yield span
