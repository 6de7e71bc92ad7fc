"""
Tracing helpers built on the OpenTelemetry API.

Without a configured tracer provider every span is non-recording and these
helpers do nothing.
"""

from dataclasses import dataclass, field
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from opentelemetry.util.types import AttributeValue

tracer = trace.get_tracer("discogs")

SPAN_PREFIX = "discogs"


def span_name(service: str, operation: str) -> str:
    return f"{SPAN_PREFIX}/{service}.{operation}"


@dataclass
class ErrorConfig:
    error: BaseException | None = None
    code: StatusCode = StatusCode.ERROR
    message: str = ""
    attributes: dict[str, AttributeValue] = field(default_factory=dict)


def record_error(e: ErrorConfig) -> None:
    """Attach an error, its status and extra attributes to the current span."""
    span = trace.get_current_span()
    if not span.is_recording():
        return

    if e.error is not None:
        span.set_attribute("error", str(e.error))

    code = e.code
    if code == StatusCode.UNSET:
        code = StatusCode.ERROR

    span.set_attributes(e.attributes)
    # OpenTelemetry only keeps a description on ERROR statuses
    span.set_status(Status(code, e.message if code == StatusCode.ERROR else None))


def set_attributes(**attributes: Any) -> None:
    """Set attributes on the current span, skipping None values."""
    span = trace.get_current_span()
    if not span.is_recording():
        return
    span.set_attributes({key: value for key, value in attributes.items() if value is not None})
