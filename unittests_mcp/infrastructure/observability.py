"""
Observability for the prompt server.

Wraps the OpenTelemetry API so prompt rendering and argument completion show
up as spans. Without a configured tracer provider the API hands out no-op
tracers, so nothing is exported unless the process runs under an
OpenTelemetry distro, e.g.:

    opentelemetry-instrument python -m unittests_mcp.main
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Optional

from loguru import logger
from opentelemetry import trace
from opentelemetry.trace import SpanKind, Status, StatusCode


class ObservabilityManager:
    """Creates spans and span events for MCP prompt handlers."""

    def __init__(
        self,
        service_name: str = "unittests-mcp",
        enabled: bool = True,
    ) -> None:
        self.service_name = service_name
        self.enabled = enabled
        self._tracer = None

        if self.enabled:
            self._tracer = trace.get_tracer(
                instrumenting_module_name=service_name,
                tracer_provider=trace.get_tracer_provider(),
            )
            logger.info(f"Observability initialized for service: {service_name}")
        else:
            logger.info("Observability disabled")

    # ------------------------------------------------------------------
    # Span creation
    # ------------------------------------------------------------------

    @contextmanager
    def create_span(
        self,
        name: str,
        attributes: Optional[dict] = None,
    ):
        """
        Create a span around a handler call.

        Args:
            name: Span name (e.g. "mcp.prompt.get").
            attributes: Custom attributes to attach.
        """
        if not self.enabled or self._tracer is None:
            yield None
            return

        with self._tracer.start_as_current_span(
            name=name,
            kind=SpanKind.INTERNAL,
            attributes=attributes or {},
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            try:
                yield span
            except Exception as e:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                span.record_exception(e)
                raise

    def add_span_event(
        self,
        name: str,
        attributes: Optional[dict] = None,
    ) -> None:
        """Add an event to the current span."""
        if not self.enabled:
            return

        current_span = trace.get_current_span()
        if current_span.is_recording():
            current_span.add_event(name, attributes=attributes or {})

    def record_handler_call(
        self,
        handler_name: str,
        handler_type: str,
        duration_ms: Optional[float] = None,
        success: bool = True,
        metadata: Optional[dict] = None,
    ) -> None:
        """Record a handler call as a span event with standard attributes."""
        attributes: dict = {
            "mcp.handler.name": handler_name,
            "mcp.handler.type": handler_type,
            "mcp.handler.success": success,
        }

        if duration_ms is not None:
            attributes["mcp.handler.duration_ms"] = duration_ms

        if metadata:
            for key, value in metadata.items():
                attributes[f"mcp.handler.{key}"] = str(value)

        self.add_span_event(f"mcp.{handler_type}.{handler_name}", attributes)


# ------------------------------------------------------------------
# Singleton
# ------------------------------------------------------------------

_observability_manager: ObservabilityManager | None = None


def get_observability_manager() -> ObservabilityManager:
    """Return the global ObservabilityManager singleton (lazy-init)."""
    global _observability_manager

    if _observability_manager is None:
        from unittests_mcp.config import settings

        _observability_manager = ObservabilityManager(
            service_name=settings.OTEL_SERVICE_NAME,
            enabled=settings.AGENT_OBSERVABILITY_ENABLED,
        )

    return _observability_manager


def initialize_observability(
    service_name: str = "unittests-mcp",
    enabled: bool = True,
) -> ObservabilityManager:
    """Initialize the global observability manager at startup."""
    global _observability_manager

    _observability_manager = ObservabilityManager(
        service_name=service_name,
        enabled=enabled,
    )

    return _observability_manager
