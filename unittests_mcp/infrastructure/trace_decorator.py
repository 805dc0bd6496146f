"""
Trace decorator for MCP prompt and completion handlers.

Provides a @traced decorator that wraps an async handler with an
OpenTelemetry span. Automatically captures:
- Span name (e.g. "mcp.prompt.get", "mcp.completion.complete")
- Handler type (prompt / completion)
- Function arguments as span attributes
- Duration and success/failure status

Usage:
    @traced(span_name="mcp.prompt.get", handler_type="prompt", ignore=("registry",))
    async def get_prompt_messages(registry, name, arguments) -> list[PromptMessage]:
        ...
"""

from __future__ import annotations

import functools
import inspect
import time
from typing import Any, Callable

from loguru import logger

from unittests_mcp.infrastructure.observability import get_observability_manager


def traced(
    span_name: str,
    handler_type: str = "prompt",
    ignore: tuple[str, ...] = (),
) -> Callable:
    """
    Decorator that wraps an async MCP handler with an OpenTelemetry span.

    Args:
        span_name: The span name (e.g. "mcp.prompt.get").
        handler_type: Either "prompt" or "completion".
        ignore: Parameter names left out of the span attributes.
    """

    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            observability = get_observability_manager()

            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            span_attributes: dict[str, Any] = {
                "mcp.handler.type": handler_type,
                "mcp.handler.name": func.__name__,
            }

            for param_name, param_value in bound.arguments.items():
                if param_name in ignore:
                    continue
                attr_key = f"mcp.{handler_type}.param.{param_name}"
                span_attributes[attr_key] = str(param_value)

            start_time = time.monotonic()

            with observability.create_span(
                name=span_name,
                attributes=span_attributes,
            ):
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    duration_ms = (time.monotonic() - start_time) * 1000

                    observability.record_handler_call(
                        handler_name=func.__name__,
                        handler_type=handler_type,
                        duration_ms=round(duration_ms, 2),
                        success=False,
                        metadata={"error": str(e)},
                    )

                    logger.warning(
                        f"[trace] {span_name} failed after {duration_ms:.1f}ms: {e}"
                    )

                    raise

                duration_ms = (time.monotonic() - start_time) * 1000

                observability.record_handler_call(
                    handler_name=func.__name__,
                    handler_type=handler_type,
                    duration_ms=round(duration_ms, 2),
                    success=True,
                )

                logger.debug(
                    f"[trace] {span_name} completed in {duration_ms:.1f}ms"
                )

                return result

        return wrapper

    return decorator
