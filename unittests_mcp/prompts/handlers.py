"""
Invocation and completion handlers.

Both handlers are stateless functions over an injected PromptRegistry.
Validation runs in argument declaration order and stops at the first
violation.
"""

from __future__ import annotations

import itertools
from collections.abc import Mapping

from loguru import logger

from unittests_mcp.prompts import Message, PromptDefinition
from unittests_mcp.prompts.errors import (
    MissingArgumentError,
    NotFoundError,
    RenderError,
)
from unittests_mcp.prompts.registry import PromptRegistry

# MCP caps completion/complete responses at 100 values.
MAX_COMPLETION_RESULTS = 100

# Upper bound on candidates drawn from a provider to count the total.
COMPLETION_SCAN_LIMIT = 1000


def resolve_arguments(
    definition: PromptDefinition,
    raw_arguments: Mapping[str, object],
) -> dict[str, str | None]:
    """Validate raw arguments and build the resolved mapping.

    Absent optional arguments map to None so renderers can tell "not
    provided" apart from "provided empty". Undeclared keys are ignored.
    """
    resolved: dict[str, str | None] = {}
    for argument in definition.arguments:
        if argument.name not in raw_arguments:
            if argument.required:
                raise MissingArgumentError(argument.name)
            resolved[argument.name] = None
            continue
        resolved[argument.name] = argument.validate(raw_arguments[argument.name])

    ignored = sorted(set(raw_arguments) - set(resolved))
    if ignored:
        logger.debug(f"Ignoring undeclared arguments for {definition.name!r}: {ignored}")
    return resolved


def invoke(
    registry: PromptRegistry,
    name: str,
    raw_arguments: Mapping[str, object] | None = None,
) -> list[Message]:
    """Validate arguments for prompt ``name`` and return its rendered messages."""
    definition = registry.get(name)
    resolved = resolve_arguments(definition, raw_arguments or {})

    try:
        messages = definition.render(resolved)
    except RenderError:
        raise
    except Exception as e:
        raise RenderError(name, str(e)) from e

    return list(messages)


def complete(
    registry: PromptRegistry,
    prompt_name: str,
    argument_name: str,
    partial_value: str = "",
    sibling_values: Mapping[str, str] | None = None,
    max_results: int = MAX_COMPLETION_RESULTS,
) -> list[str]:
    """Return completion candidates for one argument of a prompt.

    ``sibling_values`` holds only arguments the caller has already bound.
    An argument without a completion provider yields an empty list.
    """
    definition = registry.get(prompt_name)
    argument = definition.argument(argument_name)
    if argument is None:
        raise NotFoundError(prompt_name, argument_name)

    if argument.completer is None:
        return []

    candidates = argument.completer(partial_value, dict(sibling_values or {}))
    return list(itertools.islice(candidates, max_results))
