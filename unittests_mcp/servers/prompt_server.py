"""
Prompt MCP adapter.

Exposes every PromptDefinition in a PromptRegistry as an MCP prompt and
answers completion/complete requests for prompt arguments. Validation and
rendering stay in unittests_mcp.prompts.handlers; this module only converts
between registry types and MCP protocol types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import PromptError
from fastmcp.prompts.prompt import Prompt, PromptArgument
from loguru import logger
from mcp.shared.exceptions import McpError
from mcp.types import (
    INVALID_PARAMS,
    Completion,
    CompletionArgument,
    CompletionContext,
    ErrorData,
    PromptMessage,
    PromptReference,
    TextContent,
)
from pydantic import PrivateAttr

from unittests_mcp.infrastructure.trace_decorator import traced
from unittests_mcp.prompts import ArgumentSchema, PromptDefinition
from unittests_mcp.prompts.errors import NotFoundError, PromptServerError
from unittests_mcp.prompts.handlers import (
    COMPLETION_SCAN_LIMIT,
    MAX_COMPLETION_RESULTS,
    complete,
    invoke,
)
from unittests_mcp.prompts.registry import PromptRegistry, describe_argument

# ---------------------------------------------------------------------------
# Traced handlers
# ---------------------------------------------------------------------------


@traced(span_name="mcp.prompt.get", handler_type="prompt", ignore=("registry",))
async def get_prompt_messages(
    registry: PromptRegistry,
    name: str,
    arguments: Mapping[str, Any],
) -> list[PromptMessage]:
    """Validate and render a prompt, converting the result to MCP messages."""
    try:
        messages = invoke(registry, name, arguments)
    except PromptServerError as e:
        logger.info(f"Prompt {name!r} rejected: {e}")
        raise PromptError(str(e)) from e

    return [
        PromptMessage(
            role=message.role,
            content=TextContent(type="text", text=message.text),
        )
        for message in messages
    ]


@traced(span_name="mcp.completion.complete", handler_type="completion", ignore=("registry",))
async def complete_argument(
    registry: PromptRegistry,
    prompt_name: str,
    argument_name: str,
    partial_value: str,
    sibling_values: Mapping[str, str],
    max_results: int = MAX_COMPLETION_RESULTS,
) -> Completion:
    """Run the argument's completion provider and build an MCP Completion.

    ``total`` counts every candidate the provider produced; it is left unset
    when the provider reaches COMPLETION_SCAN_LIMIT and the count is unknown.
    """
    values = complete(
        registry,
        prompt_name,
        argument_name,
        partial_value,
        sibling_values,
        max_results=COMPLETION_SCAN_LIMIT,
    )
    total = len(values) if len(values) < COMPLETION_SCAN_LIMIT else None
    return Completion(
        values=values[:max_results],
        total=total,
        hasMore=len(values) > max_results,
    )


# ---------------------------------------------------------------------------
# MCP Prompt
# ---------------------------------------------------------------------------


def to_prompt_argument(argument: ArgumentSchema) -> PromptArgument:
    """Describe an argument schema as an MCP prompt argument.

    MCP prompt arguments have no enum field, so allowed values are folded
    into the description.
    """
    descriptor = describe_argument(argument)
    description = descriptor.description
    if descriptor.allowed_values:
        allowed = ", ".join(descriptor.allowed_values)
        description = f"{description} One of: {allowed}.".strip()
    return PromptArgument(
        name=descriptor.name,
        description=description or None,
        required=descriptor.required,
    )


class RegistryPrompt(Prompt):
    """MCP prompt backed by a PromptDefinition in a PromptRegistry."""

    _registry: PromptRegistry = PrivateAttr()
    _definition_name: str = PrivateAttr()

    @classmethod
    def from_definition(
        cls,
        registry: PromptRegistry,
        definition: PromptDefinition,
    ) -> RegistryPrompt:
        prompt = cls(
            name=definition.name,
            title=definition.title,
            description=definition.description,
            arguments=[to_prompt_argument(a) for a in definition.arguments],
            tags=set(definition.tags),
        )
        prompt._registry = registry
        prompt._definition_name = definition.name
        return prompt

    async def render(
        self,
        arguments: dict[str, Any] | None = None,
    ) -> list[PromptMessage]:
        return await get_prompt_messages(
            self._registry,
            self._definition_name,
            arguments or {},
        )


# ---------------------------------------------------------------------------
# MCP Completion
# ---------------------------------------------------------------------------


def create_completion_handler(
    registry: PromptRegistry,
    max_results: int = MAX_COMPLETION_RESULTS,
):
    """Build the completion/complete handler for the low-level MCP server."""

    async def handle_completion(
        ref: Any,
        argument: CompletionArgument,
        context: CompletionContext | None,
    ) -> Completion | None:
        # Resource templates have no completion providers here.
        if not isinstance(ref, PromptReference):
            return None

        sibling_values = dict(context.arguments or {}) if context else {}
        try:
            return await complete_argument(
                registry,
                ref.name,
                argument.name,
                argument.value,
                sibling_values,
                max_results=max_results,
            )
        except NotFoundError as e:
            raise McpError(ErrorData(code=INVALID_PARAMS, message=str(e))) from e

    return handle_completion


def add_registry_prompts(
    server: FastMCP,
    registry: PromptRegistry,
    max_results: int = MAX_COMPLETION_RESULTS,
) -> None:
    """Register all prompts and the argument completion handler on ``server``."""
    for definition in registry.definitions():
        server.add_prompt(RegistryPrompt.from_definition(registry, definition))

    # FastMCP has no public completion hook; register on the low-level server.
    server._mcp_server.completion()(create_completion_handler(registry, max_results))
