"""Shared test fixtures."""

from __future__ import annotations

import pytest

from unittests_mcp.prompts import Message, PromptDefinition, StringArgument, user_message
from unittests_mcp.prompts.catalogue import build_registry
from unittests_mcp.prompts.registry import PromptRegistry


@pytest.fixture
def registry() -> PromptRegistry:
    """The full, frozen prompt catalogue."""
    return build_registry()


def _echo(arguments) -> list[Message]:
    return [user_message(f"echo {arguments['value']}")]


@pytest.fixture
def echo_definition() -> PromptDefinition:
    return PromptDefinition(
        name="echo",
        title="Echo",
        description="Echoes its argument.",
        arguments=(StringArgument(name="value", description="Text to echo."),),
        render=_echo,
    )
