"""
Prompt definitions.

Each prompt declares an ordered argument schema and a pure renderer. Prompt
modules expose a ``register(registry)`` function; the registry itself is
built once at startup by ``unittests_mcp.prompts.catalogue.build_registry``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import ClassVar, Union

from unittests_mcp.prompts.errors import InvalidValueError

USER_ROLE = "user"

# (partial value, already-bound sibling values) -> ordered candidates
CompletionProvider = Callable[[str, Mapping[str, str]], Iterable[str]]


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Message:
    """A role-tagged text message produced by a renderer."""

    text: str
    role: str = USER_ROLE

    @property
    def content(self) -> dict[str, str]:
        return {"type": "text", "text": self.text}


def user_message(text: str) -> Message:
    return Message(text=text, role=USER_ROLE)


# ---------------------------------------------------------------------------
# Argument schemas
# ---------------------------------------------------------------------------


def _require_string(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidValueError(name, value)
    return value


@dataclass(frozen=True, slots=True)
class StringArgument:
    """A required free-form string argument."""

    kind: ClassVar[str] = "string"
    required: ClassVar[bool] = True

    name: str
    description: str = ""
    completer: CompletionProvider | None = None

    def validate(self, value: object) -> str:
        return _require_string(self.name, value)


@dataclass(frozen=True, slots=True)
class OptionalStringArgument:
    """A free-form string argument that may be left out."""

    kind: ClassVar[str] = "optional-string"
    required: ClassVar[bool] = False

    name: str
    description: str = ""
    completer: CompletionProvider | None = None

    def validate(self, value: object) -> str:
        return _require_string(self.name, value)


@dataclass(frozen=True, slots=True)
class EnumArgument:
    """A required argument restricted to a fixed, ordered set of strings."""

    kind: ClassVar[str] = "enum"
    required: ClassVar[bool] = True

    name: str
    allowed_values: tuple[str, ...]
    description: str = ""
    completer: CompletionProvider | None = None

    def __post_init__(self) -> None:
        if not self.allowed_values:
            raise ValueError(f"Enum argument {self.name!r} has no allowed values")

    def validate(self, value: object) -> str:
        # Exact, case-sensitive membership
        if value not in self.allowed_values:
            raise InvalidValueError(self.name, value, self.allowed_values)
        return value  # type: ignore[return-value]


ArgumentSchema = Union[StringArgument, OptionalStringArgument, EnumArgument]

# Resolved mapping handed to renderers: absent optional arguments are None.
ResolvedArguments = Mapping[str, Union[str, None]]
Renderer = Callable[[ResolvedArguments], list[Message]]


# ---------------------------------------------------------------------------
# Prompt definition
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PromptDefinition:
    """A named prompt: metadata, ordered argument schema and renderer."""

    # Identity
    name: str
    title: str
    description: str

    # Content
    render: Renderer
    arguments: tuple[ArgumentSchema, ...] = ()

    # MCP metadata
    tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for argument in self.arguments:
            if argument.name in seen:
                raise ValueError(
                    f"Duplicate argument {argument.name!r} in prompt {self.name!r}"
                )
            seen.add(argument.name)

    def argument(self, name: str) -> ArgumentSchema | None:
        for argument in self.arguments:
            if argument.name == name:
                return argument
        return None


# ---------------------------------------------------------------------------
# Template substitution
# ---------------------------------------------------------------------------

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def render_template(template: str, **values: str) -> str:
    """Substitute {{variable}} placeholders in a single pass.

    Substituted values are never rescanned, so argument text containing
    braces is inserted verbatim.
    """

    def _replace(match: re.Match[str]) -> str:
        var_name = match.group(1)
        if var_name not in values:
            raise ValueError(f"No value for template variable {var_name!r}")
        return values[var_name]

    return _PLACEHOLDER.sub(_replace, template)
