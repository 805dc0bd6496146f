"""
Prompt registry.

Holds every PromptDefinition keyed by name, in registration order. The
registry is writable only until ``freeze()`` is called at the end of
startup; afterwards it is read-only and safe for concurrent lookups.
"""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger

from unittests_mcp.prompts import ArgumentSchema, PromptDefinition
from unittests_mcp.prompts.errors import (
    DuplicateNameError,
    NotFoundError,
    RegistryFrozenError,
)
from unittests_mcp.schemas.prompts import ArgumentDescriptor, PromptSummary


def describe_argument(argument: ArgumentSchema) -> ArgumentDescriptor:
    return ArgumentDescriptor(
        name=argument.name,
        required=argument.required,
        description=argument.description,
        allowed_values=list(getattr(argument, "allowed_values", ())) or None,
    )


class PromptRegistry:
    """Write-once collection of prompt definitions."""

    def __init__(self) -> None:
        self._prompts: dict[str, PromptDefinition] = {}
        self._frozen = False

    # ------------------------------------------------------------------
    # Initialization phase
    # ------------------------------------------------------------------

    def register(self, definition: PromptDefinition) -> PromptDefinition:
        """Register a prompt definition. Only valid before freeze()."""
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register {definition.name!r}: registry is frozen."
            )
        if definition.name in self._prompts:
            raise DuplicateNameError(definition.name)
        self._prompts[definition.name] = definition
        logger.debug(f"Registered prompt {definition.name!r}.")
        return definition

    def freeze(self) -> None:
        self._frozen = True
        logger.info(f"Prompt registry frozen with {len(self._prompts)} prompt(s).")

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> PromptDefinition:
        """Return the definition registered under exactly ``name``."""
        try:
            return self._prompts[name]
        except KeyError:
            raise NotFoundError(name) from None

    def definitions(self) -> list[PromptDefinition]:
        return list(self._prompts.values())

    def list_prompts(self) -> list[PromptSummary]:
        """Describe every registered prompt in registration order."""
        return [
            PromptSummary(
                name=definition.name,
                title=definition.title,
                description=definition.description,
                arguments=[describe_argument(a) for a in definition.arguments],
            )
            for definition in self._prompts.values()
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._prompts

    def __iter__(self) -> Iterator[str]:
        return iter(self._prompts)

    def __len__(self) -> int:
        return len(self._prompts)
