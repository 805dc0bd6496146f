"""Builds the process-wide prompt catalogue."""

from loguru import logger

from unittests_mcp.prompts import change_review, unit_tests
from unittests_mcp.prompts.registry import PromptRegistry


def build_registry() -> PromptRegistry:
    """Register every prompt in catalogue order and freeze the registry.

    A duplicate name raises DuplicateNameError and aborts startup.
    """
    registry = PromptRegistry()
    unit_tests.register(registry)
    change_review.register(registry)
    registry.freeze()
    logger.info(f"Prompt catalogue: {list(registry)}")
    return registry
