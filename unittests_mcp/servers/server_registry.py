"""
MCP Server Registry.

Builds the prompt registry once at startup and exposes it through a single
FastMCP instance together with argument completion.
"""

from loguru import logger
from fastmcp import FastMCP

from unittests_mcp import __version__
from unittests_mcp.config import settings
from unittests_mcp.infrastructure.observability import initialize_observability
from unittests_mcp.prompts.catalogue import build_registry
from unittests_mcp.prompts.registry import PromptRegistry
from unittests_mcp.servers.prompt_server import add_registry_prompts


class McpServerRegistry:
    def __init__(self) -> None:
        self.server = FastMCP(
            settings.SERVER_NAME,
            instructions=settings.SERVER_INSTRUCTIONS,
            version=__version__,
        )
        self.prompts: PromptRegistry | None = None
        self._is_initialized = False

    def initialize(self, prompts: PromptRegistry | None = None) -> None:
        """Build the prompt registry and register it on the server.

        Runs synchronously before any request is served. A duplicate prompt
        name propagates and aborts startup.
        """
        if self._is_initialized:
            return

        logger.info(f"Initializing MCP server {settings.SERVER_NAME!r} v{__version__}...")

        initialize_observability(
            service_name=settings.OTEL_SERVICE_NAME,
            enabled=settings.AGENT_OBSERVABILITY_ENABLED,
        )

        self.prompts = prompts if prompts is not None else build_registry()
        add_registry_prompts(
            self.server,
            self.prompts,
            max_results=settings.COMPLETION_MAX_RESULTS,
        )

        self._is_initialized = True

        logger.info(
            f"Server initialized with {len(self.prompts)} prompts: {list(self.prompts)}"
        )

    def get_server(self) -> FastMCP:
        return self.server
