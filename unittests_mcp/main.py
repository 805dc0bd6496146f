"""Process entrypoint: serves the prompt registry over stdio or HTTP."""

import sys

import uvicorn
from loguru import logger

from unittests_mcp.config import settings
from unittests_mcp.servers.server_registry import McpServerRegistry

# stdout carries the stdio transport, so logs go to stderr only.
logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL)

registry = McpServerRegistry()
registry.initialize()
app = registry.get_server().http_app(stateless_http=True)


def main() -> None:
    if settings.TRANSPORT == "http":
        uvicorn.run(app, host=settings.HOST, port=settings.PORT)
    else:
        registry.get_server().run(transport="stdio")


if __name__ == "__main__":
    main()
