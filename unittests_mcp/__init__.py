"""MCP server exposing unit test generation and change review prompts."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("unittests-mcp")
except PackageNotFoundError:
    __version__ = "0.0.0"
