"""An MCP calculator server over server-sent events, with a small command line."""

__version__ = "0.1.0"