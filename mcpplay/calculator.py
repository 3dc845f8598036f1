"""A small calculator service exposing two tools over MCP."""

from __future__ import annotations

from typing import Any

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
PROTOCOL_VERSION = "2024-11-05"
INVALID_PARAMS = -32602


class ToolError(Exception):
    """Raised when a tool call is malformed or cannot be carried out."""

    def __init__(self, message: str, code: int = INVALID_PARAMS) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


def _schema(title: str | None = None) -> dict[str, Any]:
    operand = {"type": "integer", "format": "int32"}
    schema: dict[str, Any] = {
        "type": "object",
        "properties": {
            "a": {**operand, "description": "the left hand side number"},
            "b": {**operand, "description": "the right hand side number"},
        },
        "required": ["a", "b"],
    }
    return schema if title is None else {"title": title, **schema}


def _int32(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ToolError(f"invalid type for `{field}`: expected i32")
    if not INT32_MIN <= value <= INT32_MAX:
        raise ToolError(f"invalid value for `{field}`: out of range for i32")
    return value


def _checked(result: int, operation: str) -> str:
    if not INT32_MIN <= result <= INT32_MAX:
        raise ToolError(f"attempt to {operation} with overflow")
    return str(result)


class Calculator:
    """Stateless service offering ``sum`` and ``sub`` tools."""

    _TOOLS = {
        "sum": ("Calculate the sum of two numbers", _schema("SumRequest")),
        "sub": ("Calculate the difference of two numbers", _schema()),
    }

    def sum(self, a: int, b: int) -> str:
        """Return the sum of two 32-bit integers as text."""
        return _checked(_int32(a, "a") + _int32(b, "b"), "add")

    def sub(self, a: int, b: int) -> str:
        """Return the difference of two 32-bit integers as text."""
        return _checked(_int32(a, "a") - _int32(b, "b"), "subtract")

    def get_info(self) -> dict[str, Any]:
        """Describe this server for the MCP ``initialize`` handshake."""
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": "mcpplay", "version": "0.1.0"},
            "instructions": "A simple calculator",
        }

    def list_tools(self) -> list[dict[str, Any]]:
        """Return the tool descriptors in MCP form."""
        return [
            {"name": name, "description": description, "inputSchema": schema}
            for name, (description, schema) in self._TOOLS.items()
        ]

    def call_tool(self, name: str, arguments: dict[str, Any] | None) -> dict[str, Any]:
        """Run the named tool and wrap its text result in an MCP call result."""
        if name not in self._TOOLS:
            raise ToolError(f"tool not found: {name}")
        args = arguments or {}
        if not isinstance(args, dict):
            raise ToolError("tool arguments must be an object")
        missing = next((f for f in ("a", "b") if f not in args), None)
        if missing:
            raise ToolError(f"missing field `{missing}`")
        text = getattr(self, name)(args["a"], args["b"])
        return {"content": [{"type": "text", "text": text}], "isError": False}