"""MCP server speaking JSON-RPC over server-sent events."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import signal
import uuid
from typing import Any, Callable

from aiohttp import web

from .calculator import Calculator, ToolError

logger = logging.getLogger(__name__)

SSE_PATH = "/sse"
POST_PATH = "/message"
HOST = "localhost"
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601


def _error(request_id: Any, code: int, message: str) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}}


def _dispatch(service: Any, message: Any) -> dict[str, Any] | None:
    if not isinstance(message, dict):
        return _error(None, INVALID_REQUEST, "invalid request")
    method = message.get("method")
    if method is None and ("result" in message or "error" in message):
        return None
    if not isinstance(method, str):
        return _error(message.get("id"), INVALID_REQUEST, "invalid request")
    if "id" not in message:
        return None

    request_id = message["id"]
    params = message.get("params") or {}
    try:
        if method == "initialize":
            result = service.get_info()
        elif method == "ping":
            result = {}
        elif method == "tools/list":
            result = {"tools": service.list_tools()}
        elif method == "tools/call":
            if not isinstance(params, dict) or not isinstance(params.get("name"), str):
                raise ToolError("missing tool name")
            result = service.call_tool(params["name"], params.get("arguments"))
        else:
            return _error(request_id, METHOD_NOT_FOUND, f"method not found: {method}")
    except ToolError as exc:
        return _error(request_id, exc.code, exc.message)
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def _event(name: str, data: str) -> bytes:
    return f"event: {name}\ndata: {data}\n\n".encode()


class McpServer:
    """Serves an MCP service to clients connected over SSE."""

    def __init__(self, service_factory: Callable[[], Any] = Calculator) -> None:
        self._service_factory = service_factory
        self._service = service_factory()
        self._sessions: dict[str, tuple[Any, asyncio.Queue]] = {}

    def handle_message(self, message: Any) -> dict[str, Any] | None:
        """Answer one JSON-RPC message; notifications give ``None``."""
        return _dispatch(self._service, message)

    def make_app(self) -> web.Application:
        """Build the web application with the SSE and message endpoints."""
        app = web.Application()
        app.router.add_get(SSE_PATH, self._sse)
        app.router.add_post(POST_PATH, self._post)
        app.on_shutdown.append(self._close_sessions)
        return app

    async def start(self, port: int) -> None:
        """Serve on ``localhost:port`` until interrupted."""
        logging.basicConfig(level=os.environ.get("MCPPLAY_LOG", "DEBUG").upper())
        runner = web.AppRunner(self.make_app())
        await runner.setup()
        await web.TCPSite(runner, HOST, port).start()

        stop = asyncio.Event()
        try:
            asyncio.get_running_loop().add_signal_handler(signal.SIGINT, stop.set)
        except (NotImplementedError, RuntimeError):
            pass
        try:
            await stop.wait()
        finally:
            logger.info("exiting server")
            await runner.cleanup()

    async def _sse(self, request: web.Request) -> web.StreamResponse:
        session_id = uuid.uuid4().hex
        queue: asyncio.Queue = asyncio.Queue()
        self._sessions[session_id] = (self._service_factory(), queue)
        response = web.StreamResponse(
            headers={"Content-Type": "text/event-stream", "Cache-Control": "no-cache"}
        )
        await response.prepare(request)
        try:
            await response.write(_event("endpoint", f"{POST_PATH}?sessionId={session_id}"))
            while (payload := await queue.get()) is not None:
                await response.write(_event("message", json.dumps(payload)))
        except ConnectionResetError:
            logger.debug("session %s disconnected", session_id)
        finally:
            self._sessions.pop(session_id, None)
        return response

    async def _post(self, request: web.Request) -> web.Response:
        session = self._sessions.get(request.query.get("sessionId", ""))
        if session is None:
            return web.Response(status=404, text="session not found")
        try:
            message = await request.json()
        except ValueError:
            return web.Response(status=400, text="invalid json")
        service, queue = session
        reply = _dispatch(service, message)
        if reply is not None:
            await queue.put(reply)
        return web.Response(status=202)

    async def _close_sessions(self, app: web.Application) -> None:
        for _, queue in list(self._sessions.values()):
            queue.put_nowait(None)