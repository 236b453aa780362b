"""MCP binding: exposes the operation catalog and dispatcher as MCP tools."""

from __future__ import annotations

import logging
from typing import Dict, List

from mcp import types
from mcp.server.lowlevel import Server
from mcp.shared.exceptions import McpError

from linear_mcp.core.catalog import OperationDescriptor
from linear_mcp.core.dispatcher import Dispatcher
from linear_mcp.core.errors import (
    InvalidArgumentsError,
    OperationError,
    UnknownOperationError,
    UpstreamError,
)

SERVER_NAME = "linear-server"
SERVER_VERSION = "0.1.0"

ERROR_CODES: Dict[str, int] = {
    UnknownOperationError.kind: types.METHOD_NOT_FOUND,
    InvalidArgumentsError.kind: types.INVALID_PARAMS,
    UpstreamError.kind: types.INTERNAL_ERROR,
}

log = logging.getLogger("linear_mcp.server")


def to_tool(descriptor: OperationDescriptor) -> types.Tool:
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema,
    )


def to_mcp_error(error: OperationError) -> McpError:
    code = ERROR_CODES.get(error.kind, types.INTERNAL_ERROR)
    return McpError(
        types.ErrorData(code=code, message=error.message, data={"kind": error.kind})
    )


def build_server(dispatcher: Dispatcher) -> Server:
    """
    Build a low-level MCP server bound to ``dispatcher``.

    tools/call is registered directly rather than through ``Server.call_tool``
    so failures reach the caller as JSON-RPC errors (unknown tools as
    "method not found") instead of tool results flagged ``isError``.
    """
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        log.info("Handling tools/list request")
        return [to_tool(op) for op in dispatcher.list_operations()]

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        name = req.params.name
        log.info("Handling tools/call request for tool: %s", name)
        result = await dispatcher.invoke(name, req.params.arguments)
        if not result.ok:
            raise to_mcp_error(result.error)
        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=result.text or "")],
                isError=False,
            )
        )

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


__all__ = ["SERVER_NAME", "SERVER_VERSION", "build_server", "to_tool", "to_mcp_error"]
