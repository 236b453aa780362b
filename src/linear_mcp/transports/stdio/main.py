from __future__ import annotations

import asyncio
import logging

from mcp.server.stdio import stdio_server

from linear_mcp.core.adapter import LinearAdapter
from linear_mcp.core.config import (
    MissingTokenError,
    create_client_from_env,
    load_env_config,
)
from linear_mcp.core.dispatcher import Dispatcher
from linear_mcp.core.errors import AuthenticationError
from linear_mcp.core.logging import setup_logging
from linear_mcp.server import build_server

log = logging.getLogger("linear_mcp.transports.stdio")


async def serve(dispatcher: Dispatcher) -> None:
    """Serve MCP requests over stdin/stdout until the peer closes the channel."""
    server = build_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        log.info("Linear MCP server running on stdio")
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )


async def main() -> None:
    setup_logging()
    try:
        config = load_env_config(use_dotenv=True)
    except MissingTokenError as exc:
        log.error("Failed to start Linear MCP server: %s", exc)
        raise SystemExit(1) from exc
    setup_logging(config.log_level)

    client = create_client_from_env(config)
    adapter = LinearAdapter(client)
    try:
        # Authenticate once; no request is served without a session.
        try:
            await adapter.authenticate()
        except AuthenticationError as exc:
            log.error("%s", exc.message)
            raise SystemExit(1) from exc

        await serve(Dispatcher(adapter))
    finally:
        await client.aclose()


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Interrupted; Linear MCP server stopped")


if __name__ == "__main__":
    run()
