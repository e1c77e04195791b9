"""
MCP API Routes - JSON-RPC endpoint and SSE channel
"""
import asyncio
import json
from typing import AsyncIterator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, StreamingResponse

from ..logger import get_logger
from ..services.mcp_handler import MCPHandler
from ..utils import iso_timestamp

logger = get_logger(__name__)

router = APIRouter(tags=["mcp"])

SSE_POLL_SECONDS = 1.0


def get_mcp_handler(request: Request) -> MCPHandler:
    return request.app.state.mcp_handler


@router.post("/mcp")
async def mcp_endpoint(request: Request, handler: MCPHandler = Depends(get_mcp_handler)):
    """
    JSON-RPC 2.0 entry point. Methods: initialize, $/invoke, $/ping.

    The response body is always a JSON-RPC envelope.
    """
    raw = await request.body()
    status_code, envelope = await handler.handle_payload(raw)
    return JSONResponse(status_code=status_code, content=envelope)


async def connection_events(request: Request) -> AsyncIterator[str]:
    """Announce the connection, then stay idle until the client goes away"""
    event = {
        "type": "connected",
        "message": "SSE connection established",
        "timestamp": iso_timestamp(),
    }
    yield f"data: {json.dumps(event)}\n\n"

    while not await request.is_disconnected():
        await asyncio.sleep(SSE_POLL_SECONDS)
    logger.info("SSE connection closed")


@router.get("/mcp")
async def mcp_events(request: Request):
    """Server-sent events channel for MCP clients"""
    return StreamingResponse(
        connection_events(request),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
