from .mcp import router as mcp_router
