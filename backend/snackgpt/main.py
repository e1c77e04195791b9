"""
SnackGPT MCP Server - FastAPI Backend
Main application entry point
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .agents import ElizaAgent
from .config import Settings, settings as default_settings
from .errors import JsonRpcErrorCode, LLMClientError
from .logger import get_logger
from .routers import mcp_router
from .services.mcp_handler import MCPHandler
from .services.openai_client import OpenAIClient
from .services.recipe_generator import RecipeGenerator
from .utils import iso_timestamp

logger = get_logger(__name__)

SERVICE_NAME = "snackgpt-mcp-server"


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)
    return JSONResponse(
        status_code=404,
        content={
            "error": "Not Found",
            "message": f"Route {request.url.path} not found",
            "timestamp": iso_timestamp(),
        },
    )


async def llm_error_handler(request: Request, exc: LLMClientError):
    """Last-resort mapping for chat-completion failures that escape a route"""
    logger.error(f"Unhandled AI service error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=exc.http_status,
        content={
            "error": {
                "code": int(JsonRpcErrorCode.INTERNAL_ERROR),
                "message": exc.public_message,
                "data": str(exc),
                "timestamp": iso_timestamp(),
            }
        },
    )


def create_app(
    settings: Optional[Settings] = None,
    llm_client: Optional[OpenAIClient] = None,
) -> FastAPI:
    """Wire client, agent, tool and dispatcher into a FastAPI app"""
    settings = settings or default_settings
    llm_client = llm_client or OpenAIClient(settings.llm_config())

    agent = ElizaAgent(llm_client)
    recipe_generator = RecipeGenerator(agent)
    mcp_handler = MCPHandler(settings, agent, recipe_generator)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"SnackGPT MCP Server running on port {settings.PORT}")
        yield
        await llm_client.close()

    app = FastAPI(
        title="SnackGPT MCP Server",
        description="Recipe suggestions from ingredients, mood and weather over MCP",
        version=settings.MCP_SERVER_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.mcp_handler = mcp_handler

    app.add_middleware(GZipMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.CORS_ORIGIN],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(LLMClientError, llm_error_handler)

    app.include_router(mcp_router)

    @app.get("/health")
    async def health():
        """Health check for monitoring"""
        return {
            "status": "healthy",
            "timestamp": iso_timestamp(),
            "service": SERVICE_NAME,
            "version": settings.MCP_SERVER_VERSION,
        }

    return app


app = create_app()


# Run with: uvicorn snackgpt.main:app --app-dir backend --port 3001
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "snackgpt.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
    )
