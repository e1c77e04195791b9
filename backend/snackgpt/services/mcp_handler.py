"""
MCP Handler - JSON-RPC 2.0 validation and dispatch
"""
import json
import math
import time
from typing import Any, Awaitable, Callable, Optional

from ..agents.eliza_agent import ElizaAgent
from ..config import Settings
from ..errors import (
    InvalidRequestError,
    JsonRpcParseError,
    MCPError,
    MethodNotFoundError,
    ToolNotFoundError,
)
from ..logger import get_logger
from ..schemas.recipe import MOODS, STYLES, WEATHERS
from ..utils import iso_timestamp
from .recipe_generator import RecipeGenerator
from .validation import build_recipe_request, validate_envelope, validate_method_params

logger = get_logger(__name__)

SERVER_DESCRIPTION = "AI-powered recipe generator with Eliza AI agent for context analysis"

SUGGEST_DISH_TOOL = {
    "name": "suggest_dish",
    "description": (
        "Generates a creative dish based on user ingredients, mood, and weather using "
        "Eliza AI agent for context analysis and enhanced prompt engineering."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "ingredients": {
                "type": "array",
                "items": {"type": "string"},
                "description": "List of available ingredients",
                "minItems": 1,
            },
            "mood": {
                "type": "string",
                "enum": list(MOODS),
                "description": "User's current mood",
                "default": "happy",
            },
            "weather": {
                "type": "string",
                "enum": list(WEATHERS),
                "description": "Current weather conditions",
                "default": "sunny",
            },
            "style": {
                "type": "string",
                "enum": list(STYLES),
                "description": "Cooking style voice",
                "default": "five_year_old",
            },
        },
        "required": ["ingredients"],
    },
    "outputSchema": {
        "type": "object",
        "properties": {
            "dish_name": {"type": "string", "description": "Creative name for the generated dish"},
            "ingredients": {
                "type": "array",
                "items": {"type": "string"},
                "description": "List of ingredients for the recipe",
            },
            "instructions": {"type": "string", "description": "Step-by-step cooking instructions"},
            "style_description": {
                "type": "string",
                "description": "Fun description in the specified style voice",
            },
            "eliza_enhanced": {
                "type": "boolean",
                "description": "Whether the recipe was enhanced by Eliza agent",
            },
            "context_analysis": {
                "type": "object",
                "properties": {
                    "mood_adapted": {"type": "string"},
                    "weather_considered": {"type": "string"},
                    "style_applied": {"type": "string"},
                },
                "description": "Eliza agent's context analysis",
            },
        },
        "required": ["dish_name", "ingredients", "instructions", "style_description"],
    },
}

SERVER_CAPABILITIES = {
    "tools": {
        "listChanged": False,
        "tools": [SUGGEST_DISH_TOOL],
    }
}


def reject_constant(name: str):
    raise ValueError(f"Invalid JSON token: {name}")


def parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def jsonrpc_result(request_id: Any, result: Any) -> dict:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def jsonrpc_error(request_id: Any, error: MCPError) -> dict:
    return {"jsonrpc": "2.0", "id": request_id, "error": error.to_error()}


class MCPHandler:
    """
    Validates JSON-RPC envelopes and dispatches initialize, $/invoke and $/ping.

    Every outcome, success or failure, is returned as `(http_status, envelope)`.
    """

    def __init__(self, settings: Settings, agent: ElizaAgent, recipe_generator: RecipeGenerator):
        self.settings = settings
        self.agent = agent
        self.recipe_generator = recipe_generator
        self.agent_info: Optional[dict] = None
        self.started_at = time.monotonic()
        self.handlers: dict[str, Callable[[Optional[dict]], Awaitable[Any]]] = {
            "initialize": self.initialize,
            "$/invoke": self.invoke,
            "$/ping": self.ping,
        }

    async def handle_payload(self, raw: bytes) -> tuple[int, dict]:
        try:
            body = json.loads(raw, parse_constant=reject_constant, parse_float=parse_finite_float)
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError and non-finite numbers
            logger.warning(f"Unparseable MCP request body: {e}")
            error = JsonRpcParseError(data=str(e))
            return error.http_status, jsonrpc_error(None, error)
        return await self.dispatch(body)

    async def dispatch(self, body: Any) -> tuple[int, dict]:
        start = time.perf_counter()
        request_id = body.get("id") if isinstance(body, dict) else None

        try:
            validation_error = validate_envelope(body)
            if validation_error:
                raise InvalidRequestError(data=validation_error)

            method = body["method"]
            params = body.get("params")
            handler = self.handlers.get(method)
            if handler is None:
                raise MethodNotFoundError(data={"method": method})

            validation_error = validate_method_params(method, params)
            if validation_error:
                raise InvalidRequestError(data=validation_error)

        except MCPError as e:
            logger.warning(f"Invalid MCP request: {e.data}")
            return e.http_status, jsonrpc_error(request_id, e)

        try:
            result = await handler(params)
        except MCPError as e:
            logger.warning(f"MCP {method} rejected: {e.data}")
            return e.http_status, jsonrpc_error(request_id, e)
        except Exception as e:
            logger.exception(f"MCP handler error in {method}")
            error = MCPError(data=str(e))
            return error.http_status, jsonrpc_error(request_id, error)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"MCP {method} completed in {elapsed_ms:.0f}ms")
        return 200, jsonrpc_result(request_id, result)

    # ------------------------------------------------------------------
    # Methods
    # ------------------------------------------------------------------

    async def initialize(self, params: Optional[dict]) -> dict:
        params = params or {}
        logger.info(
            f"MCP initialize: protocolVersion={params.get('protocolVersion')} "
            f"clientInfo={params.get('clientInfo')}"
        )

        if self.agent_info is None:
            try:
                self.agent_info = await self.agent.initialize()
                logger.info(f"Eliza Agent initialized: {self.agent_info}")
            except Exception:
                # Serve without the agent; serverInfo reports it inactive
                logger.exception("Failed to initialize Eliza agent")

        if self.agent_info is not None:
            eliza_agent = {**self.agent_info, "status": "active"}
        else:
            eliza_agent = {"status": "inactive", "reason": "Failed to initialize"}

        return {
            "protocolVersion": self.settings.MCP_VERSION,
            "capabilities": SERVER_CAPABILITIES,
            "serverInfo": {
                "name": self.settings.MCP_SERVER_NAME,
                "version": self.settings.MCP_SERVER_VERSION,
                "description": SERVER_DESCRIPTION,
                "eliza_agent": eliza_agent,
            },
        }

    async def invoke(self, params: Optional[dict]) -> dict:
        name = params["name"]
        arguments = params["arguments"]
        logger.info(f"MCP tool invocation: {name}")

        if name != "suggest_dish":
            raise ToolNotFoundError(data={"tool": name}, message=f"Unknown tool: {name}")

        outcome = await self.recipe_generator.suggest_dish(build_recipe_request(arguments))
        recipe = outcome.recipe
        logger.info(
            f"Recipe ready: dish_name={recipe.get('dish_name')!r} "
            f"ingredients_count={len(recipe.get('ingredients') or [])} "
            f"eliza_enhanced={bool(recipe.get('eliza_enhanced'))} fallback={outcome.fallback}"
        )
        if outcome.error:
            logger.warning(f"suggest_dish served the fallback recipe: {outcome.error}")
        return recipe

    async def ping(self, params: Optional[dict]) -> dict:
        return {
            "timestamp": iso_timestamp(),
            "eliza_status": "active" if self.agent.initialized else "inactive",
            "server_uptime": round(time.monotonic() - self.started_at, 3),
            "version": self.settings.MCP_SERVER_VERSION,
        }


