"""
Request and recipe validation helpers
"""
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from ..schemas.mcp import InitializeParams, InvokeParams, JsonRpcRequest, SuggestDishArguments
from ..schemas.recipe import (
    DEFAULT_MOOD,
    DEFAULT_STYLE,
    DEFAULT_WEATHER,
    MOODS,
    STYLES,
    WEATHERS,
    RecipeRequest,
    RecipeValidation,
)

REQUIRED_RECIPE_FIELDS = ("dish_name", "ingredients", "instructions", "style_description")


def format_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into `loc: msg; loc: msg`"""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "value"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def _check(model: type[BaseModel], data: Any) -> Optional[str]:
    try:
        model.model_validate(data)
    except ValidationError as e:
        return format_validation_error(e)
    return None


# ============================================================================
# JSON-RPC / MCP
# ============================================================================

def validate_envelope(request: Any) -> Optional[str]:
    """Check the JSON-RPC 2.0 structure. Returns an error message or None."""
    if not isinstance(request, dict):
        return "Invalid JSON-RPC 2.0 request: request must be a JSON object"
    error = _check(JsonRpcRequest, request)
    if error:
        return f"Invalid JSON-RPC 2.0 request: {error}"
    return None


def validate_method_params(method: str, params: Optional[dict]) -> Optional[str]:
    """Check the params of a known method. Returns an error message or None."""
    if method == "initialize":
        if params is not None:
            error = _check(InitializeParams, params)
            if error:
                return f"Invalid initialize parameters: {error}"

    elif method == "$/invoke":
        if params is None:
            return "Missing parameters for $/invoke method"
        error = _check(InvokeParams, params)
        if error:
            return f"Invalid invoke parameters: {error}"

        if params["name"] == "suggest_dish":
            error = _check(SuggestDishArguments, params["arguments"])
            if error:
                return f"Invalid suggest_dish arguments: {error}"
            if not sanitize_ingredients(params["arguments"]["ingredients"]):
                return "Invalid suggest_dish arguments: ingredients must contain at least one non-blank item"

    elif method == "$/ping":
        # No parameters required for ping
        pass

    else:
        return f"Unknown method: {method}"

    return None


def validate_mcp_request(request: Any) -> Optional[str]:
    """Validate envelope, method name and params in one pass."""
    error = validate_envelope(request)
    if error:
        return error
    return validate_method_params(request["method"], request.get("params"))


# ============================================================================
# suggest_dish arguments
# ============================================================================

def sanitize_ingredients(ingredients: Any) -> list[str]:
    """Trim, lower-case and dedupe ingredients, keeping first-seen order."""
    if not isinstance(ingredients, list):
        return []

    cleaned = []
    for ingredient in ingredients:
        if not isinstance(ingredient, str):
            continue
        item = ingredient.strip().lower()
        if item and item not in cleaned:
            cleaned.append(item)
    return cleaned


def validate_mood(mood: Any) -> str:
    return mood if mood in MOODS else DEFAULT_MOOD


def validate_weather(weather: Any) -> str:
    return weather if weather in WEATHERS else DEFAULT_WEATHER


def validate_style(style: Any) -> str:
    return style if style in STYLES else DEFAULT_STYLE


def build_recipe_request(arguments: dict) -> RecipeRequest:
    """Normalize validated suggest_dish arguments into a RecipeRequest"""
    return RecipeRequest(
        ingredients=sanitize_ingredients(arguments.get("ingredients")),
        mood=validate_mood(arguments.get("mood")),
        weather=validate_weather(arguments.get("weather")),
        style=validate_style(arguments.get("style")),
    )


# ============================================================================
# Recipe
# ============================================================================

def validate_recipe(recipe: dict) -> RecipeValidation:
    """
    Check that a generated recipe carries the four required fields.

    `has_ingredients` is reported separately and does not affect `is_valid`.
    """
    missing = [field for field in REQUIRED_RECIPE_FIELDS if not recipe.get(field)]
    ingredients = recipe.get("ingredients")
    return RecipeValidation(
        is_valid=not missing,
        missing_fields=missing,
        has_ingredients=isinstance(ingredients, list) and len(ingredients) > 0,
    )
