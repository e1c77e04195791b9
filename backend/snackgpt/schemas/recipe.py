"""
Recipe Schemas - request, context analysis and recipe shapes
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field, StrictStr

Mood = Literal["happy", "tired", "sad", "excited", "stressed"]
Weather = Literal["sunny", "rainy", "cloudy", "snowy", "windy"]
Style = Literal["shakespeare", "gordon_ramsay", "five_year_old"]

MOODS: tuple[str, ...] = Mood.__args__
WEATHERS: tuple[str, ...] = Weather.__args__
STYLES: tuple[str, ...] = Style.__args__

DEFAULT_MOOD = "happy"
DEFAULT_WEATHER = "sunny"
DEFAULT_STYLE = "five_year_old"


# ============================================================================
# Request
# ============================================================================

class RecipeRequest(BaseModel):
    ingredients: list[str] = Field(min_length=1)
    mood: Mood = DEFAULT_MOOD
    weather: Weather = DEFAULT_WEATHER
    style: Style = DEFAULT_STYLE


# ============================================================================
# Context analysis
# ============================================================================

class ContextAnalysis(BaseModel):
    food_type: StrictStr
    mood_influence: StrictStr
    weather_adaptation: StrictStr
    style_recommendation: StrictStr

    @classmethod
    def default(cls, style: str) -> "ContextAnalysis":
        return cls(
            food_type="balanced",
            mood_influence="comfort",
            weather_adaptation="indoor",
            style_recommendation=style,
        )


class ContextAnalysisResult(BaseModel):
    analysis: ContextAnalysis
    fallback_used: bool = False
    error: Optional[str] = None


# ============================================================================
# Recipe
# ============================================================================

class RecipeContext(BaseModel):
    mood_adapted: str
    weather_considered: str
    style_applied: str


class Recipe(BaseModel):
    dish_name: str
    ingredients: list[str] = Field(default_factory=list)
    instructions: str
    style_description: str
    eliza_enhanced: bool = False
    context_analysis: Optional[RecipeContext] = None
    fallback: Optional[bool] = None


class RecipeValidation(BaseModel):
    is_valid: bool
    missing_fields: list[str] = Field(default_factory=list)
    has_ingredients: bool = False


class GenerationResult(BaseModel):
    """Outcome of the suggest_dish tool; `recipe` is always populated."""

    recipe: dict
    fallback: bool = False
    error: Optional[str] = None
