"""
Recipe Generator - suggest_dish tool with a deterministic fallback
"""
import random
from typing import Optional

from ..agents.eliza_agent import ElizaAgent
from ..logger import get_logger
from ..schemas.recipe import GenerationResult, Recipe, RecipeRequest

logger = get_logger(__name__)

MOOD_WORDS = {
    "happy": ["Joyful", "Happy", "Sunny", "Cheerful"],
    "tired": ["Cozy", "Comfort", "Lazy", "Relaxing"],
    "sad": ["Comfort", "Warm", "Hug", "Cozy"],
    "excited": ["Explosive", "Dynamic", "Energetic", "Vibrant"],
    "stressed": ["Calming", "Peaceful", "Zen", "Tranquil"],
}

WEATHER_WORDS = {
    "sunny": ["Bright", "Sunny", "Light", "Fresh"],
    "rainy": ["Cozy", "Warm", "Comfort", "Indoor"],
    "cloudy": ["Balanced", "Mild", "Gentle", "Soft"],
    "snowy": ["Hearty", "Warm", "Comfort", "Winter"],
    "windy": ["Quick", "Fast", "Dynamic", "Energetic"],
}

STYLE_DESCRIPTIONS = {
    "shakespeare": (
        "Verily, this dish doth bring forth joy and comfort to thy weary soul. "
        "'Tis a masterpiece worthy of the finest banquet halls."
    ),
    "gordon_ramsay": (
        "Bloody brilliant! This dish is absolutely stunning - proper comfort food "
        "that'll make you forget all your troubles."
    ),
    "five_year_old": (
        "This is the BEST food ever! It's super yummy and makes you feel so happy! "
        "You're going to love it!"
    ),
}


def generate_dish_name(
    ingredients: list[str],
    mood: str,
    weather: str,
    rng: random.Random = random,
) -> str:
    mood_word = rng.choice(MOOD_WORDS[mood]) if mood in MOOD_WORDS else "Delicious"
    weather_word = rng.choice(WEATHER_WORDS[weather]) if weather in WEATHER_WORDS else "Amazing"
    first = ingredients[0] if ingredients else ""
    ingredient_word = first[:1].upper() + first[1:] if first else "Special"
    return f"{mood_word} {weather_word} {ingredient_word} Delight"


def generate_instructions(ingredients: list[str]) -> str:
    steps = [
        f"Gather your ingredients: {', '.join(ingredients)}",
        "Prepare your cooking space and equipment",
        "Follow the recipe steps carefully",
        "Taste and adjust seasoning as needed",
        "Serve and enjoy your creation!",
    ]
    return "\n".join(f"Step {i}. {step}" for i, step in enumerate(steps, start=1))


def generate_style_description(style: str) -> str:
    return STYLE_DESCRIPTIONS.get(style, STYLE_DESCRIPTIONS["five_year_old"])


def generate_fallback_recipe(
    ingredients: list[str],
    mood: str,
    weather: str,
    style: str,
    rng: random.Random = random,
) -> Recipe:
    """Network-free recipe used when the agent pipeline fails"""
    return Recipe(
        dish_name=generate_dish_name(ingredients, mood, weather, rng),
        ingredients=list(ingredients),
        instructions=generate_instructions(ingredients),
        style_description=generate_style_description(style),
        eliza_enhanced=False,
        fallback=True,
    )


class RecipeGenerator:
    """
    suggest_dish tool: run the Eliza pipeline, fall back to a templated recipe on failure.
    """

    def __init__(self, agent: ElizaAgent, rng: Optional[random.Random] = None):
        self.agent = agent
        self.rng = rng or random.Random()

    async def suggest_dish(self, request: RecipeRequest) -> GenerationResult:
        logger.info(
            f"Generating dish suggestion: ingredients={request.ingredients} "
            f"mood={request.mood} weather={request.weather} style={request.style}"
        )

        try:
            recipe = await self.agent.process_request("suggest_dish", request.model_dump())
            logger.info(f"Recipe generated: {recipe.get('dish_name')}")
            return GenerationResult(recipe=recipe)

        except Exception as e:
            logger.exception(f"Recipe generation failed, serving fallback recipe: {e}")
            fallback = generate_fallback_recipe(
                request.ingredients, request.mood, request.weather, request.style, self.rng
            )
            return GenerationResult(
                recipe=fallback.model_dump(exclude_none=True),
                fallback=True,
                error=str(e),
            )
