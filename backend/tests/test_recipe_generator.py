"""Unit tests for the suggest_dish tool and its fallback recipe."""
import random
import re
from unittest.mock import AsyncMock, MagicMock

import pytest

from snackgpt.errors import NetworkError
from snackgpt.schemas.recipe import RecipeRequest
from snackgpt.services.recipe_generator import (
    MOOD_WORDS,
    RecipeGenerator,
    WEATHER_WORDS,
    generate_dish_name,
    generate_fallback_recipe,
    generate_instructions,
    generate_style_description,
)


class TestFallbackRecipe:

    def test_shape(self):
        recipe = generate_fallback_recipe(["egg", "rice"], "happy", "sunny", "shakespeare")
        assert recipe.eliza_enhanced is False
        assert recipe.fallback is True
        assert recipe.ingredients == ["egg", "rice"]
        assert recipe.style_description.startswith("Verily")
        assert recipe.context_analysis is None

    def test_dish_name_pattern(self):
        name = generate_dish_name(["egg"], "happy", "sunny")
        mood, weather, ingredient, suffix = name.split(" ")
        assert mood in MOOD_WORDS["happy"]
        assert weather in WEATHER_WORDS["sunny"]
        assert (ingredient, suffix) == ("Egg", "Delight")

    def test_dish_name_is_reproducible_with_seeded_rng(self):
        first = generate_dish_name(["egg"], "sad", "rainy", random.Random(7))
        second = generate_dish_name(["egg"], "sad", "rainy", random.Random(7))
        assert first == second

    def test_dish_name_defaults(self):
        assert generate_dish_name([], "grumpy", "foggy") == "Delicious Amazing Special Delight"

    def test_only_first_letter_is_capitalized(self):
        name = generate_dish_name(["peanut butter"], "tired", "windy")
        assert name.endswith(" Peanut butter Delight")

    def test_five_numbered_steps(self):
        steps = generate_instructions(["egg", "rice"]).split("\n")
        assert len(steps) == 5
        assert steps[0] == "Step 1. Gather your ingredients: egg, rice"
        assert steps[4] == "Step 5. Serve and enjoy your creation!"

    def test_style_description_defaults_to_five_year_old(self):
        assert generate_style_description("pirate") == generate_style_description("five_year_old")
        assert generate_style_description("gordon_ramsay").startswith("Bloody brilliant!")


class TestSuggestDish:

    @pytest.fixture
    def request_model(self):
        return RecipeRequest(ingredients=["egg", "rice"])

    async def test_returns_agent_recipe(self, request_model):
        agent = MagicMock()
        agent.process_request = AsyncMock(return_value={"dish_name": "Agent Dish", "eliza_enhanced": True})

        outcome = await RecipeGenerator(agent).suggest_dish(request_model)

        assert outcome.fallback is False
        assert outcome.recipe["dish_name"] == "Agent Dish"
        agent.process_request.assert_awaited_once_with(
            "suggest_dish",
            {"ingredients": ["egg", "rice"], "mood": "happy", "weather": "sunny", "style": "five_year_old"},
        )

    async def test_any_agent_error_yields_fallback(self, request_model):
        agent = MagicMock()
        agent.process_request = AsyncMock(side_effect=NetworkError("down"))

        outcome = await RecipeGenerator(agent).suggest_dish(request_model)

        assert outcome.fallback is True
        assert outcome.error == "down"
        recipe = outcome.recipe
        assert recipe["fallback"] is True
        assert recipe["eliza_enhanced"] is False
        assert "context_analysis" not in recipe
        assert re.fullmatch(r"\w+ \w+ Egg Delight", recipe["dish_name"])
