"""Unit tests for prompt builders."""
import pytest

from snackgpt.agents.prompts import (
    STYLE_PROMPTS,
    build_context_analysis_prompt,
    build_enhancement,
    build_recipe_prompt,
    get_style_specific_prompt,
)
from snackgpt.schemas.recipe import ContextAnalysis


class TestRecipePrompt:

    def test_embeds_ingredients_and_context(self):
        prompt = build_recipe_prompt(["egg", "rice"], "tired", "rainy", "gordon_ramsay")
        assert "following ingredients: egg, rice." in prompt
        assert "- Mood: tired" in prompt
        assert "- Weather: rainy" in prompt
        assert "- Cooking Style: gordon_ramsay" in prompt

    def test_lists_five_requirements(self):
        prompt = build_recipe_prompt(["egg"], "happy", "sunny", "shakespeare")
        for number in range(1, 6):
            assert f"\n{number}. " in prompt
        assert "\n6. " not in prompt

    def test_describes_output_json_shape(self):
        prompt = build_recipe_prompt(["egg"], "happy", "sunny", "shakespeare")
        for field in ("dish_name", "ingredients", "instructions", "style_description"):
            assert f'"{field}"' in prompt

    def test_ends_with_style_voice(self):
        prompt = build_recipe_prompt(["egg"], "sad", "snowy", "shakespeare")
        assert prompt.endswith(get_style_specific_prompt("shakespeare", "sad", "snowy"))

    def test_is_deterministic(self):
        args = (["egg", "rice"], "happy", "sunny", "five_year_old")
        assert build_recipe_prompt(*args) == build_recipe_prompt(*args)


class TestStyleVoice:

    @pytest.mark.parametrize("style", sorted(STYLE_PROMPTS))
    def test_mentions_mood_and_weather(self, style):
        text = get_style_specific_prompt(style, "excited", "windy")
        assert "excited mood" in text
        assert "windy weather" in text

    def test_unknown_style_uses_five_year_old_voice(self):
        assert get_style_specific_prompt("pirate", "happy", "sunny") == get_style_specific_prompt(
            "five_year_old", "happy", "sunny"
        )

    def test_free_text_style_from_analysis_is_accepted(self):
        prompt = build_recipe_prompt(["egg"], "comfort", "indoor", "playful and warm")
        assert "- Cooking Style: playful and warm" in prompt
        assert "excited 5-year-old" in prompt


def test_context_analysis_prompt_asks_for_all_keys():
    prompt = build_context_analysis_prompt("stressed", "cloudy", "gordon_ramsay")
    assert "- Mood: stressed" in prompt
    assert "- Weather: cloudy" in prompt
    assert "- Style: gordon_ramsay" in prompt
    for key in ("food_type", "mood_influence", "weather_adaptation", "style_recommendation"):
        assert f'"{key}"' in prompt


def test_enhancement_summarizes_analysis():
    analysis = ContextAnalysis(
        food_type="hearty",
        mood_influence="soothing",
        weather_adaptation="slow-cooked",
        style_recommendation="shakespeare",
    )
    text = build_enhancement(analysis)
    assert text.startswith("Based on my analysis:")
    assert "- Food Type: hearty" in text
    assert "- Mood Influence: soothing" in text
    assert "- Weather Adaptation: slow-cooked" in text
