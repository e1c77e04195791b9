"""
Agent System Prompts and prompt builders
"""
from ..schemas.recipe import ContextAnalysis

CONTEXT_ANALYST_SYSTEM = (
    "You are Eliza, an AI agent specializing in context analysis for recipe generation. "
    "Provide thoughtful, detailed analysis."
)

CHEF_SYSTEM = (
    "You are SnackGPT, a creative AI chef that generates fun and unique recipes. "
    "Always respond with valid JSON in the exact format specified."
)

RECIPE_PROMPT_TEMPLATE = """Generate a creative and fun recipe using the following ingredients: {ingredients}.

Context:
- Mood: {mood}
- Weather: {weather}
- Cooking Style: {style}

Requirements:
1. Create a unique dish name that reflects the mood and weather
2. Use the provided ingredients as the base, but feel free to suggest additional common ingredients
3. Write clear, step-by-step instructions
4. Include a fun description in the specified style voice
5. Make the recipe appropriate for the given mood and weather

Cooking Style Voices:
- shakespeare: Use Elizabethan English with "thou", "doth", "verily", etc.
- gordon_ramsay: Use passionate, direct language with British expressions
- five_year_old: Use simple, excited language with lots of exclamation marks

Respond with a JSON object in this exact format:
{{
  "dish_name": "Creative dish name",
  "ingredients": ["ingredient1", "ingredient2", "additional_ingredient3"],
  "instructions": "Step 1. Do this...\\nStep 2. Do that...\\nStep 3. Continue...",
  "style_description": "Fun description in the specified style voice"
}}"""

STYLE_PROMPTS = {
    "shakespeare": (
        "Thou must craft this culinary masterpiece in the voice of William Shakespeare himself. "
        'Use "thou", "doth", "verily", "forsooth", and other Elizabethan expressions. '
        "Make it sound like a soliloquy from a play about cooking. "
        "Consider how the {mood} mood and {weather} weather would be described in Shakespearean terms."
    ),
    "gordon_ramsay": (
        "Channel the energy and passion of Gordon Ramsay! Use direct, passionate language with British "
        'expressions like "bloody", "proper", "donut", "brilliant". Be enthusiastic about the cooking '
        "process and make it sound like you're giving a cooking show. The {mood} mood should influence "
        "the energy level, and {weather} weather should affect the cooking approach."
    ),
    "five_year_old": (
        "Write like an excited 5-year-old who just discovered cooking! Use simple words, lots of "
        'exclamation marks, and childlike wonder. Everything should be "yummy", "amazing", '
        '"super cool", or "the best ever!". The {mood} mood should be expressed in simple emotional '
        "terms, and {weather} weather should be described in basic terms a child would understand."
    ),
}

CONTEXT_ANALYSIS_TEMPLATE = """Analyze the following context for recipe generation:
- Mood: {mood}
- Weather: {weather}
- Style: {style}

Provide insights on:
1. What type of food would be most appropriate
2. How the mood should influence the recipe
3. How the weather should affect cooking methods
4. What tone/style would work best

Respond in JSON format:
{{
  "food_type": "comfort/light/hearty/etc",
  "mood_influence": "how mood affects the recipe",
  "weather_adaptation": "how weather affects cooking",
  "style_recommendation": "recommended approach"
}}"""


def get_style_specific_prompt(style: str, mood: str, weather: str) -> str:
    """Voice paragraph for a style; unknown styles get the five_year_old voice."""
    template = STYLE_PROMPTS.get(style, STYLE_PROMPTS["five_year_old"])
    return template.format(mood=mood, weather=weather)


def build_recipe_prompt(ingredients: list[str], mood: str, weather: str, style: str) -> str:
    base_prompt = RECIPE_PROMPT_TEMPLATE.format(
        ingredients=", ".join(ingredients),
        mood=mood,
        weather=weather,
        style=style,
    )
    return f"{base_prompt}\n\n{get_style_specific_prompt(style, mood, weather)}"


def build_context_analysis_prompt(mood: str, weather: str, style: str) -> str:
    return CONTEXT_ANALYSIS_TEMPLATE.format(mood=mood, weather=weather, style=style)


def build_enhancement(analysis: ContextAnalysis) -> str:
    return "\n".join([
        "Based on my analysis:",
        f"- Food Type: {analysis.food_type}",
        f"- Mood Influence: {analysis.mood_influence}",
        f"- Weather Adaptation: {analysis.weather_adaptation}",
        "",
        "Please consider these factors when generating the recipe.",
    ])
