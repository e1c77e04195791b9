"""
Eliza Agent - context-aware recipe generation pipeline
"""
from typing import Optional

from ..config import LLMConfig
from ..logger import get_logger
from ..schemas.recipe import ContextAnalysis, RecipeContext
from ..services.openai_client import OpenAIClient
from ..services.validation import validate_recipe
from .context_analyzer import ContextAnalyzer
from .prompts import CHEF_SYSTEM, build_enhancement, build_recipe_prompt

logger = get_logger(__name__)

MOOD_PROFILES = {
    "happy": {"energy": "high", "comfort": "medium", "complexity": "medium"},
    "tired": {"energy": "low", "comfort": "high", "complexity": "low"},
    "sad": {"energy": "low", "comfort": "high", "complexity": "low"},
    "excited": {"energy": "high", "comfort": "medium", "complexity": "high"},
    "stressed": {"energy": "low", "comfort": "high", "complexity": "low"},
}

WEATHER_ADAPTATIONS = {
    "sunny": {"method": "grilling", "style": "fresh", "temperature": "cool"},
    "rainy": {"method": "baking", "style": "comfort", "temperature": "warm"},
    "cloudy": {"method": "stovetop", "style": "balanced", "temperature": "moderate"},
    "snowy": {"method": "slow_cooking", "style": "hearty", "temperature": "hot"},
}


class ElizaAgent:
    """
    Eliza Agent: analyze context, engineer the prompt, generate and check the recipe.

    Pipeline per request:
    1. Context analysis (fail-open)
    2. Prompt enhancement with the analysis
    3. Generation (errors propagate)
    4. Validation, with a single regeneration from the plain prompt if it fails
    5. Stamping of the validated recipe
    """

    name = "Eliza"
    version = "1.0.0"
    capabilities = ["recipe_generation", "prompt_engineering", "context_analysis"]

    def __init__(self, llm: OpenAIClient, config: Optional[LLMConfig] = None):
        self.llm = llm
        self.config = config or llm.config
        self.context_analyzer = ContextAnalyzer(llm)
        self.initialized = False

    async def initialize(self) -> dict:
        logger.info("Eliza Agent initializing...")
        self.initialized = True
        return {
            "name": self.name,
            "version": self.version,
            "capabilities": list(self.capabilities),
        }

    async def process_request(self, request_type: str, data: dict):
        logger.info(f"Eliza Agent processing {request_type} request")

        if request_type == "suggest_dish":
            return await self.generate_recipe(
                data["ingredients"], data["mood"], data["weather"], data["style"]
            )
        if request_type == "analyze_mood":
            return self.analyze_mood(data.get("mood"))
        if request_type == "weather_adaptation":
            return self.adapt_to_weather(data.get("weather"))
        raise ValueError(f"Unknown request type: {request_type}")

    async def generate_recipe(
        self,
        ingredients: list[str],
        mood: str,
        weather: str,
        style: str,
    ) -> dict:
        """
        Generate a recipe for the given ingredients and context.

        Returns the stamped recipe, or the unvalidated regeneration result when
        the first response is missing required fields.

        Raises:
            NetworkError, AuthError, RateLimitError, LLMParseError from the client.
        """
        outcome = await self.context_analyzer.analyze(mood, weather, style)
        prompt = self.enhance_prompt(ingredients, outcome.analysis)

        recipe = await self._generate(prompt)

        validation = validate_recipe(recipe)
        if not validation.is_valid:
            logger.warning(
                f"Recipe missing fields {validation.missing_fields}, regenerating..."
            )
            return await self.regenerate_recipe(ingredients, mood, weather, style)

        recipe["eliza_enhanced"] = True
        recipe["context_analysis"] = RecipeContext(
            mood_adapted=mood,
            weather_considered=weather,
            style_applied=style,
        ).model_dump()
        return recipe

    def enhance_prompt(self, ingredients: list[str], analysis: ContextAnalysis) -> str:
        base_prompt = build_recipe_prompt(
            ingredients,
            analysis.mood_influence,
            analysis.weather_adaptation,
            analysis.style_recommendation,
        )
        return f"{base_prompt}\n\n{build_enhancement(analysis)}"

    async def regenerate_recipe(
        self,
        ingredients: list[str],
        mood: str,
        weather: str,
        style: str,
    ) -> dict:
        # TODO: decide whether the regenerated recipe should be validated and stamped too
        logger.info("Eliza regenerating recipe from the plain prompt...")
        return await self._generate(build_recipe_prompt(ingredients, mood, weather, style))

    async def _generate(self, prompt: str) -> dict:
        logger.info(f"Eliza routing to {self.config.model}...")
        return await self.llm.complete(
            CHEF_SYSTEM,
            prompt,
            temperature=0.8,
            max_tokens=1000,
            json_mode=True,
            timeout=self.config.generation_timeout,
        )

    def analyze_mood(self, mood: Optional[str]) -> dict:
        return dict(MOOD_PROFILES.get(mood, MOOD_PROFILES["happy"]))

    def adapt_to_weather(self, weather: Optional[str]) -> dict:
        # windy has no entry of its own and gets the sunny profile
        return dict(WEATHER_ADAPTATIONS.get(weather, WEATHER_ADAPTATIONS["sunny"]))
