"""
Context Analyzer - derives cooking guidance from mood, weather and style
"""
from ..logger import get_logger
from ..schemas.recipe import ContextAnalysis, ContextAnalysisResult
from ..services.openai_client import OpenAIClient
from .prompts import CONTEXT_ANALYST_SYSTEM, build_context_analysis_prompt

logger = get_logger(__name__)


class ContextAnalyzer:
    """
    Context Analyzer: ask the model how mood/weather/style should shape the dish.

    Fails open: any error yields the default analysis so generation can proceed.
    """

    def __init__(self, llm: OpenAIClient):
        self.llm = llm

    async def analyze(self, mood: str, weather: str, style: str) -> ContextAnalysisResult:
        prompt = build_context_analysis_prompt(mood, weather, style)

        try:
            result = await self.llm.complete(
                CONTEXT_ANALYST_SYSTEM,
                prompt,
                temperature=0.3,  # Keep the analysis steady
                max_tokens=500,
                json_mode=True,
            )
            analysis = ContextAnalysis.model_validate(result)
            return ContextAnalysisResult(analysis=analysis)

        except Exception as e:
            logger.warning(f"Context analysis failed, using defaults: {e}")
            return ContextAnalysisResult(
                analysis=ContextAnalysis.default(style),
                fallback_used=True,
                error=str(e),
            )
