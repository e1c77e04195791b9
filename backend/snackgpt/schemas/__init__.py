from .recipe import (
    ContextAnalysis,
    ContextAnalysisResult,
    GenerationResult,
    Recipe,
    RecipeContext,
    RecipeRequest,
    RecipeValidation,
)
from .mcp import (
    ClientInfo,
    InitializeParams,
    InvokeParams,
    JsonRpcRequest,
    SuggestDishArguments,
)
