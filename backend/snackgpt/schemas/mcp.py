"""
MCP Schemas - JSON-RPC 2.0 envelope and per-method parameter shapes
"""
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

from .recipe import DEFAULT_MOOD, DEFAULT_STYLE, DEFAULT_WEATHER, Mood, Style, Weather

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]


# ============================================================================
# Envelope
# ============================================================================

class JsonRpcRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    jsonrpc: Literal["2.0"]
    id: Union[StrictInt, StrictFloat, NonEmptyStr]
    method: NonEmptyStr
    params: Optional[dict[str, Any]] = None


# ============================================================================
# Method params
# ============================================================================

class ClientInfo(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[StrictStr] = None
    version: Optional[StrictStr] = None


class InitializeParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    protocolVersion: StrictStr
    capabilities: Optional[dict[str, Any]] = None
    clientInfo: Optional[ClientInfo] = None


class InvokeParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: StrictStr
    arguments: dict[str, Any]


class SuggestDishArguments(BaseModel):
    model_config = ConfigDict(extra="forbid")

    ingredients: list[NonEmptyStr] = Field(min_length=1)
    mood: Mood = DEFAULT_MOOD
    weather: Weather = DEFAULT_WEATHER
    style: Style = DEFAULT_STYLE
