"""
Error taxonomy - JSON-RPC protocol errors and chat-completion client errors
"""
from enum import IntEnum
from typing import Any, Optional


class JsonRpcErrorCode(IntEnum):
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INTERNAL_ERROR = -32603


# ============================================================================
# JSON-RPC errors (rendered into the response envelope)
# ============================================================================

class MCPError(Exception):
    code: int = JsonRpcErrorCode.INTERNAL_ERROR
    message: str = "Internal error"
    http_status: int = 500

    def __init__(self, data: Any = None, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.data = data

    def to_error(self) -> dict:
        return {"code": int(self.code), "message": self.message, "data": self.data}


class JsonRpcParseError(MCPError):
    code = JsonRpcErrorCode.PARSE_ERROR
    message = "Parse error"
    http_status = 400


class InvalidRequestError(MCPError):
    # Malformed envelopes and malformed method params share this code
    code = JsonRpcErrorCode.INVALID_REQUEST
    message = "Invalid Request"
    http_status = 400


class MethodNotFoundError(MCPError):
    code = JsonRpcErrorCode.METHOD_NOT_FOUND
    message = "Method not found"
    http_status = 400


class ToolNotFoundError(MethodNotFoundError):
    message = "Tool not found"


# ============================================================================
# Chat-completion client errors
# ============================================================================

class LLMClientError(Exception):
    """The chat-completion call failed."""

    http_status: int = 502
    public_message: str = "AI service error"


class NetworkError(LLMClientError):
    http_status = 503
    public_message = "External service unavailable"


class AuthError(LLMClientError):
    http_status = 401
    public_message = "Authentication failed"


class RateLimitError(LLMClientError):
    http_status = 429
    public_message = "Rate limit exceeded"


class LLMParseError(LLMClientError):
    public_message = "Invalid response from AI service"
