import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load .env from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


class LLMConfig(BaseModel):
    """Immutable connection settings for the chat-completion endpoint."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str
    model: str
    generation_timeout: float = 30.0
    request_timeout: Optional[float] = None


class Settings:
    def __init__(self) -> None:
        # API Keys
        self.OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")

        # Chat-completion endpoint (any OpenAI-compatible provider)
        self.OPENAI_API_URL: str = os.getenv("OPENAI_API_URL", "https://api.comput3.ai/v1")
        self.OPENAI_MODEL: str = os.getenv("MEDIUM_OPENAI_MODEL", "llama3:70b")
        self.GENERATION_TIMEOUT_SECONDS: float = float(os.getenv("GENERATION_TIMEOUT_SECONDS", "30"))

        # Server
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "3001"))
        self.CORS_ORIGIN: str = os.getenv("CORS_ORIGIN", "http://localhost:3000")

        # MCP identity
        self.MCP_VERSION: str = os.getenv("MCP_VERSION", "2024-11-05")
        self.MCP_SERVER_NAME: str = os.getenv("MCP_SERVER_NAME", "snackgpt")
        self.MCP_SERVER_VERSION: str = os.getenv("MCP_SERVER_VERSION", "1.0.0")

    def llm_config(self) -> LLMConfig:
        return LLMConfig(
            api_key=self.OPENAI_API_KEY,
            base_url=self.OPENAI_API_URL,
            model=self.OPENAI_MODEL,
            generation_timeout=self.GENERATION_TIMEOUT_SECONDS,
        )


settings = Settings()
