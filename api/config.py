"""
Application configuration from environment variables
"""
from pydantic_settings import BaseSettings
from typing import List, Optional
from pathlib import Path


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # API Keys
    CLAUDE_API_KEY: str = ""

    # LLM Settings
    ANTHROPIC_API_URL: str = "https://api.anthropic.com/v1/messages"
    ANTHROPIC_VERSION: str = "2023-06-01"
    LLM_MODEL: str = "claude-3-5-sonnet-20241022"
    SINGLE_MAX_TOKENS: int = 1200
    BULK_MAX_TOKENS: int = 2500
    LLM_TIMEOUT_SECONDS: Optional[float] = None

    # Sampling limits
    MAX_SCAN_ROWS: int = 50
    MAX_SAMPLE_ENTRIES: int = 25
    MIN_FEEDBACK_LENGTH: int = 10

    # Request limits
    MAX_BODY_MB: int = 10

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Static UI
    STATIC_DIR: str = "public"

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        frozen = True

    @property
    def static_path(self) -> Path:
        """UI directory; relative paths resolve against the project root"""
        path = Path(self.STATIC_DIR)
        if not path.is_absolute():
            path = Path(__file__).resolve().parent.parent / path
        return path
