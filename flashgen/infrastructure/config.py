from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Values that mean "someone copied .env.example and never filled it in"
PLACEHOLDER_INDICATORS = ("your_", "change-this", "paste_")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Nothing here is required at import time: a missing credential is reported
    per request, after CORS preflight has been answered.
    """
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # --- AI Services ---
    GEMINI_API_KEY: str = ""
    OPENAI_API_KEY: str = ""

    # AI Model Configuration
    FG_PROVIDER: str = "gemini"
    FG_GEMINI_MODEL: str = "gemini-2.5-flash"
    FG_OPENAI_MODEL: str = "gpt-4o-mini"
    FG_BASE_URL: str = ""

    # --- Generation ---
    FG_MAX_CONTEXT_CHARS: int = Field(25000, ge=1, le=30000)
    FG_EXTRACTOR: str = "non_greedy"

    # --- HTTP ---
    FG_CORS_ALLOW_AUTHORIZATION: bool = False

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    def active_api_key(self) -> str:
        """Return the credential for FG_PROVIDER, or "" when it is unusable."""
        key = self.OPENAI_API_KEY if self.FG_PROVIDER == "openai" else self.GEMINI_API_KEY
        key = (key or "").strip()
        if any(indicator in key.lower() for indicator in PLACEHOLDER_INDICATORS):
            return ""
        return key

    def cors_headers(self) -> dict:
        allow_headers = "Content-Type"
        if self.FG_CORS_ALLOW_AUTHORIZATION:
            allow_headers += ", Authorization"
        return {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "POST, OPTIONS",
            "Access-Control-Allow-Headers": allow_headers,
        }


# Load settings
settings = Settings()
