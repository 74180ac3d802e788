# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and tells the plant AI helpers which models to use and how much they may "talk".
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for the inference boundary and the agent budgets.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - app.shared.utils.logging
# - app.modules.plant_ai (agents, inference client, dependencies)

from functools import lru_cache
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Plantitas AI API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Multi-agent plant analysis and plant chat service",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json|text)")
    LOG_FILE: Optional[str] = Field(None, description="Optional log file path")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=True, description="Auto-reload on changes")

    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="CORS allowed origins"
    )

    # =========================================================================
    # AI / LLM API
    # =========================================================================

    OPENAI_API_KEY: Optional[str] = Field(None, description="OpenAI API key")
    OPENAI_API_URL: str = Field(
        default="https://api.openai.com/v1",
        description="OpenAI-compatible API base URL"
    )
    OPENAI_VISION_MODEL: str = Field(default="gpt-4o", description="Model for image agents")
    OPENAI_TEXT_MODEL: str = Field(default="gpt-4o-mini", description="Model for text agents")
    OPENAI_TIMEOUT_SECONDS: int = Field(default=45, description="Inference request timeout")
    OPENAI_MAX_RETRIES: int = Field(
        default=0,
        description="Retries on transport failures (0 = single attempt)"
    )
    OPENAI_RETRY_MAX_WAIT: float = Field(
        default=10.0,
        description="Upper bound for the jittered retry wait (seconds)"
    )

    # =========================================================================
    # AGENT BUDGETS
    # =========================================================================

    AI_SPECIES_MAX_TOKENS: int = Field(default=300, description="Species agent token cap")
    AI_SPECIES_TEMPERATURE: float = Field(default=0.1, description="Species agent temperature")
    AI_HEALTH_MAX_TOKENS: int = Field(default=400, description="Health agent token cap")
    AI_HEALTH_TEMPERATURE: float = Field(default=0.2, description="Health agent temperature")
    AI_CARE_MAX_TOKENS: int = Field(default=350, description="Care agent token cap")
    AI_CARE_TEMPERATURE: float = Field(default=0.3, description="Care agent temperature")
    AI_PERSONALITY_MAX_TOKENS: int = Field(default=200, description="Personality agent token cap")
    AI_PERSONALITY_TEMPERATURE: float = Field(
        default=0.8,
        description="Personality agent temperature"
    )
    AI_CHAT_MAX_TOKENS: int = Field(default=150, description="Plant chat token cap")
    AI_CHAT_TEMPERATURE: float = Field(default=0.7, description="Plant chat temperature")
    AI_GARDEN_MAX_TOKENS: int = Field(default=1500, description="Garden chat token cap")
    AI_GARDEN_TEMPERATURE: float = Field(default=0.7, description="Garden chat temperature")
    AI_INSIGHTS_MAX_TOKENS: int = Field(default=150, description="Insights token cap")
    AI_INSIGHTS_TEMPERATURE: float = Field(default=0.5, description="Insights temperature")
    AI_PROGRESS_MAX_TOKENS: int = Field(default=1000, description="Progress comparison token cap")
    AI_PROGRESS_TEMPERATURE: float = Field(default=0.3, description="Progress comparison temperature")
    AI_REDIAGNOSIS_MAX_TOKENS: int = Field(default=1500, description="Health re-diagnosis token cap")
    AI_REDIAGNOSIS_TEMPERATURE: float = Field(default=0.3, description="Health re-diagnosis temperature")

    CHAT_HISTORY_WINDOW: int = Field(default=4, description="Plant chat history turns kept")
    GARDEN_HISTORY_WINDOW: int = Field(default=10, description="Garden chat history turns kept")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed_formats = ["json", "text"]
        if v.lower() not in allowed_formats:
            raise ValueError(f"Log format must be one of {allowed_formats}")
        return v.lower()

    @field_validator("OPENAI_MAX_RETRIES")
    @classmethod
    def validate_max_retries(cls, v: int) -> int:
        """Retries are bounded; negative values make no sense."""
        if v < 0 or v > 5:
            raise ValueError("OPENAI_MAX_RETRIES must be between 0 and 5")
        return v

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",")]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"

    # =========================================================================
    # AI PROVIDER CONFIGURATION
    # =========================================================================

    def get_ai_agent_config(self) -> Dict[str, Dict[str, Any]]:
        """Get per-agent model, token budget and temperature."""
        return {
            "species": {
                "model": self.OPENAI_VISION_MODEL,
                "max_tokens": self.AI_SPECIES_MAX_TOKENS,
                "temperature": self.AI_SPECIES_TEMPERATURE,
            },
            "health": {
                "model": self.OPENAI_VISION_MODEL,
                "max_tokens": self.AI_HEALTH_MAX_TOKENS,
                "temperature": self.AI_HEALTH_TEMPERATURE,
            },
            "care": {
                "model": self.OPENAI_TEXT_MODEL,
                "max_tokens": self.AI_CARE_MAX_TOKENS,
                "temperature": self.AI_CARE_TEMPERATURE,
            },
            "personality": {
                "model": self.OPENAI_TEXT_MODEL,
                "max_tokens": self.AI_PERSONALITY_MAX_TOKENS,
                "temperature": self.AI_PERSONALITY_TEMPERATURE,
            },
            "chat": {
                "model": self.OPENAI_TEXT_MODEL,
                "max_tokens": self.AI_CHAT_MAX_TOKENS,
                "temperature": self.AI_CHAT_TEMPERATURE,
            },
            "garden": {
                "max_tokens": self.AI_GARDEN_MAX_TOKENS,
                "temperature": self.AI_GARDEN_TEMPERATURE,
            },
            "insights": {
                "model": self.OPENAI_TEXT_MODEL,
                "max_tokens": self.AI_INSIGHTS_MAX_TOKENS,
                "temperature": self.AI_INSIGHTS_TEMPERATURE,
            },
            "progress": {
                "model": self.OPENAI_VISION_MODEL,
                "max_tokens": self.AI_PROGRESS_MAX_TOKENS,
                "temperature": self.AI_PROGRESS_TEMPERATURE,
            },
            "rediagnosis": {
                "model": self.OPENAI_VISION_MODEL,
                "max_tokens": self.AI_REDIAGNOSIS_MAX_TOKENS,
                "temperature": self.AI_REDIAGNOSIS_TEMPERATURE,
            },
        }


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
