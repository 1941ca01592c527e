# The module is to define the configuration settings for the application.
# Date: 2026-10-19
# Version: 0.1.0

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    """
    The Settings class is used to define the configuration settings for the application.
    It inherits from BaseSettings, which allows it to load environment variables
    and provides type validation for the settings.
    Attributes:
        LLM_API_KEY (str): Bootstrap API key, used when no configuration has been saved yet.
        LLM_BASE_URL (str): Bootstrap base URL of the chat completion endpoint.
        LLM_MODEL (str): Bootstrap model identifier.
        LLM_TEMPERATURE (float): Sampling temperature sent with every request.
        LLM_MAX_TOKENS (int): Response length cap sent with every request.
        LLM_TIMEOUT_SECONDS (float): Network timeout for one chat completion request.
        MAX_TOOL_ITERATIONS (int): How many tool round trips one conversation may take.
        REDIS_URL (str): Connection URL of the Redis instance holding records and sessions.
        REDIS_KEY_PREFIX (str): Namespace prefix for every Redis key.
        SESSION_TTL_SECONDS (int): Lifetime of a saved chat history.
    """
    # Assistant bootstrap
    LLM_API_KEY: Optional[str] = None
    LLM_BASE_URL: Optional[str] = None
    LLM_MODEL: Optional[str] = None

    # Sampling
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 2000
    LLM_TIMEOUT_SECONDS: float = 60.0
    MAX_TOOL_ITERATIONS: int = 5

    # REDIS
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_KEY_PREFIX: str = "daylog"
    SESSION_TTL_SECONDS: int = 86400

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


class AssistantConfig(BaseModel):
    """
    The connection details of the remote chat endpoint.
    Instances are frozen: changing the endpoint means building a new assistant.
    Attributes:
        api_key (str): The credential sent as a bearer token.
        api_url (str): The base URL of the OpenAI-compatible endpoint.
        model (str): The model identifier.
    """
    model_config = ConfigDict(frozen=True)

    api_key: str = Field(default="", description="The credential sent as a bearer token.")
    api_url: str = Field(default="", description="The base URL of the OpenAI-compatible endpoint.")
    model: str = Field(default="", description="The model identifier.")

    def is_complete(self) -> bool:
        return bool(self.api_key and self.api_url and self.model)


# lru_cache to cache the settings instance.
@lru_cache
def get_settings():
    return Settings()


def bootstrap_assistant_config(settings: Settings) -> Optional[AssistantConfig]:
    """Builds an AssistantConfig from the environment, or None if nothing was provided."""
    if not (settings.LLM_API_KEY or settings.LLM_BASE_URL or settings.LLM_MODEL):
        return None
    return AssistantConfig(
        api_key=settings.LLM_API_KEY or "",
        api_url=settings.LLM_BASE_URL or "",
        model=settings.LLM_MODEL or "",
    )


if __name__ == "__main__":
    settings = get_settings()
    print(settings.model_dump_json(indent=4))
