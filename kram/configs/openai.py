"""
OpenAI configuration settings.

Credentials, default models and retry policy for the image-generation
and chat-completion calls.

Dependencies: pydantic, pydantic_settings
System role: External AI service configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAISettings(BaseSettings):
    """OpenAI client configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="OPENAI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="OpenAI API key")
    image_model: str = Field(default="dall-e-3", description="Image generation model")
    chat_model: str = Field(default="gpt-4-turbo", description="Default chat completion model")
    timeout: float = Field(default=120.0, description="Per-request timeout in seconds")

    # Retry policy
    max_retries: int = Field(default=3, description="Retries after the first failed attempt")
    base_delay: float = Field(default=1.0, description="Backoff base delay in seconds")
    max_delay: float = Field(default=8.0, description="Backoff delay cap in seconds")
