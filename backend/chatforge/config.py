from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


# Models that require max_completion_tokens instead of max_tokens
_MAX_COMPLETION_TOKENS_MODELS = {"gpt-5.2", "gpt-5", "o1", "o3", "o3-mini", "o1-mini"}


class Settings(BaseSettings):
    openai_api_key: str = ""
    openai_base_url: str | None = None
    openai_model: str = "gemini-2.0-flash"
    openai_timeout: float = 120.0
    temperature: float = 0.7
    top_p: float = 0.95
    max_output_tokens: int = 8192
    port: int = 3001
    frontend_url: str = "http://localhost:3000"
    public_api_url: str = Field(
        default="http://localhost:3001",
        validation_alias=AliasChoices("NEXT_PUBLIC_API_URL", "PUBLIC_API_URL"),
    )
    publish_base_url: str = "https://chatforge.app/projects"
    app_env: str = "development"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def max_tokens_param(self, n: int) -> dict:
        """Return the right max-tokens kwarg for the current model."""
        if self.openai_model in _MAX_COMPLETION_TOKENS_MODELS:
            return {"max_completion_tokens": n}
        return {"max_tokens": n}

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.frontend_url.split(",") if origin.strip()]


settings = Settings()
