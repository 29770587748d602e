import json

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path

_BACKEND_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    default_model: str = "openai/gpt-4o-mini"
    fallback_api_key: str = ""
    fallback_base_url: str = "https://openrouter.ai/api/v1"
    fallback_model: str = "google/gemma-3-27b-it:free"
    llm_json_retries: int = 2

    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    cache_ttl_seconds: int = 300
    countries_data_path: str = str(_BACKEND_DIR / "data" / "countries.json")

    default_language: str = "az"
    # "llm" asks the hosted model, "rules" scores countries locally
    recommender_backend: str = "llm"

    rate_limit_enabled: bool = True
    recommendation_rate_limit: str = "10/minute"
    chat_rate_limit: str = "30/minute"

    log_level: str = "INFO"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("recommender_backend")
    @classmethod
    def check_backend(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("llm", "rules"):
            raise ValueError("recommender_backend must be 'llm' or 'rules'")
        return v

    model_config = {
        "env_file": str(_BACKEND_DIR.parent / ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
