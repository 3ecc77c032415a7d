from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict

from domain import completion, mealdb


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: Env = Env.local
    # Checked when a completion is requested, not at startup.
    groq_api_key: str | None = None
    completion_base_url: str = completion.BASE_URL
    completion_model: str = completion.DEFAULT_MODEL
    mealdb_base_url: str = mealdb.BASE_URL
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
