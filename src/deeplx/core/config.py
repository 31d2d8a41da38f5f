from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DEEPL_ENDPOINT = "https://www2.deepl.com/jsonrpc"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DEEPLX_", extra="ignore")

    app_name: str = "deeplx"
    app_env: str = "development"
    log_level: str = "INFO"
    endpoint: str = DEFAULT_DEEPL_ENDPOINT
    timeout_seconds: float = Field(default=10.0, gt=0)
    max_text_length: int = Field(default=5000, gt=0)
    # Comma separated; parsed by cors_origins
    cors_allow_origins: str = "*"

    @property
    def cors_origins(self) -> List[str]:
        origins = [o.strip() for o in self.cors_allow_origins.split(',') if o.strip()]
        return origins or ["*"]


@lru_cache()
def get_settings() -> Settings:
    load_dotenv()
    try:
        return Settings()
    except ValidationError as exc:
        names = sorted({f"DEEPLX_{str(err['loc'][0]).upper()}" for err in exc.errors() if err.get('loc')})
        raise RuntimeError(f"Invalid configuration for {', '.join(names)} (see .env)") from exc
