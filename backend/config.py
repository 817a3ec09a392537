import json

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]
    data_dir: Path = Path(__file__).resolve().parent / "data"
    result_cap: int = 1000

    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    translate_model: str = "gpt-4o-mini"
    translate_temperature: float = 0.2

    geonames_user: str = ""
    geonames_base_url: str = "http://api.geonames.org"

    http_timeout_seconds: float = 30.0
    # 0 keeps cached city lists for the lifetime of the process
    city_cache_ttl_seconds: int = 0

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

    model_config = {
        "env_file": str(Path(__file__).resolve().parent.parent / ".env"),
        "env_file_encoding": "utf-8",
    }


settings = Settings()
