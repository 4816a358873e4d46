import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    supabase_url: Optional[str]
    supabase_service_key: Optional[str]
    gemini_api_key: Optional[str]
    gemini_model: str
    recommendation_timeout: float
    cors_origins: list


@lru_cache()
def get_settings() -> Settings:
    """Read settings from the environment (.env is loaded first)."""
    load_dotenv()

    origins = os.environ.get("CORS_ORIGINS", "*")

    return Settings(
        supabase_url=os.environ.get("SUPABASE_URL"),
        supabase_service_key=os.environ.get("SUPABASE_SERVICE_KEY"),
        gemini_api_key=os.environ.get("GEMINI_API_KEY"),
        gemini_model=os.environ.get("GEMINI_MODEL", "gemini-2.0-flash-lite"),
        recommendation_timeout=float(os.environ.get("RECOMMENDATION_TIMEOUT", "30")),
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
    )
