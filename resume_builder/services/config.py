from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator

class Settings(BaseSettings):
    PORT: int = 8000
    DEBUG: bool = False
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.0-flash"
    GENERATION_TEMPERATURE: float = 0.7
    GENERATION_TOP_P: float = 0.8
    GENERATION_MAX_OUTPUT_TOKENS: int = 4096
    GENERATION_TIMEOUT_SECONDS: float = 60.0
    ALLOWED_ORIGINS: str = ""
    REDIS_URL: Optional[str] = None
    RESUME_CACHE_TTL_SECONDS: int = 60 * 60 * 24
    RATE_LIMIT: str = "30/minute"

    @field_validator("ALLOWED_ORIGINS")
    def parse_allowed_origins(cls, v: str) -> List[str]:
        return [origin.strip() for origin in v.split(",") if origin.strip()] if v else []

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

settings = Settings()
