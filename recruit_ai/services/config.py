from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator

class Settings(BaseSettings):
    PORT: int = 8000
    DEBUG: bool = False
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-flash-lite"
    ALLOWED_ORIGINS: str = ""
    MONGO_URI: Optional[str] = None
    DB_NAME: str = "recruit_ai"
    SCORING_BATCH_LIMIT: int = 100
    RATE_LIMIT: str = "30/minute"

    @field_validator("ALLOWED_ORIGINS")
    def parse_allowed_origins(cls, v: str) -> List[str]:
        return [origin.strip() for origin in v.split(",") if origin.strip()] if v else []

    @field_validator("GEMINI_API_KEY")
    def blank_key_is_unset(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

settings = Settings()
