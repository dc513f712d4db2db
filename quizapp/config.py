from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./quiz.db"
    SQL_ECHO: bool = False

    HOST: str = "0.0.0.0"
    PORT: int = 5000

    STATIC_DIR: str = "public"
    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
