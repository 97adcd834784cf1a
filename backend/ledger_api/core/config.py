from pydantic import BaseModel
import os


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing at first use."""


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseModel):
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DATABASE_URL: str = os.getenv("DATABASE_URL", os.getenv("SQL_CONNECTION", ""))
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "false").lower() == "true"
    CORS_ORIGINS: list[str] = _split_csv(os.getenv("CORS_ORIGINS", ""))


settings = Settings()
