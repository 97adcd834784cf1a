from pydantic import BaseModel
import os

_PACKAGE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class Settings(BaseModel):
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    # only the proxy knows the backend URL; the browser never calls it directly
    BACKEND_URL: str = os.getenv("BACKEND_URL", "http://backend:3000")
    BACKEND_TIMEOUT: float = float(os.getenv("BACKEND_TIMEOUT", "10"))
    STATIC_DIR: str = os.getenv("STATIC_DIR", os.path.join(_PACKAGE_DIR, "static"))


settings = Settings()
