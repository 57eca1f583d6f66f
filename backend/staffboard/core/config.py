import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    STORAGE_BACKEND: str = "file"
    STORAGE_PATH: str = "data/storage.json"
    EMPLOYEES_STORAGE_KEY: str = "employees"

    AUTH_SECRET_KEY: str = "change-me-staffboard-dev-secret"
    AUTH_ALGORITHM: str = "HS256"
    AUTH_TOKEN_TTL_MINUTES: int = 8 * 60

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
