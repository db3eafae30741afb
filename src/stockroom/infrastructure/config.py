import os

from dotenv import load_dotenv

load_dotenv()

_ENV_LOG_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


class Settings:
    env: str = os.getenv("STOCKROOM_ENV", "development").lower()
    log_level: str = os.getenv("LOG_LEVEL", _ENV_LOG_LEVELS.get(env, "INFO")).upper()
    log_json: bool = os.getenv(
        "STOCKROOM_LOG_JSON", str(env in ("production", "staging"))
    ).lower() == "true"


settings = Settings()
