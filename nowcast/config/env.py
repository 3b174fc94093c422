"""
Environment variable handling for the nowcast weather screen.
"""

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class NowcastEnv(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    openweather_api_key: str = Field(
        description="OpenWeatherMap API key for current weather lookups"
    )
    nowcast_log_level: str = "WARNING"


def load_environment() -> NowcastEnv:
    """
    Read settings from the environment and the .env file.

    Raises:
        RuntimeError: If required environment variables are missing
    """
    try:
        return NowcastEnv()
    except ValidationError as e:
        missing_vars = []
        for error in e.errors():
            if error["type"] != "missing":
                continue
            name = str(error["loc"][0])
            description = NowcastEnv.model_fields[name].description
            missing_vars.append(f"{name.upper()} ({description})")

        if not missing_vars:
            raise RuntimeError(f"Invalid environment settings:\n{e}") from e

        error_msg = (
            "Missing required environment variables:\n"
            + "\n".join(f"  - {var}" for var in missing_vars)
            + "\n\nPlease set these variables in your .env file or environment."
        )
        raise RuntimeError(error_msg) from e
