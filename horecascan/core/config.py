# horecascan/core/config.py
# -----------------------------------------------------------------------------
# Global settings (pydantic-settings v2)
# - reads .env and OS environment variables into a Settings object
# - typed defaults for the POI source, analysis radius and logging
# -----------------------------------------------------------------------------
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # general
    APP_NAME: str = "horecascan"
    ENV: str = "dev"

    # OpenStreetMap Overpass (no key required)
    OVERPASS_API_URL: str = "https://overpass-api.de/api/interpreter"
    OVERPASS_TIMEOUT_S: float = 15.0  # client side, whole request
    OVERPASS_QUERY_TIMEOUT_S: int = 10  # server side, [timeout:N] in the query

    # analysis
    DEFAULT_RADIUS_M: int = 500

    # logging
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "10 files"

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore"  # ignore unrelated keys in .env
    )


settings = Settings()
