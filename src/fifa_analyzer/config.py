# fifa_analyzer/config.py
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    players_csv_path: str = "data/player_stats.csv"
    auto_import: bool = False
    log_level: str = "INFO"
    app_log_level: Optional[str] = None
    access_log: bool = True

    # Similarity search
    default_similar_limit: int = 10
    max_similar_limit: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
