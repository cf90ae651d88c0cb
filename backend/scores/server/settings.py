"""Score server configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class ScoreServerSettings(BaseSettings):
    model_config = {"env_prefix": "SCORES_"}

    league_file: str = Field(default="backend/data/league.json", min_length=1)
    log_dir: str | None = "backend/logs/scores"
    host: str = "127.0.0.1"
    port: int = Field(default=5000, ge=1, le=65535)
