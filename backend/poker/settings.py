"""Interactive poker configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class PokerSettings(BaseSettings):
    model_config = {"env_prefix": "POKER_"}

    league_file: str = Field(default="backend/data/league.json", min_length=1)
    log_dir: str | None = None
