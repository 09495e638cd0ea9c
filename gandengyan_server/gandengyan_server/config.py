"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel


class RulesConfig(BaseModel):
    """Rules configuration."""

    min_players: int = 2
    banker_hand_size: int = 7
    hand_size: int = 6

    # Last player to play draws a card when everyone else passes
    draw_on_round_reset: bool = True


class GameConfig(BaseModel):
    """Game configuration for the terminal front end."""

    bots: int = 1
    seed: int | None = None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class GameLogConfig(BaseModel):
    """Configuration for the JSONL game event log."""

    enabled: bool = False
    output_path: str = "logs"


class Config(BaseModel):
    """Root configuration."""

    rules: RulesConfig = RulesConfig()
    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
