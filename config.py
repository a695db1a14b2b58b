"""
Central configuration for the console game and logging.
Pydantic models give type-safe settings; the rules engine itself never reads them.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from checkers.types import Player

_PLAYER_NAMES = [p.name for p in Player]


def _validate_player_name(v: Any) -> str:
    name = v.name if isinstance(v, Player) else str(v).upper()
    if name not in _PLAYER_NAMES:
        raise ValueError(f"player must be one of {_PLAYER_NAMES}")
    return name


class RulesSettings(BaseModel):
    """Game setup settings."""

    starting_player: str = Field(default="BLACK", description="Player to move first (BLACK or WHITE)")

    @field_validator('starting_player', mode='before')
    @classmethod
    def validate_starting_player(cls, v):
        return _validate_player_name(v)


class ComputerSettings(BaseModel):
    """Computer opponent settings."""

    seed: Optional[int] = Field(default=None, description="Seed for the random move picker")
    side: str = Field(default="WHITE", description="Side played by the computer")

    @field_validator('side', mode='before')
    @classmethod
    def validate_side(cls, v):
        return _validate_player_name(v)


class UISettings(BaseModel):
    """Console display settings."""

    show_legal_moves: bool = Field(default=False, description="List legal moves before each prompt")

    @field_validator('show_legal_moves', mode='before')
    @classmethod
    def validate_bool_fields(cls, v):
        if isinstance(v, str):
            return v.strip().lower() in ('1', 'true', 'yes', 'on')
        return bool(v)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="checkers.log", description="Log file path")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class CheckersConfig(BaseModel):
    """Main configuration model for the checkers console game."""

    rules: RulesSettings = Field(default_factory=RulesSettings)
    computer: ComputerSettings = Field(default_factory=ComputerSettings)
    ui: UISettings = Field(default_factory=UISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Metadata
    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'CheckersConfig':
        """Create configuration from environment variables."""
        seed = os.getenv('CHECKERS_SEED')
        return cls(
            rules=RulesSettings(
                starting_player=os.getenv('CHECKERS_STARTING_PLAYER', 'BLACK'),
            ),
            computer=ComputerSettings(
                seed=int(seed) if seed else None,
                side=os.getenv('CHECKERS_COMPUTER_SIDE', 'WHITE'),
            ),
            ui=UISettings(
                show_legal_moves=os.getenv('CHECKERS_SHOW_MOVES', 'false'),
            ),
            logging=LoggingSettings(
                log_level=os.getenv('CHECKERS_LOG_LEVEL', 'WARNING'),
                log_to_file=os.getenv('CHECKERS_LOG_FILE', 'false').lower() == 'true',
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'CheckersConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            rules=RulesSettings(**data.get('rules', {})),
            computer=ComputerSettings(**data.get('computer', {})),
            ui=UISettings(**data.get('ui', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: Dict[str, Any]) -> None:
        """Update configuration from dictionary, re-validating each touched section."""
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                merged = {**section_model.model_dump(), **settings}
                setattr(self, section, type(section_model)(**merged))


# Global configuration instance
_config: Optional[CheckersConfig] = None


def get_config() -> CheckersConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = CheckersConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> CheckersConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = CheckersConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


def get_rules_settings() -> RulesSettings:
    return get_config().rules


def get_computer_settings() -> ComputerSettings:
    return get_config().computer


def get_ui_settings() -> UISettings:
    return get_config().ui


def get_logging_settings() -> LoggingSettings:
    return get_config().logging


def starting_player() -> Player:
    """The configured first player as a Player value."""
    return Player[get_rules_settings().starting_player]


def computer_side() -> Player:
    return Player[get_computer_settings().side]


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once, from the logging settings unless ``level`` is given."""
    settings = get_logging_settings()
    if level is not None:
        settings = LoggingSettings(log_level=level, log_to_file=settings.log_to_file,
                                   log_file_path=settings.log_file_path)
    if getattr(setup_logging, "_configured", False):
        return
    handlers = [logging.StreamHandler()]
    if settings.log_to_file:
        handlers.append(logging.FileHandler(settings.log_file_path))
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
