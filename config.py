"""
Central configuration for the Quoridor engine and CLI.
Pydantic models give type-safe settings loaded from the environment or JSON.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

ConfigDict = Dict[str, Any]


class EngineSettings(BaseModel):
    """Search player configuration."""

    default_depth: int = Field(default=3, ge=1, le=6, description="Default search depth in plies")
    fallback_threshold: int = Field(default=10, ge=0, le=10, description="Walls placed before search is skipped")
    seed: Optional[int] = Field(default=None, description="Seed for the random fallback move")

    @field_validator('default_depth', 'fallback_threshold', mode='before')
    @classmethod
    def validate_int_fields(cls, v):
        return int(v)


class EvalSettings(BaseModel):
    """Weights of the default path-length evaluator."""

    path_weight: float = Field(default=10.0, gt=0, description="Score per step of shortest-path difference")
    wall_weight: float = Field(default=0.5, ge=0, description="Score per remaining wall difference")

    @field_validator('path_weight', 'wall_weight', mode='before')
    @classmethod
    def validate_float_fields(cls, v):
        return float(v)


class UISettings(BaseModel):
    """Text board display settings."""

    player1_icon: str = Field(default="A", min_length=1, max_length=1, description="Icon for player 1")
    player2_icon: str = Field(default="B", min_length=1, max_length=1, description="Icon for player 2")
    show_header: bool = Field(default=True, description="Show turn and wall counter above the board")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="quoridor.log", description="Log file path")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class QuoridorConfig(BaseModel):
    """Main configuration model."""

    engine: EngineSettings = Field(default_factory=EngineSettings)
    eval: EvalSettings = Field(default_factory=EvalSettings)
    ui: UISettings = Field(default_factory=UISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'QuoridorConfig':
        """Create configuration from environment variables."""
        seed = os.getenv('QUORIDOR_SEED')
        return cls(
            engine=EngineSettings(
                default_depth=int(os.getenv('QUORIDOR_DEPTH', '3')),
                seed=int(seed) if seed else None,
            ),
            eval=EvalSettings(
                path_weight=float(os.getenv('QUORIDOR_PATH_WEIGHT', '10.0')),
                wall_weight=float(os.getenv('QUORIDOR_WALL_WEIGHT', '0.5')),
            ),
            logging=LoggingSettings(
                log_level=os.getenv('QUORIDOR_LOG_LEVEL', 'INFO'),
                log_to_file=os.getenv('QUORIDOR_LOG_FILE', 'false').lower() == 'true',
            ),
        )

    def to_dict(self) -> ConfigDict:
        return self.model_dump()

    def save_to_file(self, filepath: str) -> None:
        """Write every section as JSON, recording `filepath` as the config file."""
        data = self.model_copy(update={'config_file': filepath})
        with open(filepath, 'w') as f:
            f.write(data.model_dump_json(indent=2))

    @classmethod
    def load_from_file(cls, filepath: str) -> 'QuoridorConfig':
        """Read a JSON file; missing sections and keys keep their defaults."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        data['config_file'] = filepath
        return cls.model_validate(data)

    def update_from_dict(self, updates: ConfigDict) -> None:
        """Override known keys section by section, re-validating each section.

        Unknown sections and keys are ignored. Raises ValidationError if an
        override is out of range; the section is then left as it was.
        """
        for section, settings in updates.items():
            current = getattr(self, section, None)
            if not isinstance(current, BaseModel) or not isinstance(settings, dict):
                continue
            known = {k: v for k, v in settings.items() if k in type(current).model_fields}
            merged = type(current).model_validate({**current.model_dump(), **known})
            setattr(self, section, merged)


# Global configuration instance
_config: Optional[QuoridorConfig] = None


def get_config() -> QuoridorConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = QuoridorConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> QuoridorConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = QuoridorConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


def get_engine_settings() -> EngineSettings:
    return get_config().engine


def get_eval_settings() -> EvalSettings:
    return get_config().eval


def get_ui_settings() -> UISettings:
    return get_config().ui


def get_logging_settings() -> LoggingSettings:
    return get_config().logging


def setup_logging() -> None:
    """Configure root logging once, from the logging settings."""
    if getattr(setup_logging, "_configured", False):
        return
    settings = get_logging_settings()
    level: int = getattr(logging, settings.log_level, logging.INFO)
    handlers = [logging.StreamHandler()]
    if settings.log_to_file:
        handlers.append(logging.FileHandler(settings.log_file_path))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
