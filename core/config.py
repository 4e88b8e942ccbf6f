"""Scene configuration: camera, field sampler, target sequence, logging."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from camera.config import CameraConfig, CameraSegment, DEFAULT_TARGET_SEQUENCE
from gravity.config import FieldConfig
from .errors import ConfigurationError


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = Field(default="INFO")
    file: Optional[Path] = Field(default=None)
    max_size_mb: int = Field(default=10, gt=0)
    backup_count: int = Field(default=5, ge=0)


class SceneConfig(BaseModel):
    """Everything the simulation core needs besides the body catalogue."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    camera: CameraConfig = Field(default_factory=CameraConfig)
    field: FieldConfig = Field(default_factory=FieldConfig)
    targets: List[CameraSegment] = Field(
        default_factory=lambda: list(DEFAULT_TARGET_SEQUENCE))
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("targets")
    @classmethod
    def _targets_not_empty(cls, v: List[CameraSegment]) -> List[CameraSegment]:
        if not v:
            raise ValueError("target sequence must contain at least one segment")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SceneConfig":
        """Validate a plain dict; failures surface as ConfigurationError."""
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid scene configuration:\n{e}") from e

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "SceneConfig":
        """Load configuration from a YAML file (defaults when path is None)."""
        config_dict: Dict[str, Any] = {}

        if config_path is not None:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ConfigurationError(f"Config file not found: {config_path}")
            with open(config_path, "r") as f:
                config_dict = yaml.safe_load(f) or {}
            if not isinstance(config_dict, dict):
                raise ConfigurationError(
                    f"{config_path.name}: expected a mapping at top level")

        return cls.from_dict(config_dict)

    def save(self, config_path: Path) -> None:
        """Save configuration to a YAML file."""
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_dict = self.model_dump(mode="json")

        with open(config_path, "w") as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False, sort_keys=False)


_config: Optional[SceneConfig] = None


def get_config() -> SceneConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = SceneConfig()
    return _config


def set_config(config: SceneConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
