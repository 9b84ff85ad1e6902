"""
Configuration schema for the demo driver.

Covers presentation and logging only. The shapes and dimension pairs the
demo runs are fixed in shapecalc.pipeline.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class DemoConfig:
    """
    Driver configuration.

    Immutable after construction (frozen dataclass), validated on creation.
    """

    log_level: str = "WARNING"
    rule_width: int = 60
    show_summary: bool = True

    def __post_init__(self):
        """Validate demo configuration."""
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {VALID_LOG_LEVELS}"
            )

        if not 10 <= self.rule_width <= 200:
            raise ValueError(
                f"rule_width must be in [10, 200], got {self.rule_width}"
            )

    @property
    def logging_level(self) -> int:
        """Numeric level for the logging module."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "DemoConfig":
        """
        Load configuration from YAML file.

        Missing keys fall back to defaults; an empty file yields the
        default configuration.

        Example YAML:
            log_level: "INFO"
            rule_width: 60
            show_summary: true

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML is invalid or has unknown keys
        """
        path = Path(yaml_path)

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise ValueError(
                f"Config root must be a mapping, got {type(data).__name__}"
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")

        return cls(**data)
