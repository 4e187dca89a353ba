"""
Configuration handling for h3vertex.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class Options:
    """Processing options."""
    resolution: int = 1


@dataclass
class Config:
    """Configuration for h3vertex commands."""

    table_path: str = ""
    log_level: str = "INFO"
    log_dir: Optional[str] = "logs"
    options: Options = field(default_factory=Options)

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """Load configuration from YAML file."""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        options_data = data.pop('options', None) or {}
        options = Options(**options_data)

        return cls(
            table_path=data.get('table_path', ''),
            log_level=data.get('log_level', 'INFO'),
            log_dir=data.get('log_dir', 'logs'),
            options=options
        )

    @classmethod
    def from_args(
        cls,
        table_path: str,
        log_level: str = "INFO",
        log_dir: Optional[str] = "logs",
        **options_kwargs
    ) -> "Config":
        """Create configuration from CLI arguments."""
        options = Options(**{k: v for k, v in options_kwargs.items() if v is not None})
        return cls(
            table_path=table_path,
            log_level=log_level,
            log_dir=log_dir,
            options=options
        )

    def validate(self) -> None:
        """Validate configuration."""
        if not self.table_path:
            raise ValueError("table_path is required")

        table_file = Path(self.table_path)
        if not table_file.exists():
            raise FileNotFoundError(f"Grid table not found: {self.table_path}")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

        if not 1 <= self.options.resolution <= 15:
            raise ValueError(f"resolution must be 1-15, got {self.options.resolution}")
