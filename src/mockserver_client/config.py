"""
MockServer Client Configuration

Settings for the default requests-based transport.
"""

import logging
from dataclasses import dataclass, fields
from typing import Dict, Any

import yaml


@dataclass
class TransportConfig:
    """Configuration for the default HTTP transport."""

    # Network behavior
    timeout: float = 30.0  # Seconds, applied to connect and read
    verify_ssl: bool = True

    # Connection pool (per host)
    pool_connections: int = 10
    pool_maxsize: int = 10

    # Logging
    log_level: str = "warning"

    def __post_init__(self):
        if not isinstance(self.log_level, str) or not isinstance(
            logging.getLevelName(self.log_level.upper()), int
        ):
            raise ValueError(
                f"Invalid log_level {self.log_level!r}; "
                f"expected one of debug, info, warning, error, critical"
            )

    @property
    def level(self) -> int:
        """Numeric logging level for log_level."""
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransportConfig':
        """Create config from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'TransportConfig':
        """Load config from YAML file."""
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})
