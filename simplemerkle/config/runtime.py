"""
Runtime Configuration

Central configuration for hash selection, logging and CLI output.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from simplemerkle.crypto.hashing import DEFAULT_HASH_ALGORITHM, Hasher, get_hasher
from simplemerkle.schemas.errors import ConfigException

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "SIMPLEMERKLE_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
OUTPUT_FORMATS = ("human", "json")


@dataclass
class RuntimeConfig:
    """
    Runtime configuration for simplemerkle.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    log_level: str = "INFO"
    log_file: Optional[str] = None
    output_format: str = "human"

    def __post_init__(self) -> None:
        for name in ("hash_algorithm", "log_level", "log_file", "output_format"):
            value = getattr(self, name)
            if name == "log_file" and value is None:
                continue
            if not isinstance(value, str):
                raise ConfigException(
                    message=f"{name} must be a string, got {type(value).__name__}: {value!r}",
                    field_path=name,
                )
        self.log_level = self.log_level.upper()
        self.output_format = self.output_format.lower()
        if self.log_level not in LOG_LEVELS:
            raise ConfigException(
                message=f"Invalid log level: {self.log_level}",
                field_path="log_level",
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigException(
                message=f"Invalid output format: {self.output_format}",
                field_path="output_format",
            )
        # Fail early on unknown algorithms
        self.hasher()

    def hasher(self) -> Hasher:
        """
        Resolve the configured hash function.

        Raises:
            UnknownHashAlgorithmException: If hash_algorithm is not registered
        """
        return get_hasher(self.hash_algorithm)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - SIMPLEMERKLE_HASH_ALGORITHM: blake2b256, sha256 or sha3_256
        - SIMPLEMERKLE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR
        - SIMPLEMERKLE_LOG_FILE: path of an additional log file
        - SIMPLEMERKLE_OUTPUT_FORMAT: human or json
        """
        overrides: dict[str, Any] = {}
        for key in ("hash_algorithm", "log_level", "log_file", "output_format"):
            value = os.getenv(f"{ENV_PREFIX}{key.upper()}")
            if value:
                overrides[key] = value
        return overrides

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigException(
                    message=f"Invalid YAML in config file {path}: {e}",
                    details={"path": str(path)},
                ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigException(
                message=f"Config file must contain a mapping: {path}",
                details={"path": str(path)},
            )
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        unknown = set(data) - {"hash_algorithm", "log_level", "log_file", "output_format"}
        if unknown:
            raise ConfigException(
                message=f"Unknown configuration keys: {sorted(unknown)}",
                details={"keys": sorted(unknown)},
            )
        return cls(**data)

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for key, value in overrides.items():
            setattr(new_config, key, value)
        new_config.__post_init__()
        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "hash_algorithm": self.hash_algorithm,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "output_format": self.output_format,
        }


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings. Without an explicit
    path the default locations are searched in order.
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = RuntimeConfig.from_yaml(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = RuntimeConfig.from_yaml(default_path)
                break

    return config.with_env_overrides()


def default_config_paths() -> list[Path]:
    return [
        Path.cwd() / "simplemerkle.yaml",
        Path.cwd() / ".simplemerkle.yaml",
        Path.home() / ".config" / "simplemerkle" / "config.yaml",
    ]


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return """# simplemerkle configuration
# Environment variables (SIMPLEMERKLE_* prefix) override these values.

# Hash function for leaves and internal nodes: blake2b256, sha256, sha3_256
hash_algorithm: blake2b256

# Logging
log_level: INFO
log_file: null

# CLI output: human or json
output_format: human
"""

