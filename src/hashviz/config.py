"""Configuration loading utilities."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from hashviz.errors import InvalidArgument
from hashviz.hashing.base import HashFunctionId
from hashviz.hashing.registry import parse_hash_function_id, resolve_hash_function
from hashviz.probing.sequencer import parse_strategy
from hashviz.table.store import TableStore
from hashviz.utils.logging import get_logger

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}

    return config


def clamp_table_size(size: int, max_size: int = 100) -> int:
    """Clamp a requested table size into [1, max_size]."""
    return max(1, min(size, max_size))


@dataclass(frozen=True)
class EngineConfig:
    """Default settings for a visualizer session.

    Attributes:
        table_size: Number of slots/buckets
        strategy: "chaining" | "linear" | "quadratic" | "double"
        hash_function: Hash function id ("division", "midSquare", ...)
        max_table_size: Largest size the UI may request
        random_key_high: Exclusive upper bound of random keys
        log_level: "DEBUG" | "INFO" | "WARNING" | "ERROR"
    """

    table_size: int = 10
    strategy: str = "chaining"
    hash_function: str = "division"
    max_table_size: int = 100
    random_key_high: int = 1000
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate parameters."""
        for name in ("table_size", "max_table_size", "random_key_high"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidArgument(f"{name} must be a positive integer, got {value!r}")
        if self.table_size > self.max_table_size:
            raise InvalidArgument(
                f"table_size ({self.table_size}) must not exceed max_table_size "
                f"({self.max_table_size})"
            )
        parse_strategy(self.strategy)
        parse_hash_function_id(self.hash_function)
        if self.log_level not in LOG_LEVELS:
            raise InvalidArgument(
                f"log_level must be one of {list(LOG_LEVELS)}, got {self.log_level!r}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidArgument(f"Unknown config keys: {unknown}")
        return cls(**data)

    def create_store(self, custom_fn: Optional[Callable[[int, int], Any]] = None) -> TableStore:
        """
        Create an empty store with this configuration.

        Args:
            custom_fn: Callable used when hash_function is "custom"

        Returns:
            TableStore
        """
        hash_fn = resolve_hash_function(self.hash_function, custom_fn)
        return TableStore(self.table_size, self.strategy, hash_fn)

    def configure_logging(self) -> logging.Logger:
        """Attach a handler to the package logger at log_level."""
        return get_logger("hashviz", level=self.log_level)

    @property
    def uses_custom_hash(self) -> bool:
        return parse_hash_function_id(self.hash_function) is HashFunctionId.CUSTOM


def load_engine_config(config_path: Path) -> EngineConfig:
    """
    Load an EngineConfig from YAML.

    The file may hold the settings at top level or under an ``engine`` key.
    """
    config = load_config(config_path)
    if not isinstance(config, dict):
        raise InvalidArgument(f"Config root must be a mapping: {config_path}")
    return EngineConfig.from_dict(config.get("engine", config))
