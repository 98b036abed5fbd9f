"""
Configuration for Unacy.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from unacy.utils.exceptions import ConfigurationError

# Maximum number of edges in a composed conversion path
MAX_DEPTH = 5


class RegistryConfig(BaseModel):
    """Converter registry configuration."""

    max_depth: int = Field(default=MAX_DEPTH, ge=1)
    cache_enabled: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in working directory)

        Returns:
            Config instance

        Raises:
            ConfigurationError: If a variable holds an invalid value

        Environment variables:
            UNACY_MAX_DEPTH: Maximum edges in a composed conversion path
            UNACY_CACHE_ENABLED: Memoize resolved converters (true/false)
            UNACY_LOG_LEVEL: Log level
            UNACY_LOG_TO_FILE: Also write logs to rotating files
            UNACY_LOG_DIR: Directory for log files
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None or value == "":
                return default
            # Convert boolean strings
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        try:
            return cls(
                registry=RegistryConfig(
                    max_depth=get_env("UNACY_MAX_DEPTH", MAX_DEPTH),
                    cache_enabled=get_env("UNACY_CACHE_ENABLED", True),
                ),
                logging=LoggingConfig(
                    level=get_env("UNACY_LOG_LEVEL", "INFO"),
                    log_to_file=get_env("UNACY_LOG_TO_FILE", False),
                    log_dir=get_env("UNACY_LOG_DIR", "logs"),
                    file_rotation=get_env("UNACY_LOG_FILE_ROTATION", "10 MB"),
                    file_retention=get_env("UNACY_LOG_FILE_RETENTION", "7 days"),
                    compression=get_env("UNACY_LOG_COMPRESSION", "zip"),
                    serialize=get_env("UNACY_LOG_SERIALIZE", True),
                ),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment configuration: {e}") from e

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
            ConfigurationError: If YAML values fail validation
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        return cls._build(data, source=str(yaml_path))

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file)

        # Env values that differ from defaults override YAML sections
        final_dict = {**config_dict}
        default = cls()
        if env_config.registry != default.registry:
            final_dict["registry"] = env_config.registry.model_dump()
        if env_config.logging != default.logging:
            final_dict["logging"] = env_config.logging.model_dump()

        return cls._build(final_dict, source="yaml+env") if final_dict else env_config

    @classmethod
    def _build(cls, data: Any, source: str) -> "Config":
        """Validate a raw config mapping, raising ConfigurationError on bad input."""
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config from {source} must be a mapping", context={"source": source}
            )
        try:
            return cls(**data)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid configuration from {source}: {e}", context={"source": source}
            ) from e


# Default config instance
default_config = Config()
