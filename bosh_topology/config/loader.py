"""YAML loading with environment variable substitution."""

import yaml
import os
import re
from pathlib import Path
from typing import Any
from .models import CollectorSystemConfig

ENV_PLACEHOLDER = re.compile(r'\$\{(\w+)\}')


class ConfigLoader:
    """Load collector configuration and other YAML documents."""

    @staticmethod
    def read_yaml(path: str, kind: str = "Configuration") -> Any:
        """
        Parse a YAML file, treating an empty file as an empty mapping.

        Args:
            path: Path to YAML file
            kind: Document kind used in the not-found message

        Raises:
            FileNotFoundError: If the file doesn't exist
            yaml.YAMLError: If YAML parsing fails
        """
        yaml_file = Path(path)
        if not yaml_file.exists():
            raise FileNotFoundError(f"{kind} file not found: {path}")

        with open(yaml_file, 'r') as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def load_from_file(config_path: str) -> CollectorSystemConfig:
        """
        Load configuration, substituting ${ENV_VAR} placeholders before validation.

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML parsing fails
            pydantic.ValidationError: If configuration validation fails
        """
        raw_config = ConfigLoader.read_yaml(config_path)
        return CollectorSystemConfig(**ConfigLoader.substitute_env_vars(raw_config))

    @staticmethod
    def substitute_env_vars(obj: Any) -> Any:
        """Recursively replace ${VAR} in strings; unset variables become empty."""
        if isinstance(obj, str):
            return ENV_PLACEHOLDER.sub(lambda m: os.getenv(m.group(1), ''), obj)

        elif isinstance(obj, dict):
            return {k: ConfigLoader.substitute_env_vars(v) for k, v in obj.items()}

        elif isinstance(obj, list):
            return [ConfigLoader.substitute_env_vars(item) for item in obj]

        return obj
