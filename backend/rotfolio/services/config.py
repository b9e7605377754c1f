"""Configuration management and validation service."""

import os
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "ROTFOLIO_CONFIG"

DEFAULT_REFRESH_INTERVAL_SECONDS = 5


@dataclass
class ConfigValidationError:
    """Represents a configuration validation error."""
    path: str
    message: str


class ConfigValidationException(Exception):
    """Raised when config validation fails."""

    def __init__(self, errors: List[ConfigValidationError]):
        self.errors = errors
        messages = [f"{e.path}: {e.message}" for e in errors]
        super().__init__("Configuration validation failed:\n" + "\n".join(messages))


# Configuration schema definition
CONFIG_SCHEMA = {
    "coins": {
        "type": "dict",
        "required": False,
        "properties": {
            "addresses": {"type": "list", "required": False, "items": "str"},
        }
    },
    "polling": {
        "type": "dict",
        "required": False,
        "properties": {
            "refresh_interval_seconds": {"type": "int", "required": False, "min": 1},
        }
    },
    "sources": {
        "type": "dict",
        "required": False,
        "properties": {
            "pump_fun": {
                "type": "dict",
                "required": False,
                "properties": {
                    "base_url": {"type": "str", "required": False},
                }
            },
            "dexscreener": {
                "type": "dict",
                "required": False,
                "properties": {
                    "base_url": {"type": "str", "required": False},
                }
            },
            "request_timeout_seconds": {"type": "float", "required": False, "min": 0.1},
        }
    },
    "logging": {
        "type": "dict",
        "required": False,
        "properties": {
            "level": {"type": "str", "required": False, "options": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]},
            "format": {"type": "str", "required": False},
        }
    },
}

TYPE_MAP = {
    "str": str,
    "int": int,
    "float": (int, float),
    "bool": bool,
    "list": list,
    "dict": dict,
}


class ConfigService:
    """Service for loading and validating configuration."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize config service.

        Args:
            config_path: Path to config file. If None, uses $ROTFOLIO_CONFIG
                or config.yaml next to the backend directory.
        """
        if config_path is None:
            config_path = os.environ.get(CONFIG_PATH_ENV)
        if config_path is None:
            backend_dir = Path(__file__).parent.parent.parent
            config_path = str(backend_dir / "config.yaml")

        self.config_path = config_path
        self._config: Dict[str, Any] = {}

    def load_and_validate(self) -> Dict[str, Any]:
        """Load and validate the configuration file.

        Returns:
            Validated configuration dictionary.

        Raises:
            ConfigValidationException: If validation fails.
        """
        errors: List[ConfigValidationError] = []

        if not os.path.exists(self.config_path):
            logger.warning(f"Config file not found at {self.config_path}, using defaults")
            self._config = {}
            return self._config

        try:
            with open(self.config_path, 'r') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            errors.append(ConfigValidationError(
                path="",
                message=f"Invalid YAML syntax: {str(e)}"
            ))
            raise ConfigValidationException(errors)

        if config is None:
            config = {}

        if not isinstance(config, dict):
            errors.append(ConfigValidationError(
                path="",
                message=f"Config must be a dictionary, got {type(config).__name__}"
            ))
            raise ConfigValidationException(errors)

        errors.extend(self._validate_dict(config, CONFIG_SCHEMA, ""))

        if errors:
            raise ConfigValidationException(errors)

        self._config = config
        logger.info(f"Configuration loaded and validated from {self.config_path}")
        return config

    def _validate_dict(
        self,
        data: Dict[str, Any],
        schema: Dict[str, Any],
        path: str
    ) -> List[ConfigValidationError]:
        """Validate a dictionary against schema.

        Args:
            data: Data to validate
            schema: Schema to validate against
            path: Current path for error messages

        Returns:
            List of validation errors
        """
        errors = []

        for key in data:
            if key not in schema:
                errors.append(ConfigValidationError(
                    path=f"{path}.{key}" if path else key,
                    message=f"Unknown configuration key '{key}'"
                ))

        for key, prop_schema in schema.items():
            current_path = f"{path}.{key}" if path else key

            if key not in data:
                if prop_schema.get("required", False):
                    errors.append(ConfigValidationError(
                        path=current_path,
                        message="Required field missing"
                    ))
                continue

            errors.extend(self._validate_value(data[key], prop_schema, current_path))

        return errors

    def _validate_value(
        self,
        value: Any,
        schema: Dict[str, Any],
        path: str
    ) -> List[ConfigValidationError]:
        """Validate a single value against schema."""
        errors = []
        expected_type = schema.get("type")

        if expected_type == "dict":
            if not isinstance(value, dict):
                errors.append(ConfigValidationError(
                    path=path,
                    message=f"Expected dict, got {type(value).__name__}"
                ))
                return errors

            if "properties" in schema:
                errors.extend(self._validate_dict(value, schema["properties"], path))

        elif expected_type == "list":
            if not isinstance(value, list):
                errors.append(ConfigValidationError(
                    path=path,
                    message=f"Expected list, got {type(value).__name__}"
                ))
                return errors

            item_type = schema.get("items")
            if item_type in TYPE_MAP:
                for i, item in enumerate(value):
                    if not self._is_type(item, item_type):
                        errors.append(ConfigValidationError(
                            path=f"{path}[{i}]",
                            message=f"Expected {item_type}, got {type(item).__name__}"
                        ))

        elif expected_type in TYPE_MAP:
            if not self._is_type(value, expected_type):
                errors.append(ConfigValidationError(
                    path=path,
                    message=f"Expected {expected_type}, got {type(value).__name__}"
                ))
                return errors

            if expected_type in ("int", "float"):
                if "min" in schema and value < schema["min"]:
                    errors.append(ConfigValidationError(
                        path=path,
                        message=f"Value {value} is below minimum {schema['min']}"
                    ))
                if "max" in schema and value > schema["max"]:
                    errors.append(ConfigValidationError(
                        path=path,
                        message=f"Value {value} is above maximum {schema['max']}"
                    ))

            if "options" in schema and value not in schema["options"]:
                errors.append(ConfigValidationError(
                    path=path,
                    message=f"Value '{value}' not in allowed options: {schema['options']}"
                ))

        return errors

    @staticmethod
    def _is_type(value: Any, expected_type: str) -> bool:
        # bool is an int subclass
        if expected_type in ("int", "float") and isinstance(value, bool):
            return False
        return isinstance(value, TYPE_MAP[expected_type])

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value.

        Args:
            key: Dot-notation key (e.g., "polling.refresh_interval_seconds")
            default: Default value if not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @property
    def coin_addresses(self) -> List[str]:
        """Ordered mint addresses to rank."""
        return list(self.get("coins.addresses", []) or [])

    @property
    def refresh_interval_seconds(self) -> int:
        return self.get("polling.refresh_interval_seconds", DEFAULT_REFRESH_INTERVAL_SECONDS)


# Global config service instance
config_service = ConfigService()
