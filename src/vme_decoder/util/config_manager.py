import logging
import os
import re
from typing import Any

import yaml
from pydantic import ValidationError

from vme_decoder.exception import ConfigError
from vme_decoder.schema.decoder_config_schema import DecoderConfig

logger = logging.getLogger("ConfigManager")

_ENV_PATTERN = re.compile(r"\$\{(\w+)(?::-([^\}]*))?\}")


class ConfigManager:

    @staticmethod
    def load_yaml_file(path: str) -> dict:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}", path=path) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}", path=path) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping at top level", path=path)
        return data

    @staticmethod
    def load_decoder_config(config_path: str | None = None) -> DecoderConfig:
        """Load and validate decoder configuration. Defaults apply when no path is given."""
        if not config_path:
            return DecoderConfig()

        raw_config = ConfigManager.resolve_env_vars(ConfigManager.load_yaml_file(config_path))
        try:
            config = DecoderConfig(**raw_config)
        except ValidationError as e:
            raise ConfigError(f"Invalid decoder config: {e}", path=config_path) from e

        logger.info(f"[CONFIG] Loaded decoder config from {config_path}")
        return config

    @staticmethod
    def resolve_env_vars(data: Any) -> Any:
        """Recursively resolve ${VAR} / ${VAR:-default} string values."""
        if isinstance(data, dict):
            return {k: ConfigManager.resolve_env_vars(v) for k, v in data.items()}
        if isinstance(data, list):
            return [ConfigManager.resolve_env_vars(v) for v in data]
        if isinstance(data, str):
            return ConfigManager.parse_env_var_with_default(data)
        return data

    @staticmethod
    def parse_env_var_with_default(value: str) -> bool | int | float | str | None:
        match = _ENV_PATTERN.fullmatch(value.strip())  # Match ${VAR_NAME:-default} or ${VAR_NAME}
        if not match:
            return value

        var_name = match.group(1)
        default_value = match.group(2)

        resolved_value = os.getenv(var_name) or default_value
        if resolved_value is not None:
            return ConfigManager._parse_value_by_type(resolved_value)
        return None

    @staticmethod
    def _parse_value_by_type(value: str) -> bool | int | float | str:
        if value.lower() in ["true", "false"]:
            return value.lower() == "true"
        elif ConfigManager._is_int(value):
            return int(value)
        elif ConfigManager._is_float(value):
            return float(value)
        else:
            return value

    @staticmethod
    def _is_int(value: str) -> bool:
        try:
            int(value)
            return True
        except ValueError:
            return False

    @staticmethod
    def _is_float(value: str) -> bool:
        try:
            float(value)
            return True
        except ValueError:
            return False
