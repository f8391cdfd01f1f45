"""
Configuration loader for the blockhash query CLI
Loads the YAML CLI config file (json_rpc_url, commitment)
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .settings import COMMITMENT_LEVELS, normalize_rpc_url, settings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "solana" / "cli" / "config.yml"


class ConfigError(Exception):
    """Configuration loading error"""

    pass


class CliConfig(BaseModel):
    """CLI config file model"""

    json_rpc_url: str = settings.RPC_URL
    commitment: str = settings.COMMITMENT

    @field_validator("commitment")
    @classmethod
    def validate_commitment(cls, value: str) -> str:
        normalized = value.lower().strip()
        if normalized not in COMMITMENT_LEVELS:
            raise ValueError(f"Invalid commitment '{value}'")
        return normalized


def _load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Load YAML configuration file, empty dict when it does not exist"""
    if not file_path.exists():
        logger.debug(f"Config file not found: {file_path}")
        return {}

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading config {file_path}: {e}")
        raise ConfigError(f"Failed to load {file_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {file_path} must contain a mapping")
    logger.debug(f"Loaded config: {file_path}")
    return data


def load_cli_config(config_file: Optional[Union[str, Path]] = None) -> CliConfig:
    """
    Load the CLI config file.

    Args:
        config_file: Path to the YAML file. Falls back to ``settings.CONFIG_FILE``
            and then to the default CLI config location.

    Returns:
        CliConfig: Parsed config, defaults for any missing key.

    Raises:
        ConfigError: If the file exists but cannot be read or validated.
    """
    path = Path(config_file or settings.CONFIG_FILE or DEFAULT_CONFIG_FILE).expanduser()
    data = _load_yaml_file(path)
    known = {key: data[key] for key in CliConfig.model_fields if key in data}
    try:
        return CliConfig(**known)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e


def resolve_connection(
    url: Optional[str] = None,
    commitment: Optional[str] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> Dict[str, str]:
    """Pick url and commitment: explicit value > config file > settings"""
    config = load_cli_config(config_file)
    try:
        rpc_url = normalize_rpc_url(url or config.json_rpc_url)
    except ValueError as e:
        raise ConfigError(str(e)) from e
    return {
        "url": rpc_url,
        "commitment": commitment or config.commitment,
    }
