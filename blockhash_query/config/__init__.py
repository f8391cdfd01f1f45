from .settings import settings, logger
from .config_loader import CliConfig, ConfigError, load_cli_config, resolve_connection

__all__ = [
    "settings",
    "logger",
    "CliConfig",
    "ConfigError",
    "load_cli_config",
    "resolve_connection",
]
