# blockhash_query/config/settings.py

import logging
import re
from typing import Optional

import coloredlogs
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ANSI color codes
RED = "\033[91m"
YELLOW = "\033[93m"
RESET = "\033[0m"

# Base58 encoded 32-byte values (blockhashes, pubkeys) are 32-44 chars long
BASE58_ID_REGEX = re.compile(r"(\b[1-9A-HJ-NP-Za-km-z]{32,44}\b)")
RESOLVED_REGEX = re.compile(r"(\bResolved\b)", re.IGNORECASE)

COMMITMENT_LEVELS = ("processed", "confirmed", "finalized")

CLUSTER_MONIKERS = {
    "mainnet-beta": "https://api.mainnet-beta.solana.com",
    "m": "https://api.mainnet-beta.solana.com",
    "testnet": "https://api.testnet.solana.com",
    "t": "https://api.testnet.solana.com",
    "devnet": "https://api.devnet.solana.com",
    "d": "https://api.devnet.solana.com",
    "localhost": "http://localhost:8899",
    "l": "http://localhost:8899",
}


def normalize_rpc_url(value: str) -> str:
    """Expand a cluster moniker to its URL, pass full URLs through"""
    value_str = str(value).strip()
    if value_str.startswith("http://") or value_str.startswith("https://"):
        return value_str
    if value_str.lower() in CLUSTER_MONIKERS:
        return CLUSTER_MONIKERS[value_str.lower()]
    raise ValueError(f"Invalid RPC URL or cluster moniker: '{value_str}'")


class HighlightFormatter(coloredlogs.ColoredFormatter):
    """Custom formatter to highlight 'resolved' and base58 hashes/addresses."""

    def format(self, record):
        formatted_message = super().format(record)
        try:
            if RESOLVED_REGEX.search(formatted_message):
                formatted_message = RESOLVED_REGEX.sub(
                    rf"{RED}\1{RESET}", formatted_message
                )

            def replace_id(match):
                id_str = match.group(1)
                if RED in id_str:
                    return id_str
                return f"{YELLOW}{id_str}{RESET}"

            formatted_message = BASE58_ID_REGEX.sub(replace_id, formatted_message)

        except re.error as format_err:
            # Log through the root logger to avoid recursing into this formatter
            logging.getLogger().error(f"Error in HighlightFormatter: {format_err}")

        return formatted_message


class Settings(BaseSettings):
    """
    Central configuration, loaded from environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BHQ_",
    )

    # --- Node connection ---
    RPC_URL: str = Field(
        default="https://api.devnet.solana.com",
        description="JSON-RPC URL of the node used for online lookups",
    )
    COMMITMENT: str = Field(
        default="confirmed",
        description="Commitment level for node queries (processed/confirmed/finalized)",
    )
    HTTP_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="HTTP timeout for a single node request in seconds",
    )

    # --- CLI config file ---
    CONFIG_FILE: Optional[str] = Field(
        default=None,
        description="Path to a YAML CLI config file (json_rpc_url, commitment)",
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("COMMITMENT", mode="before")
    def validate_commitment(cls, value: Optional[str]):
        if value is None:
            return "confirmed"
        normalized = str(value).lower().strip()
        if normalized not in COMMITMENT_LEVELS:
            raise ValueError(
                f"Invalid commitment '{value}', expected one of {', '.join(COMMITMENT_LEVELS)}"
            )
        return normalized

    @field_validator("RPC_URL", mode="before")
    def validate_rpc_url(cls, value: Optional[str]):
        if value is None:
            return CLUSTER_MONIKERS["devnet"]
        return normalize_rpc_url(value)


# --- Instance used throughout the package ---
try:
    settings = Settings()  # type: ignore
except Exception as e:
    print(f"CRITICAL: Error loading settings: {e}. Using default values where possible.")
    settings = Settings.model_construct()  # type: ignore

# --- LOGGING CONFIGURATION ---
try:
    log_level_str = settings.LOG_LEVEL.upper()
    if log_level_str not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        log_level_str = "INFO"
    LOG_LEVEL_CONFIG = getattr(logging, log_level_str)
except AttributeError:
    print("Warning: Could not read LOG_LEVEL from settings. Defaulting to INFO.")
    LOG_LEVEL_CONFIG = logging.INFO

DEFAULT_LEVEL_STYLES = {
    "debug": {"color": "green"},
    "info": {"color": "cyan"},
    "warning": {"color": "yellow"},
    "error": {"color": "red"},
    "critical": {"bold": True, "color": "red"},
}
DEFAULT_FIELD_STYLES = {
    "asctime": {"color": "magenta"},
    "levelname": {"bold": True, "color": "blue"},
    "name": {"color": "white"},
}
DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

highlight_formatter = HighlightFormatter(
    fmt=DEFAULT_FMT,
    level_styles=DEFAULT_LEVEL_STYLES,
    field_styles=DEFAULT_FIELD_STYLES,
)

# Package loggers write through one coloredlogs handler using the highlight formatter
package_logger = logging.getLogger("blockhash_query")
for handler in package_logger.handlers[:]:
    package_logger.removeHandler(handler)
stderr_handler = coloredlogs.StandardErrorHandler()
stderr_handler.setFormatter(highlight_formatter)
package_logger.addHandler(stderr_handler)
package_logger.setLevel(LOG_LEVEL_CONFIG)

logger = logging.getLogger(__name__)
logger.debug(
    f"Settings loaded. Log level set to {logging.getLevelName(LOG_LEVEL_CONFIG)}."
)
