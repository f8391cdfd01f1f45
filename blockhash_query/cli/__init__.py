from .main import cli, main
from .options import (
    HASH,
    PUBKEY,
    blockhash_option,
    blockhash_query_from_options,
    nonce_authority_option,
    nonce_option,
    offline_options,
    sign_only_option,
)

__all__ = [
    "cli",
    "main",
    "HASH",
    "PUBKEY",
    "blockhash_option",
    "blockhash_query_from_options",
    "nonce_authority_option",
    "nonce_option",
    "offline_options",
    "sign_only_option",
]
