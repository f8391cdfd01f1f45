from .state import (
    NONCE_ACCOUNT_LENGTH,
    NonceData,
    NonceStateKind,
    NonceVersion,
    NonceVersions,
    check_account_identity,
    check_nonce_account,
    data_from_account_data,
    decode_nonce_versions,
)

__all__ = [
    "NONCE_ACCOUNT_LENGTH",
    "NonceData",
    "NonceStateKind",
    "NonceVersion",
    "NonceVersions",
    "check_account_identity",
    "check_nonce_account",
    "data_from_account_data",
    "decode_nonce_versions",
]
