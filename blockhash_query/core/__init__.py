"""
Core types for blockhash selection and resolution.
"""

from .datatypes import Hash, Pubkey, SYSTEM_PROGRAM_ID
from .errors import (
    AccountNotFound,
    BlockhashQueryError,
    InvalidAccountState,
    InvalidModeCombination,
    NetworkUnavailable,
)

__all__ = [
    "Hash",
    "Pubkey",
    "SYSTEM_PROGRAM_ID",
    "AccountNotFound",
    "BlockhashQueryError",
    "InvalidAccountState",
    "InvalidModeCombination",
    "NetworkUnavailable",
]
