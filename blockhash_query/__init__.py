"""
Blockhash selection and resolution for online and offline transaction signing.
"""

from .core.datatypes import Hash, Pubkey
from .core.errors import (
    AccountNotFound,
    BlockhashQueryError,
    InvalidAccountState,
    InvalidModeCombination,
    NetworkUnavailable,
)
from .core.resolution import (
    DurableNonce,
    FeeCalculator,
    FixedHash,
    LiveLookup,
    ResolutionMode,
    ResolvedBlockhash,
    resolve,
    resolve_blockhash,
    select,
)

__version__ = "0.1.0"

__all__ = [
    "Hash",
    "Pubkey",
    "AccountNotFound",
    "BlockhashQueryError",
    "InvalidAccountState",
    "InvalidModeCombination",
    "NetworkUnavailable",
    "DurableNonce",
    "FeeCalculator",
    "FixedHash",
    "LiveLookup",
    "ResolutionMode",
    "ResolvedBlockhash",
    "resolve",
    "resolve_blockhash",
    "select",
]
