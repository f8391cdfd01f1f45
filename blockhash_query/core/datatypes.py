# blockhash_query/core/datatypes.py
"""
Core data structures shared across the package: 32-byte hashes and public keys
rendered as base58 strings.
"""
from dataclasses import dataclass

import base58

HASH_BYTES = 32
PUBKEY_BYTES = 32


def _decode_base58_32(value: str, kind: str) -> bytes:
    if not isinstance(value, str) or not value:
        raise ValueError(f"Invalid {kind}: empty value")
    # 32 bytes never need more than 44 base58 characters
    if len(value) > 44:
        raise ValueError(f"Invalid {kind} '{value}': too long")
    try:
        raw = base58.b58decode(value)
    except ValueError as e:
        raise ValueError(f"Invalid {kind} '{value}': {e}") from e
    if len(raw) != 32:
        raise ValueError(f"Invalid {kind} '{value}': expected 32 bytes, got {len(raw)}")
    return raw


@dataclass(frozen=True)
class Hash:
    """A 32-byte blockhash or durable nonce value."""
    raw: bytes

    def __post_init__(self):
        if len(self.raw) != HASH_BYTES:
            raise ValueError(f"Hash must be {HASH_BYTES} bytes, got {len(self.raw)}")

    @classmethod
    def from_string(cls, value: str) -> "Hash":
        return cls(_decode_base58_32(value, "hash"))

    @classmethod
    def default(cls) -> "Hash":
        return cls(bytes(HASH_BYTES))

    def __str__(self) -> str:
        return base58.b58encode(self.raw).decode("ascii")

    def __repr__(self) -> str:
        return f"Hash({self})"


@dataclass(frozen=True)
class Pubkey:
    """A 32-byte account address."""
    raw: bytes

    def __post_init__(self):
        if len(self.raw) != PUBKEY_BYTES:
            raise ValueError(f"Pubkey must be {PUBKEY_BYTES} bytes, got {len(self.raw)}")

    @classmethod
    def from_string(cls, value: str) -> "Pubkey":
        return cls(_decode_base58_32(value, "pubkey"))

    @classmethod
    def default(cls) -> "Pubkey":
        return cls(bytes(PUBKEY_BYTES))

    def __str__(self) -> str:
        return base58.b58encode(self.raw).decode("ascii")

    def __repr__(self) -> str:
        return f"Pubkey({self})"


# Owner of every nonce account
SYSTEM_PROGRAM_ID = Pubkey.default()
