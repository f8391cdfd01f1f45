"""
Nonce account state.

A nonce account is a system-program owned account holding a durable
blockhash. Its data is a versioned, fixed 80 byte layout:

    version u32 | state u32 | authority [32] | durable nonce [32] | lamports_per_signature u64

Only an initialized state carries the authority, nonce and fee fields; an
uninitialized account is zero-filled after the two discriminants.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from ..core.codec import AccountDecoder, AccountEncoder, CodecError
from ..core.datatypes import SYSTEM_PROGRAM_ID, Hash, Pubkey
from ..core.errors import InvalidAccountState

logger = logging.getLogger(__name__)

NONCE_ACCOUNT_LENGTH = 80


class NonceVersion(IntEnum):
    LEGACY = 0
    CURRENT = 1


class NonceStateKind(IntEnum):
    UNINITIALIZED = 0
    INITIALIZED = 1


@dataclass(frozen=True)
class NonceData:
    """Contents of an initialized nonce account."""
    authority: Pubkey
    durable_nonce: Hash
    lamports_per_signature: int = 0

    @property
    def blockhash(self) -> Hash:
        return self.durable_nonce


@dataclass(frozen=True)
class NonceVersions:
    """Decoded nonce account data: layout version plus optional initialized data."""
    version: NonceVersion
    data: Optional[NonceData] = None

    @property
    def is_initialized(self) -> bool:
        return self.data is not None

    def encode(self) -> bytes:
        encoder = AccountEncoder().encode_u32(int(self.version))
        if self.data is None:
            encoder.encode_u32(NonceStateKind.UNINITIALIZED)
        else:
            (
                encoder.encode_u32(NonceStateKind.INITIALIZED)
                .encode_pubkey(self.data.authority)
                .encode_hash(self.data.durable_nonce)
                .encode_u64(self.data.lamports_per_signature)
            )
        return encoder.pad_to(NONCE_ACCOUNT_LENGTH).to_bytes()


def decode_nonce_versions(data: bytes) -> NonceVersions:
    """
    Decode raw nonce account data.

    Raises:
        InvalidAccountState: Unknown version or state discriminant, or
            data too short for the layout it announces.
    """
    decoder = AccountDecoder(data)
    try:
        version_tag = decoder.decode_u32()
        state_tag = decoder.decode_u32()
        try:
            version = NonceVersion(version_tag)
        except ValueError:
            raise InvalidAccountState(f"Unknown nonce account version: {version_tag}")

        if state_tag == NonceStateKind.UNINITIALIZED:
            return NonceVersions(version=version)
        if state_tag != NonceStateKind.INITIALIZED:
            raise InvalidAccountState(f"Unknown nonce state: {state_tag}")

        nonce_data = NonceData(
            authority=decoder.decode_pubkey(),
            durable_nonce=decoder.decode_hash(),
            lamports_per_signature=decoder.decode_u64(),
        )
    except CodecError as e:
        raise InvalidAccountState(f"Invalid nonce account data: {e}") from e

    return NonceVersions(version=version, data=nonce_data)


def check_account_identity(owner: Pubkey, data: bytes) -> None:
    """Reject accounts that cannot be nonce accounts before decoding them."""
    if owner != SYSTEM_PROGRAM_ID:
        raise InvalidAccountState(
            f"Invalid account owner: expected {SYSTEM_PROGRAM_ID}, got {owner}"
        )
    if not data:
        raise InvalidAccountState("Unexpected account data size: account is empty")


def data_from_account_data(data: bytes) -> NonceData:
    """
    Decode account data into initialized nonce data.

    Raises:
        InvalidAccountState: Empty data, undecodable data, or an
            uninitialized nonce account.
    """
    if not data:
        raise InvalidAccountState("Unexpected account data size: account is empty")
    versions = decode_nonce_versions(data)
    if versions.data is None:
        raise InvalidAccountState("Invalid state for operation: nonce account is uninitialized")
    return versions.data


def check_nonce_account(
    nonce_data: NonceData,
    nonce_authority: Pubkey,
    blockhash: Hash,
) -> None:
    """Verify a stored nonce against the blockhash and authority a transaction will use."""
    if nonce_data.durable_nonce != blockhash:
        raise InvalidAccountState(
            f"Nonce mismatch: account stores {nonce_data.durable_nonce}, transaction uses {blockhash}"
        )
    if nonce_data.authority != nonce_authority:
        raise InvalidAccountState(
            f"Invalid nonce authority: account expects {nonce_data.authority}, got {nonce_authority}"
        )
