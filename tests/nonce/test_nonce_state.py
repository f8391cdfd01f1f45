"""
Nonce account state decoding tests
"""

import struct

import pytest

from blockhash_query.core.datatypes import SYSTEM_PROGRAM_ID, Hash, Pubkey
from blockhash_query.core.errors import InvalidAccountState
from blockhash_query.nonce.state import (
    NONCE_ACCOUNT_LENGTH,
    NonceData,
    NonceVersion,
    NonceVersions,
    check_account_identity,
    check_nonce_account,
    data_from_account_data,
    decode_nonce_versions,
)


def test_encoded_layout(nonce_account_bytes, nonce_authority, durable_nonce):
    assert len(nonce_account_bytes) == NONCE_ACCOUNT_LENGTH
    assert struct.unpack("<II", nonce_account_bytes[:8]) == (1, 1)
    assert nonce_account_bytes[8:40] == nonce_authority.raw
    assert nonce_account_bytes[40:72] == durable_nonce.raw
    assert struct.unpack("<Q", nonce_account_bytes[72:80]) == (5000,)


def test_decode_initialized(nonce_account_bytes, nonce_authority, durable_nonce):
    versions = decode_nonce_versions(nonce_account_bytes)
    assert versions.version == NonceVersion.CURRENT
    assert versions.is_initialized
    assert versions.data == NonceData(
        authority=nonce_authority, durable_nonce=durable_nonce, lamports_per_signature=5000
    )
    assert versions.data.blockhash == durable_nonce


def test_decode_uninitialized():
    data = struct.pack("<II", 0, 0) + bytes(72)
    versions = decode_nonce_versions(data)
    assert versions.version == NonceVersion.LEGACY
    assert not versions.is_initialized


@pytest.mark.parametrize(
    "data, message",
    [
        (struct.pack("<II", 2, 1) + bytes(72), "version"),
        (struct.pack("<II", 1, 5) + bytes(72), "state"),
        (struct.pack("<II", 1, 1) + bytes(20), "end of data"),
        (b"\x01\x00", "end of data"),
    ],
)
def test_decode_rejects_malformed(data, message):
    with pytest.raises(InvalidAccountState, match=message):
        decode_nonce_versions(data)


def test_data_from_account_data(nonce_account_bytes, durable_nonce):
    assert data_from_account_data(nonce_account_bytes).durable_nonce == durable_nonce


def test_data_from_account_data_rejects_uninitialized_and_empty():
    with pytest.raises(InvalidAccountState, match="uninitialized"):
        data_from_account_data(NonceVersions(version=NonceVersion.CURRENT).encode())
    with pytest.raises(InvalidAccountState, match="data size"):
        data_from_account_data(b"")


def test_check_account_identity(nonce_account_bytes):
    check_account_identity(SYSTEM_PROGRAM_ID, nonce_account_bytes)
    with pytest.raises(InvalidAccountState, match="owner"):
        check_account_identity(Pubkey(bytes([1] * 32)), nonce_account_bytes)
    with pytest.raises(InvalidAccountState, match="data size"):
        check_account_identity(SYSTEM_PROGRAM_ID, b"")


def test_check_nonce_account(nonce_account_bytes, nonce_authority, durable_nonce):
    nonce_data = data_from_account_data(nonce_account_bytes)
    check_nonce_account(nonce_data, nonce_authority, durable_nonce)

    with pytest.raises(InvalidAccountState, match="mismatch"):
        check_nonce_account(nonce_data, nonce_authority, Hash(bytes([8] * 32)))
    with pytest.raises(InvalidAccountState, match="authority"):
        check_nonce_account(nonce_data, Pubkey(bytes([10] * 32)), durable_nonce)
