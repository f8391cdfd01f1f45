"""
Fixed-layout little endian account data codec
Encoding/decoding helpers for on-chain account state (bincode-style layout)
"""

import struct
import logging

from .datatypes import Hash, Pubkey

logger = logging.getLogger(__name__)


class CodecError(Exception):
    """Account data serialization/deserialization error"""

    pass


class AccountEncoder:
    """Encoder for fixed-layout account data"""

    def __init__(self):
        self.buffer = bytearray()

    def encode_u32(self, value: int) -> "AccountEncoder":
        """Encode 32-bit unsigned integer (little endian)"""
        if not (0 <= value <= 4294967295):
            raise CodecError(f"u32 value out of range: {value}")
        self.buffer.extend(struct.pack("<I", value))
        return self

    def encode_u64(self, value: int) -> "AccountEncoder":
        """Encode 64-bit unsigned integer (little endian)"""
        if not (0 <= value <= 18446744073709551615):
            raise CodecError(f"u64 value out of range: {value}")
        self.buffer.extend(struct.pack("<Q", value))
        return self

    def encode_pubkey(self, pubkey: Pubkey) -> "AccountEncoder":
        self.buffer.extend(pubkey.raw)
        return self

    def encode_hash(self, value: Hash) -> "AccountEncoder":
        self.buffer.extend(value.raw)
        return self

    def pad_to(self, length: int) -> "AccountEncoder":
        """Zero-fill up to ``length`` bytes"""
        if len(self.buffer) > length:
            raise CodecError(f"Encoded data already {len(self.buffer)} bytes, cannot pad to {length}")
        self.buffer.extend(bytes(length - len(self.buffer)))
        return self

    def to_bytes(self) -> bytes:
        """Get encoded bytes"""
        return bytes(self.buffer)


class AccountDecoder:
    """Decoder for fixed-layout account data"""

    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    def _take(self, size: int, what: str) -> bytes:
        if self.offset + size > len(self.data):
            raise CodecError(f"Unexpected end of data while decoding {what}")
        chunk = self.data[self.offset : self.offset + size]
        self.offset += size
        return chunk

    def decode_u32(self) -> int:
        """Decode 32-bit unsigned integer (little endian)"""
        return struct.unpack("<I", self._take(4, "u32"))[0]

    def decode_u64(self) -> int:
        """Decode 64-bit unsigned integer (little endian)"""
        return struct.unpack("<Q", self._take(8, "u64"))[0]

    def decode_pubkey(self) -> Pubkey:
        return Pubkey(bytes(self._take(32, "pubkey")))

    def decode_hash(self) -> Hash:
        return Hash(bytes(self._take(32, "hash")))

    def remaining_bytes(self) -> int:
        """Get number of remaining bytes"""
        return len(self.data) - self.offset
