"""Message types and protocol constants shared by the membership client."""

from __future__ import annotations

import enum
from dataclasses import dataclass

# Elliptic curve used for the commutative cipher (ANSI X9.62 prime256v1).
CURVE_NAME = "prime256v1"

# Byte length of the encrypted id stored inside buckets.
STORED_ENCRYPTED_ID_BYTE_LENGTH = 13


class InternalError(Exception):
    """Raised when an internal cryptographic or decoding step fails."""


class HashType(enum.Enum):
    """Hash function applied to the non-sensitive part of an identifier."""

    HASH_TYPE_UNDEFINED = "HASH_TYPE_UNDEFINED"
    SHA256 = "SHA256"
    TEST_HASH_TYPE = "TEST_HASH_TYPE"


def _as_bytes(value: bytes | bytearray | str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


@dataclass(frozen=True)
class RlwePlaintextId:
    """An identifier split into a non-sensitive and a sensitive part."""

    non_sensitive_id: bytes = b""
    sensitive_id: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "non_sensitive_id", _as_bytes(self.non_sensitive_id))
        object.__setattr__(self, "sensitive_id", _as_bytes(self.sensitive_id))


@dataclass(frozen=True)
class EncryptedBucketsParameters:
    """Parameters describing how encrypted bucket ids are derived."""

    encrypted_bucket_id_length: int = 0


@dataclass(frozen=True)
class HashedBucketsParameters:
    """Parameters describing how hashed bucket ids are derived."""

    hashed_bucket_id_length: int = 0
    non_sensitive_id_hash_type: HashType = HashType.HASH_TYPE_UNDEFINED


@dataclass(frozen=True)
class ApiHashedBucketId:
    """Wire representation of a hashed bucket id."""

    hashed_bucket_id: bytes = b""
    bit_length: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "hashed_bucket_id", _as_bytes(self.hashed_bucket_id))


@dataclass(frozen=True)
class DoublyEncryptedId:
    """An id encrypted by the client paired with its server re-encryption."""

    queried_encrypted_id: bytes = b""
    doubly_encrypted_id: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "queried_encrypted_id", _as_bytes(self.queried_encrypted_id)
        )
        object.__setattr__(
            self, "doubly_encrypted_id", _as_bytes(self.doubly_encrypted_id)
        )