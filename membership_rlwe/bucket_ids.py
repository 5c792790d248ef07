"""Encrypted and hashed bucket identifiers."""

from __future__ import annotations

from dataclasses import dataclass

from membership_rlwe.bits import is_valid, truncate, truncate_as_uint32
from membership_rlwe.crypto_utils import hash_encrypted_id
from membership_rlwe.messages import (
    ApiHashedBucketId,
    EncryptedBucketsParameters,
    HashedBucketsParameters,
    InternalError,
    RlwePlaintextId,
)
from membership_rlwe.rlwe_id_utils import (
    hash_nonsensitive_id_with_salt,
    hash_rlwe_plaintext_id,
)


@dataclass(frozen=True)
class EncryptedBucketId:
    """Bucket id derived from the server-encrypted form of an identifier.

    ``data`` holds the leftmost ``bit_length`` bits, rounded up to whole bytes
    with the unused trailing bits set to zero.
    """

    data: bytes
    bit_length: int

    @classmethod
    def create(cls, data: bytes, bit_length: int) -> EncryptedBucketId:
        """Build from raw bytes; raises ValueError if they do not fit ``bit_length``."""
        data = bytes(data)
        if not is_valid(data, bit_length):
            raise ValueError("Invalid bit_length.")
        return cls(data, bit_length)

    @classmethod
    def from_encrypted_id(
        cls, encrypted_id: bytes, params: EncryptedBucketsParameters
    ) -> EncryptedBucketId:
        """Hash an encrypted id and truncate it to the configured length."""
        hashed = hash_encrypted_id(encrypted_id)
        length = params.encrypted_bucket_id_length
        return cls.create(truncate(hashed, length), length)

    @classmethod
    def from_plaintext_id(
        cls,
        plaintext_id: RlwePlaintextId,
        params: EncryptedBucketsParameters,
        ec_cipher,
    ) -> EncryptedBucketId:
        """Encrypt ``plaintext_id`` with ``ec_cipher`` and derive its bucket id.

        ``ec_cipher`` must provide ``encrypt(bytes) -> bytes``.
        """
        if ec_cipher is None:
            raise ValueError("ECCipher must be non-null.")
        encrypted_id = ec_cipher.encrypt(hash_rlwe_plaintext_id(plaintext_id))
        return cls.from_encrypted_id(encrypted_id, params)

    def to_uint32(self) -> int:
        """The bucket id as an unsigned integer; raises InternalError beyond 32 bits."""
        if self.bit_length > 32:
            raise InternalError("Bit length exceeds 32 bits.")
        return truncate_as_uint32(self.data, self.bit_length)


def _is_empty(data: bytes, bit_length: int) -> bool:
    return not data and bit_length == 0


@dataclass(frozen=True)
class HashedBucketId:
    """Bucket id derived from a salted hash of the non-sensitive id.

    An empty id with zero bit length is allowed for use cases that do not
    bucket by hashed id.
    """

    data: bytes
    bit_length: int

    @classmethod
    def create(cls, data: bytes, bit_length: int) -> HashedBucketId:
        """Build from raw bytes; raises ValueError if they do not fit ``bit_length``."""
        data = bytes(data)
        if not _is_empty(data, bit_length) and not is_valid(data, bit_length):
            raise ValueError("Invalid bit_length.")
        return cls(data, bit_length)

    @classmethod
    def from_plaintext_id(
        cls, plaintext_id: RlwePlaintextId, params: HashedBucketsParameters
    ) -> HashedBucketId:
        """Hash the non-sensitive id and truncate it to the configured length."""
        length = params.hashed_bucket_id_length
        if length == 0:
            return cls.create(b"", 0)
        hashed = hash_nonsensitive_id_with_salt(
            plaintext_id.non_sensitive_id, params.non_sensitive_id_hash_type
        )
        return cls.create(truncate(hashed, length), length)

    @classmethod
    def from_api_proto(cls, api_hashed_bucket_id: ApiHashedBucketId) -> HashedBucketId:
        """Build from the wire form; raises ValueError if it is inconsistent."""
        data = api_hashed_bucket_id.hashed_bucket_id
        bit_length = api_hashed_bucket_id.bit_length
        if not _is_empty(data, bit_length) and not is_valid(data, bit_length):
            raise ValueError("Invalid API HashedBucketId proto.")
        return cls(data, bit_length)

    def to_api_proto(self) -> ApiHashedBucketId:
        """The wire form of this bucket id."""
        return ApiHashedBucketId(hashed_bucket_id=self.data, bit_length=self.bit_length)