import hashlib

import pytest

from membership_rlwe.bits import is_valid
from membership_rlwe.bucket_ids import EncryptedBucketId, HashedBucketId
from membership_rlwe.messages import (
    ApiHashedBucketId,
    EncryptedBucketsParameters,
    HashedBucketsParameters,
    HashType,
    InternalError,
    RlwePlaintextId,
)
from membership_rlwe.rlwe_id_utils import hash_rlwe_plaintext_id


class _FakeCipher:
    """Deterministic stand-in for a commutative cipher."""

    def __init__(self, key: bytes) -> None:
        self._key = key

    def encrypt(self, data: bytes) -> bytes:
        return hashlib.sha256(self._key + data).digest() + b"\x02"


# EncryptedBucketId


def test_encrypted_create_error():
    with pytest.raises(ValueError, match="Invalid bit_length."):
        EncryptedBucketId.create(b"abcd", 33)


def test_encrypted_create_success():
    bucket = EncryptedBucketId.create(b"abcd", 32)
    assert bucket.data == b"abcd"
    assert bucket.bit_length == 32


def test_encrypted_create_with_hashing_success():
    params = EncryptedBucketsParameters(encrypted_bucket_id_length=14)
    plaintext_id = RlwePlaintextId(non_sensitive_id=b"nsid", sensitive_id=b"sid")
    cipher = _FakeCipher(b"k1")
    encrypted_id = cipher.encrypt(hash_rlwe_plaintext_id(plaintext_id))

    bucket1 = EncryptedBucketId.from_plaintext_id(plaintext_id, params, cipher)
    bucket2 = EncryptedBucketId.from_encrypted_id(encrypted_id, params)
    assert bucket1 == bucket2
    assert bucket1.bit_length == 14
    assert len(bucket1.data) == 2
    assert is_valid(bucket1.data, 14)


def test_encrypted_create_with_hashing_error():
    params = EncryptedBucketsParameters(encrypted_bucket_id_length=14)
    bad_params = EncryptedBucketsParameters(encrypted_bucket_id_length=257)
    plaintext_id = RlwePlaintextId(
        non_sensitive_id=b"nsid-test", sensitive_id=b"sid-test"
    )
    cipher = _FakeCipher(b"k2")

    with pytest.raises(ValueError, match="non-null"):
        EncryptedBucketId.from_plaintext_id(plaintext_id, params, None)
    with pytest.raises(ValueError, match="Truncation bit length out of bounds."):
        EncryptedBucketId.from_plaintext_id(plaintext_id, bad_params, cipher)


def test_encrypted_to_uint32_error():
    bucket = EncryptedBucketId.create(b"\xff\xff\xff\xff\xff", 40)
    with pytest.raises(InternalError, match="Bit length exceeds 32 bits."):
        bucket.to_uint32()


def test_encrypted_to_uint32_success():
    bucket = EncryptedBucketId.create(b"\xff\xff\xff\xff", 32)
    assert bucket.to_uint32() == (1 << 32) - 1


def test_encrypted_to_uint32_partial_bits():
    bucket = EncryptedBucketId.create(b"\x01\x01\xfc", 22)
    assert bucket.to_uint32() == 16511


def test_encrypted_equals_false():
    assert EncryptedBucketId.create(b"abcd", 32) != EncryptedBucketId.create(
        b"Abcd", 32
    )


def test_encrypted_equals_true():
    first = EncryptedBucketId.create(b"abcd", 32)
    second = EncryptedBucketId.create(b"abcd", 32)
    assert first == second
    assert hash(first) == hash(second)


# HashedBucketId


def test_hashed_create_error():
    with pytest.raises(ValueError, match="Invalid bit_length."):
        HashedBucketId.create(b"abcd", 33)


def test_hashed_create_success():
    bucket = HashedBucketId.create(b"abcd", 32)
    assert bucket.data == b"abcd"
    assert bucket.bit_length == 32


def test_hashed_create_from_api_proto_error():
    with pytest.raises(ValueError, match="Invalid API HashedBucketId proto."):
        HashedBucketId.from_api_proto(ApiHashedBucketId(b"abcd", 33))


def test_hashed_create_from_api_proto_empty():
    bucket = HashedBucketId.from_api_proto(ApiHashedBucketId(b"", 0))
    assert bucket == HashedBucketId.create(b"", 0)


def test_hashed_create_from_api_proto_success():
    bucket = HashedBucketId.from_api_proto(ApiHashedBucketId(b"abcd", 32))
    assert bucket.data == b"abcd"
    assert bucket.bit_length == 32


def test_hashed_create_with_hashing_success():
    params = HashedBucketsParameters(
        hashed_bucket_id_length=10, non_sensitive_id_hash_type=HashType.TEST_HASH_TYPE
    )
    plaintext_id = RlwePlaintextId(non_sensitive_id=b"nsid", sensitive_id=b"sid")
    bucket1 = HashedBucketId.from_plaintext_id(plaintext_id, params)
    bucket2 = HashedBucketId.from_plaintext_id(plaintext_id, params)
    assert bucket1 == bucket2
    assert bucket1.bit_length == 10
    assert is_valid(bucket1.data, 10)


def test_hashed_create_with_hashing_error():
    bad_params = HashedBucketsParameters(
        hashed_bucket_id_length=257, non_sensitive_id_hash_type=HashType.TEST_HASH_TYPE
    )
    plaintext_id = RlwePlaintextId(
        non_sensitive_id=b"nsid-test", sensitive_id=b"sid-test"
    )
    with pytest.raises(ValueError, match="Truncation bit length out of bounds."):
        HashedBucketId.from_plaintext_id(plaintext_id, bad_params)


def test_hashed_undefined_hash_type_with_length_error():
    params = HashedBucketsParameters(
        hashed_bucket_id_length=18,
        non_sensitive_id_hash_type=HashType.HASH_TYPE_UNDEFINED,
    )
    plaintext_id = RlwePlaintextId(non_sensitive_id=b"nsid", sensitive_id=b"sid")
    with pytest.raises(ValueError, match="Invalid hash type."):
        HashedBucketId.from_plaintext_id(plaintext_id, params)


def test_hashed_create_empty_bucket_id():
    params = HashedBucketsParameters(
        hashed_bucket_id_length=0,
        non_sensitive_id_hash_type=HashType.HASH_TYPE_UNDEFINED,
    )
    plaintext_id = RlwePlaintextId(
        non_sensitive_id=b"nsid-empty", sensitive_id=b"sid-empty"
    )
    id1 = HashedBucketId.from_plaintext_id(plaintext_id, params)
    id2 = HashedBucketId.create(b"", 0)
    assert id1 == id2


def test_hashed_to_api_proto():
    api_proto = ApiHashedBucketId(b"abcd", 32)
    bucket = HashedBucketId.from_api_proto(api_proto)
    assert bucket.to_api_proto() == api_proto


def test_hashed_equals_false():
    first = HashedBucketId.from_api_proto(ApiHashedBucketId(b"abcd", 32))
    second = HashedBucketId.create(b"Abcd", 32)
    assert first != second


def test_hashed_equals_true():
    first = HashedBucketId.from_api_proto(ApiHashedBucketId(b"abcd", 32))
    second = HashedBucketId.create(b"abcd", 32)
    assert first == second
    assert hash(first) == hash(second)