"""Derivation of identifiers and hashes used by the membership protocol."""

from __future__ import annotations

import hashlib

from membership_rlwe.crypto_utils import hash_encrypted_id
from membership_rlwe.messages import (
    STORED_ENCRYPTED_ID_BYTE_LENGTH,
    EncryptedBucketsParameters,
    HashType,
    RlwePlaintextId,
)

# Salt for hashing non-sensitive ids into hashed bucket ids.
_HASHED_BUCKET_ID_SALT = bytes(
    [
        0xD6, 0x50, 0x82, 0x81, 0x82, 0xD9, 0x99, 0x11, 0x61, 0xE6, 0x7D,
        0xB2, 0x91, 0x72, 0xE4, 0x05, 0x3E, 0x4A, 0xE8, 0x54, 0x0D, 0xFF,
        0xB7, 0x8F, 0x61, 0x08, 0x0D, 0x96, 0x4D, 0x8F, 0x58, 0xFE,
    ]
)


def _div_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def hash_rlwe_plaintext_id(plaintext_id: RlwePlaintextId) -> bytes:
    """Injectively encode a plaintext id as bytes (not a cryptographic hash)."""
    nsid = plaintext_id.non_sensitive_id
    sid = plaintext_id.sensitive_id
    if not nsid:
        return b"0" + str(len(sid)).encode("ascii") + sid
    return b"".join(
        [str(len(nsid)).encode("ascii"), b"/", nsid, b"/", str(len(sid)).encode("ascii"), b"/", sid]
    )


def hash_nonsensitive_id_with_salt(nsid: bytes, hash_type: HashType) -> bytes:
    """Salted hash of the non-sensitive part of an id.

    Raises ValueError for an unsupported hash type.
    """
    if hash_type in (HashType.SHA256, HashType.TEST_HASH_TYPE):
        return hashlib.sha256(_HASHED_BUCKET_ID_SALT + bytes(nsid)).digest()
    raise ValueError("Invalid hash type.")


def compute_bucket_stored_encrypted_id(
    encrypted_id: bytes, params: EncryptedBucketsParameters
) -> bytes:
    """Representation of an encrypted id as stored inside its bucket."""
    hashed = hash_encrypted_id(encrypted_id)
    bucket_bits = params.encrypted_bucket_id_length
    start_byte = _div_toward_zero(bucket_bits - 1, 8) + 1
    byte_length = max(
        0, STORED_ENCRYPTED_ID_BYTE_LENGTH - _div_toward_zero(bucket_bits, 8)
    )
    if start_byte < 0 or start_byte > len(hashed):
        raise ValueError("Encrypted bucket id length out of bounds.")
    return hashed[start_byte : start_byte + byte_length]


def compute_bucket_stored_encrypted_id_for_plaintext(
    plaintext_id: RlwePlaintextId, params: EncryptedBucketsParameters, ec_cipher
) -> bytes:
    """Encrypt ``plaintext_id`` with ``ec_cipher`` and compute its stored form.

    ``ec_cipher`` must provide ``encrypt(bytes) -> bytes``.
    """
    if ec_cipher is None:
        raise ValueError("ECCipher should be non-null.")
    encrypted_id = ec_cipher.encrypt(hash_rlwe_plaintext_id(plaintext_id))
    return compute_bucket_stored_encrypted_id(encrypted_id, params)