"""Padding, hashing and value encryption used for bucket contents."""

from __future__ import annotations

import hashlib

from membership_rlwe.aes_ctr import AesCtr256WithFixedIV
from membership_rlwe.id_utils import pad_or_truncate

# Salt for hashing encrypted ids into matching identifiers.
_SENSITIVE_ID_HASH_SALT = bytes(
    [
        0x3C, 0xD1, 0xF3, 0x69, 0x2B, 0x57, 0x40, 0xEA, 0xD8, 0xE4, 0xF4,
        0x4A, 0xB2, 0x5F, 0x7B, 0xAD, 0xC8, 0x10, 0xAA, 0x3D, 0x4C, 0x6E,
        0xCA, 0x57, 0x78, 0x5C, 0x5A, 0xED, 0x06, 0x81, 0x14, 0x7C,
    ]
)

# Salt for deriving value encryption keys from encrypted ids.
_VALUE_ENCRYPTION_KEY_HASH_SALT = bytes(
    [
        0x89, 0xC3, 0x67, 0xA7, 0x8A, 0x68, 0x2B, 0xE8, 0xC6, 0xB2, 0x22,
        0xB7, 0xE0, 0xB7, 0x4A, 0x37, 0x63, 0x8F, 0x10, 0x79, 0x98, 0x91,
        0x31, 0x94, 0x44, 0x03, 0xB6, 0x76, 0x8F, 0x70, 0xEB, 0xBF,
    ]
)

_AES_KEY_LENGTH = 32
_LENGTH_PREFIX_SIZE = 4


def pad(data: bytes, max_byte_length: int) -> bytes:
    """Prefix ``data`` with its 4-byte little-endian length and zero-pad it.

    The result is ``max_byte_length + 4`` bytes long. Raises ValueError if
    ``data`` is longer than ``max_byte_length``.
    """
    data = bytes(data)
    if max_byte_length < len(data):
        raise ValueError("max_byte_length smaller than the input bytes length.")
    prefix = len(data).to_bytes(_LENGTH_PREFIX_SIZE, "little")
    return prefix + data.ljust(max_byte_length, b"\x00")


def unpad(data: bytes) -> bytes:
    """Recover the original bytes from the output of :func:`pad`."""
    data = bytes(data)
    if len(data) < _LENGTH_PREFIX_SIZE:
        raise ValueError("Invalid bytes does not encode length.")
    length = int.from_bytes(data[:_LENGTH_PREFIX_SIZE], "little")
    if length + _LENGTH_PREFIX_SIZE > len(data):
        raise ValueError("Incorrect bytes length.")
    return data[_LENGTH_PREFIX_SIZE : _LENGTH_PREFIX_SIZE + length]


def hash_encrypted_id(encrypted_id: bytes) -> bytes:
    """Salted SHA-256 of an encrypted id."""
    return hashlib.sha256(_SENSITIVE_ID_HASH_SALT + bytes(encrypted_id)).digest()


def get_value_encryption_key(encrypted_id: bytes) -> bytes:
    """Derive the 32-byte AES key that protects the value of an id."""
    digest = hashlib.sha256(
        _VALUE_ENCRYPTION_KEY_HASH_SALT + bytes(encrypted_id)
    ).digest()
    return pad_or_truncate(digest, _AES_KEY_LENGTH)


def encrypt_value(encrypted_id: bytes, value: bytes, max_value_byte_length: int) -> bytes:
    """Pad ``value`` to a fixed length and encrypt it under a key from ``encrypted_id``.

    Raises ValueError if ``value`` is longer than ``max_value_byte_length``.
    """
    value = bytes(value)
    if len(value) > max_value_byte_length:
        raise ValueError(
            f"Length of value {len(value)} larger than maximum value byte "
            f"length {max_value_byte_length}."
        )
    cipher = AesCtr256WithFixedIV(get_value_encryption_key(encrypted_id))
    return cipher.encrypt(pad(value, max_value_byte_length))


def decrypt_value(encrypted_id: bytes, encrypted_value: bytes) -> bytes:
    """Decrypt a value produced by :func:`encrypt_value`."""
    cipher = AesCtr256WithFixedIV(get_value_encryption_key(encrypted_id))
    return unpad(cipher.decrypt(encrypted_value))