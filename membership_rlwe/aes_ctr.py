"""Deterministic AES-256 in counter mode with a fixed all-zero IV."""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes


class AesCtr256WithFixedIV:
    """AES-256-CTR with a fixed IV.

    Encryption is deterministic and unauthenticated; each key must be used to
    encrypt at most one message.
    """

    KEY_SIZE = 32
    IV_SIZE = 16

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) != self.KEY_SIZE:
            raise ValueError("Key size is invalid.")
        self._key = key
        self._iv = bytes(self.IV_SIZE)

    def _apply(self, data: bytes) -> bytes:
        cipher = Cipher(algorithms.AES(self._key), modes.CTR(self._iv))
        transform = cipher.encryptor()
        return transform.update(bytes(data)) + transform.finalize()

    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt ``plaintext``; the ciphertext has the same length."""
        return self._apply(plaintext)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Decrypt ``ciphertext``; the plaintext has the same length."""
        return self._apply(ciphertext)