"""Server-side step of the oblivious PRF round."""

from __future__ import annotations

from membership_rlwe.messages import DoublyEncryptedId


def re_encrypt_id(encrypted_id: bytes, ec_cipher) -> DoublyEncryptedId:
    """Re-encrypt a client-encrypted id with ``ec_cipher``.

    ``ec_cipher`` must provide ``re_encrypt(bytes) -> bytes``; any error it
    raises for an invalid encoding propagates unchanged.
    """
    encrypted_id = bytes(encrypted_id)
    return DoublyEncryptedId(
        queried_encrypted_id=encrypted_id,
        doubly_encrypted_id=ec_cipher.re_encrypt(encrypted_id),
    )