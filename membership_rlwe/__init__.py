"""Helpers for a private membership protocol: bucket ids, identifier hashing and value encryption."""

__version__ = "0.1.0"
__all__ = [
    "aes_ctr",
    "bits",
    "bucket_ids",
    "crypto_utils",
    "id_utils",
    "messages",
    "oprf",
    "rlwe_id_utils",
]