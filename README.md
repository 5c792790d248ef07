# membership_rlwe

Building blocks for the client side of a private membership query protocol.
A client encodes its identifiers, derives bucket identifiers from
(encrypted) identifiers, computes the form in which an encrypted identifier
is stored inside a bucket, and decrypts the values attached to matching
entries.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The only runtime dependency is `cryptography`, used for AES-256-CTR.

## Modules

### `membership_rlwe.messages`

Plain, immutable data types and constants.

- `RlwePlaintextId(non_sensitive_id, sensitive_id)`
- `EncryptedBucketsParameters(encrypted_bucket_id_length)`
- `HashedBucketsParameters(hashed_bucket_id_length, non_sensitive_id_hash_type)`
- `ApiHashedBucketId(hashed_bucket_id, bit_length)`
- `DoublyEncryptedId(queried_encrypted_id, doubly_encrypted_id)`
- `HashType`: `HASH_TYPE_UNDEFINED`, `SHA256`, `TEST_HASH_TYPE`
- `InternalError`: exception for internal failures
- `CURVE_NAME` (`"prime256v1"`) and `STORED_ENCRYPTED_ID_BYTE_LENGTH` (13)

Byte fields accept `str` as well as bytes; strings are stored UTF-8 encoded.

### `membership_rlwe.bits`

Big-endian bit truncation.

- `truncate(data, bit_length)`: the leftmost `bit_length` bits, rounded up to whole bytes with the unused trailing bits zeroed.
- `truncate_as_uint32(data, bit_length)`: the leftmost `bit_length` bits (1 to 32) as an integer.
- `is_valid(data, bit_length)`: whether `data` equals its own truncation to `bit_length`.

### `membership_rlwe.id_utils`

- `pad_or_truncate(data, length)`: pads with ASCII `'0'` bytes, or cuts to `length`.

### `membership_rlwe.aes_ctr`

- `AesCtr256WithFixedIV(key)`: AES-256 in counter mode with an all-zero IV.
  - Takes a 32-byte key.
  - `encrypt` and `decrypt` keep the length of their input.
  - Encryption is deterministic and unauthenticated. Use each key for a single message only.

### `membership_rlwe.crypto_utils`

- `pad(data, max_byte_length)`: a 4-byte little-endian length prefix followed by `data`, zero-padded to `max_byte_length`.
- `unpad(data)`: the inverse of `pad`.
- `hash_encrypted_id(encrypted_id)`: salted SHA-256.
- `get_value_encryption_key(encrypted_id)`: a 32-byte AES key derived with a salted SHA-256.
- `encrypt_value(encrypted_id, value, max_value_byte_length)` and `decrypt_value(encrypted_id, encrypted_value)`: padded value encryption under the derived key.

### `membership_rlwe.rlwe_id_utils`

- `hash_rlwe_plaintext_id(plaintext_id)`: an injective byte encoding of an identifier. It is not a cryptographic hash.
- `hash_nonsensitive_id_with_salt(nsid, hash_type)`: salted SHA-256 for `SHA256` and `TEST_HASH_TYPE`.
- `compute_bucket_stored_encrypted_id(encrypted_id, params)`: the bytes stored in a bucket for an encrypted id.
- `compute_bucket_stored_encrypted_id_for_plaintext(plaintext_id, params, ec_cipher)`: encrypts the identifier first, then computes the stored bytes.

### `membership_rlwe.oprf`

- `re_encrypt_id(encrypted_id, ec_cipher)`: builds a `DoublyEncryptedId` by re-encrypting with the given cipher.

### `membership_rlwe.bucket_ids`

`EncryptedBucketId` and `HashedBucketId` are frozen value types with `data` and `bit_length` fields.

- Both have `create(data, bit_length)` and `from_plaintext_id(...)`.
- `EncryptedBucketId` adds `from_encrypted_id(encrypted_id, params)` and `to_uint32()`.
- `HashedBucketId` adds `from_api_proto(api_hashed_bucket_id)` and `to_api_proto()`. It also accepts the empty id with bit length 0.

## Example

```python
from membership_rlwe.bits import truncate, truncate_as_uint32
from membership_rlwe.crypto_utils import encrypt_value, decrypt_value
from membership_rlwe.bucket_ids import HashedBucketId
from membership_rlwe.messages import HashedBucketsParameters, HashType, RlwePlaintextId

truncate(b"\x01\x01\xff\xfe", 30)            # b"\x01\x01\xff\xfc"
truncate_as_uint32(b"\x01\x01\xff\xff", 22)  # 16511

ciphertext = encrypt_value(b"encrypted-id", b"value", 32)
assert decrypt_value(b"encrypted-id", ciphertext) == b"value"

params = HashedBucketsParameters(
    hashed_bucket_id_length=10, non_sensitive_id_hash_type=HashType.SHA256
)
bucket = HashedBucketId.from_plaintext_id(
    RlwePlaintextId(non_sensitive_id=b"nsid", sensitive_id=b"sid"), params
)
print(bucket.to_api_proto())
```

## Errors

- Invalid arguments raise `ValueError`. This includes out-of-range bit lengths, an invalid key size, values that are too long, malformed padding and unsupported hash types.
- `EncryptedBucketId.to_uint32` raises `membership_rlwe.messages.InternalError` when the bit length exceeds 32.

## What this package does not do

The package does not include a commutative elliptic-curve cipher. Functions that need one take any object that provides the method they call:

- `encrypt(data)` for `compute_bucket_stored_encrypted_id_for_plaintext` and `EncryptedBucketId.from_plaintext_id`.
- `re_encrypt(data)` for `re_encrypt_id`.

The package also does not include the following:

- a complete protocol client;
- RLWE encryption or private information retrieval requests;
- network transport, wire serialization or a command-line tool.

It provides the identifier, bucket and value-encryption helpers such a client is built from.