# digests.py
# Digest capability registry and leaf serialization.
#
# A digest is any callable mapping bytes -> bytes of a fixed length.
# The tree never imports a hash algorithm directly; it receives one of
# these functions (or any caller-supplied equivalent) at construction.

import hashlib
import json
from typing import Any, Callable

from nary_merkle.errors import UnknownDigest

DigestFn = Callable[[bytes], bytes]


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def sha512(data: bytes) -> bytes:
    return hashlib.sha512(data).digest()


def sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


def md5(data: bytes) -> bytes:
    return hashlib.md5(data).digest()


def blake2b_224(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=28).digest()


def blake2b_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


def blake2s_256(data: bytes) -> bytes:
    return hashlib.blake2s(data).digest()


DIGESTS: dict[str, DigestFn] = {
    "sha256":      sha256,
    "sha512":      sha512,
    "sha3-256":    sha3_256,
    "md5":         md5,
    "blake2b-224": blake2b_224,
    "blake2b-256": blake2b_256,
    "blake2s-256": blake2s_256,
}


def get_digest(name: str) -> DigestFn:
    """Look up a registered digest by name (case-insensitive)."""
    try:
        return DIGESTS[name.strip().lower()]
    except KeyError:
        raise UnknownDigest(name, sorted(DIGESTS)) from None


def digest_size(digest: DigestFn) -> int:
    """Output length in bytes, probed on the empty input."""
    return len(digest(b""))


def leaf_bytes(record: Any) -> bytes:
    """
    Hashable byte representation of a leaf record.

    Bytes-like values pass through, strings are UTF-8 encoded and
    dicts/lists become canonical JSON. sort_keys is non-negotiable.
    """
    if isinstance(record, (bytes, bytearray, memoryview)):
        return bytes(record)
    if isinstance(record, str):
        return record.encode("utf-8")
    if isinstance(record, (dict, list)):
        return json.dumps(record, sort_keys=True, ensure_ascii=False).encode("utf-8")
    raise TypeError(f"Cannot serialize leaf record of type {type(record).__name__}.")
