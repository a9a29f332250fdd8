from __future__ import annotations

import hashlib
from typing import BinaryIO

from .errors import UnsupportedAlgorithm

# JDK MessageDigest standard names that don't lowercase to a hashlib name.
_STANDARD_NAMES = {
    "sha-1": "sha1",
    "sha": "sha1",
    "sha-224": "sha224",
    "sha-256": "sha256",
    "sha-384": "sha384",
    "sha-512": "sha512",
    "sha-512/224": "sha512_224",
    "sha-512/256": "sha512_256",
    "sha3-224": "sha3_224",
    "sha3-256": "sha3_256",
    "sha3-384": "sha3_384",
    "sha3-512": "sha3_512",
}

# Extendable-output functions have no fixed hex length.
_VARIABLE_LENGTH = {"shake_128", "shake_256"}


def resolve_algorithm(algorithm: str) -> str:
    """
    Map a requested algorithm name to a hashlib constructor name.

    Accepts hashlib names (``sha256``, ``blake2b``) and JDK standard names
    (``SHA-256``, ``SHA-512/256``, ``SHA3-256``) case-insensitively.
    """
    if not isinstance(algorithm, str) or not algorithm.strip():
        raise UnsupportedAlgorithm(str(algorithm))

    lowered = algorithm.strip().lower()
    name = _STANDARD_NAMES.get(lowered, lowered)
    if name in _VARIABLE_LENGTH:
        raise UnsupportedAlgorithm(algorithm)

    try:
        hashlib.new(name)
    except (ValueError, TypeError) as exc:
        raise UnsupportedAlgorithm(algorithm) from exc
    return name


def digest(data: bytes, algorithm: str) -> str:
    """Hash the full content, returned as lowercase hex."""
    hasher = hashlib.new(resolve_algorithm(algorithm))
    hasher.update(data)
    return hasher.hexdigest()


def digest_stream(stream: BinaryIO, algorithm: str, chunk_size: int = 65536) -> str:
    """Hash a binary stream read to EOF in chunks."""
    hasher = hashlib.new(resolve_algorithm(algorithm))
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        hasher.update(chunk)
    return hasher.hexdigest()


def digest_size(algorithm: str) -> int:
    """Digest output length in bytes."""
    return hashlib.new(resolve_algorithm(algorithm)).digest_size
