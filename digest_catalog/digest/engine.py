# digest_catalog/digest/engine.py
"""
Digest engine.

Streams a file through one of the supported hash algorithms and returns a
lowercase hexadecimal fingerprint. Files are read sequentially in fixed-size
chunks, so memory use does not depend on file size.
"""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Dict

from digest_catalog.exceptions import FileReadError, UnsupportedAlgorithmError
from digest_catalog.logging import get_logger
from digest_catalog.logging.tags import DIGEST

logger = get_logger(__name__)

DEFAULT_CHUNK_SIZE = 8192

# Catalog algorithm name -> hashlib constructor name
SUPPORTED_ALGORITHMS: Dict[str, str] = {
    "MD5": "md5",
    "SHA1": "sha1",
    "SHA256": "sha256",
    "SHA512": "sha512",
}


def normalize_algorithm(name: str) -> str:
    """
    Normalize an algorithm name to its catalog spelling.

    Matching is case-insensitive: ``sha256`` becomes ``SHA256``.

    Raises:
        UnsupportedAlgorithmError: If the name is not a supported algorithm.
    """
    normalized = name.strip().upper()
    if normalized not in SUPPORTED_ALGORITHMS:
        raise UnsupportedAlgorithmError(name, tuple(SUPPORTED_ALGORITHMS))
    return normalized


def digest_length(algorithm: str) -> int:
    """Length in hex characters of a digest produced by ``algorithm``."""
    return hashlib.new(SUPPORTED_ALGORITHMS[normalize_algorithm(algorithm)]).digest_size * 2


def compute_digest(
        path: str | Path,
        algorithm: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """
    Compute the hex digest of a file.

    Args:
        path: File to hash.
        algorithm: One of MD5, SHA1, SHA256, SHA512 (any case).
        chunk_size: Bytes read per chunk.

    Returns:
        Lowercase hex digest (32, 40, 64 or 128 characters).

    Raises:
        UnsupportedAlgorithmError: If the algorithm is not supported.
        FileReadError: If the file cannot be opened or read.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    hasher = hashlib.new(SUPPORTED_ALGORITHMS[normalize_algorithm(algorithm)])
    path = Path(path)

    try:
        with path.open("rb") as f:
            for chunk in iter(lambda: f.read(chunk_size), b""):
                hasher.update(chunk)
    except OSError as exc:
        raise FileReadError(path, exc.strerror or str(exc)) from exc

    digest = hasher.hexdigest()
    logger.debug(f"{DIGEST} {path.name}: {algorithm.upper()} {digest}")
    return digest


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "SUPPORTED_ALGORITHMS",
    "normalize_algorithm",
    "digest_length",
    "compute_digest",
]
