from .engine import (
    DEFAULT_CHUNK_SIZE,
    SUPPORTED_ALGORITHMS,
    compute_digest,
    digest_length,
    normalize_algorithm,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "SUPPORTED_ALGORITHMS",
    "compute_digest",
    "digest_length",
    "normalize_algorithm",
]
