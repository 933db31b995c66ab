# digest_catalog/exceptions.py
"""
Exception hierarchy for digest-catalog.

Every error raised on purpose by this package derives from DigestCatalogError,
so callers (the CLI in particular) can separate expected failures from bugs.
"""

from __future__ import annotations

from pathlib import Path


class DigestCatalogError(Exception):
    """Base error for digest-catalog operations."""
    pass


class UsageError(DigestCatalogError):
    """Command line was invoked with the wrong arguments."""
    pass


class UnsupportedAlgorithmError(DigestCatalogError, ValueError):
    """Digest algorithm name is not one of the supported types."""

    def __init__(self, algorithm: str, supported: tuple[str, ...]):
        self.algorithm = algorithm
        self.supported = supported
        super().__init__(
            f"Unsupported digest type: {algorithm} "
            f"(supported: {', '.join(supported)})"
        )


class FileReadError(DigestCatalogError, OSError):
    """A file could not be opened or read while computing its digest."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")


UnreadableFileError = FileReadError


class DirectoryScanError(DigestCatalogError):
    """Target directory does not exist or cannot be listed."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot scan directory {self.path}: {reason}")


class CatalogLoadError(DigestCatalogError):
    """Catalog document is missing, empty or malformed."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load catalog {self.path}: {reason}")


class CatalogPersistError(DigestCatalogError):
    """Catalog document could not be written back."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot write catalog {self.path}: {reason}")


class ConfigError(DigestCatalogError):
    """Configuration file is missing or failed validation."""
    pass


__all__ = [
    "DigestCatalogError",
    "UsageError",
    "UnsupportedAlgorithmError",
    "FileReadError",
    "UnreadableFileError",
    "DirectoryScanError",
    "CatalogLoadError",
    "CatalogPersistError",
    "ConfigError",
]
