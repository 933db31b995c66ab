# digest_catalog/catalog/index.py
"""
Bidirectional catalog index.

Built once per run from a Catalog snapshot and mutated in lockstep with it.
The index is a cache; the Catalog stays the source of truth.

Lookups by default pool digests across algorithms: a file's known digests are
every hex value recorded for it, whatever the algorithm. Passing an algorithm
to known_digests_for() restricts the lookup to that algorithm.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Set, Tuple

from .models import Catalog


class CatalogIndex:
    """
    file name -> digests and digest -> file names lookups.

    Usage:
        index = build_index(catalog)
        owners = index.files_recording_digest(digest)
        known = index.known_digests_for("a.txt")
        index.record("a.txt", "MD5", digest)
    """

    def __init__(self) -> None:
        self._file_digests: Dict[str, Set[str]] = {}
        self._digest_files: Dict[str, Set[str]] = {}
        self._typed: Dict[Tuple[str, str], str] = {}

    @classmethod
    def from_catalog(cls, catalog: Catalog) -> "CatalogIndex":
        index = cls()
        for file_entry in catalog:
            # A file with no digests is still a known name
            index._file_digests.setdefault(file_entry.name, set())
            for entry in file_entry.digests:
                index.record(file_entry.name, entry.algorithm, entry.hex)
        return index

    @property
    def file_digests(self) -> Mapping[str, Set[str]]:
        """Read-only view of file name -> set of digests."""
        return MappingProxyType(self._file_digests)

    @property
    def digest_files(self) -> Mapping[str, Set[str]]:
        """Read-only view of digest -> set of file names."""
        return MappingProxyType(self._digest_files)

    def known_digests_for(self, name: str, algorithm: Optional[str] = None) -> frozenset[str]:
        """
        Digests recorded for a file.

        Args:
            name: File name.
            algorithm: If given, only the digest recorded under this algorithm.

        Returns:
            Possibly empty frozenset of hex digests.
        """
        if algorithm is not None:
            digest = self._typed.get((name, algorithm))
            return frozenset() if digest is None else frozenset({digest})
        return frozenset(self._file_digests.get(name, ()))

    def files_recording_digest(self, digest: str) -> frozenset[str]:
        """Names of files that have recorded ``digest`` under any algorithm."""
        return frozenset(self._digest_files.get(digest, ()))

    def record(self, name: str, algorithm: str, digest: str) -> bool:
        """
        Add a (file, algorithm, digest) record to every map.

        Mirrors Catalog.add_digest(): a file keeps at most one digest per
        algorithm, so recording an algorithm the file already has is a no-op.

        Returns:
            True if the index changed, False otherwise.
        """
        key = (name, algorithm)
        if key in self._typed:
            return False

        self._typed[key] = digest
        self._file_digests.setdefault(name, set()).add(digest)
        self._digest_files.setdefault(digest, set()).add(name)
        return True

    def __contains__(self, name: object) -> bool:
        return name in self._file_digests


def build_index(catalog: Catalog) -> CatalogIndex:
    """Build the index for a catalog snapshot."""
    return CatalogIndex.from_catalog(catalog)


__all__ = ["CatalogIndex", "build_index"]
