# digest_catalog/catalog/models.py
"""
In-memory catalog tree.

The catalog is the source of truth for known (file, algorithm, digest)
records:

    Catalog
      └── FileEntry (unique file name)
            └── DigestEntry (at most one per algorithm)

Mutation goes through explicit methods that report whether anything changed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass(frozen=True)
class DigestEntry:
    """A (algorithm, hex digest) pair owned by a FileEntry."""
    algorithm: str  # Upper-case, e.g. "SHA256"
    hex: str  # Lower-case hex digest


@dataclass
class FileEntry:
    """All recorded digests for one file name."""
    name: str
    digests: List[DigestEntry] = field(default_factory=list)

    def get(self, algorithm: str) -> Optional[DigestEntry]:
        """Return the entry recorded for ``algorithm``, or None."""
        for entry in self.digests:
            if entry.algorithm == algorithm:
                return entry
        return None

    def add(self, algorithm: str, hex_digest: str) -> bool:
        """
        Add a digest entry.

        Returns False (and changes nothing) if an entry for this algorithm
        already exists.
        """
        if self.get(algorithm) is not None:
            return False
        self.digests.append(DigestEntry(algorithm=algorithm, hex=hex_digest))
        return True


@dataclass
class Catalog:
    """Ordered collection of FileEntry objects keyed by file name."""
    entries: Dict[str, FileEntry] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self.entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def get(self, name: str) -> Optional[FileEntry]:
        """Return the FileEntry for ``name``, or None if it was never recorded."""
        return self.entries.get(name)

    def ensure_entry(self, name: str) -> FileEntry:
        """Return the FileEntry for ``name``, creating an empty one if absent."""
        entry = self.entries.get(name)
        if entry is None:
            entry = FileEntry(name=name)
            self.entries[name] = entry
        return entry

    def add_digest(self, name: str, algorithm: str, hex_digest: str) -> bool:
        """
        Record a digest for a file, creating its FileEntry if needed.

        Returns:
            True if a new DigestEntry was appended, False if the file already
            has an entry for this algorithm.
        """
        return self.ensure_entry(name).add(algorithm, hex_digest)

    @property
    def digest_count(self) -> int:
        """Total number of DigestEntry records."""
        return sum(len(entry.digests) for entry in self.entries.values())


__all__ = ["DigestEntry", "FileEntry", "Catalog"]
