# digest_catalog/reconcile/controller.py
"""
Reconciliation controller.

Orchestrates one run:
1. Scan the directory
2. Digest every file
3. Classify each file against the catalog index
4. Record NOT_FOUND digests into index and catalog
5. (run_reconciliation only) load and persist the catalog

Classification order per file:
- COLLISION: another file name has the same digest, either in the index or
  elsewhere in this scan. Takes priority over everything else.
- OK / NOT_OK: the file is known and its recorded digests do / do not contain
  the computed one.
- NOT_FOUND: the file has no record. The new digest is recorded.

All files are digested before any is classified so that both members of a
duplicate pair found in the same scan are reported as COLLISION. Files are
still classified one at a time against the index as mutated by earlier files.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, FrozenSet, List, Optional, Set, Tuple

from digest_catalog.catalog import Catalog, CatalogIndex, build_index, load_catalog, save_catalog
from digest_catalog.config.schema import ReconcileConfig
from digest_catalog.digest import compute_digest, normalize_algorithm
from digest_catalog.exceptions import FileReadError
from digest_catalog.logging import get_logger
from digest_catalog.logging.tags import RECONCILE

from .scanner import ScannedFile, scan_directory

logger = get_logger(__name__)


class FileStatus(str, Enum):
    """Outcome of reconciling one file against the catalog."""

    OK = "OK"
    """Computed digest is among those recorded for the file."""

    NOT_OK = "NOT_OK"
    """File is known but its content no longer matches the record."""

    NOT_FOUND = "NOT_FOUND"
    """File has no record yet; its digest gets recorded."""

    COLLISION = "COLLISION"
    """Another file has the same digest."""


@dataclass(frozen=True)
class FileResult:
    """Status of one processed file."""
    name: str
    algorithm: str
    digest: str
    status: FileStatus

    @property
    def line(self) -> str:
        """Output line: ``<name> <ALGO> <digest> <STATUS>``."""
        return f"{self.name} {self.algorithm} {self.digest} {self.status.value}"


@dataclass
class ReconcileSummary:
    """Summary of a reconciliation run."""

    scanned: int = 0
    ok: int = 0
    not_ok: int = 0
    not_found: int = 0
    collisions: int = 0
    recorded: int = 0
    errors: int = 0
    error_details: List[str] = field(default_factory=list)
    results: List[FileResult] = field(default_factory=list)
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: Optional[datetime] = None

    @property
    def duration_seconds(self) -> float:
        """Get duration in seconds."""
        if self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds()

    def add(self, result: FileResult) -> None:
        self.results.append(result)
        if result.status is FileStatus.OK:
            self.ok += 1
        elif result.status is FileStatus.NOT_OK:
            self.not_ok += 1
        elif result.status is FileStatus.NOT_FOUND:
            self.not_found += 1
        else:
            self.collisions += 1

    def __str__(self) -> str:
        return (
            f"scanned {self.scanned}, ok {self.ok}, not_ok {self.not_ok}, "
            f"not_found {self.not_found}, collisions {self.collisions}, "
            f"recorded {self.recorded}, errors {self.errors}"
        )


def determine_status(
        name: str,
        digest: str,
        index: CatalogIndex,
        *,
        algorithm: Optional[str] = None,
        scan_peers: FrozenSet[str] = frozenset(),
) -> FileStatus:
    """
    Classify one file.

    Args:
        name: File name (catalog key).
        digest: Freshly computed digest.
        index: Catalog index as it stands now.
        algorithm: If given, only the digest recorded for this algorithm
            counts for OK/NOT_OK. Collisions are always checked across all
            algorithms.
        scan_peers: Names of files in the current scan with the same digest.

    Returns:
        The FileStatus. Pure; neither index nor catalog is modified.
    """
    owners = index.files_recording_digest(digest)
    if owners - {name} or scan_peers - {name}:
        return FileStatus.COLLISION

    known = index.known_digests_for(name, algorithm)
    if known:
        return FileStatus.OK if digest in known else FileStatus.NOT_OK

    return FileStatus.NOT_FOUND


class Reconciler:
    """
    Reconciles the files of one directory against a catalog.

    The catalog and index are owned by the reconciler for the run and mutated
    in place.

    Usage:
        reconciler = Reconciler(catalog=catalog, algorithm="SHA256")
        summary = reconciler.run("/path/to/dir", on_result=print_line)
    """

    def __init__(
            self,
            *,
            catalog: Catalog,
            algorithm: str,
            index: Optional[CatalogIndex] = None,
            config: Optional[ReconcileConfig] = None,
    ) -> None:
        """
        Initialize the reconciler.

        Args:
            catalog: Catalog to reconcile against (mutated).
            algorithm: Digest algorithm name, any case.
            index: Prebuilt index for ``catalog``. Built if omitted.
            config: Reconciliation settings. Defaults if omitted.

        Raises:
            UnsupportedAlgorithmError: If ``algorithm`` is not supported.
        """
        self._catalog = catalog
        self._algorithm = normalize_algorithm(algorithm)
        self._index = index if index is not None else build_index(catalog)
        self._config = config or ReconcileConfig()

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def index(self) -> CatalogIndex:
        return self._index

    def run(
            self,
            directory: str | Path,
            on_result: Optional[Callable[[FileResult], None]] = None,
    ) -> ReconcileSummary:
        """
        Reconcile every regular file in ``directory``.

        Args:
            directory: Directory to scan (not recursive).
            on_result: Called with each FileResult as soon as it is known.

        Returns:
            ReconcileSummary with per-status counts and all results.

        Raises:
            DirectoryScanError: If the directory cannot be listed.
            FileReadError: If a file cannot be read and skip_unreadable is off.
        """
        summary = ReconcileSummary()

        files = scan_directory(directory, sort=self._config.sort_files)
        summary.scanned = len(files)

        digested = self._digest_all(files, summary)

        by_digest: Dict[str, Set[str]] = defaultdict(set)
        for scanned, digest in digested:
            by_digest[digest].add(scanned.name)

        for scanned, digest in digested:
            result = self._process(scanned, digest, frozenset(by_digest[digest]))
            summary.add(result)
            if result.status is FileStatus.NOT_FOUND:
                summary.recorded += 1
            if on_result is not None:
                on_result(result)

        summary.finished_at = datetime.now(timezone.utc)
        logger.info(f"{RECONCILE} Reconciliation finished: {summary}")
        return summary

    def _digest_all(
            self,
            files: List[ScannedFile],
            summary: ReconcileSummary,
    ) -> List[Tuple[ScannedFile, str]]:
        digested: List[Tuple[ScannedFile, str]] = []

        for scanned in files:
            try:
                digest = compute_digest(scanned.path, self._algorithm, self._config.chunk_size)
            except FileReadError as exc:
                if not self._config.skip_unreadable:
                    raise
                logger.warning(f"{RECONCILE} Skipping unreadable file: {exc}")
                summary.errors += 1
                summary.error_details.append(str(exc))
                continue
            digested.append((scanned, digest))

        return digested

    def _process(self, scanned: ScannedFile, digest: str, scan_peers: FrozenSet[str]) -> FileResult:
        status = determine_status(
            scanned.name,
            digest,
            self._index,
            algorithm=self._algorithm if self._config.strict_algorithm else None,
            scan_peers=scan_peers,
        )

        if status is FileStatus.NOT_FOUND:
            self._record(scanned.name, digest)

        logger.debug(f"{RECONCILE} {scanned.name}: {status.value}")
        return FileResult(name=scanned.name, algorithm=self._algorithm, digest=digest, status=status)

    def _record(self, name: str, digest: str) -> None:
        index_changed = self._index.record(name, self._algorithm, digest)
        catalog_changed = self._catalog.add_digest(name, self._algorithm, digest)
        if index_changed != catalog_changed:
            logger.warning(f"{RECONCILE} Index and catalog disagree on '{name}' ({self._algorithm})")


def reconcile_directory(
        directory: str | Path,
        catalog: Catalog,
        algorithm: str,
        *,
        config: Optional[ReconcileConfig] = None,
        on_result: Optional[Callable[[FileResult], None]] = None,
) -> ReconcileSummary:
    """
    Convenience function: reconcile a directory against an in-memory catalog.

    The catalog is mutated in place; nothing is written to disk.
    """
    reconciler = Reconciler(catalog=catalog, algorithm=algorithm, config=config)
    return reconciler.run(directory, on_result=on_result)


def run_reconciliation(
        directory: str | Path,
        catalog_path: str | Path,
        algorithm: str,
        *,
        config: Optional[ReconcileConfig] = None,
        on_result: Optional[Callable[[FileResult], None]] = None,
) -> ReconcileSummary:
    """
    Full run: load catalog, reconcile the directory, write the catalog back.

    Raises:
        UnsupportedAlgorithmError, DirectoryScanError, FileReadError,
        CatalogPersistError. A catalog that cannot be loaded is replaced by an
        empty one instead of raising.
    """
    config = config or ReconcileConfig()
    algorithm = normalize_algorithm(algorithm)

    catalog = load_catalog(catalog_path)
    summary = reconcile_directory(
        directory,
        catalog,
        algorithm,
        config=config,
        on_result=on_result,
    )
    save_catalog(catalog, catalog_path, indent=config.indent)
    return summary


__all__ = [
    "FileStatus",
    "FileResult",
    "ReconcileSummary",
    "determine_status",
    "Reconciler",
    "reconcile_directory",
    "run_reconciliation",
]
