# digest_catalog/reconcile/scanner.py
"""
Directory scanner.

Lists the regular files directly inside one directory. Sub-directories are
not descended into.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from digest_catalog.exceptions import DirectoryScanError
from digest_catalog.logging import get_logger
from digest_catalog.logging.tags import RECONCILE

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScannedFile:
    """A regular file found by the scanner."""
    path: Path
    name: str  # Base name, used as the catalog key
    size_bytes: int


def scan_directory(directory: str | Path, sort: bool = True) -> List[ScannedFile]:
    """
    List regular files in ``directory``.

    Args:
        directory: Directory to list.
        sort: Sort by file name. If False, directory-listing order is kept.

    Raises:
        DirectoryScanError: If the path is missing, not a directory, or
            cannot be listed.
    """
    directory = Path(directory)

    if not directory.exists():
        raise DirectoryScanError(directory, "no such directory")
    if not directory.is_dir():
        raise DirectoryScanError(directory, "not a directory")

    files: List[ScannedFile] = []
    try:
        for path in directory.iterdir():
            if not path.is_file():
                continue
            files.append(ScannedFile(path=path, name=path.name, size_bytes=path.stat().st_size))
    except OSError as exc:
        raise DirectoryScanError(directory, exc.strerror or str(exc)) from exc

    if sort:
        files.sort(key=lambda f: f.name)

    logger.info(f"{RECONCILE} Found {len(files)} files in {directory}")
    return files


__all__ = ["ScannedFile", "scan_directory"]
