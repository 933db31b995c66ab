# digest_catalog/reconcile/__init__.py
"""
Directory reconciliation against the digest catalog.

Key components:
- Scanner: lists the regular files of one directory
- Reconciler: digests, classifies and records each file

Usage:
    from digest_catalog.reconcile import run_reconciliation

    summary = run_reconciliation("./files", "catalog.xml", "SHA256", on_result=print)
    print(summary)  # "scanned 3, ok 2, not_ok 0, not_found 1, ..."
"""

from .controller import (
    FileResult,
    FileStatus,
    Reconciler,
    ReconcileSummary,
    determine_status,
    reconcile_directory,
    run_reconciliation,
)
from .scanner import ScannedFile, scan_directory

__all__ = [
    # Scanner
    "ScannedFile",
    "scan_directory",
    # Controller
    "FileStatus",
    "FileResult",
    "ReconcileSummary",
    "determine_status",
    "Reconciler",
    "reconcile_directory",
    "run_reconciliation",
]
