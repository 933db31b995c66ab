# digest_catalog/__init__.py
"""
digest-catalog: file digest reconciliation against an XML catalog.

Public API:
    from digest_catalog import run_reconciliation, FileStatus

    summary = run_reconciliation("./files", "catalog.xml", "MD5", on_result=print)
"""

from digest_catalog.catalog import Catalog, CatalogIndex, build_index, load_catalog, save_catalog
from digest_catalog.config import ReconcileConfig, load_config
from digest_catalog.digest import SUPPORTED_ALGORITHMS, compute_digest, normalize_algorithm
from digest_catalog.exceptions import DigestCatalogError
from digest_catalog.reconcile import (
    FileResult,
    FileStatus,
    Reconciler,
    ReconcileSummary,
    reconcile_directory,
    run_reconciliation,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Catalog",
    "CatalogIndex",
    "build_index",
    "load_catalog",
    "save_catalog",
    "ReconcileConfig",
    "load_config",
    "SUPPORTED_ALGORITHMS",
    "compute_digest",
    "normalize_algorithm",
    "DigestCatalogError",
    "FileResult",
    "FileStatus",
    "Reconciler",
    "ReconcileSummary",
    "reconcile_directory",
    "run_reconciliation",
]
