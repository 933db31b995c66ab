# digest_catalog/catalog/__init__.py
"""
Catalog of recorded file digests.

- models: the owned, mutable catalog tree
- index: per-run bidirectional lookup built from the tree
- store: XML read/write
"""

from .index import CatalogIndex, build_index
from .models import Catalog, DigestEntry, FileEntry
from .store import catalog_to_element, load_catalog, read_catalog, save_catalog

__all__ = [
    # Models
    "Catalog",
    "FileEntry",
    "DigestEntry",
    # Index
    "CatalogIndex",
    "build_index",
    # Store
    "read_catalog",
    "load_catalog",
    "save_catalog",
    "catalog_to_element",
]
