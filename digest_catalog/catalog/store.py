# digest_catalog/catalog/store.py
"""
XML persistence for the catalog.

Document layout:

    <CATALOG>
      <FILE_ENTRY>
        <FILE_NAME>example.txt</FILE_NAME>
        <DIGEST_ENTRY>
          <DIGEST_TYPE>SHA256</DIGEST_TYPE>
          <DIGEST_HEX>...</DIGEST_HEX>
        </DIGEST_ENTRY>
      </FILE_ENTRY>
    </CATALOG>

read_catalog() is strict and raises CatalogLoadError. load_catalog() is what
the controller uses: a missing, empty or malformed document is replaced by an
empty catalog and a warning is logged.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from digest_catalog.exceptions import CatalogLoadError, CatalogPersistError
from digest_catalog.logging import get_logger
from digest_catalog.logging.tags import CATALOG

from .models import Catalog

logger = get_logger(__name__)

ROOT_TAG = "CATALOG"
FILE_ENTRY_TAG = "FILE_ENTRY"
FILE_NAME_TAG = "FILE_NAME"
DIGEST_ENTRY_TAG = "DIGEST_ENTRY"
DIGEST_TYPE_TAG = "DIGEST_TYPE"
DIGEST_HEX_TAG = "DIGEST_HEX"


# Characters outside the XML 1.0 Char production, plus carriage return, which
# parsers normalize to a line feed.
_UNREPRESENTABLE = re.compile("[^\t\n\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def is_representable(name: str) -> bool:
    """Whether a file name survives a write/read cycle through the catalog XML."""
    return bool(name) and _UNREPRESENTABLE.search(name) is None


def _child_text(element: ET.Element, tag: str, strip: bool = True) -> Optional[str]:
    child = element.find(tag)
    if child is None or child.text is None:
        return None
    text = child.text.strip() if strip else child.text
    return text or None


def _catalog_from_root(root: ET.Element, path: Path) -> Catalog:
    catalog = Catalog()

    for file_el in root.findall(FILE_ENTRY_TAG):
        name = _child_text(file_el, FILE_NAME_TAG, strip=False)
        if name is None:
            logger.warning(f"{CATALOG} {path}: skipping {FILE_ENTRY_TAG} without {FILE_NAME_TAG}")
            continue

        file_entry = catalog.ensure_entry(name)

        for digest_el in file_el.findall(DIGEST_ENTRY_TAG):
            algorithm = _child_text(digest_el, DIGEST_TYPE_TAG)
            hex_digest = _child_text(digest_el, DIGEST_HEX_TAG)
            if algorithm is None or hex_digest is None:
                logger.warning(f"{CATALOG} {path}: skipping incomplete {DIGEST_ENTRY_TAG} for '{name}'")
                continue

            if not file_entry.add(algorithm.upper(), hex_digest.lower()):
                logger.warning(
                    f"{CATALOG} {path}: ignoring duplicate {algorithm.upper()} digest for '{name}'"
                )

    return catalog


def read_catalog(path: str | Path) -> Catalog:
    """
    Parse a catalog document.

    Raises:
        CatalogLoadError: If the file is missing, empty, unreadable, not
            well-formed XML, or its root element is not <CATALOG>.
    """
    path = Path(path)

    if not path.exists():
        raise CatalogLoadError(path, "file does not exist")

    try:
        if path.stat().st_size == 0:
            raise CatalogLoadError(path, "file is empty")
        tree = ET.parse(path)
    except ET.ParseError as exc:
        raise CatalogLoadError(path, f"malformed XML ({exc})") from exc
    except OSError as exc:
        raise CatalogLoadError(path, exc.strerror or str(exc)) from exc

    root = tree.getroot()
    if root.tag != ROOT_TAG:
        raise CatalogLoadError(path, f"unexpected root element <{root.tag}>")

    catalog = _catalog_from_root(root, path)
    logger.info(f"{CATALOG} Loaded {len(catalog)} file entries ({catalog.digest_count} digests) from {path}")
    return catalog


def load_catalog(path: str | Path) -> Catalog:
    """Read a catalog, falling back to an empty one if it cannot be loaded."""
    try:
        return read_catalog(path)
    except CatalogLoadError as exc:
        logger.warning(f"{CATALOG} {exc}. Starting with an empty catalog.")
        return Catalog()


def catalog_to_element(catalog: Catalog) -> ET.Element:
    """Build the XML element tree for a catalog."""
    root = ET.Element(ROOT_TAG)

    for file_entry in catalog:
        file_el = ET.SubElement(root, FILE_ENTRY_TAG)
        ET.SubElement(file_el, FILE_NAME_TAG).text = file_entry.name

        for entry in file_entry.digests:
            digest_el = ET.SubElement(file_el, DIGEST_ENTRY_TAG)
            ET.SubElement(digest_el, DIGEST_TYPE_TAG).text = entry.algorithm
            ET.SubElement(digest_el, DIGEST_HEX_TAG).text = entry.hex

    return root


def save_catalog(catalog: Catalog, path: str | Path, indent: int = 4) -> None:
    """
    Write the catalog to ``path``, replacing any existing document.

    The document is written to a sibling temporary file first and then moved
    over the target.

    Raises:
        ValueError: If ``indent`` is less than 1.
        CatalogPersistError: If a file name cannot be stored in XML (checked
            before anything is written) or the document cannot be written.
    """
    if indent < 1:
        raise ValueError(f"indent must be at least 1, got {indent}")

    path = Path(path)
    unrepresentable = [entry.name for entry in catalog if not is_representable(entry.name)]
    if unrepresentable:
        names = ", ".join(repr(name) for name in unrepresentable)
        raise CatalogPersistError(path, f"file names cannot be stored in XML: {names}")

    tree = ET.ElementTree(catalog_to_element(catalog))
    ET.indent(tree, space=" " * indent)

    temp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        tree.write(temp_path, encoding="utf-8", xml_declaration=True)
        temp_path.replace(path)
    except OSError as exc:
        temp_path.unlink(missing_ok=True)
        raise CatalogPersistError(path, exc.strerror or str(exc)) from exc

    logger.info(f"{CATALOG} Wrote {len(catalog)} file entries ({catalog.digest_count} digests) to {path}")


__all__ = [
    "ROOT_TAG",
    "is_representable",
    "read_catalog",
    "load_catalog",
    "catalog_to_element",
    "save_catalog",
]
