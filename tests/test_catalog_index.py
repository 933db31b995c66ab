# tests/test_catalog_index.py
"""
Tests for digest_catalog.catalog models and index.

Key tests verify that:
1. The catalog keeps at most one digest per (file, algorithm)
2. The index pools digests across algorithms by default
3. Recording is idempotent and keeps both maps in lockstep
"""

import pytest

from digest_catalog.catalog import Catalog, CatalogIndex, DigestEntry, build_index


def make_catalog() -> Catalog:
    catalog = Catalog()
    catalog.add_digest("a.txt", "MD5", "aaa")
    catalog.add_digest("a.txt", "SHA1", "a1a1")
    catalog.add_digest("b.txt", "MD5", "bbb")
    return catalog


class TestCatalog:
    """Tests for the Catalog tree."""

    def test_empty(self):
        catalog = Catalog()

        assert len(catalog) == 0
        assert catalog.get("a.txt") is None
        assert "a.txt" not in catalog

    def test_add_digest_creates_entry(self):
        catalog = Catalog()

        assert catalog.add_digest("a.txt", "MD5", "aaa") is True

        entry = catalog.get("a.txt")
        assert entry is not None
        assert entry.digests == [DigestEntry(algorithm="MD5", hex="aaa")]

    def test_same_algorithm_twice_is_noop(self):
        """Re-adding the same algorithm for the same file changes nothing."""
        catalog = Catalog()
        catalog.add_digest("a.txt", "MD5", "aaa")

        assert catalog.add_digest("a.txt", "MD5", "aaa") is False
        assert catalog.add_digest("a.txt", "MD5", "other") is False
        assert catalog.digest_count == 1
        assert catalog.get("a.txt").get("MD5").hex == "aaa"

    def test_different_algorithms_coexist(self):
        catalog = make_catalog()

        assert len(catalog) == 2
        assert catalog.digest_count == 3
        assert [e.algorithm for e in catalog.get("a.txt").digests] == ["MD5", "SHA1"]

    def test_iteration_keeps_insertion_order(self):
        catalog = Catalog()
        for name in ["z", "a", "m"]:
            catalog.ensure_entry(name)

        assert [entry.name for entry in catalog] == ["z", "a", "m"]


class TestCatalogIndex:
    """Tests for CatalogIndex."""

    def test_build_from_catalog(self):
        index = build_index(make_catalog())

        assert index.file_digests == {"a.txt": {"aaa", "a1a1"}, "b.txt": {"bbb"}}
        assert index.digest_files == {"aaa": {"a.txt"}, "a1a1": {"a.txt"}, "bbb": {"b.txt"}}

    def test_empty_catalog(self):
        index = build_index(Catalog())

        assert index.known_digests_for("a.txt") == frozenset()
        assert index.files_recording_digest("aaa") == frozenset()

    def test_known_digests_pooled(self):
        """Without an algorithm, all recorded digests count."""
        index = build_index(make_catalog())

        assert index.known_digests_for("a.txt") == {"aaa", "a1a1"}

    def test_known_digests_for_algorithm(self):
        index = build_index(make_catalog())

        assert index.known_digests_for("a.txt", "SHA1") == {"a1a1"}
        assert index.known_digests_for("a.txt", "SHA256") == frozenset()
        assert index.known_digests_for("b.txt", "SHA1") == frozenset()

    def test_file_entry_without_digests_is_known_name(self):
        catalog = Catalog()
        catalog.ensure_entry("empty.txt")

        index = build_index(catalog)

        assert "empty.txt" in index
        assert index.known_digests_for("empty.txt") == frozenset()

    def test_shared_digest_has_two_owners(self):
        catalog = make_catalog()
        catalog.add_digest("c.txt", "MD5", "bbb")

        index = build_index(catalog)

        assert index.files_recording_digest("bbb") == {"b.txt", "c.txt"}

    def test_record_updates_both_maps(self):
        index = CatalogIndex()

        assert index.record("a.txt", "MD5", "aaa") is True

        assert index.known_digests_for("a.txt") == {"aaa"}
        assert index.files_recording_digest("aaa") == {"a.txt"}

    def test_record_is_idempotent(self):
        index = CatalogIndex()
        index.record("a.txt", "MD5", "aaa")

        assert index.record("a.txt", "MD5", "aaa") is False
        assert index.file_digests == {"a.txt": {"aaa"}}
        assert index.digest_files == {"aaa": {"a.txt"}}

    def test_record_existing_algorithm_is_noop(self):
        """Mirrors the catalog: one digest per (file, algorithm)."""
        index = CatalogIndex()
        index.record("a.txt", "MD5", "aaa")

        assert index.record("a.txt", "MD5", "zzz") is False
        assert index.files_recording_digest("zzz") == frozenset()

    def test_lookups_do_not_mutate(self):
        index = build_index(make_catalog())
        before = {k: set(v) for k, v in index.file_digests.items()}

        index.known_digests_for("missing")
        index.files_recording_digest("missing")

        assert dict(index.file_digests) == before
        assert "missing" not in index

    def test_views_are_read_only(self):
        index = build_index(make_catalog())

        with pytest.raises(TypeError):
            index.file_digests["x"] = set()  # type: ignore[index]
