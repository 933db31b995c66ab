# tests/test_digest_engine.py
"""
Tests for digest_catalog.digest.engine module.
"""

import hashlib
from pathlib import Path

import pytest

from digest_catalog.digest import (
    SUPPORTED_ALGORITHMS,
    compute_digest,
    digest_length,
    normalize_algorithm,
)
from digest_catalog.exceptions import (
    FileReadError,
    UnreadableFileError,
    UnsupportedAlgorithmError,
)


class TestNormalizeAlgorithm:
    """Tests for algorithm name normalization."""

    @pytest.mark.parametrize("name", ["md5", "Sha1", "sha256", "SHA512", " sha256 "])
    def test_case_insensitive(self, name):
        """Any casing maps to the upper-case catalog name."""
        assert normalize_algorithm(name) == name.strip().upper()

    @pytest.mark.parametrize("name", ["SHA384", "crc32", "", "SHA-256"])
    def test_unsupported(self, name):
        """Unknown names raise UnsupportedAlgorithmError."""
        with pytest.raises(UnsupportedAlgorithmError) as exc_info:
            normalize_algorithm(name)

        assert exc_info.value.supported == ("MD5", "SHA1", "SHA256", "SHA512")

    def test_unsupported_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_algorithm("whirlpool")


class TestComputeDigest:
    """Tests for compute_digest."""

    def test_md5_hello(self, tmp_path: Path):
        path = tmp_path / "a.txt"
        path.write_bytes(b"hello")

        assert compute_digest(path, "MD5") == "5d41402abc4b2a76b9719d911017c592"

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty"
        path.write_bytes(b"")

        assert compute_digest(path, "md5") == "d41d8cd98f00b204e9800998ecf8427e"

    @pytest.mark.parametrize("algorithm,length", [("MD5", 32), ("SHA1", 40), ("SHA256", 64), ("SHA512", 128)])
    def test_lengths_and_lowercase(self, tmp_path: Path, algorithm, length):
        """Digest is lowercase hex of the algorithm's length."""
        path = tmp_path / "data.bin"
        path.write_bytes(bytes(range(256)) * 10)

        digest = compute_digest(path, algorithm)

        assert len(digest) == length == digest_length(algorithm)
        assert digest == digest.lower()
        assert digest == hashlib.new(SUPPORTED_ALGORITHMS[algorithm], path.read_bytes()).hexdigest()

    def test_chunk_size_does_not_change_result(self, tmp_path: Path):
        """Reading in small chunks produces the same digest as one big read."""
        path = tmp_path / "big.bin"
        path.write_bytes(b"x" * 10_000 + b"tail")

        assert compute_digest(path, "SHA256", chunk_size=7) == compute_digest(path, "SHA256", chunk_size=1 << 20)

    def test_invalid_chunk_size(self, tmp_path: Path):
        path = tmp_path / "a.txt"
        path.write_bytes(b"hello")

        with pytest.raises(ValueError):
            compute_digest(path, "MD5", chunk_size=0)

    def test_missing_file(self, tmp_path: Path):
        """A file that cannot be opened raises FileReadError."""
        with pytest.raises(FileReadError) as exc_info:
            compute_digest(tmp_path / "gone.txt", "MD5")

        assert exc_info.value.path == tmp_path / "gone.txt"
        assert UnreadableFileError is FileReadError

    def test_directory_is_unreadable(self, tmp_path: Path):
        with pytest.raises(FileReadError):
            compute_digest(tmp_path, "MD5")

    def test_unsupported_algorithm_checked_before_reading(self, tmp_path: Path):
        with pytest.raises(UnsupportedAlgorithmError):
            compute_digest(tmp_path / "gone.txt", "SHA3")
