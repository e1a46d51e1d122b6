"""Tests for installed version discovery."""

import os

import pytest

from activation.store import SymlinkActivationStore
from errors import RepositoryReadError
from installation.repository import VersionRepository
from tests.fakes import place_binary


class _FixedStore:
    """Store stub reporting a fixed target."""

    location = "stub"

    def __init__(self, target=None):
        self.target = target

    def current_target(self):
        return self.target

    def replace(self, target):
        self.target = str(target)


@pytest.fixture
def root(tmp_path):
    path = tmp_path / ".palawija"
    path.mkdir()
    return path


class TestListInstalled:
    """Enumeration of php-* directories."""

    def test_missing_root_is_empty_not_error(self, tmp_path):
        repo = VersionRepository(tmp_path / "absent", _FixedStore())
        assert repo.root_exists() is False
        assert repo.list_installed() == []

    def test_lists_only_php_directories(self, root):
        (root / "php-8.3.0").mkdir()
        (root / "php-7.4.33").mkdir()
        (root / "notes").mkdir()
        (root / "php-8.2.0.tar.gz").write_bytes(b"")
        repo = VersionRepository(root, _FixedStore())
        assert [v.version for v in repo.list_installed()] == ["7.4.33", "8.3.0"]

    def test_lexicographic_order(self, root):
        for version in ("8.10.0", "8.9.0", "8.2.1"):
            (root / f"php-{version}").mkdir()
        repo = VersionRepository(root, _FixedStore())
        assert [v.version for v in repo.list_installed()] == ["8.10.0", "8.2.1", "8.9.0"]

    def test_version_is_not_revalidated(self, root):
        (root / "php-custom-build").mkdir()
        repo = VersionRepository(root, _FixedStore())
        assert [v.version for v in repo.list_installed()] == ["custom-build"]

    def test_has_binary_reflects_compiled_state(self, root):
        (root / "php-8.3.0").mkdir()
        place_binary(root / "php-8.2.0")
        repo = VersionRepository(root, _FixedStore())
        states = {v.version: v.has_binary for v in repo.list_installed()}
        assert states == {"8.2.0": True, "8.3.0": False}

    def test_windows_binary_layout(self, root):
        place_binary(root / "php-8.3.0", relpath=("php.exe",))
        repo = VersionRepository(root, _FixedStore(), binary_relpath=("php.exe",))
        (item,) = repo.list_installed()
        assert item.has_binary is True
        assert item.binary_path == root / "php-8.3.0" / "php.exe"

    def test_unreadable_root_raises(self, root, monkeypatch):
        def _denied(_path):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(os, "scandir", _denied)
        repo = VersionRepository(root, _FixedStore())
        with pytest.raises(RepositoryReadError) as excinfo:
            repo.list_installed()
        assert str(root) in str(excinfo.value)


class TestFind:
    """Lookup of a single version."""

    def test_find_existing(self, root):
        (root / "php-8.3.0").mkdir()
        repo = VersionRepository(root, _FixedStore())
        item = repo.find("8.3.0")
        assert item is not None
        assert item.install_path == root / "php-8.3.0"
        assert item.has_binary is False

    def test_find_missing(self, root):
        repo = VersionRepository(root, _FixedStore())
        assert repo.find("8.3.0") is None


class TestActiveDetection:
    """Comparison of the pointer target with binary paths."""

    def test_no_pointer_means_nothing_active(self, root):
        place_binary(root / "php-8.3.0")
        repo = VersionRepository(root, _FixedStore(None))
        assert repo.active_versions() == []

    def test_pointer_matches_one_version(self, root):
        binary = place_binary(root / "php-8.3.0")
        place_binary(root / "php-8.2.0")
        repo = VersionRepository(root, _FixedStore(str(binary)))
        assert [v.version for v in repo.active_versions()] == ["8.3.0"]
        assert repo.is_active(repo.find("8.3.0")) is True
        assert repo.is_active(repo.find("8.2.0")) is False

    def test_source_only_version_is_never_active(self, root):
        (root / "php-8.3.0").mkdir()
        target = str(root / "php-8.3.0" / "bin" / "php")
        repo = VersionRepository(root, _FixedStore(target))
        assert repo.active_versions() == []

    def test_reads_real_symlink(self, root, tmp_path):
        binary = place_binary(root / "php-8.3.0")
        link = tmp_path / "php"
        os.symlink(str(binary), link)
        repo = VersionRepository(root, SymlinkActivationStore(link))
        assert [v.version for v in repo.active_versions()] == ["8.3.0"]

    def test_foreign_pointer_matches_nothing(self, root):
        place_binary(root / "php-8.3.0")
        repo = VersionRepository(root, _FixedStore("/usr/bin/php8.1"))
        assert repo.active_versions() == []
