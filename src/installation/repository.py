"""Installed version discovery.

Installed versions are the ``php-<version>`` directories directly under the
installation root. The active one is whichever compiled version the global
activation pointer resolves to.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from errors import RepositoryReadError
from versioning.models import InstalledVersion

logger = logging.getLogger(__name__)


class VersionRepository:
    """Read-only view over ``<root>/php-*`` directories."""

    def __init__(self, root: Path, store, binary_relpath: Sequence[str] = Constants.POSIX_BINARY):
        """Initialize the repository.

        Args:
            root: Installation root, e.g. ``~/.palawija``.
            store: Activation store consulted for the current pointer target.
            binary_relpath: Binary location inside a version directory.
        """
        self.root = Path(root)
        self.store = store
        self.binary_relpath = tuple(binary_relpath)

    def root_exists(self) -> bool:
        return self.root.is_dir()

    def version_dir(self, version: str) -> Path:
        return self.root / f"{Constants.DIR_PREFIX}{version}"

    def _entry(self, version: str, path: Path) -> InstalledVersion:
        binary = path.joinpath(*self.binary_relpath)
        return InstalledVersion(
            version=version,
            install_path=path,
            binary_path=binary,
            has_binary=binary.exists(),
        )

    def list_installed(self) -> List[InstalledVersion]:
        """List installed versions sorted lexicographically by version string.

        A missing root yields an empty list.

        Raises:
            RepositoryReadError: If the root exists but cannot be read.
        """
        if not self.root.exists():
            return []
        try:
            with os.scandir(self.root) as it:
                names = [
                    entry.name for entry in it
                    if entry.name.startswith(Constants.DIR_PREFIX) and entry.is_dir()
                ]
        except OSError as exc:
            raise RepositoryReadError(str(self.root), str(exc)) from exc

        prefix_len = len(Constants.DIR_PREFIX)
        installed = [self._entry(name[prefix_len:], self.root / name) for name in names]
        installed.sort(key=lambda item: item.version)
        if is_debug_enabled(logger):
            logger.debug(
                "Scanned installation root",
                extra=extra_context(event="scan", component="repository",
                                    action="list_installed", count=len(installed)),
            )
        return installed

    def find(self, version: str) -> Optional[InstalledVersion]:
        path = self.version_dir(version)
        if not path.is_dir():
            return None
        return self._entry(version, path)

    def active_versions(self, installed: Optional[List[InstalledVersion]] = None) -> List[InstalledVersion]:
        """Return every compiled version the pointer resolves to.

        Normally this is zero or one entry. Anything more points at a stale
        or hand-edited pointer, and all matches are returned for the caller
        to report.
        """
        target = self.store.current_target()
        if target is None:
            return []
        if installed is None:
            installed = self.list_installed()
        return [item for item in installed if item.has_binary and str(item.binary_path) == target]

    def is_active(self, item: InstalledVersion) -> bool:
        target = self.store.current_target()
        return item.has_binary and target is not None and str(item.binary_path) == target
