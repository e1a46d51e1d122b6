"""Source installation: download a php.net tarball and unpack it.

Compiling is left to the user; an install produces a source-only version.
"""
from __future__ import annotations

import logging
from pathlib import Path

from common.system import SystemInterface
from constants import Constants
from errors import InstallationError, InvalidVersionFormat, NetworkFailure
from installation.repository import VersionRepository
from registry.php_net import tarball_name, tarball_url
from versioning.models import InstallResult, is_release_version, is_version_like

logger = logging.getLogger(__name__)


class Installer:
    """Fetch and extract PHP sources into ``<root>/php-<version>/``."""

    def __init__(self, repository: VersionRepository, system: SystemInterface,
                 base_url: str = Constants.DISTRIBUTIONS_URL):
        self.repository = repository
        self.system = system
        self.base_url = base_url

    def install(self, version: str) -> InstallResult:
        """Install the sources of ``version``.

        An existing version directory short-circuits the install; its
        contents are not checked, so an interrupted extraction looks the
        same as a complete one.

        Raises:
            InvalidVersionFormat: The version has no dot or no digit.
            NetworkFailure: The tarball could not be downloaded.
            ExtractionError: The tarball could not be unpacked.
            InstallationError: A directory could not be created or the archive removed.
        """
        if not is_version_like(version):
            raise InvalidVersionFormat(version)
        if not is_release_version(version):
            logger.warning("'%s' is not a plain major.minor.patch release; the download may not exist",
                           version)

        root = self.repository.root
        _make_dir(root)
        logger.info("Installation directory: %s", root)

        target = self.repository.version_dir(version)
        if target.exists():
            existing = self.repository.find(version)
            return InstallResult(version=version, path=target, already_installed=True,
                                 has_binary=bool(existing and existing.has_binary))

        url = tarball_url(version, self.base_url)
        archive = root / tarball_name(version)
        logger.info("Downloading %s", url)
        try:
            self.system.download(url, archive)
        except NetworkFailure as exc:
            _remove_archive(archive)
            raise NetworkFailure(
                url, exc.reason,
                hint=(f"Check that PHP {version} exists (palawija available "
                      f"{'.'.join(version.split('.')[:2])}) and that you are online"),
            ) from exc

        logger.info("Extracting source code to %s", target)
        try:
            _make_dir(target)
            self.system.extract_tarball(archive, target, strip_components=1)
        finally:
            _remove_archive(archive)
        logger.info("Removed download archive %s", archive)

        return InstallResult(version=version, path=target, already_installed=False, has_binary=False)


def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise InstallationError(str(path), exc.strerror or str(exc)) from exc


def _remove_archive(archive: Path) -> None:
    try:
        archive.unlink(missing_ok=True)
    except OSError as exc:
        raise InstallationError(str(archive), exc.strerror or str(exc)) from exc
