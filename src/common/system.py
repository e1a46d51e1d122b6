"""System interface: the side effects the core needs from the host.

Network downloads, archive extraction, running a PHP binary to ask for its
version, ``which`` lookups and the persistent per-user PATH all go through
:class:`SystemInterface`, so installer and activator logic can be exercised
with a fake in tests.
"""
from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tarfile
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Iterator, List, Optional

from constants import Constants
from common.http_client import download_to_file
from common.logging_utils import extra_context, is_debug_enabled
from errors import ExtractionError

logger = logging.getLogger(__name__)


@dataclass
class ProbeResult:
    """Outcome of running ``<binary> --version``.

    ``ok`` is False both when the binary ran and failed and when it could not
    be started at all; ``error`` tells the two apart for messages.
    """

    ok: bool
    output: Optional[str] = None
    error: Optional[str] = None


class SystemInterface(ABC):
    """Host operations used by the installer and the activators."""

    @abstractmethod
    def download(self, url: str, dest: Path) -> int:
        """Download ``url`` to ``dest`` and return the byte count."""

    @abstractmethod
    def extract_tarball(self, archive: Path, dest: Path, strip_components: int = 1) -> None:
        """Unpack a ``.tar.gz`` into ``dest`` dropping leading path components."""

    @abstractmethod
    def probe_version(self, binary: str) -> ProbeResult:
        """Run ``binary --version`` and capture the first line of output."""

    @abstractmethod
    def which(self, name: str) -> Optional[str]:
        """Resolve an executable name against PATH."""

    @abstractmethod
    def get_user_path(self) -> List[str]:
        """Return the persistent per-user PATH entries (Windows only)."""

    @abstractmethod
    def set_user_path(self, entries: List[str]) -> None:
        """Persist the per-user PATH entries (Windows only).

        Raises:
            OSError: If the environment cannot be written.
        """


def _is_unsafe(name: str) -> bool:
    path = PurePosixPath(name)
    return path.is_absolute() or ".." in path.parts


def _strip_members(tar: tarfile.TarFile, strip: int) -> Iterator[tarfile.TarInfo]:
    """Yield members with their first ``strip`` path components removed.

    Raises:
        tarfile.ExtractError: If a member or link target is absolute, or a
            member or hard link target climbs out with ``..``.
    """
    for member in tar.getmembers():
        if (_is_unsafe(member.name)
                or (member.islnk() and _is_unsafe(member.linkname))
                or (member.issym() and PurePosixPath(member.linkname).is_absolute())):
            raise tarfile.ExtractError(f"refusing unsafe archive member {member.name!r}")
        parts = PurePosixPath(member.name).parts
        if len(parts) <= strip:
            continue
        member.name = str(PurePosixPath(*parts[strip:]))
        if member.islnk():
            # hard link targets are archive paths as well
            link_parts = PurePosixPath(member.linkname).parts
            if len(link_parts) > strip:
                member.linkname = str(PurePosixPath(*link_parts[strip:]))
        yield member


class LocalSystem(SystemInterface):
    """The real host: requests, tarfile, subprocess and the registry."""

    def download(self, url: str, dest: Path) -> int:
        return download_to_file(url, dest, context="PHP source download")

    def extract_tarball(self, archive: Path, dest: Path, strip_components: int = 1) -> None:
        if is_debug_enabled(logger):
            logger.debug(
                "Extracting archive",
                extra=extra_context(event="extract", component="system",
                                    action="extract_tarball", target=str(archive)),
            )
        try:
            with tarfile.open(archive, "r:gz") as tar:
                members = _strip_members(tar, strip_components)
                if hasattr(tarfile, "data_filter"):
                    tar.extractall(dest, members=members, filter="data")
                else:
                    tar.extractall(dest, members=members)
        except (tarfile.TarError, OSError) as exc:
            raise ExtractionError(str(archive), str(dest), str(exc)) from exc

    def probe_version(self, binary: str) -> ProbeResult:
        try:
            proc = subprocess.run(
                [binary, "--version"],
                capture_output=True,
                text=True,
                timeout=Constants.PROBE_TIMEOUT,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            return ProbeResult(ok=False, error=f"could not run {binary}: {exc}")
        lines = proc.stdout.strip().splitlines()
        first = lines[0].strip() if lines else None
        if proc.returncode != 0:
            return ProbeResult(ok=False, output=first,
                               error=f"{binary} exited with status {proc.returncode}")
        return ProbeResult(ok=True, output=first)

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)

    def get_user_path(self) -> List[str]:
        import winreg  # pylint: disable=import-outside-toplevel,import-error

        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, "Environment") as key:
                value, _ = winreg.QueryValueEx(key, "Path")
        except FileNotFoundError:
            return []
        return [entry for entry in str(value).split(os.pathsep) if entry]

    def set_user_path(self, entries: List[str]) -> None:
        import winreg  # pylint: disable=import-outside-toplevel,import-error

        with winreg.OpenKey(winreg.HKEY_CURRENT_USER, "Environment", 0,
                            winreg.KEY_SET_VALUE) as key:
            winreg.SetValueEx(key, "Path", 0, winreg.REG_EXPAND_SZ, os.pathsep.join(entries))
