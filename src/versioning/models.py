"""Data models for PHP versions, installs and the release catalog."""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import FrozenSet, List, Optional

import semantic_version

from constants import ReleaseBranches


class ReleaseStatus(Enum):
    """Support status of a PHP branch."""
    ACTIVE = "Active"
    LTS = "LTS"
    EOL = "EOL"


class InstallState(Enum):
    """Lifecycle of a version; only COMPILED may become ACTIVE."""
    UNINSTALLED = "uninstalled"
    SOURCE_ONLY = "source only"
    COMPILED = "ready"
    ACTIVE = "active"


_DIGIT = re.compile(r"\d")


def is_version_like(version: str) -> bool:
    """Loose check used before downloading: a dot and at least one digit."""
    return "." in version and bool(_DIGIT.search(version))


def is_release_version(version: str) -> bool:
    """True for a plain ``major.minor.patch`` release without suffixes."""
    try:
        parsed = semantic_version.Version(version)
    except ValueError:
        return False
    return not parsed.prerelease and not parsed.build


@dataclass(frozen=True)
class StatusTable:
    """Static classification of major.minor branches."""
    active: FrozenSet[str] = frozenset(ReleaseBranches.ACTIVE)
    lts: FrozenSet[str] = frozenset(ReleaseBranches.LTS)

    def status_of(self, branch: str) -> ReleaseStatus:
        if branch in self.active:
            return ReleaseStatus.ACTIVE
        if branch in self.lts:
            return ReleaseStatus.LTS
        return ReleaseStatus.EOL


@dataclass
class CatalogEntry:
    """A version discovered on the releases page and its branch status."""
    version: str
    status: ReleaseStatus


@dataclass
class Catalog:
    """Parsed releases listing.

    ``versions`` holds every distinct version found on the page; ``entries``
    holds the ones that passed the prefix filter, classified.
    """
    versions: List[str] = field(default_factory=list)
    entries: List[CatalogEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.versions


@dataclass
class InstalledVersion:
    """A ``php-<version>`` directory under the installation root."""
    version: str
    install_path: Path
    binary_path: Path
    has_binary: bool

    @property
    def state(self) -> InstallState:
        return InstallState.COMPILED if self.has_binary else InstallState.SOURCE_ONLY


@dataclass
class InstallResult:
    """Outcome of an install request."""
    version: str
    path: Path
    already_installed: bool
    has_binary: bool


@dataclass
class ActivationResult:
    """Outcome of a successful activation.

    ``warnings`` collects advisory findings (a binary that did not answer
    ``--version``, a post-switch check that failed); none of them undo the
    switch.
    """
    version: str
    binary_path: Path
    pointer: str
    probe_output: Optional[str] = None
    post_check_output: Optional[str] = None
    warnings: List[str] = field(default_factory=list)
    note: Optional[str] = None
