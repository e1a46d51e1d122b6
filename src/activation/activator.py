"""Activation: making exactly one compiled version the system PHP.

Both variants follow the same contract:

1. the version must be installed and compiled (``NotInstalled`` /
   ``NotCompiled`` otherwise, and the pointer is left alone);
2. the binary is asked for its version; a failure only adds a warning;
3. the activation store replaces the pointer; its errors are fatal;
4. the global entry point is probed again; a failure only adds a warning.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from activation.store import ActivationStore, PathPrefixActivationStore, SymlinkActivationStore
from common.system import ProbeResult, SystemInterface
from constants import Platform
from errors import NotCompiled, NotInstalled
from installation.repository import VersionRepository
from settings import Settings
from versioning.models import ActivationResult

logger = logging.getLogger(__name__)


class Activator(ABC):
    """Shared pre/postcondition handling for activation variants."""

    def __init__(self, repository: VersionRepository, store: ActivationStore,
                 system: SystemInterface):
        self.repository = repository
        self.store = store
        self.system = system

    @abstractmethod
    def global_entry_point(self) -> Optional[str]:
        """Command or path that the bare ``php`` now resolves to."""

    def note(self) -> Optional[str]:
        """Caveat about the mechanism, shown after a successful switch."""
        return None

    def activate(self, version: str) -> ActivationResult:
        """Switch the system PHP to ``version``.

        Raises:
            NotInstalled: No ``php-<version>`` directory exists.
            NotCompiled: The directory exists but holds no binary.
            PointerError: The pointer could not be replaced.
        """
        installed = self.repository.find(version)
        if installed is None:
            raise NotInstalled(version, str(self.repository.version_dir(version)))
        if not installed.has_binary:
            raise NotCompiled(version, str(installed.binary_path))

        binary = installed.binary_path
        result = ActivationResult(version=version, binary_path=binary,
                                  pointer=self.store.location, note=self.note())

        probe = self.system.probe_version(str(binary))
        if probe.ok:
            result.probe_output = probe.output
            logger.info("Found working PHP binary: %s", probe.output or binary)
        else:
            result.warnings.append(_advisory("PHP binary may not be working properly", probe))

        logger.info("Pointing %s at %s", self.store.location, binary)
        self.store.replace(binary)

        entry_point = self.global_entry_point()
        if entry_point is None:
            result.warnings.append("Could not locate the global php entry point to verify the switch")
            return result
        post = self.system.probe_version(entry_point)
        if post.ok:
            result.post_check_output = post.output
        else:
            result.warnings.append(_advisory("Could not verify the switch, but the pointer was updated", post))
        return result


def _advisory(message: str, probe: ProbeResult) -> str:
    return f"{message} ({probe.error})" if probe.error else message


class LinkBasedActivator(Activator):
    """POSIX variant: the pointer is a symlink such as ``/usr/local/bin/php``."""

    def global_entry_point(self) -> Optional[str]:
        return self.store.location


class PathPrefixActivator(Activator):
    """Windows variant: the pointer is the front of the user's PATH."""

    def global_entry_point(self) -> Optional[str]:
        return self.store.current_target()

    def note(self) -> Optional[str]:
        return ("PATH was updated by prepending the version directory; older PHP "
                "entries remain in PATH and are only shadowed. Open a new terminal "
                "for the change to take effect.")


def build_store(settings: Settings, system: SystemInterface) -> ActivationStore:
    """Pick the activation store for the configured platform."""
    if settings.platform == Platform.WINDOWS:
        return PathPrefixActivationStore(system, binary_name=settings.binary_relpath[-1])
    return SymlinkActivationStore(settings.link_path)


def select_activator(settings: Settings, repository: VersionRepository,
                     store: ActivationStore, system: SystemInterface) -> Activator:
    """Pick the activator variant for the configured platform."""
    if settings.platform == Platform.WINDOWS:
        return PathPrefixActivator(repository, store, system)
    return LinkBasedActivator(repository, store, system)
