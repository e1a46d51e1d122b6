"""The global activation pointer.

Exactly one place in the system decides which PHP the bare ``php`` command
runs. On POSIX hosts that is a symbolic link (``/usr/local/bin/php`` by
default); on Windows it is the front of the user's persistent PATH.
"""
from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from common.logging_utils import extra_context, is_debug_enabled
from common.system import SystemInterface
from errors import PointerCreationError, PointerReadError, PointerRemovalError

logger = logging.getLogger(__name__)


class ActivationStore(ABC):
    """Read and replace the single activation pointer."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where the pointer lives."""

    @abstractmethod
    def current_target(self) -> Optional[str]:
        """Binary path the pointer resolves to, or None when there is none.

        Raises:
            PointerReadError: If the pointer exists but cannot be read.
        """

    @abstractmethod
    def replace(self, target: Path) -> None:
        """Point at ``target``, replacing any previous pointer."""


def _discard(path: Path) -> None:
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not remove temporary link %s: %s", path, exc)


class SymlinkActivationStore(ActivationStore):
    """Pointer implemented as a symbolic link.

    Replacement creates a temporary link next to the pointer and renames it
    over the old one, so at every instant the pointer either has its old
    target or its new one.
    """

    def __init__(self, link_path: Path):
        self.link_path = Path(link_path)

    @property
    def location(self) -> str:
        return str(self.link_path)

    def current_target(self) -> Optional[str]:
        if not os.path.islink(self.link_path):
            return None
        try:
            return os.readlink(self.link_path)
        except OSError as exc:
            raise PointerReadError(self.location, str(exc)) from exc

    def _temp_path(self) -> Path:
        return self.link_path.with_name(f".{self.link_path.name}.palawija-{os.getpid()}")

    def replace(self, target: Path) -> None:
        link = self.link_path
        tmp = self._temp_path()
        had_pointer = os.path.lexists(link)
        if os.path.lexists(tmp):
            _discard(tmp)

        if is_debug_enabled(logger):
            logger.debug(
                "Replacing activation pointer",
                extra=extra_context(event="pointer_replace", component="activation_store",
                                    action="symlink", target=str(target),
                                    outcome="existing" if had_pointer else "fresh"),
            )

        try:
            os.symlink(str(Path(target).absolute()), tmp)
        except OSError as exc:
            raise PointerCreationError(str(link), str(exc),
                                       pointer_present=os.path.lexists(link)) from exc

        try:
            os.replace(tmp, link)
        except OSError as exc:
            _discard(tmp)
            if had_pointer:
                raise PointerRemovalError(str(link), str(exc)) from exc
            raise PointerCreationError(str(link), str(exc),
                                       pointer_present=os.path.lexists(link)) from exc


class PathPrefixActivationStore(ActivationStore):
    """Pointer implemented as the first PATH entry holding ``php.exe``.

    Weaker than the symlink variant: activating prepends the new directory
    and leaves older entries in place, merely shadowed.
    """

    def __init__(self, system: SystemInterface, binary_name: str = "php.exe"):
        self.system = system
        self.binary_name = binary_name

    @property
    def location(self) -> str:
        return "user PATH"

    def current_target(self) -> Optional[str]:
        try:
            entries = self.system.get_user_path()
        except OSError as exc:
            raise PointerReadError(self.location, str(exc)) from exc
        for entry in entries:
            candidate = os.path.join(entry, self.binary_name)
            if os.path.isfile(candidate):
                return candidate
        return None

    def replace(self, target: Path) -> None:
        directory = str(Path(target).absolute().parent)
        try:
            entries = self.system.get_user_path()
        except OSError as exc:
            raise PointerCreationError(self.location, str(exc)) from exc
        if entries and entries[0] == directory:
            return
        updated = [directory] + [entry for entry in entries if entry != directory]
        try:
            self.system.set_user_path(updated)
        except OSError as exc:
            raise PointerCreationError(self.location, str(exc)) from exc
        os.environ["PATH"] = directory + os.pathsep + os.environ.get("PATH", "")
