"""Wiring of the objects a command needs.

Built once per invocation in ``palawija.main``; tests build it directly with
a fake system and paths under a temporary directory.
"""

from __future__ import annotations

from dataclasses import dataclass

from activation.activator import Activator, build_store, select_activator
from activation.store import ActivationStore
from common.system import SystemInterface
from installation.installer import Installer
from installation.repository import VersionRepository
from settings import Settings


@dataclass
class AppContext:
    """Per-invocation collaborators shared by the command handlers."""

    settings: Settings
    system: SystemInterface
    store: ActivationStore
    repository: VersionRepository
    installer: Installer
    activator: Activator


def build_context(settings: Settings, system: SystemInterface) -> AppContext:
    store = build_store(settings, system)
    repository = VersionRepository(settings.install_root, store, settings.binary_relpath)
    return AppContext(
        settings=settings,
        system=system,
        store=store,
        repository=repository,
        installer=Installer(repository, system),
        activator=select_activator(settings, repository, store, system),
    )
