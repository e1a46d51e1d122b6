"""Switching the system PHP between installed versions."""

from .store import ActivationStore, PathPrefixActivationStore, SymlinkActivationStore
from .activator import (
    Activator,
    LinkBasedActivator,
    PathPrefixActivator,
    build_store,
    select_activator,
)

__all__ = [
    "ActivationStore",
    "SymlinkActivationStore",
    "PathPrefixActivationStore",
    "Activator",
    "LinkBasedActivator",
    "PathPrefixActivator",
    "build_store",
    "select_activator",
]
