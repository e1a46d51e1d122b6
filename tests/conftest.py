"""Shared fixtures."""

import logging

import pytest

from cli_context import build_context
from constants import Platform
from settings import Settings
from tests.fakes import FakeSystem


@pytest.fixture
def system():
    """A fresh fake system with no tarballs registered."""
    return FakeSystem()


@pytest.fixture
def settings(tmp_path):
    """POSIX settings rooted in a temporary directory."""
    link_dir = tmp_path / "usr-local-bin"
    link_dir.mkdir()
    return Settings(
        platform=Platform.POSIX,
        install_root=tmp_path / "home" / ".palawija",
        link_path=link_dir / "php",
    )


@pytest.fixture
def ctx(settings, system):
    """Fully wired application context over the fake system."""
    return build_context(settings, system)


@pytest.fixture(autouse=True)
def _reset_console_handler():
    """Drop the console handler main() installs so it never outlives a captured stderr."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_palawija_handler", False):
            root.removeHandler(handler)
