"""Runtime settings resolved from the environment.

There is no configuration file: the installation root follows ``HOME`` (or
``APPDATA`` on Windows), and two environment overrides exist for setups where
the defaults are not writable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from constants import Constants, Platform
from errors import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one CLI invocation."""

    platform: Platform
    install_root: Path
    link_path: Path

    @property
    def binary_relpath(self) -> Tuple[str, ...]:
        """Location of the compiled binary inside a version directory."""
        if self.platform == Platform.WINDOWS:
            return Constants.WINDOWS_BINARY
        return Constants.POSIX_BINARY


def detect_platform(os_name: Optional[str] = None) -> Platform:
    """Map ``os.name`` onto the activation mechanism to use."""
    name = os_name if os_name is not None else os.name
    return Platform.WINDOWS if name == "nt" else Platform.POSIX


def resolve_install_root(environ: Mapping[str, str], platform: Platform) -> Path:
    """Return ``~/.palawija`` or ``%APPDATA%\\palawija`` as an absolute path.

    Symlink targets are built from this root, so a relative root would
    leave the global pointer dangling.
    """
    override = environ.get(Constants.ENV_ROOT)
    if override:
        return Path(override).expanduser().absolute()
    if platform == Platform.WINDOWS:
        appdata = environ.get("APPDATA")
        if not appdata:
            raise ConfigurationError(
                "APPDATA is not set",
                hint=f"Set APPDATA or {Constants.ENV_ROOT} to choose an installation directory",
            )
        return (Path(appdata) / Constants.WINDOWS_INSTALL_DIR_NAME).absolute()
    home = environ.get("HOME")
    if not home:
        raise ConfigurationError(
            "HOME is not set",
            hint=f"Set HOME or {Constants.ENV_ROOT} to choose an installation directory",
        )
    return (Path(home).expanduser() / Constants.INSTALL_DIR_NAME).absolute()


def load_settings(environ: Optional[Mapping[str, str]] = None,
                  platform: Optional[Platform] = None) -> Settings:
    """Build :class:`Settings` from the process environment."""
    env = os.environ if environ is None else environ
    plat = platform or detect_platform()
    link = env.get(Constants.ENV_LINK) or Constants.GLOBAL_LINK_PATH
    return Settings(
        platform=plat,
        install_root=resolve_install_root(env, plat),
        link_path=Path(link).expanduser().absolute(),
    )
