"""CLI handler for ``palawija list``."""

from __future__ import annotations

import logging

from constants import ExitCodes
from versioning.models import InstallState

logger = logging.getLogger(__name__)

_LABELS = {
    InstallState.ACTIVE: "* (Currently active)",
    InstallState.COMPILED: "(Ready to use)",
    InstallState.SOURCE_ONLY: "(Source only - needs compilation)",
}

_GETTING_STARTED = """Getting started:
   1. Check available versions: palawija available 8
   2. Install a version:        palawija install 8.3.0
   3. Set as default:           palawija use 8.3.0"""


def run_list(_args, ctx) -> ExitCodes:
    """List installed versions and mark the active one."""
    repo = ctx.repository
    logger.info("Scanning installation directory: %s", repo.root)

    if not repo.root_exists():
        print("No PHP versions installed yet (0 installed).")
        print()
        print(_GETTING_STARTED)
        return ExitCodes.SUCCESS

    installed = repo.list_installed()
    if not installed:
        print("Installation directory exists but no PHP versions were found (0 installed).")
        print()
        print(_GETTING_STARTED)
        return ExitCodes.SUCCESS

    active = repo.active_versions(installed)
    if len(active) > 1:
        logger.warning(
            "The activation pointer %s matches several versions (%s); re-run 'palawija use <version>'",
            ctx.store.location,
            ", ".join(item.version for item in active),
        )
    active_paths = {item.install_path for item in active}

    print(f"Found {len(installed)} installed PHP version(s):")
    for item in installed:
        state = InstallState.ACTIVE if item.install_path in active_paths else item.state
        print(f"   {item.version:<12} {_LABELS[state]}")

    print()
    print("Management commands:")
    print("   palawija use <version>     # Switch to a different version")
    print("   palawija which             # Show current PHP binary path")
    return ExitCodes.SUCCESS
