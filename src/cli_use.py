"""CLI handlers for ``palawija use`` and ``palawija which``."""

from __future__ import annotations

import logging

from constants import ExitCodes

logger = logging.getLogger(__name__)


def run_use(args, ctx) -> ExitCodes:
    """Activate an installed, compiled version."""
    version = args.version
    logger.info("Switching PHP version to %s", version)
    result = ctx.activator.activate(version)

    for warning in result.warnings:
        logger.warning("%s", warning)

    if result.post_check_output:
        print(f"Current PHP version: {result.post_check_output}")
    print(f"PHP version {version} is now your system default.")
    print(f"Pointer: {result.pointer} -> {result.binary_path}")
    if result.note:
        print(f"Note: {result.note}")
    return ExitCodes.SUCCESS


def run_which(_args, ctx) -> ExitCodes:
    """Print where the bare ``php`` command resolves to."""
    path = ctx.system.which("php")
    if not path:
        print("No PHP binary found in system PATH.")
        print("Install a PHP version with: palawija install <version>")
        print("Then set it as default with: palawija use <version>")
        return ExitCodes.SUCCESS

    print("Current PHP binary location:")
    print(f"   {path}")
    probe = ctx.system.probe_version(path)
    if probe.output:
        print(f"Version info: {probe.output}")
    elif probe.error:
        logger.warning("Could not read the PHP version: %s", probe.error)
    return ExitCodes.SUCCESS
