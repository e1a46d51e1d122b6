"""CLI handler for ``palawija available``."""

from __future__ import annotations

import logging
import sys

from constants import ExitCodes
from registry.php_net import fetch_catalog
from versioning.models import ReleaseStatus

logger = logging.getLogger(__name__)

_STATUS_LABELS = {
    ReleaseStatus.ACTIVE: "Active - Recommended",
    ReleaseStatus.LTS: "LTS - Stable",
    ReleaseStatus.EOL: "EOL - Not Recommended",
}

_USAGE = """Usage: palawija available <version-prefix>
Examples:
   palawija available 8     # Show all PHP 8.x versions
   palawija available 8.2   # Show all PHP 8.2.x versions
   palawija available 7.4   # Show all PHP 7.4.x versions
"""

_LEGEND = """Status legend:
   Active  - Latest stable versions with active development
   LTS     - Long Term Support, suited for production
   EOL     - End of Life, security updates discontinued

Usage examples:
   palawija install 8.3.0    # Install PHP 8.3.0
   palawija use 8.3.0        # Switch to PHP 8.3.0"""


def run_available(args, _ctx) -> ExitCodes:
    """Print released versions under a prefix with their support status."""
    prefix = args.prefix
    if not prefix:
        logger.error("Missing required parameter: version prefix")
        sys.stderr.write(_USAGE)
        return ExitCodes.FAILURE

    catalog = fetch_catalog(prefix)
    if catalog.is_empty:
        logger.warning("Could not parse any versions from the releases page. "
                       "The website format might have changed; please try again later.")
        return ExitCodes.SUCCESS

    if not catalog.entries:
        print(f"No versions found matching '{prefix}'.")
        print("Try a broader search like 'palawija available 8' or 'palawija available 7'.")
    else:
        print(f"Available PHP versions matching '{prefix}' ({len(catalog.entries)} found):")
        for entry in catalog.entries:
            print(f"   {entry.version:<12} ({_STATUS_LABELS[entry.status]})")

    print()
    print(_LEGEND)
    return ExitCodes.SUCCESS
