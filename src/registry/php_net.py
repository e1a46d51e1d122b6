"""php.net release source: URL templates and the releases listing."""

import logging
from typing import Optional

from constants import Constants
from common.http_client import safe_get
from common.logging_utils import extra_context, is_debug_enabled
from versioning.catalog import build_catalog
from versioning.models import Catalog, StatusTable

logger = logging.getLogger(__name__)


def tarball_name(version: str) -> str:
    return f"{Constants.DIR_PREFIX}{version}{Constants.TARBALL_SUFFIX}"


def tarball_url(version: str, base_url: str = Constants.DISTRIBUTIONS_URL) -> str:
    """Download URL of the source tarball for ``version``."""
    return f"{base_url}{tarball_name(version)}"


def fetch_releases_page(url: str = Constants.RELEASES_URL) -> str:
    """Fetch the raw releases listing.

    Raises:
        NetworkFailure: If the page cannot be retrieved.
    """
    logger.info("Connecting to %s", url)
    res = safe_get(url, context="releases")
    logger.info("Retrieved releases page (%d bytes)", len(res.content))
    return res.text


def fetch_catalog(prefix: Optional[str] = None, url: str = Constants.RELEASES_URL,
                  table: Optional[StatusTable] = None) -> Catalog:
    """Fetch the releases page and parse it into a :class:`Catalog`.

    An empty catalog is a valid result: it means nothing on the page looked
    like a tarball link, most likely because the page layout changed.
    """
    catalog = build_catalog(fetch_releases_page(url), prefix=prefix, table=table)
    if is_debug_enabled(logger):
        logger.debug(
            "Parsed releases page",
            extra=extra_context(
                event="parse",
                component="php_net",
                action="fetch_catalog",
                outcome="empty" if catalog.is_empty else "success",
                count=len(catalog.versions),
            ),
        )
    return catalog
