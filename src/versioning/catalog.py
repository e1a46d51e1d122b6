"""Release catalog parsing.

Turns the HTML of the php.net releases page into a sorted, deduplicated list
of versions and classifies them by branch status.

Version comparison is component-wise parse-or-skip: components that are not
plain integers are ignored, so ``8.3.0RC1`` compares like ``8.3``. Suffixed
versions therefore sort by their leading numeric components only.
"""

from typing import Iterable, List, Optional, Tuple

from constants import Constants
from .models import Catalog, CatalogEntry, ReleaseStatus, StatusTable, is_version_like

_MARKER = Constants.DIR_PREFIX
_SUFFIX = Constants.TARBALL_SUFFIX


def extract_versions(text: str) -> List[str]:
    """Return candidate version strings in page order (duplicates kept).

    A candidate is the text between the first ``php-`` on a line and the
    next ``.tar.gz`` after it.
    """
    found = []
    for line in text.splitlines():
        start = line.find(_MARKER)
        if start < 0:
            continue
        start += len(_MARKER)
        end = line.find(_SUFFIX, start)
        if end < 0:
            continue
        candidate = line[start:end]
        if is_version_like(candidate):
            found.append(candidate)
    return found


def version_key(version: str) -> Tuple[int, ...]:
    """Numeric sort key; non-integer components are skipped."""
    return tuple(
        int(part) for part in version.split(".")
        if part.isascii() and part.isdigit()
    )


def sort_versions(versions: Iterable[str]) -> List[str]:
    """Sort newest first by numeric components (stable for equal keys)."""
    return sorted(versions, key=version_key, reverse=True)


def dedupe_adjacent(versions: Iterable[str]) -> List[str]:
    """Drop consecutive exact duplicates; input is expected to be sorted."""
    result: List[str] = []
    for version in versions:
        if not result or result[-1] != version:
            result.append(version)
    return result


def parse_releases(text: str) -> List[str]:
    """Extract, sort and deduplicate versions from a releases listing."""
    return dedupe_adjacent(sort_versions(extract_versions(text)))


def filter_by_prefix(versions: Iterable[str], prefix: str) -> List[str]:
    """Keep versions under ``prefix``: ``8`` matches ``8.3.0`` but not ``80.0.0``."""
    needle = f"{prefix}."
    return [v for v in versions if v.startswith(needle)]


def major_minor(version: str) -> str:
    return ".".join(version.split(".")[:2])


def classify(version: str, table: Optional[StatusTable] = None) -> ReleaseStatus:
    """Look up the branch status of ``version`` in the static table."""
    return (table or StatusTable()).status_of(major_minor(version))


def build_catalog(text: str, prefix: Optional[str] = None,
                  table: Optional[StatusTable] = None) -> Catalog:
    """Parse ``text`` and classify the versions matching ``prefix``.

    Without a prefix every parsed version is classified.
    """
    table = table or StatusTable()
    versions = parse_releases(text)
    selected = filter_by_prefix(versions, prefix) if prefix else versions
    entries = [CatalogEntry(version=v, status=classify(v, table)) for v in selected]
    return Catalog(versions=versions, entries=entries)
