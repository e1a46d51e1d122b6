"""Tests for the php.net release source."""

from unittest.mock import MagicMock, patch

import pytest

from errors import NetworkFailure
from registry.php_net import fetch_catalog, tarball_name, tarball_url
from versioning.models import ReleaseStatus

PAGE = """
<a href="/distributions/php-8.2.15.tar.gz">php-8.2.15.tar.gz</a>
<a href="/distributions/php-8.3.1.tar.gz">php-8.3.1.tar.gz</a>
<a href="/distributions/php-8.3.1.tar.gz">again</a>
<a href="/distributions/php-7.4.33.tar.gz">php-7.4.33.tar.gz</a>
"""


def _page(text):
    res = MagicMock()
    res.text = text
    res.content = text.encode("utf-8")
    return res


def test_tarball_naming():
    assert tarball_name("8.3.0") == "php-8.3.0.tar.gz"
    assert tarball_url("8.3.0") == "https://www.php.net/distributions/php-8.3.0.tar.gz"
    assert tarball_url("8.3.0", "https://mirror.test/") == "https://mirror.test/php-8.3.0.tar.gz"


@patch("registry.php_net.safe_get")
def test_fetch_catalog_filters_and_classifies(mock_get):
    mock_get.return_value = _page(PAGE)
    catalog = fetch_catalog("8")
    assert [(e.version, e.status) for e in catalog.entries] == [
        ("8.3.1", ReleaseStatus.ACTIVE),
        ("8.2.15", ReleaseStatus.ACTIVE),
    ]
    assert catalog.versions == ["8.3.1", "8.2.15", "7.4.33"]
    assert mock_get.call_args.args[0] == "https://www.php.net/releases/"


@patch("registry.php_net.safe_get")
def test_fetch_catalog_empty_page(mock_get):
    mock_get.return_value = _page("<html>nothing here</html>")
    catalog = fetch_catalog("8")
    assert catalog.is_empty


@patch("registry.php_net.safe_get",
       side_effect=NetworkFailure("https://www.php.net/releases/", "releases returned HTTP 503"))
def test_fetch_catalog_network_failure_propagates(_mock_get):
    with pytest.raises(NetworkFailure):
        fetch_catalog("8")
