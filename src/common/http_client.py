"""Shared HTTP helpers used by the release source and the system interface.

Encapsulates request/timeout error handling so callers deal with a single
``NetworkFailure`` instead of the various ``requests`` exceptions. Nothing
here retries: a failed request surfaces immediately.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer
from errors import NetworkFailure

logger = logging.getLogger(__name__)


def safe_get(url: str, *, context: str, timeout: int = Constants.REQUEST_TIMEOUT,
             **kwargs: Any) -> requests.Response:
    """Perform a GET request and require a successful status.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "releases").
        timeout: Timeout in seconds.
        **kwargs: Passed through to requests.get.

    Returns:
        requests.Response: The HTTP response object.

    Raises:
        NetworkFailure: On timeouts, connection errors and non-2xx statuses.
    """
    safe_target = safe_url(url)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context,
                ),
            )
        try:
            res = requests.get(url, timeout=timeout, **kwargs)
        except requests.Timeout as exc:
            raise NetworkFailure(url, f"{context} request timed out after {timeout} seconds") from exc
        except requests.RequestException as exc:  # includes ConnectionError
            raise NetworkFailure(url, f"{context} connection error: {exc}") from exc

        if not res.ok:
            res.close()
            raise NetworkFailure(url, f"{context} returned HTTP {res.status_code}")

        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response ok",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="success",
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context,
                ),
            )
        return res


def download_to_file(url: str, dest: Path, *, context: str = "download") -> int:
    """Stream ``url`` into ``dest``, logging progress at INFO.

    A partially written ``dest`` is removed before the error propagates.

    Returns:
        int: Number of bytes written.

    Raises:
        NetworkFailure: If the transfer fails at any point.
    """
    written = 0
    try:
        res = safe_get(url, context=context, timeout=Constants.DOWNLOAD_TIMEOUT, stream=True)
        with res:
            total = int(res.headers.get("Content-Length") or 0)
            next_mark = Constants.PROGRESS_STEP_PERCENT
            with open(dest, "wb") as fh:
                for chunk in res.iter_content(chunk_size=Constants.DOWNLOAD_CHUNK_SIZE):
                    if not chunk:
                        continue
                    fh.write(chunk)
                    written += len(chunk)
                    if total and written * 100 // total >= next_mark:
                        logger.info("Downloaded %d%% (%d of %d bytes)",
                                    written * 100 // total, written, total)
                        next_mark += Constants.PROGRESS_STEP_PERCENT
    except requests.RequestException as exc:
        dest.unlink(missing_ok=True)
        raise NetworkFailure(url, f"{context} interrupted: {exc}") from exc
    except NetworkFailure:
        dest.unlink(missing_ok=True)
        raise
    except OSError as exc:
        dest.unlink(missing_ok=True)
        raise NetworkFailure(url, f"could not write {dest}: {exc}",
                             hint=f"Check free disk space and permissions of {dest.parent}") from exc

    logger.info("Downloaded %d bytes from %s", written, safe_url(url))
    return written
