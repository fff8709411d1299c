"""Fetch the standard ignore-file template for new projects."""

from __future__ import annotations

import logging
import os
import urllib.error
import urllib.request

from . import defaults

HEADERS = {"User-Agent": "picreate-gitignore-fetch/1.0"}

logger = logging.getLogger("picreate.gitignore")


class FetchError(RuntimeError):
    """Raised when the ignore template cannot be retrieved."""


def gitignore_url() -> str:
    return os.environ.get("PICREATE_GITIGNORE_URL", defaults.GITIGNORE_URL)


def _http_get(url: str, timeout: float) -> bytes:
    request = urllib.request.Request(url, headers=HEADERS)
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:  # noqa: S310
            return response.read()
    except (urllib.error.URLError, OSError) as exc:
        raise FetchError(f"Failed to fetch {url}: {exc}") from exc


def fetch_gitignore(url: str | None = None, timeout: float = 30) -> str:
    """Return the text of the ignore template at ``url``."""
    target = url or gitignore_url()
    logger.debug("Fetching ignore template from %s", target)
    try:
        text = _http_get(target, timeout).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FetchError(f"Ignore template at {target} is not UTF-8: {exc}") from exc
    if not text.strip():
        raise FetchError(f"Ignore template at {target} is empty")
    return text
