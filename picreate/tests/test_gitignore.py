"""Tests for the ignore template fetcher."""

from __future__ import annotations

import io
import urllib.error
import urllib.request

import pytest

from picreate.core import FetchError, fetch_gitignore
from picreate.core.defaults import GITIGNORE_URL


class _FakeUrlopen:
    def __init__(self, body: bytes = b"node_modules/\n", error: Exception | None = None):
        self.body = body
        self.error = error
        self.requests: list[urllib.request.Request] = []

    def __call__(self, request, timeout=None):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return io.BytesIO(self.body)


def test_fetch_uses_default_template(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PICREATE_GITIGNORE_URL", raising=False)
    fake = _FakeUrlopen()
    monkeypatch.setattr(urllib.request, "urlopen", fake)

    assert fetch_gitignore() == "node_modules/\n"
    assert fake.requests[0].full_url == GITIGNORE_URL
    assert fake.requests[0].get_header("User-agent").startswith("picreate")


def test_fetch_honours_environment_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PICREATE_GITIGNORE_URL", "https://example.com/ignore")
    fake = _FakeUrlopen()
    monkeypatch.setattr(urllib.request, "urlopen", fake)

    fetch_gitignore()

    assert fake.requests[0].full_url == "https://example.com/ignore"


def test_network_errors_become_fetch_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeUrlopen(error=urllib.error.URLError("no route to host"))
    monkeypatch.setattr(urllib.request, "urlopen", fake)

    with pytest.raises(FetchError, match="no route to host"):
        fetch_gitignore("https://example.com/ignore")


def test_empty_template_is_an_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(urllib.request, "urlopen", _FakeUrlopen(body=b"  \n"))

    with pytest.raises(FetchError, match="empty"):
        fetch_gitignore("https://example.com/ignore")


def test_undecodable_template_is_an_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(urllib.request, "urlopen", _FakeUrlopen(body=b"\xff\xfe bad"))

    with pytest.raises(FetchError, match="not UTF-8"):
        fetch_gitignore("https://example.com/ignore")
