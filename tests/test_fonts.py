from __future__ import annotations

import pytest
import requests

from fanatitra import fonts
from fanatitra.errors import FontResolutionError


class FakeResponse:
    def __init__(self, content=b"font-bytes", status=200):
        self.content = content
        self.status = status

    def raise_for_status(self):
        if self.status != 200:
            raise requests.HTTPError(f"HTTP status {self.status}")


class FakeSession:
    def __init__(self, responses=()):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        result = self.responses.pop(0) if self.responses else FakeResponse()
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture(autouse=True)
def no_retry_delay(monkeypatch):
    monkeypatch.setattr(fonts, "RETRY_DELAY", 0)


def test_first_installed_system_family_wins(monkeypatch):
    monkeypatch.setattr(
        fonts, "_installed",
        lambda *paths: all("liberation" in path for path in paths),
    )
    found = fonts.find_font(platform="linux")
    assert found.regular.endswith("LiberationSans-Regular.ttf")
    assert found.bold.endswith("LiberationSans-Bold.ttf")


def test_linux_platform_variants(monkeypatch):
    monkeypatch.setattr(fonts, "_installed", lambda *paths: True)
    assert fonts.find_font(platform="linux2") == fonts.SYSTEM_FONTS["linux"][0]


def test_falls_back_when_nothing_installed(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(fonts, "_installed", lambda *paths: False)
    monkeypatch.setattr(
        fonts, "setup_fallback_fonts",
        lambda home=None: calls.append(home) or fonts.FontPaths("r", "b"),
    )
    assert fonts.find_font(platform="sunos5", home=tmp_path) == ("r", "b")
    assert calls == [tmp_path]


def test_cached_fallback_is_not_downloaded_again(tmp_path):
    cache = tmp_path / ".fonts"
    cache.mkdir()
    for name in fonts.FALLBACK_FILES:
        (cache / name).write_bytes(b"cached")
    session = FakeSession()

    paths = fonts.setup_fallback_fonts(home=tmp_path, session=session)
    assert paths.regular == str(cache / "LiberationSans-Regular.ttf")
    assert session.calls == []


def test_fallback_download(tmp_path):
    session = FakeSession()
    paths = fonts.setup_fallback_fonts(home=tmp_path, session=session)

    assert [url for url, _ in session.calls] == [
        fonts.FALLBACK_BASE_URL + "LiberationSans-Regular.ttf",
        fonts.FALLBACK_BASE_URL + "LiberationSans-Bold.ttf",
    ]
    assert all(timeout == fonts.DOWNLOAD_TIMEOUT for _, timeout in session.calls)
    for path in paths:
        with open(path, "rb") as handle:
            assert handle.read() == b"font-bytes"
    assert not list((tmp_path / ".fonts").glob("*.part"))


def test_download_retries_then_succeeds(tmp_path):
    session = FakeSession([requests.ConnectionError("offline"), FakeResponse(status=502)])
    dest = tmp_path / "font.ttf"
    assert fonts.download_font("https://example.invalid/f.ttf", dest, session=session) == dest
    assert len(session.calls) == 3
    assert dest.read_bytes() == b"font-bytes"


def test_download_gives_up(tmp_path):
    failures = [requests.ConnectionError("offline")] * fonts.DOWNLOAD_ATTEMPTS
    session = FakeSession(failures)
    with pytest.raises(FontResolutionError):
        fonts.setup_fallback_fonts(home=tmp_path, session=session)
    assert len(session.calls) == fonts.DOWNLOAD_ATTEMPTS
    assert not (tmp_path / ".fonts" / "LiberationSans-Regular.ttf").exists()
