import pytest
import requests

from hlskit.source import (
    HTTPStatusError,
    ManifestIOError,
    ManifestSourceError,
    NetworkError,
    fetch_manifest_text,
    read_manifest_file,
)


class FakeResponse:
    def __init__(self, status_code, content=b""):
        self.status_code = status_code
        self.content = content


def test_fetch_manifest_text_returns_body(monkeypatch):
    captured = {}

    def fake_get(url, timeout=None, verify=None, headers=None):
        captured.update(url=url, timeout=timeout, verify=verify, headers=headers)
        return FakeResponse(200, b"#EXTM3U\n")

    monkeypatch.setattr(requests, "get", fake_get)

    body = fetch_manifest_text("https://example.com/a.m3u8", timeout=7, headers={"User-Agent": "x"})
    assert body == b"#EXTM3U\n"
    assert captured == {
        "url": "https://example.com/a.m3u8",
        "timeout": 7,
        "verify": True,
        "headers": {"User-Agent": "x"},
    }


def test_fetch_manifest_text_non_200_raises_status_error(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, **kwargs: FakeResponse(404))

    with pytest.raises(HTTPStatusError) as exc_info:
        fetch_manifest_text("https://example.com/missing.m3u8")
    assert exc_info.value.status_code == 404
    assert exc_info.value.url == "https://example.com/missing.m3u8"
    assert isinstance(exc_info.value, NetworkError)


def test_fetch_manifest_text_transport_failure_raises_network_error(monkeypatch):
    def fail(url, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "get", fail)

    with pytest.raises(NetworkError) as exc_info:
        fetch_manifest_text("https://example.com/a.m3u8")
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
    assert not isinstance(exc_info.value, HTTPStatusError)


def test_read_manifest_file(tmp_path):
    path = tmp_path / "index.m3u8"
    path.write_bytes(b"#EXTM3U\n")
    assert read_manifest_file(str(path)) == b"#EXTM3U\n"


def test_read_manifest_file_missing(tmp_path):
    with pytest.raises(ManifestIOError) as exc_info:
        read_manifest_file(str(tmp_path / "missing.m3u8"))
    assert isinstance(exc_info.value, IOError)
    assert isinstance(exc_info.value, ManifestSourceError)
