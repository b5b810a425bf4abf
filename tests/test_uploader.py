import pytest
import requests

from pastery_cli.models import PasteResult
from pastery_cli.uploader import PasteError, upload_paste


class FakeResponse:
    def __init__(self, status_code: int, payload: object) -> None:
        self.status_code = status_code
        self._payload = payload

    def json(self) -> object:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def _patch_post(monkeypatch, response: object) -> list[dict]:
    calls: list[dict] = []

    def fake_post(url, data=None, headers=None, timeout=None):
        calls.append({"url": url, "data": data, "timeout": timeout})
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr("pastery_cli.uploader.requests.post", fake_post)
    return calls


def test_upload_posts_body_and_returns_result(monkeypatch) -> None:
    calls = _patch_post(
        monkeypatch,
        FakeResponse(
            200,
            {
                "id": "abcdef",
                "title": "bar.rs",
                "url": "https://www.pastery.net/abcdef/",
                "language": "rust",
                "duration": 1440,
            },
        ),
    )

    result = upload_paste("https://www.pastery.net/api/paste/?api_key=k", b"fn main() {}", timeout_sec=7)

    assert result == PasteResult(
        url="https://www.pastery.net/abcdef/",
        paste_id="abcdef",
        title="bar.rs",
        language="rust",
        duration_minutes=1440,
    )
    assert calls == [
        {"url": "https://www.pastery.net/api/paste/?api_key=k", "data": b"fn main() {}", "timeout": 7}
    ]


def test_service_error_message_is_surfaced(monkeypatch) -> None:
    _patch_post(monkeypatch, FakeResponse(401, {"result": "error", "error_msg": "Invalid API key."}))

    with pytest.raises(PasteError) as exc_info:
        upload_paste("https://www.pastery.net/api/paste/", b"x", timeout_sec=1)

    assert str(exc_info.value) == "Invalid API key."


def test_http_error_without_json_body(monkeypatch) -> None:
    _patch_post(monkeypatch, FakeResponse(502, ValueError("not json")))

    with pytest.raises(PasteError) as exc_info:
        upload_paste("https://www.pastery.net/api/paste/", b"x", timeout_sec=1)

    assert "502" in str(exc_info.value)


def test_network_failure_is_wrapped(monkeypatch) -> None:
    _patch_post(monkeypatch, requests.ConnectionError("connection refused"))

    with pytest.raises(PasteError) as exc_info:
        upload_paste("https://www.pastery.net/api/paste/", b"x", timeout_sec=1)

    assert "connection refused" in str(exc_info.value)


def test_missing_url_in_response(monkeypatch) -> None:
    _patch_post(monkeypatch, FakeResponse(200, {"id": "abc"}))

    with pytest.raises(PasteError):
        upload_paste("https://www.pastery.net/api/paste/", b"x", timeout_sec=1)
