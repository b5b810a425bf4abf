from __future__ import annotations

import requests

from .models import PasteResult


class PasteError(RuntimeError):
    pass


def upload_paste(url: str, body: bytes, timeout_sec: float) -> PasteResult:
    try:
        response = requests.post(
            url,
            data=body,
            headers={"Content-Type": "application/octet-stream"},
            timeout=timeout_sec,
        )
    except requests.RequestException as exc:
        raise PasteError(f"Request failed: {exc}") from exc

    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict) and payload.get("result") == "error":
        raise PasteError(payload.get("error_msg") or "Pastery rejected the paste")

    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        raise PasteError(f"Pastery returned HTTP {response.status_code}") from exc

    if not isinstance(payload, dict) or not payload.get("url"):
        raise PasteError("Unexpected response from Pastery")

    return PasteResult(
        url=payload["url"],
        paste_id=str(payload.get("id", "")),
        title=str(payload.get("title", "")),
        language=str(payload.get("language", "")),
        duration_minutes=_to_int(payload.get("duration")),
    )


def _to_int(raw: object) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return 0
