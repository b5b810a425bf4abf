from __future__ import annotations

import time
from typing import Callable

from .models import Config, Options, PasteResult
from .request_builder import build_paste_url, resolve_title
from .uploader import upload_paste


LogCallback = Callable[[str], None]


def create_paste(
    options: Options,
    body: bytes,
    config: Config,
    log_cb: LogCallback | None = None,
) -> PasteResult:
    url = build_paste_url(options, base_url=config.base_url)
    title = resolve_title(options)

    _log(
        log_cb,
        f"Uploading {len(body)} bytes: language={options.lang} "
        f"duration={options.duration} title={title or '(none)'}",
    )
    started_at = time.monotonic()
    result = upload_paste(url, body, timeout_sec=config.timeout_sec)
    _log(log_cb, f"Created paste {result.paste_id} in {time.monotonic() - started_at:.3f}s")
    return result


def _log(log_cb: LogCallback | None, message: str) -> None:
    if log_cb:
        log_cb(message)
