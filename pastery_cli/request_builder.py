from __future__ import annotations

import os
from datetime import timedelta
from urllib.parse import urlencode

from .models import DEFAULT_BASE_URL, Options


def resolve_title(options: Options) -> str | None:
    if options.title is not None:
        return options.title
    if options.path is None:
        return None
    # ".", "/" and ".." have no file name component
    if options.path.name in ("", ".."):
        return None
    # argv paths may carry undecodable bytes as surrogates
    name = os.fsencode(options.path.name)
    return name.decode("utf-8", errors="replace")


def build_paste_url(options: Options, base_url: str = DEFAULT_BASE_URL) -> str:
    """Build the paste-creation URL.

    Parameters are emitted in a fixed order: ``api_key``, ``language``,
    ``duration`` (whole minutes, floored), then ``max_views`` when positive
    and ``title`` when one can be resolved.
    """
    params: list[tuple[str, str]] = [
        ("api_key", options.api_key),
        ("language", options.lang),
        ("duration", str(options.duration // timedelta(minutes=1))),
    ]

    if options.max_views is not None and options.max_views > 0:
        params.append(("max_views", str(options.max_views)))

    title = resolve_title(options)
    if title is not None:
        params.append(("title", title))

    return f"{base_url}?{urlencode(params)}"
