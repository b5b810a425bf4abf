from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path


DEFAULT_BASE_URL = "https://www.pastery.net/api/paste/"


@dataclass(frozen=True)
class Config:
    api_key: str | None
    base_url: str = DEFAULT_BASE_URL
    timeout_sec: int = 30


@dataclass(frozen=True)
class Options:
    api_key: str
    lang: str = "autodetect"
    duration: timedelta = timedelta(days=1)
    title: str | None = None
    max_views: int | None = None
    path: Path | None = None


@dataclass(frozen=True)
class PasteResult:
    url: str
    paste_id: str
    title: str
    language: str
    duration_minutes: int
