from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO


class SourceReadError(RuntimeError):
    pass


def read_source(path: Path | None, stream: BinaryIO | None = None) -> bytes:
    if path is not None:
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise SourceReadError(f"Could not read {path}: {exc.strerror or exc}") from exc
        source_name = str(path)
    else:
        stream = stream if stream is not None else sys.stdin.buffer
        try:
            data = stream.read()
        except OSError as exc:
            raise SourceReadError(f"Could not read standard input: {exc}") from exc
        source_name = "standard input"

    if not data:
        raise SourceReadError(f"Nothing to paste: {source_name} is empty")
    return data
