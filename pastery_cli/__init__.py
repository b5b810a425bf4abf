from .config import load_config, validate_runtime
from .duration import (
    DurationError,
    DurationTooLongError,
    MalformedAmountError,
    MissingUnitError,
    UnknownUnitError,
    parse_duration,
)
from .languages import AUTODETECT, LANGUAGES, resolve_language
from .models import Config, Options, PasteResult
from .reader import SourceReadError, read_source
from .request_builder import build_paste_url, resolve_title
from .runner import create_paste
from .uploader import PasteError, upload_paste

__all__ = [
    "AUTODETECT",
    "Config",
    "DurationError",
    "DurationTooLongError",
    "LANGUAGES",
    "MalformedAmountError",
    "MissingUnitError",
    "Options",
    "PasteError",
    "PasteResult",
    "SourceReadError",
    "UnknownUnitError",
    "build_paste_url",
    "create_paste",
    "load_config",
    "parse_duration",
    "read_source",
    "resolve_language",
    "resolve_title",
    "upload_paste",
    "validate_runtime",
]
