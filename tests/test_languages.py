from pastery_cli.languages import AUTODETECT, LANGUAGES, resolve_language


def test_autodetect_resolves_to_itself() -> None:
    assert resolve_language("autodetect") == AUTODETECT
    assert AUTODETECT in LANGUAGES


def test_known_alias_resolves_to_registry_entry() -> None:
    assert resolve_language("rust") == "rust"
    assert resolve_language("python") == "python"


def test_unknown_or_empty_alias_falls_back_to_autodetect() -> None:
    assert resolve_language("") == AUTODETECT
    assert resolve_language("asdf") == AUTODETECT


def test_lookup_is_case_sensitive() -> None:
    assert resolve_language("Rust") == AUTODETECT
