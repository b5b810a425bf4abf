from pastery_cli.config import load_config, validate_runtime
from pastery_cli.models import Config


def test_load_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("PASTERY_API_KEY", "secret")
    monkeypatch.setenv("PASTERY_BASE_URL", "https://paste.example.com/api/paste/")
    monkeypatch.setenv("PASTERY_TIMEOUT_SEC", "5")

    config = load_config()

    assert config == Config(
        api_key="secret",
        base_url="https://paste.example.com/api/paste/",
        timeout_sec=5,
    )


def test_load_config_falls_back_on_bad_values(monkeypatch) -> None:
    monkeypatch.delenv("PASTERY_API_KEY", raising=False)
    monkeypatch.delenv("PASTERY_BASE_URL", raising=False)
    monkeypatch.setenv("PASTERY_TIMEOUT_SEC", "-3")

    config = load_config()

    assert config.api_key is None
    assert config.base_url == "https://www.pastery.net/api/paste/"
    assert config.timeout_sec == 30

    monkeypatch.setenv("PASTERY_TIMEOUT_SEC", "soon")
    assert load_config().timeout_sec == 30


def test_validate_runtime_reports_missing_key_and_plain_http() -> None:
    errors = validate_runtime(Config(api_key=None, base_url="http://www.pastery.net/api/paste/"))

    assert len(errors) == 2
    assert "PASTERY_API_KEY" in errors[0]
    assert "https" in errors[1]


def test_validate_runtime_accepts_defaults_with_key() -> None:
    assert validate_runtime(Config(api_key="k")) == []
