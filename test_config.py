import pytest
from pydantic import ValidationError

from config import DEFAULT_FALLBACK_MESSAGE, BotConfig, load_token


def test_defaults_without_environment(monkeypatch):
    for name in ("SQUAD_COMMAND_PREFIX", "SQUAD_EXCLUDE_CASE_SENSITIVE", "SQUAD_PORT", "SQUAD_FALLBACK_MESSAGE"):
        monkeypatch.delenv(name, raising=False)
    config = BotConfig.from_env()
    assert config.command_prefix == "!"
    assert config.exclude_case_sensitive is True
    assert config.port == 8000
    assert config.fallback_message == DEFAULT_FALLBACK_MESSAGE


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("SQUAD_COMMAND_PREFIX", "/")
    monkeypatch.setenv("SQUAD_EXCLUDE_CASE_SENSITIVE", "no")
    monkeypatch.setenv("SQUAD_REQUIRE_TOKEN", "TRUE")
    monkeypatch.setenv("SQUAD_PORT", "9001")
    monkeypatch.setenv("SQUAD_LOG_LEVEL", "debug")
    config = BotConfig.from_env()
    assert config.command_prefix == "/"
    assert config.exclude_case_sensitive is False
    assert config.require_token is True
    assert config.port == 9001
    assert config.log_level == "DEBUG"


def test_load_token_strips_whitespace(tmp_path):
    token_file = tmp_path / ".token"
    token_file.write_text("secret-token\n", encoding="utf-8")
    assert load_token(str(token_file)) == "secret-token"


def test_missing_token_is_optional(tmp_path):
    assert load_token(str(tmp_path / "missing")) is None


def test_missing_required_token_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_token(str(tmp_path / "missing"), required=True)


def test_misspelled_bool_is_rejected(monkeypatch):
    monkeypatch.setenv("SQUAD_EXCLUDE_CASE_SENSITIVE", "ture")
    with pytest.raises(ValidationError):
        BotConfig.from_env()


@pytest.mark.parametrize("port", ["80a", "0", "70000"])
def test_bad_port_is_rejected(monkeypatch, port):
    monkeypatch.setenv("SQUAD_PORT", port)
    with pytest.raises(ValidationError):
        BotConfig.from_env()


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("SQUAD_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        BotConfig.from_env()


def test_keyword_overrides_environment(monkeypatch):
    monkeypatch.setenv("SQUAD_FALLBACK_MESSAGE", "from env")
    assert BotConfig(fallback_message="explicit").fallback_message == "explicit"
