# -*- coding: utf-8 -*-
import pytest

from pkshiritori.config import ConfigError, load_settings
from pkshiritori.pokedex import DEFAULT_POKEDEX_PATH


def test_defaults(monkeypatch):
    for name in ("POKEDEX_PATH", "SHIRITORI_CHAIN_LENGTH", "LOG_LEVEL", "CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    s = load_settings()
    assert s.pokedex_path == DEFAULT_POKEDEX_PATH
    assert s.chain_length == 6
    assert s.log_level == "INFO"
    assert s.cors_allow_origins == ("*",)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("POKEDEX_PATH", "/tmp/dex.json")
    monkeypatch.setenv("SHIRITORI_CHAIN_LENGTH", "4")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.example, http://b.example")
    s = load_settings()
    assert s.pokedex_path == "/tmp/dex.json"
    assert s.chain_length == 4
    assert s.log_level == "DEBUG"
    assert s.cors_allow_origins == ("http://a.example", "http://b.example")


@pytest.mark.parametrize("raw", ["abc", "0", "-3", ""])
def test_invalid_chain_length(monkeypatch, raw):
    monkeypatch.setenv("SHIRITORI_CHAIN_LENGTH", raw)
    with pytest.raises(ConfigError, match="SHIRITORI_CHAIN_LENGTH"):
        load_settings()
