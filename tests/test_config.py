"""Tests for settings loading."""

import json

import pytest

from utils import config


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "load_dotenv", lambda: False)
    for name in ("OPENAI_API_KEY", "DATABASE_DIR", "STORAGE_DIR", "OPENAI_MODEL", "ARTWORK_CONFIG_PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_load_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("DATABASE_DIR", str(tmp_path / "db"))

    settings = config.load_settings()

    assert settings.openai_api_key == "sk-env"
    assert settings.storage_dir == tmp_path / "db" / "storage"
    assert settings.openai_model == "gpt-4o-mini"


def test_settings_are_immutable(monkeypatch, tmp_path):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("DATABASE_DIR", str(tmp_path))
    settings = config.load_settings()

    with pytest.raises(AttributeError):
        settings.openai_api_key = "other"


def test_api_key_falls_back_to_config_file(monkeypatch, tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"OPENAI_API_KEY": "sk-file"}))
    monkeypatch.setenv("DATABASE_DIR", str(tmp_path))
    monkeypatch.setenv("STORAGE_DIR", str(tmp_path / "bucket"))

    settings = config.load_settings()

    assert settings.openai_api_key == "sk-file"
    assert settings.storage_dir == tmp_path / "bucket"


def test_missing_api_key_raises(monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_DIR", str(tmp_path))
    with pytest.raises(RuntimeError):
        config.load_settings()


def test_missing_database_dir_raises(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    with pytest.raises(RuntimeError):
        config.load_settings()


def test_classifier_defaults_to_configured_model():
    from unittest.mock import MagicMock

    from services.openai.art_classifier import ArtClassifier

    assert ArtClassifier(MagicMock()).model == config.DEFAULT_MODEL == "gpt-4o-mini"
