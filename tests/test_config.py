import json

import pytest

from okta_group_assign.config import ConfigLoader
from okta_group_assign.errors import ConfigurationError


def _write_config(root, data):
    configs = root / "configs"
    configs.mkdir(exist_ok=True)
    (configs / "config.json").write_text(json.dumps(data))


def test_build_context_from_env_file(tmp_path, monkeypatch):
    # setenv first so monkeypatch restores whatever load_dotenv writes
    monkeypatch.setenv("OKTA_API_TOKEN", "placeholder")
    monkeypatch.setenv("OKTA_DOMAIN", "placeholder.okta.com")
    _write_config(tmp_path, {"environment": {"log_level": "DEBUG"}})
    envs = tmp_path / "envs"
    envs.mkdir()
    (envs / ".env.us").write_text("OKTA_API_TOKEN=from-file\nOKTA_DOMAIN=dev.okta.com\n")

    config = ConfigLoader(base_path=tmp_path)
    context = config.build_context()

    assert config.get("environment.log_level") == "DEBUG"
    assert context.secrets["OKTA_API_TOKEN"] == "from-file"
    assert context.env["ENVIRONMENT"] == "us"
    assert context.env["OKTA_DOMAIN"] == "dev.okta.com"
    assert context.outputs == {}


def test_build_context_without_token(tmp_path, monkeypatch):
    monkeypatch.delenv("OKTA_API_TOKEN", raising=False)
    monkeypatch.delenv("OKTA_DOMAIN", raising=False)
    _write_config(tmp_path, {"environment": {}, "okta": {"domain": "json.okta.com"}})

    context = ConfigLoader(base_path=tmp_path, environment="local").build_context()

    assert "OKTA_API_TOKEN" not in context.secrets
    assert context.env["OKTA_DOMAIN"] == "json.okta.com"
    assert context.env["ENVIRONMENT"] == "local"


def test_context_is_read_only(tmp_path, monkeypatch):
    monkeypatch.setenv("OKTA_API_TOKEN", "token")
    _write_config(tmp_path, {"environment": {}})

    context = ConfigLoader(base_path=tmp_path).build_context()

    with pytest.raises(TypeError):
        context.secrets["OKTA_API_TOKEN"] = "other"
    with pytest.raises(AttributeError):
        context.env = {}


def test_get_returns_default_for_missing_key(tmp_path):
    _write_config(tmp_path, {"environment": {"debug": True}})
    config = ConfigLoader(base_path=tmp_path)

    assert config.is_debug_mode() is True
    assert config.get("environment.missing", "fallback") == "fallback"
    assert config.get("environment.debug.deeper") is None


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        ConfigLoader(base_path=tmp_path)


def test_invalid_json(tmp_path):
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "config.json").write_text("{not json")
    with pytest.raises(ConfigurationError, match="Invalid JSON"):
        ConfigLoader(base_path=tmp_path)


def test_missing_section(tmp_path):
    _write_config(tmp_path, {"okta": {}})
    with pytest.raises(ConfigurationError, match="environment"):
        ConfigLoader(base_path=tmp_path)
