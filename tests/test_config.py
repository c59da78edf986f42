"""Tests for config.json loading."""

import pytest

from clawstatus.config import Config, ConfigError, load_config, save_config
from clawstatus.providers import ModelEntry


def test_missing_config_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "config.json")
    assert cfg == Config()
    assert cfg.model_list == []
    assert cfg.channels.websocket.enabled is False


def test_loads_full_document(tmp_path, write_json):
    path = write_json(
        tmp_path / "config.json",
        {
            "agents": {
                "defaults": {
                    "workspace": "~/ws",
                    "model": "glm-4.7",
                    "max_tokens": 8192,
                },
            },
            "model_list": [
                {"model_name": "doubao", "model": "doubao/ernie-4", "api_key": "k1"},
                {"model_name": "gpt", "model": "gpt/4o"},
            ],
            "providers": {
                "ollama": {"api_base": "http://localhost:11434"},
                "openai": {"api_key": "sk-abc", "proxy": ""},
            },
            "channels": {
                "telegram": {"enabled": True, "token": "t", "allow_from": []},
                "websocket": {"enabled": True, "host": "127.0.0.1", "port": 9000},
            },
            "gateway": {"host": "0.0.0.0", "port": 18790},
        },
    )
    cfg = load_config(path)

    assert cfg.agents.defaults.model == "glm-4.7"
    assert cfg.workspace_path().name == "ws"
    assert cfg.model_list[1] == ModelEntry(model_name="gpt", model="gpt/4o")
    assert cfg.providers.ollama.api_base == "http://localhost:11434"
    assert cfg.providers.openai.api_key == "sk-abc"
    assert cfg.channels.telegram.enabled
    assert cfg.channels.websocket.address() == "http://127.0.0.1:9000"


def test_ipv6_websocket_address():
    cfg = Config.model_validate(
        {"channels": {"websocket": {"host": "::1", "port": 80}}},
    )
    assert cfg.channels.websocket.address() == "http://[::1]:80"


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_schema_mismatch_raises(tmp_path, write_json):
    path = write_json(tmp_path / "config.json", {"model_list": "nope"})
    with pytest.raises(ConfigError):
        load_config(path)


def test_save_then_load(tmp_path):
    cfg = Config.model_validate(
        {"model_list": [{"model": "kimi/k2", "api_key": "k"}]},
    )
    path = tmp_path / "nested" / "config.json"
    save_config(cfg, path)
    assert load_config(path) == cfg


def test_non_utf8_file_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_bytes(b'{"agents": "\xff"}')
    with pytest.raises(ConfigError) as excinfo:
        load_config(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
