"""Tests for the clawstatus command line."""

import pytest
from click.testing import CliRunner

from clawstatus.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_doc(working_dir):
    workspace = working_dir / "workspace"
    workspace.mkdir()
    return {
        "agents": {"defaults": {"workspace": str(workspace), "model": "glm-4.7"}},
        "model_list": [
            {"model": "doubao/ernie-4", "api_key": "k1"},
            {"model": "gpt/4o", "api_key": ""},
            {"model": "mistral/large", "api_key": "k2"},
        ],
        "providers": {
            "anthropic": {"api_key": "sk-ant-1234567890"},
            "ollama": {"api_base": "http://localhost:11434"},
        },
        "channels": {
            "discord": {"enabled": True},
            "websocket": {"enabled": True, "host": "127.0.0.1", "port": 9000},
        },
    }


def test_status_without_config(runner, working_dir):
    result = runner.invoke(cli, ["status"])

    assert result.exit_code == 0
    assert f"Config: {working_dir / 'config.json'} ✗" in result.output
    assert "Model:" not in result.output
    assert "Channels:" not in result.output


def test_status_full(runner, working_dir, write_json, config_doc):
    write_json(working_dir / "config.json", config_doc)
    write_json(
        working_dir / "auth.json",
        {
            "credentials": {
                "openai": {"auth_method": "oauth", "expires_at": "2000-01-01T00:00:00Z"},
                "gemini": {"auth_method": "api_key"},
            },
        },
    )
    result = runner.invoke(cli, ["status"])
    lines = result.output.splitlines()

    assert result.exit_code == 0
    assert f"Config: {working_dir / 'config.json'} ✓" in lines
    assert f"Workspace: {working_dir / 'workspace'} ✓" in lines
    assert "Model: glm-4.7" in lines
    assert "Anthropic API: ✓" in lines
    assert "VolcEngine API: ✓" in lines
    assert "OpenAI API: not set" in lines
    assert "vLLM/Local: not set" in lines
    assert "Ollama: ✓ http://localhost:11434" in lines
    assert "OAuth/Token Auth:" in lines
    assert "  gemini (api_key): authenticated" in lines
    assert "  openai (oauth): expired" in lines
    assert "  Discord: ✓" in lines
    assert "  Telegram: disabled" in lines
    assert "  WebSocket: ✓ http://127.0.0.1:9000" in lines
    assert "mistral" not in result.output


def test_status_broken_auth_store_is_ignored(
    runner, working_dir, write_json, config_doc,
):
    write_json(working_dir / "config.json", config_doc)
    (working_dir / "auth.json").write_text("{oops", encoding="utf-8")

    result = runner.invoke(cli, ["status"])

    assert result.exit_code == 0
    assert "OAuth/Token Auth:" not in result.output
    assert "Channels:" in result.output


def test_status_non_utf8_auth_store_is_ignored(
    runner, working_dir, write_json, config_doc,
):
    write_json(working_dir / "config.json", config_doc)
    (working_dir / "auth.json").write_bytes(b'{"credentials": {"\xff": {}}}')

    result = runner.invoke(cli, ["status"])

    assert result.exit_code == 0
    assert "OAuth/Token Auth:" not in result.output
    assert "Channels:" in result.output


def test_status_non_utf8_config_exits(runner, working_dir):
    (working_dir / "config.json").write_bytes(b"\xff")

    result = runner.invoke(cli, ["status"])

    assert result.exit_code == 1
    assert "Error loading config" in result.output


def test_status_bad_config_exits(runner, working_dir):
    (working_dir / "config.json").write_text("[", encoding="utf-8")

    result = runner.invoke(cli, ["status"])

    assert result.exit_code == 1
    assert "Error loading config" in result.output


def test_providers_list(runner, working_dir, write_json, config_doc):
    write_json(working_dir / "config.json", config_doc)

    result = runner.invoke(cli, ["providers", "list"])

    assert result.exit_code == 0
    assert "Anthropic (anthropic)" in result.output
    assert "sk-" in result.output
    assert "sk-ant-1234567890" not in result.output
    assert "Other configured providers" in result.output
    assert "  doubao" in result.output
    assert "  mistral" in result.output


def test_providers_resolve(runner):
    result = runner.invoke(cli, ["providers", "resolve", "Kimi/k2"])
    assert result.output.strip() == "Kimi/k2: kimi, moonshot"

    result = runner.invoke(cli, ["providers", "resolve", "gpt-4o"])
    assert "no provider prefix" in result.output


def test_auth_list_at_given_time(runner, working_dir, write_json):
    write_json(
        working_dir / "auth.json",
        {
            "credentials": {
                "anthropic": {
                    "auth_method": "oauth",
                    "expires_at": "2026-01-01T12:00:00Z",
                    "refresh_at": "2026-01-01T11:50:00Z",
                },
            },
        },
    )

    fresh = runner.invoke(cli, ["auth", "list", "--now", "2026-01-01T11:48:20"])
    soon = runner.invoke(cli, ["auth", "list", "--now", "2026-01-01T11:55:00"])
    gone = runner.invoke(cli, ["auth", "list", "--now", "2026-01-01T12:00:01"])

    assert "authenticated" in fresh.output
    assert "needs refresh" in soon.output
    assert "expired" in gone.output


def test_auth_list_empty(runner, working_dir):
    result = runner.invoke(cli, ["auth", "list"])
    assert result.exit_code == 0
    assert "No stored credentials." in result.output


def test_auth_list_accepts_utc_suffix_and_offset(runner, working_dir, write_json):
    write_json(
        working_dir / "auth.json",
        {
            "credentials": {
                "anthropic": {
                    "auth_method": "oauth",
                    "expires_at": "2026-01-01T12:00:00Z",
                    "refresh_at": "2026-01-01T11:50:00Z",
                },
            },
        },
    )

    soon = runner.invoke(cli, ["auth", "list", "--now", "2026-01-01T11:55:00Z"])
    offset = runner.invoke(
        cli,
        ["auth", "list", "--now", "2026-01-01T13:55:00+0200"],
    )
    gone = runner.invoke(cli, ["auth", "list", "--now", "2026-01-01T14:00:01+02:00"])

    assert soon.exit_code == 0
    assert "needs refresh" in soon.output
    assert offset.exit_code == 0
    assert "needs refresh" in offset.output
    assert gone.exit_code == 0
    assert "expired" in gone.output
