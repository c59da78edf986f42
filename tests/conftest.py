import json

import pytest


@pytest.fixture
def working_dir(tmp_path, monkeypatch):
    """Point config.json and auth.json lookups at a temp directory."""
    monkeypatch.setattr("clawstatus.config.utils.WORKING_DIR", tmp_path)
    monkeypatch.setattr("clawstatus.auth.store.WORKING_DIR", tmp_path)
    return tmp_path


@pytest.fixture
def write_json():
    def _write(path, data):
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
