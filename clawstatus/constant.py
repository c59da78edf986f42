# -*- coding: utf-8 -*-
import os
from datetime import timedelta
from pathlib import Path

WORKING_DIR = (
    Path(os.environ.get("CLAWSTATUS_WORKING_DIR", "~/.picoclaw"))
    .expanduser()
    .resolve()
)

CONFIG_FILE = os.environ.get("CLAWSTATUS_CONFIG_FILE", "config.json")

AUTH_FILE = os.environ.get("CLAWSTATUS_AUTH_FILE", "auth.json")

DEFAULT_WORKSPACE = "~/.picoclaw/workspace"

# Env key for CLI log level.
LOG_LEVEL_ENV = "CLAWSTATUS_LOG_LEVEL"

# OAuth credentials become eligible for refresh this long before expiry
# unless the stored record carries its own refresh time.
DEFAULT_REFRESH_WINDOW = timedelta(
    seconds=int(os.environ.get("CLAWSTATUS_REFRESH_WINDOW_SECONDS", "300")),
)
