# -*- coding: utf-8 -*-
from .config import (
    AgentsConfig,
    AgentsDefaultsConfig,
    BaseChannelConfig,
    ChannelConfig,
    Config,
    WebSocketChannelConfig,
)
from .utils import ConfigError, get_config_path, load_config, save_config

__all__ = [
    "AgentsConfig",
    "AgentsDefaultsConfig",
    "BaseChannelConfig",
    "ChannelConfig",
    "Config",
    "ConfigError",
    "WebSocketChannelConfig",
    "get_config_path",
    "load_config",
    "save_config",
]
