# -*- coding: utf-8 -*-
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..constant import DEFAULT_WORKSPACE
from ..providers.models import ModelEntry, ProvidersConfig


class BaseChannelConfig(BaseModel):
    """Base for channel config (read from config.json, no env).

    Only ``enabled`` is inspected; adapter-specific fields are kept as
    extras so a full config.json loads unchanged.
    """

    model_config = ConfigDict(extra="allow")

    enabled: bool = False


class WebSocketChannelConfig(BaseChannelConfig):
    host: str = "0.0.0.0"
    port: int = 18790

    def address(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"http://{host}:{self.port}"


class ChannelConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    telegram: BaseChannelConfig = BaseChannelConfig()
    discord: BaseChannelConfig = BaseChannelConfig()
    feishu: BaseChannelConfig = BaseChannelConfig()
    dingtalk: BaseChannelConfig = BaseChannelConfig()
    slack: BaseChannelConfig = BaseChannelConfig()
    whatsapp: BaseChannelConfig = BaseChannelConfig()
    qq: BaseChannelConfig = BaseChannelConfig()
    line: BaseChannelConfig = BaseChannelConfig()
    onebot: BaseChannelConfig = BaseChannelConfig()
    maixcam: BaseChannelConfig = BaseChannelConfig()
    websocket: WebSocketChannelConfig = WebSocketChannelConfig()


class AgentsDefaultsConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    workspace: str = Field(default=DEFAULT_WORKSPACE)
    model: str = Field(default="", description="Default model identifier")


class AgentsConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    defaults: AgentsDefaultsConfig = Field(
        default_factory=AgentsDefaultsConfig,
    )


class Config(BaseModel):
    """Root config (config.json)."""

    model_config = ConfigDict(extra="ignore")

    agents: AgentsConfig = Field(default_factory=AgentsConfig)
    model_list: List[ModelEntry] = Field(default_factory=list)
    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)
    channels: ChannelConfig = ChannelConfig()

    def workspace_path(self) -> Path:
        return Path(self.agents.defaults.workspace).expanduser()
