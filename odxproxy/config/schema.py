"""Configuration schema using Pydantic settings.

Values come from ~/.odxproxy/config.json and from ODXPROXY_* environment
variables; the environment wins.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from odxproxy.errors import ConfigError
from odxproxy.schema import DEFAULT_GATEWAY_URL, DEFAULT_TIMEOUT_SECONDS, ClientInfo, InstanceInfo


class InstanceConfig(BaseModel):
    """Backend Odoo instance the gateway should talk to."""
    url: str = ""
    user_id: int = 0
    db: str = ""
    api_key: str = ""


class OdxProxySettings(BaseSettings):
    """Root configuration for odxproxy."""
    instance: InstanceConfig = Field(default_factory=InstanceConfig)
    odx_api_key: str = ""
    gateway_url: str = DEFAULT_GATEWAY_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    model_config = SettingsConfigDict(
        env_prefix="ODXPROXY_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # File values arrive as init kwargs; environment overrides them.
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    def missing_fields(self) -> list[str]:
        missing = []
        if not self.instance.url:
            missing.append("instance.url")
        if not self.instance.user_id:
            missing.append("instance.user_id")
        if not self.instance.db:
            missing.append("instance.db")
        if not self.instance.api_key:
            missing.append("instance.api_key")
        if not self.odx_api_key:
            missing.append("odx_api_key")
        return missing

    def to_client_info(self) -> ClientInfo:
        """Connection context for OdxProxyClient; fails when credentials are incomplete."""
        missing = self.missing_fields()
        if missing:
            raise ConfigError(f"missing configuration: {', '.join(missing)}")
        return ClientInfo(
            instance=InstanceInfo(**self.instance.model_dump()),
            odx_api_key=self.odx_api_key,
            gateway_url=self.gateway_url or None,
            timeout=self.timeout,
        )
