"""Configuration module for odxproxy."""

from odxproxy.config.loader import get_config_path, load_config
from odxproxy.config.schema import InstanceConfig, OdxProxySettings

__all__ = ["OdxProxySettings", "InstanceConfig", "load_config", "get_config_path"]
