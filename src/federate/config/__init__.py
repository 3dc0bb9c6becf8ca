"""Configuration: YAML + env overlay."""

from federate.config.loader import load_config, load_config_with_env
from federate.config.schema import Config, OAuth1Settings, cfg

__all__ = ["Config", "OAuth1Settings", "cfg", "load_config", "load_config_with_env"]
