"""Config – 12-factor settings and loaders."""

from optval.config.errors import ConfigError, InvalidSettingValueError
from optval.config.loaders import EnvSettingsLoader, SettingsLoader
from optval.config.settings import OptvalSettings, Settings, load_settings

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "OptvalSettings",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
