"""Configuration package for runtime settings and startup validation."""

from .settings import AppSettings, MonitoredServiceSettings, SettingsLoadError, config_load_settings

__all__ = ["AppSettings", "MonitoredServiceSettings", "SettingsLoadError", "config_load_settings"]
