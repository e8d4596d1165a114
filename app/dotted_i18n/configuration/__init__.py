"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation feature settings class
"""

from dotted_i18n.configuration.i18n import I18nSettings
from dotted_i18n.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
