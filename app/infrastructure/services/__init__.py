"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    LocaleRegistryDep,
    SettingsDep,
    TranslatorDep,
)
from infrastructure.services.providers import (
    get_default_translator,
    get_locale_registry,
    get_settings,
)

__all__ = [
    "SettingsDep",
    "LocaleRegistryDep",
    "TranslatorDep",
    "get_settings",
    "get_locale_registry",
    "get_default_translator",
]
