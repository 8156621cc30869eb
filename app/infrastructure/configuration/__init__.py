"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the application
using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    default_locale = settings.i18n.I18N_DEFAULT_LOCALE
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features.i18n import I18nSettings

__all__ = ["Settings", "I18nSettings"]
