"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the translation services.
These are the only process-wide instances; library code always receives a
Translator or LocaleRegistry explicitly.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleRegistry, Translator, create_registry


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_locale_registry() -> LocaleRegistry:
    """
    Get application-scoped locale registry singleton.

    Loaded from settings.i18n.I18N_TRANSLATIONS_DIR with the configured
    default locale registered first. Empty when no directory is configured.

    Returns:
        LocaleRegistry: Cached registry.
    """
    settings = get_settings()
    return create_registry(
        translations_dir=settings.i18n.I18N_TRANSLATIONS_DIR,
        default_locale=(
            settings.i18n.I18N_DEFAULT_LOCALE
            if settings.i18n.I18N_TRANSLATIONS_DIR
            else None
        ),
        use_cache=settings.i18n.I18N_USE_CACHE,
    )


@lru_cache
def get_default_translator() -> Translator:
    """
    Get the application-wide translator for single-tenant use (CLI tools, jobs).

    Returns the translator registered for the default locale, or an empty
    pass-through translator when nothing is registered.

    Usage:
        _ = get_default_translator()
        _("%n comments", 3)
    """
    registry = get_locale_registry()
    tag = registry.default_tag
    translator = registry.get(tag) if tag is not None else None
    return translator if translator is not None else Translator()
