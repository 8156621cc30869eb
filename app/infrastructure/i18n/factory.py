"""Factory functions for creating i18n components.

Provides convenience functions for building a LocaleRegistry from a directory
of translation documents.
"""

from pathlib import Path
from typing import Optional, Union

from infrastructure.i18n.loader import DirectoryTranslationLoader
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_registry(
    translations_dir: Optional[Union[str, Path]] = None,
    default_locale: Optional[str] = None,
    use_cache: bool = True,
) -> LocaleRegistry:
    """Create a LocaleRegistry populated from a translations directory.

    The default locale is registered first so negotiation falls back to it;
    the remaining locales follow in file name order.

    Args:
        translations_dir: Directory of translation documents. When None the
            registry starts empty.
        default_locale: Locale to register first. Must exist in the directory
            when given.
        use_cache: Whether the loader caches parsed dictionaries.

    Returns:
        LocaleRegistry: Populated registry.

    Raises:
        ValueError: If translations_dir does not exist.
        FileNotFoundError: If default_locale has no documents.
        ParseError: If a document is malformed.

    Usage:
        registry = create_registry(Path("locales"), default_locale="en")
        _ = registry.select("ja,en;q=0.5")
    """
    registry = LocaleRegistry()
    if translations_dir is None:
        logger.info("registry_created_empty")
        return registry

    loader = DirectoryTranslationLoader(translations_dir, use_cache=use_cache)
    locales = loader.available_locales()
    if default_locale is not None:
        # Load eagerly so a missing default fails here
        registry.register(default_locale, loader.load(default_locale))
        locales = [locale for locale in locales if locale != default_locale]

    for locale in locales:
        registry.register(locale, loader.load(locale))

    logger.info(
        "registry_created",
        translations_dir=str(translations_dir),
        default_locale=registry.default_tag,
        locale_count=len(registry),
    )
    return registry
