"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for the translation dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.configuration import Settings
from infrastructure.i18n import BoundTranslator, LocaleRegistry
from infrastructure.services.providers import get_locale_registry, get_settings


def get_request_translator(
    request: Request,
    registry: Annotated[LocaleRegistry, Depends(get_locale_registry)],
) -> BoundTranslator:
    """Translator negotiated from the request's Accept-Language header."""
    return registry.select_with_request(request)


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Locale registry dependency
LocaleRegistryDep = Annotated[LocaleRegistry, Depends(get_locale_registry)]

# Per-request translator dependency
# Usage: def handler(_: TranslatorDep): return {"message": _("Cancel")}
TranslatorDep = Annotated[BoundTranslator, Depends(get_request_translator)]

__all__ = [
    "SettingsDep",
    "LocaleRegistryDep",
    "TranslatorDep",
    "get_request_translator",
]
