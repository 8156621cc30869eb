"""Internationalization feature settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation dictionaries and locale negotiation configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale registered first and used when negotiation
            finds no acceptable match (default: en)
        I18N_TRANSLATIONS_DIR: Directory holding <locale>.json / <domain>.<locale>.yml
            documents (default: unset, registry starts empty)
        I18N_USE_CACHE: Whether the directory loader caches parsed dictionaries
            (default: true)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        default_locale = settings.i18n.I18N_DEFAULT_LOCALE
        ```
    """

    I18N_DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    I18N_TRANSLATIONS_DIR: Optional[Path] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
    I18N_USE_CACHE: bool = Field(default=True, alias="I18N_USE_CACHE")

    @field_validator("I18N_TRANSLATIONS_DIR", mode="before")
    @classmethod
    def validate_translations_dir(cls, v):
        """Treat an empty value as unset."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v

    @field_validator("I18N_DEFAULT_LOCALE")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Reject blank default locales."""
        if not v.strip():
            raise ValueError("I18N_DEFAULT_LOCALE must not be empty")
        return v.strip()
