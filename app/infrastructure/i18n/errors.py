"""Exceptions raised by the i18n system.

Load-time problems with translation documents raise ParseError. Translation
calls whose positional arguments cannot be interpreted raise
TranslationUsageError. Missing translations are never errors.
"""

from typing import Optional


class I18nError(Exception):
    """Base class for i18n errors."""


class ParseError(I18nError, ValueError):
    """A translation document could not be turned into a Dictionary.

    Attributes:
        key: Offending translation key, if the error concerns one entry.
        location: Where the entry lives ("root values" or "context[<i>]").
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        location: Optional[str] = None,
    ):
        super().__init__(message)
        self.key = key
        self.location = location


class TranslationUsageError(I18nError, TypeError):
    """A translate() call site passed arguments of an unsupported shape."""
