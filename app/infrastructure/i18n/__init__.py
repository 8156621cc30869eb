"""i18n system - translation dictionaries and locale negotiation.

Resolves a lookup key plus optional count, replacements and context into a
localized string, using dictionaries loaded from JSON or YAML documents.

Main components:
- models: Dictionary, Entry, Range, ContextRule, Replace, Context
- loader: parse_document, loads, load_file, DirectoryTranslationLoader
- arguments: CallArguments and positional argument disambiguation
- translator: resolve, substitute and the Translator service
- resolvers: Accept-Language parsing and LanguageMatcher
- registry: LocaleRegistry and BoundTranslator
"""

from infrastructure.i18n.arguments import CallArguments, parse_arguments
from infrastructure.i18n.errors import I18nError, ParseError, TranslationUsageError
from infrastructure.i18n.factory import create_registry
from infrastructure.i18n.loader import (
    DirectoryTranslationLoader,
    TranslationLoader,
    load_file,
    loads,
    parse_document,
)
from infrastructure.i18n.models import (
    Context,
    ContextRule,
    Dictionary,
    Entry,
    Range,
    Replace,
)
from infrastructure.i18n.registry import BoundTranslator, LocaleRegistry
from infrastructure.i18n.resolvers import (
    LanguageMatcher,
    LanguagePreference,
    parse_accept_language,
)
from infrastructure.i18n.translator import (
    Translator,
    create,
    create_from_string,
    resolve,
    substitute,
)

__all__ = [
    "Dictionary",
    "Entry",
    "Range",
    "ContextRule",
    "Replace",
    "Context",
    "I18nError",
    "ParseError",
    "TranslationUsageError",
    "parse_document",
    "loads",
    "load_file",
    "TranslationLoader",
    "DirectoryTranslationLoader",
    "CallArguments",
    "parse_arguments",
    "Translator",
    "resolve",
    "substitute",
    "create",
    "create_from_string",
    "LanguagePreference",
    "LanguageMatcher",
    "parse_accept_language",
    "LocaleRegistry",
    "BoundTranslator",
    "create_registry",
]
