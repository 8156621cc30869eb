"""Translation service for resolving and interpolating translated messages.

resolve() is the resolution engine: it picks the translation variant for a
key (context rule first, then the root table, then the fallback text or the
key itself) and substitutes placeholders:

    %n        the count
    -%n       the negated count
    %{name}   replacements["name"]

Translator wraps one Dictionary with the call surface used by applications.
"""

import re
from typing import Any, Callable, Dict, Mapping, Optional, Union

from infrastructure.i18n.arguments import (
    UNSET,
    CallArguments,
    merge_keywords,
    parse_arguments,
)
from infrastructure.i18n.loader import loads, parse_document
from infrastructure.i18n.models import Context, Dictionary
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def substitute(
    template: str,
    replacements: Optional[Mapping[str, Any]] = None,
    count: Optional[int] = None,
) -> str:
    """Replace placeholders in template in a single pass.

    Substituted values are never scanned again, and -%n is matched as a
    whole before %n can claim its suffix. Placeholders without a value are
    left as they are.

    Args:
        template: Text containing placeholders.
        replacements: Values for %{name} placeholders.
        count: Value for %n and -%n; those placeholders stay untouched when None.

    Returns:
        Text with placeholders replaced.
    """
    table: Dict[str, str] = {}
    if count is not None:
        table["%n"] = str(count)
        table["-%n"] = str(-count)
    for name, value in (replacements or {}).items():
        table["%{" + str(name) + "}"] = str(value)

    if not table:
        return template

    pattern = re.compile(
        "|".join(re.escape(token) for token in sorted(table, key=len, reverse=True))
    )
    return pattern.sub(lambda match: table[match.group(0)], template)


def _find_translation(entries, key: str, call: CallArguments) -> Optional[str]:
    entry = entries.get(key)
    if entry is None:
        return None

    if not call.has_count:
        if entry.is_pluralized or entry.text is None:
            return None
        return substitute(entry.text, call.replacements)

    if not entry.is_pluralized:
        return None
    template = entry.select(call.count)
    if template is None:
        return None
    return substitute(template, call.replacements, call.count)


def resolve(dictionary: Dictionary, key: str, call: CallArguments) -> str:
    """Resolve key against dictionary.

    Never raises for missing data: when neither the matching context rule
    nor the root table yields a usable entry, the fallback text (or the key)
    is substituted and returned.

    Args:
        dictionary: Dictionary to search.
        key: Translation key (exact, case-sensitive).
        call: Count, replacements, context and fallback of the call.

    Returns:
        Translated text.
    """
    # A rule with empty matches applies to any context, including none
    rule = dictionary.find_context(call.context if call.context is not None else {})
    if rule is not None:
        result = _find_translation(rule.entries, key, call)
        if result is not None:
            return result

    result = _find_translation(dictionary.entries, key, call)
    if result is not None:
        return result

    logger.debug(
        "translation_not_found",
        key=key,
        count=call.count,
        has_fallback=call.fallback is not None,
    )
    text = call.fallback if call.fallback is not None else key
    return substitute(text, call.replacements, call.count)


class Translator:
    """Translates keys against one Dictionary.

    Holds a default context used by calls that pass none, and callbacks
    notified whenever a document is added.

    Attributes:
        dictionary: Dictionary translations are read from.
        global_context: Context applied when a call supplies none.
    """

    def __init__(self, dictionary: Optional[Dictionary] = None):
        self.dictionary = dictionary if dictionary is not None else Dictionary()
        self.global_context: Context = Context()
        self._callbacks: Dict[int, Callable[[Optional[str]], None]] = {}
        self._next_callback_id = 0

    def translate(
        self,
        key: str,
        *args: Any,
        count: Optional[int] = UNSET,
        replacements: Optional[Mapping[str, Any]] = UNSET,
        context: Optional[Mapping[str, str]] = UNSET,
        fallback: Optional[str] = UNSET,
    ) -> str:
        """Return the translation of key.

        Positional arguments follow the order fallback, count, replacements,
        context; any of them may be omitted (see
        infrastructure.i18n.arguments). Keyword arguments override positional
        ones.

        Examples:
            translator.translate("Cancel")
            translator.translate("%n comments", 1)
            translator.translate("Welcome %{name}", Replace(name="John"))
            translator.translate("_short_key", "This is a long piece of text")

        Raises:
            TranslationUsageError: If the arguments cannot be interpreted.
        """
        call = merge_keywords(
            parse_arguments(args),
            count=count,
            replacements=replacements,
            context=context,
            fallback=fallback,
        )
        if call.context is None:
            call.context = self.global_context
        return resolve(self.dictionary, key, call)

    __call__ = translate

    def translate_hash(
        self,
        mapping: Mapping[str, Any],
        context: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """Translate every string value of mapping.

        Values are used as keys; non-string values are copied unchanged.

        Returns:
            New dict with the same keys.
        """
        call_context = context if context is not None else self.global_context
        return {
            name: (
                resolve(self.dictionary, value, CallArguments(context=call_context))
                if isinstance(value, str)
                else value
            )
            for name, value in mapping.items()
        }

    def set_context(self, key: str, value: str) -> None:
        self.global_context[key] = value

    def clear_context(self, key: str) -> None:
        self.global_context.pop(key, None)

    def reset_context(self) -> None:
        self.global_context = Context()

    def add(self, document: Mapping[str, Any], locale: Optional[str] = None) -> None:
        """Merge a translation document into the dictionary.

        Args:
            document: Decoded translation document.
            locale: Optional locale tag passed to update callbacks.

        Raises:
            ParseError: If the document is malformed. The dictionary is
                left unchanged.
        """
        self._merge(parse_document(document), locale)

    def add_from_string(
        self,
        source: Union[str, bytes],
        format: str = "json",
        locale: Optional[str] = None,
    ) -> None:
        """Decode and merge a translation document.

        Raises:
            ParseError: If the document is malformed.
        """
        self._merge(loads(source, format=format), locale)

    def _merge(self, dictionary: Dictionary, locale: Optional[str]) -> None:
        self.dictionary.merge(dictionary)
        logger.info(
            "translations_added",
            locale=locale,
            entry_count=len(dictionary),
            context_count=len(dictionary.contexts),
        )
        for callback in list(self._callbacks.values()):
            callback(locale)

    def add_value(self, key: str, text: str) -> None:
        """Add one simple entry, e.g. long text kept outside the document."""
        self.dictionary.add_value(key, text)

    def reset(self) -> None:
        """Drop all translations and the default context."""
        self.dictionary = Dictionary()
        self.reset_context()
        logger.info("translator_reset")

    def add_callback(self, callback: Callable[[Optional[str]], None]) -> int:
        """Register a callback run after each add(); returns its id."""
        callback_id = self._next_callback_id
        self._next_callback_id += 1
        self._callbacks[callback_id] = callback
        return callback_id

    def remove_callback(self, callback_id: int) -> None:
        self._callbacks.pop(callback_id, None)


def create(document: Optional[Mapping[str, Any]] = None) -> Translator:
    """Create a Translator from a decoded translation document.

    Raises:
        ParseError: If the document is malformed.
    """
    return Translator(parse_document(document))


def create_from_string(source: Union[str, bytes], format: str = "json") -> Translator:
    """Create a Translator from JSON or YAML text.

    Raises:
        ParseError: If the document is malformed.
    """
    return Translator(loads(source, format=format))
