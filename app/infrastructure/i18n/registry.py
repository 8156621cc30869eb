"""Locale registry for request-scoped translation.

Holds one Translator per locale tag and hands out translators negotiated from
a client's language preferences:

    registry = LocaleRegistry()
    registry.register_from_string("en", en_json)  # first registered is the default
    registry.register_from_string("ja", ja_json)

    _ = registry.select("ja,en-us;q=0.7,en;q=0.3")
    _("Cancel")
"""

import threading
from typing import Any, Dict, List, Mapping, Optional, Union

from infrastructure.i18n.loader import loads, parse_document
from infrastructure.i18n.models import Dictionary
from infrastructure.i18n.resolvers import LanguageMatcher
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()

ACCEPT_LANGUAGE_HEADER = "Accept-Language"


class BoundTranslator:
    """Translation function bound to the translator chosen for a request.

    Attributes:
        tag: Locale tag of the chosen dictionary.
        translator: Translator calls are forwarded to.
    """

    def __init__(self, tag: Optional[str], translator: Translator):
        self.tag = tag
        self.translator = translator

    def __call__(self, key: str, *args: Any, **kwargs: Any) -> str:
        return self.translator.translate(key, *args, **kwargs)

    def __repr__(self) -> str:
        return f"BoundTranslator(tag={self.tag!r})"


class LocaleRegistry:
    """Locale tag -> Translator mapping with Accept-Language negotiation.

    Registration order matters: the first registered tag is the default used
    when no preference matches. Registration, incremental additions and
    selection are serialized by a single lock; the matcher is rebuilt lazily
    on the first selection after the tag set changes.
    """

    def __init__(self):
        self._translators: Dict[str, Translator] = {}
        self._tags: List[str] = []
        self._matcher: Optional[LanguageMatcher] = None
        self._dirty = True
        self._lock = threading.Lock()

    def register(self, tag: str, dictionary: Union[Dictionary, Translator]) -> None:
        """Register (or replace) the dictionary for a locale tag.

        Args:
            tag: Locale tag (e.g., "en", "ja", "pt-BR").
            dictionary: Dictionary, or a ready Translator.
        """
        if not tag:
            raise ValueError("Locale tag must not be empty")
        translator = (
            dictionary if isinstance(dictionary, Translator) else Translator(dictionary)
        )
        with self._lock:
            replaced = tag in self._translators
            self._translators[tag] = translator
            if not replaced:
                self._tags.append(tag)
            self._dirty = True

        logger.info(
            "locale_registered",
            tag=tag,
            replaced=replaced,
            entry_count=len(translator.dictionary),
        )

    def register_document(self, tag: str, document: Mapping[str, Any]) -> None:
        """Parse a decoded document and register it under tag.

        Raises:
            ParseError: If the document is malformed; the registry is unchanged.
        """
        self.register(tag, parse_document(document))

    def register_from_string(
        self,
        tag: str,
        source: Union[str, bytes],
        format: str = "json",
    ) -> None:
        """Decode and parse a document, then register it under tag.

        Raises:
            ParseError: If the document is malformed; the registry is unchanged.
        """
        self.register(tag, loads(source, format=format))

    def add_value(self, tag: str, key: str, text: str) -> None:
        """Add one simple entry to the dictionary registered under tag.

        Raises:
            KeyError: If tag is not registered.
        """
        with self._lock:
            translator = self._translators.get(tag)
            if translator is None:
                raise KeyError(f"Locale not registered: {tag}")
            translator.add_value(key, text)

    def _current_matcher(self) -> Optional[LanguageMatcher]:
        # Caller holds self._lock
        if self._dirty:
            self._matcher = LanguageMatcher(self._tags) if self._tags else None
            self._dirty = False
        return self._matcher

    def match(self, preferences: Optional[str]) -> Optional[str]:
        """Return the registered tag negotiated for preferences, or None if empty."""
        with self._lock:
            matcher = self._current_matcher()
        if matcher is None:
            return None
        tag, _ = matcher.match(preferences)
        return tag

    def _select(self, preferences: Optional[str]):
        with self._lock:
            matcher = self._current_matcher()
            if matcher is None:
                logger.warning("no_locales_registered", preferences=preferences)
                return None, Translator()
            tag, confidence = matcher.match(preferences)
            translator = self._translators[tag]

        logger.debug(
            "locale_selected",
            preferences=preferences,
            tag=tag,
            confidence=confidence,
        )
        return tag, translator

    def select_translator(self, preferences: Optional[str]) -> Translator:
        """Return the Translator negotiated for an Accept-Language value.

        An empty registry yields a pass-through translator over an empty
        dictionary.
        """
        _, translator = self._select(preferences)
        return translator

    def select(self, preferences: Optional[str]) -> BoundTranslator:
        """Return a translation function negotiated for an Accept-Language value."""
        tag, translator = self._select(preferences)
        return BoundTranslator(tag, translator)

    def select_with_request(self, request: Any) -> BoundTranslator:
        """Negotiate from the Accept-Language header of an HTTP request.

        Args:
            request: Any object exposing headers.get() (FastAPI/Starlette
                Request, requests.Request, ...).
        """
        return self.select(request.headers.get(ACCEPT_LANGUAGE_HEADER))

    def get(self, tag: str) -> Optional[Translator]:
        with self._lock:
            return self._translators.get(tag)

    @property
    def tags(self) -> List[str]:
        """Registered tags in registration order."""
        with self._lock:
            return list(self._tags)

    @property
    def default_tag(self) -> Optional[str]:
        with self._lock:
            return self._tags[0] if self._tags else None

    def __contains__(self, tag: object) -> bool:
        with self._lock:
            return tag in self._translators

    def __len__(self) -> int:
        with self._lock:
            return len(self._tags)
