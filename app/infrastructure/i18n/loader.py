"""Translation document parsing and loading.

A translation document is a mapping with optional "values" and "contexts":

    {
        "values": {
            "Cancel": "Cancelar",
            "%n comments": [[0, 0, "%n comments"], [1, 1, "%n comment"], [2, null, "%n comments"]]
        },
        "contexts": [
            {"matches": {"gender": "female"}, "values": {...}}
        ]
    }

parse_document() turns a decoded document into a Dictionary. loads() and
load_file() decode JSON or YAML first. DirectoryTranslationLoader reads every
document of a locale from a directory and merges them.
"""

import json
import math
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import yaml

from infrastructure.i18n.errors import ParseError
from infrastructure.i18n.models import (
    MAX_COUNT,
    MIN_COUNT,
    ContextRule,
    Dictionary,
    Entry,
    Range,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

ROOT_LOCATION = "root values"

SUFFIX_FORMATS = {
    ".json": "json",
    ".yml": "yaml",
    ".yaml": "yaml",
}


def _convert_bound(value: Any, default: int):
    """Convert a pluralization bound; returns (bound, ok)."""
    if value is None:
        return default, True
    if isinstance(value, bool):
        return 0, False
    if isinstance(value, int):
        return value, True
    if isinstance(value, float) and math.isfinite(value):
        return int(value), True
    return 0, False


def _parse_value(location: str, key: str, value: Any) -> Entry:
    """Parse a single "values" entry into an Entry.

    Args:
        location: "root values" or "context[<i>]", used in error messages.
        key: Translation key.
        value: A string or a list of [min, max, template] rows.

    Returns:
        Simple or pluralized Entry.

    Raises:
        ParseError: If the value or one of its rows is malformed.
    """
    if isinstance(value, str):
        return Entry.simple(value)

    if not isinstance(value, list):
        raise ParseError(
            f"value of key '{key}' at {location} should be string or "
            f"pluralisation array, but '{value!r}'",
            key=key,
            location=location,
        )

    ranges = []
    for row in value:
        # Rows that are not [min, max, template] triples are ignored
        if not isinstance(row, list) or len(row) != 3:
            continue
        low, ok = _convert_bound(row[0], MIN_COUNT)
        if not ok:
            raise ParseError(
                f"First value of key '{key}' at {location} should be int, "
                f"but '{row[0]!r}'",
                key=key,
                location=location,
            )
        high, ok = _convert_bound(row[1], MAX_COUNT)
        if not ok:
            raise ParseError(
                f"Second value of key '{key}' at {location} should be int, "
                f"but '{row[1]!r}'",
                key=key,
                location=location,
            )
        if not isinstance(row[2], str):
            raise ParseError(
                f"Third value of key '{key}' at {location} should be string, "
                f"but '{row[2]!r}'",
                key=key,
                location=location,
            )
        ranges.append(Range(min=low, max=high, template=row[2]))

    return Entry.pluralized(ranges)


def _parse_values(location: str, values: Any) -> Dict[str, Entry]:
    if values is None:
        return {}
    if not isinstance(values, Mapping):
        raise ParseError(
            f"values at {location} should be an object, but '{values!r}'",
            location=location,
        )
    return {
        str(key): _parse_value(location, str(key), value)
        for key, value in values.items()
    }


def _parse_matches(location: str, matches: Any) -> Dict[str, str]:
    if matches is None:
        return {}
    if not isinstance(matches, Mapping) or not all(
        isinstance(v, str) for v in matches.values()
    ):
        raise ParseError(
            f"matches at {location} should map names to strings, but '{matches!r}'",
            location=location,
        )
    return {str(k): v for k, v in matches.items()}


def parse_document(document: Mapping[str, Any]) -> Dictionary:
    """Build a Dictionary from a decoded translation document.

    Args:
        document: Mapping with optional "values" and "contexts".

    Returns:
        New Dictionary.

    Raises:
        ParseError: If the document structure or any entry is malformed.
    """
    if document is None:
        return Dictionary()
    if not isinstance(document, Mapping):
        raise ParseError(f"translation document should be an object, but '{document!r}'")

    entries = _parse_values(ROOT_LOCATION, document.get("values"))

    raw_contexts = document.get("contexts") or []
    if not isinstance(raw_contexts, list):
        raise ParseError(f"contexts should be an array, but '{raw_contexts!r}'")

    contexts: List[ContextRule] = []
    for index, raw in enumerate(raw_contexts):
        location = f"context[{index}]"
        if not isinstance(raw, Mapping):
            raise ParseError(
                f"{location} should be an object, but '{raw!r}'", location=location
            )
        contexts.append(
            ContextRule(
                matches=_parse_matches(location, raw.get("matches")),
                entries=_parse_values(location, raw.get("values")),
            )
        )

    return Dictionary(entries=entries, contexts=contexts)


def loads(source: Union[str, bytes], format: str = "json") -> Dictionary:
    """Decode a JSON or YAML translation document and parse it.

    Args:
        source: Document text (bytes are decoded as UTF-8).
        format: "json" or "yaml".

    Returns:
        New Dictionary.

    Raises:
        ParseError: If decoding fails or the document is malformed.
    """
    if isinstance(source, bytes):
        try:
            source = source.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"translation document is not UTF-8: {e}") from e

    if format == "json":
        try:
            document = json.loads(source)
        except json.JSONDecodeError as e:
            raise ParseError(f"json parse error: {e}") from e
    elif format == "yaml":
        try:
            document = yaml.safe_load(source)
        except yaml.YAMLError as e:
            raise ParseError(f"yaml parse error: {e}") from e
    else:
        raise ValueError(f"Unsupported translation document format: {format}")

    return parse_document(document)


def load_file(path: Union[str, Path]) -> Dictionary:
    """Read and parse a translation document, picking the format from its suffix.

    Raises:
        ValueError: If the suffix is not .json, .yml or .yaml.
        ParseError: If the document is malformed.
    """
    path = Path(path)
    document_format = SUFFIX_FORMATS.get(path.suffix.lower())
    if document_format is None:
        raise ValueError(f"Unsupported translation file: {path}")

    with open(path, "r", encoding="utf-8") as f:
        source = f.read()

    try:
        return loads(source, format=document_format)
    except ParseError as e:
        logger.error("translation_parse_error", file=str(path), error=str(e))
        raise


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define where translation documents come from and how
    they map to locale tags.
    """

    @abstractmethod
    def load(self, locale: str) -> Dictionary:
        """Load the dictionary for a specific locale.

        Raises:
            FileNotFoundError: If no documents exist for the locale.
            ParseError: If a document is malformed.
        """

    @abstractmethod
    def load_all(self) -> Dict[str, Dictionary]:
        """Load dictionaries for every available locale."""


class DirectoryTranslationLoader(TranslationLoader):
    """Loader for translation documents stored in a directory.

    Expects files named <locale>.<ext> or <domain>.<locale>.<ext>, where ext
    is json, yml or yaml. All documents of one locale are merged in file name
    order.

    Attributes:
        translations_dir: Path to directory containing documents.
        use_cache: Whether loaded dictionaries are kept in memory.
        cache: Loaded dictionaries by locale tag.
    """

    def __init__(
        self,
        translations_dir: Union[str, Path],
        use_cache: bool = True,
    ):
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dictionary] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_directory_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _document_files(self) -> List[Path]:
        return sorted(
            path
            for path in self.translations_dir.iterdir()
            if path.is_file() and path.suffix.lower() in SUFFIX_FORMATS
        )

    @staticmethod
    def _locale_of(path: Path) -> str:
        # "incident.en-US.yml" -> "en-US", "ja.json" -> "ja"
        return path.stem.split(".")[-1]

    def available_locales(self) -> List[str]:
        """Return locale tags found in the directory, in file name order."""
        locales: List[str] = []
        for path in self._document_files():
            locale = self._locale_of(path)
            if locale and locale not in locales:
                locales.append(locale)
        return locales

    def load(self, locale: str) -> Dictionary:
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale)
            return self.cache[locale]

        files = [path for path in self._document_files() if self._locale_of(path) == locale]
        if not files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        dictionary = Dictionary()
        for path in files:
            dictionary.merge(load_file(path))

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(files),
            entry_count=len(dictionary),
            context_count=len(dictionary.contexts),
        )

        if self.use_cache:
            self.cache[locale] = dictionary

        return dictionary

    def load_all(self) -> Dict[str, Dictionary]:
        """Load dictionaries for all locales found in the directory.

        Raises:
            ValueError: If the directory holds no translation documents.
        """
        locales = self.available_locales()
        if not locales:
            raise ValueError(f"No translation files found in {self.translations_dir}")
        return {locale: self.load(locale) for locale in locales}

    def clear_cache(self) -> None:
        """Clear all cached dictionaries."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
