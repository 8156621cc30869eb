"""Translation models for i18n system.

Defines the in-memory dictionary structure produced by the loader and read by
the translator: entries (simple or pluralized), count ranges, and context
rules that select alternate entry tables.
"""

import threading
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

# Bounds used when a pluralization row leaves min or max open (null).
MIN_COUNT = -(2**63)
MAX_COUNT = 2**63 - 1


class Replace(dict):
    """Replacement parameters for %{name} placeholders."""


class Context(dict):
    """Context parameters used to select a context rule (e.g. gender)."""


@dataclass(frozen=True)
class Range:
    """Inclusive count interval and the template used inside it.

    Attributes:
        min: Lowest matching count.
        max: Highest matching count.
        template: Translation used when the count falls in the interval.
    """

    min: int = MIN_COUNT
    max: int = MAX_COUNT
    template: str = ""

    def contains(self, count: int) -> bool:
        return self.min <= count <= self.max


@dataclass(frozen=True)
class Entry:
    """Translation data for a single key.

    An entry is either simple (one literal text) or pluralized (ordered
    ranges), never both.

    Attributes:
        text: Literal translation of a simple entry.
        ranges: Ordered ranges of a pluralized entry.
    """

    text: Optional[str] = None
    ranges: Tuple[Range, ...] = ()

    @classmethod
    def simple(cls, text: str) -> "Entry":
        return cls(text=text)

    @classmethod
    def pluralized(cls, ranges) -> "Entry":
        return cls(ranges=tuple(ranges))

    @property
    def is_pluralized(self) -> bool:
        return bool(self.ranges)

    def select(self, count: int) -> Optional[str]:
        """Return the template of the first range containing count.

        Ranges are tested in document order and may overlap; the first one
        listed wins.

        Args:
            count: Count supplied to the translation call.

        Returns:
            Matching template, or None if no range contains count.
        """
        for entry_range in self.ranges:
            if entry_range.contains(count):
                return entry_range.template
        return None


@dataclass(frozen=True)
class ContextRule:
    """Alternate entry table used when a call's context matches.

    Attributes:
        matches: Condition key -> expected value.
        entries: Entry table tried before the root table.
    """

    matches: Dict[str, str] = field(default_factory=dict)
    entries: Dict[str, Entry] = field(default_factory=dict)

    def applies_to(self, context: Mapping[str, str]) -> bool:
        """Check whether every condition is present in context with an equal value.

        Extra keys in context are ignored; a missing condition key fails.
        """
        for key, expected in self.matches.items():
            if key not in context or context[key] != expected:
                return False
        return True


class Dictionary:
    """Resolved translation table for one locale.

    Built once by the loader. The only mutations afterwards are add_value()
    and merge(); both swap in new tables under a lock so a reader that
    already holds the previous table keeps a consistent view.

    Attributes:
        entries: Root entry table (key -> Entry).
        contexts: Ordered context rules; the first applicable rule wins.
    """

    def __init__(
        self,
        entries: Optional[Dict[str, Entry]] = None,
        contexts: Optional[List[ContextRule]] = None,
    ):
        self.entries: Dict[str, Entry] = dict(entries or {})
        self.contexts: Tuple[ContextRule, ...] = tuple(contexts or ())
        self._lock = threading.Lock()

    def lookup(self, key: str) -> Optional[Entry]:
        """Return the root entry for key (exact, case-sensitive match)."""
        return self.entries.get(key)

    def find_context(self, context: Mapping[str, str]) -> Optional[ContextRule]:
        """Return the first context rule applicable to context, if any."""
        for rule in self.contexts:
            if rule.applies_to(context):
                return rule
        return None

    def add_value(self, key: str, text: str) -> None:
        """Add or replace a single simple entry in the root table.

        Used for long-form text that is inconvenient to embed in the document.

        Args:
            key: Translation key.
            text: Literal translation.
        """
        with self._lock:
            entries = dict(self.entries)
            entries[key] = Entry.simple(text)
            self.entries = entries

    def merge(self, other: "Dictionary") -> None:
        """Merge another dictionary into this one.

        Root entries of other override existing ones; its context rules are
        appended after the existing rules.

        Args:
            other: Dictionary to merge.
        """
        with self._lock:
            entries = dict(self.entries)
            entries.update(other.entries)
            self.entries = entries
            self.contexts = self.contexts + other.contexts

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __repr__(self) -> str:
        return (
            f"Dictionary(entries={len(self.entries)}, contexts={len(self.contexts)})"
        )
