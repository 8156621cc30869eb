"""Locale negotiation for choosing a registered dictionary.

Parses HTTP Accept-Language preference lists and matches them against the
locale tags registered with a LocaleRegistry.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from infrastructure.logging import get_module_logger

logger = get_module_logger()

WILDCARD = "*"

# Match confidence levels, strongest first
EXACT = "exact"
HIGH = "high"
LOW = "low"
NO_MATCH = "none"


@dataclass(frozen=True)
class LanguagePreference:
    """One entry of an Accept-Language header.

    Attributes:
        tag: Language range as written by the client (e.g. "en-US", "*").
        quality: Weight between 0 and 1.
    """

    tag: str
    quality: float = 1.0


def normalize_tag(tag: str) -> str:
    """Lower-case a tag and use "-" as the subtag separator."""
    return tag.strip().replace("_", "-").lower()


def base_language(tag: str) -> str:
    return normalize_tag(tag).split("-")[0]


def parse_accept_language(header: Optional[str]) -> List[LanguagePreference]:
    """Parse an Accept-Language value into preferences ordered by quality.

    "ja,en-us;q=0.7,en;q=0.3" -> [(ja, 1.0), (en-us, 0.7), (en, 0.3)]

    Entries with the same quality keep their written order. An unparsable or
    non-finite weight counts as 1.0; entries weighted 0 (not acceptable) are
    dropped.

    Args:
        header: Accept-Language header value, or None.

    Returns:
        Preferences, highest quality first.
    """
    if not header:
        return []

    preferences = []
    for part in header.split(","):
        fields = part.split(";")
        tag = fields[0].strip()
        if not tag:
            continue

        quality = 1.0
        for param in fields[1:]:
            name, _, value = param.strip().partition("=")
            if name.strip().lower() != "q":
                continue
            try:
                quality = float(value.strip())
            except ValueError:
                quality = 1.0
            if not math.isfinite(quality):
                quality = 1.0

        quality = min(quality, 1.0)
        if quality <= 0:
            continue
        preferences.append(LanguagePreference(tag=tag, quality=quality))

    # sorted() is stable, so equal weights keep header order
    return sorted(preferences, key=lambda p: p.quality, reverse=True)


class LanguageMatcher:
    """Matches preference lists against a fixed, ordered set of tags.

    The first tag is the default returned when nothing acceptable matches.
    Instances are immutable; a registry builds a new one when its tags change.

    Attributes:
        tags: Supported tags in registration order.
    """

    def __init__(self, tags: Sequence[str]):
        if not tags:
            raise ValueError("LanguageMatcher needs at least one tag")
        self.tags: Tuple[str, ...] = tuple(tags)
        self._normalized = {}
        for tag in self.tags:
            self._normalized.setdefault(normalize_tag(tag), tag)

    @property
    def default(self) -> str:
        return self.tags[0]

    def _match_one(self, requested: str) -> Optional[Tuple[str, str]]:
        normalized = normalize_tag(requested)
        if normalized == WILDCARD:
            return self.default, LOW

        if normalized in self._normalized:
            return self._normalized[normalized], EXACT

        # Longest registered prefix: "en-us-x-twain" -> "en-us" -> "en"
        subtags = normalized.split("-")
        for end in range(len(subtags) - 1, 0, -1):
            prefix = "-".join(subtags[:end])
            if prefix in self._normalized:
                return self._normalized[prefix], HIGH

        # Same base language, different region/script: first registered wins
        requested_base = subtags[0]
        for tag in self.tags:
            if base_language(tag) == requested_base:
                return tag, LOW

        return None

    def match(self, header: Optional[str]) -> Tuple[str, str]:
        """Pick the best tag for an Accept-Language value.

        Preferences are tried in quality order; within one preference an
        exact match beats a registered prefix, which beats a tag sharing only
        the base language.

        Args:
            header: Accept-Language header value, or None.

        Returns:
            (tag, confidence) where confidence is "exact", "high", "low" or
            "none" (the default tag was used).
        """
        for preference in parse_accept_language(header):
            result = self._match_one(preference.tag)
            if result is not None:
                return result

        logger.debug("no_matching_locale", preferences=header, default=self.default)
        return self.default, NO_MATCH
