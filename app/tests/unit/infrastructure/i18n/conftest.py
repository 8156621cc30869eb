"""Feature-level fixtures for i18n system tests.

Provides translation documents, translators and registries for resolution
and negotiation scenarios.
"""

import json

import pytest
import yaml

from infrastructure.i18n import LocaleRegistry, Translator, create
from tests.factories.i18n import make_plural_rows


@pytest.fixture
def plural_document():
    """Document with ranges covering negative, zero, one and many."""
    return {
        "values": {
            "%n times": [
                [None, -2, "-%n times ago"],
                [-1, -1, "yesterday"],
                [0, 0, "today"],
                [1, 1, "tomorrow"],
                [2, None, "in %n days"],
            ],
            "%n comments": make_plural_rows("comment"),
        }
    }


@pytest.fixture
def context_document():
    """Document with gender contexts and a root fallback for the same key."""
    key = "%{name} uploaded %n photos to their %{album} album"
    return {
        "values": {
            key: [
                [0, 0, "%{name} uploaded %n photos to their %{album} album"],
                [1, 1, "%{name} uploaded %n photo to their %{album} album"],
                [2, None, "%{name} uploaded %n photos to their %{album} album"],
            ],
            "Greeting": "Hello",
        },
        "contexts": [
            {
                "matches": {"gender": "male"},
                "values": {
                    key: [
                        [0, 0, "%{name} uploaded %n photos to his %{album} album"],
                        [1, 1, "%{name} uploaded %n photo to his %{album} album"],
                        [2, None, "%{name} uploaded %n photos to his %{album} album"],
                    ]
                },
            },
            {
                "matches": {"gender": "female"},
                "values": {
                    key: [
                        [0, 0, "%{name} uploaded %n photos to her %{album} album"],
                        [1, 1, "%{name} uploaded %n photo to her %{album} album"],
                        [2, None, "%{name} uploaded %n photos to her %{album} album"],
                    ],
                    "Greeting": "Hello madam",
                },
            },
        ],
    }


@pytest.fixture
def translator(plural_document):
    """Translator over simple, pluralized and placeholder entries."""
    translator = create(plural_document)
    translator.add(
        {
            "values": {
                "Cancel": "Cancelar",
                "Welcome %{name}": "Bienvenido %{name}",
            }
        }
    )
    return translator


@pytest.fixture
def context_translator(context_document):
    return create(context_document)


@pytest.fixture
def empty_translator():
    return Translator()


@pytest.fixture
def en_ja_registry():
    """Registry with en registered first (default) and ja second."""
    registry = LocaleRegistry()
    registry.register_document("en", {"values": {"Cancel": "Cancel"}})
    registry.register_document("ja", {"values": {"Cancel": "キャンセル"}})
    return registry


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a temporary directory with JSON and YAML translation documents.

    Returns a directory structure like:
    - app.en.json
    - errors.en.yml
    - ja.json
    - notes.txt (ignored)
    """
    with open(tmp_path / "app.en.json", "w", encoding="utf-8") as f:
        json.dump({"values": {"Cancel": "Cancel", "%n comments": make_plural_rows()}}, f)

    with open(tmp_path / "errors.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {
                "values": {"Not found": "Not found"},
                "contexts": [
                    {"matches": {"tone": "formal"}, "values": {"Cancel": "Abort"}}
                ],
            },
            f,
        )

    with open(tmp_path / "ja.json", "w", encoding="utf-8") as f:
        json.dump({"values": {"Cancel": "キャンセル"}}, f, ensure_ascii=False)

    (tmp_path / "notes.txt").write_text("not a translation document")

    return tmp_path


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "ja_first": "ja,en-us;q=0.7,en;q=0.3",
        "unregistered": "de,fr;q=0.7,pt;q=0.3",
        "wildcard": "de,*;q=0.5",
        "invalid_quality": "en;q=invalid,fr",
    }
