"""Tests for infrastructure.i18n.factory module."""

import pytest

from infrastructure.i18n import create_registry


class TestCreateRegistry:
    """Tests for create_registry()."""

    def test_without_directory_is_empty(self):
        registry = create_registry()
        assert len(registry) == 0
        assert registry.default_tag is None

    def test_loads_all_locales(self, temp_translations_dir):
        registry = create_registry(temp_translations_dir)
        assert registry.tags == ["en", "ja"]
        assert registry.select("en")("%n comments", 1) == "1 comment"

    def test_default_locale_registered_first(self, temp_translations_dir):
        registry = create_registry(temp_translations_dir, default_locale="ja")
        assert registry.tags == ["ja", "en"]
        assert registry.select("de")("Cancel") == "キャンセル"

    def test_merged_contexts_available(self, temp_translations_dir):
        registry = create_registry(temp_translations_dir, default_locale="en")
        _ = registry.select("en")
        assert _("Cancel", context={"tone": "formal"}) == "Abort"

    def test_missing_default_locale_raises(self, temp_translations_dir):
        with pytest.raises(FileNotFoundError):
            create_registry(temp_translations_dir, default_locale="fr")

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(ValueError):
            create_registry(tmp_path / "missing")
