"""Tests for infrastructure.i18n.arguments module."""

import pytest

from infrastructure.i18n import Context, Replace, TranslationUsageError
from infrastructure.i18n.arguments import (
    CallArguments,
    merge_keywords,
    parse_arguments,
)

REPLACE = Replace(name="John")
CONTEXT = Context(gender="female")


class TestParseArguments:
    """Tests for parse_arguments() role disambiguation."""

    def test_no_arguments(self):
        assert parse_arguments(()) == CallArguments()

    def test_replacements_only(self):
        assert parse_arguments((REPLACE,)) == CallArguments(replacements=REPLACE)

    def test_plain_dict_is_replacements(self):
        call = parse_arguments(({"name": "John"},))
        assert call.replacements == {"name": "John"}

    def test_replacements_then_context(self):
        call = parse_arguments((REPLACE, CONTEXT))
        assert call == CallArguments(replacements=REPLACE, context=CONTEXT)

    def test_count_only(self):
        assert parse_arguments((3,)) == CallArguments(count=3)

    def test_count_replacements_context(self):
        call = parse_arguments((3, REPLACE, CONTEXT))
        assert call == CallArguments(count=3, replacements=REPLACE, context=CONTEXT)

    def test_count_then_plain_dicts(self):
        call = parse_arguments((3, {"name": "John"}, {"gender": "male"}))
        assert call.replacements == {"name": "John"}
        assert call.context == {"gender": "male"}

    def test_count_then_context_skips_replacements(self):
        call = parse_arguments((3, CONTEXT))
        assert call == CallArguments(count=3, context=CONTEXT)

    def test_fallback_only(self):
        assert parse_arguments(("Long text",)) == CallArguments(fallback="Long text")

    def test_fallback_count(self):
        assert parse_arguments(("text", 2)) == CallArguments(fallback="text", count=2)

    def test_fallback_replacements_context(self):
        call = parse_arguments(("text", REPLACE, CONTEXT))
        assert call == CallArguments(
            fallback="text", replacements=REPLACE, context=CONTEXT
        )

    def test_four_arguments_last_is_context(self):
        call = parse_arguments(("text", 2, REPLACE, {"gender": "female"}))
        assert call == CallArguments(
            fallback="text",
            count=2,
            replacements=REPLACE,
            context={"gender": "female"},
        )

    def test_four_arguments_last_not_mapping(self):
        with pytest.raises(TranslationUsageError):
            parse_arguments(("text", 2, REPLACE, "oops"))

    @pytest.mark.parametrize("first", [1.5, True, None, ["list"], CONTEXT])
    def test_unsupported_first_argument(self, first):
        with pytest.raises(TranslationUsageError):
            parse_arguments((first,))

    def test_unassignable_argument_ignored(self):
        assert parse_arguments((REPLACE, 3)) == CallArguments(replacements=REPLACE)

    def test_trailing_none_ignored(self):
        assert parse_arguments((3, None)) == CallArguments(count=3)

    def test_extra_arguments_before_fourth_ignored(self):
        last = Context(tone="formal")
        call = parse_arguments((REPLACE, CONTEXT, "x", last))
        assert call == CallArguments(replacements=REPLACE, context=last)

    def test_bool_is_not_a_count(self):
        assert parse_arguments(("text", True)) == CallArguments(fallback="text")

    def test_usage_error_is_type_error(self):
        with pytest.raises(TypeError):
            parse_arguments((object(),))


class TestMergeKeywords:
    """Tests for merge_keywords()."""

    def test_keywords_override_positional(self):
        call = merge_keywords(CallArguments(count=1), count=5, fallback="text")
        assert call.count == 5
        assert call.fallback == "text"

    def test_unset_keywords_leave_positional(self):
        call = merge_keywords(CallArguments(count=1, replacements=REPLACE))
        assert call == CallArguments(count=1, replacements=REPLACE)

    def test_explicit_none_clears(self):
        call = merge_keywords(CallArguments(count=1), count=None)
        assert call.count is None
        assert call.has_count is False

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"count": "3"},
            {"count": False},
            {"replacements": "name"},
            {"context": ["gender"]},
            {"fallback": 3},
        ],
    )
    def test_wrong_keyword_types(self, kwargs):
        with pytest.raises(TranslationUsageError):
            merge_keywords(CallArguments(), **kwargs)
