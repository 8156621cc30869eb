"""Interpretation of loosely-typed translate() arguments.

translate(key, *args) accepts, in order, any of: a fallback text, a count,
replacement parameters and context parameters. Each argument's role is
decided by its type:

    first argument   role          may be followed by
    --------------   -----------   ------------------------------
    mapping          replacements  context
    int              count         replacements, context
    str              fallback      count, replacements, context

With exactly four arguments the fourth is always the context. Later
arguments that fit none of the remaining roles are ignored.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from infrastructure.i18n.errors import TranslationUsageError
from infrastructure.i18n.models import Context

UNSET: Any = object()

COUNT = "count"
REPLACEMENTS = "replacements"
CONTEXT = "context"


@dataclass
class CallArguments:
    """Optional parameters of a single translation call.

    Attributes:
        count: Count used for pluralization and %n placeholders.
        replacements: Values for %{name} placeholders.
        context: Context used to select a context rule.
        fallback: Text used instead of the key when nothing is found.
    """

    count: Optional[int] = None
    replacements: Optional[Mapping[str, Any]] = None
    context: Optional[Mapping[str, str]] = None
    fallback: Optional[str] = None

    @property
    def has_count(self) -> bool:
        return self.count is not None


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_replacements(value: Any) -> bool:
    return isinstance(value, Mapping) and not isinstance(value, Context)


def _fits(slot: str, value: Any) -> bool:
    if slot == COUNT:
        return _is_count(value)
    if slot == REPLACEMENTS:
        return _is_replacements(value)
    return isinstance(value, Mapping)


def _describe(value: Any) -> str:
    return f"{type(value).__name__} {value!r}"


def parse_arguments(args: Sequence[Any]) -> CallArguments:
    """Map positional translate() arguments onto CallArguments.

    Args:
        args: Extra positional arguments given after the key.

    Returns:
        Populated CallArguments.

    Raises:
        TranslationUsageError: If the first argument has an unsupported type,
            or a fourth argument is not a mapping.
    """
    call = CallArguments()
    if not args:
        return call

    remaining = list(args)
    four_args = len(remaining) == 4
    if four_args:
        last = remaining.pop()
        if not isinstance(last, Mapping):
            raise TranslationUsageError(
                f"4th argument of translate() should be context parameters, "
                f"got {_describe(last)}"
            )
        call.context = last

    first = remaining[0]
    if _is_replacements(first):
        call.replacements = first
        slots = [CONTEXT]
    elif _is_count(first):
        call.count = first
        slots = [REPLACEMENTS, CONTEXT]
    elif isinstance(first, str):
        call.fallback = first
        slots = [COUNT, REPLACEMENTS, CONTEXT]
    else:
        raise TranslationUsageError(
            "2nd argument of translate() should be int or string or "
            f"formatting params, got {_describe(first)}"
        )

    if four_args:
        slots.remove(CONTEXT)

    for value in remaining[1:]:
        position = next(
            (i for i, slot in enumerate(slots) if _fits(slot, value)), None
        )
        if position is None:
            # Later arguments fitting no remaining role are ignored
            continue
        setattr(call, slots[position], value)
        del slots[: position + 1]

    return call


def merge_keywords(
    call: CallArguments,
    count: Optional[int] = UNSET,
    replacements: Optional[Mapping[str, Any]] = UNSET,
    context: Optional[Mapping[str, str]] = UNSET,
    fallback: Optional[str] = UNSET,
) -> CallArguments:
    """Override positional arguments with explicitly passed keywords.

    Raises:
        TranslationUsageError: If a keyword value has the wrong type.
    """
    if count is not UNSET:
        if count is not None and not _is_count(count):
            raise TranslationUsageError(f"count should be int, got {_describe(count)}")
        call.count = count
    if replacements is not UNSET:
        if replacements is not None and not isinstance(replacements, Mapping):
            raise TranslationUsageError(
                f"replacements should be a mapping, got {_describe(replacements)}"
            )
        call.replacements = replacements
    if context is not UNSET:
        if context is not None and not isinstance(context, Mapping):
            raise TranslationUsageError(
                f"context should be a mapping, got {_describe(context)}"
            )
        call.context = context
    if fallback is not UNSET:
        if fallback is not None and not isinstance(fallback, str):
            raise TranslationUsageError(
                f"fallback should be a string, got {_describe(fallback)}"
            )
        call.fallback = fallback
    return call
