"""Validation rules.

Pure predicates over string-normalized field values. Every rule except
must_be_present takes an ``allow_empty`` flag: when it is set, an empty
value passes without the rule's own check (regex, lookup or predicate)
being evaluated.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Collection
from enum import Enum
from typing import Any

import re2

# RFC 5322 derived address grammar in RE2 syntax. Anchored at both ends.
EMAIL_PATTERN = r"^(((([a-zA-Z]|\d|[!#\$%&'\*\+\-\/=\?\^_`{\|}~]|[\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}])+(\.([a-zA-Z]|\d|[!#\$%&'\*\+\-\/=\?\^_`{\|}~]|[\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}])+)*)|((\x22)((((\x20|\x09)*(\x0d\x0a))?(\x20|\x09)+)?(([\x01-\x08\x0b\x0c\x0e-\x1f\x7f]|\x21|[\x23-\x5b]|[\x5d-\x7e]|[\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}])|(\([\x01-\x09\x0b\x0c\x0d-\x7f]|[\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}]))))*(((\x20|\x09)*(\x0d\x0a))?(\x20|\x09)+)?(\x22)))@((([a-zA-Z]|\d|[\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}])|(([a-zA-Z]|\d|[\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}])([a-zA-Z]|\d|-|\.|_|~|[\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}])*([a-zA-Z]|\d|[\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}])))\.)+(([a-zA-Z]|[\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}])|(([a-zA-Z]|[\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}])([a-zA-Z]|\d|-|\.|_|~|[\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}])*([a-zA-Z]|[\x{00A0}-\x{D7FF}\x{F900}-\x{FDCF}\x{FDF0}-\x{FFEF}])))\.?$"  # noqa: E501

# RE2 matches in linear time. The grammar is ambiguous in both the quoted
# local part and the dotted domain, so a backtracking engine is not safe here.
# RE2's \d is ASCII-only; the \x{HHHH} ranges carry the non-ASCII letters.
_email_regex = re2.compile(EMAIL_PATTERN)

# Plain decimal integers with an optional sign: no whitespace,
# underscores or non-ASCII digits.
_int_regex = re.compile(r"[+-]?[0-9]+", re.ASCII)


class CollectionKind(str, Enum):
    """Kind of an inclusion collection, decided by its first element."""

    EMPTY = "empty"
    STRING = "string"
    INTEGER = "integer"
    UNSUPPORTED = "unsupported"


def classify_collection(collection: Collection[Any]) -> CollectionKind:
    """Classify an inclusion collection by the type of its first element.

    Only the first element in iteration order is inspected, so sets and
    dict views work as well as lists and tuples. bool does not count as
    an integer. Anything other than str or int is UNSUPPORTED, which
    makes every inclusion check against the collection fail.
    """
    for first in collection:
        break
    else:
        return CollectionKind.EMPTY
    if isinstance(first, str):
        return CollectionKind.STRING
    if isinstance(first, int) and not isinstance(first, bool):
        return CollectionKind.INTEGER
    return CollectionKind.UNSUPPORTED


def parse_int(value: str) -> int | None:
    """Parse a decimal integer, returning None if value is not one."""
    if _int_regex.fullmatch(value) is None:
        return None
    return int(value)


def must_be_present(value: str) -> bool:
    """True if the value is not empty."""
    return value != ""


def must_be_email(value: str, allow_empty: bool = False) -> bool:
    """True if the whole value is an email address.

    Args:
        value: Normalized field value.
        allow_empty: If True, an empty value passes.
    """
    if allow_empty and value == "":
        return True
    try:
        return _email_regex.fullmatch(value) is not None
    except UnicodeEncodeError:
        # Lone surrogates cannot be UTF-8 encoded and fall outside every range.
        return False


def must_be_in(value: str, collection: Collection[Any], allow_empty: bool = False) -> bool:
    """True if the value is one of the collection's elements.

    String collections compare by exact string equality. Integer
    collections parse the value as a decimal integer first; values that
    do not parse never match. Elements whose type differs from the first
    element's never match. Empty and unsupported collections always fail.

    Args:
        value: Normalized field value.
        collection: Allowed values, all strings or all integers.
        allow_empty: If True, an empty value passes even for an empty collection.

    Returns:
        True if the value is included.
    """
    if allow_empty and value == "":
        return True

    kind = classify_collection(collection)
    if kind is CollectionKind.STRING:
        return any(isinstance(elem, str) and elem == value for elem in collection)
    if kind is CollectionKind.INTEGER:
        number = parse_int(value)
        if number is None:
            return False
        return any(
            isinstance(elem, int) and not isinstance(elem, bool) and elem == number
            for elem in collection
        )
    return False


def validate_with_function(
    value: str,
    allow_empty: bool,
    function: Callable[[str], bool],
) -> bool:
    """Apply a caller-supplied predicate to the value.

    The predicate is called exactly once unless the value is empty and
    ``allow_empty`` is set, in which case it is not called at all.
    """
    if allow_empty and value == "":
        return True
    return bool(function(value))


def validate_with_message_function(
    value: str,
    allow_empty: bool,
    function: Callable[[str], tuple[bool, str]],
) -> tuple[bool, str]:
    """Apply a predicate that returns ``(ok, message)``.

    Returns:
        ``(True, "")`` when short-circuited by ``allow_empty``, otherwise
        whatever the function returned.
    """
    if allow_empty and value == "":
        return True, ""
    ok, message = function(value)
    return bool(ok), message
