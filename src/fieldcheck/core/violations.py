"""Violation store.

Accumulates human-readable violation messages per field over the course
of a validation pass.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from abstract_validation_base import ValidationResult


class Violations(Mapping[str, list[str]]):
    """Ordered mapping of field name to the messages recorded for it.

    A field key only exists once at least one message has been recorded
    for it. Messages keep the order in which they were recorded and are
    never deduplicated. The store never clears itself.

    Item access returns the stored list itself, not a copy. Callers that
    need to keep or modify the data should use :meth:`as_dict`.

    Example:
        violations = Violations()
        violations.record("email", "expected 'x' to be an email address")
        violations["email"]  # ["expected 'x' to be an email address"]
        len(violations)  # 1
    """

    def __init__(self) -> None:
        self._messages: dict[str, list[str]] = {}

    def record(self, field: str, message: str) -> None:
        """Append ``message`` to the list for ``field``, creating it if needed."""
        self._messages.setdefault(field, []).append(message)

    def clear(self) -> None:
        """Remove every recorded message."""
        self._messages.clear()

    def __getitem__(self, field: str) -> list[str]:
        return self._messages[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"Violations({self._messages!r})"

    def count(self) -> int:
        """Total number of messages across all fields."""
        return sum(len(messages) for messages in self._messages.values())

    def as_dict(self) -> dict[str, list[str]]:
        """Copy of the store as a plain dict of lists."""
        return {field: list(messages) for field, messages in self._messages.items()}

    def messages(self) -> list[str]:
        """Flat list of ``"field: message"`` strings in recording order per field."""
        return [
            f"{field}: {message}"
            for field, messages in self._messages.items()
            for message in messages
        ]

    def to_validation_result(self) -> ValidationResult:
        """Convert to a ValidationResult with one error per recorded message."""
        result = ValidationResult(is_valid=True)
        for field, messages in self._messages.items():
            for message in messages:
                result.add_error(field, message)
        return result
