"""Property-based tests using Hypothesis for rules and the validator.

This module contains property tests that verify invariants of the
validation rules, value normalization and the BasicValidator facade.
"""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from fieldcheck import BasicValidator, normalize_value
from fieldcheck.rules import (
    must_be_email,
    must_be_in,
    must_be_present,
    validate_with_function,
    validate_with_message_function,
)
from tests.strategies import (
    email_strategy,
    field_name_strategy,
    int_collection_strategy,
    non_empty_text_strategy,
    string_collection_strategy,
    unsupported_collection_strategy,
)

# =============================================================================
# Rule Properties
# =============================================================================


class TestRuleProperties:
    """Property tests for the pure rules."""

    @given(non_empty_text_strategy())
    def test_non_empty_values_are_present(self, value: str) -> None:
        assert must_be_present(value)

    @given(st.booleans())
    def test_allow_empty_short_circuits_every_rule(self, predicate_result: bool) -> None:
        calls: list[str] = []

        def predicate(value: str) -> bool:
            calls.append(value)
            return predicate_result

        def message_predicate(value: str) -> tuple[bool, str]:
            calls.append(value)
            return predicate_result, "nope"

        assert must_be_email("", allow_empty=True)
        assert must_be_in("", [], allow_empty=True)
        assert validate_with_function("", True, predicate)
        assert validate_with_message_function("", True, message_predicate) == (True, "")
        assert calls == []

    @given(non_empty_text_strategy(), st.booleans(), st.booleans())
    def test_function_rule_returns_predicate_result(
        self, value: str, allow_empty: bool, predicate_result: bool
    ) -> None:
        calls: list[str] = []

        def predicate(v: str) -> bool:
            calls.append(v)
            return predicate_result

        assert validate_with_function(value, allow_empty, predicate) is predicate_result
        assert calls == [value]

    @given(email_strategy())
    @settings(suppress_health_check=[HealthCheck.too_slow])
    def test_generated_emails_are_valid(self, email: str) -> None:
        assert must_be_email(email)

    @given(email_strategy())
    @settings(suppress_health_check=[HealthCheck.too_slow])
    def test_emails_without_at_sign_are_invalid(self, email: str) -> None:
        assert not must_be_email(email.replace("@", ""))

    @given(string_collection_strategy(), st.data())
    def test_string_members_are_included(self, collection: list[str], data: st.DataObject) -> None:
        member = data.draw(st.sampled_from(collection))
        assert must_be_in(member, collection)

    @given(string_collection_strategy(), st.text(max_size=10))
    def test_string_inclusion_matches_membership(self, collection: list[str], value: str) -> None:
        assert must_be_in(value, collection) is (value in collection)

    @given(int_collection_strategy(), st.integers(min_value=-20_000, max_value=20_000))
    def test_int_inclusion_matches_membership(self, collection: list[int], value: int) -> None:
        assert must_be_in(str(value), collection) is (value in collection)

    @given(unsupported_collection_strategy(), st.text(max_size=10), st.booleans())
    def test_unsupported_collections_never_include(
        self, collection: list[object], value: str, allow_empty: bool
    ) -> None:
        expected = allow_empty and value == ""
        assert must_be_in(value, collection, allow_empty) is expected


# =============================================================================
# Normalization Properties
# =============================================================================


class TestNormalizationProperties:
    """Property tests for normalize_value."""

    @given(st.text())
    def test_strings_are_unchanged(self, value: str) -> None:
        assert normalize_value(value) == value

    @given(st.integers())
    def test_ints_round_trip_through_decimal(self, value: int) -> None:
        assert int(normalize_value(value)) == value


# =============================================================================
# Validator Properties
# =============================================================================


class TestValidatorProperties:
    """Property tests for BasicValidator."""

    @given(field_name_strategy(), st.text(max_size=20))
    def test_missing_field_records_exactly_one_violation(self, field: str, value: str) -> None:
        validator = BasicValidator()
        target = {"other": value}

        assert not validator.validate_present(target, field)
        assert validator.violations().as_dict() == {field: [f"could not find field '{field}'"]}

    @given(field_name_strategy(), st.text(max_size=20))
    def test_present_matches_rule(self, field: str, value: str) -> None:
        validator = BasicValidator()

        assert validator.validate_present({field: value}, field) is (value != "")
        assert len(validator.violations()) == (0 if value else 1)

    @given(st.lists(st.tuples(field_name_strategy(), st.text(max_size=5)), max_size=10))
    def test_clear_always_empties_store(self, checks: list[tuple[str, str]]) -> None:
        validator = BasicValidator()
        for field, value in checks:
            validator.validate_present({field: value}, field)

        validator.clear_violations()

        assert len(validator.violations()) == 0

    @given(st.lists(st.tuples(field_name_strategy(), st.text(max_size=5)), max_size=10))
    def test_violation_count_matches_failures(self, checks: list[tuple[str, str]]) -> None:
        validator = BasicValidator()
        failures = sum(not validator.validate_present({f: v}, f) for f, v in checks)

        assert validator.violations().count() == failures
        assert all(validator.violations()[f] for f in validator.violations())
