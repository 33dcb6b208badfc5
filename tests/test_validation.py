"""
Tests for the request validation pipeline and the field rule catalog.

Pure functions only; no application or store needed.
"""

import pytest

from catalog.domain.products import rules
from catalog.domain.products.validation import ValidationResult, Violation, validate
from catalog.interfaces.products.router import (
    CREATE_PRODUCT_RULES,
    GET_PRODUCT_RULES,
    UPDATE_PRODUCT_RULES,
)


class TestIntegerRule:
    """Tests for the id rule."""

    @pytest.mark.parametrize("value", ["1", "42", "-3", "+7", 5])
    def test_accepts_integers(self, value) -> None:
        assert rules.integer("id", value) == []

    @pytest.mark.parametrize("value", ["abc", "1.5", "01", "", " 1", None, True, 2.0])
    def test_rejects_non_integers(self, value) -> None:
        assert rules.integer("id", value) == ["invalid id"]


class TestNameRule:
    """Tests for the non-empty name rule."""

    def test_accepts_text(self) -> None:
        assert rules.not_empty("name", "Monitor") == []

    @pytest.mark.parametrize("value", [None, "", "   ", 12])
    def test_rejects_empty_or_missing(self, value) -> None:
        assert rules.not_empty("name", value) == ["name must not be empty"]


class TestPriceRules:
    """The three price checks run independently."""

    def _messages(self, value) -> list[str]:
        return [
            message
            for rule in (rules.required, rules.numeric, rules.positive)
            for message in rule("price", value)
        ]

    @pytest.mark.parametrize("value", [300, 0.5, "399", "12.50"])
    def test_valid_prices(self, value) -> None:
        assert self._messages(value) == []

    def test_missing_price_fails_all_three(self) -> None:
        assert self._messages(None) == [
            "price required",
            "price must be numeric",
            "price must be positive",
        ]

    def test_non_numeric_price(self) -> None:
        assert self._messages("abc") == [
            "price must be numeric",
            "price must be positive",
        ]

    @pytest.mark.parametrize("value", [0, -10, "-1", "0"])
    def test_non_positive_price(self, value) -> None:
        assert self._messages(value) == ["price must be positive"]

    @pytest.mark.parametrize("value", [True, float("nan"), float("inf")])
    def test_booleans_and_non_finite_are_not_numeric(self, value) -> None:
        assert "price must be numeric" in self._messages(value)


class TestBooleanRule:
    """Tests for the availability rule."""

    @pytest.mark.parametrize("value", [True, False])
    def test_accepts_booleans(self, value) -> None:
        assert rules.boolean("availability", value) == []

    @pytest.mark.parametrize("value", [None, "true", 1, 0, "yes"])
    def test_rejects_other_values(self, value) -> None:
        assert rules.boolean("availability", value) == ["invalid availability value"]


class TestParseHelpers:
    """Tests for the coercion helpers used after validation."""

    def test_parse_int(self) -> None:
        assert rules.parse_int("17") == 17
        assert rules.parse_int("x") is None

    def test_parse_number(self) -> None:
        assert rules.parse_number("12.5") == 12.5
        assert rules.parse_number(3) == 3.0
        assert rules.parse_number("") is None

    def test_integer_too_large_for_a_float_is_not_numeric(self) -> None:
        huge = 10**400

        assert rules.parse_number(huge) is None
        assert rules.numeric("price", huge) == ["price must be numeric"]
        assert rules.positive("price", huge) == ["price must be positive"]

    def test_id_past_the_digit_limit_is_invalid(self) -> None:
        digits = "1" * 5000

        assert rules.parse_int(digits) is None
        assert rules.integer("id", digits) == ["invalid id"]


class TestPipeline:
    """Tests for validate()."""

    def test_valid_input(self) -> None:
        result = validate({"name": "Teclado", "price": 10}, CREATE_PRODUCT_RULES)
        assert result == ValidationResult.valid()
        assert result.is_valid

    def test_collects_every_violation_without_short_circuit(self) -> None:
        result = validate({"id": "x", "name": ""}, UPDATE_PRODUCT_RULES)
        assert not result.is_valid
        assert result.violations == (
            Violation("id", "invalid id"),
            Violation("name", "name must not be empty"),
            Violation("price", "price required"),
            Violation("price", "price must be numeric"),
            Violation("price", "price must be positive"),
            Violation("availability", "invalid availability value"),
        )

    def test_order_follows_rule_bindings(self) -> None:
        reversed_rules = tuple(reversed(CREATE_PRODUCT_RULES))
        result = validate({"price": -1}, reversed_rules)
        assert [v.field for v in result.violations] == ["price", "name"]

    def test_ignores_fields_without_rules(self) -> None:
        result = validate({"id": "3", "extra": object()}, GET_PRODUCT_RULES)
        assert result.is_valid

    def test_no_rules_is_valid(self) -> None:
        assert validate({}, ()).is_valid
