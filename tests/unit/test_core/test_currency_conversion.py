#!/usr/bin/env python3
"""Tests for base-currency conversion and formatting."""

import random

import pytest

from freight_finance.core.currency import (
    BASE_CURRENCY,
    InvalidExchangeRate,
    calculate_line_amount,
    convert_to_idr,
    format_currency,
)


class TestConvertToIdr:
    """Test conversion of line amounts into the base currency."""

    @pytest.mark.currency
    def test_foreign_currency_is_multiplied_by_rate(self):
        """Test USD amount converted with its exchange rate."""
        assert convert_to_idr(100, "USD", 15_500) == pytest.approx(1_550_000)

    @pytest.mark.currency
    def test_base_currency_ignores_rate(self):
        """Test IDR amounts are returned unchanged whatever the rate."""
        assert convert_to_idr(250_000, "IDR", 1) == 250_000
        assert convert_to_idr(250_000, "IDR", 15_500) == 250_000
        assert convert_to_idr(250_000, "IDR", 0) == 250_000
        assert convert_to_idr(250_000, "IDR", -3) == 250_000

    @pytest.mark.currency
    @pytest.mark.parametrize("rate", [0, -1, -15_500.5])
    def test_non_positive_rate_raises(self, rate):
        """Test conversion fails hard for out-of-domain exchange rates."""
        with pytest.raises(InvalidExchangeRate):
            convert_to_idr(100, "USD", rate)

    @pytest.mark.currency
    def test_invalid_exchange_rate_is_value_error(self):
        """Test callers can catch the failure as a ValueError."""
        with pytest.raises(ValueError, match="greater than 0"):
            convert_to_idr(100, "SGD", 0)

    @pytest.mark.currency
    def test_custom_base_currency(self):
        """Test conversion relative to a non-default base currency."""
        assert convert_to_idr(10, "USD", 0, base_currency="USD") == 10
        assert convert_to_idr(10, "IDR", 0.000065, base_currency="USD") == pytest.approx(0.00065)

    @pytest.mark.currency
    def test_conversion_matches_product_for_random_inputs(self):
        """Test amount * rate for a spread of positive amounts and rates."""
        rng = random.Random(20250101)
        for _ in range(200):
            amount = rng.uniform(0.01, 1_000_000)
            rate = rng.uniform(0.0001, 20_000)
            currency = rng.choice(["USD", "SGD", "EUR", "CNY"])
            assert convert_to_idr(amount, currency, rate) == pytest.approx(amount * rate, abs=1e-6, rel=1e-12)
            assert convert_to_idr(amount, BASE_CURRENCY, rate) == amount


class TestLineAmount:
    """Test line amount calculation."""

    @pytest.mark.currency
    def test_unit_price_times_quantity(self):
        """Test amount is unit price multiplied by quantity."""
        assert calculate_line_amount(1_250_000, 2) == 2_500_000
        assert calculate_line_amount(12.5, 4) == 50
        assert calculate_line_amount(100, 0) == 0


class TestFormatCurrency:
    """Test display formatting of amounts."""

    @pytest.mark.currency
    def test_whole_amounts_drop_decimals(self):
        """Test whole rupiah amounts render without decimals."""
        assert format_currency(3_330_000) == "IDR 3,330,000"
        assert format_currency(0) == "IDR 0"

    @pytest.mark.currency
    def test_fractional_amounts(self):
        """Test up to two decimals are kept."""
        assert format_currency(1234.5, "USD") == "USD 1,234.5"
        assert format_currency(99.999, "USD") == "USD 100"
        assert format_currency(0.25, "USD") == "USD 0.25"

    @pytest.mark.currency
    def test_negative_amounts(self):
        """Test negative amounts keep their sign."""
        assert format_currency(-500_000) == "IDR -500,000"
        assert format_currency(-0.001) == "IDR 0"
