"""Unit tests for amount and timestamp formatting."""

from datetime import datetime
from decimal import Decimal

from structlog.testing import capture_logs

from payments.core.formatting import (
    format_amount,
    format_timestamp,
    resolve_currency,
)


class TestResolveCurrency:
    """Tests for resolve_currency()."""

    def test_known_code_kept(self):
        assert resolve_currency("EUR") == "EUR"

    def test_unknown_code_uses_configured_default(self):
        assert resolve_currency("ZZZ") == "USD"

    def test_unknown_code_uses_explicit_default(self):
        assert resolve_currency("ZZZ", default="GBP") == "GBP"

    def test_missing_code_falls_back(self):
        assert resolve_currency(None) == "USD"
        assert resolve_currency("") == "USD"

    def test_fallback_is_logged(self):
        with capture_logs() as logs:
            resolve_currency("ZZZ")

        assert logs == [
            {
                "event": "currency_fallback",
                "log_level": "debug",
                "currency": "ZZZ",
                "fallback": "USD",
            }
        ]


class TestFormatAmount:
    """Tests for format_amount()."""

    def test_usd_default_locale(self):
        assert format_amount(Decimal("1234.5"), "USD") == "$1,234.50"

    def test_negative_amount(self):
        assert format_amount(Decimal("-5"), "USD") == "-$5.00"

    def test_invalid_code_keeps_number(self):
        assert format_amount(Decimal("99.99"), "ZZZ") == "$99.99"

    def test_explicit_locale(self):
        formatted = format_amount(Decimal("1234.5"), "EUR", "de_DE")
        assert "1.234,50" in formatted
        assert "€" in formatted


class TestFormatTimestamp:
    """Tests for format_timestamp()."""

    def test_fixed_pattern(self):
        assert format_timestamp(datetime(2024, 1, 5, 7, 3, 9)) == "2024-01-05 07:03:09"

    def test_microseconds_dropped(self):
        ts = datetime(2024, 12, 31, 23, 59, 59, 999999)
        assert format_timestamp(ts) == "2024-12-31 23:59:59"
