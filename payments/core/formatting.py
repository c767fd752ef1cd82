"""
Display formatting for transaction amounts and timestamps.

Amounts are formatted with Babel so that symbol placement, grouping and
fraction digits follow the display locale and the currency's own rules
(two digits for USD, none for JPY).

Usage:
    from payments.core.formatting import format_amount

    format_amount(Decimal("250.00"), "USD")           # "$250.00"
    format_amount(Decimal("250.00"), "EUR", "de_DE")  # "250,00\xa0€"
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

import structlog
from babel.numbers import format_currency, is_currency

from payments.core.config import settings

logger = structlog.get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_currency(code: Optional[str], default: Optional[str] = None) -> str:
    """
    Return the currency to format with.

    Unrecognized or missing codes fall back to the default currency
    instead of failing.

    Args:
        code: ISO 4217 code carried by the record, possibly invalid
        default: Fallback currency (settings.default_currency if omitted)

    Returns:
        A currency code Babel can format
    """
    if code and is_currency(code):
        return code

    fallback = default or settings.default_currency
    logger.debug("currency_fallback", currency=code, fallback=fallback)
    return fallback


def format_amount(
    amount: Decimal,
    currency: Optional[str],
    locale: Optional[str] = None,
) -> str:
    """Format an amount as a localized currency string."""
    return format_currency(
        amount,
        resolve_currency(currency),
        locale=locale or settings.display_locale,
    )


def format_timestamp(timestamp: datetime) -> str:
    """
    Format a timestamp as yyyy-MM-dd HH:mm:ss in local time.

    Naive datetimes are assumed to already be local.
    """
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone()
    return timestamp.strftime(TIMESTAMP_FORMAT)
