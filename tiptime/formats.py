from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable

import pyperclip
from babel.core import Locale, UnknownLocaleError
from babel.numbers import format_currency, get_currency_precision

logger = logging.getLogger(__name__)


# --- Money helpers & constants ---
CENT = Decimal("0.01")
HUNDRED = Decimal("100")
PERCENT_STEP = Decimal("0.01")  # display percent with up to 2 decimals

DEFAULT_CURRENCY = "USD"
DEFAULT_LOCALE = "en_US"

MoneyFormatter = Callable[[Decimal], str]


def to_cents(value: Decimal) -> Decimal:
    """Round a Decimal to two fractional digits using ROUND_HALF_UP."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def quantize_amount(value: Decimal, currency: str = DEFAULT_CURRENCY) -> Decimal:
    """Round to the minor unit of ``currency`` (0 digits for JPY, 3 for BHD) using ROUND_HALF_UP."""
    digits = get_currency_precision((currency or DEFAULT_CURRENCY).upper())
    return value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


# --- Formatting ---
def locale_formatter(
    currency: str = DEFAULT_CURRENCY,
    locale: str = DEFAULT_LOCALE,
) -> MoneyFormatter:
    """Build a money formatter pinned to ``currency`` and ``locale``.

    The amount is rounded half-up to the currency's minor unit first, so the
    display never applies a ceiling or banker's rounding of its own; Babel then
    places the symbol, the decimal separator and the grouping the way
    ``locale`` expects.

    Raises ``ValueError`` for a locale identifier Babel does not know.
    """
    code = (currency or DEFAULT_CURRENCY).upper()
    try:
        parsed = Locale.parse(locale or DEFAULT_LOCALE)
    except (UnknownLocaleError, ValueError) as exc:
        raise ValueError(f"Unknown locale: {locale}") from exc

    def fmt_money(value: Decimal) -> str:
        return format_currency(quantize_amount(value, code), code, locale=parsed)

    return fmt_money


def fmt_percent(value: Decimal) -> str:
    """Format a percentage with up to two decimals, trimming zeros."""
    q = value.quantize(PERCENT_STEP, rounding=ROUND_HALF_UP)
    return f"{q:.2f}".rstrip("0").rstrip(".")


def copy_to_clipboard(text: str) -> bool:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        logger.debug("clipboard copy failed: %s", exc)
        return False
    return True
