from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_TIP_PERCENT = Decimal("15")

_TRUE_WORDS = {"y", "yes", "true", "1", "on"}
_FALSE_WORDS = {"n", "no", "false", "0", "off"}


def parse_decimal(text: Optional[str], *, default: Decimal) -> Decimal:
    """Parse ``text`` as a plain decimal number, or return ``default``.

    Empty, unparseable and non-finite input (``NaN``, ``Infinity``) all fall
    back silently; this never raises.
    """
    s = (text or "").strip()
    if not s:
        return default
    try:
        value = Decimal(s)
    except InvalidOperation:
        logger.debug("unparseable number %r, using %s", text, default)
        return default
    if not value.is_finite():
        logger.debug("non-finite number %r, using %s", text, default)
        return default
    return value


def parse_amount(text: Optional[str], *, default: Decimal = Decimal("0")) -> Decimal:
    return parse_decimal(text, default=default)


def parse_tip_percent(
    text: Optional[str],
    *,
    default: Decimal = DEFAULT_TIP_PERCENT,
) -> Decimal:
    return parse_decimal(text, default=default)


def parse_round_up(text: Optional[str], *, default: bool = False) -> bool:
    s = (text or "").strip().lower()
    if s in _TRUE_WORDS:
        return True
    if s in _FALSE_WORDS:
        return False
    if s:
        logger.debug("unrecognised round-up flag %r, using %s", text, default)
    return default
