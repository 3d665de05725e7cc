from .form import TipForm
from .formats import (
    CENT,
    HUNDRED,
    PERCENT_STEP,
    MoneyFormatter,
    fmt_percent,
    locale_formatter,
    to_cents,
)
from .parsing import DEFAULT_TIP_PERCENT, parse_amount, parse_decimal, parse_round_up, parse_tip_percent
from .tip_core import TipInput, calculate_tip, compute_tip

__all__ = [
    "TipInput",
    "calculate_tip",
    "compute_tip",
    "TipForm",
    "parse_decimal",
    "parse_amount",
    "parse_tip_percent",
    "parse_round_up",
    "DEFAULT_TIP_PERCENT",
    "CENT",
    "HUNDRED",
    "PERCENT_STEP",
    "MoneyFormatter",
    "to_cents",
    "locale_formatter",
    "fmt_percent",
]
