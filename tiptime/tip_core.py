from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_CEILING
from typing import Union

from .formats import HUNDRED, MoneyFormatter
from .parsing import parse_round_up

Number = Union[Decimal, int, float, str]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class TipInput:
    """The three values behind one tip calculation.

    Ints, floats and numeric strings are coerced to ``Decimal`` on
    construction; floats go through ``str`` so ``33.33`` stays ``33.33``.
    A text ``round_up`` such as ``"no"`` is read as a yes/no flag.
    """

    amount: Decimal
    tip_percent: Decimal
    round_up: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _to_decimal(self.amount))
        object.__setattr__(self, "tip_percent", _to_decimal(self.tip_percent))
        round_up = self.round_up
        if isinstance(round_up, str):
            round_up = parse_round_up(round_up)
        object.__setattr__(self, "round_up", bool(round_up))


def compute_tip(inputs: TipInput) -> Decimal:
    """Return the unformatted tip, ceiled to a whole unit when ``round_up``."""
    tip = inputs.tip_percent / HUNDRED * inputs.amount
    if inputs.round_up:
        tip = tip.to_integral_value(rounding=ROUND_CEILING)
    return tip


def calculate_tip(inputs: TipInput, *, formatter: MoneyFormatter) -> str:
    return formatter(compute_tip(inputs))
