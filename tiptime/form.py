from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from .formats import MoneyFormatter, locale_formatter
from .parsing import DEFAULT_TIP_PERCENT, parse_amount, parse_tip_percent
from .tip_core import TipInput, calculate_tip


@dataclass
class TipForm:
    """Raw state of the tip screen: two text fields and the round-up switch.

    Nothing is cached; every read of ``tip_amount`` coerces the current text
    and recalculates.
    """

    amount_input: str = ""
    tip_input: str = ""
    round_up: bool = False
    default_tip_percent: Decimal = DEFAULT_TIP_PERCENT
    formatter: MoneyFormatter = field(default_factory=locale_formatter)

    def on_amount_changed(self, text: str) -> None:
        self.amount_input = text

    def on_tip_changed(self, text: str) -> None:
        self.tip_input = text

    def on_round_up_changed(self, checked: bool) -> None:
        self.round_up = checked

    @property
    def inputs(self) -> TipInput:
        return TipInput(
            amount=parse_amount(self.amount_input),
            tip_percent=parse_tip_percent(self.tip_input, default=self.default_tip_percent),
            round_up=self.round_up,
        )

    @property
    def tip_amount(self) -> str:
        return calculate_tip(self.inputs, formatter=self.formatter)
