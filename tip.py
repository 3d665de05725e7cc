from __future__ import annotations

# ruff: noqa: E402  # allow docstring before imports

"""Public API and CLI entrypoint for the tip calculator.

Re-exports the main API from `tiptime` so that

    import tip as tipmod

gives one flat namespace. Also provides the `python tip.py` entry.
"""

import importlib.metadata as importlib_metadata
import sys

from tiptime import (
    CENT,
    DEFAULT_TIP_PERCENT,
    HUNDRED,
    PERCENT_STEP,
    MoneyFormatter,
    TipForm,
    TipInput,
    calculate_tip,
    compute_tip,
    fmt_percent,
    locale_formatter,
    parse_amount,
    parse_decimal,
    parse_round_up,
    parse_tip_percent,
    to_cents,
)
from tiptime.cli import run_cli

try:
    _distribution_version = importlib_metadata.version("tip-time")
except importlib_metadata.PackageNotFoundError:
    __version__ = "0+unknown"
else:
    __version__ = _distribution_version or "0+unknown"

__all__ = [
    "__version__",
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
    "run_cli",
]

if __name__ == "__main__":
    sys.exit(run_cli())
