from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, List, Optional

from .form import TipForm
from .formats import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    MoneyFormatter,
    copy_to_clipboard,
    fmt_percent,
    locale_formatter,
    quantize_amount,
)
from .parsing import DEFAULT_TIP_PERCENT, parse_amount, parse_round_up, parse_tip_percent
from .tip_core import TipInput, calculate_tip, compute_tip

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tipconfig.json"
ENV_KEYS = ("TIP_DEFAULT_PERCENT", "TIP_CURRENCY", "TIP_LOCALE")


@dataclass
class AppConfig:
    default_tip_percent: Decimal = DEFAULT_TIP_PERCENT
    currency: str = DEFAULT_CURRENCY
    locale: str = DEFAULT_LOCALE


def _format_decimal(value: Decimal) -> str:
    s = format(value, "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s or "0"


def _parse_percent_setting(raw: object) -> Decimal:
    value = Decimal(str(raw).strip().replace("%", ""))
    if not value.is_finite() or value < 0:
        raise ValueError(f"default tip percent must be a non-negative number, got {raw!r}")
    return value


def _apply_settings(cfg: AppConfig, settings: Dict[str, str], source: object) -> None:
    for key, raw in settings.items():
        try:
            if key == "TIP_DEFAULT_PERCENT":
                cfg.default_tip_percent = _parse_percent_setting(raw)
            elif key == "TIP_CURRENCY" and raw.strip():
                cfg.currency = raw.strip().upper()
            elif key == "TIP_LOCALE" and raw.strip():
                cfg.locale = raw.strip()
        except (InvalidOperation, ValueError) as exc:
            logger.warning("Ignoring %s from %s: %s", key, source, exc)


def _read_json_config(path: Path) -> Dict[str, str]:
    data = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise ValueError("config file must contain a JSON object")
    mapping = {
        "default_tip_percent": "TIP_DEFAULT_PERCENT",
        "currency": "TIP_CURRENCY",
        "locale": "TIP_LOCALE",
    }
    return {env_key: str(data[key]) for key, env_key in mapping.items() if key in data}


def _read_env_file(path: Path) -> Dict[str, str]:
    settings: Dict[str, str] = {}
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        k, v = line.split("=", 1)
        k = k.strip().upper()
        if k in ENV_KEYS:
            settings[k] = v.strip().strip("\"'")
    return settings


def load_config(path: Optional[str] = None) -> AppConfig:
    """Build the config from defaults, a JSON file, a .env file and the environment.

    Later sources override earlier ones. Only the first existing JSON file and
    the first existing .env file are read. Unreadable files and bad values are
    logged and skipped.
    """
    cfg = AppConfig()

    json_candidates: List[Path] = []
    if path:
        json_candidates.append(Path(path).expanduser())
    json_candidates.append(Path.cwd() / CONFIG_FILENAME)
    json_candidates.append(Path(__file__).with_name(CONFIG_FILENAME))
    for p in json_candidates:
        if not p.is_file():
            continue
        try:
            _apply_settings(cfg, _read_json_config(p), p)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read config %s: %s", p, exc)
        else:
            logger.debug("Loaded config from %s", p)
        break

    env_candidates: List[Path] = [Path.cwd() / ".env", Path(__file__).with_name(".env")]
    for p in env_candidates:
        if not p.is_file():
            continue
        try:
            _apply_settings(cfg, _read_env_file(p), p)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", p, exc)
        break

    _apply_settings(
        cfg,
        {k: os.environ[k] for k in ENV_KEYS if k in os.environ},
        "environment",
    )
    return cfg


def yes_no(prompt: str, *, default_yes: bool = True) -> bool:
    suffix = "[Y/n]" if default_yes else "[y/N]"
    while True:
        ans = input(f"{prompt} {suffix} ").strip().lower()
        if not ans:
            return default_yes
        if ans in {"y", "yes"}:
            return True
        if ans in {"n", "no"}:
            return False
        print("Please answer 'y' or 'n'.")


def format_result(tip: str) -> str:
    return f"Tip Amount: {tip}"


def result_to_dict(inputs: TipInput, formatted: str, currency: str) -> dict:
    return {
        "amount": _format_decimal(inputs.amount),
        "tip_percent": fmt_percent(inputs.tip_percent),
        "round_up": inputs.round_up,
        "currency": currency,
        "tip": format(quantize_amount(compute_tip(inputs), currency), "f"),
        "formatted": formatted,
    }


def run_interactive(config: AppConfig, *, formatter: MoneyFormatter) -> None:
    print("--- Calculate Tip ---")
    form = TipForm(default_tip_percent=config.default_tip_percent, formatter=formatter)
    default_str = _format_decimal(config.default_tip_percent)
    while True:
        form.on_amount_changed(input("Bill Amount: "))
        form.on_tip_changed(input(f"How was the service? Tip % [Enter={default_str}%]: "))
        form.on_round_up_changed(yes_no("Round up tip?", default_yes=form.round_up))
        print(format_result(form.tip_amount))

        if not yes_no("Calculate another tip?", default_yes=False):
            break


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tip calculator: tip = percent of the bill, optionally rounded up to a whole unit."
    )
    parser.add_argument("--amount", help="Bill amount, e.g. 42.50. Unparseable input counts as 0")
    parser.add_argument("--tip", default=None, help="Tip percentage, e.g. 18. Default comes from config")
    parser.add_argument("--round-up", nargs="?", const="yes", default=None, metavar="yes|no", help="Round the tip up to a whole currency unit")
    parser.add_argument("--currency", default=None, help="ISO currency code for display, e.g. USD or EUR. Default comes from config")
    parser.add_argument("--locale", default=None, help="Locale for formatting, e.g. en_US or de_DE. Default comes from config")
    parser.add_argument("--config", help="Path to a JSON config with default_tip_percent, currency and locale")
    parser.add_argument("--json", action="store_true", help="Output the result as JSON")
    parser.add_argument("--copy", action="store_true", help="Copy the output to clipboard")
    parser.add_argument("--interactive", action="store_true", help="Force interactive mode regardless of provided flags.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    return parser


def run_cli(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = load_config(args.config)
    currency = args.currency or config.currency
    locale_value = args.locale or config.locale
    try:
        formatter = locale_formatter(currency, locale_value)
    except ValueError as exc:
        parser.error(str(exc))

    if args.interactive or args.amount is None:
        try:
            run_interactive(config, formatter=formatter)
            return 0
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            return 0

    inputs = TipInput(
        amount=parse_amount(args.amount),
        tip_percent=parse_tip_percent(args.tip, default=config.default_tip_percent),
        round_up=parse_round_up(args.round_up),
    )
    formatted = calculate_tip(inputs, formatter=formatter)
    if args.json:
        out = json.dumps(result_to_dict(inputs, formatted, currency.upper()), ensure_ascii=False)
    else:
        out = format_result(formatted)
    print(out)
    if args.copy:
        if not copy_to_clipboard(out):
            print("(Could not copy to clipboard on this system)", file=sys.stderr)
    return 0
