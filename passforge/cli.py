"""CLI for passforge: generate passwords, inspect the effective character pools."""

import argparse
import logging
import math
import sys

from rich import print
from rich.markup import escape
from rich.table import Table

from .charset import build_charset, symbol_quota
from .config import load_settings
from .errors import GenerationError
from .generator import generate_batch
from .logging_config import setup_logging
from .randomness import PseudoRandomSource, default_source
from .validation import validate

logger = logging.getLogger(__name__)

# argparse dest -> GenerationSettings field, for options that were given
_SETTING_FIELDS = (
    "length",
    "amount",
    "include_numbers",
    "include_lowercase",
    "include_uppercase",
    "include_symbols",
    "custom_symbols",
    "no_start_number",
    "no_start_symbol",
    "no_similar",
    "no_duplicate",
    "no_sequential",
)


def _settings_from_args(args):
    overrides = {}
    for name in _SETTING_FIELDS:
        value = getattr(args, name, None)
        if value is not None:
            overrides[name] = value
    return load_settings(args.config, **overrides)


def cmd_generate(args):
    settings = _settings_from_args(args)
    if args.seed is not None:
        logger.warning("--seed makes output reproducible; do not use these passwords for real accounts")
        rng = PseudoRandomSource(args.seed)
    else:
        rng = default_source()

    passwords = generate_batch(settings, rng)

    if args.plain:
        for pw in passwords:
            sys.stdout.write(pw + "\n")
        return 0

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", width=4)
    table.add_column("Password", overflow="fold")
    for i, pw in enumerate(passwords):
        table.add_row(f"{i + 1:02d}", escape(pw))
    print(table)
    return 0


def cmd_charset(args):
    settings = _settings_from_args(args)
    pools = build_charset(settings)
    quota = symbol_quota(settings.length, pools.symbols)

    table = Table(show_header=False)
    table.add_column("Pool", style="bold")
    table.add_column("Characters", overflow="fold")
    table.add_row("Charset", f"{escape(pools.charset)} ({len(pools.charset)})")
    table.add_row("First character", f"{escape(pools.first_char_pool)} ({len(pools.first_char_pool)})")
    table.add_row("Symbols", escape(pools.symbols) or "-")
    table.add_row("Symbol quota", "unlimited" if math.isinf(quota) else str(quota))
    print(table)

    # surfaces the same error generate would raise
    validate(settings.length, pools.charset, pools.first_char_pool, settings.no_duplicate)
    print("[green]Settings are feasible.[/green]")
    return 0


def _add_toggle(p, dest, on_flag, off_flag, on_help, off_help):
    # unset (None) keeps the config file value
    p.add_argument(on_flag, dest=dest, action="store_const", const=True, help=on_help)
    p.add_argument(off_flag, dest=dest, action="store_const", const=False, help=off_help)


def _add_setting_options(p):
    p.add_argument("--config", "-c", type=str, help="Path to a JSON settings file")
    p.add_argument("--length", "-l", type=int, help="Password length")
    p.add_argument("--amount", "-n", type=int, help="How many passwords to generate")
    _add_toggle(p, "include_numbers", "--numbers", "--no-numbers", "Enable digits", "Disable digits")
    _add_toggle(p, "include_lowercase", "--lower", "--no-lower", "Enable lowercase", "Disable lowercase")
    _add_toggle(p, "include_uppercase", "--upper", "--no-upper", "Enable uppercase", "Disable uppercase")
    _add_toggle(p, "include_symbols", "--symbols", "--no-symbols", "Enable symbols", "Disable symbols")
    p.add_argument("--custom-symbols", type=str, help="Symbols to use instead of the default set")
    _add_toggle(p, "no_start_number", "--no-start-number", "--start-number",
                "Never start with a digit", "Allow a leading digit")
    _add_toggle(p, "no_start_symbol", "--no-start-symbol", "--start-symbol",
                "Never start with a symbol", "Allow a leading symbol")
    _add_toggle(p, "no_similar", "--no-similar", "--similar",
                "Exclude i, I, l, 1, o, O, 0", "Allow look-alike characters")
    _add_toggle(p, "no_duplicate", "--no-duplicate", "--duplicate",
                "No repeated characters", "Allow repeated characters")
    _add_toggle(p, "no_sequential", "--no-sequential", "--sequential",
                "No neighbouring character codes", "Allow neighbouring character codes")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")


def build_parser():
    parser = argparse.ArgumentParser(prog="passforge")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    _add_setting_options(gen)
    gen.add_argument("--seed", type=int, help="Seed a reproducible, non-cryptographic source")
    gen.add_argument("--plain", action="store_true", help="One password per line, no table")
    gen.set_defaults(func=cmd_generate)

    cs = sub.add_parser("charset", help="Show the character pools the options produce")
    _add_setting_options(cs)
    cs.set_defaults(func=cmd_charset)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return args.func(args)
    except GenerationError as e:
        print(f"[red]{escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
