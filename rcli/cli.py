"""CLI for rcli — genpass (random passwords with strength feedback) and csv (convert to json/yaml/toml)."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import load_config
from .csv_convert import OutputFormat, process_csv
from .errors import RcliError
from .evaluator import evaluate_strength, render_report
from .generator import CompositionConfig, generate_many

# passwords go to stdout; everything else goes to stderr
out = Console(soft_wrap=True, highlight=False, emoji=False)
err = Console(stderr=True)

def cmd_genpass(args):
    config = CompositionConfig.from_flags(
        length=args.length,
        upper=not args.no_upper,
        lower=not args.no_lower,
        number=not args.no_number,
        symbol=not args.no_symbol,
    )
    passwords = generate_many(config, copies=args.copies)
    for i, pw in enumerate(passwords):
        out.print(pw, markup=False)
        if args.copies > 1:
            err.print(f"[bold]Password #{i+1}[/bold]")
        render_report(evaluate_strength(pw), err)

def cmd_csv(args):
    fmt = OutputFormat.parse(args.format)
    output = args.output or f"output.{fmt.value}"
    count = process_csv(args.input, output, fmt, delimiter=args.delimiter, header=args.header)
    err.print(f"[green]Wrote {count} records to[/green] {escape(output)}")

def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err, show_path=False)],
        force=True,
    )

def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n

def build_parser(cfg=None) -> argparse.ArgumentParser:
    cfg = cfg or load_config()
    parser = argparse.ArgumentParser(prog="rcli")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gp = sub.add_parser("genpass", help="Generate random passwords")
    gp.add_argument("-l", "--length", type=int, default=cfg["length"], help="Password length (1-128)")
    gp.add_argument("--no-upper", action="store_true", default=not cfg["uppercase"], help="Disable uppercase")
    gp.add_argument("--no-lower", action="store_true", default=not cfg["lowercase"], help="Disable lowercase")
    gp.add_argument("--no-number", action="store_true", default=not cfg["number"], help="Disable digits")
    gp.add_argument("--no-symbol", action="store_true", default=not cfg["symbol"], help="Disable symbols")
    gp.add_argument("--copies", type=_positive_int, default=1, help="How many passwords to generate")
    gp.set_defaults(func=cmd_genpass)

    cv = sub.add_parser("csv", help="Convert a CSV file to json, yaml or toml")
    cv.add_argument("-i", "--input", required=True, help="Input CSV file")
    cv.add_argument("-o", "--output", help="Output file (default: output.<format>)")
    cv.add_argument("--format", default=cfg["csv_format"], choices=[f.value for f in OutputFormat], help="Output format")
    cv.add_argument("-d", "--delimiter", default=cfg["csv_delimiter"], help="Field delimiter")
    cv.add_argument("--no-header", dest="header", action="store_false", help="First row is data, not a header")
    cv.set_defaults(func=cmd_csv)

    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)
    try:
        return args.func(args) or 0
    except RcliError as e:
        err.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        return 1

if __name__ == "__main__":
    sys.exit(main())
