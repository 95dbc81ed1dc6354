"""Command line entry point: audit an employee CSV and print the findings."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from orgaudit import hr
from orgaudit.config import resolve_config
from orgaudit.errors import OrgAuditError
from orgaudit.reporting import render_report

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orgaudit",
        description="Report manager salary band violations and overly long reporting lines",
    )
    parser.add_argument("file", type=Path, help="Employee CSV export")
    parser.add_argument(
        "--format",
        choices=["text", "table", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument("--config", type=Path, help="YAML or pyproject.toml with audit settings")
    parser.add_argument("--validate", action="store_true", help="Only validate the input, don't report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.validate:
        match hr.validate(args.file):
            case {"status": "ok", "rows_available": rows}:
                console.print(f"[green]OK[/green]: {rows} employees")
                return 0
            case {"status": "error", "message": msg}:
                err_console.print(f"[red]Invalid input:[/red] {msg}", markup=True, highlight=False)
                return 2

    try:
        config = resolve_config(args.config)
        findings = hr.run(args.file, config)
    except (OrgAuditError, FileNotFoundError, ValueError) as exc:
        print(f"Error processing data: {exc}", file=sys.stderr)
        return 2

    output = render_report(findings, args.format)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
