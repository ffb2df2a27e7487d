"""Command line entry point for querying hex geometry."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Iterable, Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import HexConfig
from .errors import HexError, HexParseError
from .frames import hexes_to_frame
from .functions import HexFunctions
from .hex import Hex


def _parse_hex(text: str) -> Hex:
    raw = text.strip()
    if not raw.startswith(("[", "{")):
        raw = f"[{raw}]"
    try:
        return Hex.parse(raw)
    except HexParseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="hexcube",
        description="Cube-coordinate queries on a hexagonal grid.",
        epilog="Hexes are written as [q,r] or q,r; quote them and use the bracket "
        "form when q is negative.",
    )
    ap.add_argument("--config", type=Path, help="JSON file with HexConfig settings")
    ap.add_argument(
        "--format", choices=("table", "csv"), default="table", help="Output format"
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("neighbors", "The six edge-adjacent hexes"),
        ("diagonals", "The six vertex-adjacent hexes"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("hex", type=_parse_hex)

    for name, help_text in (
        ("distance", "Hex distance between two hexes"),
        ("line", "Hexes on the line between two hexes"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("start", type=_parse_hex)
        cmd.add_argument("end", type=_parse_hex)

    for name, metavar, help_text in (
        ("range", "dist", "Hexes within a distance"),
        ("ring", "radius", "Hexes at exactly a radius, in perimeter order"),
        ("spiral", "radius", "Rings 0..radius, innermost first"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("hex", type=_parse_hex)
        cmd.add_argument("radius", type=int, metavar=metavar)

    return ap


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config(path: Path | None) -> HexConfig:
    if path is None:
        return HexConfig()
    return HexConfig.from_json(path.read_text(encoding="utf-8"))


def _query(functions: HexFunctions, args: argparse.Namespace) -> Iterable[Hex]:
    if args.command == "neighbors":
        return functions.neighbors(args.hex)
    if args.command == "diagonals":
        return functions.diagonals(args.hex)
    if args.command == "line":
        return functions.linedraw(args.start, args.end)
    if args.command == "range":
        return functions.hexes_in_range(args.hex, args.radius)
    if args.command == "ring":
        return functions.ring_path(args.hex, args.radius)
    if args.command == "spiral":
        return functions.spiral_path(args.hex, args.radius)
    raise ValueError(f"Unknown command {args.command!r}")


def _render_table(console: Console, title: str, hexes: Iterable[Hex]) -> None:
    frame = hexes_to_frame(hexes, include_s=True)
    table = Table(title=title)
    for column in frame.columns:
        table.add_column(column, justify="right")
    for row in frame.iter_rows():
        table.add_row(*(str(value) for value in row))
    console.print(table)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit status."""

    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    console = Console()
    errors = Console(stderr=True)

    try:
        functions = HexFunctions(_load_config(args.config))
        if args.command == "distance":
            console.print(str(functions.hex_distance(args.start, args.end)), highlight=False)
            return 0
        hexes = _query(functions, args)
        if args.format == "csv":
            sys.stdout.write(hexes_to_frame(hexes, include_s=True).write_csv())
        else:
            _render_table(console, args.command, hexes)
    except (HexError, ValidationError, OSError) as exc:
        errors.print(f"error: {exc}", markup=False, highlight=False)
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
