"""Command line interface.

Run:
  lsystem-fractals list
  lsystem-fractals render koch --both --size 800 800
  lsystem-fractals all --out-dir images
  lsystem-fractals validate example/plants.json
  lsystem-fractals expand dragon --levels 3
  lsystem-fractals --help
"""

from __future__ import annotations

import argparse
import dataclasses
import itertools
import logging
import sys

from .color import Color, Palette, parse_color
from .config import load_catalog
from .errors import LSystemError
from .grammar import expanded_length, rewrite, stream_expand
from .logging_config import setup_logging
from .pipeline import BATCH_CANVAS, render_all, render_fractal
from .presets import PRESETS, FractalSpec, find_fractal
from .render import Canvas
from .turtle import interpret

HELP_EPILOG = r"""
CATALOG JSON SYNTAX (--catalog, validate)

A catalog file holds one fractal object or a list of them. Each object:

  name: string (required)
      Used for lookup and as the output file name (<out-dir>/<name>.svg|png).

  axiom: string (required)
      The initial word.

  rules: object mapping single-character string -> string
      Production rules. Every symbol other than - + [ ] and whitespace must
      have a rule; use "F": "F" to keep a symbol unchanged.

  levels: integer >= 0 (default 0)
      Number of rewriting passes.

  theta: number degrees (default 0)
      Initial heading; 0 = +X, 90 = +Y (up in the rendered image).

  angle: number degrees (default 90)
      Turn increment for + and -.

  one_path: boolean (default false)
      Keep the whole fractal in a single path: f and ] move the pen without
      starting a new path.

Turtle alphabet

  F  forward one unit, drawing
  f  forward one unit without drawing (starts a new path unless one_path)
  +  turn by +angle
  -  turn by -angle
  [  push position and heading
  ]  pop position and heading (starts a new path unless one_path)
  any other symbol is ignored while drawing

Example (Koch curve):

    {
      "name": "koch",
      "axiom": "F",
      "rules": {"F": "F+F--F+F"},
      "levels": 4,
      "angle": 60
    }
"""

_VALIDATE_SYMBOL_LIMIT = 10_000


def _color_arg(text: str) -> Color:
    try:
        return parse_color(text)
    except LSystemError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _size_arg(text: str) -> int:
    try:
        n = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid size: {text!r}") from e
    if n < 1:
        raise argparse.ArgumentTypeError(f"size must be >= 1, got {n}")
    return n


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lsystem-fractals",
        description="Render L-system fractals to PNG and SVG.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_EPILOG,
    )
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress to stderr."
    )
    p.add_argument("--log-file", default=None, help="Also write the log here.")

    sub = p.add_subparsers(dest="cmd", required=True)

    # Shared by render/all/expand
    catalog_parent = argparse.ArgumentParser(add_help=False)
    catalog_parent.add_argument(
        "--catalog",
        default=None,
        help="JSON catalog to use instead of the built-in presets.",
    )

    output_parent = argparse.ArgumentParser(add_help=False)
    output_parent.add_argument(
        "--size",
        nargs=2,
        type=_size_arg,
        metavar=("W", "H"),
        default=None,
        help="Canvas size in pixels.",
    )
    output_parent.add_argument(
        "--color",
        type=_color_arg,
        default=Palette.BLACK.value,
        help=(
            "Stroke color: "
            + ", ".join(m.lower() for m in Palette.__members__)
            + " or #rrggbb[aa]. Default: black."
        ),
    )
    output_parent.add_argument(
        "--single-path",
        action="store_true",
        help="Force one continuous path regardless of the fractal's one_path flag.",
    )
    output_parent.add_argument(
        "--out-dir", default="images", help="Output directory. Default: images."
    )

    sub.add_parser(
        "list",
        help="List available fractals.",
        parents=[catalog_parent],
    )

    pr = sub.add_parser(
        "render",
        help="Render one fractal.",
        parents=[catalog_parent, output_parent],
    )
    pr.add_argument("name", help="Fractal name (see 'list').")
    fmt = pr.add_mutually_exclusive_group()
    fmt.add_argument(
        "--vector", dest="fmt", action="store_const", const="svg", help="SVG only."
    )
    fmt.add_argument(
        "--raster", dest="fmt", action="store_const", const="png", help="PNG only."
    )
    fmt.add_argument(
        "--both", dest="fmt", action="store_const", const="both", help="SVG and PNG."
    )
    pr.set_defaults(fmt="svg")
    pr.add_argument(
        "--levels", type=int, default=None, help="Override the number of levels."
    )
    pr.add_argument(
        "--max-symbols",
        type=int,
        default=None,
        help="Refuse to render if the expansion would be longer than this.",
    )

    sub.add_parser(
        "all",
        help="Render every fractal in the catalog as SVG and PNG.",
        parents=[catalog_parent, output_parent],
    )

    pv = sub.add_parser(
        "validate",
        help="Validate a JSON catalog and print a brief summary.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    pv.add_argument("catalog", help="Path to the JSON catalog.")

    pe = sub.add_parser(
        "expand",
        help="Print the expanded symbol string of a fractal.",
        parents=[catalog_parent],
    )
    pe.add_argument("name", help="Fractal name (see 'list').")
    pe.add_argument("--levels", type=int, default=None)
    pe.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Fail instead of printing expansions longer than this.",
    )

    return p


# -------------------------
# Commands
# -------------------------


def _catalog(path: str | None) -> tuple[FractalSpec, ...]:
    return load_catalog(path) if path else PRESETS


def _with_levels(spec: FractalSpec, levels: int | None) -> FractalSpec:
    if levels is None:
        return spec
    if levels < 0:
        raise ValueError("--levels must be >= 0")
    return dataclasses.replace(spec, levels=levels)


def cmd_list(catalog: tuple[FractalSpec, ...]) -> None:
    for spec in catalog:
        flag = " (one path)" if spec.one_path else ""
        print(f"{spec.name}: levels={spec.levels} angle={spec.angle:g}{flag}")


def cmd_render(args: argparse.Namespace) -> None:
    spec = _with_levels(find_fractal(args.name, _catalog(args.catalog)), args.levels)
    canvas = Canvas(*args.size) if args.size else Canvas()
    single_path = True if args.single_path else None

    variants = {"svg": (True,), "png": (False,), "both": (True, False)}[args.fmt]
    for vector in variants:
        line = render_fractal(
            spec,
            args.color,
            canvas,
            vector,
            out_dir=args.out_dir,
            single_path=single_path,
            max_symbols=args.max_symbols,
        )
        print(line)


def cmd_all(args: argparse.Namespace) -> None:
    canvas = Canvas(*args.size) if args.size else BATCH_CANVAS
    render_all(
        _catalog(args.catalog),
        sys.stdout,
        canvas=canvas,
        color=args.color,
        out_dir=args.out_dir,
        single_path=True if args.single_path else None,
    )


def cmd_validate(catalog_path: str) -> None:
    catalog = load_catalog(catalog_path)
    print(f"fractals: {len(catalog)}")

    for spec in catalog:
        n = expanded_length(spec.axiom, spec.rules, spec.levels)
        # Interpret a bounded prefix to catch ']' underflow early on.
        sample = list(
            itertools.islice(
                stream_expand(spec.axiom, spec.rules, spec.levels),
                _VALIDATE_SYMBOL_LIMIT,
            )
        )
        drw = interpret(
            sample, spec.theta, spec.angle, Palette.BLACK.value, spec.one_path
        )
        truncated = n > len(sample)
        paths = f"{drw.path_count}+" if truncated else str(drw.path_count)
        print(f"{spec.name}: symbols={n} levels={spec.levels} paths={paths}")
        if truncated:
            print(
                f"  warning: expansion exceeds {_VALIDATE_SYMBOL_LIMIT} symbols; "
                "path count is based on the first portion only"
            )


def cmd_expand(args: argparse.Namespace) -> None:
    spec = _with_levels(find_fractal(args.name, _catalog(args.catalog)), args.levels)
    print(rewrite(spec.axiom, spec.rules, spec.levels, limit=args.limit))


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        if args.cmd == "list":
            cmd_list(_catalog(args.catalog))
        elif args.cmd == "render":
            cmd_render(args)
        elif args.cmd == "all":
            cmd_all(args)
        elif args.cmd == "validate":
            cmd_validate(args.catalog)
        elif args.cmd == "expand":
            cmd_expand(args)
        else:
            raise AssertionError("unreachable")
    except LSystemError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Invalid argument: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
