"""rewrite -> interpret -> normalize -> render, for one fractal or a catalog."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from typing import TextIO

from .color import Color, Palette
from .drawing import Drawing
from .errors import BatchRenderError, ExpansionLimitError, LSystemError
from .geometry import Point
from .grammar import expanded_length, rewrite
from .presets import FractalSpec
from .render import Canvas, render_raster, render_vector, write_output
from .turtle import interpret

logger = logging.getLogger(__name__)

MARGIN = Point(0.1, 0.1)
BATCH_CANVAS = Canvas(1024, 1024)


def build_drawing(
    spec: FractalSpec,
    color: Color,
    *,
    single_path: bool | None = None,
    max_symbols: int | None = None,
) -> Drawing:
    """Expand and interpret spec. single_path=None uses spec.one_path."""
    if max_symbols is not None:
        n = expanded_length(spec.axiom, spec.rules, spec.levels)
        if n > max_symbols:
            raise ExpansionLimitError(max_symbols)

    symbols = rewrite(spec.axiom, spec.rules, spec.levels)
    logger.info("%s: %d symbols after %d levels", spec.name, len(symbols), spec.levels)

    one_path = spec.one_path if single_path is None else single_path
    return interpret(symbols, spec.theta, spec.angle, color, one_path)


def prepare_for_canvas(drawing: Drawing, canvas: Canvas) -> None:
    """Flip to raster orientation and fit inside canvas with a 10% margin."""
    drawing.flip(vertical=True)
    drawing.center_with_margin(canvas.bounds(), MARGIN)


def render_fractal(
    spec: FractalSpec,
    color: Color,
    canvas: Canvas = Canvas(),
    vector: bool = True,
    *,
    out_dir: str = "images",
    single_path: bool | None = None,
    max_symbols: int | None = None,
) -> str:
    """Render spec to <out_dir>/<name>.svg (or .png); return a summary line."""
    drawing = build_drawing(
        spec, color, single_path=single_path, max_symbols=max_symbols
    )
    prepare_for_canvas(drawing, canvas)

    data: bytes | str
    if vector:
        path = os.path.join(out_dir, f"{spec.name}.svg")
        data = render_vector(drawing, canvas, title=spec.name)
    else:
        path = os.path.join(out_dir, f"{spec.name}.png")
        data = render_raster(drawing, canvas)

    write_output(path, data)
    logger.info("wrote %s", path)
    return f"{path}: {drawing.path_count} paths"


def render_all(
    catalog: Iterable[FractalSpec],
    out: TextIO,
    *,
    canvas: Canvas = BATCH_CANVAS,
    color: Color = Palette.BLACK.value,
    out_dir: str = "images",
    single_path: bool | None = None,
) -> int:
    """Render every spec as SVG and PNG, writing one line per file to out.

    Stops at the first failure and raises BatchRenderError naming the fractal.
    Returns the number of files written.
    """
    written = 0
    for spec in catalog:
        print(spec.describe(), file=out)
        for vector in (True, False):
            try:
                line = render_fractal(
                    spec,
                    color,
                    canvas,
                    vector,
                    out_dir=out_dir,
                    single_path=single_path,
                )
            except (LSystemError, ValueError) as e:
                logger.error("batch stopped at %s: %s", spec.name, e)
                raise BatchRenderError(spec.name, e) from e
            print(line, file=out)
            written += 1
    return written
