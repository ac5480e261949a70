"""L-system fractal generator: rewrite, turtle-interpret, normalize, render."""

from .color import Color, Palette, parse_color
from .drawing import Drawing, Path
from .errors import (
    BatchRenderError,
    ConfigError,
    EmptyDrawingError,
    ExpansionLimitError,
    LSystemError,
    RenderIOError,
    StackUnderflowError,
    UndefinedSymbolError,
    UnknownFractalError,
)
from .geometry import Point, Rect
from .grammar import expanded_length, rewrite, stream_expand
from .pipeline import build_drawing, prepare_for_canvas, render_all, render_fractal
from .presets import PRESETS, FractalSpec, find_fractal
from .render import Canvas, render_raster, render_vector
from .turtle import TurtleState, interpret

__version__ = "0.1.0"

__all__ = [
    "BatchRenderError",
    "Canvas",
    "Color",
    "ConfigError",
    "Drawing",
    "EmptyDrawingError",
    "ExpansionLimitError",
    "FractalSpec",
    "LSystemError",
    "PRESETS",
    "Palette",
    "Path",
    "Point",
    "Rect",
    "RenderIOError",
    "StackUnderflowError",
    "TurtleState",
    "UndefinedSymbolError",
    "UnknownFractalError",
    "build_drawing",
    "expanded_length",
    "find_fractal",
    "interpret",
    "parse_color",
    "prepare_for_canvas",
    "render_all",
    "render_fractal",
    "render_raster",
    "render_vector",
    "rewrite",
    "stream_expand",
]
