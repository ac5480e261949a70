"""PNG and SVG output for a drawing that is already in canvas coordinates."""

from __future__ import annotations

import io
import os
from typing import NamedTuple

from PIL import Image, ImageDraw

from .color import Color
from .drawing import Drawing
from .errors import ConfigError, EmptyDrawingError, RenderIOError
from .geometry import Point, Rect


class Canvas(NamedTuple):
    width: int = 2000
    height: int = 2000

    def bounds(self) -> Rect:
        _require_canvas(self)
        # Last addressable pixel, not one past it.
        return Rect(
            Point(0.0, 0.0), Point(float(self.width - 1), float(self.height - 1))
        )


def _require_canvas(canvas: Canvas) -> None:
    if canvas.width < 1 or canvas.height < 1:
        raise ConfigError(
            f"canvas must be at least 1x1, got {canvas.width}x{canvas.height}"
        )


def _require_paths(drawing: Drawing) -> None:
    if not drawing.paths:
        raise EmptyDrawingError("nothing to render: drawing has no paths")


# -------------------------
# Raster
# -------------------------


def render_raster(
    drawing: Drawing, canvas: Canvas, *, background: Color | None = None
) -> bytes:
    """Draw each path as connected 1px segments and return PNG bytes."""
    _require_canvas(canvas)
    _require_paths(drawing)

    fill = tuple(background) if background is not None else (0, 0, 0, 0)
    img = Image.new("RGBA", (canvas.width, canvas.height), fill)
    draw = ImageDraw.Draw(img)

    for pa in drawing.paths:
        pts = [(int(p.x), int(p.y)) for p in pa.points]
        if len(pts) == 1:
            # A lone move_to leaves nothing to stroke.
            continue
        draw.line(pts, fill=tuple(pa.color), width=1)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


# -------------------------
# Vector
# -------------------------


def _fmt(x: float, precision: int) -> str:
    # Normalise -0.0 so it never produces "-0" in SVG output.
    if not x:
        x = 0.0
    s = f"{x:.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s or "0"


def render_vector(
    drawing: Drawing,
    canvas: Canvas,
    *,
    stroke_width: float = 2,
    precision: int = 3,
    title: str | None = None,
) -> str:
    """Return an SVG document with a border and one polyline per path."""
    _require_canvas(canvas)
    _require_paths(drawing)

    lines: list[str] = []
    lines.append('<?xml version="1.0" standalone="no"?>')
    lines.append(
        f'<svg width="{canvas.width}" height="{canvas.height}" '
        'xmlns="http://www.w3.org/2000/svg" version="1.1">'
    )

    if title:
        safe_title = (
            title.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
        )
        lines.append(f"  <title>{safe_title}</title>")

    lines.append(
        f'  <rect x="1" y="1" width="{canvas.width}" height="{canvas.height}" '
        'fill="none" stroke="black" stroke-width="1" />'
    )

    sw = _fmt(stroke_width, precision)
    for pa in drawing.paths:
        pts = " ".join(
            f"{_fmt(x, precision)},{_fmt(y, precision)}" for x, y in pa.points
        )
        lines.append(
            f'  <polyline fill="none" stroke="{pa.color.to_hex()}" '
            f'stroke-width="{sw}" points="{pts}" />'
        )

    lines.append("</svg>")
    return "\n".join(lines) + "\n"


# -------------------------
# Files
# -------------------------


def write_output(path: str, data: bytes | str) -> None:
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)) or ".", exist_ok=True)
        if isinstance(data, bytes):
            with open(path, "wb") as f:
                f.write(data)
        else:
            with open(path, "w", encoding="utf-8") as f:
                f.write(data)
    except OSError as e:
        raise RenderIOError(f"cannot write {path}: {e}") from e
