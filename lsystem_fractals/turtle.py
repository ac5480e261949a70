"""Turtle interpretation of an expanded L-system string.

Alphabet (case-sensitive, everything else is ignored):

  F  forward one step, drawing
  f  forward one step without drawing
  -  turn by -angle
  +  turn by +angle
  [  push (position, heading)
  ]  pop (position, heading)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .color import Color
from .drawing import Drawing
from .errors import StackUnderflowError
from .geometry import Point, point_from_theta

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurtleState:
    position: Point
    heading_deg: float


def interpret(
    symbols: Iterable[str],
    start_heading: float,
    turn_angle: float,
    color: Color,
    single_path: bool,
    *,
    step: float = 1.0,
) -> Drawing:
    """Walk symbols and return the pen-down runs as a Drawing.

    With single_path=True, ``f`` and ``]`` move the pen without opening a new
    path, so the whole result is one path that contains silent jumps.
    """
    p = Point(0.0, 0.0)
    h = start_heading

    drw = Drawing()
    drw.move_to(p, color)

    stack: list[TurtleState] = []

    for sym in symbols:
        if sym == "F":
            p = point_from_theta(p, h, step)
            drw.line_to(p)
        elif sym == "f":
            p = point_from_theta(p, h, step)
            if not single_path:
                drw.move_to(p, color)
        elif sym == "-":
            h -= turn_angle
        elif sym == "+":
            h += turn_angle
        elif sym == "[":
            stack.append(TurtleState(p, h))
        elif sym == "]":
            if not stack:
                raise StackUnderflowError("']' encountered with empty stack")
            st = stack.pop()
            p, h = st.position, st.heading_deg
            # New path at the restored point so the branch tip is not joined
            # to the trunk.
            if not single_path:
                drw.move_to(p, color)

    if stack:
        logger.debug("%d branch(es) left open at end of input", len(stack))
    logger.debug("interpreted %d paths, %d points", drw.path_count, drw.point_count)
    return drw
