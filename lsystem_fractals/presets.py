"""Built-in fractal catalog.

Every non-control symbol used by a grammar has a rule, including the drawing
symbols themselves (``"F": "F"``), because the rewriter rejects symbols it
has no rule for.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .errors import UnknownFractalError


@dataclass(frozen=True)
class FractalSpec:
    name: str
    axiom: str
    rules: Mapping[str, str] = field(default_factory=dict)
    levels: int = 0
    theta: float = 0.0  # initial heading, degrees
    angle: float = 90.0  # turn increment, degrees
    one_path: bool = False

    def describe(self) -> str:
        rules = " ".join(f"{k}:{v}" for k, v in sorted(self.rules.items()))
        return (
            f"== {self.name} == Angle: {self.angle:g}, Axiom: {self.axiom}, "
            f"Rules: {rules}"
        )


PRESETS: tuple[FractalSpec, ...] = (
    FractalSpec(
        name="koch",
        axiom="F",
        rules={"F": "F+F--F+F"},
        levels=4,
        angle=60,
    ),
    FractalSpec(
        name="snowflake",
        axiom="F--F--F",
        rules={"F": "F+F--F+F"},
        levels=4,
        angle=60,
    ),
    FractalSpec(
        name="quadratic_koch_island",
        axiom="F+F+F+F",
        rules={"F": "F+F-F-FF+F+F-F"},
        levels=3,
        angle=90,
    ),
    FractalSpec(
        name="islands",
        axiom="F+F+F+F",
        rules={"F": "F+f-FF+F+FF+Ff+FF-f+FF-F-FF-Ff-FFF", "f": "ffffff"},
        levels=2,
        angle=90,
    ),
    FractalSpec(
        name="islands_one_path",
        axiom="F+F+F+F",
        rules={"F": "F+f-FF+F+FF+Ff+FF-f+FF-F-FF-Ff-FFF", "f": "ffffff"},
        levels=2,
        angle=90,
        one_path=True,
    ),
    FractalSpec(
        name="sierpinski_arrowhead",
        axiom="YF",
        rules={"X": "YF+XF+Y", "Y": "XF-YF-X", "F": "F"},
        levels=7,
        angle=60,
    ),
    FractalSpec(
        name="dragon",
        axiom="FX",
        rules={"X": "X+YF+", "Y": "-FX-Y", "F": "F"},
        levels=12,
        angle=90,
    ),
    FractalSpec(
        name="levy_c",
        axiom="F",
        rules={"F": "+F--F+"},
        levels=12,
        angle=45,
    ),
    FractalSpec(
        name="hilbert",
        axiom="A",
        rules={"A": "+BF-AFA-FB+", "B": "-AF+BFB+FA-", "F": "F"},
        levels=6,
        angle=90,
    ),
    FractalSpec(
        name="peano_gosper",
        axiom="FX",
        rules={"X": "X+YF++YF-FX--FXFX-YF+", "Y": "-FX+YFYF++YF+FX--FX-Y", "F": "F"},
        levels=4,
        angle=60,
    ),
    FractalSpec(
        name="plant",
        axiom="X",
        rules={"X": "F+[[X]-X]-F[-FX]+X", "F": "FF"},
        levels=6,
        theta=65,
        angle=25,
    ),
    FractalSpec(
        name="plant_one_path",
        axiom="X",
        rules={"X": "F+[[X]-X]-F[-FX]+X", "F": "FF"},
        levels=6,
        theta=65,
        angle=25,
        one_path=True,
    ),
    FractalSpec(
        name="bush",
        axiom="F",
        rules={"F": "FF+[+F-F-F]-[-F+F+F]"},
        levels=4,
        theta=90,
        angle=22.5,
    ),
)


def find_fractal(name: str, catalog: Iterable[FractalSpec] = PRESETS) -> FractalSpec:
    for spec in catalog:
        if spec.name == name:
            return spec
    raise UnknownFractalError(name)
