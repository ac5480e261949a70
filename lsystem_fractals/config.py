"""Loading fractal catalogs from JSON.

A catalog file holds either one fractal object or a list of them:

    {
      "name": "koch",
      "axiom": "F",
      "rules": {"F": "F+F--F+F"},
      "levels": 4,
      "theta": 0,
      "angle": 60,
      "one_path": false
    }
"""

from __future__ import annotations

import json
import math
from typing import Any, cast

from .errors import ConfigError
from .presets import FractalSpec

# -------------------------
# Validation helpers
# -------------------------


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigError(msg)


def _as_float(x: Any, path: str) -> float:
    _require(
        isinstance(x, (int, float)) and not isinstance(x, bool),
        f"{path} must be a number",
    )
    _require(math.isfinite(x), f"{path} must be a finite number")
    return float(x)


def _as_int(x: Any, path: str) -> int:
    _require(
        isinstance(x, int) and not isinstance(x, bool), f"{path} must be an integer"
    )
    return int(x)


def _as_str(x: Any, path: str) -> str:
    _require(isinstance(x, str), f"{path} must be a string")
    return cast(str, x)


def _as_bool(x: Any, path: str) -> bool:
    _require(isinstance(x, bool), f"{path} must be a boolean")
    return cast(bool, x)


def _as_dict(x: Any, path: str) -> dict[str, Any]:
    _require(isinstance(x, dict), f"{path} must be an object")
    return cast(dict[str, Any], x)


# -------------------------
# Parsing
# -------------------------


def parse_fractal_spec(obj: Any, path: str = "root") -> FractalSpec:
    obj = _as_dict(obj, path)

    name = _as_str(obj.get("name"), f"{path}.name")
    _require(len(name) > 0, f"{path}.name must be non-empty")
    axiom = _as_str(obj.get("axiom", ""), f"{path}.axiom")
    _require(len(axiom) > 0, f"{path}.axiom must be non-empty")

    levels = _as_int(obj.get("levels", 0), f"{path}.levels")
    _require(levels >= 0, f"{path}.levels must be >= 0")

    rules_obj = _as_dict(obj.get("rules", {}), f"{path}.rules")
    rules: dict[str, str] = {}
    for k, v in rules_obj.items():
        _require(len(k) == 1, f"{path}.rules keys must be single characters")
        rules[k] = _as_str(v, f"{path}.rules['{k}']")

    return FractalSpec(
        name=name,
        axiom=axiom,
        rules=rules,
        levels=levels,
        theta=_as_float(obj.get("theta", 0), f"{path}.theta"),
        angle=_as_float(obj.get("angle", 90), f"{path}.angle"),
        one_path=_as_bool(obj.get("one_path", False), f"{path}.one_path"),
    )


def parse_catalog(obj: Any) -> tuple[FractalSpec, ...]:
    if isinstance(obj, dict):
        return (parse_fractal_spec(obj),)
    _require(isinstance(obj, list), "catalog must be an object or a list of objects")
    specs = tuple(parse_fractal_spec(o, f"[{i}]") for i, o in enumerate(obj))
    _require(len(specs) > 0, "catalog is empty")

    names = [s.name for s in specs]
    dupes = sorted({n for n in names if names.count(n) > 1})
    _require(not dupes, f"duplicate fractal names: {', '.join(dupes)}")
    return specs


def load_json(path: str) -> Any:
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e


def load_catalog(path: str) -> tuple[FractalSpec, ...]:
    return parse_catalog(load_json(path))
