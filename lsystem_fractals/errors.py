"""Exceptions raised by the rewrite / interpret / render pipeline."""

from __future__ import annotations


class LSystemError(Exception):
    pass


class ConfigError(LSystemError, ValueError):
    pass


class UndefinedSymbolError(LSystemError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f"no rule for symbol {symbol!r}")
        self.symbol = symbol


class ExpansionLimitError(LSystemError):
    def __init__(self, limit: int) -> None:
        super().__init__(f"expansion exceeds {limit} symbols")
        self.limit = limit


class StackUnderflowError(LSystemError):
    pass


class EmptyDrawingError(LSystemError):
    pass


class RenderIOError(LSystemError):
    pass


class UnknownFractalError(LSystemError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"no fractal by name: {name}")
        self.name = name


class BatchRenderError(LSystemError):
    """A batch render stopped at the first failing fractal."""

    def __init__(self, name: str, cause: Exception) -> None:
        super().__init__(f"{name}: {cause}")
        self.name = name
        self.cause = cause
