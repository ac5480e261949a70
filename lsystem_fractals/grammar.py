"""L-system rewriting.

Every symbol of the grammar needs a rule, except the turtle control symbols
``- + [ ]`` which are copied through unchanged and whitespace which is
dropped. Symbols that should survive a pass untouched map to themselves
(``{"F": "F"}``).

Two expansion strategies are provided:

- ``rewrite`` builds the expanded string level by level.
- ``stream_expand`` yields the same symbols lazily, never holding more than
  one replacement string per level in memory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from .errors import ExpansionLimitError, UndefinedSymbolError

logger = logging.getLogger(__name__)

CONTROL_SYMBOLS = frozenset("-+[]")


def _is_rewritable(ch: str) -> bool:
    return ch not in CONTROL_SYMBOLS and not ch.isspace()


def check_grammar(axiom: str, rules: Mapping[str, str], iterations: int) -> None:
    """Raise UndefinedSymbolError for any symbol a rewrite would fail on.

    Walks the symbols reachable from the axiom one level at a time, so an
    invalid grammar is rejected before any string is built.
    """
    if iterations < 0:
        raise ValueError("iterations must be >= 0")

    level = {ch for ch in axiom if _is_rewritable(ch)}
    seen: set[str] = set()
    for _ in range(iterations):
        level -= seen
        if not level:
            return
        nxt: set[str] = set()
        # sorted so the reported symbol does not depend on set order
        for ch in sorted(level):
            repl = rules.get(ch)
            if repl is None:
                raise UndefinedSymbolError(ch)
            nxt.update(c for c in repl if _is_rewritable(c))
        seen |= level
        level = nxt


def rewrite(
    axiom: str,
    rules: Mapping[str, str],
    iterations: int,
    *,
    limit: int | None = None,
) -> str:
    check_grammar(axiom, rules, iterations)

    s = axiom
    for level in range(iterations):
        parts: list[str] = []
        size = 0
        for ch in s:
            if ch in CONTROL_SYMBOLS:
                parts.append(ch)
                size += 1
            elif ch.isspace():
                continue
            else:
                repl = rules[ch]
                parts.append(repl)
                size += len(repl)
            if limit is not None and size > limit:
                raise ExpansionLimitError(limit)
        s = "".join(parts)
        logger.debug("level %d: %d symbols", level + 1, len(s))
    return s


def stream_expand(
    axiom: str, rules: Mapping[str, str], iterations: int
) -> Iterator[str]:
    """Yield the symbols of ``rewrite(axiom, rules, iterations)`` in order.

    Uses an explicit stack of (string, index, depth) frames. The grammar is
    checked up front so a bad symbol fails on the first ``next()`` rather than
    somewhere deep into the stream.
    """
    check_grammar(axiom, rules, iterations)
    return _stream(axiom, rules, iterations)


def _stream(axiom: str, rules: Mapping[str, str], iterations: int) -> Iterator[str]:
    stack: list[tuple[str, int, int]] = [(axiom, 0, 0)]

    while stack:
        s, i, d = stack.pop()
        if i >= len(s):
            continue

        ch = s[i]
        stack.append((s, i + 1, d))

        if d >= iterations or ch in CONTROL_SYMBOLS:
            yield ch
        elif ch.isspace():
            continue
        else:
            # Pushed after the continuation so the replacement is traversed
            # first, keeping left-to-right order.
            stack.append((rules[ch], 0, d + 1))


def expanded_length(axiom: str, rules: Mapping[str, str], iterations: int) -> int:
    """Length of ``rewrite(axiom, rules, iterations)`` without building it."""
    check_grammar(axiom, rules, iterations)

    # lengths[sym] = length of sym after the levels processed so far;
    # None until the first level, where every symbol still counts as one.
    lengths: dict[str, int] | None = None
    for _ in range(iterations):
        lengths = {
            sym: sum(_expanded_len(c, lengths) for c in repl)
            for sym, repl in rules.items()
        }
    return sum(_expanded_len(c, lengths) for c in axiom)


def _expanded_len(ch: str, lengths: Mapping[str, int] | None) -> int:
    if lengths is None or ch in CONTROL_SYMBOLS:
        return 1
    if ch.isspace():
        return 0
    return lengths.get(ch, 1)
