"""Functional primitives for curried.

Partial application, composition and a few statistical functions that make
natural partial application targets. Everything here is stateless and free
of side effects beyond what the wrapped callables themselves do.
"""

from curried.functional.partial import (
    ArgumentAlreadyFixedError,
    ArgumentSet,
    Partial,
    curry,
    make_partial,
    strict_partial,
)
from curried.functional.compose import compose, do_call, map_partial, pipe

__all__ = [
    "ArgumentAlreadyFixedError",
    "ArgumentSet",
    "Partial",
    "curry",
    "make_partial",
    "strict_partial",
    "compose",
    "do_call",
    "map_partial",
    "pipe",
]
