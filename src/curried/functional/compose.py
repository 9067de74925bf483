"""Helpers for calling and chaining partially applied functions."""

import typing as tp
from collections.abc import Mapping, Sequence

from curried.functional.partial import ArgumentSet, make_partial

__all__ = [
    "do_call",
    "compose",
    "pipe",
    "map_partial",
]


def do_call(
    func: tp.Callable[..., tp.Any],
    arguments: tp.Union[ArgumentSet, Sequence[tp.Any], Mapping[str, tp.Any]],
) -> tp.Any:
    """Call ``func`` with an argument bag.

    Args:
        func: Callable to invoke.
        arguments: An :class:`ArgumentSet`, a mapping used as keyword
            arguments, or any other sequence used as positional arguments.

    Raises:
        TypeError: If ``arguments`` is a string or not a sequence or mapping.

    Returns:
        Whatever ``func`` returns.
    """
    if isinstance(arguments, ArgumentSet):
        return arguments.apply(func)
    if isinstance(arguments, Mapping):
        return func(**arguments)
    if isinstance(arguments, (str, bytes)) or not isinstance(arguments, Sequence):
        raise TypeError(
            f"Arguments must be an ArgumentSet, sequence or mapping, got {type(arguments).__name__}."
        )
    return func(*arguments)


def compose(*funcs: tp.Callable[..., tp.Any]) -> tp.Callable[..., tp.Any]:
    """Chain callables so each receives the result of the previous one.

    The first callable receives the original arguments, i.e.
    ``compose(f, g, h)(x) == h(g(f(x)))``. With no callables the result is
    the identity on a single argument.
    """
    if not funcs:
        return lambda x: x

    first, *rest = funcs

    def composed(*args, **kwargs):
        result = first(*args, **kwargs)
        for func in rest:
            result = func(result)
        return result

    return composed


def pipe(value: tp.Any, *funcs: tp.Callable[[tp.Any], tp.Any]) -> tp.Any:
    """Thread ``value`` through ``funcs`` from left to right."""
    for func in funcs:
        value = func(value)
    return value


def map_partial(
    func: tp.Callable[..., tp.Any], iterable: tp.Iterable[tp.Any], /, **kwargs: tp.Any
) -> tp.List[tp.Any]:
    """Apply ``func`` to every element with the same keyword arguments.

    The keywords are fixed once with :func:`make_partial`; each element is
    then passed as the only positional argument.

    Example:
        >>> map_partial(mean, [[1, None], [2, 4]], na_rm=True)
        [Array(1., dtype=float32), Array(3., dtype=float32)]
    """
    bound = make_partial(func, **kwargs)
    return [bound(item) for item in iterable]
