"""Partial application of arbitrary callables.

A :class:`Partial` fixes some positional and keyword arguments of a target
callable now and accepts the rest later. Every call merges the fixed
arguments with the call-time ones and forwards the result to the target:

    - Positional: fixed values always occupy the leading slots, followed by
      the call-time values.
    - Keyword: the fixed mapping overlaid by the call-time mapping, so a
      call-time value replaces a fixed value of the same name.

The target is never validated. A wrong argument name or count is
reported by the target itself when it is called, and whatever it raises
reaches the caller untouched.

:func:`make_partial` always lets call-time keywords win. Only partials built
with :func:`strict_partial` refuse a keyword that is already fixed.

Examples:
    >>> from curried.functional.partial import make_partial
    >>> from curried.functional.stats import mean
    >>>
    >>> mean_na = make_partial(mean, na_rm=True)
    >>> mean_na([1.0, None, 3.0])
    Array(2., dtype=float32)
    >>>
    >>> # The call-time keyword wins over the fixed one
    >>> mean_na([1.0, None, 3.0], na_rm=False)
    Array(nan, dtype=float32)
"""

import functools
import inspect
import types
import typing as tp

from pydantic import BaseModel, ConfigDict, Field, field_validator

from curried.logger.logger import setup_logger

__all__ = [
    "ArgumentSet",
    "Partial",
    "ArgumentAlreadyFixedError",
    "make_partial",
    "curry",
    "strict_partial",
]

logger = setup_logger("curried.functional")

T = tp.TypeVar("T")


class ArgumentAlreadyFixedError(TypeError):
    """Raised by a strict :class:`Partial` when a call repeats a fixed keyword."""


class ArgumentSet(BaseModel):
    """An ordered sequence of positional values plus a keyword mapping.

    Values are held by reference. The set itself cannot change: fields
    cannot be reassigned and ``kwargs`` is a read-only view over a private
    copy of the keywords. Merging produces a new set.

    Attributes:
        args: Positional values, in call order.
        kwargs: Keyword values by argument name (read-only).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    args: tp.Tuple[tp.Any, ...] = Field(
        default=(), description="Positional values, in call order."
    )
    kwargs: tp.Mapping[str, tp.Any] = Field(
        default_factory=dict,
        validate_default=True,
        description="Keyword values by argument name.",
    )

    @field_validator("kwargs", mode="after")
    @classmethod
    def _read_only(cls, value: tp.Mapping[str, tp.Any]) -> tp.Mapping[str, tp.Any]:
        return types.MappingProxyType(dict(value))

    @classmethod
    def of(cls, /, *args: tp.Any, **kwargs: tp.Any) -> "ArgumentSet":
        """Capture the arguments of a call expression as a set."""
        return cls(args=args, kwargs=kwargs)

    def merge(self, other: "ArgumentSet") -> "ArgumentSet":
        """Return ``self`` followed by ``other``.

        Positional values are concatenated. Keywords present in both sets take
        the value from ``other``.
        """
        return type(self)(
            args=self.args + other.args,
            kwargs={**self.kwargs, **other.kwargs},
        )

    def overlapping(self, other: "ArgumentSet") -> tp.Tuple[str, ...]:
        """Keyword names present in both sets, sorted."""
        return tuple(sorted(self.kwargs.keys() & other.kwargs.keys()))

    def apply(self, func: tp.Callable[..., T]) -> T:
        """Call ``func`` with this set unpacked and return its result."""
        return func(*self.args, **self.kwargs)

    def __len__(self) -> int:
        return len(self.args) + len(self.kwargs)

    def __bool__(self) -> bool:
        return len(self) > 0


def _partial_signature(
    func: tp.Callable[..., tp.Any], fixed: ArgumentSet
) -> tp.Optional[inspect.Signature]:
    # Same view of the remaining parameters as functools.partial reports
    try:
        return inspect.signature(functools.partial(func, *fixed.args, **fixed.kwargs))
    except (TypeError, ValueError):
        # Target has no introspectable signature, or the fixed arguments
        # do not fit it; the mismatch surfaces when the partial is called.
        return None


class Partial:
    """A callable with some of its target's arguments fixed in advance.

    Construction only stores a reference to the target and the fixed
    arguments; the target runs when the partial is called, as many times as
    it is called. Calls share no state with each other.

    The target's ``__name__``, ``__qualname__``, ``__doc__`` and ``__module__``
    are copied onto the partial when present, and the target itself is kept
    in ``__wrapped__``. ``inspect.signature`` reports only the parameters
    still open, with fixed keywords shown as keyword-only defaults.

    Args:
        func: The target callable.
        fixed: Arguments to supply on every call. Defaults to none.
        allow_override: If ``False``, a call-time keyword that is already
            fixed raises :class:`ArgumentAlreadyFixedError` instead of
            replacing the fixed value.

    Raises:
        TypeError: If ``func`` is not callable.
    """

    def __init__(
        self,
        func: tp.Callable[..., tp.Any],
        fixed: tp.Optional[ArgumentSet] = None,
        *,
        allow_override: bool = True,
    ) -> None:
        if not callable(func):
            raise TypeError(
                f"Partial application needs a callable target, got {type(func).__name__}."
            )
        self._func = func
        self._fixed = fixed if fixed is not None else ArgumentSet()
        self._allow_override = allow_override
        functools.update_wrapper(self, func, updated=())
        self.__signature__ = _partial_signature(func, self._fixed)
        logger.debug(
            "Bound %s with %d fixed argument(s)", self._target_name, len(self._fixed)
        )

    @property
    def func(self) -> tp.Callable[..., tp.Any]:
        return self._func

    @property
    def fixed(self) -> ArgumentSet:
        return self._fixed

    @property
    def args(self) -> tp.Tuple[tp.Any, ...]:
        return self._fixed.args

    @property
    def keywords(self) -> tp.Dict[str, tp.Any]:
        return dict(self._fixed.kwargs)

    @property
    def allow_override(self) -> bool:
        return self._allow_override

    @property
    def _target_name(self) -> str:
        return getattr(self._func, "__qualname__", None) or repr(self._func)

    def _check_overrides(self, other: ArgumentSet) -> None:
        if self._allow_override:
            return
        clashes = self._fixed.overlapping(other)
        if clashes:
            raise ArgumentAlreadyFixedError(
                f"{self._target_name}: argument(s) already fixed: {', '.join(clashes)}"
            )

    def bind(self, /, *args: tp.Any, **kwargs: tp.Any) -> "Partial":
        """Return a new partial of the same target with more arguments fixed.

        The new arguments are merged after the existing ones with the same
        rules as a call. This partial is left unchanged.
        """
        extra = ArgumentSet.of(*args, **kwargs)
        self._check_overrides(extra)
        return type(self)(
            self._func,
            self._fixed.merge(extra),
            allow_override=self._allow_override,
        )

    def __call__(self, /, *args: tp.Any, **kwargs: tp.Any) -> tp.Any:
        call = ArgumentSet.of(*args, **kwargs)
        self._check_overrides(call)
        logger.debug(
            "Calling %s with %d fixed and %d call-time argument(s)",
            self._target_name,
            len(self._fixed),
            len(call),
        )
        return self._fixed.merge(call).apply(self._func)

    def __repr__(self) -> str:
        parts = [repr(self._func)]
        parts.extend(repr(arg) for arg in self._fixed.args)
        parts.extend(f"{key}={value!r}" for key, value in self._fixed.kwargs.items())
        return f"{type(self).__name__}({', '.join(parts)})"


def make_partial(target: tp.Callable[..., tp.Any], /, *args: tp.Any, **kwargs: tp.Any) -> Partial:
    """Fix ``args`` and ``kwargs`` of ``target`` and return the partial.

    ``target`` is not called and its signature is not checked. A call-time
    keyword replaces a fixed keyword of the same name.

    Args:
        target: Any callable.
        *args: Positional values placed before the call-time ones.
        **kwargs: Keyword values supplied on every call.

    Returns:
        The partially applied callable.

    Raises:
        TypeError: If ``target`` is not callable.

    Example:
        >>> scale = make_partial(lambda factor, x: factor * x, 10)
        >>> scale(4)
        40
    """
    return Partial(target, ArgumentSet.of(*args, **kwargs))


curry = make_partial


def strict_partial(target: tp.Callable[..., tp.Any], /, *args: tp.Any, **kwargs: tp.Any) -> Partial:
    """Like :func:`make_partial`, but fixed keywords cannot be overridden.

    A call (or :meth:`Partial.bind`) that supplies a keyword already fixed
    raises :class:`ArgumentAlreadyFixedError` before the target runs.
    """
    return Partial(target, ArgumentSet.of(*args, **kwargs), allow_override=False)
