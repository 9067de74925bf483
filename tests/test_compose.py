import jax.numpy as jnp
import pytest

from curried.functional.compose import compose, do_call, map_partial, pipe
from curried.functional.partial import ArgumentSet, make_partial
from curried.functional.stats import mean


def record(*args, **kwargs):
    return args, kwargs


def test_do_call_argument_set():
    assert do_call(record, ArgumentSet.of(1, k=2)) == ((1,), {"k": 2})


def test_do_call_sequence_and_mapping():
    assert do_call(record, [1, 2]) == ((1, 2), {})
    assert do_call(record, (1,)) == ((1,), {})
    assert do_call(record, {"a": 1}) == ((), {"a": 1})
    assert do_call(record, ArgumentSet.of(a=1).kwargs) == ((), {"a": 1})


def test_do_call_rejects_string():
    with pytest.raises(TypeError):
        do_call(record, "abc")


def test_do_call_rejects_non_sequence_iterable():
    with pytest.raises(TypeError):
        do_call(record, (value for value in [1, 2]))
    with pytest.raises(TypeError):
        do_call(record, {1, 2})


def test_do_call_propagates_errors():
    def failing():
        raise KeyError("boom")

    with pytest.raises(KeyError):
        do_call(failing, [])


def test_compose_order():
    add_one = lambda x: x + 1
    double = lambda x: x * 2

    assert compose(add_one, double)(3) == 8
    assert compose(double, add_one)(3) == 7


def test_compose_first_gets_all_arguments():
    def power(base, exp=2):
        return base**exp

    assert compose(power, str)(3, exp=3) == "27"


def test_compose_identity():
    marker = object()
    assert compose()(marker) is marker


def test_compose_with_partials():
    subtract = make_partial(lambda a, b: a - b, 10)
    halve = make_partial(lambda x, divisor: x / divisor, divisor=2)
    assert compose(subtract, halve)(4) == 3.0


def test_pipe():
    assert pipe(3, lambda x: x + 1, lambda x: x * 10) == 40
    assert pipe("unchanged") == "unchanged"


def test_map_partial_with_mean():
    results = map_partial(mean, [[1.0, None], [2.0, 4.0]], na_rm=True)
    assert len(results) == 2
    assert jnp.isclose(results[0], 1.0)
    assert jnp.isclose(results[1], 3.0)


def test_map_partial_keyword_named_like_parameter():
    def tag(x, iterable=None, func=None):
        return (x, iterable, func)

    assert map_partial(tag, [1, 2], iterable="i", func="f") == [
        (1, "i", "f"),
        (2, "i", "f"),
    ]


def test_map_partial_empty():
    assert map_partial(record, []) == []
