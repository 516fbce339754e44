from typing import Any, Optional

import pytest

from funcurry.adapt import adapt, adapt_like
from funcurry.returns import thunk


class Cancelled(Exception):
    pass


class Ctx:
    def __init__(self, err=None):
        self.err = err


def clone(s: str) -> str:
    return s


def add(a: int, b: int) -> int:
    return a + b


def pick(a: int, b: str) -> str:
    return ""


def takes_int_returns_int(a: int) -> int:
    return a


def takes_str(b: str) -> str:
    return b


def takes_str_any(b: str) -> Any:
    return b


def test_adapt_one():
    assert adapt(lambda: None, 1)("string") is None
    assert adapt(lambda: "result", 1)("ignored") == "result"

    def with_suffix(passed: str) -> str:
        return passed + " result"

    assert adapt(with_suffix, 1)("passed") == "passed result"
    assert adapt(lambda passed: str(passed), 1)("passed") == "passed"
    assert adapt(lambda: "passed", 1)("ignored") == "passed"

    def noop(s: str) -> None:
        return None

    def noop_any(s: Any) -> None:
        return None

    assert adapt(noop, 1)("ignored") is None
    assert adapt_like(clone, noop)("ignored") == ""
    assert adapt_like(clone, noop_any)("ignored") == ""


def test_adapt_two():
    test_err = ValueError("test")
    assert adapt(lambda: None, 2)("string", 0) is None
    assert adapt(lambda: test_err, 2)("string", 0) is test_err
    assert adapt(lambda a, b: a + b, 2)(2, 3) == 5
    assert adapt_like(add, lambda a, b: a + b)(2, 3) == 5
    assert adapt_like(add, lambda a, b: None)(2, 3) == 0
    assert adapt(takes_int_returns_int, 2)(2, 3) == 2
    assert adapt(lambda a: a, 2)(2, 3) == 2
    assert adapt_like(add, lambda a: None)(2, 3) == 0
    assert adapt(lambda: 100, 2)(2, 3) == 100
    assert adapt(takes_str, 2)(2, "abc") == "abc"
    assert adapt(takes_str_any, 2)(2, "abc") == "abc"
    assert adapt_like(pick, takes_str)(2, "abc") == "abc"


def test_adapt_two_context():
    ctx = Ctx(Cancelled("context canceled"))

    def ignores(c: Ctx) -> None:
        return None

    def reports(c: Ctx) -> Optional[Exception]:
        return c.err

    assert adapt(ignores, 2)(ctx, 0) is None
    assert isinstance(adapt(reports, 2)(ctx, 0), Cancelled)
    assert adapt(lambda c, i: None, 2)(ctx, 0) is None

    seen = []

    def takes_int(i: int) -> None:
        seen.append(i)

    assert adapt(takes_int, 2)(ctx, 0) is None
    assert seen == [0]


def test_adapt_ignores_argument_in_filter():
    counter = [0]

    def odd() -> bool:
        counter[0] += 1
        return counter[0] % 2 == 0

    drop = adapt(odd, 1)
    assert [x for x in [1, 2, 3, 4, 5] if not drop(x)] == [1, 3, 5]


def test_adapt_too_many_parameters():
    with pytest.raises(TypeError):
        adapt(lambda a, b, c: a, 2)


def test_adapt_wrong_call_count():
    with pytest.raises(TypeError):
        adapt(lambda a: a, 2)(1)


def test_adapt_no_fitting_argument():
    with pytest.raises(TypeError):
        adapt(takes_str, 2)(1, 2)


def test_adapt_like_result_type_mismatch():
    with pytest.raises(TypeError):
        adapt_like(add, lambda a, b: "x")(1, 2)


def test_adapt_like_drops_result_for_void_target():
    def sink(a: int) -> None:
        return None

    assert adapt_like(sink, lambda a: a * 2)(4) is None


def test_adapt_negative_arity():
    with pytest.raises(ValueError):
        adapt(lambda: None, -1)