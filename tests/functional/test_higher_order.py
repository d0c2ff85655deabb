from fpkit.core.containers import Container, Identity, Nothing
from fpkit.functional.higher_order import constant, flip, lift, memoize, tap


def test_constant():
    always_five = constant(5)
    assert always_five() == 5
    assert always_five(1, 2, key="value") == 5


def test_flip():
    def sub(a, b, c=0):
        return a - b - c

    assert flip(sub)(1, 10) == 9
    assert flip(sub, 1)(10) == 9


def test_tap_passes_input_through():
    seen = []
    log = tap(seen.append)
    assert log(3) == 3
    assert seen == [3]


def test_memoize_calls_once_per_argument():
    calls = []

    @memoize
    def square(x):
        calls.append(x)
        return x * x

    assert square(4) == 16
    assert square(4) == 16
    assert square(5) == 25
    assert calls == [4, 5]


def test_lift_matches_map():
    inc = lambda x: x + 1
    lifted = lift(inc)
    assert lifted(Container(1)) == Container(1).map(inc)
    assert lifted(Identity(1)) == Identity(2)
    assert lifted(Nothing) is Nothing
