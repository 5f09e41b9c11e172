from morris_counting.counters import ExactCounter, MorrisCounter
from morris_counting.paired_counter import PairedCounter
from scripted_source import ScriptedRandomSource


def _paired(draws, increments):
    p = PairedCounter(ExactCounter(), MorrisCounter(ScriptedRandomSource(draws)))
    for _ in range(increments):
        p.increment()
    return p


def test_increment_drives_both_counters():
    p = _paired([0.99], 4)
    assert p.exact.value() == 4
    # only the first increment fires with a 0.99 draw
    assert p.approx.exponent == 1


def test_ties_on_both_sides_agree():
    a = _paired([0.99], 5)
    b = _paired([0.99], 5)
    assert a.approx.estimate() == b.approx.estimate()
    assert a.order_agrees(b)
    assert b.order_agrees(a)


def test_tie_on_one_side_only_disagrees():
    a = _paired([0.0, 0.1, 0.1] + [0.99] * 7, 10)
    b = _paired([0.0, 0.1, 0.1, 0.99, 0.99], 5)
    assert a.exact.value() == 10 and b.exact.value() == 5
    assert a.approx.estimate() == 4 and b.approx.estimate() == 4

    assert not a.order_agrees(b)
    # seen from the smaller side neither comparison is "greater"
    assert b.order_agrees(a)


def test_matching_strict_order_agrees():
    big = _paired([0.0, 0.1, 0.1] + [0.99] * 7, 10)
    small = _paired([0.0, 0.1, 0.99], 3)
    assert big.approx.estimate() > small.approx.estimate()
    assert big.order_agrees(small)
    assert small.order_agrees(big)


def test_inverted_order_disagrees():
    a = _paired([0.99], 8)
    b = _paired([0.0, 0.1, 0.99], 3)
    assert a.approx.estimate() < b.approx.estimate()
    assert not a.order_agrees(b)
    assert not b.order_agrees(a)


def test_repr_uses_labels():
    p = PairedCounter(
        ExactCounter(),
        MorrisCounter(ScriptedRandomSource([0.5])),
        labels=("actual", "approx"),
    )
    p.increment()
    assert repr(p) == "[actual:1, approx:1]"
    assert repr(_paired([0.99], 3)) == "[exact:3, morris:1]"


def test_any_two_counters_can_be_paired():
    a = PairedCounter(ExactCounter(), ExactCounter(), labels=("left", "right"))
    b = PairedCounter(ExactCounter(), ExactCounter(), labels=("left", "right"))
    for _ in range(3):
        a.increment()
    b.increment()
    assert a.order_agrees(b)
    assert b.order_agrees(a)
    assert repr(a) == "[left:3, right:3]"
