import pytest

from morris_counting.random_source import (
    RandomSourceError,
    SeededRandomSource,
    SystemRandomSource,
    draw_index,
    make_source,
)
from scripted_source import ScriptedRandomSource


def test_seeded_source_is_deterministic():
    a = SeededRandomSource(seed=123)
    b = SeededRandomSource(seed=123)
    draws_a = [a.next_uniform() for _ in range(200)]
    draws_b = [b.next_uniform() for _ in range(200)]
    assert draws_a == draws_b
    assert all(0.0 <= r < 1.0 for r in draws_a)


def test_different_seeds_differ():
    a = SeededRandomSource(seed=1)
    b = SeededRandomSource(seed=2)
    assert [a.next_uniform() for _ in range(10)] != [b.next_uniform() for _ in range(10)]


def test_scripted_source_replays_and_cycles():
    s = ScriptedRandomSource([0.1, 0.2, 0.3])
    assert [s.next_uniform() for _ in range(5)] == [0.1, 0.2, 0.3, 0.1, 0.2]
    assert s.draws == 5


@pytest.mark.parametrize("bad", [1.0, 1.5, -0.01])
def test_out_of_range_draw_is_rejected(bad):
    s = ScriptedRandomSource([0.5, bad])
    assert s.next_uniform() == 0.5
    with pytest.raises(RandomSourceError):
        s.next_uniform()


def test_draw_index_maps_draws_onto_range():
    s = ScriptedRandomSource([0.0, 0.5, 0.999999])
    assert [draw_index(s, 10) for _ in range(3)] == [0, 5, 9]


def test_draw_index_never_reaches_n():
    just_below_one = 1.0 - 2.0 ** -53
    s = ScriptedRandomSource([just_below_one])
    for n in (1, 3, 100_000, 2 ** 53 - 1):
        assert draw_index(s, n) == n - 1


def test_draw_index_rejects_empty_range():
    with pytest.raises(ValueError):
        draw_index(ScriptedRandomSource([0.5]), 0)


def test_make_source():
    s = make_source("mersenne", seed=9)
    assert isinstance(s, SeededRandomSource)
    assert s.next_uniform() == SeededRandomSource(seed=9).next_uniform()

    assert isinstance(make_source(" System "), SystemRandomSource)

    with pytest.raises(ValueError):
        make_source("system", seed=1)
    with pytest.raises(ValueError):
        make_source("xorshift")
