"""Unit tests for the random sources."""

from hbshelpers.adapters.random_sources import SequenceRandomSource, SystemRandomSource


def test_system_random_source_stays_in_range():
    """Values are always within the inclusive bounds."""
    source = SystemRandomSource()
    values = [source.randint(1000, 100000000) for _ in range(200)]
    assert all(1000 <= v <= 100000000 for v in values)


def test_system_random_source_seed_is_reproducible():
    """The same seed yields the same sequence."""
    a, b = SystemRandomSource(seed=7), SystemRandomSource(seed=7)
    assert [a.randint(0, 10**6) for _ in range(5)] == [b.randint(0, 10**6) for _ in range(5)]


def test_sequence_random_source_cycles_and_clamps():
    """Values repeat in order and are clamped into range."""
    source = SequenceRandomSource([5, 50, 500])
    assert [source.randint(10, 100) for _ in range(4)] == [10, 50, 100, 10]


def test_sequence_random_source_empty():
    """An empty sequence behaves like zero."""
    assert SequenceRandomSource([]).randint(3, 9) == 3
