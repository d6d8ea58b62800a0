import pytest

from petlib.bn import Bn

from fairdeck.exceptions import RandomnessError
from fairdeck.rand import RandomnessSource, SecureRandom, SeededRandom


def test_secure_random_in_range(rng):
    values = [rng.random_below(10) for _ in range(50)]
    assert all(isinstance(v, Bn) for v in values)
    assert all(0 <= v < 10 for v in values)


def test_secure_random_distinct(group, rng):
    order = group.order()
    assert rng.random_below(order) != rng.random_below(order)


@pytest.mark.parametrize("bound", [0, -5])
def test_bad_bound(rng, bound):
    with pytest.raises(ValueError):
        rng.random_below(bound)


def test_secure_random_failure_is_fatal(rng, monkeypatch):
    def broken(self):
        raise RuntimeError("RAND_bytes failed")

    monkeypatch.setattr(Bn, "random", broken)
    with pytest.raises(RandomnessError):
        rng.random_below(100)


def test_seeded_random_warns():
    with pytest.warns(UserWarning):
        SeededRandom(1)


def test_seeded_random_reproducible(group):
    order = group.order()
    with pytest.warns(UserWarning):
        a, b, c = SeededRandom("seed"), SeededRandom(b"seed"), SeededRandom("other")
    first = [a.random_below(order) for _ in range(3)]
    assert first == [b.random_below(order) for _ in range(3)]
    assert first != [c.random_below(order) for _ in range(3)]
    assert len(set(int(v) for v in first)) == 3


def test_abstract_source():
    with pytest.raises(TypeError):
        RandomnessSource()
