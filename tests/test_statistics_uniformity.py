"""Statistical uniformity over 100k draws (slow)."""

from collections import Counter

import pytest

from seedrandom import SeedRandom

N = 100_000


@pytest.mark.slow
@pytest.mark.parametrize("algorithm", ["mulberry", "xoshiro"])
def test_int_0_9_roughly_uniform(algorithm):
    rng = SeedRandom("uniformity", algorithm)
    counts = Counter(rng.int(0, 9) for _ in range(N))
    assert set(counts) == set(range(10))
    for value, c in counts.items():
        # expected 10_000, sd ~95
        assert abs(c - N / 10) < 500, f"value {value}: {c}"


@pytest.mark.slow
@pytest.mark.parametrize("algorithm", ["mulberry", "xoshiro"])
def test_weighted_1_to_3(algorithm):
    rng = SeedRandom("weights", algorithm)
    counts = Counter(rng.weighted([("A", 1), ("B", 3)]) for _ in range(N))
    ratio = counts["B"] / counts["A"]
    assert 2.8 < ratio < 3.2, ratio


@pytest.mark.slow
def test_float_mean_and_buckets():
    rng = SeedRandom("float-buckets")
    xs = [rng.float() for _ in range(N)]
    assert abs(sum(xs) / N - 0.5) < 0.005
    buckets = Counter(int(x * 4) for x in xs)
    for b in range(4):
        assert abs(buckets[b] - N / 4) < 800
