"""State manager: seed access, reseed, snapshot/restore, fork."""

import pytest

from seedrandom import (
    Algorithm,
    InvalidState,
    NormalizedSeed,
    RNGState,
    SeedRandom,
    UnknownAlgorithm,
    UnsupportedForAlgorithm,
)
from seedrandom.core.hashing import hash_string
from tests.fakes import CountingEntropySource, FixedEntropySource
from tests.fakes.entropy import FIXED_WORDS


def _draw(rng, k=20):
    return [rng.uint32() for _ in range(k)]


def test_get_seed_is_normalized_seed():
    rng = SeedRandom("abc")
    seed = rng.get_seed()
    assert isinstance(seed, NormalizedSeed)
    assert seed.words == hash_string("abc")


def test_get_seed_unchanged_by_draws():
    rng = SeedRandom("abc")
    before = rng.get_seed()
    _draw(rng)
    assert rng.get_seed() == before


def test_set_seed_resets_sequence():
    rng = SeedRandom("first")
    first = _draw(rng)
    rng.set_seed("first")
    assert _draw(rng) == first


def test_set_seed_matches_fresh_generator():
    rng = SeedRandom("a")
    _draw(rng, 7)
    rng.set_seed("b")
    assert _draw(rng) == _draw(SeedRandom("b"))
    assert rng.get_seed() == SeedRandom("b").get_seed()


def test_set_seed_keeps_algorithm_when_not_given():
    rng = SeedRandom("x", "mulberry")
    rng.set_seed("y")
    assert rng.algorithm is Algorithm.MULBERRY
    assert _draw(rng) == _draw(SeedRandom("y", "mulberry"))


def test_set_seed_switches_algorithm():
    rng = SeedRandom("x", "mulberry")
    rng.set_seed("x", "xoshiro")
    assert rng.algorithm is Algorithm.XOSHIRO
    assert _draw(rng) == _draw(SeedRandom("x", "xoshiro"))


def test_set_seed_unknown_algorithm_leaves_generator():
    rng = SeedRandom("keep")
    twin = SeedRandom("keep")
    with pytest.raises(UnknownAlgorithm):
        rng.set_seed("other", "nope")
    assert rng.get_seed() == twin.get_seed()
    assert _draw(rng) == _draw(twin)


def test_set_seed_absent_consults_entropy_once():
    src = CountingEntropySource()
    rng = SeedRandom("explicit", entropy=src)
    assert src.call_count == 0
    rng.set_seed(None)
    assert src.call_count == 1
    assert rng.get_seed().words == (1, 2, 3, 4)
    _draw(rng)
    rng.fork()
    assert src.call_count == 1


@pytest.mark.parametrize("k", [1, 5, 64])
def test_snapshot_round_trip(k):
    rng = SeedRandom("snap", "xoshiro")
    _draw(rng, 3)
    snapshot = rng.get_state()
    draws_a = _draw(rng, k)
    rng.set_state(snapshot)
    assert _draw(rng, k) == draws_a


def test_snapshot_transfers_between_generators():
    a = SeedRandom("source")
    _draw(a, 11)
    b = SeedRandom("target")
    b.set_state(a.get_state())
    assert _draw(a) == _draw(b)


def test_state_is_a_copy():
    rng = SeedRandom("copy")
    snapshot = rng.get_state()
    _draw(rng)
    assert rng.get_state() != snapshot
    assert isinstance(snapshot, RNGState)


def test_initial_state_is_seed_words():
    rng = SeedRandom("words")
    assert rng.get_state().s == rng.get_seed().words


def test_set_state_accepts_plain_words():
    rng = SeedRandom("plain")
    rng.set_state([1, 2, 3, 4])
    assert rng.get_state().s == (1, 2, 3, 4)


@pytest.mark.parametrize("bad", [(0, 0, 0, 0), (1, 2, 3), (1, 2, 3, 2**32), ("a", 1, 2, 3)])
def test_set_state_rejects_bad_snapshot(bad):
    rng = SeedRandom("bad-state")
    twin = SeedRandom("bad-state")
    with pytest.raises(InvalidState):
        rng.set_state(bad)
    assert _draw(rng) == _draw(twin)


ZERO_SEED = NormalizedSeed((0, 0, 0, 0))


def test_xoshiro_rejects_all_zero_seed():
    with pytest.raises(InvalidState, match="all-zero"):
        SeedRandom(ZERO_SEED, "xoshiro")
    with pytest.raises(InvalidState):
        SeedRandom(NormalizedSeed.from_hex("0" * 32), "xoshiro")
    with pytest.raises(InvalidState):
        SeedRandom(entropy=FixedEntropySource((0, 0, 0, 0)), algorithm="xoshiro")


def test_zero_reseed_leaves_generator_untouched():
    rng = SeedRandom("zero-reseed", "xoshiro")
    twin = SeedRandom("zero-reseed", "xoshiro")
    with pytest.raises(InvalidState):
        rng.set_seed(ZERO_SEED)
    assert rng.get_seed() == twin.get_seed()
    assert rng.get_state() == twin.get_state()
    assert _draw(rng) == _draw(twin)


def test_mulberry_accepts_zero_seed():
    rng = SeedRandom(ZERO_SEED, "mulberry")
    assert len(set(_draw(rng))) > 1


def test_state_ops_unsupported_for_mulberry():
    rng = SeedRandom("mb", "mulberry")
    twin = SeedRandom("mb", "mulberry")
    with pytest.raises(UnsupportedForAlgorithm):
        rng.get_state()
    with pytest.raises(UnsupportedForAlgorithm):
        rng.set_state(RNGState((1, 2, 3, 4)))
    assert _draw(rng) == _draw(twin)


def test_state_ops_follow_algorithm_switch():
    rng = SeedRandom("switch", "xoshiro")
    saved = rng.get_state()
    rng.set_seed("switch", "mulberry")
    with pytest.raises(UnsupportedForAlgorithm):
        rng.set_state(saved)
    rng.set_seed("switch", "xoshiro")
    rng.set_state(saved)


@pytest.mark.parametrize("algorithm", ["mulberry", "xoshiro"])
def test_fork_deterministic(algorithm):
    p1 = SeedRandom("parent", algorithm)
    p2 = SeedRandom("parent", algorithm)
    c1 = p1.fork()
    c2 = p2.fork()
    assert c1.algorithm is c2.algorithm is Algorithm.parse(algorithm)
    assert _draw(c1) == _draw(c2)


@pytest.mark.parametrize("algorithm", ["mulberry", "xoshiro"])
def test_fork_differs_from_parent(algorithm):
    parent = SeedRandom("parent", algorithm)
    child = parent.fork()
    assert _draw(child) != _draw(parent)


def test_fork_consumes_one_draw_and_seeds_child_with_it():
    parent = SeedRandom("fork-seed")
    ref = SeedRandom("fork-seed")
    child = parent.fork()
    child_seed = ref.uint32()
    assert child.get_seed() == SeedRandom(child_seed).get_seed()
    assert _draw(parent) == _draw(ref)


def test_fork_chain_reproducible():
    def chain(seed):
        rng = SeedRandom(seed)
        out = []
        for _ in range(5):
            rng = rng.fork()
            out.append(rng.uint32())
        return out

    assert chain("chain") == chain("chain")
    assert chain("chain") != chain("chain2")


def test_absent_seed_uses_injected_entropy():
    src = FixedEntropySource()
    rng = SeedRandom(entropy=src)
    assert rng.get_seed().words == FIXED_WORDS
    assert src.call_count == 1
    assert _draw(rng) == _draw(SeedRandom(NormalizedSeed(FIXED_WORDS)))


def test_entropy_seeded_run_replays_from_logged_seed():
    rng = SeedRandom()
    logged = rng.get_seed().hex()
    first = _draw(rng)
    assert _draw(SeedRandom(NormalizedSeed.from_hex(logged))) == first


def test_repr_mentions_algorithm():
    assert "xoshiro" in repr(SeedRandom("r", "xoshiro"))
