# tests/test_schedule_round_robin.py
from __future__ import annotations
import random
from collections import Counter
from gamedata import schedule as _sched

def test_single_pass_four_teams_covers_each_pair_once():
    fx = _sched.build_round_robin(4, 1, rng=random.Random(7))
    assert len(fx) == 6
    pairs = Counter(m.pair for m in fx)
    assert set(pairs) == {(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)}
    assert all(c == 1 for c in pairs.values())

def test_two_teams_three_passes():
    fx = _sched.build_round_robin(2, 3, rng=random.Random(1))
    assert len(fx) == 3
    assert all(m.pair == (0, 1) for m in fx)

def test_pair_order_follows_passes():
    # within a pass: (0,1),(0,2),(1,2); the whole pass repeats k times
    fx = _sched.build_round_robin(3, 2, rng=random.Random(3))
    assert [m.pair for m in fx] == [(0, 1), (0, 2), (1, 2)] * 2

def test_degenerate_inputs_are_empty():
    assert _sched.build_round_robin(1, 5, rng=random.Random(0)) == []
    assert _sched.build_round_robin(0, 1, rng=random.Random(0)) == []
    assert _sched.build_round_robin(-3, 1, rng=random.Random(0)) == []
    assert _sched.build_round_robin(5, 0, rng=random.Random(0)) == []
    assert _sched.expected_game_count(1, 5) == 0

def test_no_upper_bound_in_builder():
    fx = _sched.build_round_robin(40, 1, rng=random.Random(0))
    assert len(fx) == 40 * 39 // 2

def test_default_rng_is_entropy_seeded():
    fx = _sched.build_round_robin(5, 2)
    assert len(fx) == 20
