# tests/test_generate_dataset.py
from gamedata import Bias, generate_dataset

def test_same_seed_same_dataset():
    a = generate_dataset(6, 2, Bias.PREFER_AVERAGE, seed=123)
    b = generate_dataset(6, 2, Bias.PREFER_AVERAGE, seed=123)
    assert a == b
    assert len(a) == 30

def test_different_seed_differs():
    a = generate_dataset(6, 1, Bias.NONE, seed=1)
    b = generate_dataset(6, 1, Bias.NONE, seed=2)
    assert len(a) == len(b) == 15
    assert [r.wip_ratio for r in a] != [r.wip_ratio for r in b]

def test_unseeded_and_degenerate():
    assert len(generate_dataset(4, 1)) == 6
    assert generate_dataset(1, 3, seed=5) == []
