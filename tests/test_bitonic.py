import random

import pytest

from parallab.bitonic import bitonic_pass, bitonic_sort, main, stage_count


@pytest.mark.parametrize("exponent", range(0, 12))
def test_stage_count_of_power_of_two(exponent):
    assert stage_count(1 << exponent) == exponent


def test_stage_count_of_zero_and_negative():
    assert stage_count(0) == 0
    with pytest.raises(ValueError):
        stage_count(-4)


@pytest.mark.parametrize("exponent", range(0, 11))
def test_sort_matches_builtin(exponent):
    rng = random.Random(exponent)
    data = [rng.randint(-(2**31), 2**31 - 1) for _ in range(1 << exponent)]
    assert bitonic_sort(data) == sorted(data)


def test_sort_with_duplicates():
    data = [3, 1, 3, 1, 2, 2, 0, 0]
    assert bitonic_sort(data) == sorted(data)


def test_sort_does_not_modify_input():
    data = [4, 3, 2, 1]
    copy = list(data)
    bitonic_sort(data)
    assert data == copy


@pytest.mark.parametrize("size", [0, 3, 6, 100])
def test_sort_rejects_bad_sizes(size):
    with pytest.raises(ValueError, match="power of two"):
        bitonic_sort(list(range(size)))


def test_first_stage_pass_alternates_direction():
    data = [2, 1, 3, 4]
    bitonic_pass(data, 1, 0)
    assert data == [1, 2, 4, 3]


def test_pass_preserves_values():
    rng = random.Random(7)
    data = [rng.randint(0, 100) for _ in range(64)]
    original = sorted(data)
    for stage in range(1, 4):
        for pass_index in reversed(range(stage)):
            bitonic_pass(data, stage, pass_index)
            assert sorted(data) == original


def test_stage_produces_sorted_blocks():
    rng = random.Random(3)
    data = [rng.randint(0, 1000) for _ in range(32)]
    for stage in range(1, 3):
        for pass_index in reversed(range(stage)):
            bitonic_pass(data, stage, pass_index)
    blocks = [data[i:i + 4] for i in range(0, 32, 4)]
    for index, block in enumerate(blocks):
        expected = sorted(block) if index % 2 == 0 else sorted(block, reverse=True)
        assert block == expected


def test_main_small_run(capsys):
    assert main(["64"]) == 0
    out = capsys.readouterr().out
    assert "Bitonic array is sorted correctly" in out
    assert "Built-in array is sorted correctly" in out


def test_main_reports_bad_size(capsys):
    assert main(["10"]) == 0
    assert "power of two" in capsys.readouterr().err


def test_main_rejects_non_integer():
    assert main(["many"]) == 1