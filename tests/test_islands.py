import random

import pytest

from graphwork.islands import (
    count_enclaves,
    count_islands,
    islands_after_additions,
    islands_after_additions_bruteforce,
    largest_island,
)


def test_count_enclaves_source_example():
    grid = [
        [0, 0, 0, 0],
        [1, 0, 1, 0],
        [0, 1, 1, 0],
        [0, 0, 0, 0],
    ]
    assert count_enclaves(grid) == 3


def test_count_enclaves_interior_land_all_counted():
    grid = [
        [0, 0, 0, 0, 0],
        [0, 1, 1, 0, 0],
        [0, 0, 0, 1, 0],
        [0, 0, 0, 0, 0],
    ]
    assert count_enclaves(grid) == sum(map(sum, grid))


def test_count_enclaves_connected_to_border_not_counted():
    grid = [
        [1, 1, 1],
        [1, 1, 1],
        [1, 1, 1],
    ]
    assert count_enclaves(grid) == 0


def test_count_enclaves_never_exceeds_land():
    rng = random.Random(7)
    for _ in range(20):
        grid = [[rng.randint(0, 1) for _ in range(6)] for _ in range(5)]
        assert 0 <= count_enclaves(grid) <= sum(map(sum, grid))


def test_count_islands_source_example():
    grid = [
        ["0", "1", "1", "1", "0", "0", "0"],
        ["0", "0", "1", "1", "0", "1", "0"],
    ]
    assert count_islands(grid) == 2


def test_count_islands_joins_diagonals():
    assert count_islands([["1", "0"], ["0", "1"]]) == 1


def test_count_islands_no_land():
    assert count_islands([["0", "0"], ["0", "0"]]) == 0


def test_additions_source_example():
    positions = [(1, 1), (0, 1), (3, 3), (3, 4)]
    assert islands_after_additions(4, 5, positions) == [1, 1, 2, 2]
    assert islands_after_additions_bruteforce(4, 5, positions) == [1, 1, 2, 2]


def test_additions_methods_agree_on_random_input():
    rng = random.Random(3)
    for _ in range(10):
        n, m = rng.randint(1, 6), rng.randint(1, 6)
        positions = [(rng.randrange(n), rng.randrange(m)) for _ in range(15)]
        assert islands_after_additions(n, m, positions) == islands_after_additions_bruteforce(
            n, m, positions
        )


def test_duplicate_addition_repeats_count():
    positions = [(0, 0), (2, 2), (2, 2)]
    counts = islands_after_additions(3, 3, positions)
    assert counts[2] == counts[1]
    assert islands_after_additions_bruteforce(3, 3, positions) == counts


@pytest.mark.parametrize("func", [islands_after_additions, islands_after_additions_bruteforce])
def test_additions_out_of_range(func):
    with pytest.raises(IndexError):
        func(2, 2, [(2, 0)])


def test_largest_island_all_land():
    grid = [[1] * 4 for _ in range(4)]
    assert largest_island(grid) == len(grid) ** 2


def test_largest_island_single_gap_filled():
    grid = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    assert largest_island(grid) == len(grid) ** 2


def test_largest_island_bounded_by_grid():
    rng = random.Random(11)
    for _ in range(20):
        n = rng.randint(1, 5)
        grid = [[rng.randint(0, 1) for _ in range(n)] for _ in range(n)]
        result = largest_island(grid)
        assert sum(map(sum, grid)) >= 0
        assert 1 <= result <= n * n
        assert result <= sum(map(sum, grid)) + 1


def test_largest_island_not_square():
    with pytest.raises(ValueError):
        largest_island([[1, 0, 1], [0, 1, 0]])