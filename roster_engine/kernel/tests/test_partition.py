"""
Team partitioning.

Every member in exactly one team, sizes within one of each other.
"""

import random
from collections import Counter

import pytest

from roster_engine.kernel.partition import (
    distribute,
    distribute_sequential,
    distribute_with_strategy,
    shuffle,
)


def flatten(teams):
    return [m for team in teams for m in team]


class TestShuffle:
    def test_is_permutation(self):
        items = list(range(20))
        assert sorted(shuffle(items, random.Random(1))) == items

    def test_input_not_modified(self):
        items = ["a", "b", "c", "d"]
        shuffle(items, random.Random(3))
        assert items == ["a", "b", "c", "d"]

    def test_seeded_is_reproducible(self):
        items = list(range(10))
        assert shuffle(items, random.Random(42)) == shuffle(items, random.Random(42))

    def test_empty_and_single(self):
        assert shuffle([]) == []
        assert shuffle(["x"]) == ["x"]


class TestDistribute:
    def test_seven_into_three(self):
        teams = distribute([f"m{i}" for i in range(7)], 3, random.Random(0))
        sizes = [len(t) for t in teams]
        assert sum(sizes) == 7
        assert set(sizes) <= {2, 3}
        assert sorted(sizes, reverse=True) == sizes  # extras go to the first teams

    @pytest.mark.parametrize("m", range(1, 13))
    def test_balanced_for_every_valid_count(self, m):
        members = [f"m{i}" for i in range(m)]
        for n in range(1, m + 1):
            teams = distribute(members, n, random.Random(m * 100 + n))
            sizes = [len(t) for t in teams]
            assert len(teams) == n
            assert max(sizes) - min(sizes) <= 1
            assert Counter(flatten(teams)) == Counter(members)

    def test_duplicates_preserved_as_multiset(self):
        members = ["a", "a", "b", "c"]
        teams = distribute(members, 2, random.Random(5))
        assert Counter(flatten(teams)) == Counter(members)

    def test_one_team_gets_everyone(self):
        teams = distribute(["a", "b", "c"], 1)
        assert sorted(teams[0]) == ["a", "b", "c"]

    def test_singletons_when_n_equals_m(self):
        teams = distribute(["a", "b", "c"], 3)
        assert all(len(t) == 1 for t in teams)

    @pytest.mark.parametrize("n", [0, -1, 4])
    def test_out_of_range_team_count(self, n):
        with pytest.raises(ValueError):
            distribute(["a", "b", "c"], n)

    def test_non_int_team_count(self):
        with pytest.raises(ValueError):
            distribute(["a", "b"], True)


class TestSequential:
    def test_striping(self):
        teams = distribute_sequential(["a", "b", "c", "d", "e"], 2)
        assert teams == [["a", "c", "e"], ["b", "d"]]

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            distribute_sequential(["a"], 2)


class TestStrategy:
    def test_sequential(self):
        assert distribute_with_strategy(["a", "b", "c"], 3, "sequential") == [["a"], ["b"], ["c"]]

    @pytest.mark.parametrize("strategy", ["random", "balanced"])
    def test_random_strategies_match_distribute(self, strategy):
        members = list("abcdefg")
        assert distribute_with_strategy(members, 3, strategy, random.Random(9)) == distribute(
            members, 3, random.Random(9)
        )

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="unknown strategy"):
            distribute_with_strategy(["a"], 1, "optimal")
