"""
Combinatorics component unit tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from math import comb
from typing import Any

import pytest

from listkit.components.combinatorics import (
    CombineInput,
    GroupInput,
    LottoInput,
    SelectInput,
    SortInput,
    combinations,
    group,
    length_frequency_sort,
    length_sort,
    lotto_select,
    random_permutation,
    random_select,
    run,
    run_select,
)
from listkit.components.list_utils import InvalidArgumentError, flatten

# --- Mock Random ---


class FirstK:
    """Deterministic random port: always picks the first k members."""

    def __init__(self) -> None:
        self.calls: list[tuple[list[Any], int]] = []

    def sample(self, population: Sequence[Any], k: int) -> list[Any]:
        self.calls.append((list(population), k))
        return list(population)[:k]


class ReversedK:
    """Deterministic random port: picks the last k members, last first."""

    def sample(self, population: Sequence[Any], k: int) -> list[Any]:
        return list(reversed(list(population)))[:k]


class MockRules:
    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed

    def get_max_depth(self) -> int | None:
        return None

    def get_detect_cycles(self) -> bool:
        return True

    def get_random_seed(self) -> int | None:
        return self._seed


# --- Random Selection Tests ---


class TestRandomSelection:
    """Test random_select, lotto_select and random_permutation."""

    def test_random_select_draws_positions(self) -> None:
        source = FirstK()
        result = random_select(["a", ["b", "c"], "d"], 2, random=source)
        assert result == ["a", "b"]
        assert source.calls == [([0, 1, 2, 3], 2)]

    def test_random_select_repeated_elements_kept(self) -> None:
        """Draws are by position, so equal elements can both be drawn."""
        assert random_select(["x", "x"], 2, random=ReversedK()) == ["x", "x"]

    @pytest.mark.parametrize("count", [-1, 4])
    def test_random_select_out_of_range(self, count: int) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            random_select(["a", "b", "c"], count, random=FirstK())
        assert exc_info.value.code == "out_of_range"

    def test_lotto_select(self) -> None:
        assert lotto_select(3, 49, random=ReversedK()) == [49, 48, 47]

    @pytest.mark.parametrize("count,maximum", [(1, 0), (7, 6), (-1, 5)])
    def test_lotto_select_invalid(self, count: int, maximum: int) -> None:
        with pytest.raises(InvalidArgumentError):
            lotto_select(count, maximum, random=FirstK())

    def test_random_permutation(self) -> None:
        assert random_permutation(["a", ["b", "c"]], random=ReversedK()) == ["c", "b", "a"]

    def test_seeded_draws_repeat(self) -> None:
        """The same seed gives the same permutation."""
        items = list(range(20))
        first = run_select(SelectInput("random_permutation", items), rules=MockRules(seed=7))
        second = run_select(SelectInput("random_permutation", items), rules=MockRules(seed=7))
        assert first.items == second.items
        assert sorted(first.items or []) == items


# --- Combination Tests ---


class TestCombinations:
    """Test combinations and group."""

    def test_combinations(self) -> None:
        assert combinations(["a", "b", "c"], 2) == [["a", "b"], ["a", "c"], ["b", "c"]]

    def test_combinations_count(self) -> None:
        items = ["a", "b", "c", "d", "e", "f"]
        assert len(combinations(items, 3)) == comb(6, 3)

    def test_combinations_edges(self) -> None:
        assert combinations(["a", "b"], 0) == [[]]
        assert combinations(["a", "b"], 2) == [["a", "b"]]

    def test_combinations_out_of_range(self) -> None:
        with pytest.raises(InvalidArgumentError):
            combinations(["a"], 2)

    def test_group(self) -> None:
        result = group(["a", "b", "c"], [1, 2])
        assert result == [
            [["a"], ["b", "c"]],
            [["b"], ["a", "c"]],
            [["c"], ["a", "b"]],
        ]

    def test_group_partitions_cover_input(self) -> None:
        items = ["aldo", "beat", "carla", "david", "evi", "flip", "gary", "hugo", "ida"]
        result = group(items, [2, 3, 4])
        assert len(result) == 1260
        for partition in result:
            assert sorted(flatten(partition)) == sorted(items)
            assert [len(g) for g in partition] == [2, 3, 4]

    def test_group_size_mismatch(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            group(["a", "b", "c"], [1, 1])
        assert exc_info.value.code == "size_mismatch"

    def test_group_negative_size(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            group(["a", "b"], [3, -1])
        assert exc_info.value.code == "negative_count"


# --- Sort Tests ---


class TestSorting:
    """Test length_sort and length_frequency_sort."""

    LISTS = [
        ["a", "b", "c"],
        ["d", "e"],
        ["f", "g", "h"],
        ["d", "e"],
        ["i", "j", "k", "l"],
        ["m", "n"],
        ["o"],
    ]

    def test_length_sort(self) -> None:
        assert length_sort(self.LISTS) == [
            ["o"],
            ["d", "e"],
            ["d", "e"],
            ["m", "n"],
            ["a", "b", "c"],
            ["f", "g", "h"],
            ["i", "j", "k", "l"],
        ]

    def test_length_frequency_sort(self) -> None:
        assert length_frequency_sort(self.LISTS) == [
            ["i", "j", "k", "l"],
            ["o"],
            ["a", "b", "c"],
            ["f", "g", "h"],
            ["d", "e"],
            ["d", "e"],
            ["m", "n"],
        ]

    def test_sort_rejects_non_lists(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            length_sort([["a"], "bc"])  # type: ignore[list-item]
        assert exc_info.value.code == "not_a_list"


# --- Entry Point Tests ---


class TestEntryPoints:
    """Test the component run functions."""

    def test_select_success(self) -> None:
        result = run(SelectInput("random_select", ["a", "b", "c"], 2), random=FirstK())
        assert result.success is True
        assert result.items == ["a", "b"]

    def test_select_missing_count(self) -> None:
        result = run(SelectInput("random_select", ["a"]), random=FirstK())
        assert result.success is False
        assert result.errors[0].code == "not_an_integer"

    def test_select_unknown_operation(self) -> None:
        with pytest.raises(ValueError):
            run(SelectInput("shuffle", ["a"]))

    def test_lotto(self) -> None:
        result = run(LottoInput(2, 5), random=FirstK())
        assert result.items == [1, 2]

    def test_combine_and_group(self) -> None:
        assert run(CombineInput(["a", "b"], 1)).items == [["a"], ["b"]]
        result = run(GroupInput(["a", "b"], (1, 2)))
        assert result.success is False
        assert result.errors[0].code == "size_mismatch"

    def test_sort(self) -> None:
        result = run(SortInput("length_sort", [["a", "b"], ["c"]]))
        assert result.items == [["c"], ["a", "b"]]

    def test_unknown_input(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run(object())  # type: ignore[arg-type]
