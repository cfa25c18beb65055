"""Tests for ranking, the selection policy and selection parsing."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hop import InvalidSelectionError, RankedSelector, SelectionKind, parse_selection
from tests.conftest import NOW


def score_table(table: dict[str, float]):
    return lambda name, _now: table.get(name, 0.0)


class TestRank:
    def test_highest_score_first(self):
        selector = RankedSelector()
        ranked = selector.rank(["low", "high", "mid"], score_table({"high": 2.5, "mid": 1.0}), NOW)
        assert ranked == ["high", "mid", "low"]

    def test_ties_keep_candidate_order(self):
        selector = RankedSelector()
        ranked = selector.rank(["z", "a", "m", "top"], score_table({"top": 1.0}), NOW)
        assert ranked == ["top", "z", "a", "m"]

    def test_empty(self):
        assert RankedSelector().rank([], score_table({}), NOW) == []

    def test_truncated_to_twenty(self):
        names = [f"b{i}" for i in range(30)]
        ranked = RankedSelector().rank(names, score_table({"b29": 5.0}), NOW)
        assert len(ranked) == 20
        assert ranked[0] == "b29"
        assert ranked[1:] == names[:19]

    def test_custom_limit(self):
        assert RankedSelector(limit=2).rank(["a", "b", "c"], score_table({}), NOW) == ["a", "b"]

    def test_passes_now_to_score_fn(self):
        seen: list[float] = []

        def score_fn(name: str, now: float) -> float:
            seen.append(now)
            return 0.0

        RankedSelector().rank(["a", "b"], score_fn, 123.0)
        assert seen == [123.0, 123.0]

    @given(
        st.dictionaries(
            st.text(alphabet="abcdef", min_size=1, max_size=4),
            st.sampled_from([0.0, 0.5, 1.0, 2.5]),
            max_size=25,
        )
    )
    def test_idempotent_on_sorted_input(self, table):
        selector = RankedSelector()
        once = selector.rank(list(table), score_table(table), NOW)
        assert selector.rank(once, score_table(table), NOW) == once


class TestSelect:
    def test_zero_results(self):
        selection = RankedSelector().select([])
        assert selection.kind is SelectionKind.NONE
        assert selection.branch is None

    def test_single_result(self):
        selection = RankedSelector().select(["only"])
        assert selection.kind is SelectionKind.SINGLE
        assert selection.branch == "only"
        assert not selection.multiple_matches

    def test_single_result_even_when_listing(self):
        assert RankedSelector().select(["only"], list_only=True).branch == "only"

    def test_multiple_auto_selects_top(self):
        selection = RankedSelector().select(["higher", "lower"])
        assert selection.kind is SelectionKind.MULTIPLE
        assert selection.branch == "higher"
        assert selection.multiple_matches
        assert selection.candidates == ["higher", "lower"]

    def test_multiple_list_only_selects_nothing(self):
        selection = RankedSelector().select(["a", "b"], list_only=True)
        assert selection.kind is SelectionKind.LIST
        assert selection.branch is None
        assert selection.candidates == ["a", "b"]


class TestParseSelection:
    @pytest.mark.parametrize("reply, index", [("1", 0), ("3", 2), (" 2\n", 1)])
    def test_valid(self, reply: str, index: int):
        assert parse_selection(reply, 3) == index

    @pytest.mark.parametrize("reply", ["5", "0", "4", "-1", "two", "", "1.0"])
    def test_invalid(self, reply: str):
        with pytest.raises(InvalidSelectionError):
            parse_selection(reply, 3)

    def test_error_message_names_range(self):
        with pytest.raises(InvalidSelectionError, match="between 1 and 3"):
            parse_selection("5", 3)
