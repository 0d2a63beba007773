"""Tests for structural combinators."""

import pytest

from lazyseq import count, empty, seq

from conftest import CountingCursor


class TestConcatenation:
    def test_append(self):
        assert seq([1, 2]).append(3).to_list() == [1, 2, 3]

    def test_prepend(self):
        assert seq([2, 3]).prepend(1).to_list() == [1, 2, 3]

    def test_concat(self):
        assert seq([1, 2]).concat(seq([3, 4])).to_list() == [1, 2, 3, 4]

    def test_prepend_many(self):
        assert seq([3]).prepend_many([1, 2]).to_list() == [1, 2, 3]

    def test_concat_pulls_tail_only_after_receiver(self):
        tail = CountingCursor(limit=2)
        joined = seq(["a", "b"]).concat(tail)
        assert [next(joined), next(joined)] == ["a", "b"]
        assert tail.pulls == 0
        assert joined.to_list() == [0, 1]

    def test_concat_on_empty(self):
        assert empty().concat([1]).to_list() == [1]


class TestInterpose:
    def test_fixed_separator(self):
        assert seq([1, 2, 3]).interpose(0).to_list() == [1, 0, 2, 0, 3]

    def test_single_and_empty(self):
        assert seq([1]).interpose(0).to_list() == [1]
        assert empty().interpose(0).to_list() == []

    def test_computed_separator(self):
        result = seq([1, 2, 3, 5, 8, 13]).interpose_with(lambda a, b: (a + b) / 2).to_list()
        assert result == [1, 1.5, 2, 2.5, 3, 4, 5, 6.5, 8, 10.5, 13]

    def test_computed_separator_with_pair_index(self):
        result = seq("abc").interpose_with(lambda lhs, rhs, i: f"{lhs}{rhs}{i}").to_list()
        assert result == ["a", "ab0", "b", "bc1", "c"]


class TestInterleave:
    def test_equal_lengths(self):
        assert seq([1, 3]).interleave([2, 4]).to_list() == [1, 2, 3, 4]

    def test_receiver_longer(self):
        assert seq([1, 3, 5, 6]).interleave([2, 4]).to_list() == [1, 2, 3, 4, 5, 6]

    def test_other_longer(self):
        assert seq([1]).interleave([2, 3, 4]).to_list() == [1, 2, 3, 4]

    def test_empty_receiver(self):
        assert empty().interleave("ab").to_list() == ["a", "b"]


class TestChunk:
    def test_even(self):
        assert seq([1, 2, 3, 4]).chunk(2).to_list() == [[1, 2], [3, 4]]

    def test_remainder(self):
        assert seq([1, 2, 3]).chunk(2).to_list() == [[1, 2], [3]]

    def test_empty(self):
        assert empty().chunk(3).to_list() == []

    def test_infinite_source(self):
        assert count().chunk(3).take(2).to_list() == [[0, 1, 2], [3, 4, 5]]

    def test_pulls_one_chunk_at_a_time(self, counting):
        chunks = seq(counting).chunk(4)
        assert next(chunks) == [0, 1, 2, 3]
        assert counting.pulls == 4

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            seq([1]).chunk(0)

    def test_chunk_with(self):
        result = seq([1, 1, 2, 3, 3, 3, 2, 2]).chunk_with(lambda lhs, rhs: lhs == rhs).to_list()
        assert result == [[1, 1], [2], [3, 3, 3], [2, 2]]

    def test_chunk_with_empty(self):
        assert empty().chunk_with(lambda lhs, rhs: True).to_list() == []


class TestUnzip:
    def test_pairs(self):
        left, right = seq([(1, "a"), (2, "b")]).unzip()
        assert left.to_list() == [1, 2]
        assert right.to_list() == ["a", "b"]

    def test_round_trip_with_zip(self):
        numbers, letters, flags = seq([1, 2]).zip("xy", [True, False]).unzip(3)
        assert flags.to_list() == [True, False]
        assert numbers.to_list() == [1, 2]
        assert letters.to_list() == ["x", "y"]

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            seq([(1,)]).unzip(0)

    def test_closing_every_branch_releases_source(self):
        source = CountingCursor()
        left, right = seq(source).map(lambda x: (x, x)).unzip()
        left.close()
        assert not source.closed
        right.close()
        assert source.closed

    def test_closed_branch_leaves_the_other_readable(self):
        source = CountingCursor(limit=3)
        left, right = seq(source).map(lambda x: (x, -x)).unzip()
        assert left.first() == 0
        assert not source.closed
        assert right.to_list() == [0, -1, -2]
        assert source.closed


class TestDefaultIfEmpty:
    def test_empty_uses_provider(self):
        assert empty().default_if_empty(lambda: 42).to_list() == [42]

    def test_non_empty_is_unchanged(self):
        calls = []
        result = seq([1, 2]).default_if_empty(lambda: calls.append(1)).to_list()
        assert result == [1, 2]
        assert calls == []


class TestLoop:
    def test_times(self):
        assert seq([1, 2, 3]).loop(3).to_list() == [1, 2, 3, 1, 2, 3, 1, 2, 3]

    def test_forever(self):
        assert seq("ab").loop().take(5).to_list() == ["a", "b", "a", "b", "a"]

    def test_zero_times(self):
        assert seq([1, 2]).loop(0).to_list() == []

    def test_empty_forever_terminates(self):
        assert empty().loop().to_list() == []
