"""Tests for element-wise combinators."""

import pytest

from lazyseq import InvalidSourceError, seq

from conftest import CountingCursor


class TestMap:
    def test_value_only(self):
        assert seq([1, 2, 3]).map(lambda x: x * 2).to_list() == [2, 4, 6]

    def test_with_index(self):
        assert seq("abc").map(lambda ch, i: f"{i}{ch}").to_list() == ["0a", "1b", "2c"]

    def test_defaulted_parameter_does_not_receive_index(self):
        assert seq([1, 2, 3]).map(lambda x, scale=2: x * scale).to_list() == [2, 4, 6]

    def test_builtin_callback(self):
        assert seq(["a", "b"]).map(str.upper).to_list() == ["A", "B"]
        assert seq(["1", "22"]).map(len).to_list() == [1, 2]

    def test_lazy_until_pulled(self):
        calls = []
        mapped = seq([1, 2]).map(lambda x: calls.append(x) or x)
        assert calls == []
        assert mapped.first() == 1
        assert calls == [1]

    def test_callback_errors_propagate(self):
        mapped = seq([1, 0]).map(lambda x: 1 / x)
        assert next(mapped) == 1
        with pytest.raises(ZeroDivisionError):
            next(mapped)


class TestFilter:
    def test_predicate(self):
        assert seq([1, 2, 3, 4]).filter(lambda x: x % 2 == 0).to_list() == [2, 4]

    def test_with_index(self):
        assert seq("abcd").filter(lambda _ch, i: i % 2 == 1).to_list() == ["b", "d"]


def test_compact_drops_none_only():
    assert seq([1, None, 0, "", None, 3]).compact().to_list() == [1, 0, "", 3]


def test_with_each_taps_without_changing():
    seen = []
    result = seq([1, 2, 3]).with_each(lambda x, i: seen.append((i, x))).to_list()
    assert result == [1, 2, 3]
    assert seen == [(0, 1), (1, 2), (2, 3)]


class TestFlatten:
    def test_flat_map(self):
        assert seq([1, 2]).flat_map(lambda x: [x, x * 10]).to_list() == [1, 10, 2, 20]

    def test_flatten_one_level(self):
        assert seq([[1, [2]], (3,), []]).flatten().to_list() == [1, [2], 3]

    def test_flatten_nested_sequences(self):
        assert seq([seq([1, 2]), seq([3])]).flatten().to_list() == [1, 2, 3]

    def test_non_source_element(self):
        with pytest.raises(InvalidSourceError):
            seq([[1], 2]).flatten().to_list()

    def test_releases_inner_source_on_early_stop(self):
        inner = CountingCursor()
        assert seq([inner]).flatten().take(2).to_list() == [0, 1]
        assert inner.closed

    def test_flat_map_releases_inner_source_on_close(self):
        inner = CountingCursor()
        flattened = seq([1]).flat_map(lambda _x: inner)
        assert next(flattened) == 0
        flattened.close()
        assert inner.closed


class TestUnique:
    def test_default_key(self):
        assert seq([1, 2, 2, 3, 1]).unique().to_list() == [1, 2, 3]

    def test_key_function_keeps_first(self):
        words = ["apple", "avocado", "banana", "blueberry", "cherry"]
        assert seq(words).unique(lambda w: w[0]).to_list() == ["apple", "banana", "cherry"]
