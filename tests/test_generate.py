"""Tests for construction primitives."""

from lazyseq import CountRange, count, empty, randoms, repeat, seq, zip_seq


def test_empty():
    assert empty().to_list() == []


class TestCount:
    def test_unbounded_from_zero(self):
        assert count().take(5).to_list() == [0, 1, 2, 3, 4]

    def test_start_and_interval(self):
        assert count(5, interval=2).take(5).to_list() == [5, 7, 9, 11, 13]

    def test_end_is_exclusive(self):
        assert count(0, 10, 3).to_list() == [0, 3, 6, 9]

    def test_policy(self):
        policy = CountRange(start=1, end=4)
        assert count(policy=policy).to_list() == [1, 2, 3]

    def test_empty_range(self):
        assert count(3, 3).to_list() == []


class TestRepeat:
    def test_exact_count(self):
        assert repeat(3, "x").to_list() == ["x", "x", "x"]

    def test_non_positive_count(self):
        assert repeat(0, "x").to_list() == []
        assert repeat(-2, "x").to_list() == []

    def test_forever(self):
        assert repeat(None, "x").take(4).to_list() == ["x"] * 4


def test_randoms_are_floats_in_unit_interval():
    values = randoms().take(5).to_list()
    assert len(values) == 5
    assert all(isinstance(v, float) and 0.0 <= v < 1.0 for v in values)


def test_randoms_seeded_are_reproducible():
    assert randoms(seed=7).take(3).to_list() == randoms(seed=7).take(3).to_list()


class TestZip:
    def test_shortest_wins(self):
        assert zip_seq([1, 2, 3], ["a", "b"]).to_list() == [(1, "a"), (2, "b")]

    def test_equal_lengths(self):
        zipped = seq([1, 2, 3]).zip(["a", "b", "c"])
        assert zipped.to_list() == [(1, "a"), (2, "b"), (3, "c")]

    def test_many_operands(self):
        assert zip_seq([1, 2], "xy", (True, False)).to_list() == [(1, "x", True), (2, "y", False)]

    def test_infinite_operand(self):
        assert zip_seq(count(), "abc").to_list() == [(0, "a"), (1, "b"), (2, "c")]

    def test_no_operands(self):
        assert zip_seq().to_list() == []
