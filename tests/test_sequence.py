"""
Tests for growable sequences (Slice).

These tests verify:
    - Allocation and argument validation
    - Bounds-checked indexing
    - append() prefix preservation, in-place growth and reallocation
    - copy() counts and overlap handling
    - Sub-range views and aliasing of backing storage
    - Equality, nil vs empty
"""

import logging

import pytest
from hypothesis import given, strategies as st

from seqmap.errors import InvalidArgumentError, OutOfRangeError
from seqmap.sequence import (
    GROWTH_THRESHOLD,
    Slice,
    append,
    cap,
    copy,
    grow_capacity,
    make,
    slices_equal,
    subrange,
)


def abc() -> Slice:
    s = make(3, kind=str)
    s[0], s[1], s[2] = "a", "b", "c"
    return s


class TestMake:
    """Test slice allocation."""

    def test_zero_valued_elements(self):
        """make(3) of str holds three empty strings."""
        s = make(3, kind=str)
        assert s.to_list() == ["", "", ""]
        assert len(s) == 3
        assert cap(s) == 3

    def test_explicit_capacity(self):
        """Capacity may exceed length."""
        s = make(2, 10, kind=int)
        assert s.to_list() == [0, 0]
        assert cap(s) == 10

    def test_zero_length(self):
        """make(0) is empty but not nil."""
        s = make(0)
        assert len(s) == 0
        assert not s.is_nil

    @pytest.mark.parametrize("length,capacity", [(-1, None), (3, 2), (0, -1), (-2, -1)])
    def test_invalid_arguments_rejected(self, length, capacity):
        """Negative sizes and capacity < length are rejected, never clamped."""
        with pytest.raises(InvalidArgumentError):
            make(length, capacity)

    def test_invalid_argument_is_value_error(self):
        """InvalidArgumentError is also a ValueError."""
        with pytest.raises(ValueError):
            make(3, 1)

    def test_nested_zero_is_nil(self):
        """Elements of a slice of slices start out nil."""
        outer = make(2, kind=Slice)
        assert all(inner.is_nil for inner in outer)


class TestNil:
    """Test the uninitialized slice."""

    def test_nil_properties(self):
        s = Slice.nil(str)
        assert s.is_nil
        assert len(s) == 0
        assert cap(s) == 0
        assert s.to_list() == []

    def test_nil_equals_empty(self):
        """Element equality treats nil and empty alike; is_nil tells them apart."""
        assert Slice.nil(str) == make(0)
        assert not make(0).is_nil

    def test_append_to_nil(self):
        s = append(Slice.nil(str), "x")
        assert s.to_list() == ["x"]
        assert not s.is_nil

    def test_nil_full_subrange(self):
        assert subrange(Slice.nil(int), 0, 0).is_nil


class TestIndexing:
    """Test bounds-checked element access."""

    def test_set_and_get(self):
        s = abc()
        assert s.to_list() == ["a", "b", "c"]
        assert s[2] == "c"

    @pytest.mark.parametrize("index", [3, 4, -1])
    def test_get_out_of_range(self, index):
        """Indices outside [0, len) fail; negative indices do not wrap."""
        with pytest.raises(OutOfRangeError):
            abc()[index]

    def test_set_out_of_range_does_not_mutate(self):
        """A failed write leaves every element unchanged."""
        s = make(2, 4, kind=int)
        with pytest.raises(OutOfRangeError):
            s[2] = 9
        assert s.to_list() == [0, 0]
        assert append(s, 1).to_list() == [0, 0, 1]

    def test_index_within_capacity_but_past_length(self):
        """Capacity beyond length is not indexable."""
        s = make(1, 5)
        with pytest.raises(OutOfRangeError):
            s.index_get(1)

    def test_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            Slice.nil(str)[0]

    def test_sub_range_assignment_not_supported(self):
        with pytest.raises(TypeError):
            abc()[0:1] = ["z"]


class TestAppend:
    """Test append() growth and aliasing behavior."""

    def test_append_one_then_many(self):
        s = abc()
        s = append(s, "d")
        s = append(s, "e", "f")
        assert s.to_list() == ["a", "b", "c", "d", "e", "f"]
        assert len(s) == 6

    def test_append_nothing_returns_same_view(self):
        s = abc()
        assert append(s) is s

    def test_append_within_capacity_shares_buffer(self):
        """With spare capacity the result aliases the source buffer."""
        s = make(2, 4, kind=int)
        grown = append(s, 7)
        assert grown.shares_buffer(s)
        grown[0] = 1
        assert s[0] == 1
        # the source view keeps its own length
        assert len(s) == 2

    def test_append_past_capacity_detaches(self):
        """A reallocating append returns a view over new storage."""
        s = abc()
        grown = append(s, "d")
        assert not grown.shares_buffer(s)
        grown[0] = "z"
        assert s[0] == "a"
        assert cap(grown) >= 4

    def test_reallocation_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="seqmap.sequence"):
            append(make(1), "x")
        assert "reallocating" in caplog.text

    def test_sibling_views_overwrite_each_other(self):
        """Two in-capacity appends from one view write the same cell."""
        base = make(1, 3, kind=str)
        first = append(base, "x")
        second = append(base, "y")
        assert first[1] == "y"
        assert second[1] == "y"

    def test_append_through_subrange_writes_into_original(self):
        """A view's spare capacity is the original's tail."""
        s = Slice.of(int, 1, 2, 3, 4)
        head = s[:2]
        head = append(head, 99)
        assert s.to_list() == [1, 2, 99, 4]
        assert head.to_list() == [1, 2, 99]

    @given(st.lists(st.integers()), st.lists(st.integers()), st.integers(min_value=0, max_value=8))
    def test_prefix_preserved(self, original, extra, spare):
        """The result is the original followed by the appended values."""
        s = make(len(original), len(original) + spare, kind=int)
        for i, v in enumerate(original):
            s[i] = v
        result = append(s, *extra)
        assert len(result) == len(original) + len(extra)
        assert result.to_list() == original + extra
        assert cap(result) >= len(result)


class TestGrowCapacity:
    """Test the reallocation growth policy."""

    def test_doubles_small_capacity(self):
        assert grow_capacity(3, 4) == 6

    def test_jumps_to_needed_when_doubling_is_short(self):
        assert grow_capacity(2, 9) == 9
        assert grow_capacity(0, 1) == 1

    def test_slower_growth_past_threshold(self):
        new_cap = grow_capacity(GROWTH_THRESHOLD * 4, GROWTH_THRESHOLD * 4 + 1)
        assert GROWTH_THRESHOLD * 4 < new_cap < GROWTH_THRESHOLD * 8

    @given(st.integers(min_value=0, max_value=5000), st.integers(min_value=1, max_value=5000))
    def test_covers_needed(self, old, extra):
        needed = old + extra
        assert grow_capacity(old, needed) >= needed


class TestCopy:
    """Test element-wise copy()."""

    def test_copy_all(self):
        src = append(abc(), "d", "e", "f")
        dst = make(len(src), kind=str)
        assert copy(dst, src) == 6
        assert dst.to_list() == ["a", "b", "c", "d", "e", "f"]
        assert not dst.shares_buffer(src)

    def test_copy_into_shorter(self):
        dst = make(2, kind=str)
        assert copy(dst, abc()) == 2
        assert dst.to_list() == ["a", "b"]

    def test_copy_from_shorter_does_not_resize(self):
        dst = Slice.of(str, "x", "y", "z", "w")
        assert copy(dst, Slice.of(str, "a")) == 1
        assert dst.to_list() == ["a", "y", "z", "w"]

    def test_copy_with_nil(self):
        assert copy(make(3), Slice.nil(str)) == 0
        assert copy(Slice.nil(str), abc()) == 0

    def test_overlapping_copy(self):
        """Copying between overlapping views of one buffer uses the source as it was."""
        s = Slice.of(int, 1, 2, 3, 4, 5)
        assert copy(s[1:], s) == 4
        assert s.to_list() == [1, 1, 2, 3, 4]


class TestSubrange:
    """Test non-copying sub-range views."""

    def setup_method(self):
        self.s = append(abc(), "d", "e", "f")

    def test_bounded(self):
        assert self.s[2:5].to_list() == ["c", "d", "e"]

    def test_open_low(self):
        assert self.s[:5].to_list() == ["a", "b", "c", "d", "e"]

    def test_open_high(self):
        assert self.s[2:].to_list() == ["c", "d", "e", "f"]

    def test_view_capacity_runs_to_buffer_end(self):
        view = subrange(self.s, 2, 5)
        assert cap(view) == cap(self.s) - 2

    def test_write_through_view(self):
        view = self.s[2:5]
        view[0] = "C"
        assert self.s[2] == "C"

    def test_write_through_original(self):
        view = self.s.subrange(1, 3)
        self.s[2] = "X"
        assert view[1] == "X"

    def test_empty_view(self):
        view = self.s[3:3]
        assert len(view) == 0
        assert not view.is_nil

    @pytest.mark.parametrize("low,high", [(0, 7), (4, 3), (-1, 2), (7, 8)])
    def test_out_of_range(self, low, high):
        with pytest.raises(OutOfRangeError):
            subrange(self.s, low, high)

    def test_step_rejected(self):
        with pytest.raises(InvalidArgumentError):
            self.s[::2]

    @given(st.lists(st.integers(), min_size=1), st.data())
    def test_view_length_and_aliasing(self, values, data):
        """A view has high - low elements and writes through it reach the original."""
        s = Slice.of(int, *values)
        low = data.draw(st.integers(min_value=0, max_value=len(values)))
        high = data.draw(st.integers(min_value=low, max_value=len(values)))
        view = subrange(s, low, high)
        assert len(view) == high - low
        if high > low:
            i = data.draw(st.integers(min_value=low, max_value=high - 1))
            view[i - low] = -12345
            assert s[i] == -12345


class TestEquality:
    """Test slices_equal() and ==."""

    def test_literals_equal(self):
        t = Slice.of(str, "g", "h", "i")
        t2 = Slice.of(str, "g", "h", "i")
        assert slices_equal(t, t2)
        assert t == t2

    def test_length_differs(self):
        assert not slices_equal(Slice.of(int, 1, 2), Slice.of(int, 1, 2, 3))

    def test_element_differs(self):
        assert Slice.of(int, 1, 2) != Slice.of(int, 1, 3)

    def test_capacity_ignored(self):
        a = make(2, 8, kind=int)
        assert a == Slice.of(int, 0, 0)

    def test_nested(self):
        a = Slice.of(Slice, Slice.of(int, 1), Slice.of(int, 2, 3))
        b = Slice.of(Slice, Slice.of(int, 1), Slice.of(int, 2, 3))
        assert a == b

    def test_not_equal_to_list(self):
        assert Slice.of(int, 1) != [1]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Slice.of(int, 1))

    @given(st.lists(st.integers()), st.lists(st.integers()))
    def test_reflexive_and_symmetric(self, xs, ys):
        a, b = Slice.of(int, *xs), Slice.of(int, *ys)
        assert slices_equal(a, a)
        assert slices_equal(a, b) == slices_equal(b, a)
        assert slices_equal(a, b) == (xs == ys)
