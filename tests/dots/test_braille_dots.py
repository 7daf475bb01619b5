"""Tests for dots.types: BrailleDots value type and its codecs."""

import pytest

from learnbraille.dots import BRAILLE_RANGE_START, BrailleDots


class TestConstruction:
    def test_default_is_empty_cell(self):
        dots = BrailleDots()
        assert dots.raised == frozenset()
        assert len(dots) == 0

    def test_of_collects_positions(self):
        assert BrailleDots.of(1, 2, 5).raised == frozenset({1, 2, 5})

    def test_iterable_is_stored_as_frozenset(self):
        dots = BrailleDots([3, 1])  # type: ignore[arg-type]
        assert isinstance(dots.raised, frozenset)
        assert dots == BrailleDots.of(1, 3)

    @pytest.mark.parametrize("pos", [0, 9, -1])
    def test_rejects_out_of_range_position(self, pos):
        with pytest.raises(ValueError, match="1..8"):
            BrailleDots.of(pos)

    def test_rejects_non_int_position(self):
        with pytest.raises(ValueError, match="must be an int"):
            BrailleDots(frozenset({"1"}))  # type: ignore[arg-type]

    def test_eight_dot_positions_accepted(self):
        assert 8 in BrailleDots.of(7, 8)

    def test_is_frozen(self):
        dots = BrailleDots.of(1)
        with pytest.raises(AttributeError):
            dots.raised = frozenset({2})  # type: ignore[misc]


class TestEquality:
    def test_same_positions_are_equal(self):
        assert BrailleDots.of(1, 2) == BrailleDots.of(2, 1)

    def test_different_positions_are_not_equal(self):
        assert BrailleDots.of(1, 2) != BrailleDots.of(3)

    def test_never_equal_to_none(self):
        assert BrailleDots.of(1) != None  # noqa: E711

    def test_hashable_and_usable_as_key(self):
        table = {BrailleDots.of(1): "a"}
        assert table[BrailleDots.of(1)] == "a"


class TestSpelling:
    def test_spelling_is_sorted_and_dashed(self):
        assert BrailleDots.of(5, 1, 2).spelling == "1-2-5"

    def test_empty_spelling(self):
        assert BrailleDots().spelling == ""
        assert BrailleDots.from_spelling("") == BrailleDots()

    def test_from_spelling(self):
        assert BrailleDots.from_spelling("1-2-5") == BrailleDots.of(1, 2, 5)

    def test_from_spelling_tolerates_spaces(self):
        assert BrailleDots.from_spelling(" 1 - 4 ") == BrailleDots.of(1, 4)

    def test_from_spelling_rejects_garbage(self):
        with pytest.raises(ValueError, match="not a position"):
            BrailleDots.from_spelling("1-x")

    def test_str_is_spelling(self):
        assert str(BrailleDots.of(2, 4)) == "2-4"


class TestUnicode:
    def test_empty_cell_is_blank_pattern(self):
        assert BrailleDots().to_unicode() == chr(BRAILLE_RANGE_START)

    def test_letter_a(self):
        assert BrailleDots.of(1).to_unicode() == "⠁"

    def test_dot_7_and_8_bits(self):
        assert BrailleDots.of(7).to_unicode() == "⡀"
        assert BrailleDots.of(8).to_unicode() == "⢀"

    def test_from_unicode(self):
        # ⠓ is dots 1-2-5 (letter h)
        assert BrailleDots.from_unicode("⠓") == BrailleDots.of(1, 2, 5)

    def test_from_unicode_rejects_other_characters(self):
        with pytest.raises(ValueError, match="outside"):
            BrailleDots.from_unicode("a")

    def test_from_unicode_rejects_strings(self):
        with pytest.raises(ValueError, match="single"):
            BrailleDots.from_unicode("⠁⠁")
