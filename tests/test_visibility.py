"""Tests for bounded candidate visibility."""

from conftest import make_candidate

from raidboard.models.domain import Slot
from raidboard.selection.visibility import (
    INITIAL_SHOW_COUNT,
    VisibilityController,
    visible_rows,
)


def names(rows) -> list[str]:
    return [c.name for c in rows.candidates]


class TestSmallSlots:
    """Slots at or below the page size show everything."""

    def test_page_size_is_three(self):
        assert INITIAL_SHOW_COUNT == 3

    def test_exactly_page_size(self):
        """Three candidates: full list, nothing hidden, no control."""
        slot = Slot("S", tuple(make_candidate(f"C{i}") for i in range(3)))
        rows = visible_rows(slot, is_expanded=False, selected=None)
        assert names(rows) == ["C0", "C1", "C2"]
        assert rows.hidden_count == 0
        assert rows.has_more is False

    def test_empty_slot(self):
        rows = visible_rows(Slot("S", ()), is_expanded=False, selected=None)
        assert rows.candidates == ()
        assert rows.hidden_count == 0


class TestCollapsed:
    """Collapsed slots larger than the page size."""

    def test_no_selection(self, five_slot):
        """First three shown, two hidden."""
        rows = visible_rows(five_slot, is_expanded=False, selected=None)
        assert names(rows) == ["Char0", "Char1", "Char2"]
        assert rows.hidden_count == 2
        assert rows.has_more is True

    def test_selection_within_page(self, five_slot):
        """A selection already on the page changes nothing."""
        rows = visible_rows(five_slot, is_expanded=False, selected=five_slot.candidates[1])
        assert names(rows) == ["Char0", "Char1", "Char2"]
        assert rows.hidden_count == 2

    def test_selection_beyond_page_is_pinned(self, five_slot):
        """Selection at position 4 is appended; one candidate stays hidden."""
        rows = visible_rows(five_slot, is_expanded=False, selected=five_slot.candidates[4])
        assert names(rows) == ["Char0", "Char1", "Char2", "Char4"]
        assert rows.hidden_count == 1

    def test_selection_at_first_hidden_position(self, five_slot):
        """Selection at position 3 is appended after the page."""
        rows = visible_rows(five_slot, is_expanded=False, selected=five_slot.candidates[3])
        assert names(rows) == ["Char0", "Char1", "Char2", "Char3"]
        assert rows.hidden_count == 1

    def test_pinned_plus_hidden_equals_total(self, five_slot):
        """Visible rows and hidden count always cover the pool exactly."""
        for selected in (None, *five_slot.candidates):
            rows = visible_rows(five_slot, is_expanded=False, selected=selected)
            assert len(rows.candidates) + rows.hidden_count == len(five_slot.candidates)

    def test_four_candidates_selection_last(self):
        """Pinning the only hidden candidate leaves zero hidden."""
        slot = Slot("S", tuple(make_candidate(f"C{i}") for i in range(4)))
        rows = visible_rows(slot, is_expanded=False, selected=slot.candidates[3])
        assert names(rows) == ["C0", "C1", "C2", "C3"]
        assert rows.hidden_count == 0
        assert rows.has_more is True

    def test_selection_matched_by_identity(self, five_slot):
        """An equal-identity copy of a hidden candidate is still pinned."""
        twin = make_candidate("Char4", power=1.0)
        rows = visible_rows(five_slot, is_expanded=False, selected=twin)
        assert rows.candidates[-1] is five_slot.candidates[4]


class TestExpanded:
    """Expanded slots show the full list in order."""

    def test_full_list(self, five_slot):
        rows = visible_rows(five_slot, is_expanded=True, selected=five_slot.candidates[4])
        assert names(rows) == [f"Char{i}" for i in range(5)]
        assert rows.hidden_count == 0
        assert rows.has_more is True


class TestVisibilityController:
    """Per-slot expand flags."""

    def test_default_collapsed(self):
        controller = VisibilityController()
        assert controller.is_expanded(0) is False

    def test_toggle_expand_flips(self):
        """toggle_expand flips and returns the new flag."""
        controller = VisibilityController()
        assert controller.toggle_expand(2) is True
        assert controller.is_expanded(2) is True
        assert controller.toggle_expand(2) is False
        assert controller.is_expanded(2) is False

    def test_flags_are_per_slot(self):
        controller = VisibilityController()
        controller.toggle_expand(0)
        assert controller.is_expanded(1) is False

    def test_reset_clears_flags(self):
        controller = VisibilityController()
        controller.toggle_expand(0)
        controller.reset()
        assert controller.is_expanded(0) is False

    def test_visible_rows_uses_flag(self, five_slot):
        """Controller applies its own flag for the slot."""
        controller = VisibilityController()
        assert controller.visible_rows(0, five_slot, None).hidden_count == 2
        controller.toggle_expand(0)
        assert controller.visible_rows(0, five_slot, None).hidden_count == 0
