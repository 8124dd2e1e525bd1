"""Bounded candidate lists with a pinned selection.

Each slot shows its first INITIAL_SHOW_COUNT candidates while collapsed.
A selected candidate beyond that page is appended to the end so the
active pick is always visible, and hidden_count always equals what a
full expand would additionally reveal.

Decision table for a collapsed slot with more than INITIAL_SHOW_COUNT
candidates:

    selection        rows                     hidden_count
    ---------        ----                     ------------
    absent           first N                  total - N
    within page      first N                  total - N
    beyond page      first N + selection      total - N - 1
"""

from __future__ import annotations

from dataclasses import dataclass

from raidboard.models.domain import Candidate, Slot

INITIAL_SHOW_COUNT = 3


@dataclass(frozen=True)
class VisibleRows:
    """Rows to render for one slot.

    Attributes:
        candidates: Candidates to render, in display order.
        hidden_count: Candidates a full expand would additionally reveal.
        has_more: Whether the slot needs an expand/collapse control.
    """

    candidates: tuple[Candidate, ...]
    hidden_count: int
    has_more: bool


def visible_rows(
    slot: Slot,
    is_expanded: bool,
    selected: Candidate | None,
    page_size: int = INITIAL_SHOW_COUNT,
) -> VisibleRows:
    """Compute the visible subset of a slot's candidates.

    Args:
        slot: Slot to render.
        is_expanded: Whether the operator expanded this slot.
        selected: Candidate currently selected in this slot, if any.
        page_size: Collapsed page size.

    Returns:
        VisibleRows for the slot.
    """
    candidates = slot.candidates
    total = len(candidates)
    has_more = total > page_size

    if not has_more or is_expanded:
        return VisibleRows(candidates=candidates, hidden_count=0, has_more=has_more)

    page = candidates[:page_size]
    selected_index = slot.index_of(selected)

    if selected_index < 0:
        return VisibleRows(candidates=page, hidden_count=total - page_size, has_more=True)

    if selected_index < page_size:
        return VisibleRows(candidates=page, hidden_count=total - page_size, has_more=True)

    return VisibleRows(
        candidates=page + (candidates[selected_index],),
        hidden_count=total - page_size - 1,
        has_more=True,
    )


class VisibilityController:
    """Per-slot expand/collapse flags for one card.

    Flags are created lazily on first interaction and default to collapsed.
    Collapsing a slot never touches its selection.
    """

    def __init__(self, page_size: int = INITIAL_SHOW_COUNT):
        self.page_size = page_size
        self._expanded: dict[int, bool] = {}

    def is_expanded(self, slot_index: int) -> bool:
        return self._expanded.get(slot_index, False)

    def toggle_expand(self, slot_index: int) -> bool:
        """Flip a slot's flag and return the new value."""
        self._expanded[slot_index] = not self.is_expanded(slot_index)
        return self._expanded[slot_index]

    def reset(self) -> None:
        self._expanded.clear()

    def visible_rows(
        self,
        slot_index: int,
        slot: Slot,
        selected: Candidate | None,
    ) -> VisibleRows:
        return visible_rows(
            slot,
            is_expanded=self.is_expanded(slot_index),
            selected=selected,
            page_size=self.page_size,
        )
