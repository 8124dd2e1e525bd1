"""Raid card: one displayed match and its interaction state.

Architecture:
- RaidCard: owns the selection store, visibility flags and share
  controller for exactly one GroupedMatch
- render(): builds the CardView payload from current state; aggregation
  and visibility are recomputed on every render
"""

from __future__ import annotations

import logging

from raidboard.aggregation.summary import resolve_aggregate
from raidboard.core.power import format_power
from raidboard.models.domain import Candidate, GroupedMatch, PartySummary, SelectionVector
from raidboard.models.types import CardView, CharacterRow, SlotView
from raidboard.selection.store import SelectionStore
from raidboard.selection.visibility import VisibilityController
from raidboard.share.clipboard import ClipboardBase
from raidboard.share.controller import COPIED_REVERT_SECONDS, ShareController
from raidboard.share.formatter import format_share_text

logger = logging.getLogger(__name__)

# Classes rendered with the support icon, independent of the role tag
SUPPORT_CLASSES = frozenset(
    {"Bard", "Paladin", "Artist", "바드", "홀리나이트", "도화가"}
)

HARD_DIFFICULTIES = frozenset({"hard", "하드"})
NIGHTMARE_DIFFICULTIES = frozenset({"nightmare", "나메", "나이트메어"})


def difficulty_tone(difficulty: str) -> str:
    """Badge tone for a difficulty label."""
    key = difficulty.strip().lower()
    if key in HARD_DIFFICULTIES:
        return "hard"
    if key in NIGHTMARE_DIFFICULTIES:
        return "nightmare"
    return "normal"


def level_display(item_level: str) -> str:
    """Integer part of an item level label ("1680.83" -> "1680")."""
    return item_level.split(".")[0]


class RaidCard:
    """Interaction state for one displayed raid."""

    def __init__(
        self,
        match: GroupedMatch,
        clipboard: ClipboardBase,
        revert_delay: float = COPIED_REVERT_SECONDS,
    ):
        """Initialize card with all slots empty and collapsed.

        Args:
            match: Match to display; read-only for the card's lifetime.
            clipboard: Clipboard used by the share action.
            revert_delay: Seconds the copied indicator stays on.
        """
        self.match = match
        self.store = SelectionStore(match.slots)
        self.visibility = VisibilityController()
        self.sharer = ShareController(clipboard, revert_delay=revert_delay)

    @property
    def raid_id(self) -> str:
        return self.match.raid_id

    @property
    def selections(self) -> SelectionVector:
        return self.store.selections

    @property
    def aggregate(self) -> PartySummary:
        return resolve_aggregate(self.match, self.store.selections)

    @property
    def copied(self) -> bool:
        return self.sharer.copied

    def toggle_selection(self, slot_index: int, candidate: Candidate) -> SelectionVector:
        return self.store.toggle(slot_index, candidate)

    def reset_all(self) -> SelectionVector:
        """Clear all selections and expand flags."""
        self.visibility.reset()
        logger.debug(f"Reset selections for raid {self.raid_id}")
        return self.store.reset_all()

    def toggle_expand(self, slot_index: int) -> bool:
        return self.visibility.toggle_expand(slot_index)

    def share_text(self) -> str | None:
        return format_share_text(self.match, self.store.selections, self.aggregate)

    async def share(self) -> tuple[str | None, bool]:
        """Copy the party summary to the clipboard.

        Returns:
            Tuple of (share text or None when nothing is selected, copied).
        """
        text = self.share_text()
        if text is None:
            return None, False
        copied = await self.sharer.share(text)
        return text, copied

    def dispose(self) -> None:
        self.sharer.dispose()

    def render(self) -> CardView:
        """Build the card payload from current state."""
        aggregate = self.aggregate
        return CardView(
            raid_id=self.match.raid_id,
            raid_name=self.match.raid_name,
            difficulty=self.match.difficulty,
            difficulty_tone=difficulty_tone(self.match.difficulty),
            level=self.match.level,
            average_power=format_power(aggregate.average_power),
            dealer_count=aggregate.damage_count,
            support_count=aggregate.support_count,
            selected_count=self.store.selected_count,
            has_selection=self.store.has_selection,
            copied=self.sharer.copied,
            slots=self._render_slots(),
        )

    def _render_slots(self) -> list[SlotView]:
        views: list[SlotView] = []
        for slot_index, slot in enumerate(self.match.slots):
            # Players with no eligible characters get no column
            if not slot.candidates:
                continue

            selected = self.store.selected_in(slot_index)
            rows = self.visibility.visible_rows(slot_index, slot, selected)
            views.append(
                SlotView(
                    slot_index=slot_index,
                    label=slot.label,
                    candidate_count=len(slot.candidates),
                    rows=[_render_row(c, selected) for c in rows.candidates],
                    hidden_count=rows.hidden_count,
                    has_more=rows.has_more,
                    is_expanded=self.visibility.is_expanded(slot_index),
                )
            )
        return views


def _render_row(candidate: Candidate, selected: Candidate | None) -> CharacterRow:
    return CharacterRow(
        name=candidate.name,
        server=candidate.server,
        class_name=candidate.class_name,
        class_kind="support" if candidate.class_name in SUPPORT_CLASSES else "damage",
        role=candidate.role,
        power=format_power(candidate.power),
        level=level_display(candidate.item_level),
        ark_passive=candidate.ark_passive,
        synergy=None if candidate.is_support else candidate.synergy,
        is_selected=selected is not None and selected.identity == candidate.identity,
    )
