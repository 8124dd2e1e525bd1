"""Per-slot selection state.

Holds exactly one entry per slot, each either empty (None) or one
candidate from that slot's pool. Mutated only through toggle and
reset_all; every mutation emits a fresh snapshot to subscribers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from raidboard.models.domain import Candidate, SelectionVector, Slot

logger = logging.getLogger(__name__)

SelectionListener = Callable[[SelectionVector], None]


class InvalidSlotReferenceError(ValueError):
    """A candidate was toggled in a slot whose pool does not contain it."""


class SelectionStore:
    """Fixed-size selection vector with single selection per slot.

    Cross-slot duplicates (the same character under two searched players)
    are allowed and not deduplicated.
    """

    def __init__(self, slots: Sequence[Slot]):
        """Initialize an all-empty store.

        Args:
            slots: Slots of the match; the vector length is fixed to this.
        """
        self._slots = tuple(slots)
        self._entries: list[Candidate | None] = [None] * len(self._slots)
        self._listeners: list[SelectionListener] = []

    @property
    def selections(self) -> SelectionVector:
        """Current snapshot."""
        return tuple(self._entries)

    @property
    def selected_count(self) -> int:
        return sum(1 for c in self._entries if c is not None)

    @property
    def has_selection(self) -> bool:
        return self.selected_count > 0

    def selected_in(self, slot_index: int) -> Candidate | None:
        return self._entries[slot_index]

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """Register a snapshot listener.

        Returns:
            Callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def toggle(self, slot_index: int, candidate: Candidate) -> SelectionVector:
        """Select or deselect a candidate in a slot.

        Deselects when the slot already holds a candidate with the same
        identity; otherwise selects it, replacing any prior selection.

        Args:
            slot_index: Slot position (caller guarantees it is in range).
            candidate: Candidate from that slot's pool.

        Returns:
            The new snapshot.

        Raises:
            InvalidSlotReferenceError: If the candidate is not in the slot.
        """
        slot = self._slots[slot_index]
        if slot.index_of(candidate) < 0:
            raise InvalidSlotReferenceError(
                f"{candidate.name}@{candidate.server} is not a candidate of slot "
                f"{slot_index} ({slot.label})"
            )

        current = self._entries[slot_index]
        if current is not None and current.identity == candidate.identity:
            self._entries[slot_index] = None
            logger.debug(f"Deselected {candidate.name} in slot {slot_index}")
        else:
            self._entries[slot_index] = candidate
            logger.debug(f"Selected {candidate.name} in slot {slot_index}")

        return self._emit()

    def reset_all(self) -> SelectionVector:
        """Clear every slot."""
        for i in range(len(self._entries)):
            self._entries[i] = None
        return self._emit()

    def _emit(self) -> SelectionVector:
        snapshot = self.selections
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot
