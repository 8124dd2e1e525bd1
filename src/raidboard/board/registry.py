"""In-memory registry of displayed raid cards.

Cards are keyed by raid identity. Loading a match is the reset boundary:
an existing card for the same raid is disposed and replaced by a fresh,
all-empty one.
"""

from __future__ import annotations

import logging

from raidboard.board.card import RaidCard
from raidboard.models.domain import GroupedMatch
from raidboard.share.clipboard import ClipboardBase
from raidboard.share.controller import COPIED_REVERT_SECONDS

logger = logging.getLogger(__name__)


class BoardRegistry:
    """Owns one RaidCard per raid identity."""

    def __init__(self, clipboard: ClipboardBase, revert_delay: float = COPIED_REVERT_SECONDS):
        self.clipboard = clipboard
        self.revert_delay = revert_delay
        self._cards: dict[str, RaidCard] = {}

    def __contains__(self, raid_id: object) -> bool:
        return raid_id in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def load(self, match: GroupedMatch) -> RaidCard:
        """Display a match, replacing any card for the same raid."""
        previous = self._cards.pop(match.raid_id, None)
        if previous is not None:
            previous.dispose()

        card = RaidCard(match, self.clipboard, revert_delay=self.revert_delay)
        self._cards[match.raid_id] = card
        logger.info(
            f"Loaded raid {match.raid_id} ({match.raid_name}) with {len(match.slots)} slots"
        )
        return card

    def get(self, raid_id: str) -> RaidCard:
        """Get a card.

        Raises:
            KeyError: If the raid is not displayed.
        """
        return self._cards[raid_id]

    def remove(self, raid_id: str) -> None:
        card = self._cards.pop(raid_id)
        card.dispose()

    def clear(self) -> None:
        for card in self._cards.values():
            card.dispose()
        self._cards.clear()
