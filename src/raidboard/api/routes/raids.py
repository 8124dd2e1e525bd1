"""Raid card API endpoints.

POST   /api/raids                                   - Display a grouped match
GET    /api/raids/{raid_id}                         - Get card payload
DELETE /api/raids/{raid_id}                         - Remove card
POST   /api/raids/{raid_id}/slots/{slot_index}/toggle - Toggle a candidate
POST   /api/raids/{raid_id}/slots/{slot_index}/expand - Expand/collapse a slot
POST   /api/raids/{raid_id}/reset                   - Clear all selections
POST   /api/raids/{raid_id}/share                   - Copy party summary
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from raidboard.api.app import get_registry
from raidboard.board.card import RaidCard
from raidboard.board.registry import BoardRegistry
from raidboard.models.domain import Slot
from raidboard.models.types import (
    CandidateRef,
    CardView,
    GroupedMatchPayload,
    ShareResult,
)

router = APIRouter()


def _get_card(registry: BoardRegistry, raid_id: str) -> RaidCard:
    try:
        return registry.get(raid_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Raid not found") from None


def _get_slot(card: RaidCard, slot_index: int) -> Slot:
    if not 0 <= slot_index < len(card.match.slots):
        raise HTTPException(status_code=404, detail="Slot not found")
    return card.match.slots[slot_index]


@router.post("/raids", response_model=CardView, status_code=201)
async def load_raid(
    payload: GroupedMatchPayload,
    registry: BoardRegistry = Depends(get_registry),
) -> CardView:
    """Display a grouped match.

    Loading a raid that is already displayed replaces its card, clearing
    selections and expand state.

    Args:
        payload: Grouped match from the matching step.
        registry: Board registry (injected).

    Returns:
        CardView for the fresh card.
    """
    card = registry.load(payload.to_domain())
    return card.render()


@router.get("/raids/{raid_id}", response_model=CardView)
async def get_raid(
    raid_id: str,
    registry: BoardRegistry = Depends(get_registry),
) -> CardView:
    """Get the current card payload.

    Raises:
        HTTPException: 404 if raid not displayed.
    """
    return _get_card(registry, raid_id).render()


@router.delete("/raids/{raid_id}", status_code=204)
async def remove_raid(
    raid_id: str,
    registry: BoardRegistry = Depends(get_registry),
) -> Response:
    """Remove a card and cancel its pending timers."""
    _get_card(registry, raid_id)
    registry.remove(raid_id)
    return Response(status_code=204)


@router.post("/raids/{raid_id}/slots/{slot_index}/toggle", response_model=CardView)
async def toggle_selection(
    raid_id: str,
    slot_index: int,
    ref: CandidateRef,
    registry: BoardRegistry = Depends(get_registry),
) -> CardView:
    """Select or deselect a candidate in a slot.

    Args:
        raid_id: Raid to act on.
        slot_index: Slot position.
        ref: Candidate identity.
        registry: Board registry (injected).

    Returns:
        Updated CardView.

    Raises:
        HTTPException: 404 if raid, slot or candidate not found.
    """
    card = _get_card(registry, raid_id)
    slot = _get_slot(card, slot_index)

    # Resolve by identity so only candidates from this slot reach the store
    candidate = slot.find(ref.name, ref.server)
    if candidate is None:
        raise HTTPException(status_code=404, detail="Candidate not found")

    card.toggle_selection(slot_index, candidate)
    return card.render()


@router.post("/raids/{raid_id}/slots/{slot_index}/expand", response_model=CardView)
async def toggle_expand(
    raid_id: str,
    slot_index: int,
    registry: BoardRegistry = Depends(get_registry),
) -> CardView:
    """Flip a slot between collapsed and expanded."""
    card = _get_card(registry, raid_id)
    _get_slot(card, slot_index)
    card.toggle_expand(slot_index)
    return card.render()


@router.post("/raids/{raid_id}/reset", response_model=CardView)
async def reset_raid(
    raid_id: str,
    registry: BoardRegistry = Depends(get_registry),
) -> CardView:
    """Clear every selection of a raid."""
    card = _get_card(registry, raid_id)
    card.reset_all()
    return card.render()


@router.post("/raids/{raid_id}/share", response_model=ShareResult)
async def share_raid(
    raid_id: str,
    registry: BoardRegistry = Depends(get_registry),
) -> ShareResult:
    """Copy the party summary to the clipboard.

    Sharing with nothing selected is a no-op. Clipboard failures are
    reported as copied=False, never as an error status.
    """
    card = _get_card(registry, raid_id)
    text, copied = await card.share()
    return ShareResult(shared=text is not None, copied=copied, text=text)
