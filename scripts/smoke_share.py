#!/usr/bin/env python3
"""Smoke test for a raid card.

Loads a grouped match from JSON (or a built-in demo match), selects the
first candidate of every slot, prints the card summary and the share
text, and checks the basic card invariants.

Usage:
    python scripts/smoke_share.py [match.json]

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from raidboard.board.card import RaidCard  # noqa: E402
from raidboard.models.types import GroupedMatchPayload  # noqa: E402
from raidboard.share.clipboard import MemoryClipboard  # noqa: E402

DEMO_MATCH = {
    "raid_id": "demo",
    "raid_name": "Echidna",
    "difficulty": "Hard",
    "level": 1640,
    "slots": [
        {
            "label": "Searcher",
            "candidates": [
                {
                    "name": f"Alt{i}",
                    "server": "Luterra",
                    "role": "damage",
                    "power": 1500.0 + 37.25 * i,
                    "class_name": "Sorceress",
                    "item_level": "1660.00",
                    "synergy": "Crit +10%",
                }
                for i in range(5)
            ],
        },
        {
            "label": "Friend",
            "candidates": [
                {
                    "name": "Harmony",
                    "server": "Kadan",
                    "role": "support",
                    "power": 1720.5,
                    "class_name": "Bard",
                    "item_level": "1675.83",
                    "synergy": "Dmg Taken +10%",
                }
            ],
        },
    ],
    "average_power": 1610.0,
    "dealer_count": 5,
    "support_count": 1,
}


def load_match(path: Path | None) -> GroupedMatchPayload:
    """Load a match payload from file or use the demo match."""
    if path is None:
        return GroupedMatchPayload.model_validate(DEMO_MATCH)
    return GroupedMatchPayload.model_validate(json.loads(path.read_text(encoding="utf-8")))


def check_visibility(card: RaidCard) -> bool:
    """Check that visible rows and hidden counts cover every pool."""
    ok = True
    for column in card.render().slots:
        covered = len(column.rows) + column.hidden_count
        if covered != column.candidate_count:
            print(f"FAIL: {column.label}: {covered} covered of {column.candidate_count}")
            ok = False
        else:
            print(f"OK: {column.label}: {len(column.rows)} shown, {column.hidden_count} hidden")
    return ok


async def check_share(card: RaidCard, clipboard: MemoryClipboard) -> bool:
    """Check that sharing copies exactly the formatted text."""
    text, copied = await card.share()
    if text is None:
        print("FAIL: Nothing selected, share was a no-op")
        return False
    if not copied or clipboard.text != text:
        print("FAIL: Share text was not copied")
        return False
    print("OK: Share text copied")
    print()
    print(text)
    print()
    return True


def main() -> int:
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    match = load_match(path).to_domain()

    clipboard = MemoryClipboard()
    card = RaidCard(match, clipboard)

    for slot_index, slot in enumerate(match.slots):
        if slot.candidates:
            card.toggle_selection(slot_index, slot.candidates[-1])

    view = card.render()
    print(f"Raid: [{view.raid_name}] {view.difficulty} Lv.{view.level}")
    print(f"Selected: {view.selected_count}")
    print(f"Average power: {view.average_power}")
    print(f"Dealers/Supports: {view.dealer_count}/{view.support_count}")

    results = [
        check_visibility(card),
        asyncio.run(check_share(card, clipboard)),
    ]
    card.dispose()

    if all(results):
        print("All checks passed")
        return 0
    print("Some checks failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
