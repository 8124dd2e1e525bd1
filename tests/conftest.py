"""Shared pytest fixtures for raidboard tests."""

import pytest

from raidboard.models.domain import Candidate, GroupedMatch, Role, Slot


def make_candidate(
    name: str,
    power: float = 1000.0,
    role: Role = Role.DAMAGE,
    server: str = "Luterra",
    class_name: str = "Berserker",
    synergy: str | None = None,
    item_level: str = "1680.83",
    ark_passive: str | None = None,
) -> Candidate:
    """Build a candidate with sensible defaults."""
    return Candidate(
        name=name,
        server=server,
        role=role,
        power=power,
        class_name=class_name,
        item_level=item_level,
        synergy=synergy,
        ark_passive=ark_passive,
    )


@pytest.fixture
def five_slot() -> Slot:
    """Slot with five damage candidates, powers 1000..5000."""
    return Slot(
        label="Searcher",
        candidates=tuple(
            make_candidate(f"Char{i}", power=1000.0 * (i + 1)) for i in range(5)
        ),
    )


@pytest.fixture
def match(five_slot: Slot) -> GroupedMatch:
    """Match with a five-candidate slot, a two-candidate slot and an empty slot."""
    second = Slot(
        label="Helper",
        candidates=(
            make_candidate(
                "Bard1", power=1600.0, role=Role.SUPPORT, class_name="Bard", synergy="Dmg Taken +10%"
            ),
            make_candidate("Blade1", power=1800.0, class_name="Deathblade", synergy="Crit +10%"),
        ),
    )
    empty = Slot(label="Nobody", candidates=())
    return GroupedMatch(
        raid_id="raid-echidna-hard",
        raid_name="Echidna",
        difficulty="Hard",
        level=1640,
        slots=(five_slot, second, empty),
        average_power=1234.5,
        dealer_count=5,
        support_count=1,
    )
