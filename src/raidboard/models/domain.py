"""Domain models for raidboard.

Pure Python dataclasses representing the match handed over by the
matching step. These are read-only for the lifetime of a card and are
independent of the pydantic payloads used by the API layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ============================================================================
# Candidate Domain
# ============================================================================


class Role(str, Enum):
    """Party role of a character."""

    DAMAGE = "damage"
    SUPPORT = "support"


@dataclass(frozen=True)
class Candidate:
    """One character eligible to fill a slot.

    Identity is the (name, server) pair, unique within a slot.
    """

    name: str
    server: str
    role: Role
    power: float
    class_name: str
    item_level: str
    synergy: str | None = None
    ark_passive: str | None = None

    @property
    def identity(self) -> tuple[str, str]:
        return (self.name, self.server)

    @property
    def is_support(self) -> bool:
        return self.role == Role.SUPPORT


# ============================================================================
# Match Domain
# ============================================================================


@dataclass(frozen=True)
class Slot:
    """One searched player and their ordered candidate pool."""

    label: str
    candidates: tuple[Candidate, ...] = ()

    def index_of(self, candidate: Candidate | None) -> int:
        """Position of a candidate by identity, or -1 if absent."""
        if candidate is None:
            return -1
        for position, item in enumerate(self.candidates):
            if item.identity == candidate.identity:
                return position
        return -1

    def find(self, name: str, server: str) -> Candidate | None:
        for item in self.candidates:
            if item.identity == (name, server):
                return item
        return None


@dataclass(frozen=True)
class GroupedMatch:
    """A raid together with one candidate pool per searched player.

    average_power, dealer_count and support_count are the match-wide
    fallback aggregates shown while nothing is selected.
    """

    raid_id: str
    raid_name: str
    difficulty: str
    level: int
    slots: tuple[Slot, ...]
    average_power: float
    dealer_count: int
    support_count: int


# ============================================================================
# Aggregate Domain
# ============================================================================

SelectionVector = tuple[Candidate | None, ...]


@dataclass(frozen=True)
class PartySummary:
    """Derived statistics over a set of selected candidates."""

    average_power: float
    damage_count: int
    support_count: int
