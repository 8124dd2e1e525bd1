"""Pydantic models for the raidboard API.

Request payloads convert into the frozen domain dataclasses; response
models are the view payloads rendered by the UI.
"""

from typing import Literal

from pydantic import BaseModel, Field

from raidboard.models.domain import Candidate, GroupedMatch, Role, Slot


class CandidatePayload(BaseModel):
    """Candidate character as produced by the matching step."""

    name: str
    server: str
    role: Role
    power: float = Field(allow_inf_nan=False)
    class_name: str
    item_level: str
    synergy: str | None = None
    ark_passive: str | None = None

    def to_domain(self) -> Candidate:
        return Candidate(
            name=self.name,
            server=self.server,
            role=self.role,
            power=self.power,
            class_name=self.class_name,
            item_level=self.item_level,
            synergy=self.synergy,
            ark_passive=self.ark_passive,
        )


class SlotPayload(BaseModel):
    """One searched player with their candidate pool."""

    label: str
    candidates: list[CandidatePayload] = Field(default_factory=list)


class GroupedMatchPayload(BaseModel):
    """Grouped match submitted when a raid card is displayed."""

    raid_id: str
    raid_name: str
    difficulty: str
    level: int
    slots: list[SlotPayload]
    average_power: float = Field(allow_inf_nan=False)
    dealer_count: int
    support_count: int

    def to_domain(self) -> GroupedMatch:
        """Convert to the immutable domain model."""
        return GroupedMatch(
            raid_id=self.raid_id,
            raid_name=self.raid_name,
            difficulty=self.difficulty,
            level=self.level,
            slots=tuple(
                Slot(
                    label=slot.label,
                    candidates=tuple(c.to_domain() for c in slot.candidates),
                )
                for slot in self.slots
            ),
            average_power=self.average_power,
            dealer_count=self.dealer_count,
            support_count=self.support_count,
        )


class CandidateRef(BaseModel):
    """Reference to a candidate by identity."""

    name: str
    server: str


class CharacterRow(BaseModel):
    """A rendered candidate row."""

    name: str
    server: str
    class_name: str
    class_kind: Literal["support", "damage"]
    role: Role
    power: str  # formatted
    level: str
    ark_passive: str | None
    synergy: str | None  # only for non-support roles
    is_selected: bool


class SlotView(BaseModel):
    """Rendered column for one searched player."""

    slot_index: int
    label: str
    candidate_count: int
    rows: list[CharacterRow]
    hidden_count: int
    has_more: bool
    is_expanded: bool


class CardView(BaseModel):
    """Full raid card payload for the UI."""

    raid_id: str
    raid_name: str
    difficulty: str
    difficulty_tone: Literal["hard", "nightmare", "normal"]
    level: int
    average_power: str  # formatted
    dealer_count: int
    support_count: int
    selected_count: int
    has_selection: bool
    copied: bool
    slots: list[SlotView]


class ShareResult(BaseModel):
    """Outcome of a share action."""

    shared: bool
    copied: bool
    text: str | None
