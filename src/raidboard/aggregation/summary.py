"""Party summary aggregation.

Computes average power and role counts from the current selections.
Domain logic is pure - the match-wide fallback is resolved by the caller
through resolve_aggregate.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from raidboard.models.domain import (
    Candidate,
    GroupedMatch,
    PartySummary,
    Role,
)


def calculate_average(values: Sequence[float]) -> float:
    """Arithmetic mean of a non-empty sequence.

    Raises:
        ValueError: If values is empty.
    """
    if not values:
        raise ValueError("Cannot average an empty sequence")
    return sum(values) / len(values)


def selected_candidates(selections: Iterable[Candidate | None]) -> list[Candidate]:
    """Non-empty entries of a selection vector, in slot order."""
    return [c for c in selections if c is not None]


def summarize(selections: Iterable[Candidate | None]) -> PartySummary:
    """Compute the party summary over selected entries.

    No rounding is applied; formatting is a presentation concern.

    Args:
        selections: Selection vector (empty entries are None).

    Returns:
        PartySummary with mean power and role tallies.

    Raises:
        ValueError: If nothing is selected. Callers wanting the match-wide
            fallback should use resolve_aggregate.
    """
    chosen = selected_candidates(selections)

    average_power = calculate_average([c.power for c in chosen])
    damage_count = sum(1 for c in chosen if c.role == Role.DAMAGE)
    support_count = sum(1 for c in chosen if c.role == Role.SUPPORT)

    return PartySummary(
        average_power=average_power,
        damage_count=damage_count,
        support_count=support_count,
    )


def fallback_summary(match: GroupedMatch) -> PartySummary:
    """Match-wide precomputed aggregates."""
    return PartySummary(
        average_power=match.average_power,
        damage_count=match.dealer_count,
        support_count=match.support_count,
    )


def resolve_aggregate(
    match: GroupedMatch,
    selections: Iterable[Candidate | None],
) -> PartySummary:
    """Summary to display for a card.

    Uses the live summary when anything is selected, otherwise the match's
    fallback aggregates.
    """
    chosen = selected_candidates(selections)
    if not chosen:
        return fallback_summary(match)
    return summarize(chosen)
