"""Share text serialization.

Deterministic line-oriented summary of the current party:

    [Raid Name] Hard - avg 1,650.00
    1. ⚔️ Alpha (Berserker) 1,700.00 [Attack +6%]
    2. 🛡️ Bravo (Bard) 1,600.00
"""

from __future__ import annotations

from collections.abc import Sequence

from raidboard.aggregation.summary import selected_candidates
from raidboard.core.power import format_power
from raidboard.models.domain import Candidate, GroupedMatch, PartySummary

SUPPORT_MARKER = "🛡️"
DAMAGE_MARKER = "⚔️"


def format_header(match: GroupedMatch, aggregate: PartySummary) -> str:
    return f"[{match.raid_name}] {match.difficulty} - avg {format_power(aggregate.average_power)}"


def format_line(number: int, candidate: Candidate) -> str:
    """Format one numbered party line.

    Synergy notes are only appended for non-support roles.
    """
    marker = SUPPORT_MARKER if candidate.is_support else DAMAGE_MARKER
    synergy = f" [{candidate.synergy}]" if not candidate.is_support and candidate.synergy else ""
    return (
        f"{number}. {marker} {candidate.name} ({candidate.class_name}) "
        f"{format_power(candidate.power)}{synergy}"
    )


def format_share_text(
    match: GroupedMatch,
    selections: Sequence[Candidate | None],
    aggregate: PartySummary,
) -> str | None:
    """Build the share text for a party.

    Args:
        match: Match the party belongs to.
        selections: Selection vector; lines follow slot order.
        aggregate: Summary whose average power goes in the header.

    Returns:
        Multi-line text, or None when nothing is selected (sharing is a
        no-op).
    """
    chosen = selected_candidates(selections)
    if not chosen:
        return None

    lines = [format_header(match, aggregate)]
    lines.extend(format_line(i, c) for i, c in enumerate(chosen, start=1))
    return "\n".join(lines)
