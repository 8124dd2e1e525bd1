"""Tests for the raid card composition and its view payload."""

import asyncio

import pytest

from raidboard.board.card import RaidCard, difficulty_tone, level_display
from raidboard.models.domain import Role
from raidboard.share.clipboard import MemoryClipboard


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard()


@pytest.fixture
def card(match, clipboard) -> RaidCard:
    return RaidCard(match, clipboard, revert_delay=0.05)


class TestHelpers:
    def test_difficulty_tone(self):
        assert difficulty_tone("Hard") == "hard"
        assert difficulty_tone("하드") == "hard"
        assert difficulty_tone("나메") == "nightmare"
        assert difficulty_tone("Nightmare") == "nightmare"
        assert difficulty_tone("Normal") == "normal"

    def test_level_display(self):
        assert level_display("1680.83") == "1680"
        assert level_display("1700") == "1700"


class TestAggregateOnCard:
    """Card statistics follow the selections."""

    def test_fallback_when_nothing_selected(self, card, match):
        view = card.render()
        assert view.has_selection is False
        assert view.selected_count == 0
        assert view.average_power == "1,234.50"
        assert view.dealer_count == match.dealer_count
        assert view.support_count == match.support_count

    def test_live_after_toggle(self, card, five_slot, match):
        card.toggle_selection(0, five_slot.candidates[1])
        card.toggle_selection(1, match.slots[1].candidates[0])

        view = card.render()

        assert view.selected_count == 2
        assert view.average_power == "1,800.00"
        assert view.dealer_count == 1
        assert view.support_count == 1


class TestSlotViews:
    """Slot columns in the view."""

    def test_empty_slot_omitted(self, card):
        """A slot without candidates gets no column."""
        view = card.render()
        assert [s.slot_index for s in view.slots] == [0, 1]

    def test_collapsed_slot(self, card):
        column = card.render().slots[0]
        assert column.candidate_count == 5
        assert [r.name for r in column.rows] == ["Char0", "Char1", "Char2"]
        assert column.hidden_count == 2
        assert column.has_more is True
        assert column.is_expanded is False

    def test_hidden_selection_pinned(self, card, five_slot):
        card.toggle_selection(0, five_slot.candidates[4])
        column = card.render().slots[0]
        assert [r.name for r in column.rows] == ["Char0", "Char1", "Char2", "Char4"]
        assert column.rows[-1].is_selected is True
        assert column.hidden_count == 1

    def test_collapse_keeps_selection(self, card, five_slot):
        """Expanding then collapsing does not clear the slot's selection."""
        card.toggle_selection(0, five_slot.candidates[4])
        card.toggle_expand(0)
        assert card.render().slots[0].hidden_count == 0
        card.toggle_expand(0)

        assert card.selections[0] is five_slot.candidates[4]
        assert card.render().slots[0].hidden_count == 1

    def test_row_fields(self, card):
        """Support rows hide synergy; damage rows show it."""
        rows = card.render().slots[1].rows
        bard, blade = rows

        assert bard.role == Role.SUPPORT
        assert bard.class_kind == "support"
        assert bard.synergy is None
        assert bard.power == "1,600.00"
        assert bard.level == "1680"

        assert blade.class_kind == "damage"
        assert blade.synergy == "Crit +10%"


class TestResetAll:
    def test_clears_selections_and_expand(self, card, five_slot):
        card.toggle_selection(0, five_slot.candidates[0])
        card.toggle_expand(0)

        card.reset_all()

        view = card.render()
        assert view.has_selection is False
        assert view.slots[0].is_expanded is False


class TestShare:
    """Share action on the card."""

    def test_noop_without_selection(self, card, clipboard):
        """Clipboard is never invoked when nothing is selected."""
        text, copied = asyncio.run(card.share())
        assert text is None
        assert copied is False
        assert clipboard.history == []

    def test_copies_text(self, card, clipboard, five_slot):
        card.toggle_selection(0, five_slot.candidates[0])

        async def scenario():
            result = await card.share()
            return result, card.render().copied

        (text, copied), rendered_copied = asyncio.run(scenario())

        assert copied is True
        assert rendered_copied is True
        assert clipboard.text == text
        assert text.startswith("[Echidna] Hard - avg 1,000.00")

    def test_failure_not_raised(self, match, five_slot):
        card = RaidCard(match, MemoryClipboard(fail=True))
        card.toggle_selection(0, five_slot.candidates[0])

        text, copied = asyncio.run(card.share())

        assert text is not None
        assert copied is False
        assert card.copied is False

    def test_dispose_stops_sharing(self, card, clipboard, five_slot):
        card.toggle_selection(0, five_slot.candidates[0])
        card.dispose()

        _, copied = asyncio.run(card.share())

        assert copied is False
        assert clipboard.history == []
