"""Tests for card powers.

These tests verify:
- Each power handler's effect on the trick and the session
- The once-per-round limit and its Full Moon exception
- Powers interacting with trick resolution
"""

from collections import Counter
from dataclasses import replace

from moonbid import play_card
from moonbid.engine.powers import POWER_HANDLERS, apply_power, can_use_power
from moonbid.models.card import get_card
from moonbid.models.enums import MoonPhase, Power, Suit
from moonbid.models.trick import Trick


def _trick(*pairs: tuple[str, str]) -> Trick:
    trick = Trick()
    for player_id, card_id in pairs:
        trick = trick.with_play(player_id, get_card(card_id))
    return trick


class TestPowerRegistry:
    """Test the handler table."""

    def test_every_power_has_a_handler(self):
        """The handler table covers the closed set of powers."""
        assert set(POWER_HANDLERS) == set(Power)


# =============================================================================
# TRICK POWERS
# =============================================================================


class TestTrickPowers:
    """Test powers that mark the trick."""

    def test_nullify(self, new_game, rng):
        """Nullify voids the trick."""
        _, trick = POWER_HANDLERS[Power.NULLIFY](new_game(), _trick(("p0", "special_new_moon")), "p0", rng)
        assert trick.voided

    def test_nullify_blocked_by_protect(self, new_game, rng):
        """A protected trick cannot be voided."""
        trick = replace(_trick(("p0", "special_new_moon")), protected=True)
        _, trick = POWER_HANDLERS[Power.NULLIFY](new_game(), trick, "p0", rng)
        assert not trick.voided

    def test_double(self, new_game, rng):
        """Double marks the trick as doubled."""
        _, trick = POWER_HANDLERS[Power.DOUBLE](new_game(), _trick(("p0", "special_fire")), "p0", rng)
        assert trick.doubled

    def test_steal(self, new_game, rng):
        """Steal hands the trick to the player who used it."""
        trick = _trick(("p0", "card_herbs_9"), ("p1", "card_stars_2"))
        _, trick = POWER_HANDLERS[Power.STEAL](new_game(), trick, "p1", rng)
        assert trick.stolen_by == "p1"
        assert trick.resolve(None, MoonPhase.NEW_MOON).winner == "p1"

    def test_protect(self, new_game, rng):
        """Protect shields the trick."""
        _, trick = POWER_HANDLERS[Power.PROTECT](new_game(), _trick(("p0", "special_earth")), "p0", rng)
        assert trick.protected

    def test_transform(self, new_game, rng):
        """Transform moves the card just played into the trump suit."""
        session = replace(new_game(), trump_suit=Suit.STARS)
        trick = _trick(("p0", "card_herbs_3"), ("p1", "special_water"))
        _, trick = POWER_HANDLERS[Power.TRANSFORM](session, trick, "p1", rng)
        assert trick.plays[-1].card.suit == Suit.STARS
        assert trick.plays[-1].card.id == "special_water"
        assert trick.lead_suit == Suit.HERBS

    def test_transform_without_trump(self, new_game, rng):
        """Without a trump suit, transform does nothing."""
        session = replace(new_game(), trump_suit=None)
        trick = _trick(("p0", "special_water"))
        _, after = POWER_HANDLERS[Power.TRANSFORM](session, trick, "p0", rng)
        assert after == trick

    def test_duplicate_copies_latest_power(self, new_game, rng):
        """Duplicate re-applies the most recent earlier power."""
        trick = _trick(("p0", "special_new_moon"), ("p1", "special_fire"), ("p2", "card_stars_2"))
        _, trick = POWER_HANDLERS[Power.DUPLICATE](new_game(), trick, "p2", rng)
        assert trick.doubled
        assert not trick.voided

    def test_duplicate_without_earlier_power(self, new_game, rng):
        """With nothing to copy, duplicate does nothing."""
        trick = _trick(("p0", "card_herbs_3"), ("p1", "card_herbs_4"))
        session = new_game()
        after_session, after = POWER_HANDLERS[Power.DUPLICATE](session, trick, "p1", rng)
        assert after == trick
        assert after_session == session


# =============================================================================
# SESSION POWERS
# =============================================================================


class TestSessionPowers:
    """Test powers that change players or the session."""

    def test_predict(self, new_game, rng):
        """Predict shows the top three cards of the draw pile."""
        session = new_game()
        top = [c.id for c in session.draw_pile[:3]]
        session, _ = POWER_HANDLERS[Power.PREDICT](session, Trick(), "p0", rng)
        assert list(session.get_player("p0").insights) == top
        assert session.get_player("p1").insights == ()

    def test_reveal(self, new_game, rng):
        """Reveal shows the next player's hand."""
        session = new_game()
        expected = [c.id for c in session.get_player("p1").hand]
        session, _ = POWER_HANDLERS[Power.REVEAL](session, Trick(), "p0", rng)
        assert list(session.get_player("p0").insights) == expected

    def test_reveal_wraps_around(self, new_game, rng):
        """The last seat sees the first seat's hand."""
        session = new_game()
        expected = {c.id for c in session.get_player("p0").hand}
        session, _ = POWER_HANDLERS[Power.REVEAL](session, Trick(), "p2", rng)
        assert set(session.get_player("p2").insights) == expected

    def test_illuminate(self, new_game, rng):
        """Illuminate grants favor to everyone and charges the energy pool."""
        session, _ = POWER_HANDLERS[Power.ILLUMINATE](new_game(), Trick(), "p0", rng)
        assert all(p.lunar_favor == 1 for p in session.players)
        assert session.lunar_energy == 15

    def test_swap(self, new_game, rng):
        """Swap trades one card with one opponent."""
        before = new_game()
        after, _ = POWER_HANDLERS[Power.SWAP](before, Trick(), "p0", rng)

        assert [len(p.hand) for p in after.players] == [len(p.hand) for p in before.players]
        all_before = Counter(c.id for p in before.players for c in p.hand)
        all_after = Counter(c.id for p in after.players for c in p.hand)
        assert all_before == all_after

        mine_before = {c.id for c in before.players[0].hand}
        mine_after = {c.id for c in after.players[0].hand}
        assert len(mine_before - mine_after) == 1
        changed = [
            a.id for a, b in zip(after.players[1:], before.players[1:], strict=True) if a.hand != b.hand
        ]
        assert len(changed) == 1

    def test_swap_with_empty_opponents(self, new_game, rng):
        """Nobody to trade with: nothing happens."""
        session = new_game()
        session = replace(
            session,
            players=(session.players[0], *(replace(p, hand=()) for p in session.players[1:])),
        )
        after, _ = POWER_HANDLERS[Power.SWAP](session, Trick(), "p0", rng)
        assert after == session


# =============================================================================
# USAGE LIMITS
# =============================================================================


class TestPowerLimits:
    """Test the once-per-round limit."""

    def test_first_power_is_used(self, new_game, rng):
        """A player's first power takes effect and is marked used."""
        session = new_game()
        session, trick, applied = apply_power(
            session, _trick(("p0", "special_fire")), "p0", get_card("special_fire"), rng
        )
        assert applied
        assert trick.doubled
        assert session.get_player("p0").power_used

    def test_second_power_is_ignored(self, new_game, rng):
        """Once a power was used this round, later ones do nothing."""
        session = new_game()
        session = session.with_player(replace(session.players[0], power_used=True))
        trick = _trick(("p0", "special_fire"))
        _, after, applied = apply_power(session, trick, "p0", get_card("special_fire"), rng)
        assert not applied
        assert after == trick

    def test_full_moon_lifts_the_limit(self, new_game, rng):
        """Under the Full Moon every power card takes effect."""
        session = new_game(moon_phase=MoonPhase.FULL_MOON)
        player = replace(session.players[0], power_used=True)
        session = session.with_player(player)
        assert can_use_power(session, player)
        _, trick, applied = apply_power(
            session, _trick(("p0", "special_fire")), "p0", get_card("special_fire"), rng
        )
        assert applied
        assert trick.doubled

    def test_plain_card_has_no_power(self, new_game, rng):
        """Cards without a power are left alone."""
        trick = _trick(("p0", "card_herbs_2"))
        _, after, applied = apply_power(new_game(), trick, "p0", get_card("card_herbs_2"), rng)
        assert not applied
        assert after == trick

    def test_power_used_resets_each_round(self, rigged):
        """The limit is per round."""
        session = rigged([["special_fire"], ["card_stars_2"]])
        session = play_card(session, "p0", "special_fire")
        session = play_card(session, "p1", "card_stars_2")
        assert session.round_number == 2
        assert not session.get_player("p0").power_used


# =============================================================================
# POWERS IN PLAY
# =============================================================================


class TestPowersInPlay:
    """Test powers through play_card."""

    def test_nullify_third_card_of_four(self, rigged):
        """A nullify played third voids the trick for everyone."""
        session = rigged(
            [
                ["card_stars_5", "card_herbs_2"],
                ["card_stars_9", "card_herbs_3"],
                ["special_new_moon", "card_herbs_4"],
                ["card_stars_2", "card_herbs_5"],
            ]
        )
        session = play_card(session, "p0", "card_stars_5")
        session = play_card(session, "p1", "card_stars_9")
        session = play_card(session, "p2", "special_new_moon")
        assert session.current_trick.voided
        session = play_card(session, "p3", "card_stars_2")

        trick = session.completed_tricks[-1]
        assert trick.voided
        assert trick.winner is None
        assert all(p.tricks == 0 and p.lunar_favor == 0 for p in session.players)
        assert session.get_player("p2").power_used
        # The leader leads again
        assert session.current_player_index == 0

    def test_protect_then_nullify(self, rigged):
        """A protected trick still has a winner after a nullify."""
        session = rigged(
            [
                ["special_earth", "card_stars_1"],
                ["special_new_moon", "card_stars_2"],
                ["card_herbs_4", "card_stars_3"],
            ]
        )
        session = play_card(session, "p0", "special_earth")
        session = play_card(session, "p1", "special_new_moon")
        session = play_card(session, "p2", "card_herbs_4")

        trick = session.completed_tricks[-1]
        assert trick.protected
        assert not trick.voided
        assert trick.winner == "p0"

    def test_transform_into_trump_wins(self, rigged):
        """A card moved into the trump suit beats the lead suit."""
        session = rigged(
            [["card_herbs_5", "card_potions_1"], ["special_last_quarter", "card_potions_2"]],
            trump_suit=Suit.STARS,
        )
        session = play_card(session, "p0", "card_herbs_5")
        session = play_card(session, "p1", "special_last_quarter")

        trick = session.completed_tricks[-1]
        assert trick.winner == "p1"
        assert trick.winning_card.suit == Suit.STARS

    def test_illuminate_favor_counts_at_scoring(self, rigged):
        """Favor from illuminate is added to the round score."""
        session = rigged([["special_spirit"], ["card_crystals_2"]], bids=[1, 0])
        session = play_card(session, "p0", "special_spirit")
        session = play_card(session, "p1", "card_crystals_2")
        # p0: 10 + 10 exact + 2 favor; p1: 0 + 1 favor
        assert session.get_player("p0").round_scores == (22,)
        assert session.get_player("p1").round_scores == (1,)
        assert session.lunar_energy == 15
