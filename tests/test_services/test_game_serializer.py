"""Tests for session serialization and per-player views."""

import json

from moonbid import place_bid, play_card
from moonbid.models.card import get_card
from moonbid.models.enums import GameMode
from moonbid.services.game_serializer import player_view, serialize_card, serialize_session


class TestSerializeSession:
    """Test full serialization."""

    def test_session_is_json_ready(self, new_game):
        """The serialized session survives a JSON round trip."""
        data = serialize_session(new_game())
        assert json.loads(json.dumps(data)) == data

    def test_bidding_session(self, new_game):
        """Top-level fields of a fresh game."""
        session = new_game()
        data = serialize_session(session)
        assert data["id"] == session.id
        assert data["mode"] == "standard"
        assert data["moon_phase"] == "Waxing Crescent"
        assert data["phase"] == {"name": "bidding"}
        assert data["draw_pile_size"] == 26
        assert data["lunar_energy"] == 10
        assert len(data["players"][0]["hand"]) == 13
        assert data["phase_bonus"]["bonus_suit"] == "herbs"

    def test_playing_phase_carries_trick(self, rigged):
        """The in-progress trick is serialized with the playing phase."""
        session = rigged([["card_herbs_5", "card_stars_1"], ["card_herbs_9", "card_stars_2"]])
        session = play_card(session, "p0", "card_herbs_5")
        phase = serialize_session(session)["phase"]
        assert phase["name"] == "playing"
        assert phase["trick"]["lead_suit"] == "herbs"
        assert phase["trick"]["plays"][0]["card"]["id"] == "card_herbs_5"

    def test_round_history_is_serialized(self, rigged):
        """Per-round records and the game's trick history survive into the next round."""
        session = rigged([["card_stars_10"], ["card_herbs_2"]], bids=[1, 0])
        session = play_card(session, "p0", "card_stars_10")
        session = play_card(session, "p1", "card_herbs_2")

        data = serialize_session(session)
        p0 = data["players"][0]
        assert data["round_number"] == 2
        assert data["completed_tricks"] == []
        assert len(data["trick_history"]) == 1
        assert data["trick_history"][0]["winner"] == "p0"
        assert data["trick_history"][0]["winning_card_id"] == "card_stars_10"
        assert p0["round_tricks"] == [1]
        assert p0["round_bids"] == [1]
        assert p0["doubled_tricks"] == 0

    def test_finalized_phase_carries_winners(self, new_game, play_out):
        """A finished game serializes its winners and rewards."""
        session = play_out(new_game(num_players=2, mode=GameMode.ANCESTRAL))
        phase = serialize_session(session)["phase"]
        assert phase["name"] == "finalized"
        assert phase["winner_ids"] == list(session.phase.outcome.winners.winner_ids)
        assert len(phase["rewards"]) == len(session.phase.outcome.rewards)

    def test_serialize_card(self):
        """Power cards carry their power and affinity."""
        data = serialize_card(get_card("special_full_moon"))
        assert data["power"] == "double"
        assert data["moon_affinity"] == "Full Moon"
        assert data["is_special"] is True


class TestPlayerView:
    """Test what a single player may see."""

    def test_opponent_hands_are_hidden(self, new_game):
        """Only the viewer's own hand is shown."""
        data = player_view(new_game(), "p1")
        players = {p["id"]: p for p in data["players"]}
        assert len(players["p1"]["hand"]) == 13
        assert players["p0"]["hand"] == []
        assert players["p0"]["hand_size"] == 13

    def test_standard_bids_are_open(self, new_game):
        """Outside hidden bidding, bids are visible at once."""
        session = place_bid(new_game(), "p0", 3)
        players = {p["id"]: p for p in player_view(session, "p1")["players"]}
        assert players["p0"]["bid"] == 3

    def test_hidden_bids_until_bidding_ends(self, new_game):
        """Eclipse bids stay secret until everyone has bid."""
        session = place_bid(new_game(mode=GameMode.ECLIPSE), "p0", 3)
        players = {p["id"]: p for p in player_view(session, "p1")["players"]}
        assert players["p0"]["bid"] is None
        assert players["p0"]["has_bid"] is True
        assert players["p2"]["has_bid"] is False

        own = {p["id"]: p for p in player_view(session, "p0")["players"]}
        assert own["p0"]["bid"] == 3

        session = place_bid(session, "p1", 1)
        session = place_bid(session, "p2", 0)
        players = {p["id"]: p for p in player_view(session, "p1")["players"]}
        assert players["p0"]["bid"] == 3
