#!/usr/bin/env python3
"""
CLI script to simulate a Moon Bid game.

Every seat bids and plays a random legal move, so the run exercises the
rules engine end to end. The game is recorded and replayed from its seed
to check that the replay lands on the same final scores.
"""

import argparse
import random
import sys
import time
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from moonbid import get_winners, initialize_game, legal_cards, place_bid, play_card
from moonbid.config import settings
from moonbid.errors import MoonBidError
from moonbid.models.enums import GameMode, MoonPhase, Season
from moonbid.models.session import GameSession
from moonbid.services.event_recorder import EventRecorder, replay
from moonbid.services.log_service import configure_logging


class GameSimulator:
    """Drives a game with random legal moves."""

    def __init__(self, num_players: int, mode: GameMode, moon_phase: MoonPhase, season: Season, seed: int | None):
        self.num_players = num_players
        self.mode = mode
        self.moon_phase = moon_phase
        self.season = season
        self.seed = seed
        self.chooser = random.Random(seed)
        self.recorder = EventRecorder(settings)

    def bid_round(self, session: GameSession) -> GameSession:
        """Have every player bid at random, in seat order from the turn holder."""
        print(f"\nROUND {session.round_number}/{session.total_rounds}")
        print("-" * 40)
        while session.is_bidding():
            player = session.current_player
            amount = self.chooser.randint(0, len(player.hand))
            after = place_bid(session, player.id, amount)
            self.recorder.record_bid(session, after, player.id, amount)
            print(f"  {player.name} bids {amount}")
            session = after
        return session

    def play_round(self, session: GameSession) -> GameSession:
        """Play cards until the round is scored."""
        round_number = session.round_number
        while not session.is_finalized() and session.round_number == round_number:
            player = session.current_player
            card = self.chooser.choice(legal_cards(session, player.id))
            after = play_card(session, player.id, card.id)
            self.recorder.record_card_played(session, after, player.id, card.id)
            session = after

        for player in session.players:
            print(f"  {player.name}: {player.round_scores[-1]:+d} (total {player.score})")
        return session

    def play_game(self) -> GameSession:
        """Play a complete game."""
        session = initialize_game(
            [f"player_{i}" for i in range(self.num_players)],
            [f"Witch {i + 1}" for i in range(self.num_players)],
            self.moon_phase,
            self.season,
            self.mode,
            seed=self.seed,
        )
        self.recorder.start_game(session)

        print(f"\n{'=' * 60}")
        print(f"{session.mode.value.title()} game under the {session.moon_phase.value} ({session.season.value})")
        print(f"Trump: {session.trump_suit.value if session.trump_suit else 'none'} | seed {session.seed}")
        print(f"{'=' * 60}")

        while not session.is_finalized():
            session = self.play_round(self.bid_round(session))
        return session


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Simulate a Moon Bid game")
    parser.add_argument("--players", type=int, default=4, help="Number of players")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=settings.default_game_mode.value,
        help="Game mode",
    )
    parser.add_argument("--moon-phase", choices=[p.value for p in MoonPhase], default=MoonPhase.FULL_MOON.value)
    parser.add_argument("--season", choices=[s.value for s in Season], default=Season.SPRING.value)
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible game")
    args = parser.parse_args()

    configure_logging(settings.log_level)

    simulator = GameSimulator(
        num_players=args.players,
        mode=GameMode(args.mode),
        moon_phase=MoonPhase(args.moon_phase),
        season=Season(args.season),
        seed=args.seed,
    )

    start_time = time.time()
    try:
        session = simulator.play_game()
    except MoonBidError as e:
        print(f"Error: {e.message}")
        sys.exit(1)
    elapsed_time = time.time() - start_time

    winners = get_winners(session)
    print(f"\n{'=' * 60}")
    print("GAME OVER")
    print(f"{'=' * 60}")
    for rank, player in enumerate(sorted(session.players, key=lambda p: p.score, reverse=True), 1):
        print(f"{rank}. {player.name}: {player.score} points")
    if winners.winner_ids:
        label = "Team win" if winners.is_team_win else "Winner"
        print(f"\n{label}: {', '.join(winners.winner_names)}")
    else:
        print("\nThe moon prevails: no winner")
    for granted in session.phase.outcome.rewards:
        print(f"  {granted.player_id} earned {granted.name} x{granted.quantity}")

    history = simulator.recorder.get_history(session.id)
    if history is not None:
        replayed = replay(history)
        same = [p.score for p in replayed.players] == [p.score for p in session.players]
        print(f"\nReplay of {len(history.events)} events {'matches' if same else 'DIFFERS'}")

    print(f"Game duration: {elapsed_time:.2f} seconds")


if __name__ == "__main__":
    main()
