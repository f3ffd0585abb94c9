"""Reward and winner evaluation at the end of a game."""

import logging
from collections.abc import Callable
from dataclasses import replace

from moonbid.constants import TEAM_SCORE_PER_PLAYER
from moonbid.errors import PhaseViolation
from moonbid.models.enums import MoonPhase, Suit
from moonbid.models.phase import Finalized, GameOutcome, WinnerReport
from moonbid.models.player import PlayerState
from moonbid.models.reward import GrantedReward, Outcome, Reward
from moonbid.models.session import GameSession

logger = logging.getLogger(__name__)

RewardPredicate = Callable[[PlayerState, GameSession], bool]

STREAK_LENGTH = 3


def _winner_sequence(session: GameSession) -> list[str | None]:
    return [trick.winner for trick in session.trick_history]


def _won_streak(player: PlayerState, session: GameSession) -> bool:
    winners = _winner_sequence(session)
    return any(
        all(w == player.id for w in winners[i : i + STREAK_LENGTH])
        for i in range(len(winners) - STREAK_LENGTH + 1)
    )


def _first_to_win(player: PlayerState, session: GameSession) -> bool:
    first = next((w for w in _winner_sequence(session) if w is not None), None)
    return first == player.id


def _increasing_tricks(player: PlayerState, _session: GameSession) -> bool:
    tricks = player.round_tricks
    return len(tricks) >= 2 and all(a < b for a, b in zip(tricks, tricks[1:]))


def _won_playing_last(player: PlayerState, session: GameSession) -> bool:
    return any(
        trick.winner == player.id and trick.plays and trick.plays[-1].player_id == player.id
        for trick in session.trick_history
    )


def _lowest_bidder_won(player: PlayerState, session: GameSession) -> bool:
    lowest = min(p.bid or 0 for p in session.players)
    return (player.bid or 0) == lowest and player.tricks >= 1


def _everyone_won_a_trick(_player: PlayerState, session: GameSession) -> bool:
    return all(sum(p.round_tricks) >= 1 for p in session.players)


def _sun_and_moon(player: PlayerState, session: GameSession) -> bool:
    for trick in session.trick_history:
        if trick.winner != player.id:
            continue
        cards = trick.get_all_cards()
        has_sun = any(card.suit == Suit.STARS for card in cards)
        has_moon = any(card.moon_affinity is not None for card in cards)
        if has_sun and has_moon:
            return True
    return False


REWARD_PREDICATES: dict[str, RewardPredicate] = {
    Outcome.WIN_THREE_TRICKS: lambda p, _s: p.tricks >= 3,
    Outcome.EXACT_BID: lambda p, _s: p.bid_correct(),
    Outcome.WIN_WITH_LOWEST: lambda p, _s: any(card.rank == 1 for card in p.won_cards),
    Outcome.WIN_FIVE_TRICKS: lambda p, _s: p.tricks >= 5,
    Outcome.INCREASING_TRICKS: _increasing_tricks,
    Outcome.WIN_PLAYING_LAST: _won_playing_last,
    Outcome.HALF_BID: lambda p, _s: (p.bid or 0) > 0 and p.tricks * 2 == p.bid,
    Outcome.FIRST_TRICK: _first_to_win,
    Outcome.THREE_IN_A_ROW: _won_streak,
    Outcome.BID_THREE: lambda p, _s: p.bid == 3 and p.tricks == 3,
    Outcome.LOWEST_BIDDER_WINS: _lowest_bidder_won,
    Outcome.EVERYONE_SCORES: _everyone_won_a_trick,
    Outcome.SUN_AND_MOON: _sun_and_moon,
}


def reward_quantity(session: GameSession, reward: Reward) -> int:
    """Quantity granted, doubled for Full Moon rewards under the Full Moon."""
    if reward.moon_phase_bonus == session.moon_phase == MoonPhase.FULL_MOON:
        return reward.quantity * 2
    return reward.quantity


def evaluate_rewards(session: GameSession) -> tuple[GrantedReward, ...]:
    """Check every reward on offer against every player's final stats."""
    granted = []
    for player in session.players:
        for reward in session.rewards:
            predicate = REWARD_PREDICATES.get(reward.required_outcome)
            if predicate is None:
                logger.warning("No rule for reward outcome %r", reward.required_outcome)
                continue
            if not predicate(player, session):
                continue
            quantity = reward_quantity(session, reward)
            granted.append(
                GrantedReward(
                    player_id=player.id,
                    reward_id=reward.id,
                    name=reward.name,
                    type=reward.type,
                    quantity=quantity,
                )
            )
            logger.info("Player %s earned reward: %s (%d)", player.name, reward.name, quantity)
    return tuple(granted)


def determine_winners(session: GameSession) -> tuple[WinnerReport, bool]:
    """Work out who won.

    Team modes win together when the team score reaches 3 per player, or
    nobody wins. Other modes return everyone tied at the top score.

    Returns:
        The winner report and whether the winning condition was met

    """
    players = session.players
    if session.rules.teams:
        team_score = session.team_score or 0
        met = team_score >= len(players) * TEAM_SCORE_PER_PLAYER
        winners = players if met else ()
        report = WinnerReport(
            winner_ids=tuple(p.id for p in winners),
            winner_names=tuple(p.name for p in winners),
            scores=(team_score,),
            is_team_win=True,
        )
        return report, met

    top = max(p.score for p in players)
    winners = tuple(p for p in players if p.score == top)
    report = WinnerReport(
        winner_ids=tuple(p.id for p in winners),
        winner_names=tuple(p.name for p in winners),
        scores=tuple(p.score for p in winners),
        is_team_win=False,
    )
    return report, True


def finalize_game(session: GameSession) -> GameSession:
    """Grant rewards, settle the winners and close the game."""
    rewards = evaluate_rewards(session)
    winners, met = determine_winners(session)
    logger.info(
        "Game %s finished: winners=%s team_win=%s",
        session.id,
        list(winners.winner_ids),
        winners.is_team_win,
    )
    outcome = GameOutcome(winners=winners, rewards=rewards, winning_condition_met=met)
    return replace(session, phase=Finalized(outcome))


def get_winners(session: GameSession) -> WinnerReport:
    """Get the winners of a finished game.

    Raises:
        PhaseViolation: If the game is not finalized

    """
    if not isinstance(session.phase, Finalized):
        raise PhaseViolation("get the winners", session.phase.name)
    return session.phase.outcome.winners
