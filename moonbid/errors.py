"""Typed errors raised by the engine.

Every ``MoonBidError`` is raised before any new snapshot is built, so the
session passed in is still valid and can be retried. Each carries an
``ErrorCode`` i18n key that callers can translate.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Error codes for i18n translation on the frontend."""

    # Game state errors
    PHASE_VIOLATION = "error.phaseViolation"
    INVALID_PLAYER_COUNT = "error.invalidPlayerCount"

    # Player errors
    PLAYER_NOT_FOUND = "error.playerNotFound"
    NOT_YOUR_TURN = "error.notYourTurn"

    # Bid errors
    INVALID_BID = "error.invalidBid"

    # Card errors
    CARD_NOT_IN_HAND = "error.cardNotInHand"
    MUST_FOLLOW_SUIT = "error.mustFollowSuit"


class MoonBidError(Exception):
    """Base class for recoverable rule violations."""

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PhaseViolation(MoonBidError):
    """Action attempted outside the phase it belongs to."""

    code = ErrorCode.PHASE_VIOLATION

    def __init__(self, action: str, phase: str) -> None:
        super().__init__(f"Cannot {action} during the {phase} phase")
        self.action = action
        self.phase = phase


class UnknownPlayer(MoonBidError):
    """Referenced player is not seated in the session."""

    code = ErrorCode.PLAYER_NOT_FOUND

    def __init__(self, player_id: str) -> None:
        super().__init__(f"Player not found: {player_id}")
        self.player_id = player_id


class InvalidBid(MoonBidError):
    """Bid that is not a whole number in ``[0, hand size]``."""

    code = ErrorCode.INVALID_BID

    def __init__(self, amount: object, max_bid: int) -> None:
        super().__init__(f"Bid must be a whole number between 0 and {max_bid}, got {amount!r}")
        self.amount = amount
        self.max_bid = max_bid


class NotPlayersTurn(MoonBidError):
    """Card played by someone other than the current player."""

    code = ErrorCode.NOT_YOUR_TURN

    def __init__(self, player_id: str, current_player_id: str) -> None:
        super().__init__(f"Not your turn: {player_id} (waiting for {current_player_id})")
        self.player_id = player_id
        self.current_player_id = current_player_id


class CardNotInHand(MoonBidError):
    """Referenced card is not in the acting player's hand."""

    code = ErrorCode.CARD_NOT_IN_HAND

    def __init__(self, player_id: str, card_id: str) -> None:
        super().__init__(f"Card {card_id} not found in {player_id}'s hand")
        self.player_id = player_id
        self.card_id = card_id


class SuitViolation(MoonBidError):
    """Off-suit card played while holding the lead suit."""

    code = ErrorCode.MUST_FOLLOW_SUIT

    def __init__(self, lead_suit: str) -> None:
        super().__init__(f"Must follow lead suit ({lead_suit})")
        self.lead_suit = lead_suit


class InvalidPlayerCount(MoonBidError):
    """Roster size outside the mode's bounds."""

    code = ErrorCode.INVALID_PLAYER_COUNT

    def __init__(self, mode: str, count: int, min_players: int, max_players: int) -> None:
        super().__init__(f"{mode} mode requires {min_players}-{max_players} players, got {count}")
        self.count = count
        self.min_players = min_players
        self.max_players = max_players


class RandomnessUnavailable(RuntimeError):
    """No random source could be created, so no deck can be shuffled.

    This is a configuration failure, not a rule violation.
    """
