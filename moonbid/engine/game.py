"""Game initialization."""

import logging
import random
import uuid

from moonbid.config import Settings
from moonbid.config import settings as default_settings
from moonbid.engine.dealing import deal_round, make_rng
from moonbid.errors import InvalidPlayerCount
from moonbid.models.enums import GameMode, MoonPhase, Role, Season
from moonbid.models.lunar import get_phase_effect
from moonbid.models.phase import Bidding
from moonbid.models.player import PlayerState
from moonbid.models.reward import create_game_rewards
from moonbid.models.rules import get_mode_rules
from moonbid.models.session import GameSession, PhaseBonus

logger = logging.getLogger(__name__)

# Cooperative roles are handed out by seat, wrapping around
COOPERATIVE_ROLES: tuple[Role, ...] = (
    Role.NAVIGATOR,
    Role.GUARDIAN,
    Role.CHANNELER,
    Role.DIVINER,
)


def initialize_game(  # noqa: PLR0913
    player_ids: list[str],
    player_names: list[str],
    moon_phase: MoonPhase | str,
    season: Season | str,
    game_mode: GameMode | str | None = None,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
    settings: Settings | None = None,
    game_id: str | None = None,
) -> GameSession:
    """Create a game and deal the first round.

    Args:
        player_ids: Player IDs in seat order
        player_names: Display names, by seat; missing names become "Player N"
        moon_phase: Active lunar phase
        season: Active season
        game_mode: Mode to play (defaults to the configured mode)
        rng: Random source to draw from; takes precedence over ``seed``
        seed: Seed for a new random source when ``rng`` is not given
        settings: Settings override
        game_id: Explicit game identifier

    Returns:
        Session in the bidding phase of round 1

    Raises:
        InvalidPlayerCount: If the roster size is outside the mode's bounds
        RandomnessUnavailable: If no random source can be created

    """
    settings = settings or default_settings
    mode = GameMode(game_mode) if game_mode is not None else settings.default_game_mode
    moon_phase = MoonPhase(moon_phase)
    season = Season(season)
    rules = get_mode_rules(mode)

    if not rules.allows_player_count(len(player_ids)):
        logger.warning("Rejected %s game with %d players", mode.value, len(player_ids))
        raise InvalidPlayerCount(mode.value, len(player_ids), rules.min_players, rules.max_players)

    if rng is None:
        rng, seed = make_rng(seed)
    else:
        # An injected source has no seed we could replay from
        seed = None

    players = []
    for index, player_id in enumerate(player_ids):
        name = player_names[index] if index < len(player_names) and player_names[index] else None
        players.append(
            PlayerState(
                id=player_id,
                name=name or f"Player {index + 1}",
                role=COOPERATIVE_ROLES[index % len(COOPERATIVE_ROLES)] if rules.teams else None,
            )
        )

    phase_effect = get_phase_effect(moon_phase)
    trump_suit = rules.pick_trump(moon_phase, season, rng)

    session = GameSession(
        id=game_id or f"game_{uuid.uuid4().hex[:12]}",
        players=tuple(players),
        phase=Bidding(),
        mode=mode,
        moon_phase=moon_phase,
        season=season,
        round_number=1,
        total_rounds=rules.total_rounds(len(players)),
        trump_suit=trump_suit,
        phase_bonus=PhaseBonus(
            description=phase_effect.description,
            effect=phase_effect.effect,
            bonus_suit=phase_effect.bonus_suit,
        ),
        rewards=create_game_rewards(moon_phase, season, mode),
        lunar_energy=settings.starting_lunar_energy,
        team_score=0 if rules.teams else None,
        seed=seed,
        rng_state=rng.getstate(),
    )

    logger.info(
        "Created %s game %s: %d players, %s, %s, trump=%s",
        mode.value,
        session.id,
        len(players),
        moon_phase.value,
        season.value,
        trump_suit.value if trump_suit else None,
    )

    return deal_round(session)
