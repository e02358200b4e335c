# gamedata/schedule.py
from __future__ import annotations

import logging
import random
from typing import List, Optional

from .rng import coin_flip, new_rng
from .types import Matchup

logger = logging.getLogger(__name__)


def expected_game_count(num_teams: int, games_per_team_pair: int) -> int:
    """k * n*(n-1)/2 games, or 0 when no pairing is possible."""
    n, k = int(num_teams), int(games_per_team_pair)
    if n < 2 or k < 1:
        return 0
    return k * n * (n - 1) // 2


def build_round_robin(
    num_teams: int,
    games_per_team_pair: int,
    rng: Optional[random.Random] = None,
) -> List[Matchup]:
    """
    Enumerate every pairing of teams 0..num_teams-1, games_per_team_pair times over.

    Each pass walks curr_team upward and pairs it with every higher-indexed team,
    so every unordered pair appears exactly once per pass. Home/away is an
    independent fair coin per matchup: heads puts curr_team at home, tails the
    higher-indexed opponent.

    Fewer than two teams (or no passes) yields an empty schedule. No upper bound
    on num_teams is enforced here.
    """
    n, k = int(num_teams), int(games_per_team_pair)
    if n < 2 or k < 1:
        logger.debug("No pairings possible for num_teams=%d, games_per_team_pair=%d", n, k)
        return []

    if rng is None:
        rng = new_rng()

    matchups: List[Matchup] = []
    for _ in range(k):
        for curr_team in range(n):
            for opponent in range(curr_team + 1, n):
                if coin_flip(rng):
                    matchups.append(Matchup(home_team=curr_team, away_team=opponent))
                else:
                    matchups.append(Matchup(home_team=opponent, away_team=curr_team))

    logger.debug("Built %d matchups for %d teams x %d passes", len(matchups), n, k)
    return matchups
