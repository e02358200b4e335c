# gamedata/__init__.py
from __future__ import annotations

import logging
from typing import Any, List, Optional

from .config import GeneratorConfig, RatioRange
from .dataset import read_dataset, results_frame, stats_frame, write_dataset
from .outcomes import RATIO_RULES, decide_home_win, generate_outcomes, summarize
from .rng import child_rng, entropy_seed
from .schedule import build_round_robin, expected_game_count
from .types import Bias, MatchRecord, Matchup

logger = logging.getLogger(__name__)


def generate_dataset(
    num_teams: int,
    games_per_team_pair: int,
    bias: Any = Bias.NONE,
    seed: Optional[int] = None,
    config: Optional[GeneratorConfig] = None,
) -> List[MatchRecord]:
    """
    Build the round-robin schedule, then resolve every game.
    The schedule and the outcomes draw from separate child streams of one seed,
    so the same seed always reproduces the same dataset.
    """
    if seed is None:
        seed = entropy_seed()
    logger.info("Generating games: teams=%s passes=%s bias=%s seed=%s",
                num_teams, games_per_team_pair, bias, seed)
    matchups = build_round_robin(num_teams, games_per_team_pair, rng=child_rng(seed, "schedule"))
    return generate_outcomes(matchups, bias, rng=child_rng(seed, "outcomes"), config=config)


__all__ = [
    "generate_dataset",
    "Bias", "MatchRecord", "Matchup",
    "GeneratorConfig", "RatioRange",
    "build_round_robin", "expected_game_count",
    "generate_outcomes", "decide_home_win", "summarize", "RATIO_RULES",
    "write_dataset", "read_dataset", "stats_frame", "results_frame",
]
