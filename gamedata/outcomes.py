# gamedata/outcomes.py
from __future__ import annotations

import logging
import random
from typing import Any, Callable, Dict, Iterable, List, Optional

from .config import GeneratorConfig, RatioRange, WIN_THRESHOLD
from .rng import coin_flip, new_rng
from .types import Bias, MatchRecord, Matchup, mean_ratio

logger = logging.getLogger(__name__)

# (wip, rbi, war) -> home win?
RatioRule = Callable[[float, float, float], bool]


def _prefer_wip(wip: float, rbi: float, war: float) -> bool:
    return wip > WIN_THRESHOLD


def _prefer_rbi(wip: float, rbi: float, war: float) -> bool:
    return rbi > WIN_THRESHOLD


def _prefer_war(wip: float, rbi: float, war: float) -> bool:
    return war > WIN_THRESHOLD


def _prefer_average(wip: float, rbi: float, war: float) -> bool:
    return mean_ratio(wip, rbi, war) > WIN_THRESHOLD


# Bias.NONE is deliberately absent: it ignores the ratios and flips a coin.
RATIO_RULES: Dict[Bias, RatioRule] = {
    Bias.PREFER_WIP: _prefer_wip,
    Bias.PREFER_RBI: _prefer_rbi,
    Bias.PREFER_WAR: _prefer_war,
    Bias.PREFER_AVERAGE: _prefer_average,
}


def draw_ratio(rng: random.Random, span: RatioRange) -> float:
    return rng.uniform(span.low, span.high)


def decide_home_win(bias: Any, wip: float, rbi: float, war: float, rng: random.Random) -> bool:
    """
    Apply the bias rule to one game's ratios. Ratio rules are strict: a ratio of
    exactly 1.0 is a home loss. NONE, and any unrecognized bias, is a fair coin.
    """
    rule = RATIO_RULES.get(Bias.from_code(bias))
    if rule is None:
        return coin_flip(rng)
    return rule(wip, rbi, war)


def generate_outcomes(
    matchups: Iterable[Matchup],
    bias: Any = Bias.NONE,
    rng: Optional[random.Random] = None,
    config: Optional[GeneratorConfig] = None,
) -> List[MatchRecord]:
    """
    Draw WIP, RBI and WAR ratios for each matchup and decide the winner.
    Returns fully populated records; game_index is the position in the output.
    """
    if rng is None:
        rng = new_rng()
    if config is None:
        config = GeneratorConfig()
    # resolve once so an unknown code warns once rather than per game
    bias = Bias.from_code(bias)

    records: List[MatchRecord] = []
    for game_index, m in enumerate(matchups):
        wip = draw_ratio(rng, config.wip_range)
        rbi = draw_ratio(rng, config.rbi_range)
        war = draw_ratio(rng, config.war_range)
        home_win = decide_home_win(bias, wip, rbi, war, rng)
        logger.debug(
            "game=%d home=%d away=%d wip=%f rbi=%f war=%f home_win=%s",
            game_index, m.home_team, m.away_team, wip, rbi, war, home_win,
        )
        records.append(
            MatchRecord(
                game_index=game_index,
                home_team=m.home_team,
                away_team=m.away_team,
                wip_ratio=wip,
                rbi_ratio=rbi,
                war_ratio=war,
                home_win=home_win,
            )
        )
    return records


def summarize(records: List[MatchRecord]) -> Dict[str, float]:
    games = len(records)
    home_wins = sum(1 for r in records if r.home_win)
    if games == 0:
        return {"games": 0, "home_wins": 0, "home_win_rate": 0.0,
                "avg_wip": 0.0, "avg_rbi": 0.0, "avg_war": 0.0}
    return {
        "games": games,
        "home_wins": home_wins,
        "home_win_rate": home_wins / games,
        "avg_wip": sum(r.wip_ratio for r in records) / games,
        "avg_rbi": sum(r.rbi_ratio for r in records) / games,
        "avg_war": sum(r.war_ratio for r in records) / games,
    }
