# gamedata/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Tuple
import logging

from .config import NUM_STATS

logger = logging.getLogger(__name__)


def mean_ratio(wip: float, rbi: float, war: float) -> float:
    return (wip + rbi + war) / NUM_STATS


class Bias(IntEnum):
    NONE = 0            # No bias, flip a coin
    PREFER_WIP = 1      # Prefer team with higher WIP
    PREFER_RBI = 2      # Prefer team with higher RBI
    PREFER_WAR = 3      # Prefer team with higher WAR
    PREFER_AVERAGE = 4  # Prefer team with higher average stat ratio

    @classmethod
    def from_code(cls, value: Any, strict: bool = False) -> "Bias":
        """
        Map a bias code (int, integer str or Bias) to a member.
        Anything else (floats, bools, unknown codes) falls back to NONE unless
        strict=True, which raises ValueError.
        """
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, bool):
                raise TypeError(value)
            if isinstance(value, int):
                return cls(value)
            if isinstance(value, str):
                return cls(int(value.strip()))
            raise TypeError(value)
        except (TypeError, ValueError):
            if strict:
                raise ValueError(f"Unknown winner bias code: {value!r}") from None
            logger.warning("Unknown winner bias code %r, falling back to %s", value, cls.NONE.name)
            return cls.NONE

    @property
    def label(self) -> str:
        return BIAS_LABELS[self]


BIAS_LABELS: Dict[Bias, str] = {
    Bias.NONE: "None (random)",
    Bias.PREFER_WIP: "Prefer Higher WIP Ratio",
    Bias.PREFER_RBI: "Prefer Higher RBI Ratio",
    Bias.PREFER_WAR: "Prefer Higher WAR Ratio",
    Bias.PREFER_AVERAGE: "Prefer Higher Average Ratio",
}


@dataclass(frozen=True)
class Matchup:
    home_team: int
    away_team: int

    def __post_init__(self) -> None:
        if self.home_team == self.away_team:
            raise ValueError(f"Team {self.home_team} cannot play itself")

    @property
    def pair(self) -> Tuple[int, int]:
        a, b = sorted((self.home_team, self.away_team))
        return a, b


@dataclass(frozen=True)
class MatchRecord:
    game_index: int
    home_team: int
    away_team: int
    wip_ratio: float   # WIP ratio (home / away)
    rbi_ratio: float   # RBI ratio (home / away)
    war_ratio: float   # WAR ratio (home / away)
    home_win: bool

    @property
    def pair(self) -> Tuple[int, int]:
        a, b = sorted((self.home_team, self.away_team))
        return a, b

    @property
    def average_ratio(self) -> float:
        return mean_ratio(self.wip_ratio, self.rbi_ratio, self.war_ratio)

    def to_stats_row(self) -> Dict[str, Any]:
        return {
            "gameIndex": self.game_index,
            "homeTeam": self.home_team,
            "awayTeam": self.away_team,
            "wipRatio": self.wip_ratio,
            "rbiRatio": self.rbi_ratio,
            "warRatio": self.war_ratio,
        }

    def to_results_row(self) -> Dict[str, Any]:
        return {
            "gameIndex": self.game_index,
            "homeTeam": self.home_team,
            "awayTeam": self.away_team,
            "homeWin": "true" if self.home_win else "false",
        }
