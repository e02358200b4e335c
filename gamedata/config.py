# gamedata/config.py
from __future__ import annotations

from dataclasses import dataclass, field

# -------- League --------
MAX_NUM_TEAMS: int = 30              # enforced by the CLI, not the schedule builder
NUM_STATS: int = 3                   # WIP, RBI, WAR

# -------- Stat ratios (home / away) --------
MIN_WIP_RATIO: float = 0.75
MAX_WIP_RATIO: float = 1.25

MIN_RBI_RATIO: float = 0.75
MAX_RBI_RATIO: float = 1.25

MIN_WAR_RATIO: float = 0.75
MAX_WAR_RATIO: float = 1.25

# Ratio a home team must beat (strictly) to be the winner
WIN_THRESHOLD: float = 1.0

# -------- Output --------
GAME_STATS_FILENAME = "game_stats.csv"
GAME_RESULTS_FILENAME = "game_results.csv"
RATIO_FLOAT_FORMAT = "%.6f"

# -------- RNG / Seeds --------
DEFAULT_BIAS_CODE: int = 0           # Bias.NONE, flip a coin


@dataclass(frozen=True)
class RatioRange:
    low: float
    high: float

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"Invalid ratio range: low={self.low} > high={self.high}")


@dataclass
class GeneratorConfig:
    """Uniform ranges each stat ratio is drawn from."""
    wip_range: RatioRange = field(default_factory=lambda: RatioRange(MIN_WIP_RATIO, MAX_WIP_RATIO))
    rbi_range: RatioRange = field(default_factory=lambda: RatioRange(MIN_RBI_RATIO, MAX_RBI_RATIO))
    war_range: RatioRange = field(default_factory=lambda: RatioRange(MIN_WAR_RATIO, MAX_WAR_RATIO))
