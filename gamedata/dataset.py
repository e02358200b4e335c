# gamedata/dataset.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

import pandas as pd

from .config import GAME_RESULTS_FILENAME, GAME_STATS_FILENAME, RATIO_FLOAT_FORMAT
from .types import MatchRecord

logger = logging.getLogger(__name__)

# Game stats schema: game #, home code, away code, WIP/RBI/WAR ratios home to away
STATS_COLUMNS = ["gameIndex", "homeTeam", "awayTeam", "wipRatio", "rbiRatio", "warRatio"]
# Game results schema: game #, home code, away code, home team win?
RESULTS_COLUMNS = ["gameIndex", "homeTeam", "awayTeam", "homeWin"]


def stats_frame(records: Iterable[MatchRecord]) -> pd.DataFrame:
    return pd.DataFrame([r.to_stats_row() for r in records], columns=STATS_COLUMNS)


def results_frame(records: Iterable[MatchRecord]) -> pd.DataFrame:
    return pd.DataFrame([r.to_results_row() for r in records], columns=RESULTS_COLUMNS)


def write_dataset(
    records: List[MatchRecord],
    out_dir: Union[str, Path] = ".",
    header: bool = False,
    stats_name: str = GAME_STATS_FILENAME,
    results_name: str = GAME_RESULTS_FILENAME,
) -> Tuple[Path, Path]:
    """
    Write the stats and results tables, one row per record keyed by gameIndex.
    Files are header-less unless header=True. Ratios are rounded to six decimals,
    so a draw just above 1.0 (e.g. 1.0000003, a home win under a strict rule)
    reads back as 1.000000; the results table stays authoritative for homeWin.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    stats_path = out / stats_name
    results_path = out / results_name

    stats_frame(records).to_csv(stats_path, index=False, header=header, float_format=RATIO_FLOAT_FORMAT)
    results_frame(records).to_csv(results_path, index=False, header=header)

    logger.info("Wrote %d games to %s and %s", len(records), stats_path, results_path)
    return stats_path, results_path


def read_dataset(
    out_dir: Union[str, Path] = ".",
    header: bool = False,
    stats_name: str = GAME_STATS_FILENAME,
    results_name: str = GAME_RESULTS_FILENAME,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    out = Path(out_dir)
    stats_path = out / stats_name
    results_path = out / results_name
    for p in (stats_path, results_path):
        if not p.exists():
            raise FileNotFoundError(f"Missing {p}")

    if header:
        stats = pd.read_csv(stats_path)
        results = pd.read_csv(results_path, dtype={"homeWin": str})
    else:
        stats = pd.read_csv(stats_path, header=None, names=STATS_COLUMNS)
        results = pd.read_csv(results_path, header=None, names=RESULTS_COLUMNS, dtype={"homeWin": str})
    return stats, results
