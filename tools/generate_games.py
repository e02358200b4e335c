# tools/generate_games.py
from __future__ import annotations
import argparse, logging, time
from typing import List, Optional

from gamedata import Bias, expected_game_count, generate_dataset, summarize, write_dataset
from gamedata.config import MAX_NUM_TEAMS

TAG = "[generate_games]"


def _bias_help() -> str:
    lines = ["winner bias:"]
    for b in Bias:
        lines.append(f"  {int(b)} = {b.label}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="generate_games",
        description="Generate round-robin game stats and results CSV files.",
        epilog=_bias_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("num_teams", type=int, help="number of teams to generate data for")
    ap.add_argument("games_per_team_pair", type=int, help="number of times each team plays another")
    ap.add_argument("bias", type=int, help="winner bias code (see below)")
    ap.add_argument("--seed", type=int, default=None, help="seed for reproducible output (default: OS entropy)")
    ap.add_argument("--out-dir", default=".", help="directory for the CSV files")
    ap.add_argument("--header", action="store_true", help="write a header row to each CSV")
    ap.add_argument("-v", "--verbose", action="store_true", help="log every generated game")
    return ap


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = build_parser()
    args = ap.parse_args(argv)
    if not 2 <= args.num_teams <= MAX_NUM_TEAMS:
        ap.error(f"number of teams must be between 2 and {MAX_NUM_TEAMS}")
    if args.games_per_team_pair < 1:
        ap.error("number of times each team plays another must be at least 1")
    try:
        args.bias = Bias.from_code(args.bias, strict=True)
    except ValueError as e:
        ap.error(str(e))
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    t_start = time.perf_counter()
    print(f"{TAG} teams={args.num_teams} passes={args.games_per_team_pair} bias={args.bias.label}")
    records = generate_dataset(args.num_teams, args.games_per_team_pair, args.bias, seed=args.seed)
    assert len(records) == expected_game_count(args.num_teams, args.games_per_team_pair)

    stats_path, results_path = write_dataset(records, args.out_dir, header=args.header)
    s = summarize(records)
    print(f"{TAG} wrote {stats_path} and {results_path}")
    print(f"{TAG} games={s['games']}  home_wins={s['home_wins']}  home_win_rate={s['home_win_rate']:.3f}")
    print(f"Time taken: {time.perf_counter() - t_start:.2f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
