# tests/test_cli.py
import pytest
from tools.generate_games import main, parse_args
from gamedata import Bias

def test_cli_writes_both_files(tmp_path, capsys):
    rc = main(["4", "1", "2", "--seed", "9", "--out-dir", str(tmp_path)])
    assert rc == 0
    stats = (tmp_path / "game_stats.csv").read_text().splitlines()
    results = (tmp_path / "game_results.csv").read_text().splitlines()
    assert len(stats) == len(results) == 6
    out = capsys.readouterr().out
    assert "games=6" in out
    assert "Time taken:" in out

def test_cli_header_flag(tmp_path):
    main(["2", "3", "0", "--header", "--out-dir", str(tmp_path)])
    lines = (tmp_path / "game_results.csv").read_text().splitlines()
    assert lines[0] == "gameIndex,homeTeam,awayTeam,homeWin"
    assert len(lines) == 4

def test_parse_args_maps_bias():
    args = parse_args(["3", "1", "4"])
    assert args.bias is Bias.PREFER_AVERAGE
    assert args.seed is None

@pytest.mark.parametrize("argv", [
    ["4", "1", "5"],       # unknown bias code
    ["4", "1", "-1"],
    ["1", "1", "0"],       # too few teams
    ["31", "1", "0"],      # too many teams
    ["4", "0", "0"],       # no games
    ["4", "1"],            # missing argument
    ["four", "1", "0"],    # not an integer
])
def test_cli_rejects_bad_input(argv):
    with pytest.raises(SystemExit) as exc:
        parse_args(argv)
    assert exc.value.code == 2
