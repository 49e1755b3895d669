from pathlib import Path

import yaml

from monorail.core import Player, RegionConstraint
from monorail.search import SearchConfig

from scripts.solve import (
    all_responses,
    best_move,
    build_board,
    list_legal_moves,
    load_config,
    parse_player,
)


def write_config(path: Path, **overrides) -> Path:
    cfg = {
        "player": "jun_seok",
        "constraint": None,
        "layout": ["###..", "#####", "#####", "#####"],
        "search": {"algorithm": "and_or"},
    }
    cfg.update(overrides)
    path.write_text(yaml.safe_dump(cfg))
    return path


def test_missing_config_is_empty(tmp_path):
    assert load_config(str(tmp_path / "absent.yaml")) == {}
    assert load_config(None) == {}


def test_default_board_is_starting_layout():
    board = build_board({})
    assert board.free_cells() == 15
    assert board.constraint is None


def test_board_from_config(tmp_path):
    cfg = load_config(str(write_config(tmp_path / "solve.yaml", constraint="left_or_middle")))
    board = build_board(cfg)
    assert board.free_cells() == 2
    assert board.constraint is RegionConstraint.LEFT_OR_MIDDLE
    assert parse_player(cfg["player"]) is Player.JUN_SEOK


def test_best_move_output(tmp_path):
    cfg = load_config(str(write_config(tmp_path / "solve.yaml")))
    board = build_board(cfg)
    output = best_move(Player.JUN_SEOK, board, SearchConfig(**cfg["search"]))
    assert output["result"] == "JUN_SEOK_WIN"
    assert output["move"] == "ONE_RIGHT@(0,3)"
    assert output["board"][1] == " 0 # # # # #"
    assert output["stats"]["nodes"] > 0
    assert board.depth == 0


def test_legal_moves_and_responses(tmp_path):
    cfg = load_config(str(write_config(tmp_path / "solve.yaml")))
    board = build_board(cfg)
    assert list_legal_moves(board) == [
        "SINGLE@(0,3)",
        "ONE_RIGHT@(0,3)",
        "SINGLE@(0,4)",
        "ONE_LEFT@(0,4)",
    ]
    lines = all_responses(Player.JUN_SEOK, board, SearchConfig(), progress=False)
    assert [line["result"] for line in lines] == [
        "YEON_SEUNG_WIN",
        "JUN_SEOK_WIN",
        "YEON_SEUNG_WIN",
        "JUN_SEOK_WIN",
    ]
    assert lines[0]["reply"] == "SINGLE@(0,4)"
    assert lines[1]["reply"] is None
    assert board.depth == 0
