#!/usr/bin/env python3
"""Solve the track puzzle from the console: list moves, find the forced result, or analyse replies."""

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from tqdm.auto import tqdm

from monorail.core import Board, Move, Player, RegionConstraint, initialize_board, parse_layout
from monorail.search import ForcedResultSearch, SearchConfig, analyze_move

DEFAULT_CONFIG = "configs/solve.yaml"


def load_config(path: Optional[str]) -> Dict:
    if not path:
        return {}
    cfg_path = Path(path)
    if not cfg_path.exists():
        return {}
    return yaml.safe_load(cfg_path.read_text()) or {}


def build_board(cfg: Dict) -> Board:
    constraint = cfg.get("constraint")
    board_type = RegionConstraint[constraint.upper()] if constraint else None
    layout = cfg.get("layout")
    if layout:
        return parse_layout(layout, board_type)
    return initialize_board(board_type)


def parse_player(name: str) -> Player:
    try:
        return Player[name.upper()]
    except KeyError as exc:
        raise ValueError(f"Unknown player {name!r}.") from exc


def format_move(move: Optional[Move]) -> Optional[str]:
    return str(move) if move is not None else None


def board_after(board: Board, move: Move) -> List[str]:
    board.make_move(move)
    try:
        return board.render().splitlines()
    finally:
        board.undo_move()


def list_legal_moves(board: Board) -> List[str]:
    return [str(move) for move in board.legal_moves()]


def best_move(player: Player, board: Board, config: SearchConfig) -> Dict[str, object]:
    searcher = ForcedResultSearch(config)
    outcome, move = searcher.run(player, board)
    output: Dict[str, object] = {
        "player": player.name,
        "result": outcome.name,
        "move": format_move(move),
        "stats": searcher.stats.as_dict(),
    }
    if move is not None:
        output["board"] = board_after(board, move)
    return output


def all_responses(
    player: Player,
    board: Board,
    config: SearchConfig,
    *,
    progress: bool = True,
) -> List[Dict[str, object]]:
    searcher = ForcedResultSearch(config)
    moves = board.legal_moves()
    lines = []
    for move in tqdm(moves, desc="Responses", disable=not progress):
        line = analyze_move(player, board, move, searcher)
        lines.append(
            {
                "move": str(line.move),
                "reply_by": player.opponent().name,
                "reply": format_move(line.reply),
                "result": line.outcome.name,
            }
        )
    return lines


def main() -> None:
    parser = argparse.ArgumentParser(description="Find forced wins in the JunSeok vs YeonSeung track puzzle.")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG)
    parser.add_argument("-l", "--legal", action="store_true", help="List the legal moves")
    parser.add_argument("-b", "--best", action="store_true", help="Print the forced result and its move")
    parser.add_argument("-a", "--all", action="store_true", help="Print the forced reply to every legal move")
    parser.add_argument("--player", choices=[p.name.lower() for p in Player])
    parser.add_argument("--algorithm", choices=["and_or", "alpha_beta"])
    parser.add_argument("--no-table", action="store_true", help="Disable the transposition table")
    parser.add_argument("--log-every", type=int)
    parser.add_argument("--quiet", action="store_true", help="Hide the progress bar")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_config(args.config)
    search_cfg = dict(cfg.get("search", {}))
    if args.algorithm is not None:
        search_cfg["algorithm"] = args.algorithm
    if args.no_table:
        search_cfg["use_transposition_table"] = False
    if args.log_every is not None:
        search_cfg["log_every"] = args.log_every
    config = SearchConfig(**search_cfg)

    player = parse_player(args.player or cfg.get("player", Player.YEON_SEUNG.name))
    board = build_board(cfg)

    if not (args.legal or args.best or args.all):
        args.best = True

    output: Dict[str, object] = {"board": board.render().splitlines()}
    if args.legal:
        output["legal_moves"] = list_legal_moves(board)
    if args.best:
        output["best"] = best_move(player, board, config)
    if args.all:
        output["responses"] = all_responses(player, board, config, progress=not args.quiet)
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
