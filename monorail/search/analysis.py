from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from monorail.core import Board, Move, Outcome, Player

from .forced import ForcedResultSearch, SearchConfig


@dataclass(frozen=True)
class ResponseLine:
    """Forced result after ``player`` plays ``move``, with the opponent's reply."""

    player: Player
    move: Move
    outcome: Outcome
    reply: Optional[Move]

    @property
    def winning(self) -> bool:
        return self.outcome is self.player.winning_outcome()


def analyze_move(player: Player, board: Board, move: Move, searcher: ForcedResultSearch) -> ResponseLine:
    board.make_move(move)
    try:
        outcome, reply = searcher.run(player.opponent(), board)
    finally:
        board.undo_move()
    return ResponseLine(player=player, move=move, outcome=outcome, reply=reply)


def analyze_responses(
    player: Player,
    board: Board,
    config: Optional[SearchConfig] = None,
) -> List[ResponseLine]:
    searcher = ForcedResultSearch(config)
    return [analyze_move(player, board, move, searcher) for move in board.legal_moves()]
