"""Alpha-beta formulation of the forced-result search.

YeonSeung maximises and JunSeok minimises over a ranked result domain whose
outer values only serve as the initial window. Since the game has just two
real outcomes this returns the same verdict as the AND/OR walk; it is kept as
an alternative that may prune sibling branches earlier.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Tuple

from monorail.core import Board, Move, Outcome, Player

from .result import SearchResult, SearchStats


class RankedResult(IntEnum):
    LOSS_LIKELY_FOR_JUN_SEOK = 0
    JUN_SEOK_WIN = 1
    YEON_SEUNG_WIN = 2
    LOSS_LIKELY_FOR_YEON_SEUNG = 3

    def to_outcome(self) -> Outcome:
        if self is RankedResult.JUN_SEOK_WIN:
            return Outcome.JUN_SEOK_WIN
        if self is RankedResult.YEON_SEUNG_WIN:
            return Outcome.YEON_SEUNG_WIN
        raise ValueError(f"{self.name} is a window bound, not a game result.")


def _ranked_win(player: Player) -> RankedResult:
    if player is Player.YEON_SEUNG:
        return RankedResult.YEON_SEUNG_WIN
    return RankedResult.JUN_SEOK_WIN


class AlphaBetaSearch:
    def __init__(self, stats: Optional[SearchStats] = None) -> None:
        self.stats = stats or SearchStats()

    def run(self, player: Player, board: Board) -> SearchResult:
        value, move = self._search(
            player,
            board,
            RankedResult.LOSS_LIKELY_FOR_JUN_SEOK,
            RankedResult.LOSS_LIKELY_FOR_YEON_SEUNG,
        )
        outcome = value.to_outcome()
        if outcome is not player.winning_outcome():
            move = None
        return SearchResult(outcome, move)

    def _search(
        self,
        player: Player,
        board: Board,
        alpha: RankedResult,
        beta: RankedResult,
    ) -> Tuple[RankedResult, Optional[Move]]:
        self.stats.nodes += 1
        moves = board.legal_moves()
        if not moves:
            self.stats.leaves += 1
            return _ranked_win(player.opponent()), None

        maximising = player is Player.YEON_SEUNG
        best = alpha if maximising else beta
        best_move: Optional[Move] = None

        for move in moves:
            board.make_move(move)
            try:
                reply, _ = self._search(player.opponent(), board, alpha, beta)
            finally:
                board.undo_move()

            if maximising:
                if reply > best:
                    best = reply
                    alpha = reply
                    best_move = move
                if best >= RankedResult.YEON_SEUNG_WIN:
                    return best, best_move
            else:
                if reply < best:
                    best = reply
                    beta = reply
                    best_move = move
                if best <= RankedResult.JUN_SEOK_WIN:
                    return best, best_move

            if alpha >= beta:
                return best, best_move

        return best, best_move
