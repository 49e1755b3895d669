from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Hashable, Optional, Tuple

from monorail.core import Board, Player

from .alpha_beta import AlphaBetaSearch
from .result import SearchResult, SearchStats, loss_for
from .table import TranspositionTable

logger = logging.getLogger(__name__)

ALGORITHMS: Tuple[str, ...] = ("and_or", "alpha_beta")


@dataclass
class SearchConfig:
    algorithm: str = "and_or"
    use_transposition_table: bool = True
    table_size: int = 1_000_000
    log_every: int = 0

    def __post_init__(self) -> None:
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown search algorithm {self.algorithm!r}; expected one of {ALGORITHMS}.")
        if self.table_size <= 0:
            raise ValueError("table_size must be positive.")
        if self.log_every < 0:
            raise ValueError("log_every must be non-negative.")


class ForcedResultSearch:
    """Exhaustive win/loss search over a single board mutated in place.

    A position is a win for the player to move iff some legal move leads to a
    position that is a win for them with the opponent to move. The first such
    move in generation order is reported. With no legal moves left the player
    to move has lost.

    The transposition table persists across ``run`` calls on the same search
    object, so analysing several positions of one game reuses earlier work.
    """

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or SearchConfig()
        self.stats = SearchStats()
        self.table: Optional[TranspositionTable[SearchResult]] = None
        if self.config.use_transposition_table and self.config.algorithm == "and_or":
            self.table = TranspositionTable(self.config.table_size)

    # ------------------------------------------------------------------
    def run(self, player: Player, board: Board) -> SearchResult:
        if self.config.algorithm == "alpha_beta":
            result = AlphaBetaSearch(self.stats).run(player, board)
        else:
            result = self._and_or(player, board)
        logger.debug(
            "Search for %s finished: %s via %s (%s)",
            player.name,
            result.outcome.name,
            result.move,
            self.stats.as_dict(),
        )
        return result

    # ------------------------------------------------------------------
    def _and_or(self, player: Player, board: Board) -> SearchResult:
        self.stats.nodes += 1
        if self.config.log_every and self.stats.nodes % self.config.log_every == 0:
            logger.debug("Visited %d nodes (depth %d)", self.stats.nodes, board.depth)

        if self.table is None:
            return self._expand(player, board)

        key: Hashable = (board.key(), player)
        cached = self.table.get(key)
        if cached is not None:
            self.stats.table_hits += 1
            return cached
        self.stats.table_misses += 1
        result = self._expand(player, board)
        self.table.put(key, result)
        return result

    def _expand(self, player: Player, board: Board) -> SearchResult:
        moves = board.legal_moves()
        if not moves:
            self.stats.leaves += 1
            return loss_for(player)

        for move in moves:
            board.make_move(move)
            try:
                reply = self._and_or(player.opponent(), board)
            finally:
                board.undo_move()
            if reply.wins_for(player):
                return SearchResult(reply.outcome, move)
        return loss_for(player)


def search(player: Player, board: Board, config: Optional[SearchConfig] = None) -> SearchResult:
    return ForcedResultSearch(config).run(player, board)
