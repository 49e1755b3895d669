from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, NamedTuple, Optional

from monorail.core import Move, Outcome, Player


class SearchResult(NamedTuple):
    outcome: Outcome
    move: Optional[Move]

    def wins_for(self, player: Player) -> bool:
        return self.outcome is player.winning_outcome()


@dataclass
class SearchStats:
    nodes: int = 0
    leaves: int = 0
    table_hits: int = 0
    table_misses: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


def loss_for(player: Player) -> SearchResult:
    """No move available (or none that wins): the opponent has the track."""
    return SearchResult(player.opponent().winning_outcome(), None)
