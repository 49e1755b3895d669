"""Exhaustive forced-result search."""

from .result import SearchResult, SearchStats
from .table import TranspositionTable
from .alpha_beta import AlphaBetaSearch, RankedResult
from .forced import ALGORITHMS, ForcedResultSearch, SearchConfig, search
from .analysis import ResponseLine, analyze_move, analyze_responses

__all__ = [
    "ALGORITHMS",
    "AlphaBetaSearch",
    "ForcedResultSearch",
    "RankedResult",
    "ResponseLine",
    "SearchConfig",
    "SearchResult",
    "SearchStats",
    "TranspositionTable",
    "analyze_move",
    "analyze_responses",
    "search",
]
