"""Two-player minimax search with alpha-beta pruning."""

from .chess_position import ChessPosition, pick_ai_move
from .minimax import (
    DEFAULT_PIECE_VALUES,
    DEFAULT_SEARCH_DEPTH,
    MATE_SCORE,
    SearchConfig,
    SearchResult,
    evaluate_material,
    minimax,
    pick_best_move,
    search_best_move,
)
from .position import MoveDescriptor, Position, Side

__all__ = [
    "ChessPosition",
    "pick_ai_move",
    "DEFAULT_PIECE_VALUES",
    "DEFAULT_SEARCH_DEPTH",
    "MATE_SCORE",
    "SearchConfig",
    "SearchResult",
    "evaluate_material",
    "minimax",
    "pick_best_move",
    "search_best_move",
    "MoveDescriptor",
    "Position",
    "Side",
]
