from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .position import Position, Side

logger = logging.getLogger(__name__)

MATE_SCORE = 10_000
DEFAULT_SEARCH_DEPTH = 2
DEFAULT_PIECE_VALUES: Mapping[str, int] = {
    "p": 10,
    "n": 30,
    "b": 30,
    "r": 50,
    "q": 90,
    "k": 900,
}


@dataclass(frozen=True)
class SearchConfig:
    depth: int = DEFAULT_SEARCH_DEPTH
    piece_values: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_PIECE_VALUES))

    def __post_init__(self) -> None:
        if isinstance(self.depth, bool) or not isinstance(self.depth, int):
            raise ValueError(f"Search depth must be an integer, received {self.depth!r}.")
        if self.depth < 1:
            raise ValueError(f"Search depth must be >= 1, received {self.depth}.")


@dataclass(frozen=True)
class SearchResult:
    move: Optional[Any]
    score: float
    nodes: int


class _NodeCounter:
    def __init__(self) -> None:
        self.nodes = 0


def evaluate_material(position: Position, root_side: Side, piece_values: Mapping[str, int]) -> int:
    score = 0
    for piece_type, side in position.pieces():
        value = piece_values.get(piece_type, 0)
        score += value if side == root_side else -value
    return score


def minimax(
    position: Position,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    root_side: Side,
    *,
    piece_values: Mapping[str, int] = DEFAULT_PIECE_VALUES,
    counter: Optional[_NodeCounter] = None,
) -> float:
    """
    Alpha-beta minimax score of ``position`` from ``root_side``'s point of view.

    Mate scores are not scaled by depth: a mate in one and a mate in five
    score the same.
    """
    if counter is not None:
        counter.nodes += 1

    if position.is_checkmate():
        return -MATE_SCORE if position.turn == root_side else MATE_SCORE
    if position.is_draw():
        return 0
    if depth == 0:
        return evaluate_material(position, root_side, piece_values)

    if maximizing:
        best = float("-inf")
        for move in position.legal_moves():
            position.push(move)
            score = minimax(
                position, depth - 1, alpha, beta, False, root_side,
                piece_values=piece_values, counter=counter,
            )
            position.pop()
            best = max(best, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                break
        return best

    best = float("inf")
    for move in position.legal_moves():
        position.push(move)
        score = minimax(
            position, depth - 1, alpha, beta, True, root_side,
            piece_values=piece_values, counter=counter,
        )
        position.pop()
        best = min(best, score)
        beta = min(beta, score)
        if beta <= alpha:
            break
    return best


def search_best_move(position: Position, config: Optional[SearchConfig] = None) -> SearchResult:
    """Best root move for the side to move; the first move wins ties."""
    config = config or SearchConfig()
    root_side = position.turn
    moves = position.legal_moves()
    counter = _NodeCounter()
    if not moves:
        return SearchResult(move=None, score=float("-inf"), nodes=0)

    best_move = moves[0]
    best_score = float("-inf")
    for move in moves:
        position.push(move)
        score = minimax(
            position,
            config.depth - 1,
            float("-inf"),
            float("inf"),
            False,
            root_side,
            piece_values=config.piece_values,
            counter=counter,
        )
        position.pop()
        if score > best_score:
            best_score = score
            best_move = move

    logger.debug(
        "Search depth=%d side=%s picked %s (score=%s, nodes=%d)",
        config.depth,
        root_side.value,
        best_move,
        best_score,
        counter.nodes,
    )
    return SearchResult(move=best_move, score=best_score, nodes=counter.nodes)


def pick_best_move(
    position: Position,
    depth: int = DEFAULT_SEARCH_DEPTH,
    piece_values: Optional[Mapping[str, int]] = None,
) -> Optional[Any]:
    if piece_values is None:
        config = SearchConfig(depth=depth)
    else:
        config = SearchConfig(depth=depth, piece_values=piece_values)
    return search_best_move(position, config).move
