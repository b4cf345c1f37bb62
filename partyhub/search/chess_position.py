from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

import chess

from .minimax import DEFAULT_SEARCH_DEPTH, pick_best_move
from .position import MoveDescriptor, Side


class ChessPosition:
    """Position adapter over ``chess.Board``; its move stack backs ``pop``."""

    def __init__(self, board: chess.Board) -> None:
        self.board = board

    @classmethod
    def from_fen(cls, fen: str = chess.STARTING_FEN) -> "ChessPosition":
        return cls(chess.Board(fen))

    @property
    def turn(self) -> Side:
        return Side.WHITE if self.board.turn == chess.WHITE else Side.BLACK

    def legal_moves(self) -> List[chess.Move]:
        return list(self.board.legal_moves)

    def push(self, move: chess.Move) -> None:
        self.board.push(move)

    def pop(self) -> chess.Move:
        return self.board.pop()

    def is_checkmate(self) -> bool:
        return self.board.is_checkmate()

    def is_draw(self) -> bool:
        board = self.board
        return (
            board.is_stalemate()
            or board.is_insufficient_material()
            or board.halfmove_clock >= 100
            or board.is_repetition(3)
        )

    def pieces(self) -> Iterator[Tuple[str, Side]]:
        for piece in self.board.piece_map().values():
            side = Side.WHITE if piece.color == chess.WHITE else Side.BLACK
            yield chess.piece_symbol(piece.piece_type), side

    def fen(self) -> str:
        return self.board.fen()

    @staticmethod
    def describe(move: chess.Move) -> MoveDescriptor:
        promotion = chess.piece_symbol(move.promotion) if move.promotion else None
        return MoveDescriptor(
            from_square=chess.square_name(move.from_square),
            to_square=chess.square_name(move.to_square),
            promotion=promotion,
        )


def pick_ai_move(fen: str = chess.STARTING_FEN, depth: int = DEFAULT_SEARCH_DEPTH) -> Optional[Dict[str, Optional[str]]]:
    """Computer move for the side to move in ``fen``, or None when it has no legal move."""
    position = ChessPosition.from_fen(fen)
    move = pick_best_move(position, depth)
    if move is None:
        return None
    return position.describe(move).to_dict()
