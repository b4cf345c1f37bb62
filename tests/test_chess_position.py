import unittest

import chess

from partyhub.search import ChessPosition, SearchConfig, Side, evaluate_material, pick_ai_move, search_best_move
from partyhub.search.minimax import DEFAULT_PIECE_VALUES

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
MATE_IN_ONE_FOR_BLACK = "rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq - 0 2"
WHITE_IS_MATED = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


class ChessPositionTests(unittest.TestCase):
    def test_starting_position_is_balanced(self) -> None:
        position = ChessPosition.from_fen(START_FEN)
        self.assertEqual(position.turn, Side.WHITE)
        self.assertEqual(len(position.legal_moves()), 20)
        self.assertEqual(evaluate_material(position, Side.WHITE, DEFAULT_PIECE_VALUES), 0)
        self.assertFalse(position.is_checkmate())
        self.assertFalse(position.is_draw())

    def test_push_and_pop_flip_turn(self) -> None:
        position = ChessPosition.from_fen()
        move = position.legal_moves()[0]
        position.push(move)
        self.assertEqual(position.turn, Side.BLACK)
        self.assertEqual(position.pop(), move)
        self.assertEqual(position.fen(), START_FEN)

    def test_draw_detection(self) -> None:
        stalemate = ChessPosition.from_fen("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
        self.assertTrue(stalemate.is_draw())
        bare_kings = ChessPosition.from_fen("8/8/4k3/8/8/4K3/8/8 w - - 0 1")
        self.assertTrue(bare_kings.is_draw())

    def test_describe_includes_promotion(self) -> None:
        described = ChessPosition.describe(chess.Move.from_uci("a7a8q"))
        self.assertEqual(described.to_dict(), {"from": "a7", "to": "a8", "promotion": "q"})
        self.assertIsNone(ChessPosition.describe(chess.Move.from_uci("e2e4")).promotion)

    def test_malformed_fen_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            ChessPosition.from_fen("not a fen")


class ChessSearchTests(unittest.TestCase):
    def test_start_position_move_is_legal(self) -> None:
        legal = {
            (ChessPosition.describe(move).from_square, ChessPosition.describe(move).to_square)
            for move in ChessPosition.from_fen(START_FEN).legal_moves()
        }
        for depth in (1, 2):
            move = pick_ai_move(START_FEN, depth)
            self.assertIsNotNone(move)
            assert move is not None
            self.assertIn((move["from"], move["to"]), legal)

    def test_start_position_pick_is_reproducible(self) -> None:
        self.assertEqual(pick_ai_move(START_FEN, 1), pick_ai_move(START_FEN, 1))

    def test_search_restores_position(self) -> None:
        position = ChessPosition.from_fen(START_FEN)
        search_best_move(position, SearchConfig(depth=2))
        self.assertEqual(position.fen(), START_FEN)
        self.assertEqual(position.board.move_stack, [])

    def test_finds_mate_in_one(self) -> None:
        move = pick_ai_move(MATE_IN_ONE_FOR_BLACK, 1)
        self.assertEqual(move, {"from": "d8", "to": "h4", "promotion": None})

    def test_prefers_queen_promotion(self) -> None:
        move = pick_ai_move("8/P7/8/8/8/8/8/k6K w - - 0 1", 1)
        self.assertEqual(move, {"from": "a7", "to": "a8", "promotion": "q"})

    def test_mated_side_has_no_move(self) -> None:
        self.assertIsNone(pick_ai_move(WHITE_IS_MATED, 2))


if __name__ == "__main__":
    unittest.main()
