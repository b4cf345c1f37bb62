import json
import unittest

from click.testing import CliRunner

from partyhub.board import BoardGraph, build_hex_board_config
from partyhub.cli import main

MATE_IN_ONE_FOR_BLACK = "rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq - 0 2"
WHITE_IS_MATED = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_hex_board_writes_serialized_board(self) -> None:
        result = self.runner.invoke(main, ["hex-board", "--radius", "1"])
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertEqual(len(data["tiles"]), 7)
        self.assertEqual(len(data["corners"]), 24)
        self.assertEqual(len(data["edges"]), 30)

    def test_hex_board_to_file(self) -> None:
        with self.runner.isolated_filesystem():
            result = self.runner.invoke(main, ["hex-board", "--output", "board.json"])
            self.assertEqual(result.exit_code, 0, result.output)
            with open("board.json", encoding="utf-8") as handle:
                board = BoardGraph.from_json(handle.read())
            self.assertEqual(len(board.corners), 54)

    def test_longest_road_reports_holder(self) -> None:
        board = BoardGraph.create(build_hex_board_config(0))
        for edge in board.get_all_edges():
            board.place_road(edge.id, "alice")
        with self.runner.isolated_filesystem():
            with open("board.json", "w", encoding="utf-8") as handle:
                handle.write(board.to_json())
            result = self.runner.invoke(main, ["longest-road", "board.json"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("alice", result.output)
        self.assertIn("Bonus holder: alice (length 6)", result.output)

    def test_longest_road_without_qualifier(self) -> None:
        board = BoardGraph.create(build_hex_board_config(0))
        board.place_road(board.get_all_edges()[0].id, "bob")
        with self.runner.isolated_filesystem():
            with open("board.json", "w", encoding="utf-8") as handle:
                handle.write(board.to_json())
            result = self.runner.invoke(main, ["longest-road", "board.json"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Bonus holder: none", result.output)

    def test_longest_road_rejects_bad_board(self) -> None:
        with self.runner.isolated_filesystem():
            with open("board.json", "w", encoding="utf-8") as handle:
                handle.write('{"corners": [{"id": "a"}, {"id": "a"}]}')
            result = self.runner.invoke(main, ["longest-road", "board.json"])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("Duplicate corner id", result.output)

    def test_longest_road_rejects_json_that_is_not_a_board(self) -> None:
        for text in ("[]", '{"tiles": [1]}', "not json"):
            with self.runner.isolated_filesystem():
                with open("board.json", "w", encoding="utf-8") as handle:
                    handle.write(text)
                result = self.runner.invoke(main, ["longest-road", "board.json"])
            self.assertEqual(result.exit_code, 2, result.output)
            self.assertIsInstance(result.exception, SystemExit)
            self.assertIn("BOARD_JSON", result.output)

    def test_best_move_prints_json(self) -> None:
        result = self.runner.invoke(main, ["best-move", MATE_IN_ONE_FOR_BLACK, "--depth", "1"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output), {"from": "d8", "to": "h4", "promotion": None})

    def test_best_move_defaults_to_start_position(self) -> None:
        result = self.runner.invoke(main, ["best-move", "--depth", "1"])
        self.assertEqual(result.exit_code, 0, result.output)
        move = json.loads(result.output)
        self.assertIn(move["from"][1], "12")

    def test_best_move_without_legal_moves_fails(self) -> None:
        result = self.runner.invoke(main, ["best-move", WHITE_IS_MATED])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("No legal move available", result.output)

    def test_best_move_rejects_bad_fen(self) -> None:
        result = self.runner.invoke(main, ["best-move", "not a fen"])
        self.assertEqual(result.exit_code, 2)


if __name__ == "__main__":
    unittest.main()
