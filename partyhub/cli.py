from __future__ import annotations

import json
import logging
from pathlib import Path

import chess
import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from partyhub.board import (
    MIN_LONGEST_ROAD,
    STANDARD_BOARD_RADIUS,
    BoardGraph,
    RecordTopology,
    build_hex_board_config,
    update_longest_road,
)
from partyhub.board.awards import LongestRoadUpdate
from partyhub.search import DEFAULT_SEARCH_DEPTH, pick_ai_move


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def longest_road_table(board: BoardGraph, update: LongestRoadUpdate) -> Table:
    table = Table(title="Longest Road")
    table.add_column("PLAYER", style="cyan", no_wrap=True)
    table.add_column("LONGEST", justify="right")
    table.add_column("ROADS", justify="right")
    table.add_column("BUILDINGS", justify="right")
    for player_id, length in update.lengths.items():
        marker = " *" if player_id == update.holder else ""
        table.add_row(
            f"{player_id}{marker}",
            str(length),
            str(len(board.get_player_roads(player_id))),
            str(len(board.get_player_buildings(player_id))),
        )
    return table


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log search and award details.")
def main(verbose: bool) -> None:
    """Board and search tools for the party game hub."""
    _configure_logging(verbose)


@main.command("hex-board")
@click.option(
    "--radius",
    default=STANDARD_BOARD_RADIUS,
    show_default=True,
    type=click.IntRange(0, None),
    help="Rings of hexes around the center tile.",
)
@click.option(
    "--output",
    default=None,
    type=click.Path(dir_okay=False, writable=True),
    help="Write the board here instead of stdout.",
)
def hex_board(radius: int, output: str | None) -> None:
    """Write an empty hex board in the serialized board format."""
    board = BoardGraph.create(build_hex_board_config(radius))
    text = board.to_json(indent=2)
    if output is None:
        click.echo(text)
        return
    Path(output).write_text(text + "\n", encoding="utf-8")
    Console().print(f"[green]Wrote[/green] {output} ({len(board.tiles)} tiles)")


@main.command("longest-road")
@click.argument("board_json", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--min-length",
    default=MIN_LONGEST_ROAD,
    show_default=True,
    type=click.IntRange(1, None),
    help="Shortest road that earns the bonus.",
)
@click.option("--holder", default=None, help="Player currently holding the bonus.")
def longest_road(board_json: str, min_length: int, holder: str | None) -> None:
    """Longest road per player for a serialized board."""
    try:
        board = BoardGraph.from_json(Path(board_json).read_text(encoding="utf-8"))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="BOARD_JSON") from exc

    player_ids = board.player_ids()
    if holder is not None and holder not in player_ids:
        player_ids.append(holder)
    update = update_longest_road(board, player_ids, holder, RecordTopology(), min_length=min_length)

    console = Console()
    console.print(longest_road_table(board, update))
    if update.holder is None:
        console.print("Bonus holder: none")
    else:
        console.print(f"Bonus holder: [bold]{update.holder}[/bold] (length {update.length})")


@main.command("best-move")
@click.argument("fen", required=False, default=chess.STARTING_FEN)
@click.option(
    "--depth",
    default=DEFAULT_SEARCH_DEPTH,
    show_default=True,
    type=click.IntRange(1, None),
    help="Search depth in plies.",
)
def best_move(fen: str, depth: int) -> None:
    """Computer move for the side to move in FEN, printed as JSON."""
    try:
        move = pick_ai_move(fen, depth)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="FEN") from exc
    if move is None:
        raise click.ClickException("No legal move available.")
    click.echo(json.dumps(move))


if __name__ == "__main__":
    main()
