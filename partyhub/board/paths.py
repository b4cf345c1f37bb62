from __future__ import annotations

from typing import Callable, Dict, Iterable, Sequence

from .graph import BoardGraph, Corner, Edge, PlayerId, Topology

EdgeCornersFn = Callable[[Edge], Sequence[str]]
CornerEdgesFn = Callable[[Corner], Sequence[str]]


def find_longest_path(
    board: BoardGraph,
    player_id: PlayerId,
    edge_to_corner_ids: EdgeCornersFn,
    corner_to_edge_ids: CornerEdgesFn,
) -> int:
    """
    Edge count of the player's longest road.

    Every owned edge is tried as a starting point. A corner holding another
    player's building cannot be passed through. Each branch of the search gets
    its own copy of the visited edges, so both arms of a fork are explored in
    full. The cost grows exponentially with branching; fine for boards with
    tens of edges.
    """
    player_edges = board.get_player_roads(player_id)
    if not player_edges:
        return 0

    best = 0
    for start_edge in player_edges:
        length = _extend_path(board, start_edge.id, player_id, set(), edge_to_corner_ids, corner_to_edge_ids)
        best = max(best, length)
    return best


def _extend_path(
    board: BoardGraph,
    edge_id: str,
    player_id: PlayerId,
    visited: set[str],
    edge_to_corner_ids: EdgeCornersFn,
    corner_to_edge_ids: CornerEdgesFn,
) -> int:
    if edge_id in visited:
        return 0

    edge = board.get_edge(edge_id)
    if edge is None or not edge.has_road or edge.owner_id != player_id:
        return 0

    visited.add(edge_id)

    best_continuation = 0
    for corner_id in edge_to_corner_ids(edge):
        corner = board.get_corner(corner_id)
        if corner is None:
            continue
        if corner.building and corner.owner_id != player_id:
            continue

        for next_edge_id in corner_to_edge_ids(corner):
            if next_edge_id == edge_id:
                continue
            continuation = _extend_path(
                board,
                next_edge_id,
                player_id,
                set(visited),
                edge_to_corner_ids,
                corner_to_edge_ids,
            )
            best_continuation = max(best_continuation, continuation)

    return 1 + best_continuation


class PathExplorer:
    """Longest-road lengths on one board for a fixed topology."""

    def __init__(self, board: BoardGraph, topology: Topology) -> None:
        self.board = board
        self.topology = topology

    def longest_path(self, player_id: PlayerId) -> int:
        return find_longest_path(
            self.board,
            player_id,
            self.topology.edge_to_corner_ids,
            self.topology.corner_to_edge_ids,
        )

    def longest_paths(self, player_ids: Iterable[PlayerId]) -> Dict[PlayerId, int]:
        return {player_id: self.longest_path(player_id) for player_id in player_ids}
