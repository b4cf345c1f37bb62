"""Board graph, hex topology and longest-road search."""

from .awards import MIN_LONGEST_ROAD, LongestRoadUpdate, update_longest_road
from .graph import (
    BoardGraph,
    BuildingKind,
    Collection,
    Corner,
    Edge,
    FunctionTopology,
    RecordTopology,
    Tile,
    Topology,
)
from .hexgrid import STANDARD_BOARD_RADIUS, build_hex_board_config
from .paths import PathExplorer, find_longest_path

__all__ = [
    "BoardGraph",
    "BuildingKind",
    "Collection",
    "Corner",
    "Edge",
    "FunctionTopology",
    "RecordTopology",
    "Tile",
    "Topology",
    "STANDARD_BOARD_RADIUS",
    "build_hex_board_config",
    "PathExplorer",
    "find_longest_path",
    "MIN_LONGEST_ROAD",
    "LongestRoadUpdate",
    "update_longest_road",
]
