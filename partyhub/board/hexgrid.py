from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

Point = Tuple[float, float]
Hex = Tuple[int, int]

STANDARD_BOARD_RADIUS = 2
CORNER_ROUNDING = 6

# Pointy-top axial directions: E, NE, NW, W, SW, SE.
HEX_DIRECTIONS: Tuple[Hex, ...] = ((1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1))


def generate_hex_grid(radius: int) -> List[Hex]:
    """Axial coordinates of every hex within ``radius`` rings, column by column (q, then r)."""
    return [
        (q, r)
        for q in range(-radius, radius + 1)
        for r in range(max(-radius, -q - radius), min(radius, radius - q) + 1)
    ]


def hex_neighbor(q: int, r: int, direction: int) -> Hex:
    dq, dr = HEX_DIRECTIONS[direction % 6]
    return (q + dq, r + dr)


def hex_neighbors(q: int, r: int) -> List[Hex]:
    return [hex_neighbor(q, r, direction) for direction in range(6)]


def hex_distance(first: Hex, second: Hex) -> int:
    dq = first[0] - second[0]
    dr = first[1] - second[1]
    return max(abs(dq), abs(dr), abs(dq + dr))


def is_hex_in_grid(q: int, r: int, radius: int) -> bool:
    return abs(q) <= radius and abs(r) <= radius and abs(-q - r) <= radius


def hexes_in_range(center: Hex, distance: int) -> List[Hex]:
    return [(center[0] + q, center[1] + r) for q, r in generate_hex_grid(distance)]


def hex_key(q: int, r: int) -> str:
    return f"{q},{r}"


def parse_hex_key(key: str) -> Hex:
    q_text, r_text = key.split(",")
    return (int(q_text), int(r_text))


def axial_to_pixel(q: int, r: int, size: float = 1.0) -> Point:
    x = size * math.sqrt(3) * (q + r / 2)
    y = size * 1.5 * r
    return (x, y)


def hex_corner_points(q: int, r: int, size: float = 1.0) -> Tuple[Point, ...]:
    center = axial_to_pixel(q, r, size)
    points = []
    for corner_index in range(6):
        angle_rad = math.radians(60 * corner_index - 30)
        points.append((center[0] + size * math.cos(angle_rad), center[1] + size * math.sin(angle_rad)))
    return tuple(points)


def corner_id(index: int) -> str:
    return f"C{index}"


def edge_id(first_corner: int, second_corner: int) -> str:
    first, second = sorted((first_corner, second_corner))
    return f"E{first}-{second}"


def build_hex_board_config(
    radius: int = STANDARD_BOARD_RADIUS,
    tile_fields: Optional[Sequence[Mapping[str, Any]]] = None,
) -> Dict[str, List[Dict[str, Any]]]:
    """
    Declarative tile/corner/edge lists for a pointy-top hex board.

    Corners shared by neighboring hexes are merged by position. Every record
    carries the ids of its neighbors so ``RecordTopology`` can resolve
    adjacency: tiles and edges list ``corner_ids``, corners list ``tile_ids``,
    ``edge_ids`` and ``adjacent_corner_ids``, edges also list ``tile_ids``.
    """
    if radius < 0:
        raise ValueError(f"Board radius must be >= 0, received {radius}.")

    coords = generate_hex_grid(radius)
    if tile_fields is not None and len(tile_fields) != len(coords):
        raise ValueError(f"Expected {len(coords)} tile field sets, received {len(tile_fields)}.")

    corner_lookup: Dict[Point, int] = {}
    corner_tiles: Dict[int, List[str]] = {}
    corner_neighbors: Dict[int, set[int]] = {}
    edge_tiles: Dict[Tuple[int, int], List[str]] = {}
    tiles: List[Dict[str, Any]] = []

    for tile_index, (q, r) in enumerate(coords):
        tile_id = hex_key(q, r)
        tile_corner_indices: List[int] = []
        for point in hex_corner_points(q, r):
            key = (round(point[0], CORNER_ROUNDING), round(point[1], CORNER_ROUNDING))
            index = corner_lookup.get(key)
            if index is None:
                index = len(corner_lookup)
                corner_lookup[key] = index
                corner_tiles[index] = []
                corner_neighbors[index] = set()
            tile_corner_indices.append(index)
            corner_tiles[index].append(tile_id)

        for first, second in zip(tile_corner_indices, tile_corner_indices[1:] + tile_corner_indices[:1]):
            edge_key = (min(first, second), max(first, second))
            edge_tiles.setdefault(edge_key, []).append(tile_id)
            corner_neighbors[first].add(second)
            corner_neighbors[second].add(first)

        record: Dict[str, Any] = {"id": tile_id, "q": q, "r": r}
        if tile_fields is not None:
            record.update(tile_fields[tile_index])
        record["corner_ids"] = [corner_id(index) for index in tile_corner_indices]
        tiles.append(record)

    corner_edges: Dict[int, List[str]] = {index: [] for index in corner_tiles}
    edges: List[Dict[str, Any]] = []
    for (first, second), tile_ids in sorted(edge_tiles.items()):
        identifier = edge_id(first, second)
        corner_edges[first].append(identifier)
        corner_edges[second].append(identifier)
        edges.append(
            {
                "id": identifier,
                "corner_ids": [corner_id(first), corner_id(second)],
                "tile_ids": list(tile_ids),
            }
        )

    corners = [
        {
            "id": corner_id(index),
            "tile_ids": list(corner_tiles[index]),
            "edge_ids": list(corner_edges[index]),
            "adjacent_corner_ids": [corner_id(other) for other in sorted(corner_neighbors[index])],
        }
        for index in sorted(corner_tiles)
    ]

    return {"tiles": tiles, "corners": corners, "edges": edges}
