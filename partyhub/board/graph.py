from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Protocol, Sequence, Union

logger = logging.getLogger(__name__)

PlayerId = str
EntityRecord = Dict[str, Any]

_OWNER_FIELD = "ownerId"
_BUILDING_FIELD = "building"
_ROAD_FIELD = "hasRoad"


class Collection(str, Enum):
    TILES = "tiles"
    CORNERS = "corners"
    EDGES = "edges"


class BuildingKind(str, Enum):
    SETTLEMENT = "settlement"
    CITY = "city"


def _split_record(record: Mapping[str, Any], reserved: Iterable[str]) -> tuple[str, Dict[str, Any]]:
    if "id" not in record:
        raise ValueError(f"Board record is missing an 'id': {dict(record)!r}")
    reserved_keys = set(reserved) | {"id"}
    data = {key: value for key, value in record.items() if key not in reserved_keys}
    return str(record["id"]), data


@dataclass
class Tile:
    id: str
    data: Dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> EntityRecord:
        return {"id": self.id, **self.data}

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Tile":
        tile_id, data = _split_record(record, ())
        return cls(id=tile_id, data=data)


@dataclass
class Corner:
    id: str
    data: Dict[str, Any] = field(default_factory=dict)
    building: Optional[str] = None
    owner_id: Optional[PlayerId] = None

    def to_record(self) -> EntityRecord:
        return {"id": self.id, **self.data, _BUILDING_FIELD: self.building, _OWNER_FIELD: self.owner_id}

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Corner":
        corner_id, data = _split_record(record, (_BUILDING_FIELD, _OWNER_FIELD))
        return cls(
            id=corner_id,
            data=data,
            building=record.get(_BUILDING_FIELD),
            owner_id=record.get(_OWNER_FIELD),
        )


@dataclass
class Edge:
    id: str
    data: Dict[str, Any] = field(default_factory=dict)
    has_road: bool = False
    owner_id: Optional[PlayerId] = None

    def to_record(self) -> EntityRecord:
        return {"id": self.id, **self.data, _ROAD_FIELD: self.has_road, _OWNER_FIELD: self.owner_id}

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Edge":
        edge_id, data = _split_record(record, (_ROAD_FIELD, _OWNER_FIELD))
        return cls(
            id=edge_id,
            data=data,
            has_road=bool(record.get(_ROAD_FIELD, False)),
            owner_id=record.get(_OWNER_FIELD),
        )


Entity = Union[Tile, Corner, Edge]


class Topology(Protocol):
    """Neighbor resolution for one board shape. Returned ids may not exist."""

    def tile_to_corner_ids(self, tile: Tile) -> Sequence[str]:
        ...

    def corner_to_tile_ids(self, corner: Corner) -> Sequence[str]:
        ...

    def corner_to_edge_ids(self, corner: Corner) -> Sequence[str]:
        ...

    def edge_to_corner_ids(self, edge: Edge) -> Sequence[str]:
        ...

    def corner_to_corner_ids(self, corner: Corner) -> Sequence[str]:
        ...


def _no_neighbors(_entity: Any) -> Sequence[str]:
    return ()


@dataclass(frozen=True)
class FunctionTopology:
    """Topology assembled from plain callables; unset ones resolve to nothing."""

    tile_to_corner_ids: Callable[[Tile], Sequence[str]] = _no_neighbors
    corner_to_tile_ids: Callable[[Corner], Sequence[str]] = _no_neighbors
    corner_to_edge_ids: Callable[[Corner], Sequence[str]] = _no_neighbors
    edge_to_corner_ids: Callable[[Edge], Sequence[str]] = _no_neighbors
    corner_to_corner_ids: Callable[[Corner], Sequence[str]] = _no_neighbors


@dataclass(frozen=True)
class RecordTopology:
    """Topology that reads neighbor id lists stored on the records themselves."""

    tile_corners_key: str = "corner_ids"
    corner_tiles_key: str = "tile_ids"
    corner_edges_key: str = "edge_ids"
    edge_corners_key: str = "corner_ids"
    corner_corners_key: str = "adjacent_corner_ids"

    def tile_to_corner_ids(self, tile: Tile) -> Sequence[str]:
        return list(tile.data.get(self.tile_corners_key, ()))

    def corner_to_tile_ids(self, corner: Corner) -> Sequence[str]:
        return list(corner.data.get(self.corner_tiles_key, ()))

    def corner_to_edge_ids(self, corner: Corner) -> Sequence[str]:
        return list(corner.data.get(self.corner_edges_key, ()))

    def edge_to_corner_ids(self, edge: Edge) -> Sequence[str]:
        return list(edge.data.get(self.edge_corners_key, ()))

    def corner_to_corner_ids(self, corner: Corner) -> Sequence[str]:
        return list(corner.data.get(self.corner_corners_key, ()))


Adjacency = Union[Topology, Callable[[Any], Sequence[str]]]


def _adjacency_fn(adjacency: Adjacency, method_name: str) -> Callable[[Any], Sequence[str]]:
    method = getattr(adjacency, method_name, None)
    if method is not None:
        return method
    return adjacency  # type: ignore[return-value]


def _index(records: Iterable[Mapping[str, Any]], factory: Callable[[Mapping[str, Any]], Entity], label: str) -> Dict[str, Any]:
    if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Iterable):
        raise ValueError(f"Expected a list of {label} records, received {type(records).__name__}.")
    indexed: Dict[str, Any] = {}
    for record in records:
        if not isinstance(record, Mapping):
            raise ValueError(f"Expected a {label} record object, received {record!r}.")
        entity = factory(record)
        if entity.id in indexed:
            raise ValueError(f"Duplicate {label} id {entity.id!r}.")
        indexed[entity.id] = entity
    return indexed


class BoardGraph:
    """
    Tiles, corners and edges of one board, keyed by string id.

    The graph knows nothing about topology or game rules: every adjacency
    query takes the neighbor-resolution function from the caller.
    """

    def __init__(
        self,
        tiles: Dict[str, Tile],
        corners: Dict[str, Corner],
        edges: Dict[str, Edge],
    ) -> None:
        self.tiles = tiles
        self.corners = corners
        self.edges = edges

    @classmethod
    def create(cls, config: Mapping[str, Sequence[Mapping[str, Any]]]) -> "BoardGraph":
        if not isinstance(config, Mapping):
            raise ValueError(f"Board config must be an object, received {type(config).__name__}.")
        tiles = _index(config.get("tiles", ()), Tile.from_record, "tile")
        corners = _index(config.get("corners", ()), Corner.from_record, "corner")
        edges = _index(config.get("edges", ()), Edge.from_record, "edge")
        for corner in corners.values():
            corner.building = None
            corner.owner_id = None
        for edge in edges.values():
            edge.has_road = False
            edge.owner_id = None
        logger.debug("Created board: %d tiles, %d corners, %d edges", len(tiles), len(corners), len(edges))
        return cls(tiles, corners, edges)

    def _collection(self, collection: Union[Collection, str]) -> Dict[str, Any]:
        """Entities of ``collection``; an unknown collection name is empty."""
        try:
            kind = Collection(collection)
        except ValueError:
            return {}
        if kind is Collection.TILES:
            return self.tiles
        if kind is Collection.CORNERS:
            return self.corners
        return self.edges

    def get(self, collection: Union[Collection, str], entity_id: str) -> Optional[Entity]:
        return self._collection(collection).get(entity_id)

    def get_all(self, collection: Union[Collection, str]) -> List[Entity]:
        return list(self._collection(collection).values())

    def get_tile(self, tile_id: str) -> Optional[Tile]:
        return self.tiles.get(tile_id)

    def get_corner(self, corner_id: str) -> Optional[Corner]:
        return self.corners.get(corner_id)

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self.edges.get(edge_id)

    def get_all_tiles(self) -> List[Tile]:
        return list(self.tiles.values())

    def get_all_corners(self) -> List[Corner]:
        return list(self.corners.values())

    def get_all_edges(self) -> List[Edge]:
        return list(self.edges.values())

    # Adjacency queries: unknown source -> [], unresolved neighbor ids dropped.

    def get_tile_corners(self, tile_id: str, adjacency: Adjacency) -> List[Corner]:
        tile = self.tiles.get(tile_id)
        if tile is None:
            return []
        corner_ids = _adjacency_fn(adjacency, "tile_to_corner_ids")(tile)
        return [self.corners[cid] for cid in corner_ids if cid in self.corners]

    def get_corner_tiles(self, corner_id: str, adjacency: Adjacency) -> List[Tile]:
        corner = self.corners.get(corner_id)
        if corner is None:
            return []
        tile_ids = _adjacency_fn(adjacency, "corner_to_tile_ids")(corner)
        return [self.tiles[tid] for tid in tile_ids if tid in self.tiles]

    def get_corner_adjacent_edges(self, corner_id: str, adjacency: Adjacency) -> List[Edge]:
        corner = self.corners.get(corner_id)
        if corner is None:
            return []
        edge_ids = _adjacency_fn(adjacency, "corner_to_edge_ids")(corner)
        return [self.edges[eid] for eid in edge_ids if eid in self.edges]

    def get_adjacent_corners(self, corner_id: str, adjacency: Adjacency) -> List[Corner]:
        corner = self.corners.get(corner_id)
        if corner is None:
            return []
        corner_ids = _adjacency_fn(adjacency, "corner_to_corner_ids")(corner)
        return [self.corners[cid] for cid in corner_ids if cid in self.corners]

    def place_building(self, corner_id: str, building: Union[BuildingKind, str], player_id: PlayerId) -> bool:
        corner = self.corners.get(corner_id)
        if corner is None:
            return False
        corner.building = building.value if isinstance(building, BuildingKind) else building
        corner.owner_id = player_id
        return True

    def place_road(self, edge_id: str, player_id: PlayerId) -> bool:
        edge = self.edges.get(edge_id)
        if edge is None:
            return False
        edge.has_road = True
        edge.owner_id = player_id
        return True

    def is_corner_occupied(self, corner_id: str) -> bool:
        corner = self.corners.get(corner_id)
        return corner is not None and corner.building is not None

    def is_edge_occupied(self, edge_id: str) -> bool:
        edge = self.edges.get(edge_id)
        return edge is not None and edge.has_road

    def get_player_buildings(self, player_id: PlayerId) -> List[Corner]:
        return [
            corner for corner in self.corners.values()
            if corner.owner_id == player_id and corner.building
        ]

    def get_player_roads(self, player_id: PlayerId) -> List[Edge]:
        return [edge for edge in self.edges.values() if edge.owner_id == player_id and edge.has_road]

    def player_ids(self) -> List[PlayerId]:
        seen: Dict[PlayerId, None] = {}
        for entity in (*self.corners.values(), *self.edges.values()):
            if entity.owner_id is not None:
                seen.setdefault(entity.owner_id, None)
        return list(seen)

    def serialize(self) -> Dict[str, List[EntityRecord]]:
        return {
            Collection.TILES.value: [tile.to_record() for tile in self.tiles.values()],
            Collection.CORNERS.value: [corner.to_record() for corner in self.corners.values()],
            Collection.EDGES.value: [edge.to_record() for edge in self.edges.values()],
        }

    @classmethod
    def deserialize(cls, data: Mapping[str, Sequence[Mapping[str, Any]]]) -> "BoardGraph":
        if not isinstance(data, Mapping):
            raise ValueError(f"Board data must be an object, received {type(data).__name__}.")
        return cls(
            _index(data.get("tiles", ()), Tile.from_record, "tile"),
            _index(data.get("corners", ()), Corner.from_record, "corner"),
            _index(data.get("edges", ()), Edge.from_record, "edge"),
        )

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.serialize(), **kwargs)

    @classmethod
    def from_json(cls, text: str) -> "BoardGraph":
        return cls.deserialize(json.loads(text))
