from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from .graph import BoardGraph, PlayerId, Topology
from .paths import PathExplorer

logger = logging.getLogger(__name__)

MIN_LONGEST_ROAD = 5


@dataclass(frozen=True)
class LongestRoadUpdate:
    changed: bool
    holder: Optional[PlayerId]
    length: int
    lengths: Dict[PlayerId, int] = field(default_factory=dict)


def update_longest_road(
    board: BoardGraph,
    player_ids: Sequence[PlayerId],
    current_holder: Optional[PlayerId],
    topology: Topology,
    *,
    min_length: int = MIN_LONGEST_ROAD,
) -> LongestRoadUpdate:
    """
    Recompute every player's longest road and decide who holds the bonus.

    The holder keeps the award on a tie. A challenger takes it only by
    strictly beating a holder who still qualifies. When nobody reaches
    ``min_length`` the award is dropped.
    """
    explorer = PathExplorer(board, topology)
    lengths: Dict[PlayerId, int] = {}
    max_length = min_length - 1
    candidate: Optional[PlayerId] = None

    for player_id in player_ids:
        length = explorer.longest_path(player_id)
        lengths[player_id] = length
        if length > max_length:
            max_length = length
            candidate = player_id
        elif length == max_length and length >= min_length:
            if current_holder is not None and lengths.get(current_holder) == length:
                candidate = current_holder

    holder_length = lengths.get(current_holder, 0) if current_holder is not None else 0

    if max_length >= min_length:
        if current_holder is not None and holder_length < min_length:
            return _changed(current_holder, candidate, max_length, lengths)
        if candidate != current_holder and (current_holder is None or max_length > holder_length):
            return _changed(current_holder, candidate, max_length, lengths)
    elif current_holder is not None:
        return _changed(current_holder, None, 0, lengths)

    return LongestRoadUpdate(changed=False, holder=current_holder, length=holder_length, lengths=lengths)


def _changed(
    previous: Optional[PlayerId],
    holder: Optional[PlayerId],
    length: int,
    lengths: Dict[PlayerId, int],
) -> LongestRoadUpdate:
    logger.debug("Longest road moves from %s to %s (length %d)", previous, holder, length)
    return LongestRoadUpdate(changed=True, holder=holder, length=length, lengths=lengths)
