from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple


class Side(str, Enum):
    WHITE = "w"
    BLACK = "b"

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE


@dataclass(frozen=True)
class MoveDescriptor:
    from_square: str
    to_square: str
    promotion: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"from": self.from_square, "to": self.to_square, "promotion": self.promotion}


class Position(Protocol):
    """
    Mutable two-player game state searched in place.

    ``push`` applies a move and hands the turn to the other side; ``pop``
    exactly reverses the most recent ``push``.
    """

    @property
    def turn(self) -> Side:
        ...

    def legal_moves(self) -> List[Any]:
        ...

    def push(self, move: Any) -> None:
        ...

    def pop(self) -> Any:
        ...

    def is_checkmate(self) -> bool:
        ...

    def is_draw(self) -> bool:
        ...

    def pieces(self) -> Iterable[Tuple[str, Side]]:
        ...
