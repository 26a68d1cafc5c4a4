"""
Snake entity for the decision engine.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .geometry import Coordinate


@dataclass(frozen=True)
class Snake:
    """
    Represents a snake on the board for a single turn.

    Attributes:
        id: unique snake identifier within the game
        name: display name
        health: 0-100, drops by one each turn and resets when eating
        body: tuple of Coordinate from head at index 0 to tail at the end
        latency: last response latency reported by the game server, as a string
        shout: optional message the snake shouted last turn
        squad: squad identifier in squad games, empty otherwise
    """

    id: str
    body: Tuple[Coordinate, ...]
    name: str = ""
    health: int = 100
    latency: str = ""
    shout: Optional[str] = None
    squad: str = ""

    def __post_init__(self):
        if not self.body:
            raise ValueError(f"Snake '{self.id}' has an empty body")
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "body", tuple(self.body))

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        return self.body[0]

    @property
    def neck(self) -> Optional[Coordinate]:
        """The segment right behind the head, or None for a single-cell snake."""
        if len(self.body) < 2:
            return None
        return self.body[1]

    @property
    def tail(self) -> Coordinate:
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Snake":
        """
        Build a Snake from a Battlesnake API snake object.

        The wire `head` and `length` fields are derived from `body` and are
        not read.
        """
        return cls(
            id=str(data["id"]),
            body=tuple(Coordinate.from_dict(segment) for segment in data["body"]),
            name=data.get("name", ""),
            health=int(data.get("health", 100)),
            latency=str(data.get("latency", "")),
            shout=data.get("shout"),
            squad=data.get("squad", ""),
        )
