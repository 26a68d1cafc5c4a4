"""
GameState entity - a decoded Battlesnake request for a single turn.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from .board import Board
from .snake import Snake


class InvalidGameStateError(ValueError):
    """Raised when an incoming payload cannot be decoded into a GameState."""


@dataclass(frozen=True)
class Game:
    """
    Game metadata. Opaque to the decision logic; kept for logging.

    Attributes:
        id: unique game identifier
        ruleset: ruleset name, version and settings as sent by the server
        map: map name ("standard", "royale", ...)
        source: where the game was started from ("league", "custom", ...)
        timeout: milliseconds the server waits for a move
    """

    id: str
    ruleset: Dict[str, Any] = field(default_factory=dict)
    map: str = ""
    source: str = ""
    timeout: int = 500

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Game":
        return cls(
            id=str(data["id"]),
            ruleset=dict(data.get("ruleset") or {}),
            map=data.get("map", ""),
            source=data.get("source", ""),
            timeout=int(data.get("timeout", 500)),
        )


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific turn, from our snake's point of view.

    Attributes:
        game: game metadata
        turn: turn number (0-based), used for logging only
        board: the board, including every live snake
        you: the snake we are deciding for
    """

    game: Game
    turn: int
    board: Board
    you: Snake

    @classmethod
    def from_dict(cls, data: Any) -> "GameState":
        """
        Decode a Battlesnake request body.

        Raises:
            InvalidGameStateError: If a required field is missing or malformed.
        """
        if not isinstance(data, dict):
            raise InvalidGameStateError("Game state must be a JSON object")

        for key in ("game", "turn", "board", "you"):
            if key not in data:
                raise InvalidGameStateError(f"Game state is missing '{key}'")

        try:
            game = Game.from_dict(data["game"])
            turn = int(data["turn"])
            board = Board.from_dict(data["board"])
            you = Snake.from_dict(data["you"])
        except KeyError as e:
            raise InvalidGameStateError(f"Game state is missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise InvalidGameStateError(f"Malformed game state: {e}") from e

        return cls(game=game, turn=turn, board=board, you=you)

    def __repr__(self):
        return (
            f"<GameState game={self.game.id}, turn={self.turn}, "
            f"you={self.you.id}, board={self.board!r}>"
        )
