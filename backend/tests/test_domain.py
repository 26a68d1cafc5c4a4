"""
Tests for the domain entities: Snake, Board and GameState decoding.
"""

import copy
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snakebrain.domain.board import Board  # noqa: E402
from snakebrain.domain.game_state import Game, GameState, InvalidGameStateError  # noqa: E402
from snakebrain.domain.geometry import Coordinate  # noqa: E402
from snakebrain.domain.snake import Snake  # noqa: E402


def make_payload():
    """A move request shaped like the ones the Battlesnake engine sends."""
    you = {
        "id": "snake-you",
        "name": "Us",
        "health": 87,
        "body": [{"x": 1, "y": 1}, {"x": 1, "y": 0}, {"x": 0, "y": 0}],
        "head": {"x": 1, "y": 1},
        "length": 3,
        "latency": "111",
        "shout": "",
        "squad": "",
    }
    other = {
        "id": "snake-other",
        "name": "Them",
        "health": 50,
        "body": [{"x": 5, "y": 4}, {"x": 5, "y": 3}],
        "head": {"x": 5, "y": 4},
        "length": 2,
        "latency": "222",
    }
    return {
        "game": {
            "id": "game-00fe20da",
            "ruleset": {"name": "standard", "version": "v1.2.3"},
            "map": "standard",
            "source": "league",
            "timeout": 500,
        },
        "turn": 14,
        "board": {
            "height": 11,
            "width": 11,
            "food": [{"x": 5, "y": 5}, {"x": 9, "y": 0}, {"x": 2, "y": 6}],
            "hazards": [{"x": 0, "y": 10}],
            "snakes": [you, other],
        },
        "you": you,
    }


class TestSnake:
    """Tests for the Snake entity."""

    def test_head_neck_tail_length(self):
        snake = Snake(id="a", body=(Coordinate(5, 5), Coordinate(4, 5), Coordinate(3, 5)))
        assert snake.head == Coordinate(5, 5)
        assert snake.neck == Coordinate(4, 5)
        assert snake.tail == Coordinate(3, 5)
        assert snake.length == 3

    def test_single_cell_snake_has_no_neck(self):
        snake = Snake(id="a", body=[Coordinate(5, 5)])
        assert snake.neck is None
        assert snake.head == snake.tail

    def test_body_is_stored_as_tuple(self):
        snake = Snake(id="a", body=[Coordinate(5, 5), Coordinate(5, 4)])
        assert isinstance(snake.body, tuple)

    def test_empty_body_fails_fast(self):
        with pytest.raises(ValueError):
            Snake(id="a", body=())

    def test_stacked_starting_body_keeps_every_segment(self):
        """On turn 0 all segments share the spawn cell."""
        snake = Snake.from_dict({
            "id": "a",
            "body": [{"x": 1, "y": 1}, {"x": 1, "y": 1}, {"x": 1, "y": 1}],
        })
        assert snake.length == 3
        assert snake.neck == snake.head


class TestBoard:
    """Tests for the Board entity."""

    def test_rejects_degenerate_dimensions(self):
        with pytest.raises(ValueError):
            Board(width=0, height=11)
        with pytest.raises(ValueError):
            Board(width=11, height=-1)

    def test_food_and_hazard_lookups(self):
        board = Board(width=5, height=5, food=[Coordinate(1, 1)], hazards=[Coordinate(2, 2)])
        assert board.is_food(Coordinate(1, 1))
        assert not board.is_food(Coordinate(2, 2))
        assert board.is_hazard(Coordinate(2, 2))
        assert not board.is_hazard(Coordinate(1, 1))

    def test_occupied_cells_and_opponents(self):
        a = Snake(id="a", body=(Coordinate(0, 0), Coordinate(0, 1)))
        b = Snake(id="b", body=(Coordinate(3, 3),))
        board = Board(width=5, height=5, snakes=(a, b))
        assert board.occupied_cells() == {Coordinate(0, 0), Coordinate(0, 1), Coordinate(3, 3)}
        assert board.opponents(a) == (b,)

    def test_render_marks_every_layer(self):
        a = Snake(id="a", body=(Coordinate(0, 0), Coordinate(1, 0)))
        board = Board(
            width=3, height=2,
            food=[Coordinate(2, 1)],
            hazards=[Coordinate(0, 1)],
            snakes=(a,),
        )
        assert board.render() == "\n".join([
            " 1 H . F",
            " 0 0 S .",
            "   0 1 2",
        ])


class TestGameStateDecoding:
    """Tests for GameState.from_dict."""

    def test_decodes_full_payload(self):
        state = GameState.from_dict(make_payload())

        assert state.turn == 14
        assert state.game == Game(
            id="game-00fe20da",
            ruleset={"name": "standard", "version": "v1.2.3"},
            map="standard",
            source="league",
            timeout=500,
        )
        assert state.board.width == 11 and state.board.height == 11
        assert state.board.food == (Coordinate(5, 5), Coordinate(9, 0), Coordinate(2, 6))
        assert state.board.hazards == (Coordinate(0, 10),)
        assert [s.id for s in state.board.snakes] == ["snake-you", "snake-other"]
        assert state.you.head == Coordinate(1, 1)
        assert state.you.health == 87
        assert state.you.latency == "111"

    def test_optional_board_lists_default_to_empty(self):
        payload = make_payload()
        del payload["board"]["hazards"]
        del payload["board"]["food"]
        state = GameState.from_dict(payload)
        assert state.board.food == ()
        assert state.board.hazards == ()

    @pytest.mark.parametrize("key", ["game", "turn", "board", "you"])
    def test_missing_top_level_field(self, key):
        payload = make_payload()
        del payload[key]
        with pytest.raises(InvalidGameStateError, match=key):
            GameState.from_dict(payload)

    def test_missing_nested_field(self):
        payload = make_payload()
        del payload["board"]["width"]
        with pytest.raises(InvalidGameStateError, match="width"):
            GameState.from_dict(payload)

    def test_empty_body_is_malformed(self):
        payload = copy.deepcopy(make_payload())
        payload["you"]["body"] = []
        with pytest.raises(InvalidGameStateError):
            GameState.from_dict(payload)

    @pytest.mark.parametrize("payload", [None, [], "move"])
    def test_non_object_payload(self, payload):
        with pytest.raises(InvalidGameStateError):
            GameState.from_dict(payload)

    def test_invalid_game_state_is_a_value_error(self):
        assert issubclass(InvalidGameStateError, ValueError)
