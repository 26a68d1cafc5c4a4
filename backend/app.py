import os
import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from snakebrain.domain.game_state import GameState, InvalidGameStateError
from snakebrain.logging_setup import configure_logging
from snakebrain.strategies.registry import (
    resolve, list_strategies, AVAILABLE_STRATEGIES, DEFAULT_STRATEGY,
)

load_dotenv()
configure_logging()
logger = logging.getLogger(__name__)

# Werkzeug logs every request; one line per move is already logged by the strategy
logging.getLogger("werkzeug").setLevel(logging.WARNING)

# Strategy served on the bare routes (/, /start, /move, /end)
SERVED_STRATEGY = os.getenv("BATTLESNAKE_STRATEGY", DEFAULT_STRATEGY)

SERVER_ID = "battlesnake/github/starter-snake-python"

# Only registered strategies get their own routes; anything else is a 404
STRATEGY_PATH = f"<any({', '.join(AVAILABLE_STRATEGIES)}):strategy_name>"

app = Flask(__name__)

# Browser-based board viewers call the info endpoint directly.
# Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins_env:
    allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
else:
    allowed_origins = [
        "https://play.battlesnake.com",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

CORS(app, resources={r"/*": {"origins": allowed_origins}})


def _decode_request() -> GameState:
    return GameState.from_dict(request.get_json(silent=True))


def _bad_request(error: Exception):
    logger.error(f"Rejected {request.method} {request.path}: {error}")
    return jsonify({"error": str(error)}), 400


@app.route("/", methods=["GET"])
@app.route(f"/{STRATEGY_PATH}/", methods=["GET"])
def on_info(strategy_name: Optional[str] = None):
    """
    Battlesnake info endpoint: API version and appearance of the snake.
    """
    strategy = resolve(strategy_name or SERVED_STRATEGY)
    logger.info(f"INFO ({strategy.name})")
    return jsonify(strategy.info.to_dict())


@app.route("/start", methods=["POST"])
@app.route(f"/{STRATEGY_PATH}/start", methods=["POST"])
def on_start(strategy_name: Optional[str] = None):
    try:
        game_state = _decode_request()
    except InvalidGameStateError as error:
        return _bad_request(error)

    resolve(strategy_name or SERVED_STRATEGY).start(game_state)
    return "ok"


@app.route("/move", methods=["POST"])
@app.route(f"/{STRATEGY_PATH}/move", methods=["POST"])
def on_move(strategy_name: Optional[str] = None):
    """
    Decide the next move.

    Returns:
    - 200: {"move": "up" | "down" | "left" | "right"}
    - 400: body is not a valid game state
    """
    try:
        game_state = _decode_request()
    except InvalidGameStateError as error:
        return _bad_request(error)

    strategy = resolve(strategy_name or SERVED_STRATEGY)
    direction = strategy.get_move(game_state)
    return jsonify({"move": direction.value})


@app.route("/end", methods=["POST"])
@app.route(f"/{STRATEGY_PATH}/end", methods=["POST"])
def on_end(strategy_name: Optional[str] = None):
    try:
        game_state = _decode_request()
    except InvalidGameStateError as error:
        return _bad_request(error)

    resolve(strategy_name or SERVED_STRATEGY).end(game_state)
    return "ok"


@app.route("/api/strategies", methods=["GET"])
def get_strategies():
    """
    List the strategies this server can play and the one on the bare routes.
    """
    return jsonify({
        "strategies": list_strategies(),
        "default": resolve(SERVED_STRATEGY).name,
    })


@app.after_request
def identify_server(response):
    response.headers.set("Server", SERVER_ID)
    return response


if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting Battlesnake server at http://{host}:{port} ({SERVED_STRATEGY})")
    app.run(host=host, port=port)
