import logging
from flask import Flask, jsonify, request
from flask_cors import CORS

from config import load_settings
from services.move_service import InvalidMoveRequest, handle_move_request

settings = load_settings()

app = Flask(__name__)
app.config["GRID_SIZE"] = settings.grid_size
logging.basicConfig(level=settings.log_level)

# Enable CORS for API routes so the browser front-end (different origin) can call Flask
CORS(app, resources={r"/api/*": {"origins": settings.cors_allowed_origins}})


@app.route("/api/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "gridSize": app.config["GRID_SIZE"]})


@app.route("/api/next-move", methods=["POST"])
def next_move_endpoint():
    """
    Choose the snake's next direction.

    Body:
    - snake: list of {x, y} cells, head first
    - food: {x, y} cell the snake is heading for
    - gridSize: optional board size override

    Returns:
    - 200: direction, targetCell, targetScore and analysis
      (status "no_legal_move" with null direction when the head is boxed in)
    - 400: malformed request
    - 500: unexpected error
    """
    payload = request.get_json(silent=True)
    if payload is None:
        return jsonify({"error": "Request body must be valid JSON"}), 400

    try:
        response = handle_move_request(payload, default_grid_size=app.config["GRID_SIZE"])
        return jsonify(response)

    except InvalidMoveRequest as e:
        logging.warning(f"Rejected next-move request: {e}")
        return jsonify({"error": str(e)}), 400

    except Exception as error:
        logging.error(f"Error computing next move: {error}")
        import traceback
        logging.error(traceback.format_exc())
        return jsonify({"error": "Failed to compute next move"}), 500


if __name__ == "__main__":
    app.run(debug=settings.flask_debug)
