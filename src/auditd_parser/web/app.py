"""Flask application factory for the parser's HTTP API.

The ``create_app`` function owns one ``Logger`` for the lifetime of the
app, capped at ``max_log_entries``, and returns a Flask app with three
endpoints:

- ``POST /api/parse``: body ``{"line": "...", "raw": false}``; returns
  the record JSON, or ``{"error": ...}`` with status 400.
- ``GET /api/log``: the newest logged entries, oldest first.
  ``?level=ERROR`` keeps only entries at or above a level.
- ``GET /api/field-types?names=uid,saddr``: the resolved type of each
  name, null for names with no interpreter.
"""

from __future__ import annotations

from flask import Flask, Response, jsonify, request

from auditd_parser.config import Settings, get_settings
from auditd_parser.interpret import resolve
from auditd_parser.logging import Logger, LogLevel
from auditd_parser.parser import ParseError
from auditd_parser.record import parse_to_dict

_HTTP_BAD_REQUEST = 400


def create_app(settings: Settings | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        settings: Settings to use instead of the environment's.

    Returns:
        A configured Flask application ready to serve.

    """
    config = get_settings() if settings is None else settings
    logger = Logger(max_entries=config.max_log_entries)

    app = Flask(__name__)

    @app.route("/api/parse", methods=["POST"])
    def parse_line() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Parse one audit line.

        Expects JSON body: ``{"line": "..."}`` with an optional ``raw``.

        Returns:
            The record JSON, or an error with status 400.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get("line"), str):
            return jsonify({"error": "Missing 'line' field"}), _HTTP_BAD_REQUEST

        raw = data.get("raw", config.raw)
        if not isinstance(raw, bool):
            return jsonify({"error": "'raw' must be true or false"}), _HTTP_BAD_REQUEST

        line: str = data["line"].rstrip("\r\n")
        try:
            record = parse_to_dict(
                line,
                raw=raw,
                max_line_length=config.max_line_length,
                logger=logger,
            )
        except ParseError as exc:
            return jsonify({"error": str(exc)}), _HTTP_BAD_REQUEST
        return jsonify(record)

    @app.route("/api/log")
    def log() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Return the recorded diagnostic entries.

        Returns:
            JSON with an ``entries`` list.

        """
        level_name = request.args.get("level")
        min_level = None
        if level_name is not None:
            try:
                min_level = LogLevel[level_name.upper()]
            except KeyError:
                return jsonify({"error": f"Unknown level {level_name!r}"}), _HTTP_BAD_REQUEST
        entries = logger.filter(min_level=min_level)
        return jsonify({"entries": [entry.to_dict() for entry in entries]})

    @app.route("/api/field-types")
    def field_types() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Resolve a comma-separated ``names`` parameter to field types.

        Returns:
            JSON mapping each name to its type, or null.

        """
        names = [name for name in request.args.get("names", "").split(",") if name]
        types = {name: None if (t := resolve(name)) is None else str(t) for name in names}
        return jsonify(types)

    return app


def main() -> None:
    """Run the development server.

    This is the ``auditd-parser-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
