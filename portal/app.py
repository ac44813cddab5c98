# portal/app.py
"""
Flask app for the menu parsing service.

    flask --app portal.app run

create_app() builds a configured app (tests pass overrides); the module-level
`app` is what the dev server and WSGI hosts pick up.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify
from werkzeug.exceptions import RequestEntityTooLarge

from portal.config import load_config
from portal.routes.core import core_bp
from portal.routes.menus import menus_bp

log = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger("menu_engine").setLevel(level)


def create_app(overrides: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)

    # --- Config ---
    app.config.update(load_config())
    if overrides:
        app.config.update(overrides)

    _configure_logging(app.config["LOG_LEVEL"])

    # --- Blueprints ---
    app.register_blueprint(core_bp)
    app.register_blueprint(menus_bp)

    # --- JSON errors ---
    @app.errorhandler(RequestEntityTooLarge)
    def _too_large(e):
        return jsonify({"ok": False, "error": "File too large. Try a smaller file or raise MAX_CONTENT_LENGTH."}), 413

    @app.errorhandler(404)
    def _not_found(e):
        return jsonify({"ok": False, "error": "Not found"}), 404

    @app.errorhandler(405)
    def _method_not_allowed(e):
        return jsonify({"ok": False, "error": "Method not allowed"}), 405

    log.debug("Portal app created (max text %s chars)", app.config["MENU_TEXT_MAX_CHARS"])
    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=True)
