# portal/routes/core.py
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

core_bp = Blueprint("core", __name__)

SERVICE_NAME = "menu-text-engine"


@core_bp.get("/health")
def health():
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return jsonify({
        "status": "ok",
        "service": SERVICE_NAME,
        "maxTextChars": current_app.config["MENU_TEXT_MAX_CHARS"],
        "time": now.isoformat(timespec="seconds") + "Z",
    })
