# portal/routes/menus.py
"""
Menu text upload handler.

POST /api/menus/parse-text
  JSON:       {"text": "...", "menuName": "Bar Menu"}
  multipart:  file=<menu.txt>, menuName=<optional>

Responses use the portal envelope:
  200 {"ok": true, "result": <ParseResult>, "summary": {...}[, "message"]}
  400 {"ok": false, "error": "..."}            bad payload
  413 {"ok": false, "error": "..."}            text or upload too large
  422 {"ok": false, "error": "could not parse menu; please check formatting",
       "details": [...]}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.utils import secure_filename

from menu_engine.menu_parser import parse_text
from menu_engine.parse_report import summarize_menu

log = logging.getLogger(__name__)

menus_bp = Blueprint("menus", __name__, url_prefix="/api/menus")

MSG_PARSE_FAILED = "could not parse menu; please check formatting"
MSG_NO_ITEMS = "no items detected"

ALLOWED_TEXT_SUFFIXES = {".txt", ".text", ".md"}


def _error(message: str, status: int):
    return jsonify({"ok": False, "error": message}), status


def _read_upload() -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Return (text, menu_name, error) for a multipart .txt upload."""
    f = request.files["file"]
    filename = secure_filename(f.filename or "")
    suffix = Path(filename).suffix.lower()
    if suffix not in ALLOWED_TEXT_SUFFIXES:
        return None, None, f"Unsupported file type: {suffix or '(none)'}; upload extracted menu text (.txt)"
    try:
        text = f.read().decode("utf-8-sig")
    except UnicodeDecodeError:
        return None, None, "Uploaded file is not valid UTF-8 text"
    menu_name = (request.form.get("menuName") or "").strip() or Path(filename).stem
    return text, menu_name, None


def _read_json() -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Return (text, menu_name, error) for a JSON body."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, None, "Expected JSON object payload"
    text = data.get("text")
    if text is None:
        return None, None, "Missing 'text'"
    if not isinstance(text, str):
        return None, None, "'text' must be a string"
    menu_name = data.get("menuName") or ""
    if not isinstance(menu_name, str):
        return None, None, "'menuName' must be a string"
    return text, menu_name.strip(), None


@menus_bp.post("/parse-text")
def parse_menu_text():
    try:
        if "file" in request.files:
            text, menu_name, err = _read_upload()
        elif request.is_json:
            text, menu_name, err = _read_json()
        else:
            return _error("Expected JSON payload or a .txt file upload", 400)
    except RequestEntityTooLarge:
        return _error("File too large. Try a smaller file or raise MAX_CONTENT_LENGTH.", 413)

    if err:
        return _error(err, 400)

    limit = current_app.config["MENU_TEXT_MAX_CHARS"]
    if len(text) > limit:
        return _error(f"Menu text too long ({len(text)} chars, limit {limit})", 413)

    result = parse_text(text, menu_name or current_app.config.get("DEFAULT_MENU_NAME", ""))
    if not result.success or result.data is None:
        log.warning("Menu parse failed: %s", "; ".join(result.errors))
        return jsonify({"ok": False, "error": MSG_PARSE_FAILED, "details": list(result.errors)}), 422

    body = {
        "ok": True,
        "result": result.to_dict(),
        "summary": summarize_menu(result.data),
    }
    if result.data.total_items_found == 0:
        body["message"] = MSG_NO_ITEMS
    return jsonify(body), 200
