"""
Portal HTTP surface: menu text upload and health check.

Covers:
  POST /api/menus/parse-text (JSON):
  - Success envelope with result + summary
  - menuName optional; config DEFAULT_MENU_NAME used when absent
  - Empty text -> 200 with "no items detected"
  - Missing / non-string text -> 400
  - Non-object JSON -> 400
  - Text over MENU_TEXT_MAX_CHARS -> 413
  - Parser failure -> 422 with details

  POST /api/menus/parse-text (multipart):
  - .txt upload parsed, menu name defaults to file stem
  - Unsupported extension -> 400
  - Non UTF-8 bytes -> 400
  - Upload over MAX_CONTENT_LENGTH -> 413

  Misc:
  - Neither JSON nor file -> 400
  - GET /health
  - Unknown route / wrong method -> JSON 404 / 405
"""

import io
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

import portal.routes.menus as menus_routes
from menu_engine.contracts import ParseResult
from portal.app import create_app

FIXTURES = Path(__file__).parent / "fixtures"
BEVERAGE_MENU = (FIXTURES / "beverage_menu.txt").read_text(encoding="utf-8")

ENDPOINT = "/api/menus/parse-text"


def _make_client(**overrides):
    cfg = {"TESTING": True, "SECRET_KEY": "test-secret", "DEFAULT_MENU_NAME": ""}
    cfg.update(overrides)
    return create_app(cfg).test_client()


@pytest.fixture()
def client():
    with _make_client() as c:
        yield c


# ===========================================================================
# SECTION 1: JSON payloads
# ===========================================================================

class TestParseTextJson:

    def test_success_envelope(self, client):
        resp = client.post(ENDPOINT, json={"text": BEVERAGE_MENU, "menuName": "Bar Menu"})
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["ok"] is True
        assert "message" not in body
        data = body["result"]["data"]
        assert body["result"]["success"] is True
        assert data["menuName"] == "Bar Menu"
        assert data["totalItemsFound"] == 10
        assert data["items"][4]["beerStyle"] == "IPA"
        assert body["summary"]["beverageCount"] == 10

    def test_menu_name_from_config(self):
        with _make_client(DEFAULT_MENU_NAME="House Menu") as c:
            resp = c.post(ENDPOINT, json={"text": "Punk IPA £5.80"})
        assert resp.get_json()["result"]["data"]["menuName"] == "House Menu"

    def test_menu_name_derived_when_absent(self, client):
        resp = client.post(ENDPOINT, json={"text": BEVERAGE_MENU})
        assert resp.get_json()["result"]["data"]["menuName"] == "Cocktail Menu"

    def test_empty_text_no_items(self, client):
        resp = client.post(ENDPOINT, json={"text": "   "})
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["ok"] is True
        assert body["message"] == "no items detected"
        assert body["result"]["data"]["items"] == []

    def test_missing_text(self, client):
        resp = client.post(ENDPOINT, json={"menuName": "Bar"})
        assert resp.status_code == 400
        assert resp.get_json() == {"ok": False, "error": "Missing 'text'"}

    def test_text_not_string(self, client):
        resp = client.post(ENDPOINT, json={"text": 5})
        assert resp.status_code == 400
        assert "must be a string" in resp.get_json()["error"]

    def test_menu_name_not_string(self, client):
        resp = client.post(ENDPOINT, json={"text": "Cola £2.50", "menuName": ["Bar"]})
        assert resp.status_code == 400
        assert "'menuName'" in resp.get_json()["error"]

    def test_json_array(self, client):
        resp = client.post(ENDPOINT, json=["Cola £2.50"])
        assert resp.status_code == 400
        assert "JSON object" in resp.get_json()["error"]

    def test_text_too_long(self):
        with _make_client(MENU_TEXT_MAX_CHARS=20) as c:
            resp = c.post(ENDPOINT, json={"text": BEVERAGE_MENU})
        assert resp.status_code == 413
        assert resp.get_json()["ok"] is False
        assert "too long" in resp.get_json()["error"]

    def test_parse_failure_422(self, client, monkeypatch):
        monkeypatch.setattr(
            menus_routes, "parse_text",
            lambda text, name: ParseResult.failed("Menu parsing failed: boom"),
        )
        resp = client.post(ENDPOINT, json={"text": "Cola £2.50"})
        assert resp.status_code == 422
        assert resp.get_json() == {
            "ok": False,
            "error": "could not parse menu; please check formatting",
            "details": ["Menu parsing failed: boom"],
        }


# ===========================================================================
# SECTION 2: File uploads
# ===========================================================================

class TestParseTextUpload:

    def test_txt_upload(self, client):
        resp = client.post(
            ENDPOINT,
            data={"file": (io.BytesIO(BEVERAGE_MENU.encode("utf-8")), "bar_menu.txt")},
            content_type="multipart/form-data",
        )
        assert resp.status_code == 200
        data = resp.get_json()["result"]["data"]
        assert data["menuName"] == "bar_menu"
        assert data["totalItemsFound"] == 10

    def test_upload_with_menu_name_and_bom(self, client):
        raw = b"\xef\xbb\xbf" + "SPIRITS\nGrey Goose Vodka £8.50\n".encode("utf-8")
        resp = client.post(
            ENDPOINT,
            data={"file": (io.BytesIO(raw), "menu.txt"), "menuName": "Spirits List"},
            content_type="multipart/form-data",
        )
        data = resp.get_json()["result"]["data"]
        assert data["menuName"] == "Spirits List"
        assert data["items"][0]["category"] == "SPIRITS"

    def test_unsupported_extension(self, client):
        resp = client.post(
            ENDPOINT,
            data={"file": (io.BytesIO(b"%PDF-1.4"), "menu.pdf")},
            content_type="multipart/form-data",
        )
        assert resp.status_code == 400
        assert "Unsupported file type: .pdf" in resp.get_json()["error"]

    def test_not_utf8(self, client):
        resp = client.post(
            ENDPOINT,
            data={"file": (io.BytesIO(b"\xff\xfe\xfa bad bytes"), "menu.txt")},
            content_type="multipart/form-data",
        )
        assert resp.status_code == 400
        assert "UTF-8" in resp.get_json()["error"]

    def test_upload_too_large(self):
        with _make_client(MAX_CONTENT_LENGTH=256) as c:
            resp = c.post(
                ENDPOINT,
                data={"file": (io.BytesIO(BEVERAGE_MENU.encode("utf-8")), "menu.txt")},
                content_type="multipart/form-data",
            )
        assert resp.status_code == 413
        assert resp.get_json()["ok"] is False


# ===========================================================================
# SECTION 3: Misc
# ===========================================================================

class TestMisc:

    def test_plain_body_rejected(self, client):
        resp = client.post(ENDPOINT, data="Cola £2.50", content_type="text/plain")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Expected JSON payload or a .txt file upload"

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["status"] == "ok"
        assert body["time"].endswith("Z")
        assert body["service"] == "menu-text-engine"
        assert body["maxTextChars"] > 0

    def test_unknown_route(self, client):
        resp = client.get("/api/menus/nope")
        assert resp.status_code == 404
        assert resp.get_json() == {"ok": False, "error": "Not found"}

    def test_wrong_method(self, client):
        resp = client.get(ENDPOINT)
        assert resp.status_code == 405
        assert resp.get_json()["ok"] is False

    def test_json_content_type(self, client):
        resp = client.post(ENDPOINT, json={"text": "Cola £2.50"})
        assert resp.content_type.startswith("application/json")
