"""Integration tests for zodiacprompt.api.main — FastAPI REST API endpoints.

All tests use the FastAPI TestClient with the real application and the
shipped tables.  Tests cover every endpoint:

- ``GET /`` — HTML page serving.
- ``GET /api/config`` — Form options and defaults.
- ``POST /api/prompt/compile`` — Single prompt or batch.
- ``POST /api/prompt/batch`` — One prompt per sign.
- ``POST /api/prompt/copy-all`` — Copy-all text block.
"""

from __future__ import annotations

from zodiacprompt.core.fragments import SIGNS, THEME_TABLE, ZODIAC_TABLE

# ---------------------------------------------------------------------------
# Index page tests.
# ---------------------------------------------------------------------------


class TestIndexPage:
    """Test GET / — main HTML page."""

    def test_index_returns_html(self, test_client):
        """GET / should return 200 with HTML content."""
        resp = test_client.get("/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "Zodiac Prompt Generator" in resp.text

    def test_static_script_served(self, test_client):
        """The browser script should be served from /static."""
        resp = test_client.get("/static/js/app.js")
        assert resp.status_code == 200
        assert "copyText" in resp.text


# ---------------------------------------------------------------------------
# Configuration endpoint tests.
# ---------------------------------------------------------------------------


class TestGetConfig:
    """Test GET /api/config."""

    def test_config_returns_version(self, test_client):
        data = test_client.get("/api/config").json()
        assert "version" in data

    def test_config_options(self, test_client):
        data = test_client.get("/api/config").json()
        assert data["options"]["gender"] == ["female", "male", "non-binary"]
        assert "dark" in data["options"]["tone"]
        assert data["options"]["theme"] == THEME_TABLE.keys()
        assert data["signs"] == list(SIGNS)

    def test_config_fallbacks(self, test_client):
        data = test_client.get("/api/config").json()
        assert data["fallbacks"] == {
            "gender": "female",
            "tone": "neutral",
            "theme": "space",
            "zodiac": "Aries",
        }

    def test_config_templates_and_timings(self, test_client):
        data = test_client.get("/api/config").json()
        assert data["templates"] == ["classic", "rich"]
        assert data["defaults"]["template"] in data["templates"]
        assert data["timings"]["status_clear_ms"] > 0
        assert data["timings"]["row_status_clear_ms"] > 0


# ---------------------------------------------------------------------------
# Prompt endpoint tests.
# ---------------------------------------------------------------------------


class TestCompile:
    """Test POST /api/prompt/compile."""

    def _payload(self, **overrides) -> dict:
        payload = {"gender": "female", "tone": "dark", "theme": "winter", "sign": "Aries"}
        payload.update(overrides)
        return payload

    def test_single_sign(self, test_client):
        resp = test_client.post("/api/prompt/compile", json=self._payload(template="rich"))
        assert resp.status_code == 200
        data = resp.json()
        assert data["template"] == "rich"
        assert data["prompts"] is None
        assert "woman" in data["prompt"]
        assert ZODIAC_TABLE.entries["Aries"]["iconography"] in data["prompt"]
        assert "[" not in data["prompt"]

    def test_all_returns_batch(self, test_client):
        resp = test_client.post("/api/prompt/compile", json=self._payload(sign="all"))
        assert resp.status_code == 200
        data = resp.json()
        assert data["prompt"] is None
        assert [p["sign"] for p in data["prompts"]] == list(SIGNS)

    def test_unknown_keys_are_not_errors(self, test_client):
        resp = test_client.post(
            "/api/prompt/compile",
            json=self._payload(theme="atlantis", tone="", gender="?", template="classic"),
        )
        assert resp.status_code == 200
        assert THEME_TABLE.entries["space"]["clothes"] in resp.json()["prompt"]

    def test_default_template_used(self, test_client):
        data = test_client.post("/api/prompt/compile", json=self._payload()).json()
        cfg = test_client.get("/api/config").json()
        assert data["template"] == cfg["defaults"]["template"]

    def test_unknown_template(self, test_client):
        resp = test_client.post("/api/prompt/compile", json=self._payload(template="gothic"))
        assert resp.status_code == 400
        assert "gothic" in resp.json()["detail"]

    def test_invalid_body(self, test_client):
        resp = test_client.post("/api/prompt/compile", json={"gender": 5})
        assert resp.status_code == 422


class TestBatch:
    """Test POST /api/prompt/batch."""

    def test_batch_order(self, test_client):
        resp = test_client.post(
            "/api/prompt/batch",
            json={"gender": "male", "tone": "happy", "theme": "city", "sign": "Leo"},
        )
        assert resp.status_code == 200
        prompts = resp.json()["prompts"]
        assert len(prompts) == 12
        assert [p["sign"] for p in prompts] == list(SIGNS)
        assert all("beautiful man " in p["prompt"] for p in prompts)

    def test_batch_unknown_template(self, test_client):
        resp = test_client.post("/api/prompt/batch", json={"template": "nope"})
        assert resp.status_code == 400


class TestCopyAll:
    """Test POST /api/prompt/copy-all."""

    def test_copy_all_format(self, test_client):
        resp = test_client.post(
            "/api/prompt/copy-all",
            json={"gender": "female", "tone": "dark", "theme": "winter", "template": "classic"},
        )
        assert resp.status_code == 200
        text = resp.json()["text"]
        blocks = text.split("\n\n")
        assert len(blocks) == 12
        for sign, block in zip(SIGNS, blocks):
            assert block.startswith(f"{sign}:\nmystical fantasy portrait of a beautiful woman")
