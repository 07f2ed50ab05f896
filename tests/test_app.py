"""
Router-level tests for the HTTP adapter using FastAPI's TestClient.
"""

import pytest
import structlog
from fastapi.testclient import TestClient

from safebuf.core.constants import MAX_CAPACITY
from safebuf.service.app import build_app


@pytest.fixture
def client():
    return TestClient(build_app(structlog.get_logger()))


# ============ Health ============

class TestHealth:
    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "ok"
        assert "version" in data


# ============ Transcoding ============

class TestTranscode:
    def test_html_encode(self, client):
        r = client.post("/transcode/html-encode", json={"text": '<b>"x"</b>'})
        assert r.status_code == 200
        data = r.json()
        assert data["output"] == "&#60;b&#62;&#34;x&#34;&#60;/b&#62;"
        assert data["length"] == 34

    def test_url_encode(self, client):
        data = client.post("/transcode/url-encode", json={"text": "a b/c"}).json()
        assert data["output"] == "a%20b%2fc"

    def test_b64_round_trip_fields(self, client):
        data = client.post("/transcode/b64-encode", json={"text": "Man"}).json()
        assert data["output"] == "TWFu"
        assert data["output_b64"] == "VFdGdQ=="

    def test_binary_output_has_no_text(self, client):
        data = client.post("/transcode/url-decode", json={"text": "%ff"}).json()
        assert data["output"] is None
        assert data["output_b64"] == "/w=="

    def test_data_b64_input(self, client):
        data = client.post("/transcode/url-encode", json={"data_b64": "/w=="}).json()
        assert data["output"] == "%ff"

    def test_b64_decode_lenient_default(self, client):
        data = client.post("/transcode/b64-decode", json={"text": "TW-Fu"}).json()
        assert data["output"] == "Man"

    def test_b64_decode_strict(self, client):
        r = client.post("/transcode/b64-decode", json={"text": "TW-Fu", "lenient": False})
        assert r.status_code == 400
        assert r.json()["error"] == "malformed"


# ============ Rejections ============

class TestRejections:
    def test_overflow_is_413(self, client):
        r = client.post("/transcode/html-encode", json={"text": "<<", "capacity": 9})
        assert r.status_code == 413
        assert r.json()["error"] == "overflow"

    def test_malformed_is_400(self, client):
        r = client.post("/transcode/url-decode", json={"text": "%2"})
        assert r.status_code == 400

    def test_unknown_operation_is_404(self, client):
        r = client.post("/transcode/html-decode", json={"text": "x"})
        assert r.status_code == 404

    def test_both_inputs_rejected(self, client):
        r = client.post("/transcode/url-encode", json={"text": "x", "data_b64": "eA=="})
        assert r.status_code == 400

    def test_missing_input_rejected(self, client):
        r = client.post("/transcode/url-encode", json={})
        assert r.status_code == 400

    def test_invalid_data_b64_rejected(self, client):
        r = client.post("/transcode/url-encode", json={"data_b64": "eA=!"})
        assert r.status_code == 400

    def test_misplaced_padding_in_data_b64_rejected(self, client):
        r = client.post("/transcode/url-encode", json={"data_b64": "TQ==TWFu"})
        assert r.status_code == 400

    @pytest.mark.parametrize("capacity", [-1, MAX_CAPACITY + 1])
    def test_capacity_out_of_range_is_422(self, client, capacity):
        r = client.post("/transcode/url-encode", json={"text": "x", "capacity": capacity})
        assert r.status_code == 422
