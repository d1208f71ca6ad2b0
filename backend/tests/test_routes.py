"""
API tests for the upload routes.

Uses FastAPI's TestClient with the cache pointed at a temp directory.
"""
from api.schemas import LabeledDocumentSchema, PositionalDocumentSchema
from config import get_settings


def _upload(client, path, text, field="pose"):
    return client.post(path, files={field: ("capture.pose", text.encode("utf-8"), "text/plain")})


class TestHealth:

    def test_health(self, client, cache_dir):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["dialects"] == ["labeled", "positional"]
        assert data["cache_dir"] == str(cache_dir)

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "/api/upload" in response.json()["upload"]

    def test_lifespan_creates_cache_dir(self, client, cache_dir):
        assert cache_dir.is_dir()


class TestLabeledUpload:
    """POST /api/upload"""

    def test_returns_json_document(self, client):
        text = "# Frame: x - Torso\ndistância_000000000001\nNose: 1.0 2.0 3.0\n"

        response = _upload(client, "/api/upload", text)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {
            "Torso": {"distância_000000000001": {"Nose": {"x": 1.0, "y": 2.0, "z": 3.0}}}
        }

    def test_response_is_indented_utf8(self, client, labeled_text):
        response = _upload(client, "/api/upload", labeled_text)

        assert response.content.startswith('{\n  "Torso": {\n    "distância_'.encode("utf-8"))

    def test_matches_schema(self, client, labeled_text):
        response = _upload(client, "/api/upload", labeled_text)

        document = LabeledDocumentSchema.model_validate(response.json()).root
        assert document["LeftArm"]["distância_000000000002"]["LElbow"].z == 3.0

    def test_cache_files_kept(self, client, cache_dir, labeled_text):
        response = _upload(client, "/api/upload", labeled_text)

        json_files = list(cache_dir.glob("*.json"))
        assert len(list(cache_dir.glob("*.pose"))) == 1
        assert len(json_files) == 1
        assert json_files[0].read_bytes() == response.content

    def test_cache_files_removed_when_disabled(self, client, cache_dir, labeled_text, monkeypatch):
        monkeypatch.setenv("POSE_KEEP_LABELED_CACHE", "false")
        get_settings.cache_clear()

        response = _upload(client, "/api/upload", labeled_text)

        assert response.status_code == 200
        assert list(cache_dir.iterdir()) == []

    def test_missing_upload(self, client):
        response = client.post("/api/upload")

        assert response.status_code == 400
        assert response.json()["detail"] == "No file uploaded"

    def test_wrong_field_name(self, client, labeled_text):
        response = _upload(client, "/api/upload", labeled_text, field="file")
        assert response.status_code == 400


class TestPositionalUpload:
    """POST /api/upload/keypoints"""

    def test_returns_frames(self, client, full_frame_line):
        response = _upload(client, "/api/upload/keypoints", full_frame_line + "\n\n1 2 3 4\n")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        data = response.json()
        assert list(data) == ["frame_1", "frame_2"]
        assert data["frame_1"]["right_hand"]["RWrist"] == {"x": 139.0, "y": 140.0, "z": 141.0}
        assert data["frame_2"]["body"]["Neck"] == {"x": 4.0, "y": None, "z": None}
        assert data["frame_2"]["face"]["Face_0"] == {"x": 0.0, "y": 0.0, "z": 0.0}

    def test_matches_schema(self, client, full_frame_line):
        response = _upload(client, "/api/upload/keypoints", full_frame_line)

        document = PositionalDocumentSchema.model_validate(response.json()).root
        assert len(document["frame_1"].face) == 70
        assert len(document["frame_1"].left_hand) == 21

    def test_cache_files_removed(self, client, cache_dir, full_frame_line):
        _upload(client, "/api/upload/keypoints", full_frame_line)
        assert list(cache_dir.iterdir()) == []

    def test_missing_upload(self, client):
        response = client.post("/api/upload/keypoints")
        assert response.status_code == 400


class TestHttpPlumbing:
    """CORS and unmatched routes."""

    def test_cors_preflight(self, client):
        response = client.options(
            "/api/upload",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_cors_header_on_upload(self, client, labeled_text):
        response = client.post(
            "/api/upload",
            files={"pose": ("capture.pose", labeled_text.encode("utf-8"), "text/plain")},
            headers={"Origin": "http://localhost:3000"},
        )
        assert response.headers["access-control-allow-origin"] == "*"

    def test_unknown_route_404(self, client):
        assert client.get("/nope").status_code == 404
        assert client.post("/upload").status_code == 404
