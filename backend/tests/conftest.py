"""Shared test fixtures for the pose parsers and the upload API."""
import pytest
from fastapi.testclient import TestClient

from config import get_settings
from core.domain.keypoints import VALUES_PER_FRAME


@pytest.fixture
def cache_dir(tmp_path, monkeypatch):
    """Point the service cache at a temporary directory."""
    path = tmp_path / "cache"
    monkeypatch.setenv("POSE_CACHE_DIR", str(path))
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()


@pytest.fixture
def client(cache_dir):
    """Test client with lifespan events running against the temp cache."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def labeled_text():
    """Two parts, two frames, a few keypoints each."""
    return (
        "# Frame: 1 - Torso\n"
        "# distância_000000000001\n"
        "Nose: 0.1 0.2 0.3\n"
        "Neck: 0.4 0.5 0.6\n"
        "# distância_000000000002\n"
        "Nose: 1.1 1.2 1.3\n"
        "\n"
        "# Frame: 1 - LeftArm\n"
        "LElbow: 2.0 2.5 3.0\n"
    )


@pytest.fixture
def full_frame_line():
    """One well-formed positional frame: 411 values 1.0 .. 411.0."""
    return " ".join(str(float(i + 1)) for i in range(VALUES_PER_FRAME))
