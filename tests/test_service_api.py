"""
Integration tests for the FastAPI service endpoint.

Tests the complete HTTP API flow: multipart/form-data file upload -> storage -> manifest JSON response.
"""

import sys
from pathlib import Path

# Add service directory to path
service_dir = Path(__file__).parent.parent / "service"
sys.path.insert(0, str(service_dir))

import pytest
from fastapi.testclient import TestClient
from main import create_app

from imageupload import UploadConfig


@pytest.fixture
def client(public_root):
    config = UploadConfig(
        base_path=str(public_root / "uploads"),
        public_root=str(public_root),
        naming_strategy="custom",
        dimensions={"thumb": [100, 100, True], "medium": [200]},
    )
    return TestClient(create_app(config))


class TestUploadEndpoint:
    """Test POST /v1/upload endpoint with file uploads."""

    def test_upload_jpeg(self, client, jpeg_landscape, public_root):
        """Should store the original and thumbnails and return the manifest"""
        with open(jpeg_landscape, "rb") as f:
            response = client.post(
                "/v1/upload",
                files={"file": ("holiday.jpg", f, "image/jpeg")}
            )

        assert response.status_code == 200
        manifest = response.json()

        assert manifest["original_filename"] == "holiday.jpg"
        assert manifest["original_extension"] == "jpg"
        assert manifest["original_mime"] == "image/jpeg"
        assert manifest["filename"] == "holiday.jpg"
        assert manifest["dir"] == "uploads"
        assert manifest["original_width"] == 400
        assert manifest["original_height"] == 300
        assert manifest["error"] is None

        thumb = manifest["dimensions"]["thumb"]
        assert thumb["filename"] == "holiday_thumb.jpg"
        assert (thumb["width"], thumb["height"]) == (100, 100)
        assert thumb["is_squared"] is True
        assert (public_root / "uploads" / "holiday_thumb.jpg").exists()

        assert manifest["dimensions"]["medium"]["width"] == 200

    def test_upload_with_name_and_path(self, client, jpeg_square, public_root):
        """Should honour the filename hint and sub path form fields"""
        with open(jpeg_square, "rb") as f:
            response = client.post(
                "/v1/upload",
                files={"file": ("square.jpg", f, "image/jpeg")},
                data={"filename": "cover", "path": "albums/42/"}
            )

        assert response.status_code == 200
        manifest = response.json()

        assert manifest["basename"] == "cover"
        assert manifest["dir"] == "uploads/albums/42"
        assert (public_root / "uploads" / "albums" / "42" / "cover.jpg").exists()

    def test_upload_png(self, client, png_transparent):
        with open(png_transparent, "rb") as f:
            response = client.post(
                "/v1/upload",
                files={"file": ("logo.png", f, "image/png")}
            )

        assert response.status_code == 200
        assert response.json()["dimensions"]["thumb"]["filename"] == "logo_thumb.png"

    def test_upload_corrupt_file(self, client, corrupt_jpeg):
        """Should reject data that is not an image"""
        with open(corrupt_jpeg, "rb") as f:
            response = client.post(
                "/v1/upload",
                files={"file": ("broken.jpg", f, "image/jpeg")}
            )

        assert response.status_code == 400
        assert "Upload failed" in response.json()["detail"]

    def test_upload_without_file(self, client):
        response = client.post("/v1/upload")

        assert response.status_code == 422


class TestHealthEndpoints:
    """Test liveness endpoints"""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
