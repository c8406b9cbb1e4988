"""
Basic tests for imageupload

Run with: pytest tests/
"""

import pytest
from pathlib import Path
from imageupload import (
    LocalUpload,
    UploadConfig,
    UploadOrchestrator,
    UploadResult,
    ThumbnailResult,
    __version__
)


def test_version():
    """Test that version is defined"""
    assert __version__ == "1.0.0"


def test_result_defaults():
    """Fresh result should hold zero/empty defaults"""
    result = UploadResult()

    assert result.original_width == 0
    assert result.original_height == 0
    assert result.original_filesize == 0
    assert result.exif == {}
    assert result.dimensions == {}
    assert result.error is None
    assert "error" not in result.to_dict()


def test_result_serialization():
    """Thumbnails should serialize as plain dicts"""
    result = UploadResult(basename="photo", filename="photo.jpg", original_width=10, original_height=10)
    result.dimensions["thumb"] = ThumbnailResult(
        path="/srv/public/uploads",
        dir="uploads",
        filename="photo_thumb.jpg",
        filepath="/srv/public/uploads/photo_thumb.jpg",
        filedir="uploads",
        width=5,
        height=5,
        filesize=120,
        is_squared=True,
    )

    data = result.to_dict()
    assert data["dimensions"]["thumb"]["filesize"] == 120
    assert data["dimensions"]["thumb"]["is_squared"] is True


def test_local_upload(jpeg_landscape):
    """LocalUpload should expose the upload handle properties"""
    upload = LocalUpload(jpeg_landscape, client_name="dir/My Photo.jpeg")

    assert upload.client_original_name() == "dir/My Photo.jpeg"
    assert upload.client_original_extension() == "jpeg"
    assert upload.real_path() == str(jpeg_landscape.resolve())
    assert upload.size() == jpeg_landscape.stat().st_size
    assert upload.mime_type() == "image/jpeg"


def test_local_upload_supplied_mime(jpeg_landscape):
    upload = LocalUpload(jpeg_landscape, mime_type="image/x-custom")

    assert upload.client_original_name() == "photo.jpg"
    assert upload.mime_type() == "image/x-custom"


def test_local_upload_missing_file(tmp_path):
    upload = LocalUpload(tmp_path / "nonexistent.jpg")

    assert upload.size() == 0
    assert upload.client_original_extension() == "jpg"


def test_orchestrator_default_config():
    """Orchestrator should fall back to the default config"""
    orchestrator = UploadOrchestrator()

    assert orchestrator.config == UploadConfig()
    assert orchestrator.codec.library == "gd"
