"""
Shared fixtures: small synthetic images generated with Pillow.

Images are written to a per-test temporary directory, so tests never touch the
working tree.
"""

from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from imageupload import UploadConfig


def create_basic_image(width: int, height: int, color: tuple, mode: str = "RGB") -> Image.Image:
    """Create a simple colored image with a contrasting diagonal"""
    img = Image.new(mode, (width, height), color)
    draw = ImageDraw.Draw(img)
    draw.line((0, 0, width, height), fill="white", width=3)
    return img


def create_exif_data(make: str = "Canon", model: str = "EOS R5") -> bytes:
    """Minimal EXIF block with camera and timestamp tags"""
    exif = Image.Exif()
    exif[271] = make                        # Make
    exif[272] = model                       # Model
    exif[306] = "2024:05:17 10:30:00"       # DateTime
    return exif.tobytes()


@pytest.fixture
def images_dir(tmp_path) -> Path:
    directory = tmp_path / "incoming"
    directory.mkdir()
    return directory


@pytest.fixture
def jpeg_landscape(images_dir) -> Path:
    """400x300 JPEG without EXIF"""
    path = images_dir / "photo.jpg"
    create_basic_image(400, 300, (70, 130, 180)).save(path, quality=90)
    return path


@pytest.fixture
def jpeg_square(images_dir) -> Path:
    """400x400 JPEG"""
    path = images_dir / "square.jpg"
    create_basic_image(400, 400, (180, 70, 70)).save(path, quality=90)
    return path


@pytest.fixture
def jpeg_small(images_dir) -> Path:
    """60x80 JPEG, smaller than typical thumbnails"""
    path = images_dir / "small.jpg"
    create_basic_image(60, 80, (30, 160, 60)).save(path, quality=90)
    return path


@pytest.fixture
def jpeg_with_exif(images_dir) -> Path:
    """320x240 JPEG carrying Make/Model/DateTime tags"""
    path = images_dir / "camera.jpg"
    create_basic_image(320, 240, (90, 90, 90)).save(path, quality=90, exif=create_exif_data())
    return path


@pytest.fixture
def png_transparent(images_dir) -> Path:
    """300x200 RGBA PNG"""
    path = images_dir / "logo.png"
    create_basic_image(300, 200, (255, 0, 0, 128), mode="RGBA").save(path)
    return path


@pytest.fixture
def corrupt_jpeg(images_dir) -> Path:
    """File with an image extension but no image data"""
    path = images_dir / "broken.jpg"
    path.write_bytes(b"this is not an image at all")
    return path


@pytest.fixture
def public_root(tmp_path) -> Path:
    return tmp_path / "public"


@pytest.fixture
def config(public_root) -> UploadConfig:
    """Config storing into <tmp>/public/uploads/images"""
    return UploadConfig(
        base_path=str(public_root / "uploads" / "images"),
        public_root=str(public_root),
    )
