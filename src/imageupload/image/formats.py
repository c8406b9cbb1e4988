"""
Image Format Detection
"""

import mimetypes
from enum import Enum
from pathlib import Path
from typing import Optional, Set, Union

from PIL import Image


class ImageFormat(Enum):
    """Formats thumbnails can be written in"""
    JPEG = "JPEG"
    PNG = "PNG"
    GIF = "GIF"
    BMP = "BMP"
    TIFF = "TIFF"
    WEBP = "WEBP"


class FormatDetector:
    """Detect image formats and MIME types"""

    # Formats without an alpha channel; RGBA/P images are flattened before saving
    OPAQUE_FORMATS: Set[ImageFormat] = {ImageFormat.JPEG, ImageFormat.BMP}

    @staticmethod
    def detect_format(file_path: Union[str, Path]) -> Optional[ImageFormat]:
        """
        Detect format from file extension.

        Args:
            file_path: Path to image file

        Returns:
            ImageFormat enum or None if unsupported
        """
        ext = Path(file_path).suffix.lower()

        format_map = {
            '.jpg': ImageFormat.JPEG,
            '.jpeg': ImageFormat.JPEG,
            '.jpe': ImageFormat.JPEG,
            '.png': ImageFormat.PNG,
            '.gif': ImageFormat.GIF,
            '.bmp': ImageFormat.BMP,
            '.tiff': ImageFormat.TIFF,
            '.tif': ImageFormat.TIFF,
            '.webp': ImageFormat.WEBP,
        }

        return format_map.get(ext)

    @staticmethod
    def guess_mime_type(file_path: Union[str, Path]) -> Optional[str]:
        """
        Guess MIME type from file content, falling back to the extension.

        Args:
            file_path: Path to file

        Returns:
            MIME type string or None if unknown
        """
        try:
            with Image.open(file_path) as img:
                mime = Image.MIME.get(img.format or "")
                if mime:
                    return mime
        except (OSError, ValueError):
            pass  # Not an image Pillow can identify

        mime, _ = mimetypes.guess_type(str(file_path))
        return mime
