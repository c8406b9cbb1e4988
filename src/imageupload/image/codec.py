"""
Image Codec

Thin wrapper over Pillow exposing the operations the upload pipeline needs:
decode, aspect resize, square fit-crop, save, and dimension/size/EXIF accessors.
"""

import logging
import os
from io import BytesIO
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, Union

from PIL import Image, ImageOps

from ..errors import ImageProcessingError
from ..metadata.exif_extractor import ExifExtractor
from .formats import FormatDetector, ImageFormat


logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes, BinaryIO]

RESAMPLE = Image.Resampling.LANCZOS


class ImageHandle:
    """
    A decoded image plus where it was last saved.

    Resize operations replace the wrapped image and return self, so calls can be
    chained: codec.decode(path).fit_crop(100, 100).save(target, 90)
    """

    def __init__(self, image: Image.Image, source_format: Optional[str] = None):
        self._image = image
        self.source_format = source_format or image.format
        self.path: Optional[str] = None

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def file_size(self) -> int:
        """Size in bytes of the file last written by save(), 0 if never saved"""
        if self.path is None:
            return 0
        return os.path.getsize(self.path)

    def copy(self) -> 'ImageHandle':
        return ImageHandle(self._image.copy(), self.source_format)

    def exif(self) -> Dict[str, Any]:
        """EXIF tags of the decoded image (empty dict if none)"""
        return ExifExtractor.extract_all(self._image)

    def resize_aspect(self, width: int, height: int) -> 'ImageHandle':
        """
        Scale to fit inside width x height, keeping the aspect ratio.

        The result touches the box on at least one side, so small sources are
        enlarged to the box. Neither side drops below 1 pixel.

        Raises:
            ImageProcessingError: If Pillow cannot resample the image
        """
        src_w, src_h = self._image.size
        if src_w * height > src_h * width:
            size = (width, max(1, round(src_h * width / src_w)))
        else:
            size = (max(1, round(src_w * height / src_h)), height)

        try:
            self._image = self._image.resize(size, RESAMPLE)
        except (OSError, ValueError) as e:
            raise ImageProcessingError(f"Cannot resize image to {size[0]}x{size[1]}: {e}") from e
        return self

    def fit_crop(self, width: int, height: int) -> 'ImageHandle':
        """
        Centre-crop to the width:height aspect, then shrink to width x height.

        Never enlarges: when the cropped region is already smaller than the
        target it is kept as is.

        Raises:
            ImageProcessingError: If Pillow cannot crop or resample the image
        """
        src_w, src_h = self._image.size
        ratio = width / height

        if src_w / src_h > ratio:
            crop_w, crop_h = max(1, round(src_h * ratio)), src_h
        else:
            crop_w, crop_h = src_w, max(1, round(src_w / ratio))

        left = (src_w - crop_w) // 2
        top = (src_h - crop_h) // 2
        try:
            img = self._image.crop((left, top, left + crop_w, top + crop_h))
            if crop_w > width or crop_h > height:
                img = img.resize((width, height), RESAMPLE)
        except (OSError, ValueError) as e:
            raise ImageProcessingError(f"Cannot crop image to {width}x{height}: {e}") from e

        self._image = img
        return self

    def save(self, target_path: Union[str, Path], quality: int) -> 'ImageHandle':
        """
        Write the image; the format follows the target extension.

        Args:
            target_path: Destination file
            quality: Encoding quality 0-100 (JPEG/WebP)

        Raises:
            ImageProcessingError: If the image could not be written
        """
        image_format = FormatDetector.detect_format(target_path)
        format_name = image_format.value if image_format else self.source_format
        if not format_name:
            raise ImageProcessingError(f"Cannot determine output format for {target_path}")

        img = self._image
        if image_format in FormatDetector.OPAQUE_FORMATS and img.mode not in ("RGB", "L"):
            img = img.convert("RGB")

        try:
            img.save(target_path, format=format_name, quality=quality)
        except (OSError, ValueError, KeyError) as e:
            raise ImageProcessingError(f"Cannot save image to {target_path}: {e}") from e

        self.path = str(target_path)
        logger.debug("Saved %sx%s image to %s", self.width, self.height, target_path)
        return self


class ImageCodec:
    """Decode images into ImageHandle objects"""

    def __init__(self, library: str = "gd", auto_orient: bool = False):
        # Every supported backend name decodes with Pillow
        self.library = library
        self.auto_orient = auto_orient

    def decode(self, source: ImageSource) -> ImageHandle:
        """
        Decode an image file, byte string or file object.

        Raises:
            ImageProcessingError: If the data is not a readable image
        """
        if isinstance(source, bytes):
            source = BytesIO(source)

        try:
            img = Image.open(source)
            img.load()
            source_format = img.format

            if self.auto_orient:
                # exif_transpose drops the format attribute, keep it on the handle
                img = ImageOps.exif_transpose(img)
        except (OSError, ValueError, KeyError, SyntaxError, Image.DecompressionBombError) as e:
            raise ImageProcessingError(f"Cannot decode image: {e}") from e

        return ImageHandle(img, source_format)
