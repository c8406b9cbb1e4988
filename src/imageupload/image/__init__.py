"""Image processing module"""

from .codec import ImageCodec, ImageHandle
from .formats import FormatDetector, ImageFormat

__all__ = ["ImageCodec", "ImageHandle", "ImageFormat", "FormatDetector"]
