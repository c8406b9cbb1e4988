"""Metadata extraction module"""

from .exif_extractor import ExifExtractor

__all__ = ["ExifExtractor"]
