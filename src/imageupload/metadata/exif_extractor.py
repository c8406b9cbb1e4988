"""
EXIF Metadata Extraction Module

Reads EXIF tags from a decoded image into a JSON-friendly mapping keyed by tag
name, for inclusion in the upload manifest.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from PIL import Image
from PIL.ExifTags import GPSTAGS, TAGS
from PIL.TiffImagePlugin import IFDRational


EXIF_IFD = 0x8769
GPS_IFD = 0x8825

# Binary blobs with no meaning outside the camera vendor's tools
SKIPPED_TAGS = {"MakerNote", "PrintImageMatching", "ExifOffset", "GPSInfo"}

DATETIME_TAGS = {"DateTime", "DateTimeOriginal", "DateTimeDigitized"}


class ExifExtractor:
    """Extracts EXIF metadata from images"""

    @staticmethod
    def extract_all(image: Image.Image) -> Dict[str, Any]:
        """
        Extract all readable EXIF tags.

        Tags from the base IFD and the Exif IFD are merged into one flat dict.
        GPS tags, if any, are nested under "GPSInfo".

        Args:
            image: Decoded Pillow image

        Returns:
            Dict of tag name -> value, empty when the image has no EXIF
        """
        result: Dict[str, Any] = {}

        try:
            exif = image.getexif()
            if not exif:
                return result

            tags = dict(exif.items())

            # Most camera settings live in the Exif IFD, not the base IFD
            try:
                for tag_id, value in exif.get_ifd(EXIF_IFD).items():
                    tags.setdefault(tag_id, value)
            except (KeyError, AttributeError):
                pass

            for tag_id, value in tags.items():
                name = TAGS.get(tag_id, str(tag_id))
                if name in SKIPPED_TAGS:
                    continue
                value = ExifExtractor._to_plain(value)
                if value is None:
                    continue
                if name in DATETIME_TAGS and isinstance(value, str):
                    value = ExifExtractor._standardize_datetime(value)
                result[name] = value

            gps = ExifExtractor._extract_gps(exif)
            if gps:
                result["GPSInfo"] = gps

        except Exception:
            # Silent failure - return partial data
            pass

        return result

    @staticmethod
    def _extract_gps(exif) -> Dict[str, Any]:
        """GPS IFD as a dict keyed by GPS tag name"""
        try:
            gps_ifd = exif.get_ifd(GPS_IFD)
        except (KeyError, AttributeError):
            return {}

        gps = {}
        for tag_id, value in gps_ifd.items():
            value = ExifExtractor._to_plain(value)
            if value is not None:
                gps[GPSTAGS.get(tag_id, str(tag_id))] = value
        return gps

    @staticmethod
    def _to_plain(value: Any) -> Any:
        """
        Convert EXIF values to JSON-friendly types.

        Rationals become floats, bytes become text, tuples become lists.
        """
        if isinstance(value, IFDRational):
            if value.denominator == 0:
                return None
            return float(value)
        if isinstance(value, bytes):
            text = value.decode("utf-8", errors="replace").strip("\x00").strip()
            return text or None
        if isinstance(value, str):
            return value.strip("\x00").strip()
        if isinstance(value, (tuple, list)):
            items = [ExifExtractor._to_plain(v) for v in value]
            return [v for v in items if v is not None]
        if isinstance(value, (int, float, bool)):
            return value
        return str(value)

    @staticmethod
    def _standardize_datetime(dt_str: str) -> Optional[str]:
        """
        Convert EXIF datetime to ISO 8601 format.

        Unparseable values are returned unchanged.
        """
        if not dt_str:
            return dt_str

        formats = [
            "%Y:%m:%d %H:%M:%S",      # Standard EXIF
            "%Y-%m-%d %H:%M:%S",      # ISO with space
            "%Y-%m-%dT%H:%M:%S",      # ISO 8601
        ]

        for fmt in formats:
            try:
                return datetime.strptime(dt_str.strip(), fmt).isoformat()
            except ValueError:
                continue

        return dt_str
