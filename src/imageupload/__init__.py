"""
imageupload - Store uploaded images and generate thumbnails

This library provides:
- Original image storage under a derived filename
- Configurable thumbnail variants (aspect fit or square crop)
- Filename strategies (original, hash, random, timestamp, custom)
- Optional EXIF capture
- A JSON-friendly manifest of everything written

Example:
    >>> from imageupload import UploadConfig, upload_image
    >>>
    >>> config = UploadConfig(dimensions={"thumb": [200, 200, True]})
    >>> result = upload_image("photo.jpg", config)
    >>> if result.success:
    ...     print(result.dimensions["thumb"].filepath)
"""

from .version import __version__

# Configuration
from .config import DimensionSpec, UploadConfig

# Errors
from .errors import ConfigError, DirectoryCreationError, ImageProcessingError, ImageUploadError

# Image processing
from .image import FormatDetector, ImageCodec, ImageFormat, ImageHandle

# Metadata extraction
from .metadata import ExifExtractor

# Models
from .models import ThumbnailResult, UploadResult

# Storage
from .storage import FileSystem, NamingStrategy

# Uploads
from .uploads import LocalUpload, UploadHandle

# Orchestration
from .orchestrator import UploadOrchestrator

# High-level API
from .api import batch_upload, upload_image

__all__ = [
    # Version
    "__version__",
    # Config
    "UploadConfig",
    "DimensionSpec",
    "NamingStrategy",
    # Errors
    "ImageUploadError",
    "ConfigError",
    "DirectoryCreationError",
    "ImageProcessingError",
    # Image
    "ImageCodec",
    "ImageHandle",
    "ImageFormat",
    "FormatDetector",
    # Metadata
    "ExifExtractor",
    # Models
    "UploadResult",
    "ThumbnailResult",
    # Storage
    "FileSystem",
    # Uploads
    "UploadHandle",
    "LocalUpload",
    # Orchestration
    "UploadOrchestrator",
    # High-level API
    "upload_image",
    "batch_upload",
]
