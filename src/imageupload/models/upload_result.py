"""
Upload Result Model

The manifest returned by UploadOrchestrator.upload(): where the original and
each thumbnail were written, their dimensions and sizes, and any failure.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ThumbnailResult:
    """
    One generated thumbnail.

    Attributes:
        path: Absolute directory the thumbnail was written to
        dir: Same directory, relative to the public root
        filename: File name including extension
        filepath: Absolute path of the file
        filedir: Directory of the file, relative to the public root
        width: Final width in pixels
        height: Final height in pixels
        filesize: Size of the written file in bytes
        is_squared: Whether the thumbnail was cropped to a square
    """
    path: str
    dir: str
    filename: str
    filepath: str
    filedir: str
    width: int
    height: int
    filesize: int
    is_squared: bool = False


@dataclass
class UploadResult:
    """
    Result of uploading a single image.

    Built step by step during one upload() call. Failures never raise; check
    `error` for the original and `thumbnail_errors` for individual thumbnails.
    """
    original_filename: Optional[str] = None
    original_filepath: Optional[str] = None
    original_filedir: Optional[str] = None
    original_extension: Optional[str] = None
    original_mime: Optional[str] = None
    original_filesize: int = 0
    original_width: int = 0
    original_height: int = 0

    exif: Dict[str, Any] = field(default_factory=dict)

    path: Optional[str] = None
    dir: Optional[str] = None
    filename: Optional[str] = None
    basename: Optional[str] = None

    dimensions: Dict[str, ThumbnailResult] = field(default_factory=dict)

    error: Optional[str] = None
    thumbnail_errors: Dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        """True when no step reported an error for the original"""
        return self.error is None

    @property
    def failed(self) -> bool:
        """True when the original could not be stored"""
        return self.original_width == 0 or self.original_height == 0

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        `error` is only present when set.
        """
        data = asdict(self)
        if self.error is None:
            del data['error']
        return data
