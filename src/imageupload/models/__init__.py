"""Data models for imageupload"""

from .upload_result import ThumbnailResult, UploadResult

__all__ = ["UploadResult", "ThumbnailResult"]
