"""
Error types raised by imageupload collaborators.

The orchestrator catches DirectoryCreationError and ImageProcessingError and
reports them through UploadResult.error; ConfigError is raised to the caller.
"""


class ImageUploadError(Exception):
    """Base class for all imageupload errors"""


class ConfigError(ImageUploadError):
    """Invalid upload configuration"""


class DirectoryCreationError(ImageUploadError):
    """Target directory is missing and could not be created"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot create directory {path}: {reason}")


class ImageProcessingError(ImageUploadError):
    """Image could not be decoded or saved"""
