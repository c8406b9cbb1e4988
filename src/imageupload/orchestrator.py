"""
Upload Orchestrator

Stores an uploaded image under its derived filename and writes the configured
thumbnail variants next to it.

Pipeline (one call to upload()):
1. Resolve and create the target directory
2. Read the original file properties from the upload handle
3. Derive the destination filename
4. Decode and save the original
5. Resize/crop and save each thumbnail

Failures are recorded on the returned UploadResult; upload() does not raise
for directory or image errors.
"""

import logging
import os
import time
from typing import Callable, Optional

from .config import DimensionSpec, UploadConfig
from .errors import DirectoryCreationError, ImageProcessingError
from .image.codec import ImageCodec, ImageHandle
from .models.upload_result import ThumbnailResult, UploadResult
from .storage.filesystem import FileSystem, directory_portion, join_path, relative_to_root
from .storage.naming import build_filename, derive_basename
from .uploads import UploadHandle


logger = logging.getLogger(__name__)


class UploadOrchestrator:
    """
    Upload an image and generate its thumbnails.

    Args:
        config: Upload options
        codec: Image codec (default: Pillow codec for config.library)
        filesystem: Filesystem access (default: local filesystem)
        clock: Returns the current Unix time, used by hash/timestamp naming

    Example:
        >>> config = UploadConfig(base_path="public/uploads",
        ...                       dimensions={"thumb": [200, 200, True]})
        >>> orchestrator = UploadOrchestrator(config)
        >>> result = orchestrator.upload(LocalUpload("/tmp/php1234", "photo.jpg"))
        >>> result.dimensions["thumb"].filename
        'photo_thumb.jpg'
    """

    def __init__(
        self,
        config: Optional[UploadConfig] = None,
        codec: Optional[ImageCodec] = None,
        filesystem: Optional[FileSystem] = None,
        clock: Callable[[], float] = time.time
    ):
        self.config = config or UploadConfig()
        self.codec = codec or ImageCodec(self.config.library, auto_orient=self.config.auto_orient)
        self.filesystem = filesystem or FileSystem()
        self.clock = clock

    def upload(
        self,
        upload: UploadHandle,
        new_filename: Optional[str] = None,
        path: Optional[str] = None
    ) -> UploadResult:
        """
        Store the upload and its thumbnails.

        Args:
            upload: The uploaded file
            new_filename: Basename to use with the "custom" naming strategy
            path: Sub path below the base path; only its directory part is
                  used ("2024/05/x" stores into "2024/05")

        Returns:
            UploadResult manifest
        """
        result = UploadResult()

        self._prepare_target_directory(result, path)
        self._read_original_properties(result, upload)
        self._set_new_filename(result, new_filename)
        image = self._save_original(result, upload)
        self._create_thumbnails(result, image)

        if result.error:
            logger.warning("Upload of %s finished with error: %s",
                           result.original_filename, result.error)
        else:
            logger.info("Uploaded %s as %s (%d thumbnails)",
                        result.original_filename, result.filename, len(result.dimensions))

        return result

    def relative_path(self, absolute_path: Optional[str]) -> str:
        """Path relative to the configured public root"""
        return relative_to_root(absolute_path, self.config.public_root)

    def _ensure_directory(self, absolute_path: str) -> Optional[str]:
        """Create directory if missing; returns the error message on failure"""
        try:
            self.filesystem.ensure_directory(absolute_path)
        except DirectoryCreationError as e:
            logger.warning("%s", e)
            return str(e)
        return None

    def _prepare_target_directory(self, result: UploadResult, path: Optional[str]) -> None:
        target = join_path(self.config.base_path, directory_portion(path))

        result.path = target
        result.dir = self.relative_path(target)

        error = self._ensure_directory(target)
        if error:
            result.error = error

    def _read_original_properties(self, result: UploadResult, upload: UploadHandle) -> None:
        real_path = upload.real_path()

        result.original_filename = upload.client_original_name()
        result.original_extension = upload.client_original_extension()
        result.original_mime = upload.mime_type()
        result.original_filesize = upload.size() or 0
        result.original_filepath = real_path
        result.original_filedir = os.path.dirname(real_path) if real_path else None

    def _set_new_filename(self, result: UploadResult, new_filename: Optional[str]) -> None:
        basename = derive_basename(
            self.config.naming_strategy,
            result.original_filename,
            timestamp=int(self.clock()),
            hint=new_filename,
        )

        result.basename = basename
        result.filename = build_filename(basename, result.original_extension)

    def _save_original(self, result: UploadResult, upload: UploadHandle) -> Optional[ImageHandle]:
        target_filepath = join_path(result.path, result.filename)

        try:
            image = self.codec.decode(upload.real_path())
        except ImageProcessingError as e:
            result.error = str(e)
            return None

        try:
            image.save(target_filepath, self.config.quality)
        except ImageProcessingError as e:
            result.error = str(e)
            return image

        result.original_width = image.width
        result.original_height = image.height
        result.original_filepath = target_filepath
        result.original_filedir = self.relative_path(os.path.dirname(target_filepath))

        if self.config.capture_exif:
            exif = image.exif()
            if exif:
                result.exif = exif

        return image

    def _thumbnail_target(self, result: UploadResult, key: str) -> str:
        """
        Absolute file path for thumbnail `key`, creating its directory.

        Raises:
            DirectoryCreationError: If the thumbnail directory could not be created
        """
        suffix = self.config.suffix_thumbnails

        directory = join_path(result.path, "" if suffix else key.strip())
        self.filesystem.ensure_directory(directory)

        basename = f"{result.basename}_{key}" if suffix else result.basename
        return join_path(directory, build_filename(basename, result.original_extension))

    def _resize_crop(
        self,
        source: ImageHandle,
        target_filepath: str,
        spec: DimensionSpec
    ) -> ThumbnailResult:
        width = spec.width
        height = spec.target_height

        image = source.copy()
        if spec.squared:
            width = height = min(width, height)
            image.fit_crop(width, height)
        else:
            image.resize_aspect(width, height)

        image.save(target_filepath, self.config.quality)

        directory = os.path.dirname(target_filepath)
        relative_dir = self.relative_path(directory)
        return ThumbnailResult(
            path=directory,
            dir=relative_dir,
            filename=os.path.basename(target_filepath),
            filepath=target_filepath,
            filedir=relative_dir,
            width=image.width,
            height=image.height,
            filesize=image.file_size,
            is_squared=spec.squared,
        )

    def _create_thumbnails(self, result: UploadResult, source: Optional[ImageHandle]) -> None:
        if not self.config.dimensions:
            return

        if source is None:
            logger.warning("Skipping %d thumbnails: original could not be decoded",
                           len(self.config.dimensions))
            return

        for key, spec in self.config.dimensions.items():
            try:
                target_filepath = self._thumbnail_target(result, key)
                result.dimensions[key] = self._resize_crop(source, target_filepath, spec)
            except (DirectoryCreationError, ImageProcessingError) as e:
                logger.warning("Thumbnail %r for %s skipped: %s", key, result.filename, e)
                result.thumbnail_errors[key] = str(e)
