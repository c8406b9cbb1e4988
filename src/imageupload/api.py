"""
High-level API for imageupload

Convenience functions for uploading image files already on disk.
"""

from pathlib import Path
from typing import Callable, List, Optional, Union

from .config import UploadConfig
from .models.upload_result import UploadResult
from .orchestrator import UploadOrchestrator
from .uploads import LocalUpload


def upload_image(
    image_path: Union[str, Path],
    config: Optional[UploadConfig] = None,
    new_filename: Optional[str] = None,
    path: Optional[str] = None,
    client_name: Optional[str] = None
) -> UploadResult:
    """
    Store one image file and its thumbnails.

    Args:
        image_path: Path to the image file
        config: Upload options (default: UploadConfig())
        new_filename: Basename for the "custom" naming strategy
        path: Sub path below the base path (its directory part is used)
        client_name: Original filename to report (default: the file's name)

    Returns:
        UploadResult manifest; check result.error for failures

    Example:
        >>> from imageupload import UploadConfig, upload_image
        >>>
        >>> config = UploadConfig(
        ...     base_path="public/uploads/images",
        ...     dimensions={"square": [150, 150, True], "medium": [800, 600]},
        ... )
        >>> result = upload_image("photo.jpg", config)
        >>> result.dimensions["square"].filename
        'photo_square.jpg'
    """
    orchestrator = UploadOrchestrator(config)
    return orchestrator.upload(
        LocalUpload(image_path, client_name=client_name),
        new_filename=new_filename,
        path=path,
    )


def batch_upload(
    image_paths: List[Union[str, Path]],
    config: Optional[UploadConfig] = None,
    path: Optional[str] = None,
    progress_callback: Optional[Callable[[int, int, UploadResult], None]] = None
) -> List[UploadResult]:
    """
    Upload multiple images with optional progress tracking.

    Args:
        image_paths: List of paths to image files
        config: Upload options shared by all files
        path: Sub path below the base path for all files
        progress_callback: Optional callback(current, total, result)

    Returns:
        List of UploadResult objects, in input order

    Example:
        >>> def on_progress(current, total, result):
        ...     status = "✓" if result.success else "✗"
        ...     print(f"[{current}/{total}] {status} {result.original_filename}")
        >>>
        >>> results = batch_upload(images, config, progress_callback=on_progress)
    """
    orchestrator = UploadOrchestrator(config)
    results = []
    total = len(image_paths)

    for i, image_path in enumerate(image_paths, 1):
        result = orchestrator.upload(LocalUpload(image_path), path=path)
        results.append(result)

        if progress_callback:
            progress_callback(i, total, result)

    return results
