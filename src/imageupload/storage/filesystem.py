"""
Filesystem Primitives

Directory checks and creation used by the upload pipeline, plus the helpers
that turn absolute storage paths into paths relative to the public root.
"""

import logging
import os
from typing import Iterable, List, Optional

from ..errors import DirectoryCreationError


logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY_MODE = 0o777


class FileSystem:
    """Local filesystem access"""

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_writable(self, path: str) -> bool:
        return os.access(path, os.W_OK)

    def make_directory(
        self,
        path: str,
        mode: int = DEFAULT_DIRECTORY_MODE,
        recursive: bool = True
    ) -> bool:
        """
        Create a directory.

        An existing directory counts as success, so concurrent uploads into the
        same target do not fail each other.

        Raises:
            DirectoryCreationError: If the directory could not be created
        """
        try:
            if recursive:
                os.makedirs(path, mode=mode, exist_ok=True)
            elif not os.path.isdir(path):
                os.mkdir(path, mode)
        except FileExistsError:
            if not os.path.isdir(path):
                raise DirectoryCreationError(path, "a file with that name exists")
        except OSError as e:
            raise DirectoryCreationError(path, e.strerror or str(e))

        logger.debug("Created directory %s", path)
        return True

    def ensure_directory(self, path: str, mode: int = DEFAULT_DIRECTORY_MODE) -> bool:
        """
        Make sure path is an existing, writable directory.

        Raises:
            DirectoryCreationError: If the directory could not be created
        """
        if self.is_directory(path) and self.is_writable(path):
            return True

        self.make_directory(path, mode=mode, recursive=True)

        if not self.is_writable(path):
            raise DirectoryCreationError(path, "directory is not writable")
        return True


def join_path(*parts: Optional[str]) -> str:
    """
    Join path segments with "/", skipping empty segments.

    The first segment keeps its leading separator; the others are trimmed on
    both sides.
    """
    segments = []
    for index, part in enumerate(parts):
        if not part:
            continue
        part = part.rstrip("/") if index == 0 else part.strip("/")
        if part:
            segments.append(part)
    return "/".join(segments)


def directory_portion(path: Optional[str]) -> str:
    """
    Directory part of a sub path ("2024/05/photo.jpg" -> "2024/05").

    "." and ".." segments are dropped, so the result always stays below the
    directory it is joined to.
    """
    if not path:
        return ""
    directory = os.path.dirname(path.replace("\\", "/"))
    return "/".join(_clean_segments(directory.split("/")))


def relative_to_root(absolute_path: Optional[str], public_root: str) -> str:
    """
    Express a storage path relative to the public root.

    Paths outside the root fall back to the path itself. Either way the result
    has no leading separator and no ".." segments.
    """
    if not absolute_path:
        return ""

    root = os.path.abspath(public_root)
    target = os.path.abspath(absolute_path)

    try:
        inside = os.path.commonpath([root, target]) == root
    except ValueError:
        inside = False

    relative = os.path.relpath(target, root) if inside else target
    return "/".join(_clean_segments(relative.replace(os.sep, "/").split("/")))


def _clean_segments(segments: Iterable[str]) -> List[str]:
    return [s for s in segments if s not in ("", ".", "..")]
