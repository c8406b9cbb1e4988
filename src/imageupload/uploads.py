"""
Uploaded File Handles

UploadOrchestrator reads the incoming file through the UploadHandle protocol,
so web frameworks only need to provide a small adapter. LocalUpload covers the
common case of a file already spooled to disk.
"""

import os
from pathlib import Path
from typing import Optional, Protocol, Union

from .image.formats import FormatDetector


class UploadHandle(Protocol):
    """An uploaded file as seen by the upload pipeline"""

    def client_original_name(self) -> str:
        """Filename as sent by the client"""
        ...

    def client_original_extension(self) -> str:
        """Extension of the client filename, without the dot"""
        ...

    def real_path(self) -> str:
        """Path of the uploaded (temporary) file on disk"""
        ...

    def size(self) -> int:
        """Size of the uploaded file in bytes"""
        ...

    def mime_type(self) -> Optional[str]:
        """MIME type of the uploaded file"""
        ...


class LocalUpload:
    """
    Upload backed by a file on disk.

    Args:
        path: Where the uploaded bytes are stored
        client_name: Filename the client sent (default: the file's own name)
        mime_type: MIME type the client sent (default: sniffed from content)
    """

    def __init__(
        self,
        path: Union[str, Path],
        client_name: Optional[str] = None,
        mime_type: Optional[str] = None
    ):
        self.path = Path(path)
        self._client_name = client_name or self.path.name
        self._mime_type = mime_type

    def client_original_name(self) -> str:
        return self._client_name

    def client_original_extension(self) -> str:
        return os.path.splitext(os.path.basename(self._client_name))[1].lstrip(".")

    def real_path(self) -> str:
        return str(self.path.resolve())

    def size(self) -> int:
        try:
            return self.path.stat().st_size
        except OSError:
            return 0

    def mime_type(self) -> Optional[str]:
        if self._mime_type is None:
            self._mime_type = FormatDetector.guess_mime_type(self.path)
        return self._mime_type

    def __repr__(self) -> str:
        return f"LocalUpload({str(self.path)!r}, client_name={self._client_name!r})"
