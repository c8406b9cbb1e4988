"""
FastAPI service for imageupload

Exposes image upload and thumbnail generation over HTTP.
"""

import logging
import os
import shutil
import tempfile
from typing import Any, Dict, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from imageupload import LocalUpload, UploadConfig, UploadOrchestrator, __version__


logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Error response"""
    error: str
    detail: Optional[str] = None


class ThumbnailSchema(BaseModel):
    """One generated thumbnail"""
    path: str
    dir: str
    filename: str
    filepath: str
    filedir: str
    width: int
    height: int
    filesize: int
    is_squared: bool


class UploadResponse(BaseModel):
    """Upload manifest"""
    original_filename: Optional[str] = None
    original_filepath: Optional[str] = None
    original_filedir: Optional[str] = None
    original_extension: Optional[str] = None
    original_mime: Optional[str] = None
    original_filesize: int = 0
    original_width: int = 0
    original_height: int = 0
    exif: Dict[str, Any] = {}
    path: Optional[str] = None
    dir: Optional[str] = None
    filename: Optional[str] = None
    basename: Optional[str] = None
    dimensions: Dict[str, ThumbnailSchema] = {}
    error: Optional[str] = None
    thumbnail_errors: Dict[str, str] = {}


def create_app(config: Optional[UploadConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Upload options (default: read from IMAGEUPLOAD_* variables)
    """
    orchestrator = UploadOrchestrator(config or UploadConfig.from_env())

    app = FastAPI(
        title="Image Upload API",
        description="Stores uploaded images and generates thumbnails",
        version=__version__,
    )

    # CORS - allow browser clients to post uploads
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure based on deployment
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        """API root - health check"""
        return {
            "service": "Image Upload API",
            "version": __version__,
            "status": "healthy"
        }

    @app.post("/v1/upload", response_model=UploadResponse, responses={400: {"model": ErrorResponse}})
    def upload_endpoint(
        file: UploadFile = File(..., description="Image file to upload"),
        filename: Optional[str] = Form(None, description="Basename for the 'custom' naming strategy"),
        path: Optional[str] = Form(None, description="Sub path below the upload directory; its directory part is used")
    ):
        """
        Store the uploaded image and its thumbnails, returning the manifest.

        Raises:
            HTTPException 400: If no file name was sent or the original could not be stored

        Example:
            curl -X POST http://localhost:8000/v1/upload \\
              -F "file=@photo.jpg" \\
              -F "path=2024/05/"
        """
        if not file.filename:
            raise HTTPException(status_code=400, detail="Uploaded file has no filename")

        suffix = os.path.splitext(file.filename)[1]
        with tempfile.NamedTemporaryFile(suffix=suffix, delete=False) as tmp:
            shutil.copyfileobj(file.file, tmp)
            tmp_path = tmp.name

        try:
            upload = LocalUpload(tmp_path, client_name=file.filename, mime_type=file.content_type)
            result = orchestrator.upload(upload, new_filename=filename, path=path)
        finally:
            os.unlink(tmp_path)

        if result.failed:
            logger.warning("Rejected upload %s: %s", file.filename, result.error)
            raise HTTPException(
                status_code=400,
                detail=f"Upload failed: {result.error}"
            )

        return UploadResponse(**result.to_dict())

    @app.get("/health")
    def health_check():
        """Health check endpoint for monitoring"""
        return {"status": "healthy"}

    return app


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=os.environ.get("IMAGEUPLOAD_LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
