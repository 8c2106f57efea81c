"""
Intake module for transcript file uploads.
"""

__version__ = "1.0.0"

from .upload import (
    UploadError,
    UploadRejected,
    UploadTooLarge,
    check_upload,
    read_transcript,
    staged_name,
    staged_upload,
)

__all__ = [
    "UploadError",
    "UploadRejected",
    "UploadTooLarge",
    "check_upload",
    "read_transcript",
    "staged_name",
    "staged_upload",
]
