"""Domain layer exports."""

from domain.aggregates.video import Video
from domain.exceptions import DomainError, ValidationError
from domain.value_objects import (
    FileReference,
    InlineReference,
    MediaType,
    MediaTypePolicy,
    MimeType,
    UploadedBlob,
)

__all__ = [
    "DomainError",
    "FileReference",
    "InlineReference",
    "MediaType",
    "MediaTypePolicy",
    "MimeType",
    "UploadedBlob",
    "ValidationError",
    "Video",
]
