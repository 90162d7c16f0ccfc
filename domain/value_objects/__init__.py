from .mime_type import MediaType, MediaTypePolicy, MimeType
from .thumbnail_reference import (
    FileReference,
    InlineReference,
    parse_thumbnail_reference,
)
from .uploaded_blob import UploadedBlob

__all__ = [
    "FileReference",
    "InlineReference",
    "MediaType",
    "MediaTypePolicy",
    "MimeType",
    "UploadedBlob",
    "parse_thumbnail_reference",
]
