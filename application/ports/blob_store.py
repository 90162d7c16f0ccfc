from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from uuid import UUID

    from domain.value_objects.mime_type import MediaType
    from domain.value_objects.thumbnail_reference import FileReference, InlineReference
    from domain.value_objects.uploaded_blob import UploadedBlob


@dataclass(frozen=True)
class ResolvedBlob:
    data: bytes
    media_type: MediaType

    @property
    def size_bytes(self) -> int:
        return len(self.data)


class BlobStore(Protocol):
    """Persist thumbnail bytes and resolve stored references back to them.

    Implementations raise domain exceptions:
    - StorageUnavailableError: When bytes cannot be written or read
    - BlobNotFoundError: When a referenced blob no longer exists
    - CorruptReferenceError: When a reference cannot be decoded
    """

    def store(self, blob: UploadedBlob, key: UUID) -> InlineReference | FileReference: ...
    def resolve(self, ref: InlineReference | FileReference) -> ResolvedBlob: ...
