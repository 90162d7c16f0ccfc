from __future__ import annotations

from typing import TYPE_CHECKING

from application.ports.blob_store import BlobStore, ResolvedBlob
from domain.exceptions import CorruptReferenceError
from domain.value_objects.thumbnail_reference import FileReference, InlineReference

if TYPE_CHECKING:
    from uuid import UUID

    from domain.value_objects.uploaded_blob import UploadedBlob


class InlineBlobStore(BlobStore):
    """Embed thumbnails in the video record as base64 data URLs.

    Nothing touches the filesystem. Size is bounded by the upload budget and by
    whatever limit the metadata store puts on the reference field.
    """

    def store(self, blob: UploadedBlob, key: UUID) -> InlineReference:  # noqa: ARG002
        return InlineReference.encode(blob.data, blob.media_type)

    def resolve(self, ref: InlineReference | FileReference) -> ResolvedBlob:
        if not isinstance(ref, InlineReference):
            msg = f"Inline store cannot resolve {ref.kind} references"
            raise CorruptReferenceError(msg)
        return ResolvedBlob(data=ref.decode(), media_type=ref.media_type)
