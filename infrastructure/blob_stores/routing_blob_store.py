from __future__ import annotations

from typing import TYPE_CHECKING

from application.ports.blob_store import BlobStore, ResolvedBlob
from domain.exceptions import CorruptReferenceError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from uuid import UUID

    from domain.value_objects.thumbnail_reference import FileReference, InlineReference
    from domain.value_objects.uploaded_blob import UploadedBlob


class RoutingBlobStore(BlobStore):
    """Write through the configured strategy, resolve by reference kind.

    Records written before a strategy switch keep resolving through the store
    that understands their reference kind.
    """

    def __init__(self, writer: BlobStore, readers: Mapping[str, BlobStore]) -> None:
        self.writer = writer
        self.readers = dict(readers)

    def store(self, blob: UploadedBlob, key: UUID) -> InlineReference | FileReference:
        return self.writer.store(blob, key)

    def resolve(self, ref: InlineReference | FileReference) -> ResolvedBlob:
        reader = self.readers.get(ref.kind)
        if reader is None:
            msg = f"No blob store can resolve {ref.kind} references"
            raise CorruptReferenceError(msg)
        return reader.resolve(ref)
