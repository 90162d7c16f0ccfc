from dataclasses import dataclass

from domain.value_objects.mime_type import MediaType


@dataclass(frozen=True)
class UploadedBlob:
    """Request-scoped image payload, handed to a blob store and then discarded."""

    data: bytes
    media_type: MediaType

    @property
    def size_bytes(self) -> int:
        return len(self.data)
