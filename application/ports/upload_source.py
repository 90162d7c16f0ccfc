from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from typing import BinaryIO


@dataclass(frozen=True)
class UploadPart:
    """A single file part of a multipart upload, not yet read."""

    content_type: str | None
    size: int | None
    stream: BinaryIO
    filename: str | None = None


class UploadSource(Protocol):
    async def get_part(self, field_name: str, *, memory_budget: int) -> UploadPart:
        """Parse the request body and return the named file part.

        Parsing is deferred until this call so that it runs after authorization.

        Raises:
            MalformedUploadError: If the body cannot be parsed within ``memory_budget``
                or ``field_name`` is absent.

        """
        ...
