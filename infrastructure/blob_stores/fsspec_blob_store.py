from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import fsspec

from application.ports.blob_store import BlobStore, ResolvedBlob
from domain.exceptions import (
    BlobNotFoundError,
    CorruptReferenceError,
    InvalidMediaTypeError,
    StorageUnavailableError,
)
from domain.value_objects.mime_type import MediaType
from domain.value_objects.thumbnail_reference import FileReference, InlineReference

if TYPE_CHECKING:
    from uuid import UUID

    from domain.value_objects.uploaded_blob import UploadedBlob

FILE_MODE = 0o644


class FsspecBlobStore(BlobStore):
    """Write thumbnails as ``<video_id>.<extension>`` files under an asset root.

    The extension is the lower-cased subtype of the declared media type, and
    on read the content type is re-derived from it as ``image/<extension>``.
    No content-type sidecar is kept, so media type parameters are not
    preserved. Re-uploads for the same video overwrite the file in place.
    """

    def __init__(self, asset_root: Path | str) -> None:
        self.asset_root = Path(asset_root)
        self.fs = fsspec.filesystem("file")

    def _path(self, filename: str) -> Path:
        return self.asset_root / filename

    @staticmethod
    def filename_for(key: UUID, media_type: MediaType) -> str:
        """Name the file for ``key``.

        Raises:
            InvalidMediaTypeError: If the subtype cannot be read back from the extension.

        """
        if not media_type.has_restricted_subtype:
            msg = f"Media type {media_type.essence!r} cannot be stored as a file extension"
            raise InvalidMediaTypeError(msg)
        return f"{key}.{media_type.extension}"

    def _rooted(self, path: Path) -> str:
        return "/" + path.as_posix().lstrip("/")

    def store(self, blob: UploadedBlob, key: UUID) -> FileReference:
        path = self._path(self.filename_for(key, blob.media_type))
        try:
            self.fs.makedirs(str(self.asset_root), exist_ok=True)
            with self.fs.open(str(path), "wb") as out:
                out.write(blob.data)
            self.fs.chmod(str(path), FILE_MODE)
        except OSError as e:
            msg = f"Unable to write thumbnail file {path}: {e!s}"
            raise StorageUnavailableError(msg) from e

        return FileReference(path=self._rooted(path))

    def resolve(self, ref: InlineReference | FileReference) -> ResolvedBlob:
        if not isinstance(ref, FileReference):
            msg = f"File store cannot resolve {ref.kind} references"
            raise CorruptReferenceError(msg)

        # Only the file name is trusted; the directory always comes from the asset root.
        filename = ref.filename
        _, dot, extension = filename.partition(".")
        if not dot or not extension:
            msg = f"Thumbnail file {filename!r} has no extension"
            raise CorruptReferenceError(msg)
        try:
            media_type = MediaType.from_extension(extension)
        except InvalidMediaTypeError as e:
            msg = f"Cannot derive a media type from extension {extension!r}"
            raise CorruptReferenceError(msg) from e
        if not media_type.has_restricted_subtype or media_type.extension != extension.lower():
            msg = f"Cannot derive a media type from extension {extension!r}"
            raise CorruptReferenceError(msg)

        path = self._path(filename)
        try:
            with self.fs.open(str(path), "rb") as f:
                data = f.read()
        except FileNotFoundError as e:
            msg = f"Thumbnail file {path} does not exist"
            raise BlobNotFoundError(msg) from e
        except OSError as e:
            msg = f"Unable to read thumbnail file {path}: {e!s}"
            raise StorageUnavailableError(msg) from e

        return ResolvedBlob(data=data, media_type=media_type)
