from __future__ import annotations

import base64
import binascii
import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.exceptions import CorruptReferenceError, InvalidMediaTypeError
from domain.value_objects.mime_type import MediaType

_DATA_URL_RE = re.compile(r"^data:(?P<media_type>.+);base64,(?P<payload>[A-Za-z0-9+/]*={0,2})$")
_BASE64_RE = re.compile(r"^[A-Za-z0-9+/]*={0,2}$")


class InlineReference(BaseModel):
    """Thumbnail bytes embedded in the video record as a base64 data URL."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["inline"] = "inline"
    media_type: MediaType
    payload: str = Field(..., description="Standard base64 encoding of the image bytes")

    @field_validator("payload")
    @classmethod
    def validate_payload(cls, v: str) -> str:
        if not _BASE64_RE.match(v):
            msg = "Inline payload must be standard base64"
            raise ValueError(msg)
        return v

    @classmethod
    def encode(cls, data: bytes, media_type: MediaType) -> InlineReference:
        return cls(media_type=media_type, payload=base64.b64encode(data).decode("ascii"))

    def decode(self) -> bytes:
        try:
            return base64.b64decode(self.payload, validate=True)
        except binascii.Error as e:
            msg = f"Inline payload is not valid base64: {e!s}"
            raise CorruptReferenceError(msg) from e

    def serialize(self) -> str:
        return f"data:{self.media_type};base64,{self.payload}"


class FileReference(BaseModel):
    """Thumbnail bytes stored as a file; the record keeps a rooted path to it."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    path: str = Field(..., description="Rooted path, always starting with '/'")

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v.startswith("/") or v == "/":
            msg = "File reference path must be rooted and name a file"
            raise ValueError(msg)
        return v

    @property
    def filename(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    def serialize(self) -> str:
        return self.path


def parse_thumbnail_reference(value: str) -> InlineReference | FileReference:
    """Classify a stored reference string.

    Raises:
        CorruptReferenceError: If the string is neither a base64 data URL nor a rooted path.

    """
    if value.startswith("data:"):
        match = _DATA_URL_RE.match(value)
        if match is None:
            msg = "Data URL does not have an encoded media type"
            raise CorruptReferenceError(msg)
        try:
            media_type = MediaType.parse(match.group("media_type"))
        except InvalidMediaTypeError as e:
            msg = f"Data URL media type is invalid: {e!s}"
            raise CorruptReferenceError(msg) from e
        return InlineReference(media_type=media_type, payload=match.group("payload"))

    if value.startswith("/") and value != "/":
        return FileReference(path=value)

    msg = "Thumbnail reference is neither a data URL nor a rooted path"
    raise CorruptReferenceError(msg)
