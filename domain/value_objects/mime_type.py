from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict

from domain.exceptions import InvalidMediaTypeError

# RFC 2045 token characters
_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_QUOTED_STRING = r'"(?:[^"\\\r\n]|\\[^\r\n])*"'
_MEDIA_TYPE_RE = re.compile(rf"^\s*(?P<type>{_TOKEN})/(?P<subtype>{_TOKEN})\s*")
_PARAM_RE = re.compile(
    rf"\s*;\s*(?P<key>{_TOKEN})=(?P<value>{_TOKEN}|{_QUOTED_STRING})\s*",
)
_TOKEN_RE = re.compile(rf"^{_TOKEN}$")
_QUOTED_PAIR_RE = re.compile(r"\\(.)")
# RFC 6838 restricted-name, without empty dot-separated segments
_RESTRICTED_NAME_RE = re.compile(r"^[a-z0-9][a-z0-9!#$&^_+-]*(?:\.[a-z0-9!#$&^_+-]+)*$")


class MimeType(str, Enum):
    """Represent the thumbnail MIME types accepted under the strict policy."""

    JPEG = "image/jpeg"
    PNG = "image/png"


class MediaTypePolicy(str, Enum):
    """Allow-list policy applied to declared thumbnail content types."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


def _unquote(value: str) -> str:
    if value.startswith('"'):
        return _QUOTED_PAIR_RE.sub(r"\1", value[1:-1])
    return value


def _quote(value: str) -> str:
    if _TOKEN_RE.match(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class MediaType(BaseModel):
    """A parsed, lower-cased ``type/subtype`` pair with optional parameters.

    Parameter values are kept unquoted; ``str()`` quotes them again where they
    are not plain tokens, so ``MediaType.parse(str(media_type))`` is lossless.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    subtype: str
    parameters: tuple[tuple[str, str], ...] = ()

    @classmethod
    def parse(cls, value: str | None) -> MediaType:
        """Parse a ``Content-Type`` header value.

        Raises:
            InvalidMediaTypeError: If the value is missing or not a valid media type.

        """
        if value is None or not value.strip():
            msg = "Missing media type"
            raise InvalidMediaTypeError(msg)

        match = _MEDIA_TYPE_RE.match(value)
        if match is None or value[match.end() :][:1] not in {"", ";"}:
            msg = f"Malformed media type: {value!r}"
            raise InvalidMediaTypeError(msg)

        parameters: list[tuple[str, str]] = []
        pos = match.end()
        while pos < len(value):
            param = _PARAM_RE.match(value, pos)
            if param is None:
                msg = f"Malformed media type parameter in {value!r}"
                raise InvalidMediaTypeError(msg)
            parameters.append((param.group("key").lower(), _unquote(param.group("value"))))
            pos = param.end()

        return cls(
            type=match.group("type").lower(),
            subtype=match.group("subtype").lower(),
            parameters=tuple(parameters),
        )

    @classmethod
    def from_extension(cls, extension: str) -> MediaType:
        """Re-derive an image media type from a stored file extension."""
        return cls.parse(f"image/{extension.lstrip('.')}")

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"

    @property
    def extension(self) -> str:
        return self.subtype

    @property
    def has_restricted_subtype(self) -> bool:
        """Whether the subtype names one concrete type and is safe as a file extension."""
        return _RESTRICTED_NAME_RE.match(self.subtype) is not None

    def __str__(self) -> str:
        params = "".join(f";{key}={_quote(value)}" for key, value in self.parameters)
        return f"{self.essence}{params}"
