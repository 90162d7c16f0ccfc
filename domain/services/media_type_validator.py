"""Domain service classifying declared thumbnail content types."""

from __future__ import annotations

from domain.exceptions import InvalidMediaTypeError
from domain.value_objects.mime_type import MediaType, MediaTypePolicy, MimeType


class MediaTypeValidator:
    """Validate a declared ``Content-Type`` against the configured allow-list.

    Under ``STRICT`` only ``image/jpeg`` and ``image/png`` pass; under
    ``PERMISSIVE`` any concrete ``image`` subtype does. Wildcards such as
    ``image/*`` and subtypes that cannot be written back as a file extension
    are rejected under both policies. Validation is pure and runs before any
    upload bytes are read.
    """

    def __init__(self, policy: MediaTypePolicy = MediaTypePolicy.STRICT) -> None:
        self.policy = policy

    def is_allowed(self, media_type: MediaType) -> bool:
        if self.policy is MediaTypePolicy.PERMISSIVE:
            return media_type.type == "image" and media_type.has_restricted_subtype
        return media_type.essence in {m.value for m in MimeType}

    def validate(self, declared_content_type: str | None) -> MediaType:
        """Return the parsed media type if it is allowed.

        Raises:
            InvalidMediaTypeError: If the header is missing, malformed, or not allowed.

        """
        media_type = MediaType.parse(declared_content_type)
        if not self.is_allowed(media_type):
            msg = f"Unsupported media type {media_type.essence!r} for {self.policy.value} policy"
            raise InvalidMediaTypeError(msg)
        return media_type
