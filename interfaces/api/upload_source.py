"""Starlette-backed upload source for multipart thumbnail requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from application.ports.upload_source import UploadPart, UploadSource
from domain.exceptions import MalformedUploadError

if TYPE_CHECKING:
    from starlette.datastructures import FormData
    from starlette.requests import Request


class FormUploadSource(UploadSource):
    """Parse ``request.form()`` on demand and hand out one file part.

    The form is parsed only when a part is requested, so the caller decides
    when body parsing happens. ``aclose`` releases any spooled files.
    """

    def __init__(self, request: Request) -> None:
        self.request = request
        self._form: FormData | None = None

    async def get_part(self, field_name: str, *, memory_budget: int) -> UploadPart:
        try:
            self._form = await self.request.form(max_part_size=memory_budget)
        except MultiPartException as e:
            raise MalformedUploadError(e.message) from e
        except StarletteHTTPException as e:
            raise MalformedUploadError(str(e.detail)) from e

        value = self._form.get(field_name)
        if not isinstance(value, UploadFile):
            msg = f"Missing file field {field_name!r}"
            raise MalformedUploadError(msg)

        return UploadPart(
            content_type=value.content_type,
            size=value.size,
            stream=value.file,
            filename=value.filename,
        )

    async def aclose(self) -> None:
        if self._form is not None:
            await self._form.close()
