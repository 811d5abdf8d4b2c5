from __future__ import annotations

import enum
import mimetypes
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, TypeAlias

from botcraft.codec import dumps

InputFileKind: TypeAlias = Literal["file_id", "url", "path", "bytes"]

DEFAULT_MIME_TYPE = "application/octet-stream"


class InputFileError(Exception):
    pass


@dataclass(frozen=True, slots=True)
class InputFile:
    """
    File reference for upload-capable parameters.

    - file_id: file already stored on Telegram servers
    - url: HTTP URL for Telegram to fetch
    - path: local file, read when the request is sent
    - bytes: in-memory content with a file name
    """

    kind: InputFileKind
    value: str
    data: bytes | None = None
    mime_type: str | None = None

    @classmethod
    def file_id(cls, file_id: str) -> InputFile:
        return cls("file_id", str(file_id))

    @classmethod
    def url(cls, url: str) -> InputFile:
        return cls("url", str(url))

    @classmethod
    def path(cls, path: str | os.PathLike[str], *, mime_type: str | None = None) -> InputFile:
        return cls("path", os.fspath(path), mime_type=mime_type)

    @classmethod
    def from_bytes(cls, name: str, data: bytes, *, mime_type: str | None = None) -> InputFile:
        if not name:
            raise InputFileError("in-memory file requires a name")
        return cls("bytes", str(name), data=bytes(data), mime_type=mime_type)

    @property
    def is_upload(self) -> bool:
        return self.kind in ("path", "bytes")

    def as_text(self) -> str | None:
        """Text form for file_id/url references; None for uploads."""
        return None if self.is_upload else self.value

    def read(self) -> tuple[str, bytes, str]:
        """Return (file_name, content, mime_type) for an upload."""
        if self.kind == "bytes":
            name = self.value
            content = self.data or b""
        elif self.kind == "path":
            p = Path(self.value)
            name = p.name
            try:
                content = p.read_bytes()
            except OSError as e:
                raise InputFileError(f"Failed to read {p}: {e}") from e
        else:
            raise InputFileError(f"{self.kind} reference has no content to upload")
        mime = self.mime_type or mimetypes.guess_type(name)[0] or DEFAULT_MIME_TYPE
        return name, content, mime


@dataclass(frozen=True, slots=True)
class FormValue:
    """A form field: either inline text or a file."""

    text: str | None = None
    file: InputFile | None = None

    def __post_init__(self) -> None:
        if (self.text is None) == (self.file is None):
            raise ValueError("FormValue must hold exactly one of text/file")


def _render_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, (int, float, str)):
        return str(value)
    raise TypeError(f"Unsupported form value type: {type(value).__name__}")


class Form:
    """
    Multipart form body: field name -> text or file.

    Field names are unique; inserting an existing name replaces its value.
    """

    __slots__ = ("fields",)

    def __init__(self, fields: dict[str, FormValue] | None = None) -> None:
        self.fields: dict[str, FormValue] = dict(fields) if fields else {}

    def insert_field(self, name: str, value: Any) -> None:
        if isinstance(value, FormValue):
            self.fields[name] = value
        elif isinstance(value, InputFile):
            self.fields[name] = FormValue(file=value)
        else:
            self.fields[name] = FormValue(text=_render_text(value))

    def remove_field(self, name: str) -> FormValue | None:
        return self.fields.pop(name, None)

    def copy(self) -> Form:
        return Form(self.fields)

    def to_multipart(self) -> tuple[dict[str, str], dict[str, tuple[str, bytes, str]]]:
        """Split into (text fields, file parts) for a multipart transport."""
        data: dict[str, str] = {}
        files: dict[str, tuple[str, bytes, str]] = {}
        for name, value in self.fields.items():
            if value.text is not None:
                data[name] = value.text
                continue
            assert value.file is not None
            text = value.file.as_text()
            if text is not None:
                data[name] = text
            else:
                files[name] = value.file.read()
        return data, files

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __getitem__(self, name: str) -> FormValue:
        return self.fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Form):
            return NotImplemented
        return self.fields == other.fields

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Form({self.fields!r})"


class RequestMethod(str, enum.Enum):
    GET = "GET"
    POST = "POST"


@dataclass(frozen=True, slots=True)
class RequestBody:
    """Exactly one representation is active: none (empty), JSON text or a form."""

    json_data: str | None = None
    form: Form | None = None

    def __post_init__(self) -> None:
        if self.json_data is not None and self.form is not None:
            raise ValueError("RequestBody cannot carry both JSON and form data")

    @property
    def is_empty(self) -> bool:
        return self.json_data is None and self.form is None


@dataclass(frozen=True, slots=True)
class Request:
    method_name: str
    http_method: RequestMethod
    body: RequestBody

    @classmethod
    def json(cls, method_name: str, payload: Any) -> Request:
        return cls(method_name, RequestMethod.POST, RequestBody(json_data=dumps(payload)))

    @classmethod
    def form(cls, method_name: str, form: Form) -> Request:
        return cls(method_name, RequestMethod.POST, RequestBody(form=form))

    @classmethod
    def empty(cls, method_name: str) -> Request:
        return cls(method_name, RequestMethod.GET, RequestBody())

    def build_url(self, base_url: str, token: str) -> str:
        return f"{base_url}/bot{token}/{self.method_name}"
