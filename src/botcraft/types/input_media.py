from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar, TypeAlias, Union

from botcraft.request import Form, InputFile
from botcraft.types.builder import CaptionParams, PayloadBuilder

FILE_ATTACH_NAME = "botcraft_im_file"
THUMB_ATTACH_NAME = "botcraft_im_thumb"

MIN_GROUP_SIZE = 2
MAX_GROUP_SIZE = 10


class MediaGroupError(ValueError):
    pass


class InputMediaPhoto(CaptionParams, PayloadBuilder):
    __slots__ = ()

    MEDIA_TYPE: ClassVar[str] = "photo"

    def __init__(self) -> None:
        super().__init__()


class InputMediaDocument(CaptionParams, PayloadBuilder):
    __slots__ = ()

    MEDIA_TYPE: ClassVar[str] = "document"

    def __init__(self) -> None:
        super().__init__()

    def disable_content_type_detection(self, value: bool) -> InputMediaDocument:
        """Skip server-side type detection for uploads; documents only."""
        return self._with("disable_content_type_detection", value)


InputMediaInfo: TypeAlias = Union[InputMediaPhoto, InputMediaDocument]


def _media_ref(form: Form, file: InputFile, name: str) -> str:
    if file.is_upload:
        form.insert_field(name, file)
        return f"attach://{name}"
    return file.value


class InputMedia:
    """
    A file together with its media description.

    Uploaded files travel as separate multipart parts and the description
    refers to them as `attach://<name>`; file ids and URLs are inlined.
    """

    __slots__ = ("file", "info", "thumb")

    def __init__(self, file: InputFile, info: InputMediaInfo, thumb: InputFile | None = None) -> None:
        self.file = file
        self.info = info
        self.thumb = thumb

    def with_thumb(self, thumb: InputFile) -> InputMedia:
        return InputMedia(self.file, self.info, thumb)

    def attach(self, form: Form, suffix: str = "") -> dict[str, Any]:
        """Insert the uploads into `form` and return the JSON description."""
        out: dict[str, Any] = {
            "type": self.info.MEDIA_TYPE,
            "media": _media_ref(form, self.file, FILE_ATTACH_NAME + suffix),
        }
        if self.thumb is not None:
            out["thumb"] = _media_ref(form, self.thumb, THUMB_ATTACH_NAME + suffix)
        for key, value in self.info.to_json().items():
            out[key] = value
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputMedia):
            return NotImplemented
        return (self.file, self.info, self.thumb) == (other.file, other.info, other.thumb)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"InputMedia(file={self.file!r}, info={self.info!r}, thumb={self.thumb!r})"


class MediaGroup:
    """2-10 photos or documents sent as an album."""

    __slots__ = ("items",)

    def __init__(self, items: Iterable[InputMedia]) -> None:
        self.items = list(items)
        if not MIN_GROUP_SIZE <= len(self.items) <= MAX_GROUP_SIZE:
            raise MediaGroupError(
                f"media group must contain from {MIN_GROUP_SIZE} to {MAX_GROUP_SIZE} items, "
                f"got {len(self.items)}"
            )

    def attach(self, form: Form) -> list[dict[str, Any]]:
        return [item.attach(form, f"_{idx}") for idx, item in enumerate(self.items)]

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"MediaGroup({self.items!r})"
