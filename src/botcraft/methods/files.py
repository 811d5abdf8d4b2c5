from __future__ import annotations

from typing import Any, ClassVar

from botcraft.methods.base import JsonMethod
from botcraft.types.media import File


class GetFile(JsonMethod[File]):
    """Basic info about a file and a path to download it (files up to 20MB)."""

    __slots__ = ()

    NAME: ClassVar[str] = "getFile"
    RESPONSE: ClassVar[Any] = File

    def __init__(self, file_id: str) -> None:
        super().__init__(file_id=file_id)
