from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

from botcraft.codec import dumps
from botcraft.methods.base import FormMethod, JsonMethod, ReplyParams, SendOptions
from botcraft.request import Form, InputFile
from botcraft.types.builder import CaptionParams
from botcraft.types.input_media import MediaGroup
from botcraft.types.message import Message
from botcraft.types.parse_mode import ParseMode
from botcraft.types.primitive import ChatId
from botcraft.types.text import TextEntity, check_text_entities


class SendMessage(ReplyParams, JsonMethod[Message]):
    __slots__ = ()

    NAME: ClassVar[str] = "sendMessage"
    RESPONSE: ClassVar[Any] = Message

    def __init__(self, chat_id: ChatId, text: str) -> None:
        super().__init__(chat_id=chat_id, text=text)

    def entities(self, entities: Iterable[TextEntity]) -> SendMessage:
        """Explicit formatting of the text; drops any parse mode set before."""
        return self._with("entities", check_text_entities(entities), clear=("parse_mode",))

    def parse_mode(self, value: ParseMode) -> SendMessage:
        """Server-side formatting of the text; drops any entities set before."""
        return self._with("parse_mode", ParseMode(value), clear=("entities",))

    def disable_web_page_preview(self, value: bool) -> SendMessage:
        return self._with("disable_web_page_preview", bool(value))


class SendVoice(CaptionParams, ReplyParams, FormMethod[Message]):
    """
    Send an audio file to be displayed as a playable voice message.

    The file must be OGG encoded with OPUS; other formats may be sent as
    audio or document instead.
    """

    __slots__ = ()

    NAME: ClassVar[str] = "sendVoice"
    RESPONSE: ClassVar[Any] = Message

    def __init__(self, chat_id: ChatId, voice: InputFile) -> None:
        super().__init__(chat_id=chat_id, voice=voice)

    def duration(self, value: int) -> SendVoice:
        """Duration in seconds."""
        return self._with("duration", int(value))


class SendDocument(CaptionParams, ReplyParams, FormMethod[Message]):
    __slots__ = ()

    NAME: ClassVar[str] = "sendDocument"
    RESPONSE: ClassVar[Any] = Message

    def __init__(self, chat_id: ChatId, document: InputFile) -> None:
        super().__init__(chat_id=chat_id, document=document)

    def thumb(self, value: InputFile) -> SendDocument:
        """JPEG thumbnail under 200 kB, at most 320x320."""
        return self._with("thumb", value)

    def disable_content_type_detection(self, value: bool) -> SendDocument:
        return self._with("disable_content_type_detection", bool(value))


class SendMediaGroup(SendOptions, FormMethod[list[Message]]):
    """Send 2-10 photos or documents as an album."""

    __slots__ = ()

    NAME: ClassVar[str] = "sendMediaGroup"
    RESPONSE: ClassVar[Any] = list[Message]

    def __init__(self, chat_id: ChatId, media_group: MediaGroup) -> None:
        super().__init__(chat_id=chat_id)
        form: Form = self._form
        form.insert_field("media", dumps(media_group.attach(form)))
