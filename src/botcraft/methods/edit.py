from __future__ import annotations

from typing import Any, ClassVar

from botcraft.codec import dumps
from botcraft.methods.base import FormMethod
from botcraft.types.builder import InlineMarkupParams
from botcraft.types.input_media import InputMedia
from botcraft.types.message import EditMessageResult
from botcraft.types.primitive import ChatId


class EditMessageMedia(InlineMarkupParams, FormMethod[EditMessageResult]):
    """
    Replace the media of a message.

    An album item can only be replaced with media of the same kind. The
    result is the edited message, or True for inline messages. Build it
    with `for_chat_message` or `for_inline_message`.
    """

    __slots__ = ()

    NAME: ClassVar[str] = "editMessageMedia"
    RESPONSE: ClassVar[Any] = EditMessageResult

    def __init__(
        self,
        media: InputMedia,
        *,
        chat_id: ChatId | None = None,
        message_id: int | None = None,
        inline_message_id: str | None = None,
    ) -> None:
        if inline_message_id is None and (chat_id is None or message_id is None):
            raise ValueError("either chat_id with message_id or inline_message_id is required")
        if inline_message_id is not None and (chat_id is not None or message_id is not None):
            raise ValueError("inline_message_id cannot be combined with chat_id or message_id")
        super().__init__(
            chat_id=chat_id,
            message_id=message_id,
            inline_message_id=inline_message_id,
        )
        self._form.insert_field("media", dumps(media.attach(self._form)))

    @classmethod
    def for_chat_message(cls, chat_id: ChatId, message_id: int, media: InputMedia) -> EditMessageMedia:
        return cls(media, chat_id=chat_id, message_id=message_id)

    @classmethod
    def for_inline_message(cls, inline_message_id: str, media: InputMedia) -> EditMessageMedia:
        return cls(media, inline_message_id=inline_message_id)
