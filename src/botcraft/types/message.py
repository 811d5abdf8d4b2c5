from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias, Union

from botcraft.codec import CodecError, decode_record, encode_record, from_json_value, to_json_value
from botcraft.types.chat import Chat
from botcraft.types.game import Game
from botcraft.types.location import Contact, Location, Venue
from botcraft.types.media import Animation, Audio, Document, PhotoSize, Video, Voice
from botcraft.types.reply_markup import InlineKeyboardMarkup
from botcraft.types.text import Text, TextEntity
from botcraft.types.user import User


class MessageData:
    """Content variant of a message."""

    __slots__ = ()

    def to_json(self) -> dict[str, Any]:
        raise NotImplementedError


def _caption_json(caption: Text | None) -> dict[str, Any]:
    if caption is None:
        return {}
    out: dict[str, Any] = {"caption": caption.data}
    if caption.entities:
        out["caption_entities"] = to_json_value(caption.entities)
    return out


@dataclass(frozen=True, slots=True)
class MessageDataText(MessageData):
    text: Text

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"text": self.text.data}
        if self.text.entities:
            out["entities"] = to_json_value(self.text.entities)
        return out


@dataclass(frozen=True, slots=True)
class MessageDataAnimation(MessageData):
    animation: Animation
    document: Document | None = None
    caption: Text | None = None

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"animation": to_json_value(self.animation)}
        if self.document is not None:
            out["document"] = to_json_value(self.document)
        out.update(_caption_json(self.caption))
        return out


@dataclass(frozen=True, slots=True)
class MessageDataAudio(MessageData):
    audio: Audio
    caption: Text | None = None

    def to_json(self) -> dict[str, Any]:
        return {"audio": to_json_value(self.audio), **_caption_json(self.caption)}


@dataclass(frozen=True, slots=True)
class MessageDataDocument(MessageData):
    document: Document
    caption: Text | None = None

    def to_json(self) -> dict[str, Any]:
        return {"document": to_json_value(self.document), **_caption_json(self.caption)}


@dataclass(frozen=True, slots=True)
class MessageDataPhoto(MessageData):
    photo: list[PhotoSize]
    caption: Text | None = None

    def to_json(self) -> dict[str, Any]:
        return {"photo": to_json_value(self.photo), **_caption_json(self.caption)}


@dataclass(frozen=True, slots=True)
class MessageDataVideo(MessageData):
    video: Video
    caption: Text | None = None

    def to_json(self) -> dict[str, Any]:
        return {"video": to_json_value(self.video), **_caption_json(self.caption)}


@dataclass(frozen=True, slots=True)
class MessageDataVoice(MessageData):
    voice: Voice
    caption: Text | None = None

    def to_json(self) -> dict[str, Any]:
        return {"voice": to_json_value(self.voice), **_caption_json(self.caption)}


@dataclass(frozen=True, slots=True)
class MessageDataContact(MessageData):
    contact: Contact

    def to_json(self) -> dict[str, Any]:
        return {"contact": to_json_value(self.contact)}


@dataclass(frozen=True, slots=True)
class MessageDataVenue(MessageData):
    # The server sends the venue location twice: inside the venue and at the top level.
    venue: Venue

    def to_json(self) -> dict[str, Any]:
        return {
            "venue": to_json_value(self.venue),
            "location": to_json_value(self.venue.location),
        }


@dataclass(frozen=True, slots=True)
class MessageDataLocation(MessageData):
    location: Location

    def to_json(self) -> dict[str, Any]:
        return {"location": to_json_value(self.location)}


@dataclass(frozen=True, slots=True)
class MessageDataGame(MessageData):
    game: Game

    def to_json(self) -> dict[str, Any]:
        return {"game": to_json_value(self.game)}


@dataclass(frozen=True, slots=True)
class MessageDataUnknown(MessageData):
    """Content this library does not model; keeps the raw payload keys."""

    raw: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        return dict(self.raw)


def _entities(data: dict[str, Any], key: str) -> list[TextEntity] | None:
    raw = data.get(key)
    if raw is None:
        return None
    return from_json_value(list[TextEntity], raw)


def _caption(data: dict[str, Any]) -> Text | None:
    caption = data.get("caption")
    if caption is None:
        return None
    if not isinstance(caption, str):
        raise CodecError(f"Message.caption: expected str, got {type(caption).__name__}")
    return Text.from_raw(caption, _entities(data, "caption_entities"))


def _decode_data(data: dict[str, Any]) -> MessageData:
    if "text" in data:
        text = data["text"]
        if not isinstance(text, str):
            raise CodecError(f"Message.text: expected str, got {type(text).__name__}")
        return MessageDataText(Text.from_raw(text, _entities(data, "entities")))
    # animation messages also carry a document field for older clients
    if "animation" in data:
        document = data.get("document")
        return MessageDataAnimation(
            from_json_value(Animation, data["animation"]),
            from_json_value(Document, document) if document is not None else None,
            _caption(data),
        )
    if "audio" in data:
        return MessageDataAudio(from_json_value(Audio, data["audio"]), _caption(data))
    if "document" in data:
        return MessageDataDocument(from_json_value(Document, data["document"]), _caption(data))
    if "photo" in data:
        return MessageDataPhoto(from_json_value(list[PhotoSize], data["photo"]), _caption(data))
    if "video" in data:
        return MessageDataVideo(from_json_value(Video, data["video"]), _caption(data))
    if "voice" in data:
        return MessageDataVoice(from_json_value(Voice, data["voice"]), _caption(data))
    if "contact" in data:
        return MessageDataContact(from_json_value(Contact, data["contact"]))
    if "venue" in data:
        return MessageDataVenue(from_json_value(Venue, data["venue"]))
    if "location" in data:
        return MessageDataLocation(from_json_value(Location, data["location"]))
    if "game" in data:
        return MessageDataGame(from_json_value(Game, data["game"]))
    return MessageDataUnknown({k: v for k, v in data.items() if k not in _METADATA_KEYS})


@dataclass(frozen=True, slots=True)
class Message:
    message_id: int
    date: int
    chat: Chat
    data: MessageData
    from_user: User | None = field(default=None, metadata={"json": "from"})
    sender_chat: Chat | None = None
    forward_from: User | None = None
    forward_from_chat: Chat | None = None
    forward_from_message_id: int | None = None
    forward_signature: str | None = None
    forward_sender_name: str | None = None
    forward_date: int | None = None
    reply_to_message: Message | None = None
    via_bot: User | None = None
    edit_date: int | None = None
    media_group_id: str | None = None
    author_signature: str | None = None
    reply_markup: InlineKeyboardMarkup | None = None

    @classmethod
    def from_json(cls, data: Any) -> Message:
        if not isinstance(data, dict):
            raise CodecError(f"Message: expected object, got {type(data).__name__}")
        return decode_record(cls, data, data=_decode_data(data))

    def to_json(self) -> dict[str, Any]:
        out = encode_record(self, exclude=("data",))
        out.update(self.data.to_json())
        return out

    def get_text(self) -> Text | None:
        """Message text, or the caption of a media message."""
        if isinstance(self.data, MessageDataText):
            return self.data.text
        return getattr(self.data, "caption", None)

    @property
    def is_edited(self) -> bool:
        return self.edit_date is not None


_METADATA_KEYS = frozenset(
    {
        "message_id",
        "date",
        "chat",
        "from",
        "sender_chat",
        "forward_from",
        "forward_from_chat",
        "forward_from_message_id",
        "forward_signature",
        "forward_sender_name",
        "forward_date",
        "reply_to_message",
        "via_bot",
        "edit_date",
        "media_group_id",
        "author_signature",
        "reply_markup",
    }
)

# Result of edit-style methods: the edited message, or True for inline messages.
EditMessageResult: TypeAlias = Union[Message, bool]
