from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from botcraft.codec import CodecError, dumps
from botcraft.types.user import User


class TextEntityError(Exception):
    pass


class TextEntityKind(str, enum.Enum):
    MENTION = "mention"
    HASHTAG = "hashtag"
    CASHTAG = "cashtag"
    BOT_COMMAND = "bot_command"
    URL = "url"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    PRE = "pre"
    TEXT_LINK = "text_link"
    TEXT_MENTION = "text_mention"


@dataclass(frozen=True, slots=True)
class TextEntity:
    """
    Formatting annotation over a range of text.

    Offsets and lengths are measured in UTF-16 code units.
    `url` is set for text_link, `user` for text_mention, `language` for pre.
    Entity types newer than `TextEntityKind` keep their raw type string.
    """

    kind: TextEntityKind | str = field(metadata={"json": "type"})
    offset: int
    length: int
    url: str | None = None
    user: User | None = None
    language: str | None = None

    @property
    def end(self) -> int:
        return self.offset + self.length

    @property
    def type_name(self) -> str:
        return self.kind.value if isinstance(self.kind, TextEntityKind) else self.kind

    @classmethod
    def mention(cls, offset: int, length: int) -> TextEntity:
        return cls(TextEntityKind.MENTION, offset, length)

    @classmethod
    def hashtag(cls, offset: int, length: int) -> TextEntity:
        return cls(TextEntityKind.HASHTAG, offset, length)

    @classmethod
    def cashtag(cls, offset: int, length: int) -> TextEntity:
        return cls(TextEntityKind.CASHTAG, offset, length)

    @classmethod
    def bot_command(cls, offset: int, length: int) -> TextEntity:
        return cls(TextEntityKind.BOT_COMMAND, offset, length)

    @classmethod
    def link(cls, offset: int, length: int) -> TextEntity:
        return cls(TextEntityKind.URL, offset, length)

    @classmethod
    def email(cls, offset: int, length: int) -> TextEntity:
        return cls(TextEntityKind.EMAIL, offset, length)

    @classmethod
    def phone_number(cls, offset: int, length: int) -> TextEntity:
        return cls(TextEntityKind.PHONE_NUMBER, offset, length)

    @classmethod
    def bold(cls, offset: int, length: int) -> TextEntity:
        return cls(TextEntityKind.BOLD, offset, length)

    @classmethod
    def italic(cls, offset: int, length: int) -> TextEntity:
        return cls(TextEntityKind.ITALIC, offset, length)

    @classmethod
    def underline(cls, offset: int, length: int) -> TextEntity:
        return cls(TextEntityKind.UNDERLINE, offset, length)

    @classmethod
    def strikethrough(cls, offset: int, length: int) -> TextEntity:
        return cls(TextEntityKind.STRIKETHROUGH, offset, length)

    @classmethod
    def code(cls, offset: int, length: int) -> TextEntity:
        return cls(TextEntityKind.CODE, offset, length)

    @classmethod
    def pre(cls, offset: int, length: int, language: str | None = None) -> TextEntity:
        return cls(TextEntityKind.PRE, offset, length, language=language)

    @classmethod
    def text_link(cls, offset: int, length: int, url: str) -> TextEntity:
        return cls(TextEntityKind.TEXT_LINK, offset, length, url=url)

    @classmethod
    def text_mention(cls, offset: int, length: int, user: User) -> TextEntity:
        return cls(TextEntityKind.TEXT_MENTION, offset, length, user=user)


def utf16_len(data: str) -> int:
    return len(data.encode("utf-16-le")) // 2


def check_text_entities(entities: Iterable[TextEntity]) -> list[TextEntity]:
    """Validate entity ranges that do not depend on the text itself."""
    out = list(entities)
    for e in out:
        if e.offset < 0:
            raise TextEntityError(f"{e.type_name} entity has a negative offset: {e.offset}")
        if e.length <= 0:
            raise TextEntityError(f"{e.type_name} entity has a non-positive length: {e.length}")
        if e.kind is TextEntityKind.TEXT_LINK and not e.url:
            raise TextEntityError("text_link entity requires an url")
        if e.kind is TextEntityKind.TEXT_MENTION and e.user is None:
            raise TextEntityError("text_mention entity requires a user")
    return out


def serialize_text_entities(entities: Iterable[TextEntity]) -> str:
    checked = check_text_entities(entities)
    try:
        return dumps(checked)
    except CodecError as e:
        raise TextEntityError(f"Failed to serialize text entities: {e}") from e


@dataclass(frozen=True, slots=True)
class Text:
    """Text with its formatting entities (message text, caption, game text)."""

    data: str
    entities: list[TextEntity] | None = None

    @classmethod
    def from_raw(cls, data: str, entities: list[TextEntity] | None) -> Text:
        """
        Combine plain text with a parallel entity list.

        An entity list must be non-empty when present, and every entity must
        fit inside the text.
        """
        if entities is None:
            return cls(data)
        if not entities:
            raise TextEntityError("entity list is present but empty")
        size = utf16_len(data)
        for e in check_text_entities(entities):
            if e.end > size:
                raise TextEntityError(
                    f"{e.type_name} entity [{e.offset}, {e.end}) is out of text bounds ({size})"
                )
        return cls(data, list(entities))

    def get_entity_text(self, entity: TextEntity) -> str:
        encoded = self.data.encode("utf-16-le")
        return encoded[entity.offset * 2 : entity.end * 2].decode("utf-16-le")

    def get_bot_commands(self) -> list[str]:
        """Command names (without the leading slash or @botname suffix)."""
        out: list[str] = []
        for e in self.entities or []:
            if e.kind is not TextEntityKind.BOT_COMMAND:
                continue
            raw = self.get_entity_text(e).lstrip("/")
            name = raw.split("@", 1)[0]
            if name:
                out.append(name)
        return out

    def __str__(self) -> str:
        return self.data
