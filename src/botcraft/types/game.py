from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from botcraft.codec import decode_record, to_json_value
from botcraft.types.media import Animation, PhotoSize
from botcraft.types.text import Text, TextEntity
from botcraft.types.user import User


@dataclass(frozen=True, slots=True)
class CallbackGame:
    """Placeholder carried by the game-launching inline button; holds no data."""


@dataclass(frozen=True, slots=True)
class _RawGame:
    title: str
    description: str
    photo: list[PhotoSize]
    text: str | None = None
    text_entities: list[TextEntity] | None = None
    animation: Animation | None = None


@dataclass(frozen=True, slots=True)
class Game:
    """
    Game created via BotFather; its short name acts as the identifier.

    On the wire the game text and its entities are two parallel fields;
    here they are combined into a single `Text`.
    """

    title: str
    description: str
    photo: list[PhotoSize]
    text: Text | None = None
    animation: Animation | None = None

    @classmethod
    def from_json(cls, data: Any) -> Game:
        raw = decode_record(_RawGame, data)
        text = Text.from_raw(raw.text, raw.text_entities) if raw.text is not None else None
        return cls(
            title=raw.title,
            description=raw.description,
            photo=raw.photo,
            text=text,
            animation=raw.animation,
        )

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "photo": to_json_value(self.photo),
        }
        if self.text is not None:
            out["text"] = self.text.data
            if self.text.entities:
                out["text_entities"] = to_json_value(self.text.entities)
        if self.animation is not None:
            out["animation"] = to_json_value(self.animation)
        return out


@dataclass(frozen=True, slots=True)
class GameHighScore:
    position: int
    user: User
    score: int
