from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any, ClassVar, TypeVar

from botcraft.codec import to_json_value
from botcraft.types.parse_mode import ParseMode
from botcraft.types.reply_markup import InlineKeyboardMarkup
from botcraft.types.text import TextEntity, check_text_entities

_B = TypeVar("_B", bound="Builder")


class Builder:
    """
    Base for fluent builders.

    Setters never mutate: each one returns a new builder carrying the change,
    so a partially configured builder can be reused and branched.
    """

    __slots__ = ()

    def _with(self: _B, name: str, value: Any, *, clear: tuple[str, ...] = ()) -> _B:
        raise NotImplementedError

    def _nested(self, value: Any) -> Any:
        """Storage form of a structured value (lists, markup)."""
        return value


class PayloadBuilder(Builder):
    """Builder whose parameters serialize into a single JSON object."""

    __slots__ = ("_payload",)

    JSON_TYPE: ClassVar[str | None] = None

    def __init__(self, **params: Any) -> None:
        self._payload: dict[str, Any] = {k: v for k, v in params.items() if v is not None}

    def _with(self: _B, name: str, value: Any, *, clear: tuple[str, ...] = ()) -> _B:
        out = copy.copy(self)
        payload = dict(self._payload)  # type: ignore[attr-defined]
        payload[name] = value
        for key in clear:
            payload.pop(key, None)
        out._payload = payload  # type: ignore[attr-defined]
        return out

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.JSON_TYPE is not None:
            out["type"] = self.JSON_TYPE
        for key, value in self._payload.items():
            out[key] = to_json_value(value)
        return out

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._payload == other._payload  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._payload!r})"


class InlineMarkupParams(Builder):
    __slots__ = ()

    def reply_markup(self: _B, markup: InlineKeyboardMarkup) -> _B:
        """Inline keyboard attached to the result; raises ReplyMarkupError when invalid."""
        markup.validate()
        return self._with("reply_markup", self._nested(markup))


class CaptionParams(Builder):
    """caption / caption_entities / parse_mode, the last two mutually exclusive."""

    __slots__ = ()

    def caption(self: _B, value: str) -> _B:
        return self._with("caption", str(value))

    def caption_entities(self: _B, entities: Iterable[TextEntity]) -> _B:
        """Explicit caption formatting; drops any parse mode set before."""
        value = self._nested(check_text_entities(entities))
        return self._with("caption_entities", value, clear=("parse_mode",))

    def parse_mode(self: _B, value: ParseMode) -> _B:
        """Server-side caption formatting; drops any caption entities set before."""
        return self._with("parse_mode", ParseMode(value), clear=("caption_entities",))
