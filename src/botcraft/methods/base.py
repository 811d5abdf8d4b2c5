from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from botcraft.codec import CodecError, dumps, from_json_value
from botcraft.request import Form, Request
from botcraft.types.builder import Builder, PayloadBuilder
from botcraft.types.reply_markup import ReplyMarkup, ReplyMarkupError

R = TypeVar("R")
_B = TypeVar("_B", bound=Builder)


class Method(Generic[R]):
    """
    A Bot API call.

    `NAME` is the remote method name and `RESPONSE` the type the `result`
    field of the response envelope decodes into.
    """

    __slots__ = ()

    NAME: ClassVar[str]
    RESPONSE: ClassVar[Any]

    def into_request(self) -> Request:
        raise NotImplementedError

    def parse_response(self, result: Any) -> R:
        return from_json_value(self.RESPONSE, result)


class EmptyMethod(Method[R]):
    """Call without parameters, sent as GET with an empty body."""

    __slots__ = ()

    def into_request(self) -> Request:
        return Request.empty(self.NAME)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class JsonMethod(PayloadBuilder, Method[R]):
    __slots__ = ()

    def into_request(self) -> Request:
        return Request.json(self.NAME, self.to_json())


class FormMethod(Builder, Method[R]):
    """
    Call sent as a multipart form.

    Nested values (markup, entity lists, media descriptions) are stored as
    JSON text fields.
    """

    __slots__ = ("_form",)

    def __init__(self, **fields: Any) -> None:
        self._form = Form()
        for name, value in fields.items():
            if value is not None:
                self._form.insert_field(name, value)

    @property
    def form(self) -> Form:
        return self._form

    def _with(self: _B, name: str, value: Any, *, clear: tuple[str, ...] = ()) -> _B:
        out = object.__new__(type(self))
        form = self._form.copy()  # type: ignore[attr-defined]
        form.insert_field(name, value)
        for key in clear:
            form.remove_field(key)
        out._form = form  # type: ignore[attr-defined]
        return out

    def _nested(self, value: Any) -> str:
        return dumps(value)

    def into_request(self) -> Request:
        return Request.form(self.NAME, self._form.copy())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._form == other._form  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._form!r})"


class SendOptions(Builder):
    """Delivery options shared by the send* methods."""

    __slots__ = ()

    def disable_notification(self: _B, value: bool) -> _B:
        """Deliver silently; users receive a notification with no sound."""
        return self._with("disable_notification", bool(value))

    def reply_to_message_id(self: _B, value: int) -> _B:
        return self._with("reply_to_message_id", int(value))

    def allow_sending_without_reply(self: _B, value: bool) -> _B:
        """Send even when the replied-to message is not found."""
        return self._with("allow_sending_without_reply", bool(value))


class ReplyParams(SendOptions):
    __slots__ = ()

    def reply_markup(self: _B, markup: ReplyMarkup) -> _B:
        """Raises ReplyMarkupError when the markup is invalid or cannot be serialized."""
        markup.validate()
        try:
            value = self._nested(markup)
        except CodecError as e:
            raise ReplyMarkupError(f"Failed to serialize {type(markup).__name__}: {e}") from e
        return self._with("reply_markup", value)
