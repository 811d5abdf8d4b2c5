from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any, TypeAlias, Union

from botcraft.codec import CodecError, dumps, encode_record
from botcraft.types.game import CallbackGame

MIN_CALLBACK_DATA_LEN = 1
MAX_CALLBACK_DATA_LEN = 64
MIN_PLACEHOLDER_LEN = 1
MAX_PLACEHOLDER_LEN = 64


class ReplyMarkupError(Exception):
    pass


class ReplyMarkupBase:
    """Shared serialization for the reply markup variants."""

    __slots__ = ()

    def validate(self) -> None:
        pass

    def to_json(self) -> dict[str, Any]:
        return encode_record(self)

    def serialize(self) -> str:
        """JSON text for form fields; raises ReplyMarkupError on invalid markup."""
        self.validate()
        data = self.to_json()
        try:
            return dumps(data)
        except CodecError as e:
            raise ReplyMarkupError(f"Failed to serialize {type(self).__name__}: {e}") from e


def _check_placeholder(value: str | None) -> None:
    if value is None:
        return
    if not MIN_PLACEHOLDER_LEN <= len(value) <= MAX_PLACEHOLDER_LEN:
        raise ReplyMarkupError(
            f"input field placeholder can have a length of {MIN_PLACEHOLDER_LEN} "
            f"up to {MAX_PLACEHOLDER_LEN} characters, got {len(value)}"
        )


# ========================== Inline Keyboard ==========================


@dataclass(frozen=True, slots=True)
class LoginUrl:
    """HTTPS URL that authorizes the user on a website via Telegram Login."""

    url: str
    forward_text: str | None = None
    bot_username: str | None = None
    request_write_access: bool | None = None


@dataclass(frozen=True, slots=True)
class InlineKeyboardButton:
    """Button attached to a message; exactly one action field must be set."""

    text: str
    url: str | None = None
    login_url: LoginUrl | None = None
    callback_data: str | None = None
    switch_inline_query: str | None = None
    switch_inline_query_current_chat: str | None = None
    callback_game: CallbackGame | None = None
    pay: bool | None = None

    @classmethod
    def with_url(cls, text: str, url: str) -> InlineKeyboardButton:
        return cls(text, url=url)

    @classmethod
    def with_login_url(cls, text: str, login_url: LoginUrl) -> InlineKeyboardButton:
        return cls(text, login_url=login_url)

    @classmethod
    def with_callback_data(cls, text: str, data: str) -> InlineKeyboardButton:
        return cls(text, callback_data=data)

    @classmethod
    def with_switch_inline_query(cls, text: str, query: str = "") -> InlineKeyboardButton:
        return cls(text, switch_inline_query=query)

    @classmethod
    def with_switch_inline_query_current_chat(
        cls, text: str, query: str = ""
    ) -> InlineKeyboardButton:
        return cls(text, switch_inline_query_current_chat=query)

    @classmethod
    def with_callback_game(cls, text: str) -> InlineKeyboardButton:
        """Launches the game; must be the first button of the first row."""
        return cls(text, callback_game=CallbackGame())

    @classmethod
    def with_pay(cls, text: str) -> InlineKeyboardButton:
        return cls(text, pay=True)

    def validate(self) -> None:
        actions = [
            self.url,
            self.login_url,
            self.callback_data,
            self.switch_inline_query,
            self.switch_inline_query_current_chat,
            self.callback_game,
            self.pay,
        ]
        count = sum(1 for a in actions if a is not None)
        if count != 1:
            raise ReplyMarkupError(
                f"inline button {self.text!r} must have exactly one action, got {count}"
            )
        if self.callback_data is not None:
            size = len(self.callback_data.encode("utf-8"))
            if not MIN_CALLBACK_DATA_LEN <= size <= MAX_CALLBACK_DATA_LEN:
                raise ReplyMarkupError(
                    f"callback data can have a length of {MIN_CALLBACK_DATA_LEN} "
                    f"up to {MAX_CALLBACK_DATA_LEN} bytes, got {size}"
                )


@dataclass(frozen=True, slots=True)
class InlineKeyboardMarkup(ReplyMarkupBase):
    inline_keyboard: list[list[InlineKeyboardButton]] = field(default_factory=list)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[InlineKeyboardButton]]) -> InlineKeyboardMarkup:
        return cls([list(row) for row in rows])

    def add_row(self, row: Iterable[InlineKeyboardButton]) -> InlineKeyboardMarkup:
        return replace(self, inline_keyboard=[*self.inline_keyboard, list(row)])

    def validate(self) -> None:
        for row in self.inline_keyboard:
            for button in row:
                button.validate()


# ========================== Reply Keyboard ==========================


@dataclass(frozen=True, slots=True)
class KeyboardButton:
    """Reply keyboard button; at most one of the request flags may be set."""

    text: str
    request_contact: bool | None = None
    request_location: bool | None = None


@dataclass(frozen=True, slots=True)
class ReplyKeyboardMarkup(ReplyMarkupBase):
    keyboard: list[list[KeyboardButton]] = field(default_factory=list)
    resize_keyboard: bool | None = None
    one_time_keyboard: bool | None = None
    input_field_placeholder: str | None = None
    selective: bool | None = None

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[KeyboardButton | str]]) -> ReplyKeyboardMarkup:
        return cls(
            [[b if isinstance(b, KeyboardButton) else KeyboardButton(b) for b in row] for row in rows]
        )

    def add_row(self, row: Iterable[KeyboardButton]) -> ReplyKeyboardMarkup:
        return replace(self, keyboard=[*self.keyboard, list(row)])

    def validate(self) -> None:
        _check_placeholder(self.input_field_placeholder)
        for row in self.keyboard:
            for button in row:
                if button.request_contact and button.request_location:
                    raise ReplyMarkupError(
                        f"keyboard button {button.text!r} cannot request both contact and location"
                    )


@dataclass(frozen=True, slots=True)
class ReplyKeyboardRemove(ReplyMarkupBase):
    remove_keyboard: bool = True
    selective: bool | None = None


@dataclass(frozen=True, slots=True)
class ForceReply(ReplyMarkupBase):
    """
    Shows a reply interface to the user, as if they had tapped Reply on the bot's message.
    """

    force_reply: bool = True
    input_field_placeholder: str | None = None
    selective: bool | None = None

    def validate(self) -> None:
        _check_placeholder(self.input_field_placeholder)


ReplyMarkup: TypeAlias = Union[
    InlineKeyboardMarkup,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ForceReply,
]
