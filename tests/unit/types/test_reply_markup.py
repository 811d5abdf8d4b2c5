from __future__ import annotations

import json

import pytest

from botcraft.codec import from_json_value
from botcraft.types.reply_markup import (
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    LoginUrl,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkupError,
)


def test_force_reply__serialize__compact() -> None:
    assert ForceReply().serialize() == '{"force_reply":true}'
    assert json.loads(ForceReply(input_field_placeholder="type", selective=True).serialize()) == {
        "force_reply": True,
        "input_field_placeholder": "type",
        "selective": True,
    }


def test_force_reply__placeholder_too_long() -> None:
    with pytest.raises(ReplyMarkupError):
        ForceReply(input_field_placeholder="x" * 65).serialize()


def test_reply_keyboard_remove__serialize() -> None:
    assert ReplyKeyboardRemove().serialize() == '{"remove_keyboard":true}'


def test_inline_keyboard__serialize__all_actions() -> None:
    markup = InlineKeyboardMarkup.from_rows(
        [
            [InlineKeyboardButton.with_callback_game("play")],
            [
                InlineKeyboardButton.with_url("url", "https://example.com"),
                InlineKeyboardButton.with_callback_data("cb", "data"),
            ],
        ]
    ).add_row(
        [
            InlineKeyboardButton.with_switch_inline_query("siq", "q"),
            InlineKeyboardButton.with_switch_inline_query_current_chat("siqcc"),
            InlineKeyboardButton.with_pay("pay"),
        ]
    )
    assert json.loads(markup.serialize()) == {
        "inline_keyboard": [
            [{"text": "play", "callback_game": {}}],
            [
                {"text": "url", "url": "https://example.com"},
                {"text": "cb", "callback_data": "data"},
            ],
            [
                {"text": "siq", "switch_inline_query": "q"},
                {"text": "siqcc", "switch_inline_query_current_chat": ""},
                {"text": "pay", "pay": True},
            ],
        ]
    }


@pytest.mark.parametrize("data", ["", "x" * 65, "я" * 33])
def test_inline_keyboard__callback_data_out_of_range(data: str) -> None:
    markup = InlineKeyboardMarkup.from_rows([[InlineKeyboardButton.with_callback_data("b", data)]])
    with pytest.raises(ReplyMarkupError):
        markup.serialize()


def test_inline_keyboard__button_without_action() -> None:
    with pytest.raises(ReplyMarkupError):
        InlineKeyboardMarkup([[InlineKeyboardButton("no action")]]).serialize()


def test_inline_keyboard__add_row__does_not_mutate() -> None:
    base = InlineKeyboardMarkup()
    extended = base.add_row([InlineKeyboardButton.with_pay("pay")])
    assert base.inline_keyboard == []
    assert len(extended.inline_keyboard) == 1


def test_inline_keyboard__decode() -> None:
    markup = from_json_value(
        InlineKeyboardMarkup,
        {"inline_keyboard": [[{"text": "play", "callback_game": {}}]]},
    )
    assert markup == InlineKeyboardMarkup.from_rows([[InlineKeyboardButton.with_callback_game("play")]])


def test_reply_keyboard__serialize() -> None:
    markup = ReplyKeyboardMarkup.from_rows(
        [["a", KeyboardButton("contact", request_contact=True)]],
    )
    markup = ReplyKeyboardMarkup(
        markup.keyboard,
        resize_keyboard=True,
        one_time_keyboard=True,
        input_field_placeholder="pick",
    ).add_row([KeyboardButton("where", request_location=True)])
    assert json.loads(markup.serialize()) == {
        "keyboard": [
            [{"text": "a"}, {"text": "contact", "request_contact": True}],
            [{"text": "where", "request_location": True}],
        ],
        "resize_keyboard": True,
        "one_time_keyboard": True,
        "input_field_placeholder": "pick",
    }


def test_reply_keyboard__conflicting_requests() -> None:
    markup = ReplyKeyboardMarkup.from_rows(
        [[KeyboardButton("both", request_contact=True, request_location=True)]]
    )
    with pytest.raises(ReplyMarkupError):
        markup.serialize()


def test_inline_keyboard__login_url__serialize() -> None:
    login = LoginUrl("https://example.com/auth", forward_text="sign in", bot_username="bot")
    markup = InlineKeyboardMarkup.from_rows([[InlineKeyboardButton.with_login_url("login", login)]])
    assert json.loads(markup.serialize()) == {
        "inline_keyboard": [
            [
                {
                    "text": "login",
                    "login_url": {
                        "url": "https://example.com/auth",
                        "forward_text": "sign in",
                        "bot_username": "bot",
                    },
                }
            ]
        ]
    }


def test_inline_keyboard__to_json__does_not_validate() -> None:
    markup = InlineKeyboardMarkup([[InlineKeyboardButton("no action")]])
    assert markup.to_json() == {"inline_keyboard": [[{"text": "no action"}]]}
    with pytest.raises(ReplyMarkupError):
        markup.serialize()
