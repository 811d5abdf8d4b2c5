from __future__ import annotations

import json

import pytest

from botcraft.methods.send import SendDocument, SendMediaGroup, SendMessage, SendVoice
from botcraft.request import InputFile, RequestMethod
from botcraft.types.input_media import InputMedia, InputMediaDocument, InputMediaPhoto, MediaGroup
from botcraft.types.message import Message
from botcraft.types.parse_mode import ParseMode
from botcraft.types.reply_markup import (
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    ReplyMarkupError,
)
from botcraft.types.text import TextEntity, TextEntityError


def test_send_message__minimal() -> None:
    request = SendMessage(1, "text").into_request()
    assert request.http_method is RequestMethod.POST
    assert request.build_url("base-url", "token") == "base-url/bottoken/sendMessage"
    assert request.body.json_data == '{"chat_id":1,"text":"text"}'


def test_send_message__full() -> None:
    request = (
        SendMessage("@channel", "text")
        .parse_mode(ParseMode.MARKDOWN)
        .disable_web_page_preview(True)
        .disable_notification(True)
        .reply_to_message_id(1)
        .allow_sending_without_reply(True)
        .reply_markup(ForceReply())
        .into_request()
    )
    assert request.body.json_data is not None
    assert json.loads(request.body.json_data) == {
        "chat_id": "@channel",
        "text": "text",
        "parse_mode": "Markdown",
        "disable_web_page_preview": True,
        "disable_notification": True,
        "reply_to_message_id": 1,
        "allow_sending_without_reply": True,
        "reply_markup": {"force_reply": True},
    }


def test_send_message__entities_and_parse_mode_exclusive() -> None:
    method = SendMessage(1, "text").parse_mode(ParseMode.MARKDOWN).entities([TextEntity.bold(0, 4)])
    assert method.into_request().body.json_data == (
        '{"chat_id":1,"text":"text","entities":[{"type":"bold","offset":0,"length":4}]}'
    )
    method = method.parse_mode(ParseMode.HTML)
    assert method.into_request().body.json_data == '{"chat_id":1,"text":"text","parse_mode":"HTML"}'


def test_send_message__invalid_markup_raises() -> None:
    markup = InlineKeyboardMarkup.from_rows([[InlineKeyboardButton.with_callback_data("b", "x" * 65)]])
    with pytest.raises(ReplyMarkupError):
        SendMessage(1, "text").reply_markup(markup)


def test_send_message__parse_response() -> None:
    msg = SendMessage(1, "text").parse_response(
        {
            "message_id": 1,
            "date": 0,
            "chat": {"id": 1, "type": "private", "first_name": "test"},
            "text": "text",
        }
    )
    assert isinstance(msg, Message)


def test_send_voice__minimal() -> None:
    request = SendVoice(1, InputFile.file_id("file-id")).into_request()
    assert request.http_method is RequestMethod.POST
    assert request.build_url("base-url", "token") == "base-url/bottoken/sendVoice"
    form = request.body.form
    assert form is not None
    assert list(form) == ["chat_id", "voice"]
    assert form["chat_id"].text == "1"
    assert form["voice"].file == InputFile.file_id("file-id")


def test_send_voice__full() -> None:
    request = (
        SendVoice(1, InputFile.file_id("file-id"))
        .caption("caption")
        .parse_mode(ParseMode.MARKDOWN)
        .duration(100)
        .disable_notification(True)
        .reply_to_message_id(1)
        .allow_sending_without_reply(True)
        .reply_markup(ForceReply())
        .into_request()
    )
    form = request.body.form
    assert form is not None
    assert form["chat_id"].text == "1"
    assert form["voice"].file is not None
    assert form["caption"].text == "caption"
    assert form["parse_mode"].text == "Markdown"
    assert form["duration"].text == "100"
    assert form["disable_notification"].text == "true"
    assert form["reply_to_message_id"].text == "1"
    assert form["allow_sending_without_reply"].text == "true"
    assert form["reply_markup"].text == '{"force_reply":true}'


def test_send_voice__caption_entities_replace_parse_mode() -> None:
    method = SendVoice(1, InputFile.file_id("file-id")).parse_mode(ParseMode.MARKDOWN)
    assert method.form["parse_mode"].text == "Markdown"
    method = method.caption_entities([TextEntity.bold(0, 10)])
    assert "parse_mode" not in method.form
    caption_entities = method.form["caption_entities"].text
    assert caption_entities is not None
    assert json.loads(caption_entities) == [{"type": "bold", "offset": 0, "length": 10}]
    method = method.parse_mode(ParseMode.HTML)
    assert "caption_entities" not in method.form


def test_send_voice__invalid_caption_entities_raise() -> None:
    with pytest.raises(TextEntityError):
        SendVoice(1, InputFile.file_id("file-id")).caption_entities([TextEntity.bold(-1, 1)])


def test_send_voice__setters_do_not_mutate() -> None:
    base = SendVoice(1, InputFile.file_id("file-id"))
    base.duration(5)
    assert "duration" not in base.form


def test_send_document__full() -> None:
    request = (
        SendDocument(1, InputFile.from_bytes("a.txt", b"data"))
        .thumb(InputFile.from_bytes("t.jpg", b"\xff"))
        .caption("caption")
        .disable_content_type_detection(True)
        .into_request()
    )
    assert request.build_url("base-url", "token") == "base-url/bottoken/sendDocument"
    form = request.body.form
    assert form is not None
    assert form["document"].file is not None
    assert form["thumb"].file is not None
    assert form["disable_content_type_detection"].text == "true"
    data, files = form.to_multipart()
    assert data == {"chat_id": "1", "caption": "caption", "disable_content_type_detection": "true"}
    assert files["document"] == ("a.txt", b"data", "text/plain")


def test_send_media_group__form() -> None:
    group = MediaGroup(
        [
            InputMedia(InputFile.from_bytes("a.pdf", b"a"), InputMediaDocument()),
            InputMedia(InputFile.file_id("doc-id"), InputMediaDocument().caption("b")),
        ]
    )
    request = (
        SendMediaGroup(1, group)
        .disable_notification(True)
        .reply_to_message_id(1)
        .allow_sending_without_reply(True)
        .into_request()
    )
    assert request.build_url("base-url", "token") == "base-url/bottoken/sendMediaGroup"
    form = request.body.form
    assert form is not None
    assert form["chat_id"].text == "1"
    assert form["botcraft_im_file_0"].file is not None
    media = form["media"].text
    assert media is not None
    assert json.loads(media) == [
        {"type": "document", "media": "attach://botcraft_im_file_0"},
        {"type": "document", "media": "doc-id", "caption": "b"},
    ]
    assert form["disable_notification"].text == "true"
    assert form["reply_to_message_id"].text == "1"
    assert form["allow_sending_without_reply"].text == "true"


def test_send_media_group__parse_response() -> None:
    group = MediaGroup(
        [
            InputMedia(InputFile.file_id("a"), InputMediaPhoto()),
            InputMedia(InputFile.file_id("b"), InputMediaPhoto()),
        ]
    )
    chat = {"id": 1, "type": "private", "first_name": "test"}
    photo = [{"file_id": "a", "file_unique_id": "ua", "width": 1, "height": 1}]
    messages = SendMediaGroup(1, group).parse_response(
        [
            {"message_id": 1, "date": 0, "chat": chat, "photo": photo, "media_group_id": "g"},
            {"message_id": 2, "date": 0, "chat": chat, "photo": photo, "media_group_id": "g"},
        ]
    )
    assert [m.message_id for m in messages] == [1, 2]
