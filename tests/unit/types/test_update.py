from __future__ import annotations

from typing import Any

from botcraft.codec import from_json_value, to_json_value
from botcraft.methods.updates import GetUpdates
from botcraft.types.update import AllowedUpdate, Update
from botcraft.types.webhook import WebhookInfo

USER = {"id": 1, "is_bot": False, "first_name": "test"}


def _message(**extra: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "message_id": 1,
        "date": 0,
        "chat": {"id": 1, "type": "private", "first_name": "test"},
        "from": USER,
        "text": "hi",
    }
    data.update(extra)
    return data


def test_update__message__kind_and_message() -> None:
    update = from_json_value(Update, {"update_id": 1, "message": _message()})
    assert update.kind is AllowedUpdate.MESSAGE
    msg = update.get_message()
    assert msg is not None and msg.message_id == 1


def test_update__edited_channel_post__kind() -> None:
    update = from_json_value(Update, {"update_id": 2, "edited_channel_post": _message(edit_date=5)})
    assert update.kind is AllowedUpdate.EDITED_CHANNEL_POST
    assert update.get_message() is update.edited_channel_post


def test_update__callback_query__message_from_query() -> None:
    raw = {
        "update_id": 3,
        "callback_query": {
            "id": "query-id",
            "from": USER,
            "chat_instance": "instance",
            "message": _message(),
            "data": "data",
        },
    }
    update = from_json_value(Update, raw)
    assert update.kind is AllowedUpdate.CALLBACK_QUERY
    assert update.callback_query is not None
    assert update.callback_query.from_user.id == 1
    assert update.callback_query.data == "data"
    assert update.get_message() is update.callback_query.message
    assert to_json_value(update) == raw


def test_update__inline_query__kind() -> None:
    raw = {
        "update_id": 4,
        "inline_query": {"id": "q", "from": USER, "query": "text", "offset": ""},
    }
    update = from_json_value(Update, raw)
    assert update.kind is AllowedUpdate.INLINE_QUERY
    assert update.get_message() is None


def test_update__unmodelled_kind__kept_as_extra() -> None:
    raw = {"update_id": 5, "poll": {"id": "poll-id", "question": "q"}}
    update = from_json_value(Update, raw)
    assert update.kind is None
    assert update.extra == {"poll": {"id": "poll-id", "question": "q"}}
    assert to_json_value(update) == raw


def test_update__decode_list() -> None:
    updates = from_json_value(list[Update], [{"update_id": 1}, {"update_id": 2, "message": _message()}])
    assert [u.update_id for u in updates] == [1, 2]
    assert updates[0].kind is None


def test_webhook_info__decode_and_sorted_encode() -> None:
    raw = {
        "url": "https://example.com/hook",
        "has_custom_certificate": False,
        "pending_update_count": 3,
        "ip_address": "127.0.0.1",
        "last_error_date": 10,
        "last_error_message": "error",
        "max_connections": 40,
        "allowed_updates": ["message", "callback_query"],
    }
    info = from_json_value(WebhookInfo, raw)
    assert info.is_set
    assert info.allowed_updates == {AllowedUpdate.MESSAGE, AllowedUpdate.CALLBACK_QUERY}
    out = to_json_value(info)
    assert out["allowed_updates"] == ["callback_query", "message"]
    assert from_json_value(WebhookInfo, out) == info


def test_webhook_info__not_set() -> None:
    info = from_json_value(
        WebhookInfo, {"url": "", "has_custom_certificate": False, "pending_update_count": 0}
    )
    assert not info.is_set
    assert info.allowed_updates is None
    assert "allowed_updates" not in to_json_value(info)


def test_update__unknown_entity_kind__keeps_batch() -> None:
    raw = [
        {
            "update_id": 1,
            "message": _message(entities=[{"type": "spoiler", "offset": 0, "length": 2}]),
        },
        {"update_id": 2, "message": _message()},
    ]
    updates = GetUpdates().parse_response(raw)
    assert [u.update_id for u in updates] == [1, 2]
    msg = updates[0].get_message()
    assert msg is not None
    assert to_json_value(msg) == raw[0]["message"]
