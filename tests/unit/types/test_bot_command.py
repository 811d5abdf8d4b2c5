from __future__ import annotations

import pytest

from botcraft.codec import CodecError, from_json_value, to_json_value
from botcraft.types.bot_command import (
    BotCommand,
    BotCommandError,
    BotCommandScope,
    BotCommandScopeChatMember,
)


@pytest.mark.parametrize("size", [1, 32])
def test_bot_command__name__bounds_accepted(size: int) -> None:
    command = BotCommand("a" * size, "description")
    assert command.name == "a" * size


@pytest.mark.parametrize("size", [0, 33])
def test_bot_command__name__bounds_rejected(size: int) -> None:
    with pytest.raises(BotCommandError) as exc:
        BotCommand("a" * size, "description")
    assert exc.value.kind == "name"
    assert exc.value.length == size
    assert str(exc.value) == f"command name can have a length of 1 up to 32 characters, got {size}"


@pytest.mark.parametrize("size", [3, 256])
def test_bot_command__description__bounds_accepted(size: int) -> None:
    assert BotCommand("name", "d" * size).description == "d" * size


@pytest.mark.parametrize("size", [2, 257])
def test_bot_command__description__bounds_rejected(size: int) -> None:
    with pytest.raises(BotCommandError) as exc:
        BotCommand("name", "d" * size)
    assert exc.value.kind == "description"
    assert exc.value.length == size
    assert str(exc.value) == (
        f"command description can have a length of 3 up to 256 characters, got {size}"
    )


def test_bot_command__json__roundtrip() -> None:
    command = BotCommand("start", "Start the bot")
    data = to_json_value(command)
    assert data == {"command": "start", "description": "Start the bot"}
    assert from_json_value(BotCommand, data) == command


def test_bot_command__decode__invalid_length_fails() -> None:
    with pytest.raises(BotCommandError):
        from_json_value(BotCommand, {"command": "", "description": "Start the bot"})


@pytest.mark.parametrize(
    ("scope", "expected"),
    [
        (BotCommandScope.default(), {"type": "default"}),
        (BotCommandScope.all_private_chats(), {"type": "all_private_chats"}),
        (BotCommandScope.all_group_chats(), {"type": "all_group_chats"}),
        (BotCommandScope.all_chat_administrators(), {"type": "all_chat_administrators"}),
        (BotCommandScope.chat(1), {"type": "chat", "chat_id": 1}),
        (BotCommandScope.chat("@chat"), {"type": "chat", "chat_id": "@chat"}),
        (BotCommandScope.chat_administrators(1), {"type": "chat_administrators", "chat_id": 1}),
        (
            BotCommandScope.chat_member(1, 2),
            {"type": "chat_member", "chat_id": 1, "user_id": 2},
        ),
    ],
)
def test_bot_command_scope__json__roundtrip(scope: BotCommandScope, expected: dict[str, object]) -> None:
    assert to_json_value(scope) == expected
    assert from_json_value(BotCommandScope, expected) == scope


def test_bot_command_scope__decode__unknown_type_fails() -> None:
    with pytest.raises(CodecError):
        from_json_value(BotCommandScope, {"type": "everyone"})


def test_bot_command_scope__chat_member__fields() -> None:
    scope = BotCommandScope.chat_member("@chat", 5)
    assert isinstance(scope, BotCommandScopeChatMember)
    assert (scope.chat_id, scope.user_id) == ("@chat", 5)
