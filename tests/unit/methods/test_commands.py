from __future__ import annotations

import json

from botcraft.methods.commands import DeleteMyCommands, GetMyCommands, SetMyCommands
from botcraft.request import RequestMethod
from botcraft.types.bot_command import BotCommand, BotCommandScope


def test_set_my_commands__minimal() -> None:
    request = SetMyCommands([BotCommand("name", "description")]).into_request()
    assert request.http_method is RequestMethod.POST
    assert request.build_url("base-url", "token") == "base-url/bottoken/setMyCommands"
    assert request.body.json_data == '{"commands":[{"command":"name","description":"description"}]}'


def test_set_my_commands__scope_and_language() -> None:
    request = (
        SetMyCommands([BotCommand("name", "description")])
        .scope(BotCommandScope.chat_member(1, 2))
        .language_code("ru")
        .into_request()
    )
    assert request.body.json_data is not None
    assert json.loads(request.body.json_data) == {
        "commands": [{"command": "name", "description": "description"}],
        "scope": {"type": "chat_member", "chat_id": 1, "user_id": 2},
        "language_code": "ru",
    }


def test_get_my_commands__request_and_response() -> None:
    method = GetMyCommands()
    request = method.into_request()
    assert request.http_method is RequestMethod.POST
    assert request.build_url("base-url", "token") == "base-url/bottoken/getMyCommands"
    assert request.body.json_data == "{}"

    request = method.scope(BotCommandScope.default()).language_code("en").into_request()
    assert request.body.json_data == '{"scope":{"type":"default"},"language_code":"en"}'

    commands = method.parse_response([{"command": "start", "description": "Start the bot"}])
    assert commands == [BotCommand("start", "Start the bot")]


def test_delete_my_commands__request() -> None:
    request = DeleteMyCommands().into_request()
    assert request.http_method is RequestMethod.POST
    assert request.build_url("base-url", "token") == "base-url/bottoken/deleteMyCommands"
    assert request.body.json_data == "{}"

    request = DeleteMyCommands().scope(BotCommandScope.all_group_chats()).into_request()
    assert request.body.json_data == '{"scope":{"type":"all_group_chats"}}'
