from __future__ import annotations

from .base import EmptyMethod, FormMethod, JsonMethod, Method
from .commands import DeleteMyCommands, GetMyCommands, SetMyCommands
from .edit import EditMessageMedia
from .files import GetFile
from .games import GetGameHighScores, SendGame, SetGameScore
from .inline import AnswerInlineQuery
from .me import Close, GetMe, LogOut
from .send import SendDocument, SendMediaGroup, SendMessage, SendVoice
from .updates import DeleteWebhook, GetUpdates, GetWebhookInfo, SetWebhook

__all__ = [
    "AnswerInlineQuery",
    "Close",
    "DeleteMyCommands",
    "DeleteWebhook",
    "EditMessageMedia",
    "EmptyMethod",
    "FormMethod",
    "GetFile",
    "GetGameHighScores",
    "GetMe",
    "GetMyCommands",
    "GetUpdates",
    "GetWebhookInfo",
    "JsonMethod",
    "LogOut",
    "Method",
    "SendDocument",
    "SendGame",
    "SendMediaGroup",
    "SendMessage",
    "SendVoice",
    "SetGameScore",
    "SetMyCommands",
    "SetWebhook",
]
