from __future__ import annotations

from .message_content import (
    InputMessageContent,
    InputMessageContentContact,
    InputMessageContentLocation,
    InputMessageContentText,
    InputMessageContentVenue,
)
from .query import ChosenInlineResult, InlineQuery, InlineQueryChatType
from .query_result import (
    InlineQueryResult,
    InlineQueryResultArticle,
    InlineQueryResultContact,
    InlineQueryResultDocument,
    InlineQueryResultGame,
    InlineQueryResultGif,
    InlineQueryResultLocation,
    InlineQueryResultPhoto,
    InlineQueryResultVenue,
    InlineQueryResultVoice,
)

__all__ = [
    "ChosenInlineResult",
    "InlineQuery",
    "InlineQueryChatType",
    "InlineQueryResult",
    "InlineQueryResultArticle",
    "InlineQueryResultContact",
    "InlineQueryResultDocument",
    "InlineQueryResultGame",
    "InlineQueryResultGif",
    "InlineQueryResultLocation",
    "InlineQueryResultPhoto",
    "InlineQueryResultVenue",
    "InlineQueryResultVoice",
    "InputMessageContent",
    "InputMessageContentContact",
    "InputMessageContentLocation",
    "InputMessageContentText",
    "InputMessageContentVenue",
]
