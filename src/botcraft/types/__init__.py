from __future__ import annotations

from .bot_command import (
    BotCommand,
    BotCommandError,
    BotCommandScope,
    BotCommandScopeAllChatAdministrators,
    BotCommandScopeAllGroupChats,
    BotCommandScopeAllPrivateChats,
    BotCommandScopeChat,
    BotCommandScopeChatAdministrators,
    BotCommandScopeChatMember,
    BotCommandScopeDefault,
)
from .callback_query import CallbackQuery
from .chat import Chat, ChatType
from .game import CallbackGame, Game, GameHighScore
from .inline_mode import (
    ChosenInlineResult,
    InlineQuery,
    InlineQueryChatType,
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
    InputMessageContent,
    InputMessageContentContact,
    InputMessageContentLocation,
    InputMessageContentText,
    InputMessageContentVenue,
)
from .input_media import InputMedia, InputMediaDocument, InputMediaPhoto, MediaGroup, MediaGroupError
from .location import Contact, Location, Venue
from .media import Animation, Audio, Document, File, PhotoSize, Video, Voice
from .message import (
    EditMessageResult,
    Message,
    MessageData,
    MessageDataAnimation,
    MessageDataAudio,
    MessageDataContact,
    MessageDataDocument,
    MessageDataGame,
    MessageDataLocation,
    MessageDataPhoto,
    MessageDataText,
    MessageDataUnknown,
    MessageDataVenue,
    MessageDataVideo,
    MessageDataVoice,
)
from .parse_mode import ParseMode
from .primitive import ChatId
from .reply_markup import (
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    LoginUrl,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkup,
    ReplyMarkupError,
)
from .text import Text, TextEntity, TextEntityError, TextEntityKind, serialize_text_entities
from .update import AllowedUpdate, Update
from .user import User
from .webhook import WebhookInfo

__all__ = [
    "AllowedUpdate",
    "Animation",
    "Audio",
    "BotCommand",
    "BotCommandError",
    "BotCommandScope",
    "BotCommandScopeAllChatAdministrators",
    "BotCommandScopeAllGroupChats",
    "BotCommandScopeAllPrivateChats",
    "BotCommandScopeChat",
    "BotCommandScopeChatAdministrators",
    "BotCommandScopeChatMember",
    "BotCommandScopeDefault",
    "CallbackGame",
    "CallbackQuery",
    "Chat",
    "ChatId",
    "ChatType",
    "ChosenInlineResult",
    "Contact",
    "Document",
    "EditMessageResult",
    "File",
    "ForceReply",
    "Game",
    "GameHighScore",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
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
    "InputMedia",
    "InputMediaDocument",
    "InputMediaPhoto",
    "InputMessageContent",
    "InputMessageContentContact",
    "InputMessageContentLocation",
    "InputMessageContentText",
    "InputMessageContentVenue",
    "KeyboardButton",
    "Location",
    "LoginUrl",
    "MediaGroup",
    "MediaGroupError",
    "Message",
    "MessageData",
    "MessageDataAnimation",
    "MessageDataAudio",
    "MessageDataContact",
    "MessageDataDocument",
    "MessageDataGame",
    "MessageDataLocation",
    "MessageDataPhoto",
    "MessageDataText",
    "MessageDataUnknown",
    "MessageDataVenue",
    "MessageDataVideo",
    "MessageDataVoice",
    "ParseMode",
    "PhotoSize",
    "ReplyKeyboardMarkup",
    "ReplyKeyboardRemove",
    "ReplyMarkup",
    "ReplyMarkupError",
    "Text",
    "TextEntity",
    "TextEntityError",
    "TextEntityKind",
    "Update",
    "User",
    "Venue",
    "Video",
    "Voice",
    "WebhookInfo",
    "serialize_text_entities",
]
