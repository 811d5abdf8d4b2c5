from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from botcraft.codec import decode_tagged, encode_record
from botcraft.types.primitive import ChatId

MIN_NAME_LEN = 1
MAX_NAME_LEN = 32
MIN_DESCRIPTION_LEN = 3
MAX_DESCRIPTION_LEN = 256


class BotCommandError(ValueError):
    """Command name or description of invalid length."""

    def __init__(self, kind: Literal["name", "description"], length: int) -> None:
        if kind == "name":
            lo, hi = MIN_NAME_LEN, MAX_NAME_LEN
        else:
            lo, hi = MIN_DESCRIPTION_LEN, MAX_DESCRIPTION_LEN
        super().__init__(f"command {kind} can have a length of {lo} up to {hi} characters, got {length}")
        self.kind = kind
        self.length = length


@dataclass(frozen=True, slots=True)
class BotCommand:
    """
    A command shown in the bot's command menu.

    The name may contain lowercase English letters, digits and underscores;
    only the lengths are checked locally.
    """

    command: str
    description: str

    def __post_init__(self) -> None:
        if not MIN_NAME_LEN <= len(self.command) <= MAX_NAME_LEN:
            raise BotCommandError("name", len(self.command))
        if not MIN_DESCRIPTION_LEN <= len(self.description) <= MAX_DESCRIPTION_LEN:
            raise BotCommandError("description", len(self.description))

    @property
    def name(self) -> str:
        return self.command


class BotCommandScope:
    """Scope to which a command list applies, tagged on `type`."""

    __slots__ = ()

    JSON_TYPE: ClassVar[str]

    @staticmethod
    def default() -> BotCommandScopeDefault:
        return BotCommandScopeDefault()

    @staticmethod
    def all_private_chats() -> BotCommandScopeAllPrivateChats:
        return BotCommandScopeAllPrivateChats()

    @staticmethod
    def all_group_chats() -> BotCommandScopeAllGroupChats:
        return BotCommandScopeAllGroupChats()

    @staticmethod
    def all_chat_administrators() -> BotCommandScopeAllChatAdministrators:
        return BotCommandScopeAllChatAdministrators()

    @staticmethod
    def chat(chat_id: ChatId) -> BotCommandScopeChat:
        return BotCommandScopeChat(chat_id)

    @staticmethod
    def chat_administrators(chat_id: ChatId) -> BotCommandScopeChatAdministrators:
        return BotCommandScopeChatAdministrators(chat_id)

    @staticmethod
    def chat_member(chat_id: ChatId, user_id: int) -> BotCommandScopeChatMember:
        return BotCommandScopeChatMember(chat_id, user_id)

    def to_json(self) -> dict[str, Any]:
        return encode_record(self)

    @classmethod
    def from_json(cls, data: Any) -> BotCommandScope:
        return decode_tagged(_VARIANTS, data, owner="BotCommandScope")


@dataclass(frozen=True, slots=True)
class BotCommandScopeDefault(BotCommandScope):
    JSON_TYPE: ClassVar[str] = "default"


@dataclass(frozen=True, slots=True)
class BotCommandScopeAllPrivateChats(BotCommandScope):
    JSON_TYPE: ClassVar[str] = "all_private_chats"


@dataclass(frozen=True, slots=True)
class BotCommandScopeAllGroupChats(BotCommandScope):
    JSON_TYPE: ClassVar[str] = "all_group_chats"


@dataclass(frozen=True, slots=True)
class BotCommandScopeAllChatAdministrators(BotCommandScope):
    JSON_TYPE: ClassVar[str] = "all_chat_administrators"


@dataclass(frozen=True, slots=True)
class BotCommandScopeChat(BotCommandScope):
    JSON_TYPE: ClassVar[str] = "chat"

    chat_id: ChatId


@dataclass(frozen=True, slots=True)
class BotCommandScopeChatAdministrators(BotCommandScope):
    JSON_TYPE: ClassVar[str] = "chat_administrators"

    chat_id: ChatId


@dataclass(frozen=True, slots=True)
class BotCommandScopeChatMember(BotCommandScope):
    JSON_TYPE: ClassVar[str] = "chat_member"

    chat_id: ChatId
    user_id: int


_VARIANTS: dict[str, type[BotCommandScope]] = {
    v.JSON_TYPE: v
    for v in (
        BotCommandScopeDefault,
        BotCommandScopeAllPrivateChats,
        BotCommandScopeAllGroupChats,
        BotCommandScopeAllChatAdministrators,
        BotCommandScopeChat,
        BotCommandScopeChatAdministrators,
        BotCommandScopeChatMember,
    )
}
