from __future__ import annotations

import enum
from dataclasses import dataclass


class ChatType(str, enum.Enum):
    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"


@dataclass(frozen=True, slots=True)
class Chat:
    """
    Chat as seen in incoming payloads.

    `title` is set for groups, supergroups and channels;
    `first_name`/`last_name` only for private chats.
    """

    id: int
    type: ChatType
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    description: str | None = None
    invite_link: str | None = None
    linked_chat_id: int | None = None

    @property
    def is_private(self) -> bool:
        return self.type is ChatType.PRIVATE

    @property
    def is_group(self) -> bool:
        return self.type in (ChatType.GROUP, ChatType.SUPERGROUP)

    @property
    def is_channel(self) -> bool:
        return self.type is ChatType.CHANNEL
