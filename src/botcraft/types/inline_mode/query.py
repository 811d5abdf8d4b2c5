from __future__ import annotations

import enum
from dataclasses import dataclass, field

from botcraft.types.location import Location
from botcraft.types.user import User


class InlineQueryChatType(str, enum.Enum):
    """Chat an inline query was sent from; `sender` is the private chat with the querying user."""

    SENDER = "sender"
    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"


@dataclass(frozen=True, slots=True)
class InlineQuery:
    id: str
    from_user: User = field(metadata={"json": "from"})
    query: str
    offset: str
    chat_type: InlineQueryChatType | None = None
    location: Location | None = None


@dataclass(frozen=True, slots=True)
class ChosenInlineResult:
    """Inline result picked by a user; `inline_message_id` is set only with an inline keyboard attached."""

    result_id: str
    from_user: User = field(metadata={"json": "from"})
    query: str
    location: Location | None = None
    inline_message_id: str | None = None
