from __future__ import annotations

from dataclasses import dataclass, field

from botcraft.types.message import Message
from botcraft.types.user import User


@dataclass(frozen=True, slots=True)
class CallbackQuery:
    """
    Incoming press of an inline keyboard button.

    Exactly one of `message` (button on a message sent by the bot) or
    `inline_message_id` (button on an inline message) is set. `data` is set
    for callback buttons, `game_short_name` for game buttons.
    """

    id: str
    from_user: User = field(metadata={"json": "from"})
    chat_instance: str
    message: Message | None = None
    inline_message_id: str | None = None
    data: str | None = None
    game_short_name: str | None = None
