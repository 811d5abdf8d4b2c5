from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from botcraft.codec import decode_record, encode_record
from botcraft.types.callback_query import CallbackQuery
from botcraft.types.inline_mode.query import ChosenInlineResult, InlineQuery
from botcraft.types.message import Message


class AllowedUpdate(str, enum.Enum):
    """Update kinds a bot can subscribe to (getUpdates / setWebhook filter)."""

    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    POLL = "poll"
    POLL_ANSWER = "poll_answer"
    MY_CHAT_MEMBER = "my_chat_member"
    CHAT_MEMBER = "chat_member"


_MESSAGE_KINDS = (
    AllowedUpdate.MESSAGE,
    AllowedUpdate.EDITED_MESSAGE,
    AllowedUpdate.CHANNEL_POST,
    AllowedUpdate.EDITED_CHANNEL_POST,
)


@dataclass(frozen=True, slots=True)
class Update:
    """
    Incoming update: `update_id` plus at most one populated payload.

    Payloads of kinds without a model here (payments, polls, member
    updates) are left in `extra` under their wire key.
    """

    update_id: int
    message: Message | None = None
    edited_message: Message | None = None
    channel_post: Message | None = None
    edited_channel_post: Message | None = None
    inline_query: InlineQuery | None = None
    chosen_inline_result: ChosenInlineResult | None = None
    callback_query: CallbackQuery | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> Update:
        extra: dict[str, Any] = {}
        if isinstance(data, dict):
            extra = {k: v for k, v in data.items() if k in _UNMODELLED}
        return decode_record(cls, data, extra=extra)

    def to_json(self) -> dict[str, Any]:
        out = encode_record(self, exclude=("extra",))
        out.update(self.extra)
        return out

    @property
    def kind(self) -> AllowedUpdate | None:
        for item in AllowedUpdate:
            if item.value not in _UNMODELLED and getattr(self, item.value) is not None:
                return item
        return None

    def get_message(self) -> Message | None:
        """Message carried by message-like updates (new/edited message or post)."""
        for item in _MESSAGE_KINDS:
            value = getattr(self, item.value)
            if value is not None:
                return value
        if self.callback_query is not None:
            return self.callback_query.message
        return None


_UNMODELLED = frozenset(
    {
        AllowedUpdate.SHIPPING_QUERY.value,
        AllowedUpdate.PRE_CHECKOUT_QUERY.value,
        AllowedUpdate.POLL.value,
        AllowedUpdate.POLL_ANSWER.value,
        AllowedUpdate.MY_CHAT_MEMBER.value,
        AllowedUpdate.CHAT_MEMBER.value,
    }
)
