from __future__ import annotations

from typing import Any, ClassVar

from botcraft.methods.base import JsonMethod, SendOptions
from botcraft.types.builder import InlineMarkupParams
from botcraft.types.game import GameHighScore
from botcraft.types.message import EditMessageResult, Message


class SendGame(InlineMarkupParams, SendOptions, JsonMethod[Message]):
    """
    Send a game.

    Games can be sent to private chats, groups and supergroups; the first
    button of the inline keyboard, when given, must launch the game.
    """

    __slots__ = ()

    NAME: ClassVar[str] = "sendGame"
    RESPONSE: ClassVar[Any] = Message

    def __init__(self, chat_id: int, game_short_name: str) -> None:
        super().__init__(chat_id=chat_id, game_short_name=game_short_name)


class SetGameScore(JsonMethod[EditMessageResult]):
    """
    Set the score of a user in a game.

    Fails when the new score is not greater than the current one unless
    `force` is set.
    """

    __slots__ = ()

    NAME: ClassVar[str] = "setGameScore"
    RESPONSE: ClassVar[Any] = EditMessageResult

    @classmethod
    def for_chat_message(cls, chat_id: int, message_id: int, user_id: int, score: int) -> SetGameScore:
        return cls(user_id=user_id, score=score, chat_id=chat_id, message_id=message_id)

    @classmethod
    def for_inline_message(cls, inline_message_id: str, user_id: int, score: int) -> SetGameScore:
        return cls(user_id=user_id, score=score, inline_message_id=inline_message_id)

    def force(self, value: bool) -> SetGameScore:
        """Allow the score to decrease (fixing mistakes, banning cheaters)."""
        return self._with("force", bool(value))

    def disable_edit_message(self, value: bool) -> SetGameScore:
        """Leave the game message as is instead of updating its scoreboard."""
        return self._with("disable_edit_message", bool(value))


class GetGameHighScores(JsonMethod[list[GameHighScore]]):
    """Scores of the target user and several neighbors in the high score table."""

    __slots__ = ()

    NAME: ClassVar[str] = "getGameHighScores"
    RESPONSE: ClassVar[Any] = list[GameHighScore]

    @classmethod
    def for_chat_message(cls, chat_id: int, message_id: int, user_id: int) -> GetGameHighScores:
        return cls(user_id=user_id, chat_id=chat_id, message_id=message_id)

    @classmethod
    def for_inline_message(cls, inline_message_id: str, user_id: int) -> GetGameHighScores:
        return cls(user_id=user_id, inline_message_id=inline_message_id)
