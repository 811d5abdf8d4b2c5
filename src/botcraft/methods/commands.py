from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar, TypeVar

from botcraft.methods.base import JsonMethod
from botcraft.types.bot_command import BotCommand, BotCommandScope
from botcraft.types.builder import Builder

_B = TypeVar("_B", bound=Builder)


class _ScopeParams(Builder):
    __slots__ = ()

    def scope(self: _B, value: BotCommandScope) -> _B:
        """Users the command list applies to; the default scope when unset."""
        return self._with("scope", value)

    def language_code(self: _B, value: str) -> _B:
        """Two-letter ISO 639-1 code; empty applies to users without a dedicated list."""
        return self._with("language_code", value)


class SetMyCommands(_ScopeParams, JsonMethod[bool]):
    __slots__ = ()

    NAME: ClassVar[str] = "setMyCommands"
    RESPONSE: ClassVar[Any] = bool

    def __init__(self, commands: Iterable[BotCommand]) -> None:
        super().__init__(commands=list(commands))


class GetMyCommands(_ScopeParams, JsonMethod[list[BotCommand]]):
    __slots__ = ()

    NAME: ClassVar[str] = "getMyCommands"
    RESPONSE: ClassVar[Any] = list[BotCommand]

    def __init__(self) -> None:
        super().__init__()


class DeleteMyCommands(_ScopeParams, JsonMethod[bool]):
    """Delete the command list for a scope and language; higher-level commands then apply."""

    __slots__ = ()

    NAME: ClassVar[str] = "deleteMyCommands"
    RESPONSE: ClassVar[Any] = bool

    def __init__(self) -> None:
        super().__init__()
