from __future__ import annotations

from typing import Any, ClassVar

from botcraft.methods.base import EmptyMethod
from botcraft.types.user import User


class GetMe(EmptyMethod[User]):
    """Basic information about the bot; a simple way to test the token."""

    __slots__ = ()

    NAME: ClassVar[str] = "getMe"
    RESPONSE: ClassVar[Any] = User


class LogOut(EmptyMethod[bool]):
    """
    Log out from the cloud Bot API server before running a local one.

    The bot cannot log in again to the cloud server for 10 minutes.
    """

    __slots__ = ()

    NAME: ClassVar[str] = "logOut"
    RESPONSE: ClassVar[Any] = bool


class Close(EmptyMethod[bool]):
    """Close the bot instance before moving it between local servers."""

    __slots__ = ()

    NAME: ClassVar[str] = "close"
    RESPONSE: ClassVar[Any] = bool
