from __future__ import annotations

from collections.abc import Iterable
from datetime import timedelta
from typing import Any, ClassVar, TypeVar

from botcraft.methods.base import EmptyMethod, JsonMethod
from botcraft.request import Request
from botcraft.types.builder import Builder
from botcraft.types.update import AllowedUpdate, Update
from botcraft.types.webhook import WebhookInfo

_B = TypeVar("_B", bound=Builder)


def _seconds(value: int | timedelta) -> int:
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    return int(value)


class _AllowedUpdatesParams(Builder):
    __slots__ = ()

    def allowed_updates(self: _B, items: Iterable[AllowedUpdate]) -> _B:
        """Replace the update-kind filter; an empty set means all kinds except member updates."""
        return self._with("allowed_updates", {AllowedUpdate(x) for x in items})

    def add_allowed_update(self: _B, item: AllowedUpdate) -> _B:
        current = self._payload.get("allowed_updates", set())  # type: ignore[attr-defined]
        return self._with("allowed_updates", {*current, AllowedUpdate(item)})


class GetUpdates(_AllowedUpdatesParams, JsonMethod[list[Update]]):
    """
    Receive incoming updates using long polling.

    Always sent as a JSON body, even when no parameter is set.
    """

    __slots__ = ()

    NAME: ClassVar[str] = "getUpdates"
    RESPONSE: ClassVar[Any] = list[Update]

    def __init__(self) -> None:
        super().__init__()

    def offset(self, value: int) -> GetUpdates:
        """First update id to return; confirms every update with a lower id."""
        return self._with("offset", int(value))

    def limit(self, value: int) -> GetUpdates:
        """Number of updates to retrieve, 1-100."""
        return self._with("limit", int(value))

    def timeout(self, value: int | timedelta) -> GetUpdates:
        """Long polling timeout, sent as whole seconds."""
        return self._with("timeout", _seconds(value))


class SetWebhook(_AllowedUpdatesParams, JsonMethod[bool]):
    __slots__ = ()

    NAME: ClassVar[str] = "setWebhook"
    RESPONSE: ClassVar[Any] = bool

    def __init__(self, url: str) -> None:
        super().__init__(url=url)

    def certificate(self, value: str) -> SetWebhook:
        """Public key certificate so the root certificate in use can be checked."""
        return self._with("certificate", value)

    def ip_address(self, value: str) -> SetWebhook:
        return self._with("ip_address", value)

    def max_connections(self, value: int) -> SetWebhook:
        """Maximum simultaneous HTTPS connections for update delivery, 1-100."""
        return self._with("max_connections", int(value))

    def drop_pending_updates(self, value: bool) -> SetWebhook:
        return self._with("drop_pending_updates", bool(value))


class DeleteWebhook(JsonMethod[bool]):
    """
    Remove webhook integration.

    Sent as GET without a body unless `drop_pending_updates` was set, in
    which case it is a JSON POST, even when the flag is false.
    """

    __slots__ = ()

    NAME: ClassVar[str] = "deleteWebhook"
    RESPONSE: ClassVar[Any] = bool

    def __init__(self) -> None:
        super().__init__()

    def drop_pending_updates(self, value: bool) -> DeleteWebhook:
        return self._with("drop_pending_updates", bool(value))

    def into_request(self) -> Request:
        if "drop_pending_updates" not in self._payload:
            return Request.empty(self.NAME)
        return super().into_request()


class GetWebhookInfo(EmptyMethod[WebhookInfo]):
    __slots__ = ()

    NAME: ClassVar[str] = "getWebhookInfo"
    RESPONSE: ClassVar[Any] = WebhookInfo
