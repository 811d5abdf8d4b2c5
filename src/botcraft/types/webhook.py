from __future__ import annotations

from dataclasses import dataclass

from botcraft.types.update import AllowedUpdate


@dataclass(frozen=True, slots=True)
class WebhookInfo:
    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: str | None = None
    last_error_date: int | None = None
    last_error_message: str | None = None
    max_connections: int | None = None
    # None when the server did not report a filter.
    allowed_updates: set[AllowedUpdate] | None = None

    @property
    def is_set(self) -> bool:
        return bool(self.url)
