from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

from botcraft.methods.base import JsonMethod
from botcraft.types.inline_mode.query_result import InlineQueryResult


class AnswerInlineQuery(JsonMethod[bool]):
    """Send answers to an inline query; at most 50 results per query."""

    __slots__ = ()

    NAME: ClassVar[str] = "answerInlineQuery"
    RESPONSE: ClassVar[Any] = bool

    def __init__(self, inline_query_id: str, results: Iterable[InlineQueryResult]) -> None:
        super().__init__(inline_query_id=inline_query_id, results=list(results))

    def cache_time(self, value: int) -> AnswerInlineQuery:
        """Seconds the server may cache the results; 300 by default."""
        return self._with("cache_time", int(value))

    def is_personal(self, value: bool) -> AnswerInlineQuery:
        return self._with("is_personal", bool(value))

    def next_offset(self, value: str) -> AnswerInlineQuery:
        """Offset the client sends back for more results; empty when there are none."""
        return self._with("next_offset", value)

    def switch_pm_text(self, value: str) -> AnswerInlineQuery:
        return self._with("switch_pm_text", value)

    def switch_pm_parameter(self, value: str) -> AnswerInlineQuery:
        """Deep-linking parameter for the /start message, 1-64 characters."""
        return self._with("switch_pm_parameter", value)
