from __future__ import annotations

import json

from botcraft.methods.inline import AnswerInlineQuery
from botcraft.request import RequestMethod
from botcraft.types.inline_mode import (
    InlineQueryResultArticle,
    InlineQueryResultGame,
    InputMessageContentText,
)


def test_answer_inline_query__minimal() -> None:
    request = AnswerInlineQuery(
        "id",
        [InlineQueryResultArticle("article-id", "title", InputMessageContentText("text"))],
    ).into_request()
    assert request.http_method is RequestMethod.POST
    assert request.build_url("base-url", "token") == "base-url/bottoken/answerInlineQuery"
    assert request.body.json_data is not None
    assert json.loads(request.body.json_data) == {
        "inline_query_id": "id",
        "results": [
            {
                "type": "article",
                "id": "article-id",
                "title": "title",
                "input_message_content": {"message_text": "text"},
            }
        ],
    }


def test_answer_inline_query__full() -> None:
    request = (
        AnswerInlineQuery("id", [InlineQueryResultGame("game-id", "game")])
        .cache_time(300)
        .is_personal(True)
        .next_offset("offset")
        .switch_pm_text("text")
        .switch_pm_parameter("param")
        .into_request()
    )
    assert request.body.json_data is not None
    assert json.loads(request.body.json_data) == {
        "inline_query_id": "id",
        "results": [{"type": "game", "id": "game-id", "game_short_name": "game"}],
        "cache_time": 300,
        "is_personal": True,
        "next_offset": "offset",
        "switch_pm_text": "text",
        "switch_pm_parameter": "param",
    }


def test_answer_inline_query__parse_response() -> None:
    assert AnswerInlineQuery("id", []).parse_response(True) is True
