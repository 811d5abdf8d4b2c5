from __future__ import annotations

from typing import Any

import pytest

from botcraft.codec import from_json_value, to_json_value
from botcraft.types.game import Game, GameHighScore
from botcraft.types.text import TextEntityError, TextEntityKind


def _game(**extra: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "title": "title",
        "description": "description",
        "photo": [{"file_id": "photo-id", "file_unique_id": "photo-uid", "width": 200, "height": 200}],
    }
    data.update(extra)
    return data


def test_game__decode__full_roundtrip() -> None:
    raw = _game(
        text="text",
        text_entities=[{"type": "bold", "offset": 0, "length": 2}],
        animation={
            "file_id": "animation-id",
            "file_unique_id": "animation-uid",
            "width": 200,
            "height": 200,
            "duration": 24,
        },
    )
    game = from_json_value(Game, raw)
    assert game.title == "title"
    assert game.text is not None
    assert game.text.data == "text"
    assert game.text.entities is not None
    assert game.text.entities[0].kind is TextEntityKind.BOLD
    assert game.animation is not None and game.animation.duration == 24
    assert to_json_value(game) == raw


def test_game__decode__minimal() -> None:
    game = from_json_value(Game, _game())
    assert game.text is None
    assert game.animation is None
    assert to_json_value(game) == _game()


def test_game__decode__empty_entity_list_fails() -> None:
    with pytest.raises(TextEntityError):
        from_json_value(Game, _game(text="text", text_entities=[]))


def test_game__decode__entity_outside_text_fails() -> None:
    with pytest.raises(TextEntityError):
        from_json_value(Game, _game(text="text", text_entities=[{"type": "bold", "offset": 2, "length": 10}]))


def test_game_high_score__decode() -> None:
    score = from_json_value(
        GameHighScore,
        {"position": 1, "user": {"id": 2, "first_name": "test", "is_bot": False}, "score": 3},
    )
    assert (score.position, score.user.id, score.score) == (1, 2, 3)


def test_game__non_ascii_text__roundtrip() -> None:
    raw = _game(
        title="игра",
        text="привет 👋 мир",
        text_entities=[
            {"type": "bold", "offset": 0, "length": 6},
            {"type": "text_link", "offset": 7, "length": 2, "url": "https://example.com"},
            {"type": "italic", "offset": 10, "length": 3},
        ],
    )
    game = from_json_value(Game, raw)
    assert game.text is not None
    assert game.text.entities is not None
    assert [game.text.get_entity_text(e) for e in game.text.entities] == ["привет", "👋", "мир"]
    assert to_json_value(game) == raw
    assert from_json_value(Game, to_json_value(game)) == game
