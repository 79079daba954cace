from __future__ import annotations

import pytest

from adapters.telegram_mapper import build_event


def test_builds_event_from_text_message() -> None:
    update = {"update_id": 1, "message": {"chat": {"id": 555}, "text": "  https://open.spotify.com/track/x \n"}}
    event = build_event(update)
    assert event is not None
    assert event.chat_id == 555
    assert event.text == "https://open.spotify.com/track/x"


@pytest.mark.parametrize(
    "update",
    [
        {},
        {"edited_message": {"chat": {"id": 1}, "text": "hi"}},
        {"message": {"chat": {"id": 1}, "sticker": {}}},
        {"message": {"chat": {"id": 1}, "text": ""}},
        [],
        None,
    ],
)
def test_updates_without_text_are_ignored(update) -> None:
    assert build_event(update) is None


def test_text_without_chat_id_raises() -> None:
    with pytest.raises(ValueError):
        build_event({"message": {"text": "hello"}})
