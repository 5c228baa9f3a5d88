import logging

import pytest

from copycat.models.state import ViewState
from copycat.services.dispatcher import (
    ActionDispatcher,
    ClearAll,
    ClearNonFavorites,
    Copy,
    Delete,
    SelectAndCopy,
    ToggleFavorite,
)


@pytest.fixture
def state():
    return ViewState()


@pytest.fixture
def dispatcher(store, clipboard, state):
    return ActionDispatcher(store, clipboard, state)


def test_intents_wait_for_drain(dispatcher, store):
    entry = store.ingest("A")

    dispatcher.submit(Delete(entry.id))

    assert store.contents() == ["A"]
    assert len(dispatcher) == 1
    assert dispatcher.drain() == 1
    assert len(store) == 0
    assert len(dispatcher) == 0


def test_intents_apply_in_order(dispatcher, store):
    entry = store.ingest("A")

    dispatcher.submit_all([
        ToggleFavorite(entry.id),
        ToggleFavorite(entry.id),
        ToggleFavorite(entry.id),
    ])
    dispatcher.drain()

    assert store.get(entry.id).favorite is True


def test_later_intent_sees_earlier_delete(dispatcher, store):
    entry = store.ingest("A")

    dispatcher.submit_all([Delete(entry.id), ToggleFavorite(entry.id)])
    dispatcher.drain()

    assert len(store) == 0


def test_select_and_copy(dispatcher, store, clipboard, state):
    entry = store.ingest("A")

    dispatcher.submit(SelectAndCopy(entry.id, entry.content))
    dispatcher.drain()

    assert state.selected_id == entry.id
    assert clipboard.writes == ["A"]


def test_copy_does_not_select(dispatcher, clipboard, state):
    dispatcher.submit(Copy("text"))
    dispatcher.drain()

    assert state.selected_id is None
    assert clipboard.writes == ["text"]


def test_copy_failure_is_logged(dispatcher, clipboard, caplog):
    clipboard.fail_writes = True

    with caplog.at_level(logging.WARNING):
        dispatcher.submit(Copy("text"))
        dispatcher.drain()

    assert clipboard.writes == []
    assert "Failed to copy to clipboard" in caplog.text


def test_delete_clears_selection(dispatcher, store, state):
    entry = store.ingest("A")
    state.selected_id = entry.id

    dispatcher.submit(Delete(entry.id))
    dispatcher.drain()

    assert state.selected_id is None


def test_clear_intents(dispatcher, store, state):
    a = store.ingest("A")
    b = store.ingest("B")
    store.toggle_favorite(b.id)
    state.selected_id = a.id

    dispatcher.submit(ClearNonFavorites())
    dispatcher.drain()
    assert store.contents() == ["B"]
    assert state.selected_id is None

    dispatcher.submit(ClearAll())
    dispatcher.drain()
    assert len(store) == 0


def test_unknown_intent(dispatcher):
    with pytest.raises(TypeError):
        dispatcher.apply(object())
