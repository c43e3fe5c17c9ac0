from __future__ import annotations

import pytest

from matrix_console.buffer import BufferStore, SeparatorPolicy, TextBuffer


def test_append_and_pop_bump_version() -> None:
    buffer = TextBuffer(index=0)

    buffer.append("1_2")
    assert buffer.text == "1_2"
    assert buffer.version == 1

    assert buffer.pop() == "2"
    assert buffer.text == "1_"
    assert buffer.version == 2


def test_pop_on_empty_buffer_returns_none() -> None:
    buffer = TextBuffer(index=1)

    assert buffer.pop() is None
    assert buffer.version == 0


def test_snapshot_displays_cells_as_spaces() -> None:
    buffer = TextBuffer(index=0, text="1_2\n3_4")

    view = buffer.snapshot()

    assert view.text == "1_2\n3_4"
    assert view.display == "1 2\n3 4"


def test_store_holds_two_independent_buffers() -> None:
    store = BufferStore()
    store[0].append("5")

    assert store.texts() == ("5", "")
    assert len(store) == 2
    with pytest.raises(IndexError):
        store[2]


def test_store_requires_two_texts() -> None:
    with pytest.raises(ValueError):
        BufferStore(("1",))


def test_policy_maps_space_to_cell_separator() -> None:
    policy = SeparatorPolicy()

    assert policy.store_char(" ") == "_"
    assert policy.store_char("7") == "7"
