import pytest

from keyline import Cursor, CursorStateError, EndOfInput


def test_forward_consumption():
    cursor = Cursor(["a", "b"])
    assert cursor.position == 0
    assert cursor.current is None
    assert cursor.has_next()
    assert cursor.peek() == "a"

    assert cursor.next() == "a"
    assert cursor.position == 1
    assert cursor.line_number == 1
    assert cursor.current == "a"

    assert cursor.next() == "b"
    assert not cursor.has_next()
    assert cursor.peek() is None

    with pytest.raises(EndOfInput):
        cursor.next()


def test_iteration_consumes_remaining_lines():
    cursor = Cursor(["a", "b", "c"])
    cursor.next()
    assert list(cursor) == ["b", "c"]
    assert not cursor.has_next()


def test_insert_after_is_read_next():
    cursor = Cursor(["a", "d"])
    cursor.next()
    cursor.insert_after(["b", "c"])
    assert [cursor.next(), cursor.next(), cursor.next()] == ["b", "c", "d"]
    assert cursor.lines == ["a", "b", "c", "d"]


def test_insert_before_is_never_visited():
    cursor = Cursor(["a", "b"])
    cursor.next()
    cursor.insert_before(["x", "y"])
    assert cursor.position == 3
    # Still positioned on the consumed line
    assert (cursor.line_number, cursor.current) == (1, "a")
    assert cursor.next() == "b"
    assert cursor.lines == ["a", "x", "y", "b"]


def test_remove_drops_last_consumed_line():
    cursor = Cursor(["a", "b", "c"])
    cursor.next()
    cursor.next()
    assert cursor.remove() == "b"
    assert cursor.position == 1
    assert (cursor.line_number, cursor.current) == (1, "a")
    assert cursor.next() == "c"
    assert cursor.lines == ["a", "c"]


def test_replace_substitutes_last_consumed_line():
    cursor = Cursor(["a", "b", "c"])
    cursor.next()
    cursor.next()
    cursor.replace(["b1", "b2"])
    assert cursor.position == 3
    assert cursor.current == "b2"
    assert cursor.next() == "c"
    assert cursor.lines == ["a", "b1", "b2", "c"]


def test_replace_with_nothing_acts_like_remove():
    cursor = Cursor(["a", "b"])
    cursor.next()
    cursor.replace([])
    assert cursor.position == 0
    assert cursor.current is None
    assert cursor.next() == "b"


@pytest.mark.parametrize("mutate", [
    lambda c: c.remove(),
    lambda c: c.replace(["z"]),
])
def test_mutation_needs_a_consumed_line(mutate):
    cursor = Cursor(["a"])
    with pytest.raises(CursorStateError):
        mutate(cursor)

    cursor.next()
    cursor.remove()
    # The consumed line is gone; a second mutation has nothing to act on
    with pytest.raises(CursorStateError):
        mutate(cursor)


def test_end_of_input_names_last_line():
    cursor = Cursor(["a"])
    cursor.next()
    cursor.insert_before(["x"])
    with pytest.raises(EndOfInput, match="after line 1"):
        cursor.next()
