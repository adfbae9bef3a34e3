from __future__ import annotations

import random

import pytest

from diwan.actions import (
    DELETE_CHAR,
    ENTER_INSERT_MODE,
    ENTER_NORMAL_MODE,
    MOVE_DOWN,
    MOVE_LEFT,
    MOVE_RIGHT,
    MOVE_UP,
    NEW_LINE,
    Action,
    ActionApplier,
    ActionKind,
)
from diwan.buffer import CursorModel, Document, Position
from diwan.errors import ActionError
from diwan.modes import Mode, ModeStateMachine


def make_applier(
    text: str = "", *, column: int = 0, row: int = 0, mode: Mode = Mode.NORMAL
) -> ActionApplier:
    return ActionApplier(
        Document.from_text(text),
        CursorModel(Position(column, row)),
        ModeStateMachine(mode),
    )


def type_text(applier: ActionApplier, text: str) -> None:
    for char in text:
        applier.apply(Action.insert_char(char))


def test_scenario_insert_newline_and_backspace() -> None:
    applier = make_applier()

    applier.apply(ENTER_INSERT_MODE)
    assert applier.modes.mode is Mode.INSERT
    assert applier.cursor.position == Position(0, 0)

    type_text(applier, "ab")
    assert applier.document.text == "ab"
    assert applier.cursor.position == Position(2, 0)

    applier.apply(NEW_LINE)
    assert applier.document.text == "ab\n"
    assert applier.cursor.position == Position(0, 1)

    type_text(applier, "c")
    assert applier.document.text == "ab\nc"
    assert applier.cursor.position == Position(1, 1)

    applier.apply(DELETE_CHAR)
    assert applier.document.text == "ab\n"
    assert applier.cursor.position == Position(0, 1)

    applier.apply(DELETE_CHAR)
    assert applier.document.text == "ab"
    assert applier.cursor.position == Position(2, 0)


def test_paste_into_empty_document() -> None:
    applier = make_applier()

    applier.apply(Action.paste("hello"))

    assert applier.document.text == "hello"
    assert applier.cursor.position == Position(5, 0)


def test_move_left_from_line_start_lands_on_previous_line_end() -> None:
    applier = make_applier("ab\ncd", column=0, row=1)

    applier.apply(MOVE_LEFT)

    assert applier.cursor.position == Position(2, 0)


def test_move_right_at_final_append_position_is_noop() -> None:
    applier = make_applier("a", column=1, row=0)

    result = applier.apply(MOVE_RIGHT)

    assert applier.cursor.position == Position(1, 0)
    assert result.status == "noop"


def test_paste_with_newlines_moves_to_last_pasted_line() -> None:
    applier = make_applier("ab", column=1)

    applier.apply(Action.paste("x\nyz"))

    assert applier.document.text == "ax\nyzb"
    assert applier.cursor.position == Position(2, 1)


def test_paste_ending_in_newline_lands_on_line_start() -> None:
    applier = make_applier("ab", column=2)

    applier.apply(Action.paste("cd\n"))

    assert applier.document.snapshot() == ("abcd", "")
    assert applier.cursor.position == Position(0, 1)


def test_empty_paste_is_noop() -> None:
    applier = make_applier("ab", column=1)

    result = applier.apply(Action.paste(""))

    assert result.status == "noop"
    assert applier.document.version == 0


def test_delete_at_origin_is_noop() -> None:
    applier = make_applier("ab")

    result = applier.apply(DELETE_CHAR)

    assert applier.document.text == "ab"
    assert result.text_changed is False


def test_delete_at_line_start_joins_with_previous_line() -> None:
    applier = make_applier("abc\nde", column=0, row=1)

    applier.apply(DELETE_CHAR)

    assert applier.document.text == "abcde"
    assert applier.cursor.position == Position(3, 0)


def test_newline_splits_line_at_cursor() -> None:
    applier = make_applier("abcd", column=2)

    applier.apply(NEW_LINE)

    assert applier.document.snapshot() == ("ab", "cd")
    assert applier.cursor.position == Position(0, 1)


def test_multibyte_characters_occupy_one_column() -> None:
    applier = make_applier("héllo", column=2)

    applier.apply(DELETE_CHAR)

    assert applier.document.text == "hllo"
    assert applier.cursor.position == Position(1, 0)


def test_mode_actions_report_changes() -> None:
    applier = make_applier()

    first = applier.apply(ENTER_INSERT_MODE)
    again = applier.apply(ENTER_INSERT_MODE)
    back = applier.apply(ENTER_NORMAL_MODE)

    assert first.mode_changed is True
    assert again.mode_changed is False
    assert again.status == "noop"
    assert back.mode_changed is True
    assert applier.modes.mode is Mode.NORMAL


def test_stale_cursor_is_clamped_before_applying() -> None:
    applier = make_applier("abc", column=3)
    applier.document.delete(1, 3)

    applier.apply(Action.insert_char("z"))

    assert applier.document.text == "az"
    assert applier.cursor.position == Position(2, 0)


@pytest.mark.parametrize("char", ["x", " ", "é", "中"])
def test_insert_then_delete_restores_every_position(char: str) -> None:
    text = "ab\n\ncde"
    document = Document.from_text(text)
    for row, line in enumerate(document.snapshot()):
        for column in range(len(line) + 1):
            applier = make_applier(text, column=column, row=row, mode=Mode.INSERT)

            applier.apply(Action.insert_char(char))
            applier.apply(DELETE_CHAR)

            assert applier.document.text == text
            assert applier.cursor.position == Position(column, row)


def test_newline_then_delete_restores_every_position() -> None:
    text = "ab\ncde"
    document = Document.from_text(text)
    for row, line in enumerate(document.snapshot()):
        for column in range(len(line) + 1):
            applier = make_applier(text, column=column, row=row, mode=Mode.INSERT)

            applier.apply(NEW_LINE)
            assert applier.cursor.position == Position(0, row + 1)
            applier.apply(DELETE_CHAR)

            assert applier.document.text == text
            assert applier.cursor.position == Position(column, row)


@pytest.mark.parametrize("seed", range(6))
def test_random_action_sequences_never_raise_or_escape_bounds(seed: int) -> None:
    rng = random.Random(seed)
    choices = [
        MOVE_LEFT,
        MOVE_RIGHT,
        MOVE_UP,
        MOVE_DOWN,
        DELETE_CHAR,
        NEW_LINE,
        ENTER_INSERT_MODE,
        ENTER_NORMAL_MODE,
        Action.insert_char("q"),
        Action.paste("p\nq"),
    ]
    applier = make_applier("seed\ntext")

    for _ in range(300):
        applier.apply(rng.choice(choices))
        position = applier.cursor.position
        assert 0 <= position.row <= applier.document.last_row
        assert 0 <= position.column <= applier.document.line_length(position.row)


def test_insert_char_requires_single_character() -> None:
    with pytest.raises(ActionError):
        Action.insert_char("ab")
    with pytest.raises(ActionError):
        Action(ActionKind.MOVE_LEFT, "x")


def test_text_kinds_are_flagged() -> None:
    assert Action.insert_char("a").mutates_text is True
    assert DELETE_CHAR.mutates_text is True
    assert MOVE_UP.mutates_text is False
    assert MOVE_UP.is_motion is True


@pytest.mark.parametrize("char", ["\n", "\r", "\t", "\x1b"])
def test_insert_char_rejects_control_characters(char: str) -> None:
    with pytest.raises(ActionError):
        Action.insert_char(char)


def test_line_breaks_go_through_new_line_not_insert_char() -> None:
    applier = make_applier("ab", column=1, mode=Mode.INSERT)

    with pytest.raises(ActionError):
        applier.apply(Action.insert_char("\n"))
    applier.apply(NEW_LINE)

    assert applier.document.snapshot() == ("a", "b")
    assert applier.cursor.position == Position(0, 1)
