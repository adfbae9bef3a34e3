from __future__ import annotations

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
)
from diwan.keymaps import (
    Binding,
    KeyInput,
    KeymapRegistry,
    KeyStroke,
    PasteInput,
    load_default_keymaps,
    translate,
)
from diwan.modes import Mode


def key(name: str, *modifiers: str, text: str | None = None) -> KeyInput:
    return KeyInput(key=name, modifiers=modifiers, text=text)


@pytest.mark.parametrize(
    ("event", "expected"),
    [
        (key("h"), MOVE_LEFT),
        (key("j"), MOVE_DOWN),
        (key("k"), MOVE_UP),
        (key("l"), MOVE_RIGHT),
        (key("LEFT"), MOVE_LEFT),
        (key("DOWN"), MOVE_DOWN),
        (key("UP"), MOVE_UP),
        (key("RIGHT"), MOVE_RIGHT),
        (key("i"), ENTER_INSERT_MODE),
    ],
)
def test_normal_mode_table(event: KeyInput, expected: Action) -> None:
    assert translate(event, Mode.NORMAL) == expected


@pytest.mark.parametrize(
    ("event", "expected"),
    [
        (key("ESC"), ENTER_NORMAL_MODE),
        (key("LEFT"), MOVE_LEFT),
        (key("RIGHT"), MOVE_RIGHT),
        (key("UP"), MOVE_UP),
        (key("DOWN"), MOVE_DOWN),
        (key("BACKSPACE"), DELETE_CHAR),
        (key("ENTER"), NEW_LINE),
        (key("h"), Action.insert_char("h")),
        (key("i"), Action.insert_char("i")),
        (key(" "), Action.insert_char(" ")),
        (key("é"), Action.insert_char("é")),
    ],
)
def test_insert_mode_table(event: KeyInput, expected: Action) -> None:
    assert translate(event, Mode.INSERT) == expected


@pytest.mark.parametrize("name", ["x", "a", "BACKSPACE", "ENTER", "ESC", "F5"])
def test_normal_mode_never_mutates_text(name: str) -> None:
    assert translate(key(name), Mode.NORMAL) is None


def test_unmapped_insert_key_yields_nothing() -> None:
    assert translate(key("F5"), Mode.INSERT) is None
    assert translate(key("TAB", text="\t"), Mode.INSERT) is None


@pytest.mark.parametrize("modifier", ["ctrl", "alt", "meta"])
def test_chords_never_insert_text(modifier: str) -> None:
    assert translate(key("q", modifier, text="q"), Mode.INSERT) is None


def test_shift_does_not_block_typing() -> None:
    assert translate(key("A", "shift", text="A"), Mode.INSERT) == Action.insert_char(
        "A"
    )


@pytest.mark.parametrize("mode", [Mode.NORMAL, Mode.INSERT])
def test_paste_is_accepted_in_every_mode(mode: Mode) -> None:
    assert translate(PasteInput("hello"), mode) == Action.paste("hello")


def test_paste_line_endings_are_normalized() -> None:
    action = translate(PasteInput("a\r\nb\rc"), Mode.INSERT)

    assert action == Action.paste("a\nb\nc")


def test_empty_paste_yields_nothing() -> None:
    assert translate(PasteInput(""), Mode.INSERT) is None


@pytest.mark.parametrize(
    ("alias", "canonical"),
    [
        ("escape", "ESC"),
        ("<Esc>", "ESC"),
        ("return", "ENTER"),
        ("<CR>", "ENTER"),
        ("<BS>", "BACKSPACE"),
        ("left", "LEFT"),
    ],
)
def test_key_aliases_normalize(alias: str, canonical: str) -> None:
    assert key(alias).key == canonical


def test_translation_is_deterministic() -> None:
    event = key("l")

    assert translate(event, Mode.NORMAL) == translate(event, Mode.NORMAL)


def test_custom_registry_overrides_defaults() -> None:
    registry = load_default_keymaps(
        KeymapRegistry(), exclude_bindings=["normal.enter_insert"]
    )
    registry.register_binding(
        Binding(
            id="normal.enter_insert_a",
            mode=Mode.NORMAL,
            stroke=KeyStroke("a"),
            action=ENTER_INSERT_MODE,
        )
    )

    assert translate(key("i"), Mode.NORMAL, registry=registry) is None
    assert translate(key("a"), Mode.NORMAL, registry=registry) == ENTER_INSERT_MODE


def test_key_input_and_stroke_share_normalization() -> None:
    event = KeyInput("escape", ("CTRL", "ctrl"))
    stroke = KeyStroke("<Esc>", ("ctrl",))

    assert event.token == stroke.token == "ctrl+ESC"
    with pytest.raises(ValueError):
        KeyInput("")
