from __future__ import annotations

from diwan.modes import Mode, ModeStateMachine


def test_machine_starts_in_normal() -> None:
    assert ModeStateMachine().mode is Mode.NORMAL


def test_insert_then_normal_round_trip() -> None:
    machine = ModeStateMachine()

    assert machine.enter_insert() is True
    assert machine.mode is Mode.INSERT
    assert machine.enter_normal() is True
    assert machine.mode is Mode.NORMAL


def test_repeated_transition_is_noop() -> None:
    machine = ModeStateMachine()
    machine.enter_insert()

    assert machine.enter_insert() is False
    assert machine.mode is Mode.INSERT


def test_enter_normal_from_normal_is_noop() -> None:
    machine = ModeStateMachine()

    assert machine.enter_normal() is False
    assert machine.mode is Mode.NORMAL


def test_listeners_only_see_real_transitions() -> None:
    machine = ModeStateMachine()
    seen: list[tuple[Mode, Mode]] = []
    machine.on_transition(lambda previous, current: seen.append((previous, current)))

    machine.enter_normal()
    machine.enter_insert()
    machine.enter_insert()
    machine.enter_normal()

    assert seen == [(Mode.NORMAL, Mode.INSERT), (Mode.INSERT, Mode.NORMAL)]


def test_mode_label_is_uppercase_name() -> None:
    assert Mode.NORMAL.label == "NORMAL"
    assert str(Mode.INSERT) == "INSERT"
