from __future__ import annotations

from diwan import status
from diwan.modes import Mode, ModeStateMachine


def test_scratch_status_at_origin() -> None:
    assert status.render(Mode.NORMAL, None, 0, 0) == "NORMAL | [SCRATCH] | 1:1"


def test_filename_and_one_based_cursor() -> None:
    snapshot = status.snapshot(Mode.INSERT, "notes.txt", 2, 0)

    assert snapshot.cursor == "3:1"
    assert str(snapshot) == "INSERT | notes.txt | 3:1"


def test_empty_filename_falls_back_to_placeholder() -> None:
    assert status.snapshot(Mode.NORMAL, "", 0, 4).filename == status.SCRATCH_FILENAME


def test_status_is_recomputed_after_mode_change() -> None:
    machine = ModeStateMachine()
    before = status.render(machine.mode, None, 0, 0)

    machine.enter_insert()

    assert before.startswith("NORMAL")
    assert status.render(machine.mode, None, 0, 0).startswith("INSERT")
