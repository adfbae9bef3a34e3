"""Editing modes and their state machine."""

from .state_machine import TRANSITIONS, Mode, ModeStateMachine

__all__ = ["Mode", "ModeStateMachine", "TRANSITIONS"]
