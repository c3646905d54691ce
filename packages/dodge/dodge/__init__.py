"""dodge - Falling-object dodging game simulation on the frameloop scheduler."""
from __future__ import annotations

from dodge.chronicle import ChronicleRecorder
from dodge.collision import rects_overlap
from dodge.combo import PauseGesture, combo_progress
from dodge.components import FallingObject, GameState, PauseCombo, PlayerState, Session
from dodge.config import ConfigError, GameConfig
from dodge.game import Game
from dodge.input import KeyState
from dodge.player import move_player
from dodge.signals import SignalBus

__all__ = [
    "ChronicleRecorder",
    "ConfigError",
    "FallingObject",
    "Game",
    "GameConfig",
    "GameState",
    "KeyState",
    "PauseCombo",
    "PauseGesture",
    "PlayerState",
    "Session",
    "SignalBus",
    "combo_progress",
    "move_player",
    "rects_overlap",
]
