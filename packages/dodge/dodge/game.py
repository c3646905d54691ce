"""Game - wires the systems, the pause gesture and the actions together."""
from __future__ import annotations

import dataclasses
from typing import Any

from frameloop import Scheduler, TickContext

from dodge import signals, states
from dodge.collision import make_collision_system, make_score_system
from dodge.combo import PauseGesture
from dodge.components import FallingObject, GameState, PlayerState, Session
from dodge.config import GameConfig
from dodge.input import KeyState
from dodge.player import make_player_system
from dodge.spawner import make_fall_system, make_spawn_system


class Game:
    """One embeddable game session driven by a Scheduler.

    The main tick runs every frame in every state and only mutates the
    session while Active. Rendering and input collaborators read
    ``snapshot()`` and feed ``key_down``/``key_up``; nothing they hold is
    shared with the simulation.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        scheduler: Scheduler | None = None,
        bus: signals.SignalBus | None = None,
    ) -> None:
        self._config = config if config is not None else GameConfig()
        self._scheduler = scheduler if scheduler is not None else Scheduler()
        self._bus = bus if bus is not None else signals.SignalBus()
        self._keys = KeyState()
        self._session = self._new_session()
        self._gesture = PauseGesture(
            self._config, self._scheduler, self._bus, self._toggle_pause,
        )
        self._systems = [
            make_player_system(self._config, self._keys),
            make_spawn_system(self._config, self._on_spawn),
            make_fall_system(self._config),
            make_collision_system(self._config, self._on_collision),
            make_score_system(),
        ]
        self._closed = False
        self._tick_task = self._scheduler.every(self._tick, name="game-tick")
        self._flush_task = self._scheduler.every(self._flush, name="signal-flush")

    # -- Read-only views --

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def bus(self) -> signals.SignalBus:
        return self._bus

    @property
    def state(self) -> GameState:
        return self._session.state

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def player(self) -> PlayerState:
        return dataclasses.replace(self._session.player)

    @property
    def objects(self) -> list[FallingObject]:
        return list(self._session.objects)

    @property
    def combo_progress(self) -> float:
        return self._gesture.progress

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> dict[str, Any]:
        session = self._session
        return {
            "game_state": session.state.value,
            "player": {
                "x": session.player.x,
                "width": session.player.width,
                "height": session.player.height,
            },
            "objects": [
                {"id": o.id, "x": o.x, "y": o.y, "size": o.size}
                for o in session.objects
            ],
            "score": session.score,
            "pause_combo_progress": self._gesture.progress,
        }

    # -- Actions --

    def start(self) -> bool:
        """Fresh game from Ready or GameOver. No-op in any other state."""
        if self._closed or not states.accepts(self.state, states.START):
            return False
        self._clear()
        return self._transition(states.START)

    def resume(self) -> bool:
        """Leave Paused. No-op in any other state."""
        if self._closed or not states.accepts(self.state, states.RESUME):
            return False
        self._keys.clear()
        self._gesture.reset()
        return self._transition(states.RESUME)

    def reset(self) -> bool:
        """Abandon the current session and go back to Ready."""
        if self._closed:
            return False
        self._clear()
        return self._transition(states.RESET)

    def close(self) -> None:
        """Cancel every task this game scheduled. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._gesture.reset()
        self._scheduler.cancel(self._tick_task)
        self._scheduler.cancel(self._flush_task)

    # -- Input --

    def key_down(self, key: str) -> bool:
        """Key became held. Returns True if it completed a pause toggle."""
        if self._closed or self._scheduler.closed or not self._keys.key_down(key):
            return False
        combo_keys = self._config.combo_keys
        if key in combo_keys and self._keys.is_combo(combo_keys):
            return self._gesture.press(self._scheduler.clock.now(), self.state)
        return False

    def key_up(self, key: str) -> None:
        self._keys.key_up(key)

    def held_keys(self) -> frozenset[str]:
        return self._keys.snapshot()

    # -- Internals --

    def _new_session(self) -> Session:
        config = self._config
        return Session(
            player=PlayerState(
                x=config.player_start_x,
                width=config.player_width,
                height=config.player_height,
            ),
        )

    def _clear(self) -> None:
        state = self._session.state
        self._session = self._new_session()
        self._session.state = state
        self._keys.clear()
        self._gesture.reset()

    def _transition(self, action: str, **data: Any) -> bool:
        old = self._session.state
        target = states.next_state(old, action)
        if target is None:
            return False
        self._session.state = target
        self._bus.publish(_signal_for(action, target), previous=old.value, **data)
        return True

    def _toggle_pause(self) -> None:
        self._transition(states.TOGGLE)

    def _on_spawn(self, session: Session, ctx: TickContext, obj: FallingObject) -> None:
        self._bus.publish(signals.OBJECT_SPAWNED, id=obj.id, x=obj.x)

    def _on_collision(self, session: Session, ctx: TickContext, obj: FallingObject) -> None:
        if session.hit is None:
            session.hit = obj

    def _tick(self, ctx: TickContext) -> None:
        session = self._session
        if session.state is not GameState.ACTIVE:
            return
        session.hit = None
        for system in self._systems:
            system(session, ctx)
        if session.hit is not None:
            self._transition(states.COLLIDE, score=session.score, object_id=session.hit.id)

    def _flush(self, ctx: TickContext) -> None:
        self._bus.flush()


def _signal_for(action: str, target: GameState) -> str:
    if action == states.START:
        return signals.GAME_STARTED
    if action == states.RESET:
        return signals.GAME_RESET
    if action == states.COLLIDE:
        return signals.GAME_OVER
    if target is GameState.PAUSED:
        return signals.GAME_PAUSED
    return signals.GAME_RESUMED
