"""Double-press pause gesture with a decaying progress indicator."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from dodge.components import GameState, PauseCombo
from dodge.config import GameConfig
from dodge.signals import COMBO_ARMED, COMBO_EXPIRED, SignalBus

if TYPE_CHECKING:
    from frameloop import Scheduler, TaskHandle, TickContext

_LIVE_STATES = (GameState.ACTIVE, GameState.PAUSED)


def combo_progress(now: float, started_at: float, config: GameConfig) -> float:
    """Remaining progress, falling linearly from the scale to 0 over the timeout."""
    elapsed = now - started_at
    return max(
        0.0, config.combo_progress_scale * (1 - elapsed / config.combo_timeout),
    )


class PauseGesture:
    """Two qualifying presses within ``combo_timeout`` toggle pause.

    Idle until a first press arms it. While armed, a decay task runs on the
    scheduler beside the main tick and recomputes progress every frame; when
    progress reaches 0 the gesture disarms. The second press in time fires
    ``on_toggle`` and disarms immediately.
    """

    def __init__(
        self,
        config: GameConfig,
        scheduler: Scheduler,
        bus: SignalBus,
        on_toggle: Callable[[], None],
    ) -> None:
        self._config = config
        self._scheduler = scheduler
        self._bus = bus
        self._on_toggle = on_toggle
        self._combo = PauseCombo()
        self._decay_task: TaskHandle | None = None

    @property
    def combo(self) -> PauseCombo:
        return self._combo

    @property
    def armed(self) -> bool:
        return self._combo.armed

    @property
    def progress(self) -> float:
        return self._combo.progress

    def press(self, now: float, state: GameState) -> bool:
        """Register a qualifying press. Returns True if it toggled pause."""
        if state not in _LIVE_STATES or self._scheduler.closed:
            return False
        combo = self._combo
        if combo.last_press is not None and now - combo.last_press < self._config.combo_timeout:
            self.reset()
            self._on_toggle()
            return True

        self._scheduler.cancel(self._decay_task)
        self._decay_task = self._scheduler.every(self._decay, name="combo-decay")
        combo.last_press = now
        combo.started_at = now
        combo.progress = self._config.combo_progress_scale
        self._bus.publish(COMBO_ARMED, at=now)
        return False

    def _decay(self, ctx: TickContext) -> None:
        combo = self._combo
        if combo.started_at is None:
            return
        combo.progress = combo_progress(ctx.now, combo.started_at, self._config)
        if combo.progress <= 0:
            self.reset()
            self._bus.publish(COMBO_EXPIRED, at=ctx.now)

    def reset(self) -> None:
        """Disarm and cancel the decay task."""
        self._scheduler.cancel(self._decay_task)
        self._decay_task = None
        self._combo.last_press = None
        self._combo.started_at = None
        self._combo.progress = 0.0
