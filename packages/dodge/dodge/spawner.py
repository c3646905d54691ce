"""System factories for spawning and moving falling objects."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Callable

from dodge.components import FallingObject
from dodge.config import GameConfig

if TYPE_CHECKING:
    from frameloop import TickContext

    from dodge.components import Session


def make_spawn_system(
    config: GameConfig,
    on_spawn: Callable[[Session, TickContext, FallingObject], None] | None = None,
) -> Callable[[Session, TickContext], None]:
    """Spawn one object whenever more than ``spawn_interval`` ms have passed.

    Timing uses frame timestamps, not tick counts, so the rate does not
    depend on the frame rate. The first Active tick of a game always spawns.
    """

    def spawn_system(session: Session, ctx: TickContext) -> None:
        if (
            session.last_spawn is not None
            and ctx.now - session.last_spawn <= config.spawn_interval
        ):
            return
        session.last_spawn = ctx.now
        obj = FallingObject(
            id=session.next_object_id,
            x=ctx.random.random() * (config.field_width - config.object_size),
            y=-config.object_size,
            size=config.object_size,
        )
        session.next_object_id += 1
        session.objects.append(obj)
        if on_spawn is not None:
            on_spawn(session, ctx, obj)

    return spawn_system


def make_fall_system(config: GameConfig) -> Callable[[Session, TickContext], None]:
    """Move every object down by ``object_speed`` and drop those off the field."""

    def fall_system(session: Session, ctx: TickContext) -> None:
        moved = (
            dataclasses.replace(obj, y=obj.y + config.object_speed)
            for obj in session.objects
        )
        session.objects = [obj for obj in moved if obj.y < config.field_height]

    return fall_system
