"""Paddle versus object overlap and per-tick scoring."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from dodge.components import FallingObject, PlayerState
from dodge.config import GameConfig

if TYPE_CHECKING:
    from frameloop import TickContext

    from dodge.components import Session

Rect = tuple[float, float, float, float]


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Strict AABB intersection of ``(left, top, right, bottom)`` rects.

    Rects that only share an edge do not overlap.
    """
    a_left, a_top, a_right, a_bottom = a
    b_left, b_top, b_right, b_bottom = b
    return (
        b_right > a_left
        and b_left < a_right
        and b_bottom > a_top
        and b_top < a_bottom
    )


def player_rect(player: PlayerState, config: GameConfig) -> Rect:
    top = config.player_y
    return (player.x, top, player.x + player.width, top + player.height)


def object_rect(obj: FallingObject) -> Rect:
    return (obj.x, obj.y, obj.x + obj.size, obj.y + obj.size)


def make_collision_system(
    config: GameConfig,
    on_collision: Callable[[Session, TickContext, FallingObject], None],
) -> Callable[[Session, TickContext], None]:
    """Fire ``on_collision`` for every object overlapping the paddle.

    The callback decides what a hit means; the system never changes state.
    """

    def collision_system(session: Session, ctx: TickContext) -> None:
        paddle = player_rect(session.player, config)
        for obj in session.objects:
            if rects_overlap(paddle, object_rect(obj)):
                on_collision(session, ctx, obj)

    return collision_system


def make_score_system() -> Callable[[Session, TickContext], None]:
    """One point per Active tick, including the tick a hit is detected on."""

    def score_system(session: Session, ctx: TickContext) -> None:
        session.score += 1

    return score_system
