"""
Arrow Combo
Pygame front-end for the dodge simulation: draws the snapshot, feeds key edges.

Controls:
  Left/Right        Move
  Left+Right twice  Pause / Resume (within 4 s)
  Enter / Click     Start, restart or resume from an overlay
  Escape            Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from dodge import ChronicleRecorder, Game, GameConfig
from frameloop import Scheduler, TickContext, WallClock

TITLE = "Arrow Combo Game"
FPS = 60

BG_COLOR = (30, 41, 59)
PLAYER_COLOR = (34, 211, 238)
OBSTACLE_COLOR = (239, 68, 68)
TEXT_COLOR = (241, 245, 249)
BAR_BG = (71, 85, 105)
SHADE = (0, 0, 0, 180)

# pygame key codes mapped to the key names the core understands.
KEY_NAMES = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
}

OVERLAYS = {
    "ready": ("Arrow Combo Game", "Press Enter to start"),
    "paused": ("Paused", "Press Enter to resume"),
    "game_over": ("Game Over", "Press Enter to restart"),
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Arrow Combo: dodge demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("--chronicle", type=str, default=None,
                   metavar="FILE", help="Save JSONL chronicle to FILE on quit")
    args = p.parse_args()
    args.fps = max(10, min(240, args.fps))
    return args


def confirm(game: Game) -> None:
    """Overlay button: start from Ready/GameOver, resume from Paused."""
    if not game.resume():
        game.start()


def draw(screen: pygame.Surface, fonts: dict[str, pygame.font.Font], game: Game) -> None:
    snap = game.snapshot()
    config = game.config
    screen.fill(BG_COLOR)

    player = snap["player"]
    pygame.draw.rect(
        screen, PLAYER_COLOR,
        pygame.Rect(int(player["x"]), int(config.player_y), int(player["width"]), int(player["height"])),
        border_radius=4,
    )
    for obj in snap["objects"]:
        size = int(obj["size"])
        pygame.draw.rect(
            screen, OBSTACLE_COLOR,
            pygame.Rect(int(obj["x"]), int(obj["y"]), size, size),
            border_radius=6,
        )

    score = fonts["hud"].render(f"Score: {snap['score']}", True, TEXT_COLOR)
    screen.blit(score, (screen.get_width() - score.get_width() - 16, 16))

    progress = snap["pause_combo_progress"]
    if progress > 0:
        bar_w = screen.get_width() // 3
        bar_x = (screen.get_width() - bar_w) // 2
        pygame.draw.rect(screen, BAR_BG, (bar_x, 16, bar_w, 8), border_radius=4)
        pygame.draw.rect(screen, PLAYER_COLOR, (bar_x, 16, int(bar_w * progress / 100), 8), border_radius=4)

    overlay = OVERLAYS.get(snap["game_state"])
    if overlay is not None:
        shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        shade.fill(SHADE)
        screen.blit(shade, (0, 0))
        title, prompt = overlay
        lines = [fonts["title"].render(title, True, TEXT_COLOR)]
        if snap["game_state"] == "game_over":
            lines.append(fonts["hud"].render(f"Your Score: {snap['score']}", True, TEXT_COLOR))
        lines.append(fonts["hud"].render(prompt, True, TEXT_COLOR))
        y = screen.get_height() // 2 - sum(s.get_height() + 12 for s in lines) // 2
        for surf in lines:
            screen.blit(surf, ((screen.get_width() - surf.get_width()) // 2, y))
            y += surf.get_height() + 12


def main() -> None:
    args = parse_args()
    config = GameConfig()

    pygame.init()
    screen = pygame.display.set_mode((int(config.field_width), int(config.field_height)))
    pygame.display.set_caption(TITLE)
    fonts = {
        "title": pygame.font.SysFont("sans", 56, bold=True),
        "hud": pygame.font.SysFont("sans", 24, bold=True),
    }

    scheduler = Scheduler(clock=WallClock(args.fps), seed=args.seed)
    game = Game(config=config, scheduler=scheduler)

    chronicle = None
    if args.chronicle:
        chronicle = ChronicleRecorder(game.bus, lambda: scheduler.clock.frame_number)

    def frontend(ctx: TickContext) -> None:
        """Runs after the game tick each frame: feed input, then paint."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                ctx.request_stop()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    ctx.request_stop()
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    confirm(game)
                elif event.key in KEY_NAMES:
                    game.key_down(KEY_NAMES[event.key])
            elif event.type == pygame.KEYUP and event.key in KEY_NAMES:
                game.key_up(KEY_NAMES[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                confirm(game)

        draw(screen, fonts, game)
        pygame.display.flip()

    scheduler.every(frontend, name="frontend")
    scheduler.run_forever()

    game.close()
    scheduler.close()
    if chronicle is not None:
        n = chronicle.write(args.chronicle)
        print(f"Chronicle: {n} records written to {args.chronicle}")

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
