# portfolio/game/game.py
import sys, argparse, webbrowser
from pathlib import Path
import pygame
from pygame import K_ESCAPE
from .config import WIDTH, HEIGHT, FPS, TITLE, FONT_NAME, FONT_SIZE, PUBLIC_DIR
from .render import SpriteCache, draw_world
from .world import World


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Play the portfolio platformer (WASD to move, click signs to open links).")
    p.add_argument("--width", type=int, default=None,
                   help="Canvas width. Omit to use the desktop width (read once at start).")
    p.add_argument("--height", type=int, default=None,
                   help="Canvas height. Omit to use the desktop height (read once at start).")
    p.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    p.add_argument("--assets", type=str, default=PUBLIC_DIR,
                   help="Asset root holding images/ (sprites and background)")
    return p.parse_args(argv)


def resolve_canvas_size(width, height):
    """Explicit size wins; otherwise the desktop size, falling back to WIDTH x HEIGHT."""
    info = pygame.display.Info()
    w = width or (info.current_w if info.current_w > 0 else WIDTH)
    h = height or (info.current_h if info.current_h > 0 else HEIGHT)
    if w <= 0 or h <= 0:
        raise ValueError(f"canvas size must be positive, got {w}x{h}")
    return w, h


def handle_event(world, event) -> bool:
    """Apply one pygame event to the world. Returns False when the game should quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN and event.key == K_ESCAPE:
        return False
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        world.keys.handle_event(event)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        for link in world.click(*event.pos):
            webbrowser.open_new_tab(link)
    return True


def run(argv=None):
    args = parse_args(argv)

    pygame.init()
    pygame.display.set_caption(TITLE)
    width, height = resolve_canvas_size(args.width, args.height)
    screen = pygame.display.set_mode((width, height))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
    sprites = SpriteCache(Path(args.assets))

    world = World(width, height)
    print(f"Canvas {width}x{height} @ {args.fps} fps, assets from {args.assets}")

    while True:
        for event in pygame.event.get():
            if not handle_event(world, event):
                pygame.quit(); sys.exit()

        world.step()
        draw_world(screen, world, sprites, font)
        pygame.display.flip()
        clock.tick(args.fps)


if __name__ == "__main__":
    run()
