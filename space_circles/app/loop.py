from __future__ import annotations
import logging
import time
from pathlib import Path
from typing import Optional
import pygame

from space_circles.api.config import EngineConfig
from space_circles.api.frame_data import FrameData
from space_circles.app.context import Context
from space_circles.app.loader import GAMES_DIR, load_game_manifest, load_game_module
from space_circles.input.pointer_input import PointerInput
from space_circles.storage import FileStore, MemoryStore

log = logging.getLogger(__name__)

BORDER_COLOR = (5, 30, 70)

_HIDE_EVENTS = (pygame.WINDOWHIDDEN, pygame.WINDOWMINIMIZED)
_SHOW_EVENTS = (pygame.WINDOWSHOWN, pygame.WINDOWRESTORED)


def make_store(cfg: EngineConfig):
    if not cfg.persist:
        return MemoryStore()
    return FileStore(profile=cfg.profile)


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    fps: int = 60,
    mirror: bool = False,
    profile: str = "default",
    persist: bool = True,
    games_dir: Optional[Path] = None,
):
    cfg = EngineConfig(
        screen_size=screen_size,
        fps=fps,
        mirror=mirror,
        profile=profile,
        persist=persist,
    )

    # load game before opening a window so a broken plugin fails fast
    game_root = (games_dir or GAMES_DIR) / game_id
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(manifest.get("name", game_id))
    screen = pygame.display.set_mode(screen_size, pygame.RESIZABLE)
    clock = pygame.time.Clock()

    input_layer = PointerInput(cfg)

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not mirror else pygame.Surface(screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        resources={"store": make_store(cfg)},
        screen_size=screen_size,
    )

    game.on_load(ctx, manifest)
    log.info("loaded %s (%dx%d)", game_id, *screen_size)

    visible = True
    running = True
    try:
        while running:
            dt = clock.tick(cfg.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.get_surface()
                    size = screen.get_size()
                    render_surface = screen if not mirror else pygame.Surface(size).convert()
                    ctx.screen = render_surface
                    ctx.screen_size = size
                    game.on_resize(size)
                elif event.type in _HIDE_EVENTS:
                    if visible:
                        log.debug("window hidden")
                    visible = False
                elif event.type in _SHOW_EVENTS:
                    if not visible:
                        log.debug("window visible")
                    visible = True
                input_layer.handle_pygame_event(event, ctx.screen_size)
                game.on_event(event)

            frame_data = FrameData(timestamp=time.time(),
                                   points=input_layer.drain(),
                                   visible=visible)

            # ---- draw to render_surface ----
            game.on_update(dt, frame_data)
            game.on_draw(render_surface)
            w, h = ctx.screen_size
            pygame.draw.rect(render_surface, BORDER_COLOR, (0, 0, w, h), 2)

            # ---- present to window ----
            if mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        game.on_unload()
        log.info("unloaded %s", game_id)
        pygame.quit()
