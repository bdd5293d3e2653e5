from __future__ import annotations
import logging
import time
from pathlib import Path
from typing import Optional
import pygame

from holetap.api.config import EngineConfig
from holetap.api.frame_data import FrameData
from holetap.app.context import Context
from holetap.app.loader import GAMES_DIR, game_root_for, load_game_manifest, load_game_module
from holetap.calib.homography import HomographyStore
from holetap.input.laser_pointer import open_laser_pointer
from holetap.input.mouse_pointer import MousePointer

log = logging.getLogger(__name__)

FPS = 60


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    input_mode: str = "mouse",
    cam_index: int = 0,
    calibration: Optional[Path] = None,
    mirror: bool = False,
    seed: Optional[int] = None,
    mute: bool = False,
    best_file: Optional[Path] = None,
    games_dir: Path = GAMES_DIR,
):
    cfg = EngineConfig(
        screen_size=screen_size,
        input_mode=input_mode,
        cam_index=cam_index,
        calibration=calibration,
        mirror=mirror,
        seed=seed,
        mute=mute,
        best_file=best_file,
    )

    # load game before opening any window so a bad id fails fast
    game_root = game_root_for(game_id, games_dir)
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(f"Laser Platform - {manifest.get('title', game_id)}")
    screen = pygame.display.set_mode(screen_size)
    clock = pygame.time.Clock()

    # mouse/touch always works; the laser is an extra source on top
    mouse = MousePointer(screen_size, mirror=mirror)
    laser = None
    if input_mode == "laser":
        H = HomographyStore(calibration).load()
        if H is None:
            log.warning("No camera calibration found; mapping the full camera frame to the screen")
        laser = open_laser_pointer(cam_index, screen_size, H, mirror=mirror)
        if laser is None:
            log.error("Laser input unavailable, falling back to mouse/touch")

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not mirror else pygame.Surface(
        screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        screen_size=screen_size,
        game_root=game_root,
    )

    game.on_load(ctx, manifest)

    running = True
    try:
        while running:
            dt = clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif not mouse.handle_pygame_event(event):
                    game.on_event(event)

            pointers = mouse.poll()
            if laser is not None:
                pointers.extend(laser.poll())
            frame_data = FrameData(timestamp=time.time(), pointers=pointers)

            # ---- draw to render_surface ----
            render_surface.fill((12, 14, 18))
            game.on_update(dt, frame_data)
            game.on_draw(render_surface)

            # ---- present to window ----
            if mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        if laser is not None:
            laser.close()
        mouse.close()
        game.on_unload()
        pygame.quit()
