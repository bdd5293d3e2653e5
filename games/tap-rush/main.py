from __future__ import annotations
import logging
import math
from typing import Optional

import pygame

from holetap.api import Game, FrameData
from holetap.app.context import Context
from holetap.core import (
    BONUS_MULTIPLIER, BestScoreStore, FeedbackEvent, FeedbackKind, GameSession, HoleType,
    RandomSource, RoundConfig, RoundSnapshot, RoundState,
)
from holetap.render.shapes import draw_alpha_circle, draw_text, ease_out_back

from .const import *
from .feedback import ToneFeedback

log = logging.getLogger(__name__)


class TapRush(Game):
    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        self.w, self.h = ctx.screen_size

        cfg = RoundConfig.from_options(manifest.get("options"))
        self.sound = ToneFeedback(enabled=not ctx.cfg.mute)
        self.session = GameSession(
            cfg=cfg,
            screen_size=ctx.screen_size,
            rng=RandomSource(ctx.cfg.seed),
            store=BestScoreStore(ctx.cfg.best_file),
            sinks=[self.sound],
        )
        self.last_end: Optional[FeedbackEvent] = None

        bw, bh = BUTTON_SIZE
        self.start_rect = pygame.Rect((self.w - bw) // 2, int(self.h * 0.68), bw, bh)
        self._vignette = self._build_vignette()

    # ------------- helpers -------------
    def _begin_round(self):
        self.last_end = None
        self.session.start()

    def _build_vignette(self) -> pygame.Surface:
        # concentric translucent rings, darkest at the edge
        surf = pygame.Surface((self.w, self.h), pygame.SRCALPHA)
        cx, cy = self.w // 2, int(self.h * 0.5)
        max_r = int(math.hypot(self.w, self.h) * 0.55)
        steps = 24
        for i in range(steps):
            r = max_r - i * (max_r // (2 * steps))
            a = int(VIGNETTE_ALPHA * (1 - i / steps) / steps * 2)
            pygame.draw.circle(surf, (0, 0, 0, a), (cx, cy), r, width=max_r // (2 * steps) + 1)
        return surf

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        for p in frame.pointers:
            if self.session.running:
                self.session.tap(p.x, p.y)
            elif self.start_rect.collidepoint(p.x, p.y):
                self._begin_round()

        for ev in self.session.tick(dt_ms):
            if ev.kind is FeedbackKind.END:
                self.last_end = ev

    def on_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key in (pygame.K_SPACE, pygame.K_RETURN) and not self.session.running:
            self._begin_round()
        elif event.key == pygame.K_s:
            on = self.sound.toggle()
            log.info("Sound %s", "on" if on else "off")

    def on_draw(self, surface: pygame.Surface) -> None:
        snap = self.session.snapshot()
        self._draw_board(surface)
        self._draw_particles(surface, snap)
        self._draw_holes(surface, snap)
        self._draw_hud(surface, snap)
        if not snap.running:
            self._draw_overlay(surface, snap)

    def on_unload(self) -> None:
        pass

    # ------------- drawing -------------
    def _draw_board(self, surface: pygame.Surface) -> None:
        surface.fill(BG_COLOR)
        surface.blit(self._vignette, (0, 0))
        frame = pygame.Surface((self.w, self.h), pygame.SRCALPHA)
        pygame.draw.rect(frame, (*FRAME_COLOR, FRAME_ALPHA),
                         (FRAME_INSET, FRAME_INSET, self.w - 2 * FRAME_INSET, self.h - 2 * FRAME_INSET),
                         width=FRAME_WIDTH)
        surface.blit(frame, (0, 0))

    def _draw_particles(self, surface: pygame.Surface, snap: RoundSnapshot) -> None:
        for p in snap.particles:
            color = PARTICLE_BONUS_COLOR if p.kind == "bonus" else PARTICLE_HIT_COLOR
            draw_alpha_circle(surface, color, (p.x, p.y), p.draw_radius, p.alpha * PARTICLE_ALPHA)

    def _draw_holes(self, surface: pygame.Surface, snap: RoundSnapshot) -> None:
        layout = self.session.layout
        size = layout.hole_size
        pop_size = layout.pop_size
        now = snap.now

        for hole in snap.holes:
            cx, cy = layout.hole_center(hole)
            rim = pygame.Rect(0, 0, int(size), int(size * 0.42))
            rim.center = (int(cx), int(cy))
            pygame.draw.ellipse(surface, HOLE_RIM_COLOR, rim)
            pygame.draw.ellipse(surface, HOLE_COLOR, rim.inflate(-10, -8))

            if hole.active:
                t = max(0.0, min(1.0, (now - hole.popped_at) / POP_DURATION_MS))
                pop = ease_out_back(t)
                if hole.type is HoleType.BONUS:
                    tw, th = pop_size * 0.95 * pop, pop_size * 0.6 * pop
                    body = pygame.Rect(0, 0, max(1, int(tw)), max(1, int(th)))
                    body.midbottom = (int(cx), int(cy + size * 0.05))
                    draw_alpha_circle(surface, BONUS_GLOW_COLOR, body.center, max(tw, th) * 0.7, 0.35)
                    pygame.draw.rect(surface, BONUS_COLOR, body, border_radius=int(th * 0.3))
                    draw_text(surface, f"x{BONUS_MULTIPLIER}", body.center, BUTTON_TEXT_COLOR, size=int(pop_size * 0.35), anchor="center")
                else:
                    tw, th = pop_size * 0.5 * pop, pop_size * 1.05 * pop
                    body = pygame.Rect(0, 0, max(1, int(tw)), max(1, int(th)))
                    body.midbottom = (int(cx), int(cy + size * 0.05))
                    draw_alpha_circle(surface, SHADOW_COLOR, (body.centerx + 8, body.centery + 10), tw * 0.6, 0.35)
                    pygame.draw.rect(surface, PRIMARY_COLOR, body, border_radius=int(tw * 0.4))
                    cap = pygame.Rect(body.x, body.y, body.w, max(1, body.h // 4))
                    pygame.draw.rect(surface, PRIMARY_CAP_COLOR, cap, border_radius=int(tw * 0.4))

                # lifetime ring (countdown)
                total = hole.active_until - hole.popped_at
                pct = max(0.0, min(1.0, (hole.active_until - now) / total)) if total > 0 else 0.0
                hx, hy = layout.hit_center(hole)
                rr = int(layout.hit_radius)
                start_angle = 0.5 * math.pi
                rect = pygame.Rect(int(hx) - rr, int(hy) - rr, rr * 2, rr * 2)
                pygame.draw.arc(surface, LIFE_RING_COLOR, rect, start_angle, start_angle + 2 * math.pi * pct, 2)

            if hole.recently_hit(now):
                a = (hole.recently_hit_until - now) / self.session.cfg.hit_flash_ms
                draw_alpha_circle(surface, HIT_FLASH_COLOR, layout.hit_center(hole), pop_size * 0.5, a, width=6)

    def _draw_hud(self, surface: pygame.Surface, snap: RoundSnapshot) -> None:
        draw_text(surface, f"TIME {snap.seconds_left}", (HUD_MARGIN + FRAME_INSET, HUD_MARGIN + FRAME_INSET),
                  HUD_COLOR, size=HUD_FONT_SIZE)
        draw_text(surface, f"SCORE {snap.score}", (self.w // 2, HUD_MARGIN + FRAME_INSET + 10),
                  HUD_COLOR, size=HUD_FONT_SIZE, anchor="center")

        if snap.multiplier > 1:
            secs = math.ceil(snap.multiplier_remaining_ms / 1000.0)
            draw_text(surface, f"x{snap.multiplier} {secs}s", (self.w // 2, HUD_MARGIN + FRAME_INSET + 40),
                      MULT_ACTIVE_COLOR, size=HUD_FONT_SIZE, anchor="center")
        else:
            draw_text(surface, "x1", (self.w // 2, HUD_MARGIN + FRAME_INSET + 40),
                      HUD_DIM_COLOR, size=HUD_FONT_SIZE, anchor="center")

        draw_text(surface, f"BEST {snap.best}", (self.w - HUD_MARGIN - FRAME_INSET, HUD_MARGIN + FRAME_INSET),
                  HUD_COLOR, size=HUD_FONT_SIZE, anchor="topright")
        if not self.sound.enabled or not self.sound.available:
            draw_text(surface, "sound off (S)", (HUD_MARGIN + FRAME_INSET, self.h - HUD_MARGIN - FRAME_INSET - 20),
                      HUD_DIM_COLOR, size=20)

    def _draw_overlay(self, surface: pygame.Surface, snap: RoundSnapshot) -> None:
        pw, ph = PANEL_SIZE
        panel = pygame.Surface((pw, ph), pygame.SRCALPHA)
        pygame.draw.rect(panel, (*PANEL_COLOR, PANEL_ALPHA), panel.get_rect(), border_radius=18)
        panel_rect = panel.get_rect(center=(self.w // 2, int(self.h * 0.42)))
        surface.blit(panel, panel_rect)

        if snap.state is RoundState.Ended and self.last_end is not None:
            draw_text(surface, "Game over", (panel_rect.centerx, panel_rect.top + 45),
                      HUD_COLOR, size=TITLE_FONT_SIZE, anchor="center")
            draw_text(surface, f"Score: {self.last_end.score}", (panel_rect.centerx, panel_rect.top + 110),
                      HUD_COLOR, size=BIG_FONT_SIZE, anchor="center")
            best_line = "New best!" if self.last_end.new_best else f"Best: {self.last_end.best}"
            draw_text(surface, best_line, (panel_rect.centerx, panel_rect.top + 160),
                      MULT_ACTIVE_COLOR if self.last_end.new_best else HUD_DIM_COLOR,
                      size=BIG_FONT_SIZE, anchor="center")
            label = "PLAY AGAIN"
        else:
            draw_text(surface, self.manifest.get("title", "Tap Rush"), (panel_rect.centerx, panel_rect.top + 60),
                      HUD_COLOR, size=TITLE_FONT_SIZE, anchor="center")
            draw_text(surface, "Tap the targets before they hide", (panel_rect.centerx, panel_rect.top + 130),
                      HUD_DIM_COLOR, size=28, anchor="center")
            label = "START"

        pygame.draw.rect(surface, BUTTON_COLOR, self.start_rect, border_radius=14)
        draw_text(surface, label, self.start_rect.center, BUTTON_TEXT_COLOR, size=BIG_FONT_SIZE, anchor="center")


def get_game():
    return TapRush()
