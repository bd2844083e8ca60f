# src/runner/render.py
from __future__ import annotations
import math
from typing import Tuple
import pygame
from .config import (
    BASE_HEIGHT, PLAYER_EYE,
    COLOR_SKY_TOP, COLOR_SKY_BOTTOM, COLOR_GROUND, COLOR_COIN, COLOR_COIN_SHEEN,
    COLOR_PLAYER, COLOR_EYE, COLOR_FG, COLOR_PANEL,
)
from .level import HOLE
from .particles import ParticlePool
from .state import SimulationState


def _lerp_color(a: Tuple[int, int, int], b: Tuple[int, int, int], t: float) -> Tuple[int, int, int]:
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


class PygameRenderer:
    """Read-only view of a SimulationState; draws one frame per call."""
    def __init__(self, surface: pygame.Surface, font: pygame.font.Font | None = None):
        self.surface = surface
        self.font = font or pygame.font.SysFont("monospace", 16, bold=True)
        self._sky: pygame.Surface | None = None

    def _sky_surface(self) -> pygame.Surface:
        size = self.surface.get_size()
        if self._sky is None or self._sky.get_size() != size:
            w, h = size
            self._sky = pygame.Surface(size)
            for y in range(h):
                color = _lerp_color(COLOR_SKY_TOP, COLOR_SKY_BOTTOM, y / max(1, h - 1))
                pygame.draw.line(self._sky, color, (0, y), (w, y))
        return self._sky

    def _draw_particles(self, pool: ParticlePool):
        for p in pool:
            r = max(1, int(p.size))
            dot = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
            pygame.draw.circle(dot, (*p.color, int(255 * p.alpha)), (r, r), r)
            self.surface.blit(dot, (int(p.x) - r, int(p.y) - r))

    def _draw_player(self, state: SimulationState):
        pl = state.player
        ground_y = state.ground_y
        # shadow stays on the ground line
        shadow = pygame.Surface((40, 8), pygame.SRCALPHA)
        shadow.fill((0, 0, 0, 82))
        self.surface.blit(shadow, (round(pl.x + 6), round(ground_y + 6)))

        body = pygame.Surface((pl.w, pl.h), pygame.SRCALPHA)
        body.fill(COLOR_PLAYER)
        pygame.draw.circle(body, COLOR_EYE, PLAYER_EYE, 6)
        if pl.rotation:
            body = pygame.transform.rotate(body, -math.degrees(pl.rotation))
        squashed_h = max(1, int(body.get_height() * (1 - pl.squish * 0.3)))
        body = pygame.transform.smoothscale(body, (body.get_width(), squashed_h))
        cx, cy = pl.center
        self.surface.blit(body, body.get_rect(center=(round(cx), round(cy))))

    def _draw_text(self, msg: str, pos: Tuple[int, int], center: bool = False):
        img = self.font.render(msg, True, COLOR_FG)
        rect = img.get_rect(center=pos) if center else img.get_rect(topleft=pos)
        self.surface.blit(img, rect)

    def draw(self, state: SimulationState):
        self.surface.blit(self._sky_surface(), (0, 0))
        ground_y = state.ground_y

        for seg in state.segments:
            if seg.seg_type == HOLE:
                continue
            top = seg.top(ground_y)
            pygame.draw.rect(self.surface, COLOR_GROUND,
                             pygame.Rect(round(seg.x), round(top), round(seg.w), round(BASE_HEIGHT + seg.h)))

        for c in state.coins:
            pygame.draw.circle(self.surface, COLOR_COIN, (round(c.x), round(c.y)), int(c.r))
            pygame.draw.circle(self.surface, COLOR_COIN_SHEEN,
                               (round(c.x - c.r * 0.28), round(c.y - c.r * 0.26)),
                               max(3, int(c.r * 0.34)))

        self._draw_particles(state.dust)
        self._draw_particles(state.sparkle)
        self._draw_player(state)

        w, h = self.surface.get_size()
        self._draw_text(f"Distance: {int(state.distance)} m", (12, 10))
        self._draw_text(f"Coins: {state.coins_collected}", (12, 30))
        self._draw_text(f"High Score: {state.high_score} m", (12, 50))

        if state.idle:
            self._draw_text("Tap or Press Space to jump and start", (w // 2, 40), center=True)
        elif state.game_over:
            panel = pygame.Rect(0, 0, 320, 150)
            panel.center = (w // 2, h // 2)
            pygame.draw.rect(self.surface, COLOR_PANEL, panel, border_radius=10)
            lines = [
                "GAME OVER",
                f"Distance: {int(state.distance)} m",
                f"Coins: {state.coins_collected}",
                f"High Score: {state.high_score} m",
                f"You {state.death_cause}" if state.death_cause else "",
            ]
            for i, msg in enumerate(lines):
                self._draw_text(msg, (panel.centerx, panel.top + 20 + i * 26), center=True)
