import pygame
import math
import numpy as np
import random
from gymnasium import logger

from .settings import *
from .state import GameStatus, Loaded, UNLOADED


def load_texture(path):
    """Load a ship sprite. Any failure degrades to UNLOADED (placeholder drawing)."""
    try:
        return Loaded(pygame.image.load(path))
    except (FileNotFoundError, pygame.error) as e:
        logger.warn(f"Could not load ship texture '{path}' ({e}); drawing placeholder instead.")
        return UNLOADED


class LanderVisualizer:
    def __init__(self, env):
        self.env = env
        self.screen = None
        self.surface = None
        self.clock = None
        self.font = None
        self.stars = []
        self.last_frame_ms = 0

    def request_texture(self, path, on_loaded):
        """Loads the sprite and hands the result to `on_loaded` exactly once."""
        on_loaded(load_texture(path))

    def init_window(self, mode):
        """Initializes fonts, the drawing surface and static stars."""
        if self.font is None:
            pygame.font.init()
            self.font = pygame.font.SysFont("Arial", 18)

        if mode == "human" and self.screen is None:
            pygame.init()
            pygame.display.init()
            flags = pygame.RESIZABLE if self.env.game.profile.resizable else 0
            width, height = self.env.game.snapshot().viewport
            self.screen = pygame.display.set_mode((width, height), flags)
            self.clock = pygame.time.Clock()

        if not self.stars:
            for _ in range(150):
                self.stars.append((random.random(), random.random(), random.randint(1, 2)))

    def _target(self, mode, viewport):
        if mode == "human":
            # Resizable windows hand back a new display surface after a resize.
            self.screen = pygame.display.get_surface()
            return self.screen
        if self.surface is None or self.surface.get_size() != viewport:
            self.surface = pygame.Surface(viewport)
        return self.surface

    def render(self, mode="human"):
        """Draws the current frame of the game."""
        if mode is None:
            return None
        self.init_window(mode)

        snap = self.env.game.snapshot()
        canvas = self._target(mode, snap.viewport)
        self.draw(canvas, snap)

        # Display
        if mode == "human":
            pygame.event.pump()
            self.last_frame_ms = self.clock.tick(FPS)
            pygame.display.flip()
        elif mode == "rgb_array":
            return np.transpose(pygame.surfarray.array3d(canvas), axes=(1, 0, 2))

    def draw(self, canvas, snap):
        """Draws one RenderSnapshot onto `canvas`. Reads nothing but `snap`."""
        if self.font is None:
            self.init_window(None)
        width, height = snap.viewport

        # --- 1. BACKGROUND ---
        canvas.fill(SKY_COLOR)
        for fx, fy, radius in self.stars:
            pygame.draw.circle(canvas, (255, 255, 255), (int(fx * width), int(fy * height)), radius)

        # Ground sits at world y = 0
        ground_y = min(int(snap.ground_y), height - 4)
        pygame.draw.rect(canvas, GROUND_COLOR, (0, ground_y, width, height - ground_y))

        # --- 2. LANDING AREAS ---
        for pad in snap.landing_areas:
            rect = (int(pad.x - pad.width / 2), int(pad.y) - 6, max(1, int(pad.width)), 6)
            pygame.draw.rect(canvas, PAD_COLOR, rect)
            label = self.font.render(f"x{pad.score}", True, PAD_COLOR)
            canvas.blit(label, (int(pad.x) - label.get_width() // 2, int(pad.y) - 28))

        # --- 3. SHIP & HUD ---
        self._draw_ship(canvas, snap)
        self._draw_hud(canvas, snap)

    def _draw_ship(self, canvas, snap):
        if isinstance(snap.texture, Loaded):
            sprite = pygame.transform.scale(
                snap.texture.surface, (max(1, int(snap.width)), max(1, int(snap.height)))
            )
            sprite = pygame.transform.rotate(sprite, -snap.tilt)
            canvas.blit(sprite, sprite.get_rect(center=(int(snap.x), int(snap.y))))
        else:
            self._draw_placeholder(canvas, snap)

        if snap.thrusting:
            self._draw_exhaust(canvas, snap)

    def _rotate(self, snap, local_x, local_y):
        # local y points to the nose; positive tilt turns the nose clockwise on screen
        a = math.radians(snap.tilt)
        sx = snap.x + local_x * math.cos(a) + local_y * math.sin(a)
        sy = snap.y - (-local_x * math.sin(a) + local_y * math.cos(a))
        return (sx, sy)

    def _draw_placeholder(self, canvas, snap):
        """Simple triangle hull with two legs."""
        half_w = snap.width / 2
        half_h = snap.height / 2

        hull = [
            self._rotate(snap, 0, half_h),
            self._rotate(snap, half_w, -half_h * 0.4),
            self._rotate(snap, -half_w, -half_h * 0.4),
        ]
        pygame.draw.polygon(canvas, SHIP_COLOR, hull)
        pygame.draw.polygon(canvas, SHIP_OUTLINE, hull, 2)

        for side in (-1, 1):
            leg = [
                self._rotate(snap, side * half_w * 0.6, -half_h * 0.4),
                self._rotate(snap, side * half_w, -half_h),
            ]
            pygame.draw.line(canvas, SHIP_COLOR, leg[0], leg[1], 2)

    def _draw_exhaust(self, canvas, snap):
        half_w = snap.width / 2
        half_h = snap.height / 2

        # Flicker
        t = pygame.time.get_ticks() * 0.05
        flame_len = half_h * (1.0 + 0.2 * math.sin(t))

        points = [
            self._rotate(snap, -half_w * 0.3, -half_h * 0.4),
            self._rotate(snap, half_w * 0.3, -half_h * 0.4),
            self._rotate(snap, 0, -half_h * 0.4 - flame_len),
        ]
        pygame.draw.polygon(canvas, FLAME_COLOR, points)

    def _draw_hud(self, canvas, snap):
        r = snap.readouts
        texts = [
            f"Vertical speed: {r['vertical_speed']} m/s",
            f"Horizontal speed: {r['horizontal_speed']} m/s",
            f"Altitude: {r['altitude']} m",
            f"Tilt: {r['tilt']} deg",
            f"Fuel: {r['fuel']} kg",
        ]

        for i, t in enumerate(texts):
            label = self.font.render(t, True, HUD_COLOR)
            canvas.blit(label, (10, 10 + (i * 20)))

        if snap.status is GameStatus.LOST:
            width, height = snap.viewport
            label = self.font.render("LOST", True, LOST_COLOR)
            canvas.blit(label, label.get_rect(center=(width // 2, height // 2)))

    def close(self):
        if self.screen is not None:
            pygame.display.quit()
            pygame.quit()
            self.screen = None
        if self.font is not None:
            pygame.font.quit()
            self.font = None
        self.surface = None
