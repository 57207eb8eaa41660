from dataclasses import replace

from .input_tracker import set_key_down, set_key_up
from .physics import render_snapshot, step
from .profiles import DEFAULT_PROFILE
from .state import Environment, GameStatus


class LanderGame:
    """
    Holds the current snapshots and advances them one frame at a time.

    Key, resize and texture events replace the snapshot between ticks, so a
    tick always sees a complete InputState. Once LOST, ticks do nothing.
    """

    def __init__(self, profile=DEFAULT_PROFILE, environment=None):
        self.profile = profile
        self.environment = environment if environment is not None else Environment()
        self.status = GameStatus.PLAYING

    @property
    def ship(self):
        return self.environment.ship

    @property
    def inputs(self):
        return self.environment.inputs

    @property
    def game_over(self):
        return self.status is GameStatus.LOST

    # --- Events (between frames) ---
    def handle_key_down(self, key_name):
        self.environment = replace(self.environment, inputs=set_key_down(self.inputs, key_name))

    def handle_key_up(self, key_name):
        self.environment = replace(self.environment, inputs=set_key_up(self.inputs, key_name))

    def set_inputs(self, inputs):
        self.environment = replace(self.environment, inputs=inputs)

    def resize(self, width, height):
        # Only the viewport follows the window; the world never changes size.
        if not self.profile.resizable:
            return
        self.environment = replace(self.environment, viewport_width=width, viewport_height=height)

    def on_texture_loaded(self, texture):
        ship = replace(self.ship, texture=texture)
        self.environment = replace(self.environment, ship=ship)

    # --- Frame ---
    def tick(self, elapsed_ms):
        """Advance one frame of `elapsed_ms` milliseconds. Returns the status."""
        if self.game_over:
            return self.status

        ship, self.status = step(
            self.ship,
            self.environment,
            self.inputs,
            elapsed_ms / 1000.0,
            self.profile.loss_policy,
        )
        self.environment = replace(self.environment, ship=ship, last_frame_ms=elapsed_ms)
        return self.status

    def snapshot(self):
        return render_snapshot(self.environment, self.status, self.profile.clamp_margin)
