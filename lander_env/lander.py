import numpy as np
import gymnasium as gym
from gymnasium import logger, spaces

from .settings import *
from .game import LanderGame
from .profiles import DEFAULT_PROFILE, get_profile
from .state import InputState
from .visualizer import LanderVisualizer


class KeyboardLander(gym.Env):
    metadata = {'render_modes': ['human', 'rgb_array'], 'render_fps': FPS}

    def __init__(self, render_mode=None, profile=DEFAULT_PROFILE, texture_path=None):
        if isinstance(profile, str):
            profile = get_profile(profile)
        self.render_mode = render_mode
        self.profile = profile
        self.texture_path = texture_path
        self.game = LanderGame(profile)

        # Initialize Visualizer
        self.visualizer = LanderVisualizer(self)

        # Observation Space: x, y, vertical speed, horizontal speed, tilt, fuel
        # Tilt is unbounded and fuel can dip below zero.
        self.observation_space = spaces.Box(
            low=-np.inf, high=np.inf, shape=(6,), dtype=np.float32
        )

        # Action Space: the four arrow keys (up, down, left, right)
        self.action_space = spaces.MultiBinary(4)

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self.game = LanderGame(self.profile)

        if self.texture_path is not None:
            self.visualizer.request_texture(self.texture_path, self.game.on_texture_loaded)

        return self._observation(), self._info()

    def step(self, action):
        if self.game.game_over:
            logger.warn(
                "You are calling 'step()' even though the lander is already lost. "
                "The state will not change; call 'reset()' to start again."
            )

        # 1. Keys held for this frame
        self.game.set_inputs(InputState.from_action(action))

        # 2. Fixed frame time
        self.game.tick(1000.0 / FPS)

        # No scoring: the only signal is whether the lander is lost.
        terminated = self.game.game_over
        return self._observation(), 0.0, terminated, False, self._info()

    def render(self):
        # Delegate rendering to the Visualizer class
        return self.visualizer.render(self.render_mode)

    def close(self):
        self.visualizer.close()

    def _observation(self):
        ship = self.game.ship
        return np.array([
            ship.x,
            ship.y,
            ship.vertical_speed,
            ship.horizontal_speed,
            ship.tilt,
            ship.fuel,
        ], dtype=np.float32)

    def _info(self):
        return {
            "status": self.game.status.value,
            "readouts": self.game.snapshot().readouts,
        }
