from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Tuple

from .settings import *


class GameStatus(Enum):
    PLAYING = "playing"
    LOST = "lost"


@dataclass(frozen=True)
class Unloaded:
    """No texture yet (or loading failed). The renderer draws a placeholder."""


@dataclass(frozen=True)
class Loaded:
    surface: Any  # pygame.Surface


UNLOADED = Unloaded()


@dataclass(frozen=True)
class InputState:
    """Snapshot of the four arrow keys. `down` is tracked but moves nothing."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    @classmethod
    def from_action(cls, action):
        # MultiBinary(4) order: up, down, left, right
        up, down, left, right = (bool(a) for a in action)
        return cls(up=up, down=down, left=left, right=right)


@dataclass(frozen=True)
class Ship:
    x: float = SHIP_START_X
    y: float = SHIP_START_Y
    vertical_speed: float = 0.0    # positive = falling
    horizontal_speed: float = 0.0
    height: float = SHIP_HEIGHT
    width: float = SHIP_WIDTH
    thrust: float = THRUST
    tilt: float = 0.0              # degrees, never wrapped
    tilt_speed: float = TILT_SPEED
    fuel: float = INITIAL_FUEL     # may go negative
    texture: Any = UNLOADED


@dataclass(frozen=True)
class LandingArea:
    x: float
    y: float
    width: float
    score: int


def default_landing_areas() -> Tuple[LandingArea, ...]:
    return tuple(LandingArea(x, y, w, score) for x, y, w, score in LANDING_AREAS)


@dataclass(frozen=True)
class Environment:
    world_height: float = WORLD_H
    world_width: float = WORLD_W
    viewport_height: int = VIEWPORT_H
    viewport_width: int = VIEWPORT_W
    gravity: float = GRAVITY
    last_frame_ms: float = 0.0
    ship: Ship = field(default_factory=Ship)
    inputs: InputState = field(default_factory=InputState)
    landing_areas: Tuple[LandingArea, ...] = field(default_factory=default_landing_areas)
