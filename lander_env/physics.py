import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from .profiles import LossPolicy
from .settings import TILT_DELTA, FUEL_PER_FRAME
from .state import Environment, GameStatus, InputState, Ship


def is_lost(ship: Ship) -> bool:
    # Touching the ground counts as a loss, as does burning past empty.
    return ship.y <= 0 or ship.fuel < 0


def _apply_tilt(ship, inputs):
    # left is checked first, so it wins when both are held
    if inputs.left:
        return replace(ship, tilt=ship.tilt - ship.tilt_speed * TILT_DELTA)
    if inputs.right:
        return replace(ship, tilt=ship.tilt + ship.tilt_speed * TILT_DELTA)
    return ship


def _apply_thrust(ship, inputs):
    if not inputs.up:
        return ship
    angle = math.radians(ship.tilt + 90)
    return replace(
        ship,
        vertical_speed=ship.vertical_speed - ship.thrust * TILT_DELTA * math.sin(angle),
        horizontal_speed=ship.horizontal_speed - ship.thrust * TILT_DELTA * math.cos(angle),
        fuel=ship.fuel - FUEL_PER_FRAME,
    )


def _apply_gravity(ship, gravity, dt):
    return replace(ship, vertical_speed=ship.vertical_speed + gravity * dt)


def _integrate(ship, dt):
    return replace(
        ship,
        y=ship.y - ship.vertical_speed * dt,
        x=ship.x - ship.horizontal_speed * dt,
    )


def step(
    ship: Ship,
    environment: Environment,
    inputs: InputState,
    delta_seconds: float,
    loss_policy: LossPolicy = LossPolicy.GROUND_OR_FUEL,
) -> Tuple[Ship, GameStatus]:
    """
    Advance the ship by one frame.

    Tilt and thrust integrate over the fixed TILT_DELTA; gravity and position
    use the real frame delta. Under GROUND_OR_FUEL a ship that is already on
    the ground (or out of fuel) is returned untouched with status LOST.
    "On the ground" includes y == 0 exactly, not only y < 0.
    """
    if loss_policy is LossPolicy.GROUND_OR_FUEL and is_lost(ship):
        return ship, GameStatus.LOST

    ship = _apply_tilt(ship, inputs)
    ship = _apply_thrust(ship, inputs)
    ship = _apply_gravity(ship, environment.gravity, delta_seconds)
    ship = _integrate(ship, delta_seconds)
    return ship, GameStatus.PLAYING


# --- Coordinate Transposition ---

def transpose(x, y, environment, clamp_margin=None):
    """World metres (origin bottom-left) -> viewport pixels (origin top-left)."""
    pixel_y = (environment.world_height - y) * (environment.viewport_height / environment.world_height)
    pixel_x = (environment.world_width - x) * (environment.viewport_width / environment.world_width)

    if clamp_margin is not None:
        pixel_x = _clamp(pixel_x, clamp_margin, environment.viewport_width - clamp_margin)
        pixel_y = _clamp(pixel_y, clamp_margin, environment.viewport_height - clamp_margin)
    return pixel_x, pixel_y


def untranspose(pixel_x, pixel_y, environment):
    """Inverse of the unclamped transpose()."""
    y = environment.world_height - pixel_y * (environment.world_height / environment.viewport_height)
    x = environment.world_width - pixel_x * (environment.world_width / environment.viewport_width)
    return x, y


def _clamp(value, lo, hi):
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def _fmt(value):
    text = f"{value:.2f}"
    # -0.001 rounds to "-0.00"; show it as plain zero
    return "0.00" if text == "-0.00" else text


def readouts(ship: Ship) -> Dict[str, str]:
    return {
        "vertical_speed": _fmt(ship.vertical_speed),
        "horizontal_speed": _fmt(ship.horizontal_speed),
        "altitude": _fmt(ship.y),
        "tilt": _fmt(ship.tilt),
        "fuel": _fmt(ship.fuel),
    }


@dataclass(frozen=True)
class PadSnapshot:
    x: float       # centre, px
    y: float       # surface, px
    width: float   # px
    score: int


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything the renderer needs for one frame, already in pixels."""
    x: float
    y: float
    width: float
    height: float
    tilt: float     # degrees
    texture: Any
    readouts: Dict[str, str]
    landing_areas: Tuple[PadSnapshot, ...]
    status: GameStatus
    viewport: Tuple[int, int]
    thrusting: bool = False   # draw the exhaust
    ground_y: float = 0.0     # pixel row of world y = 0


def render_snapshot(environment: Environment, status: GameStatus,
                    clamp_margin: Optional[int] = None) -> RenderSnapshot:
    ship = environment.ship
    scale_x = environment.viewport_width / environment.world_width
    scale_y = environment.viewport_height / environment.world_height
    px, py = transpose(ship.x, ship.y, environment, clamp_margin)
    _, ground_y = transpose(0.0, 0.0, environment)

    pads = []
    for area in environment.landing_areas:
        pad_x, pad_y = transpose(area.x, area.y, environment)
        pads.append(PadSnapshot(pad_x, pad_y, area.width * scale_x, area.score))

    return RenderSnapshot(
        x=px,
        y=py,
        width=ship.width * scale_x,
        height=ship.height * scale_y,
        tilt=ship.tilt,
        texture=ship.texture,
        readouts=readouts(ship),
        landing_areas=tuple(pads),
        status=status,
        viewport=(environment.viewport_width, environment.viewport_height),
        thrusting=environment.inputs.up and status is GameStatus.PLAYING,
        ground_y=ground_y,
    )
