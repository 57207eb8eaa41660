from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .settings import CLAMP_MARGIN


class LossPolicy(Enum):
    GROUND_OR_FUEL = "ground_or_fuel"  # lost when y < 0 or fuel < 0
    NEVER = "never"                    # always playing


@dataclass(frozen=True)
class Profile:
    """
    A named configuration of the game loop.

    classic    -- Policy A: ground/fuel loss, fixed window, no clamping.
    resizable  -- Policy B: no loss rule, window follows resize events and
                  the sprite is clamped CLAMP_MARGIN pixels inside the edges.
    """
    name: str
    loss_policy: LossPolicy
    resizable: bool = False
    clamp_margin: Optional[int] = None


CLASSIC = Profile("classic", LossPolicy.GROUND_OR_FUEL)
RESIZABLE = Profile("resizable", LossPolicy.NEVER, resizable=True, clamp_margin=CLAMP_MARGIN)

PROFILES = {p.name: p for p in (CLASSIC, RESIZABLE)}
DEFAULT_PROFILE = CLASSIC


def get_profile(name):
    return PROFILES[name]
