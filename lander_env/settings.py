# Configuration Constants

# Screen / Rendering
FPS = 60
VIEWPORT_W = 800
VIEWPORT_H = 600
CLAMP_MARGIN = 100   # keeps the sprite on screen in the resizable profile

## World (metres)
WORLD_W = 400.0
WORLD_H = 300.0
GRAVITY = 1.62   # Moon, m/s^2

## Ship
SHIP_START_X = 200.0
SHIP_START_Y = 150.0
SHIP_HEIGHT = 10.0
SHIP_WIDTH = 10.0
THRUST = 2.0          # m/s^2
TILT_SPEED = 90.0     # deg/s
INITIAL_FUEL = 100.0  # kg

# Tilt and thrust always integrate over this fixed step, not the frame delta.
TILT_DELTA = 0.1
FUEL_PER_FRAME = 0.1

# Landing Areas: (x, y, width, score) in metres
LANDING_AREAS = [
    (320.0, 0.0, 40.0, 1),
    (150.0, 0.0, 20.0, 3),
    (60.0, 0.0, 10.0, 5),
]

# Colors (R, G, B)
SHIP_COLOR = (192, 192, 192)        # Placeholder Silver
SHIP_OUTLINE = (40, 40, 40)
FLAME_COLOR = (255, 100, 0)
SKY_COLOR = (0, 0, 20)              # Near-black space
GROUND_COLOR = (90, 90, 90)         # Regolith Grey
PAD_COLOR = (255, 230, 0)           # Hazard Yellow
HUD_COLOR = (255, 255, 255)
LOST_COLOR = (255, 60, 60)
