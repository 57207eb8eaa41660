import math

import pytest

from lander_env.physics import readouts, render_snapshot, step, transpose, untranspose
from lander_env.profiles import LossPolicy
from lander_env.state import Environment, GameStatus, InputState, LandingArea, Ship

MOON = Environment(gravity=1.62)


def test_free_fall_one_frame():
    ship = Ship(y=150.0, vertical_speed=0.0, fuel=100.0)

    new_ship, status = step(ship, MOON, InputState(), 0.1)

    assert status is GameStatus.PLAYING
    assert new_ship.vertical_speed == pytest.approx(0.162)
    assert new_ship.y == pytest.approx(149.9838)
    assert new_ship.fuel == 100.0


def test_ship_on_ground_is_lost_and_frozen():
    ship = Ship(y=0.0, fuel=50.0, vertical_speed=3.0)

    new_ship, status = step(ship, MOON, InputState(up=True, left=True), 0.1)

    assert status is GameStatus.LOST
    assert new_ship == ship


def test_negative_fuel_is_lost():
    ship = Ship(y=100.0, fuel=-0.05)

    new_ship, status = step(ship, MOON, InputState(), 0.1)

    assert status is GameStatus.LOST
    assert new_ship == ship


def test_empty_but_not_negative_tank_keeps_playing():
    _, status = step(Ship(y=100.0, fuel=0.0), MOON, InputState(), 0.1)
    assert status is GameStatus.PLAYING


def test_never_policy_keeps_flying_below_ground():
    ship = Ship(y=-5.0, fuel=-1.0)

    new_ship, status = step(ship, MOON, InputState(), 0.1, LossPolicy.NEVER)

    assert status is GameStatus.PLAYING
    assert new_ship.y < ship.y


def test_left_tilt_uses_fixed_delta():
    ship = Ship(tilt=0.0, tilt_speed=90.0)

    # frame delta deliberately different from the 0.1 tilt step
    new_ship, _ = step(ship, MOON, InputState(left=True), 0.5)

    assert new_ship.tilt == pytest.approx(-9.0)


def test_right_tilt():
    new_ship, _ = step(Ship(tilt=5.0, tilt_speed=90.0), MOON, InputState(right=True), 0.016)
    assert new_ship.tilt == pytest.approx(14.0)


def test_left_wins_when_both_held():
    new_ship, _ = step(Ship(tilt=0.0, tilt_speed=90.0), MOON, InputState(left=True, right=True), 0.016)
    assert new_ship.tilt == pytest.approx(-9.0)


def test_tilt_is_not_wrapped():
    ship = Ship(tilt=355.0, tilt_speed=90.0)
    new_ship, _ = step(ship, MOON, InputState(right=True), 0.016)
    assert new_ship.tilt == pytest.approx(364.0)


def test_no_tilt_without_left_or_right():
    ship = Ship(tilt=12.5)
    new_ship, _ = step(ship, MOON, InputState(up=True, down=True), 0.016)
    assert new_ship.tilt == 12.5


def test_thrust_on_tilted_ship():
    ship = Ship(tilt=-9.0, thrust=2.0, vertical_speed=0.0, horizontal_speed=0.0)

    # zero frame delta isolates thrust from gravity
    new_ship, _ = step(ship, MOON, InputState(up=True), 0.0)

    expected_v = -2 * 0.1 * math.sin(math.radians(81))
    expected_h = -2 * 0.1 * math.cos(math.radians(81))
    assert round(new_ship.vertical_speed, 4) == round(expected_v, 4)
    assert round(new_ship.horizontal_speed, 4) == round(expected_h, 4)


@pytest.mark.parametrize("dt", [0.0, 0.016, 0.1, 1.0])
def test_thrust_burns_flat_fuel_per_frame(dt):
    new_ship, _ = step(Ship(fuel=50.0), MOON, InputState(up=True), dt)
    assert new_ship.fuel == pytest.approx(49.9)


@pytest.mark.parametrize("inputs", [
    InputState(),
    InputState(down=True),
    InputState(left=True, right=True),
])
def test_fuel_unchanged_without_thrust(inputs):
    new_ship, _ = step(Ship(fuel=50.0), MOON, inputs, 0.1)
    assert new_ship.fuel == 50.0


@pytest.mark.parametrize("dt", [0.001, 0.016, 0.1, 2.0])
def test_gravity_is_linear_in_frame_delta(dt):
    ship = Ship(vertical_speed=-4.0)
    new_ship, _ = step(ship, MOON, InputState(), dt)
    assert new_ship.vertical_speed - ship.vertical_speed == pytest.approx(1.62 * dt)


def test_down_key_is_inert():
    ship = Ship(vertical_speed=1.0, horizontal_speed=-2.0)

    with_down, _ = step(ship, MOON, InputState(down=True), 0.1)
    without, _ = step(ship, MOON, InputState(), 0.1)

    assert with_down == without


def test_horizontal_integration():
    ship = Ship(x=100.0, horizontal_speed=5.0)
    new_ship, _ = step(ship, MOON, InputState(), 0.1)
    assert new_ship.x == pytest.approx(99.5)


def test_transpose_scales_and_flips():
    env = Environment(world_width=400.0, world_height=300.0, viewport_width=800, viewport_height=600)

    assert transpose(400.0, 300.0, env) == (0.0, 0.0)
    assert transpose(0.0, 0.0, env) == (800.0, 600.0)
    assert transpose(100.0, 150.0, env) == pytest.approx((600.0, 300.0))


def test_transpose_round_trip_at_one_to_one_scale():
    env = Environment(world_width=640.0, world_height=480.0, viewport_width=640, viewport_height=480)

    for x, y in [(0.0, 0.0), (12.5, 400.25), (639.0, 1.0)]:
        assert untranspose(*transpose(x, y, env), env) == pytest.approx((x, y))


def test_clamping_keeps_sprite_on_screen():
    env = Environment(world_width=400.0, world_height=300.0, viewport_width=800, viewport_height=600)

    assert transpose(400.0, 300.0, env, clamp_margin=100) == (100, 100)
    assert transpose(-50.0, -20.0, env, clamp_margin=100) == (700, 500)
    assert transpose(200.0, 150.0, env, clamp_margin=100) == pytest.approx((400.0, 300.0))


def test_readouts_round_to_two_places():
    ship = Ship(vertical_speed=0.16234, horizontal_speed=-1.005001, y=149.98376, tilt=-9.0, fuel=99.9)

    assert readouts(ship) == {
        "vertical_speed": "0.16",
        "horizontal_speed": "-1.01",
        "altitude": "149.98",
        "tilt": "-9.00",
        "fuel": "99.90",
    }


def test_landing_areas_are_transposed_but_not_used_by_physics():
    pads = (LandingArea(100.0, 0.0, 20.0, 3),)
    env = Environment(world_width=400.0, world_height=300.0, viewport_width=800, viewport_height=600,
                      ship=Ship(x=100.0, y=0.5, vertical_speed=10.0), landing_areas=pads)

    new_ship, status = step(env.ship, env, InputState(), 0.1)
    assert status is GameStatus.PLAYING
    assert new_ship.y < 0

    snap = render_snapshot(env, GameStatus.PLAYING)
    pad = snap.landing_areas[0]
    assert (pad.x, pad.y) == pytest.approx((600.0, 600.0))
    assert pad.width == pytest.approx(40.0)
    assert pad.score == 3


def test_render_snapshot_clamps_without_touching_ship():
    env = Environment(ship=Ship(x=-100.0, y=-100.0))

    snap = render_snapshot(env, GameStatus.PLAYING, clamp_margin=100)

    assert snap.x == env.viewport_width - 100
    assert snap.y == env.viewport_height - 100
    assert env.ship.x == -100.0 and env.ship.y == -100.0


def test_readouts_never_show_negative_zero():
    r = readouts(Ship(vertical_speed=-0.001, horizontal_speed=-0.004, tilt=-0.0, y=12.0, fuel=1.0))

    assert r["vertical_speed"] == "0.00"
    assert r["horizontal_speed"] == "0.00"
    assert r["tilt"] == "0.00"
    assert readouts(Ship(vertical_speed=-0.006))["vertical_speed"] == "-0.01"


def test_snapshot_carries_thrust_and_ground_row():
    env = Environment(world_width=400.0, world_height=300.0, viewport_width=800, viewport_height=600,
                      inputs=InputState(up=True))

    snap = render_snapshot(env, GameStatus.PLAYING)
    assert snap.thrusting
    assert snap.ground_y == pytest.approx(600.0)

    assert not render_snapshot(env, GameStatus.LOST).thrusting
    assert not render_snapshot(Environment(), GameStatus.PLAYING).thrusting
