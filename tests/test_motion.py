import math

import pytest

from glsketches.coords import pol2cart
from glsketches.motion import CircularMotion, ProjectileMotion, RollingCube, SpringMotion


def test_rolling_cube_at_rest_sits_half_its_size_up():
    cube = RollingCube(50.0, 100.0)
    x, y = cube.step()
    assert x == 0.0
    assert y == pytest.approx(25.0)


def test_rolling_cube_forward_step_moves_and_tips():
    cube = RollingCube(50.0, 100.0)
    cube.handle_key("w")
    x, _ = cube.step()
    assert x == pytest.approx(50.0 / 100.0)
    assert cube.vertical == pytest.approx(-math.pi / 200)


def test_rolling_cube_full_roll_covers_its_size():
    cube = RollingCube(50.0, 100.0)
    cube.handle_key("w")
    for _ in range(100):
        x, y = cube.step()
    assert x == pytest.approx(50.0)
    assert cube.vertical == pytest.approx(-math.pi / 2)
    assert y == pytest.approx(25.0, abs=1e-6)


def test_rolling_cube_height_stays_between_face_and_edge():
    cube = RollingCube(40.0, 30.0)
    cube.handle_key("w")
    for _ in range(200):
        _, y = cube.step()
        assert 20.0 - 1e-9 <= y <= 20.0 * math.sqrt(2) + 1e-9


def test_rolling_cube_backwards_moves_negative():
    cube = RollingCube()
    cube.handle_key("s")
    cube.handle_key("s")
    x, _ = cube.step()
    assert x == pytest.approx(-2 * cube.size / cube.move_rate)
    assert cube.vertical > 0


def test_rolling_cube_pause_freezes_position():
    cube = RollingCube()
    cube.handle_key("w")
    before = cube.step()
    cube.handle_key(" ")
    assert cube.step() == before
    assert cube.playing is False


def test_rolling_cube_stop_and_reset():
    cube = RollingCube()
    cube.handle_key("w")
    cube.step()
    cube.handle_key("e")
    assert cube.direction == 0
    cube.handle_key("r")
    assert cube.position == (0.0, 0.0)
    assert cube.vertical == 0.0


def test_rolling_cube_quit_and_camera_keys():
    cube = RollingCube()
    before = math.dist(cube.camera.position(), (0, 0, 0))
    cube.handle_key("o")
    after = math.dist(cube.camera.position(), (0, 0, 0))
    assert after == pytest.approx(before + 2)
    cube.handle_key("q")
    assert cube.running is False


def test_rolling_cube_rejects_zero_move_rate():
    with pytest.raises(ValueError):
        RollingCube(50.0, 0.0)


def test_circular_motion_initial_state():
    motion = CircularMotion()
    assert motion.body.cart(0) == motion.start
    assert motion.body.pol(1) == pytest.approx(
        (motion.speed, motion.speed_horizontal, motion.speed_vertical)
    )
    assert motion.accel_norm == pytest.approx(motion.speed**2 / motion.start[0])


def test_circular_motion_acceleration_points_to_centre():
    motion = CircularMotion()
    for _ in range(20):
        position = motion.step()
        accel = motion.body.cart(2)
        assert math.hypot(*accel) == pytest.approx(motion.accel_norm)
        assert sum(a * p for a, p in zip(accel, position)) < 0


def test_circular_motion_stays_in_plane():
    motion = CircularMotion()
    for _ in range(50):
        position = motion.step()
    assert position[1] == pytest.approx(0.0, abs=1e-9)


def test_circular_motion_reset_restores_start():
    motion = CircularMotion()
    for _ in range(10):
        motion.step()
    motion.reset()
    assert motion.body.cart(0) == motion.start
    assert motion.body.cart(1) == pytest.approx(pol2cart(*motion.body.pol(1)))


def test_projectile_gravity_slows_rise():
    motion = ProjectileMotion()
    before = motion.body.cart(1)
    motion.step()
    after = motion.body.cart(1)
    assert after[1] - before[1] == pytest.approx(-motion.gravity)
    assert after[0] == pytest.approx(before[0])
    assert after[2] == pytest.approx(before[2])


def test_projectile_position_gains_new_velocity():
    motion = ProjectileMotion()
    position = motion.step()
    velocity = motion.body.cart(1)
    expected = tuple(s + v for s, v in zip(motion.start, velocity))
    assert position == pytest.approx(expected)


def test_projectile_eventually_falls():
    motion = ProjectileMotion()
    heights = [motion.step()[1] for _ in range(40)]
    assert max(heights) > 0
    assert heights[-1] < 0


def test_projectile_reset_restores_start():
    motion = ProjectileMotion()
    for _ in range(5):
        motion.step()
    motion.reset()
    assert motion.body.cart(0) == motion.start
    assert motion.body.cart(2) == pytest.approx((0.0, -motion.gravity, 0.0))


def test_spring_first_step_uses_initial_speed():
    motion = SpringMotion()
    position = motion.step()
    assert position == pytest.approx((motion.start_speed, 0.0, 0.0))


def test_spring_force_pulls_back_to_origin():
    motion = SpringMotion()
    for _ in range(7):
        x, _, _ = motion.step()
        assert motion.body.force_cart() == pytest.approx((-x, 0.0, 0.0))
        assert motion.body.cart(2) == pytest.approx((-x / motion.mass, 0.0, 0.0))


def test_spring_oscillates_through_origin():
    motion = SpringMotion()
    xs = [motion.step()[0] for _ in range(100)]
    assert max(xs) > 0
    assert min(xs) < 0
    assert all(motion.body.cart(0)[i] == 0.0 for i in (1, 2))