import math

import pytest

from glsketches.camera import CAMERA_HOME, ArrowScene, OrbitCamera
from glsketches.coords import cart2pol, pol2cart
from glsketches.shapes import Mode


def _home():
    return list(pol2cart(*CAMERA_HOME))


def test_camera_starts_at_home():
    cam = OrbitCamera()
    assert list(cam.position()) == pytest.approx(_home(), abs=1e-9)


@pytest.mark.parametrize("key,sign", [("o", 1), ("u", -1)])
def test_camera_zoom_changes_distance(key, sign):
    cam = OrbitCamera()
    before = cart2pol(*cam.position())[0]
    assert cam.handle_key(key) is True
    after = cart2pol(*cam.position())[0]
    assert math.isclose(after - before, sign * 2)


@pytest.mark.parametrize("key,index,sign", [("i", 2, 1), ("k", 2, -1), ("j", 1, 1), ("l", 1, -1)])
def test_camera_angles_move_by_step(key, index, sign):
    step = 0.1
    cam = OrbitCamera(step)
    before = cart2pol(*cam.position())
    cam.handle_key(key)
    after = cart2pol(*cam.position())
    assert math.isclose(after[index] - before[index], sign * step, abs_tol=1e-9)
    assert math.isclose(after[0], before[0])


def test_camera_unknown_key_not_handled():
    cam = OrbitCamera()
    before = list(cam.position())
    assert cam.handle_key("z") is False
    assert list(cam.position()) == pytest.approx(before, abs=1e-9)


def test_camera_reset_and_r_key_return_home():
    cam = OrbitCamera()
    for key in "iijoo":
        cam.handle_key(key)
    assert list(cam.position()) != pytest.approx(_home(), abs=1e-9)
    cam.reset()
    assert list(cam.position()) == pytest.approx(_home(), abs=1e-9)
    cam.handle_key("u")
    cam.handle_key("r")
    assert list(cam.position()) == pytest.approx(_home(), abs=1e-9)


def test_arrow_scene_turns_and_resets():
    scene = ArrowScene()
    scene.handle_key("a")
    scene.handle_key("w")
    assert math.isclose(scene.horizontal, math.pi * 10 / 360)
    assert math.isclose(scene.vertical, math.pi * 10 / 360)
    scene.handle_key("d")
    scene.handle_key("d")
    assert math.isclose(scene.horizontal, -math.pi * 10 / 360)
    scene.handle_key("r")
    assert scene.horizontal == 0.0
    assert scene.vertical == 0.0


def test_arrow_scene_length_keys():
    scene = ArrowScene()
    start = scene.arrow_length
    scene.handle_key("t")
    scene.handle_key("t")
    scene.handle_key("g")
    assert scene.arrow_length == start + 1


def test_arrow_scene_quit():
    scene = ArrowScene()
    assert scene.running is True
    scene.handle_key("q")
    assert scene.running is False


def test_arrow_scene_passes_camera_keys():
    scene = ArrowScene()
    before = cart2pol(*scene.camera.position())[0]
    scene.handle_key("o")
    assert math.isclose(cart2pol(*scene.camera.position())[0], before + 2)


def test_arrow_scene_primitives_layout():
    scene = ArrowScene()
    scene.handle_key("a")
    scene.handle_key("w")
    prims = scene.primitives()
    assert [p.mode for p in prims] == [
        Mode.LINES,
        Mode.LINES,
        Mode.LINES,
        Mode.LINE_STRIP,
        Mode.LINE_STRIP,
        Mode.LINES,
        Mode.TRIANGLE_FAN,
    ]
    shaft = prims[5]
    assert list(shaft.vertices[0]) == pytest.approx([0.0, 0.0, 0.0], abs=1e-9)
    expected_tip = list(pol2cart(scene.arrow_length, scene.horizontal, scene.vertical))
    assert list(shaft.vertices[1]) == pytest.approx(expected_tip, abs=1e-9)
    guide_end = list(prims[4].vertices[1])
    expected_guide = list(pol2cart(scene.guide_radius, scene.horizontal, scene.vertical))
    assert guide_end == pytest.approx(expected_guide, abs=1e-9)
    assert prims[3].vertices[1] == prims[4].vertices[0]