from collections import defaultdict
from unittest import mock

import pygame
import pytest

from minisolar.camera import CAMERA_SPEED, Camera
from minisolar.matrix3x2 import Matrix3x2
from minisolar.vector2 import Vector2


def keys(*held):
    return defaultdict(bool, {key: True for key in held})


def test_initial_inverted_matrix_is_identity():
    assert Camera().inverted_matrix() == Matrix3x2.identity()


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_LEFT, Vector2(-CAMERA_SPEED, 0.0)),
        (pygame.K_RIGHT, Vector2(CAMERA_SPEED, 0.0)),
        (pygame.K_UP, Vector2(0.0, CAMERA_SPEED)),
        (pygame.K_DOWN, Vector2(0.0, -CAMERA_SPEED)),
    ],
)
def test_arrow_keys_move_camera(key, expected):
    camera = Camera()
    camera.process_input(keys(key))
    assert camera.transform.position == expected


def test_opposite_keys_cancel():
    camera = Camera()
    camera.process_input(keys(pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN))
    assert camera.transform.position == Vector2(0.0, 0.0)


def test_movement_accumulates():
    camera = Camera()
    camera.process_input(keys(pygame.K_RIGHT))
    camera.process_input(keys(pygame.K_RIGHT))
    assert camera.transform.position == Vector2(2 * CAMERA_SPEED, 0.0)


def test_inverted_matrix_undoes_world_matrix():
    camera = Camera()
    camera.process_input(keys(pygame.K_LEFT, pygame.K_UP))
    product = camera.transform.world_matrix() * camera.inverted_matrix()
    for actual, expected in zip(product.as_tuple(), Matrix3x2.identity().as_tuple()):
        assert actual == pytest.approx(expected)


def test_inverted_matrix_maps_camera_position_to_origin():
    camera = Camera()
    camera.process_input(keys(pygame.K_RIGHT, pygame.K_DOWN))
    mapped = camera.inverted_matrix().transform_point(camera.transform.position)
    assert mapped.x == pytest.approx(0.0)
    assert mapped.y == pytest.approx(0.0)


def test_update_reads_keyboard():
    camera = Camera()
    with mock.patch("pygame.key.get_pressed", return_value=keys(pygame.K_UP)):
        camera.update()
    assert camera.transform.position == Vector2(0.0, CAMERA_SPEED)


def test_render_leaves_camera_unchanged():
    camera = Camera()
    camera.process_input(keys(pygame.K_LEFT))
    before = camera.inverted_matrix()
    camera.render()
    assert camera.inverted_matrix() == before
    assert camera.transform.position == Vector2(-CAMERA_SPEED, 0.0)