import dataclasses

import pytest

from sharemouse.config import Config, HostPosition, Screen
from sharemouse.coordinate import (
    CoordinateTransformer,
    LocalCoordinate,
    VirtualCoordinate,
)
from sharemouse.event import Button, Click, Move, Scroll


@pytest.fixture
def left():
    return CoordinateTransformer(Config.template())


@pytest.fixture
def right():
    config = dataclasses.replace(Config.template(), host_position=HostPosition.RIGHT)
    return CoordinateTransformer(config)


def test_from_move_event():
    assert LocalCoordinate.from_event(Move(3.5, 4.5)) == LocalCoordinate(3.5, 4.5)


@pytest.mark.parametrize("event", [Click(Button.LEFT), Scroll(1, 2)])
def test_from_other_event_is_origin(event):
    assert LocalCoordinate.from_event(event) == LocalCoordinate(0.0, 0.0)


def test_left_local_to_virtual_is_identity(left):
    assert left.local_to_virtual(LocalCoordinate(10.0, 20.0)) == VirtualCoordinate(10.0, 20.0)


def test_right_local_to_virtual_offsets(right):
    result = right.local_to_virtual(LocalCoordinate(10.0, 20.0))
    assert result.x == right.config.remote_screen.width + 10.0
    assert result.y == 20.0


@pytest.mark.parametrize("position", list(HostPosition))
def test_virtual_local_round_trip(position):
    config = dataclasses.replace(Config.template(), host_position=position)
    transformer = CoordinateTransformer(config)
    point = LocalCoordinate(123.0, 456.0)
    assert transformer.virtual_to_local(transformer.local_to_virtual(point)) == point


def test_left_transfer_edge(left):
    width = left.config.screen.width
    assert left.is_at_transfer_edge(LocalCoordinate(width - 5.0, 0.0)) is True
    assert left.is_at_transfer_edge(LocalCoordinate(width - 6.0, 0.0)) is False


def test_right_transfer_edge(right):
    assert right.is_at_transfer_edge(LocalCoordinate(5.0, 0.0)) is True
    assert right.is_at_transfer_edge(LocalCoordinate(6.0, 0.0)) is False


def test_left_entry_position(left):
    assert left.calculate_remote_entry_position(LocalCoordinate(2599.0, 300.0)) == LocalCoordinate(5.0, 300.0)


def test_entry_position_clamps_y(left):
    entry = left.calculate_remote_entry_position(LocalCoordinate(0.0, 5000.0))
    assert entry.y == left.config.remote_screen.height - 1.0


def test_right_entry_position(right):
    entry = right.calculate_remote_entry_position(LocalCoordinate(0.0, 10.0))
    assert entry == LocalCoordinate(right.config.remote_screen.width - 5.0, 10.0)


def test_virtual_screen_size(left):
    screen, remote = left.config.screen, left.config.remote_screen
    width, height = left.get_virtual_screen_size()
    assert width == screen.width + remote.width
    assert height == max(screen.height, remote.height) == screen.height


def test_virtual_screen_size_taller_remote():
    config = dataclasses.replace(Config.template(), remote_screen=Screen(800, 2000))
    width, height = CoordinateTransformer(config).get_virtual_screen_size()
    assert height == 2000
    assert width == config.screen.width + 800