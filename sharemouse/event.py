"""Mouse events and their compact binary wire format."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import Union

_TAG = struct.Struct("<I")
_MOVE = struct.Struct("<dd")
_SCROLL = struct.Struct("<qq")

_MOVE_TAG = 0
_CLICK_BASE = 1
_RELEASE_BASE = 4
_SCROLL_TAG = 7


class DecodeError(ValueError):
    """Raised when bytes do not hold a valid mouse event."""


class Button(Enum):
    """A mouse button; the value is its offset in the wire tag."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


@dataclass(frozen=True)
class Move:
    """Pointer moved to an absolute position."""

    x: float
    y: float


@dataclass(frozen=True)
class Click:
    """A button was pressed."""

    button: Button


@dataclass(frozen=True)
class Release:
    """A button was released."""

    button: Button


@dataclass(frozen=True)
class Scroll:
    """The wheel was turned."""

    delta_x: int
    delta_y: int


MouseEvent = Union[Move, Click, Release, Scroll]


def encode(event: MouseEvent) -> bytes:
    """Encode an event: little-endian u32 variant tag followed by its fields."""
    match event:
        case Move(x=x, y=y):
            return _TAG.pack(_MOVE_TAG) + _MOVE.pack(float(x), float(y))
        case Click(button=button):
            return _TAG.pack(_CLICK_BASE + button.value)
        case Release(button=button):
            return _TAG.pack(_RELEASE_BASE + button.value)
        case Scroll(delta_x=dx, delta_y=dy):
            try:
                payload = _SCROLL.pack(dx, dy)
            except struct.error as exc:
                raise ValueError(f"scroll deltas out of range: {dx}, {dy}") from exc
            return _TAG.pack(_SCROLL_TAG) + payload
    raise TypeError(f"not a mouse event: {event!r}")


def decode(data: bytes) -> MouseEvent:
    """Decode an event from bytes; bytes after the event are ignored."""
    view = memoryview(bytes(data))
    (tag,) = _unpack(_TAG, view, 0, "variant tag")
    offset = _TAG.size
    if tag == _MOVE_TAG:
        x, y = _unpack(_MOVE, view, offset, "Move")
        return Move(x, y)
    if _CLICK_BASE <= tag < _RELEASE_BASE:
        return Click(Button(tag - _CLICK_BASE))
    if _RELEASE_BASE <= tag < _SCROLL_TAG:
        return Release(Button(tag - _RELEASE_BASE))
    if tag == _SCROLL_TAG:
        dx, dy = _unpack(_SCROLL, view, offset, "Scroll")
        return Scroll(dx, dy)
    raise DecodeError(f"unknown event variant {tag}")


def _unpack(layout: struct.Struct, view: memoryview, offset: int, what: str) -> tuple:
    try:
        return layout.unpack_from(view, offset)
    except struct.error as exc:
        raise DecodeError(f"truncated {what}") from exc