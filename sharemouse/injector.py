"""Replaying received mouse events on the local machine."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod

from .event import Button, Click, MouseEvent, Move, Release, Scroll

log = logging.getLogger(__name__)

_I32_MAX = 2**31 - 1
_BUTTON_CODES = {Button.LEFT: 1, Button.MIDDLE: 2, Button.RIGHT: 3}
_SCROLL_UP = "4"
_SCROLL_DOWN = "5"


class InjectorError(RuntimeError):
    """Raised when an event cannot be injected."""


class MouseInjector(ABC):
    """Something that replays mouse events on this machine."""

    @abstractmethod
    def inject_event(self, event: MouseEvent) -> None:
        """Replay one event."""


def _to_i32(value: float) -> int:
    if value >= _I32_MAX:
        return _I32_MAX
    return int(value)


def ydotool_commands(event: MouseEvent) -> list[list[str]]:
    """Arguments of the ydotool invocations that replay an event, in order."""
    match event:
        case Move(x=x, y=y):
            if x >= 0.0 and y >= 0.0:
                return [["mousemove", "-a", str(_to_i32(x)), str(_to_i32(y))]]
            log.debug("Ignoring invalid coordinates (%s, %s)", x, y)
            return []
        case Click(button=button):
            return [["click", str(_BUTTON_CODES[button])]]
        case Release():
            # ydotool's click already includes the release.
            return []
        case Scroll(delta_y=delta_y):
            return [["click", _SCROLL_UP if delta_y > 0 else _SCROLL_DOWN]]
    raise TypeError(f"not a mouse event: {event!r}")


class YdotoolInjector(MouseInjector):
    """Injects events through the ydotool command."""

    def __init__(self, program: str = "ydotool") -> None:
        self.program = program
        try:
            result = subprocess.run(
                [program, "--help"], capture_output=True, check=False
            )
        except OSError as exc:
            raise InjectorError(f"ydotool not found or not executable: {exc}") from exc
        if result.returncode != 0:
            raise InjectorError("ydotool command failed")

    def inject_event(self, event: MouseEvent) -> None:
        log.info("Injecting event: %r", event)
        for args in ydotool_commands(event):
            log.debug("Running %s %s", self.program, " ".join(args))
            try:
                subprocess.run([self.program, *args], capture_output=True, check=False)
            except OSError as exc:
                raise InjectorError(f"Failed to execute ydotool: {exc}") from exc