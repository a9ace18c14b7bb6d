"""Turning raw pointer input into mouse events for the remote machine."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import AsyncIterable, Callable, Optional, Union

from .config import Config
from .event import Button, Click, MouseEvent, Move, Release, Scroll
from .virtual_model import VirtualModel

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointerMove:
    """The local pointer was read at an absolute position."""

    x: float
    y: float


@dataclass(frozen=True)
class ButtonPress:
    """A button went down; None stands for a button that is not forwarded."""

    button: Optional[Button]


@dataclass(frozen=True)
class ButtonRelease:
    """A button went up; None stands for a button that is not forwarded."""

    button: Optional[Button]


@dataclass(frozen=True)
class Wheel:
    """The wheel was turned."""

    delta_x: int
    delta_y: int


RawEvent = Union[PointerMove, ButtonPress, ButtonRelease, Wheel]


class CaptureSession:
    """Tracks the virtual pointer and forwards events meant for the remote screen.

    Events are handed to ``sink`` as they are produced. If ``initialize`` was not
    called, the first pointer reading fixes the starting position and emits nothing.
    """

    def __init__(
        self,
        config: Config,
        sink: Callable[[MouseEvent], None],
        model: VirtualModel | None = None,
    ) -> None:
        self.config = config
        self.model = model if model is not None else VirtualModel()
        self._sink = sink
        self._lock = threading.Lock()
        self._running = threading.Event()
        self._running.set()
        self._initialized = False

    @property
    def running(self) -> bool:
        """Whether the session still forwards events."""
        return self._running.is_set()

    def initialize(self, x: float, y: float) -> None:
        """Place the virtual pointer at a local host position."""
        with self._lock:
            self.model.init(self.config, x, y)
            self._initialized = True
        log.info("VirtualModel initialized at (%s, %s)", x, y)

    def handle(self, raw: RawEvent) -> MouseEvent | None:
        """Process one raw input event; return the event forwarded, if any."""
        if not self._running.is_set():
            return None
        match raw:
            case PointerMove(x=x, y=y):
                event = self._move(x, y)
            case ButtonPress(button=button):
                event = None if button is None else Click(button)
            case ButtonRelease(button=button):
                event = None if button is None else Release(button)
            case Wheel(delta_x=delta_x, delta_y=delta_y):
                event = Scroll(delta_x, delta_y)
            case _:
                raise TypeError(f"not a raw input event: {raw!r}")
        if event is not None:
            self._emit(event)
        return event

    def stop(self) -> None:
        """Stop forwarding events and end a running capture loop."""
        self._running.clear()

    async def run(self, raw_events: AsyncIterable[RawEvent]) -> None:
        """Handle raw events until the stream ends or the session is stopped."""
        log.info("Starting mouse capture")
        async for raw in raw_events:
            if not self._running.is_set():
                break
            self.handle(raw)
        log.info("Mouse capture stopped")

    def _move(self, x: float, y: float) -> MouseEvent | None:
        log.debug("Mouse moved to: (%s, %s)", x, y)
        with self._lock:
            if not self._initialized:
                self.model.init(self.config, x, y)
                self._initialized = True
                log.info("VirtualModel initialized at (%s, %s)", x, y)
                return None
            self.model.update(self.config, x, y)
            log.debug(
                "VirtualModel updated: (%s, %s)",
                self.model.virtual_x,
                self.model.virtual_y,
            )
            if self.model.in_host(self.config):
                return None
            remote_x, remote_y = self.model.receiver_position(self.config)
        return Move(float(remote_x), float(remote_y))

    def _emit(self, event: MouseEvent) -> None:
        try:
            self._sink(event)
        except Exception as exc:
            log.error("Failed to send mouse event: %s", exc)