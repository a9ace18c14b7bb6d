"""Conversions between host-local and virtual desktop coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from .config import Config, HostPosition
from .event import Move, MouseEvent

_EDGE_MARGIN = 5.0


@dataclass(frozen=True)
class VirtualCoordinate:
    """A point on the virtual desktop spanning both screens."""

    x: float
    y: float


@dataclass(frozen=True)
class LocalCoordinate:
    """A point on a single machine's screen."""

    x: float
    y: float

    @classmethod
    def from_event(cls, event: MouseEvent) -> LocalCoordinate:
        """Position of a move event; the origin for any other event."""
        if isinstance(event, Move):
            return cls(event.x, event.y)
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class CoordinateTransformer:
    """Maps coordinates according to the configured screen layout."""

    config: Config

    def local_to_virtual(self, local: LocalCoordinate) -> VirtualCoordinate:
        """Convert a host-local point to the virtual desktop."""
        if self.config.host_position is HostPosition.RIGHT:
            return VirtualCoordinate(local.x + self.config.remote_screen.width, local.y)
        return VirtualCoordinate(local.x, local.y)

    def virtual_to_local(self, virtual: VirtualCoordinate) -> LocalCoordinate:
        """Convert a virtual desktop point to host-local coordinates."""
        if self.config.host_position is HostPosition.RIGHT:
            return LocalCoordinate(virtual.x - self.config.remote_screen.width, virtual.y)
        return LocalCoordinate(virtual.x, virtual.y)

    def is_at_transfer_edge(self, local: LocalCoordinate) -> bool:
        """Whether the point touches the edge facing the remote screen."""
        if self.config.host_position is HostPosition.RIGHT:
            return local.x <= _EDGE_MARGIN
        return local.x >= self.config.screen.width - _EDGE_MARGIN

    def calculate_remote_entry_position(self, local: LocalCoordinate) -> LocalCoordinate:
        """Where the pointer appears on the remote screen when crossing over."""
        remote = self.config.remote_screen
        y = min(local.y, remote.height - 1.0)
        if self.config.host_position is HostPosition.RIGHT:
            return LocalCoordinate(remote.width - _EDGE_MARGIN, y)
        return LocalCoordinate(_EDGE_MARGIN, y)

    def get_virtual_screen_size(self) -> tuple[int, int]:
        """Combined width and tallest height of the side-by-side screens."""
        screen, remote = self.config.screen, self.config.remote_screen
        return screen.width + remote.width, max(screen.height, remote.height)