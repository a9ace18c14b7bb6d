"""Virtual pointer tracking across the host and remote screens."""

from __future__ import annotations

from dataclasses import dataclass

from .config import Config, HostPosition


def _clamp(target: float, maximum: float) -> float:
    return min(max(target, 0.0), maximum)


def _local_x_to_virtual(config: Config, x: float) -> float:
    if config.host_position is HostPosition.RIGHT:
        return config.remote_screen.width + x
    return x


@dataclass
class VirtualModel:
    """Pointer position on the virtual desktop spanning both screens."""

    virtual_x: float = 0.0
    virtual_y: float = 0.0

    def init(self, config: Config, x: float, y: float) -> None:
        """Place the pointer at a local host position."""
        self.virtual_x = _local_x_to_virtual(config, x)
        self.virtual_y = y

    def in_host(self, config: Config) -> bool:
        """Whether the virtual x lies at or beyond the host/remote boundary."""
        if config.host_position is HostPosition.RIGHT:
            return config.remote_screen.width <= self.virtual_x
        return config.screen.width <= self.virtual_x

    def crop(self, config: Config, x: float, y: float) -> tuple[float, float]:
        """Clamp a virtual position to the combined width and the remote height."""
        total_width = config.screen.width + config.remote_screen.width
        return _clamp(x, total_width), _clamp(y, config.remote_screen.height)

    def update(self, config: Config, x: float, y: float) -> None:
        """Apply a local pointer reading to the virtual position."""
        if self.in_host(config):
            self.virtual_x = _local_x_to_virtual(config, x)
            self.virtual_y = y
            return
        center_x, center_y = config.host_center()
        self.virtual_x, self.virtual_y = self.crop(
            config,
            self.virtual_x + (x - center_x),
            self.virtual_y + (y - center_y),
        )

    def receiver_position(self, config: Config) -> tuple[float, float]:
        """Position to send to the receiving machine."""
        if config.host_position is HostPosition.RIGHT:
            return self.virtual_x, self.virtual_y
        return self.virtual_x - config.screen.width, self.virtual_y