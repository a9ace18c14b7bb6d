"""Configuration for the sending side: remote address and screen layout."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

import yaml

_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFF_FFFF


class HostPosition(Enum):
    """Which side of the shared desktop the host screen sits on."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Screen:
    """Pixel dimensions of a screen."""

    width: int
    height: int


@dataclass(frozen=True)
class Config:
    """Settings for sharing the mouse with a remote machine."""

    remote_ip: str
    remote_port: int
    screen: Screen
    remote_screen: Screen
    host_position: HostPosition

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Config:
        """Build a config from parsed YAML data, raising ValueError when it is invalid."""
        if not isinstance(data, Mapping):
            raise ValueError("configuration must be a mapping")
        remote_ip = _require(data, "remote_ip")
        if not isinstance(remote_ip, str):
            raise ValueError("remote_ip must be a string")
        raw_position = _require(data, "host_position")
        try:
            host_position = HostPosition(raw_position)
        except ValueError:
            choices = ", ".join(p.value for p in HostPosition)
            raise ValueError(
                f"host_position must be one of {choices}, got {raw_position!r}"
            ) from None
        return cls(
            remote_ip=remote_ip,
            remote_port=_unsigned(_require(data, "remote_port"), "remote_port", _U16_MAX),
            screen=_screen_from(_require(data, "screen"), "screen"),
            remote_screen=_screen_from(_require(data, "remote_screen"), "remote_screen"),
            host_position=host_position,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the config as plain data, fields in declaration order."""
        return {
            "remote_ip": self.remote_ip,
            "remote_port": self.remote_port,
            "screen": {"width": self.screen.width, "height": self.screen.height},
            "remote_screen": {
                "width": self.remote_screen.width,
                "height": self.remote_screen.height,
            },
            "host_position": self.host_position.value,
        }

    def to_yaml(self) -> str:
        """Serialise the config as a YAML document."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """Read and validate a YAML config file."""
        content = Path(path).read_text(encoding="utf-8")
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid YAML in {path}: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def template(cls) -> Config:
        """Return the example configuration written by create_template."""
        return cls(
            remote_ip="192.168.1.100",
            remote_port=5000,
            screen=Screen(width=2600, height=1440),
            remote_screen=Screen(width=1920, height=1080),
            host_position=HostPosition.LEFT,
        )

    @classmethod
    def create_template(cls, path: str | Path) -> None:
        """Write the example configuration to path."""
        Path(path).write_text(cls.template().to_yaml(), encoding="utf-8")

    def host_center(self) -> tuple[float, float]:
        """Centre of the host screen in local coordinates."""
        return self.screen.width / 2.0, self.screen.height / 2.0


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _unsigned(value: Any, name: str, maximum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")
    return value


def _screen_from(data: Any, name: str) -> Screen:
    if not isinstance(data, Mapping):
        raise ValueError(f"{name} must be a mapping with width and height")
    return Screen(
        width=_unsigned(_require(data, "width"), f"{name}.width", _U32_MAX),
        height=_unsigned(_require(data, "height"), f"{name}.height", _U32_MAX),
    )