# sharemouse

Share one mouse between two computers placed side by side. The sending
machine tracks the pointer in a virtual space that covers both screens
and sends mouse events over UDP to the receiving machine, where they
are replayed with `ydotool`.

## Installation

```
pip install .
```

The receiving machine needs `ydotool` on its `PATH`, with its daemon
running. `sharemouse receive` checks this at start-up by running
`ydotool --help` and exits with an error if that fails.

## Configuration

Write a starting configuration file:

```
sharemouse template --config config.yaml
```

It looks like this:

```yaml
remote_ip: 192.168.1.100
remote_port: 5000
screen:
  width: 2600
  height: 1440
remote_screen:
  width: 1920
  height: 1080
host_position: left
```

- `remote_ip` must be an IPv4 or IPv6 address; host names are not
  resolved.
- `remote_port` is the receiver's UDP port (0 to 65535).
- `screen` is the size of the sending machine's display.
- `remote_screen` is the size of the receiving machine's display.
- `host_position` is `left` or `right`: where the sending machine sits
  relative to the receiving one.

A missing or ill-typed field makes `Config.load` raise `ValueError`.

## Running

On the receiving machine:

```
sharemouse receive --port 5000
```

It listens for UDP datagrams on all IPv4 interfaces, decodes each one
and replays it:

- a move becomes `ydotool mousemove -a X Y` (moves with a negative
  coordinate are ignored);
- a press becomes `ydotool click N` (1 left, 2 middle, 3 right);
  releases do nothing, since `ydotool click` already releases;
- a wheel turn becomes `ydotool click 4` when `delta_y` is positive and
  `ydotool click 5` otherwise.

Datagrams that cannot be decoded are logged and skipped.

On the sending machine:

```
sharemouse send --config config.yaml
```

`send` reads pointer input from standard input, one event per line:

```
move X Y
press BUTTON
release BUTTON
wheel DX DY
```

where `BUTTON` is `left`, `right` or `middle`. Unreadable lines are
logged and skipped; presses and releases of other buttons are not
forwarded. The first `move` line sets the starting position and sends
nothing. After that each `move` updates a `VirtualModel`, and a move
event is sent, at `VirtualModel.receiver_position`, whenever
`VirtualModel.in_host` reports `False`. Presses, releases and wheel
turns are always sent. Sending stops when standard input ends.

Set the amount of logging with `--log-level` (`trace`, `debug`, `info`,
`warn`, `warning`, `error` or `off`; default `info`), placed before the
command:

```
sharemouse --log-level debug receive
```

The command exits with status 1 on a configuration, network or
`ydotool` error, and 130 when interrupted.

## What it does not do

The package does not read the physical mouse itself: `sharemouse send`
only processes the pointer events written to its standard input, so
another program has to supply them. Replay on the receiving side works
only through `ydotool`.

## Using it as a library

```python
from sharemouse.config import Config
from sharemouse.virtual_model import VirtualModel

config = Config.template()
model = VirtualModel()
model.init(config, 100.0, 200.0)
print(model.in_host(config), model.receiver_position(config))
```

- `sharemouse.config`: `Config`, `Screen`, `HostPosition`; `Config.load`,
  `Config.from_dict`, `Config.to_dict`, `Config.to_yaml`,
  `Config.template`, `Config.create_template`, `Config.host_center`.
- `sharemouse.event`: the events `Move`, `Click`, `Release` and `Scroll`,
  `Button`, and `encode` / `decode`. The wire format is a little-endian
  `u32` tag (0 move, 1–3 press left/right/middle, 4–6 release
  left/right/middle, 7 scroll) followed by two `f64` coordinates for a
  move or two `i64` deltas for a scroll. `decode` raises `DecodeError`
  on unknown tags or truncated data.
- `sharemouse.virtual_model`: `VirtualModel`.
- `sharemouse.coordinate`: `CoordinateTransformer`, `LocalCoordinate`,
  `VirtualCoordinate`.
- `sharemouse.capturer`: `CaptureSession`, which turns `PointerMove`,
  `ButtonPress`, `ButtonRelease` and `Wheel` input into events handed
  to a callback.
- `sharemouse.network`: `NetworkSender` and `NetworkReceiver` (asyncio,
  UDP).
- `sharemouse.injector`: `YdotoolInjector`, `ydotool_commands`,
  `InjectorError`.
- `sharemouse.cli`: `main`, `build_parser`, `start_sender`,
  `start_receiver`.