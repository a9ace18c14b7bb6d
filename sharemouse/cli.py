"""Command line entry point: send, receive or write a template config."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from contextlib import suppress
from typing import AsyncIterable, AsyncIterator

from .capturer import (
    ButtonPress,
    ButtonRelease,
    CaptureSession,
    PointerMove,
    RawEvent,
    Wheel,
)
from .config import Config
from .event import Button, MouseEvent
from .injector import InjectorError, YdotoolInjector
from .network import NetworkReceiver, NetworkSender

log = logging.getLogger(__name__)

_END = object()

_LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 1,
}

_BUTTONS = {"left": Button.LEFT, "right": Button.RIGHT, "middle": Button.MIDDLE}

_INPUT_HELP = (
    "Pointer input is read from standard input, one event per line: "
    "'move X Y', 'press BUTTON', 'release BUTTON' or 'wheel DX DY', "
    "where BUTTON is left, right or middle."
)


def _port(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {text!r}") from None
    if not 0 <= value <= 0xFFFF:
        raise argparse.ArgumentTypeError(f"port out of range: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the sharemouse command."""
    parser = argparse.ArgumentParser(
        prog="sharemouse",
        description="A lightweight mouse sharing tool for macOS and Linux",
    )
    parser.add_argument("-l", "--log-level", default="info")
    commands = parser.add_subparsers(dest="command", required=True)

    send = commands.add_parser("send", help="capture and send mouse events", epilog=_INPUT_HELP)
    send.add_argument("-c", "--config", default="config.yaml")

    receive = commands.add_parser("receive", help="receive and replay mouse events")
    receive.add_argument("-p", "--port", type=_port, default=5000)

    template = commands.add_parser("template", help="write an example config")
    template.add_argument("-c", "--config", default="config.yaml")
    return parser


async def _drain(queue: asyncio.Queue) -> AsyncIterator[MouseEvent]:
    while (item := await queue.get()) is not _END:
        yield item


async def start_sender(config: Config, raw_events: AsyncIterable[RawEvent]) -> None:
    """Capture raw pointer input and send the resulting events to the remote."""
    queue: asyncio.Queue = asyncio.Queue()
    session = CaptureSession(config, queue.put_nowait)
    sender = NetworkSender(config)

    async def capture() -> None:
        try:
            await session.run(raw_events)
        except Exception as exc:
            log.error("Capture error: %s", exc)
        finally:
            queue.put_nowait(_END)

    task = asyncio.create_task(capture())
    try:
        await sender.start(_drain(queue))
    finally:
        session.stop()
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task


async def start_receiver(port: int) -> None:
    """Receive events on a UDP port and replay them with ydotool."""
    injector = YdotoolInjector()
    queue: asyncio.Queue = asyncio.Queue()
    receiver = NetworkReceiver(port)

    async def receive() -> None:
        try:
            await receiver.start(queue)
        except Exception as exc:
            log.error("Network receiver error: %s", exc)
        finally:
            queue.put_nowait(_END)

    task = asyncio.create_task(receive())
    try:
        while (event := await queue.get()) is not _END:
            try:
                injector.inject_event(event)
            except InjectorError as exc:
                log.error("Injection error: %s", exc)
    finally:
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task


def _parse_raw_event(line: str) -> RawEvent | None:
    words = line.split()
    if not words:
        return None
    kind, args = words[0].lower(), words[1:]
    try:
        if kind == "move" and len(args) == 2:
            return PointerMove(float(args[0]), float(args[1]))
        if kind == "press" and len(args) == 1:
            return ButtonPress(_BUTTONS.get(args[0].lower()))
        if kind == "release" and len(args) == 1:
            return ButtonRelease(_BUTTONS.get(args[0].lower()))
        if kind == "wheel" and len(args) == 2:
            return Wheel(int(args[0]), int(args[1]))
    except ValueError:
        pass
    log.warning("Ignoring unreadable input line: %r", line.rstrip("\n"))
    return None


async def _stdin_events() -> AsyncIterator[RawEvent]:
    while line := await asyncio.to_thread(sys.stdin.readline):
        raw = _parse_raw_event(line)
        if raw is not None:
            yield raw


def _configure_logging(level_name: str) -> None:
    level = _LOG_LEVELS.get(level_name.lower(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    """Run the sharemouse command; return the exit status."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)
    try:
        if args.command == "send":
            log.info("Starting Sending")
            config = Config.load(args.config)
            asyncio.run(start_sender(config, _stdin_events()))
        elif args.command == "receive":
            log.info("Start Receiving on port %d", args.port)
            asyncio.run(start_receiver(args.port))
        else:
            Config.create_template(args.config)
            log.info("Template config created at %s", args.config)
    except (OSError, ValueError, InjectorError) as exc:
        log.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())