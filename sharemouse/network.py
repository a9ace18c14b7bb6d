"""UDP transport for mouse events between the sending and receiving machines."""

from __future__ import annotations

import asyncio
import ipaddress
import logging
from typing import AsyncIterable

from .config import Config
from .event import DecodeError, MouseEvent, decode, encode

log = logging.getLogger(__name__)

RECV_BUFFER_SIZE = 4096


class _SenderProtocol(asyncio.DatagramProtocol):
    def __init__(self, remote: str) -> None:
        self._remote = remote

    def error_received(self, exc: Exception) -> None:
        log.error("Failed to send to %s: %s", self._remote, exc)


class NetworkSender:
    """Sends every event from a stream to the configured remote over UDP."""

    def __init__(self, config: Config) -> None:
        self.config = config

    def _remote_address(self) -> tuple[str, int]:
        try:
            address = ipaddress.ip_address(self.config.remote_ip)
        except ValueError:
            raise ValueError(
                f"invalid remote address {self.config.remote_ip}:{self.config.remote_port}"
            ) from None
        return str(address), self.config.remote_port

    async def start(self, events: AsyncIterable[MouseEvent]) -> None:
        """Send events until the stream is exhausted."""
        host, port = self._remote_address()
        remote = f"{host}:{port}"
        bind_host = "::" if ":" in host else "0.0.0.0"
        log.info("NetworkSender starting, will send to %s", remote)

        loop = asyncio.get_running_loop()
        transport, _ = await loop.create_datagram_endpoint(
            lambda: _SenderProtocol(remote), local_addr=(bind_host, 0)
        )
        try:
            local = transport.get_extra_info("sockname")
            log.info("UDP socket bound to %s, will send to %s", local, remote)
            async for event in events:
                log.info("NetworkSender received event: %r", event)
                data = encode(event)
                transport.sendto(data, (host, port))
                log.info("Sent %d bytes to %s", len(data), remote)
        finally:
            transport.close()


class _ReceiverProtocol(asyncio.DatagramProtocol):
    def __init__(self, events: asyncio.Queue, done: asyncio.Future) -> None:
        self._events = events
        self._done = done

    def datagram_received(self, data: bytes, addr: tuple) -> None:
        payload = data[:RECV_BUFFER_SIZE]
        log.debug("Received %d bytes from %s", len(payload), addr)
        log.debug("Raw bytes: %r", payload)
        try:
            event = decode(payload)
        except DecodeError as exc:
            log.warning("Failed to deserialize network event: %s", exc)
            log.debug(
                "Attempting to deserialize as string: %r",
                payload.decode("utf-8", errors="replace"),
            )
            return
        log.debug("Parsed event: %r", event)
        self._events.put_nowait(event)

    def error_received(self, exc: Exception) -> None:
        log.error("UDP receive error: %s", exc)

    def connection_lost(self, exc: Exception | None) -> None:
        if self._done.done():
            return
        if exc is None:
            self._done.set_result(None)
        else:
            self._done.set_exception(exc)


class NetworkReceiver:
    """Listens for events over UDP and puts each decoded one on a queue."""

    def __init__(self, port: int, host: str = "0.0.0.0") -> None:
        self.port = port
        self.host = host
        self.local_address: tuple | None = None
        self.listening = asyncio.Event()

    async def start(self, events: asyncio.Queue) -> None:
        """Receive events until cancelled or the socket is closed."""
        loop = asyncio.get_running_loop()
        done: asyncio.Future = loop.create_future()
        transport, _ = await loop.create_datagram_endpoint(
            lambda: _ReceiverProtocol(events, done), local_addr=(self.host, self.port)
        )
        try:
            self.local_address = transport.get_extra_info("sockname")
            log.info("UDP receiver listening on %s", self.local_address)
            self.listening.set()
            await done
        finally:
            transport.close()