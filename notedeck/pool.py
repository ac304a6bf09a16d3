"""A pool of relay connections."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from .client_message import ClientMessage
from .errors import NostrError
from .relay import Connector, Relay, RelayStatus, Wakeup, WebSocketConnection
from .relay_message import WsEvent, WsEventKind, WsMessage, WsMessageKind

log = logging.getLogger(__name__)

_INITIAL_RECONNECT_SECONDS = 2.0
_DEFAULT_PING_RATE = 25.0


@dataclass(frozen=True)
class PoolEvent:
    """A websocket event together with the URL of the relay it came from."""

    relay: str
    event: WsEvent


@dataclass
class PoolRelay:
    """A relay with its keepalive and reconnect bookkeeping (seconds)."""

    relay: Relay
    last_ping: float
    last_connect_attempt: float
    retry_connect_after: float = _INITIAL_RECONNECT_SECONDS

    @staticmethod
    def initial_reconnect_duration() -> float:
        return _INITIAL_RECONNECT_SECONDS


class RelayPool:
    """Relays that are sent to together and polled in order."""

    def __init__(
        self,
        connector: Connector = WebSocketConnection,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.relays: list[PoolRelay] = []
        self.ping_rate = _DEFAULT_PING_RATE
        self._connector = connector
        self._clock = clock

    def set_ping_rate(self, seconds: float) -> RelayPool:
        self.ping_rate = seconds
        return self

    def has(self, url: str) -> bool:
        return any(pool_relay.relay.url == url for pool_relay in self.relays)

    def send(self, cmd: ClientMessage) -> None:
        for pool_relay in self.relays:
            pool_relay.relay.send(cmd)

    def keepalive_ping(self, wakeup: Wakeup) -> None:
        """Ping connected relays that are due and retry disconnected ones with backoff."""
        for pool_relay in self.relays:
            now = self._clock()
            relay = pool_relay.relay

            if relay.status is RelayStatus.DISCONNECTED:
                reconnect_at = pool_relay.last_connect_attempt + pool_relay.retry_connect_after
                if now > reconnect_at:
                    pool_relay.last_connect_attempt = now
                    millis = round(pool_relay.retry_connect_after * 1000)
                    next_duration = int(millis * 1.5) / 1000
                    log.debug(
                        "bumping reconnect duration from %ss to %ss and retrying connect",
                        pool_relay.retry_connect_after,
                        next_duration,
                    )
                    pool_relay.retry_connect_after = next_duration
                    try:
                        relay.connect(wakeup)
                    except NostrError as err:
                        log.error("error connecting to relay: %s", err)

            elif relay.status is RelayStatus.CONNECTED:
                pool_relay.retry_connect_after = PoolRelay.initial_reconnect_duration()
                if now - pool_relay.last_ping > self.ping_rate:
                    log.debug("pinging %s", relay.url)
                    relay.ping()
                    pool_relay.last_ping = self._clock()

    def send_to(self, cmd: ClientMessage, relay_url: str) -> None:
        for pool_relay in self.relays:
            if pool_relay.relay.url == relay_url:
                pool_relay.relay.send(cmd)
                return

    def add_url(self, url: str, wakeup: Wakeup) -> None:
        relay = Relay(url, wakeup, connector=self._connector)
        now = self._clock()
        self.relays.append(PoolRelay(relay, last_ping=now, last_connect_attempt=now))

    def try_recv(self) -> PoolEvent | None:
        """Return the first pending event from the relays in order, or None."""
        for pool_relay in self.relays:
            relay = pool_relay.relay
            event = relay.connection.try_recv()
            if event is None:
                continue

            if event.kind is WsEventKind.OPENED:
                relay.status = RelayStatus.CONNECTED
            elif event.kind is WsEventKind.CLOSED:
                relay.status = RelayStatus.DISCONNECTED
            elif event.kind is WsEventKind.ERROR:
                log.error("%s", event.error)
                relay.status = RelayStatus.DISCONNECTED
            elif event.message is not None and event.message.kind is WsMessageKind.PING:
                log.debug("pong %s", relay.url)
                relay.connection.send(WsMessage(WsMessageKind.PONG, event.message.data))

            return PoolEvent(relay=relay.url, event=event)

        return None