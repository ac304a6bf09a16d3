"""A single relay connection."""

from __future__ import annotations

import logging
import queue
import threading
from enum import Enum
from typing import Any, Callable
from urllib.parse import urlsplit

import websocket

from .client_message import ClientMessage, ReqMessage
from .errors import NostrError
from .filters import Filter
from .relay_message import WsEvent, WsEventKind, WsMessage, WsMessageKind

log = logging.getLogger(__name__)

Wakeup = Callable[[], None]

_OPCODES = {
    WsMessageKind.TEXT: websocket.ABNF.OPCODE_TEXT,
    WsMessageKind.BINARY: websocket.ABNF.OPCODE_BINARY,
    WsMessageKind.PING: websocket.ABNF.OPCODE_PING,
    WsMessageKind.PONG: websocket.ABNF.OPCODE_PONG,
}


class RelayStatus(Enum):
    CONNECTED = "connected"
    CONNECTING = "connecting"
    DISCONNECTED = "disconnected"


class WebSocketConnection:
    """A websocket running on a background thread, polled for events."""

    def __init__(self, url: str, wakeup: Wakeup) -> None:
        try:
            parts = urlsplit(url)
            valid = parts.scheme in ("ws", "wss") and bool(parts.hostname)
        except ValueError:
            valid = False
        if not valid:
            raise NostrError(f"invalid websocket url: {url}")

        self.url = url
        self._wakeup = wakeup
        self._events: queue.SimpleQueue[WsEvent] = queue.SimpleQueue()
        self._app = websocket.WebSocketApp(
            url,
            on_open=self._on_open,
            on_message=self._on_message,
            on_error=self._on_error,
            on_close=self._on_close,
            on_ping=self._on_ping,
            on_pong=self._on_pong,
        )
        self._thread = threading.Thread(target=self._app.run_forever, name=f"ws {url}", daemon=True)
        self._thread.start()

    def _push(self, event: WsEvent) -> None:
        self._events.put(event)
        self._wakeup()

    def _on_open(self, _ws: Any) -> None:
        self._push(WsEvent(WsEventKind.OPENED))

    def _on_message(self, _ws: Any, message: str | bytes) -> None:
        kind = WsMessageKind.TEXT if isinstance(message, str) else WsMessageKind.BINARY
        self._push(WsEvent(WsEventKind.MESSAGE, WsMessage(kind, message)))

    def _on_error(self, _ws: Any, error: Exception) -> None:
        self._push(WsEvent(WsEventKind.ERROR, error=str(error)))

    def _on_close(self, _ws: Any, _code: Any, _reason: Any) -> None:
        self._push(WsEvent(WsEventKind.CLOSED))

    def _on_ping(self, _ws: Any, data: bytes) -> None:
        self._push(WsEvent(WsEventKind.MESSAGE, WsMessage(WsMessageKind.PING, data)))

    def _on_pong(self, _ws: Any, data: bytes) -> None:
        self._push(WsEvent(WsEventKind.MESSAGE, WsMessage(WsMessageKind.PONG, data)))

    def send(self, message: WsMessage) -> None:
        """Send a frame; failures are logged, not raised."""
        opcode = _OPCODES.get(message.kind)
        if opcode is None:
            log.warning("not sending websocket frame of kind %s", message.kind.value)
            return
        try:
            self._app.send(message.data, opcode)
        except (websocket.WebSocketException, OSError) as err:
            log.warning("send to %s failed: %s", self.url, err)

    def try_recv(self) -> WsEvent | None:
        try:
            return self._events.get_nowait()
        except queue.Empty:
            return None

    def close(self) -> None:
        self._app.close()


Connector = Callable[[str, Wakeup], Any]


class Relay:
    """A relay identified by its URL; equal relays share a URL."""

    def __init__(self, url: str, wakeup: Wakeup, connector: Connector = WebSocketConnection) -> None:
        self.url = url
        self._connector = connector
        self.connection = connector(url, wakeup)
        self.status = RelayStatus.CONNECTING

    def __repr__(self) -> str:
        return f"Relay(url={self.url!r}, status={self.status.value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relay):
            return NotImplemented
        return self.url == other.url

    def __hash__(self) -> int:
        return hash(self.url)

    def send(self, msg: ClientMessage) -> None:
        self.connection.send(WsMessage(WsMessageKind.TEXT, msg.to_json()))

    def connect(self, wakeup: Wakeup) -> None:
        """Open a fresh connection in place of the current one."""
        connection = self._connector(self.url, wakeup)
        old, self.connection = self.connection, connection
        self.status = RelayStatus.CONNECTING
        old.close()

    def ping(self) -> None:
        self.connection.send(WsMessage(WsMessageKind.PING, b""))

    def subscribe(self, subid: str, filters: list[Filter]) -> None:
        log.info("sending '%s' subscription to relay pool: %r", subid, filters)
        self.send(ReqMessage(subid, list(filters)))