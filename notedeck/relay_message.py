"""Messages received from relays and the websocket events they arrive in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import DecodeFailedError, EmptyMessageError, NostrError

_NOTICE_PREFIX = '["NOTICE",'
_EVENT_PREFIX = '["EVENT"'
_EOSE_PREFIX = '["EOSE",'
_OK_PREFIX = '["OK",'


@dataclass(frozen=True)
class CommandResult:
    """A relay's answer to a published event (NIP-20)."""

    event_id: str
    status: bool
    message: str


@dataclass(frozen=True)
class Eose:
    """End of stored events for a subscription (NIP-15)."""

    sub_id: str


@dataclass(frozen=True)
class EventReceived:
    """An event delivered for a subscription; ``event`` is the raw message."""

    sub_id: str
    event: str


@dataclass(frozen=True)
class Notice:
    """A human-readable notice from a relay."""

    message: str


RelayMessage = Union[CommandResult, Eose, EventReceived, Notice]


class WsMessageKind(Enum):
    TEXT = "text"
    BINARY = "binary"
    PING = "ping"
    PONG = "pong"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class WsMessage:
    """A single websocket frame."""

    kind: WsMessageKind
    data: str | bytes = b""


class WsEventKind(Enum):
    OPENED = "opened"
    MESSAGE = "message"
    ERROR = "error"
    CLOSED = "closed"


@dataclass(frozen=True)
class WsEvent:
    """Something that happened on a websocket connection."""

    kind: WsEventKind
    message: WsMessage | None = None
    error: str | None = None


class RelayEventKind(Enum):
    OPENED = "opened"
    CLOSED = "closed"
    OTHER = "other"
    ERROR = "error"
    MESSAGE = "message"


@dataclass(frozen=True)
class RelayEvent:
    """A websocket event interpreted at the protocol level."""

    kind: RelayEventKind
    message: RelayMessage | None = None
    other: WsMessage | None = None
    error: NostrError | None = None


def _quoted_payload(msg: str, start: int) -> str:
    end = len(msg) - 2
    if start > end or msg[start - 1 : start] != '"' or not msg.endswith('"]'):
        raise DecodeFailedError()
    return msg[start:end]


def _parse_ok(msg: str) -> CommandResult:
    event_id = msg[7:71]
    if len(event_id) != 64 or msg[6:7] != '"' or msg[71:73] != '",':
        raise DecodeFailedError()
    if msg.startswith("true", 73):
        status, pos = True, 77
    elif msg.startswith("false", 73):
        status, pos = False, 78
    else:
        raise DecodeFailedError()
    rest = msg[pos:]
    if not rest.startswith(","):
        raise DecodeFailedError()
    rest = rest[1:].lstrip(" ")
    if len(rest) < 3 or not rest.startswith('"') or not rest.endswith('"]'):
        raise DecodeFailedError()
    return CommandResult(event_id=event_id, status=status, message=rest[1:-2])


def parse_relay_message(msg: str) -> RelayMessage:
    """Recognise a relay message by its leading tag."""
    if not msg:
        raise EmptyMessageError()

    if msg.startswith(_NOTICE_PREFIX):
        start = 12 if msg[10:11] == " " else 11
        return Notice(_quoted_payload(msg, start))

    if msg.startswith(_EVENT_PREFIX):
        return EventReceived(sub_id="fixme", event=msg)

    if msg.startswith(_EOSE_PREFIX):
        start = 10 if msg[8:9] == " " else 9
        return Eose(_quoted_payload(msg, start))

    if msg.startswith(_OK_PREFIX):
        return _parse_ok(msg)

    raise DecodeFailedError()


def relay_event_from_ws(event: WsEvent) -> RelayEvent:
    """Interpret a websocket event as a relay event."""
    if event.kind is WsEventKind.OPENED:
        return RelayEvent(RelayEventKind.OPENED)
    if event.kind is WsEventKind.CLOSED:
        return RelayEvent(RelayEventKind.CLOSED)
    if event.kind is WsEventKind.ERROR:
        return RelayEvent(RelayEventKind.ERROR, error=NostrError(event.error or ""))

    ws_msg = event.message
    if ws_msg is not None and ws_msg.kind is WsMessageKind.TEXT and isinstance(ws_msg.data, str):
        try:
            return RelayEvent(RelayEventKind.MESSAGE, message=parse_relay_message(ws_msg.data))
        except NostrError as err:
            return RelayEvent(RelayEventKind.ERROR, error=err)
    return RelayEvent(RelayEventKind.OTHER, other=ws_msg)