"""Nostr events and their identifiers."""

from __future__ import annotations

import binascii
import hashlib
import json
from dataclasses import dataclass, field
from typing import Any

from .errors import (
    HexDecodeFailedError,
    InvalidByteSizeError,
    InvalidSignatureError,
    JsonError,
    NostrError,
)
from .pubkey import Pubkey


@dataclass(frozen=True)
class EventId:
    """The 32-byte sha256 identifier of an event."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != 32:
            raise InvalidByteSizeError()

    def hex(self) -> str:
        return self.data.hex()

    @classmethod
    def from_hex(cls, hex_str: str) -> EventId:
        try:
            data = binascii.unhexlify(hex_str)
        except (binascii.Error, ValueError):
            raise HexDecodeFailedError() from None
        return cls(data)

    def __str__(self) -> str:
        return self.hex()


def _require(data: dict[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise JsonError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise JsonError(f"invalid type for field `{key}`")
    return value


def _require_u64(data: dict[str, Any], key: str) -> int:
    value = _require(data, key, int)
    if not 0 <= value < 2**64:
        raise JsonError(f"field `{key}` out of range")
    return value


@dataclass(eq=False)
class Event:
    """A signed Nostr event; two events are equal when their ids are."""

    id: EventId
    pubkey: Pubkey
    created_at: int
    kind: int
    tags: list[list[str]] = field(default_factory=list)
    content: str = ""
    sig: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @classmethod
    def from_json(cls, s: str) -> Event:
        try:
            data = json.loads(s)
        except (json.JSONDecodeError, TypeError) as exc:
            raise JsonError(str(exc)) from None
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Any) -> Event:
        if not isinstance(data, dict):
            raise JsonError("expected an object")
        tags = _require(data, "tags", list)
        if not all(isinstance(tag, list) and all(isinstance(t, str) for t in tag) for tag in tags):
            raise JsonError("invalid type for field `tags`")
        try:
            event_id = EventId.from_hex(_require(data, "id", str))
            pubkey = Pubkey.from_hex(_require(data, "pubkey", str))
        except JsonError:
            raise
        except NostrError as exc:
            raise JsonError(str(exc)) from None
        return cls(
            id=event_id,
            pubkey=pubkey,
            created_at=_require_u64(data, "created_at"),
            kind=_require_u64(data, "kind"),
            tags=[list(tag) for tag in tags],
            content=_require(data, "content", str),
            sig=_require(data, "sig", str),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.hex(),
            "pubkey": self.pubkey.hex(),
            "created_at": self.created_at,
            "kind": self.kind,
            "tags": [list(tag) for tag in self.tags],
            "content": self.content,
            "sig": self.sig,
        }

    def _computed_id(self) -> bytes:
        serialized = json.dumps(
            [0, self.pubkey.hex(), self.created_at, self.kind, self.tags, self.content],
            separators=(",", ":"),
            ensure_ascii=False,
        )
        return hashlib.sha256(serialized.encode("utf-8")).digest()

    def verify(self) -> Event:
        """Check the event; signatures cannot be checked, so every event is rejected."""
        if self._computed_id() != self.id.data:
            raise InvalidSignatureError()
        # The id matches, but without signature checking the event is still rejected.
        raise InvalidSignatureError()