"""Messages sent by clients to relays."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Union

from .event import Event
from .filters import Filter


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


@dataclass
class EventMessage:
    """Publish an event."""

    event: Event

    def to_json(self) -> str:
        return _dumps(["EVENT", self.event.to_dict()])


@dataclass
class ReqMessage:
    """Open a subscription with the given filters."""

    sub_id: str
    filters: list[Filter] = field(default_factory=list)

    def to_json(self) -> str:
        return _dumps(["REQ", self.sub_id, *(f.to_dict() for f in self.filters)])


@dataclass
class CloseMessage:
    """Close a subscription."""

    sub_id: str

    def to_json(self) -> str:
        return _dumps(["CLOSE", self.sub_id])


ClientMessage = Union[EventMessage, ReqMessage, CloseMessage]