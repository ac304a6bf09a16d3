"""Subscription filters sent to relays."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, TypeVar

from .errors import JsonError, NostrError
from .event import EventId
from .pubkey import Pubkey

T = TypeVar("T")

_U64_MAX = 2**64 - 1
_U16_MAX = 2**16 - 1


def _int_in_range(value: Any, key: str, upper: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= upper:
        raise JsonError(f"invalid value for field `{key}`")
    return value


def _list_of(value: Any, key: str, convert: Callable[[Any], T]) -> list[T]:
    if not isinstance(value, list):
        raise JsonError(f"invalid type for field `{key}`")
    try:
        return [convert(item) for item in value]
    except JsonError:
        raise
    except NostrError as exc:
        raise JsonError(str(exc)) from None


def _hex_string(value: Any) -> str:
    if not isinstance(value, str):
        raise JsonError("expected a string")
    return value


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise JsonError("expected a string")
    return value


@dataclass
class Filter:
    """A relay subscription filter; unset fields are left out on the wire."""

    ids: list[EventId] | None = None
    authors: list[Pubkey] | None = None
    kinds: list[int] | None = None
    events: list[EventId] | None = None
    pubkeys: list[Pubkey] | None = None
    hashtags: list[str] | None = None
    since: int | None = None
    until: int | None = None
    limit: int | None = None

    def with_ids(self, ids: list[EventId]) -> Filter:
        return replace(self, ids=list(ids))

    def with_authors(self, authors: list[Pubkey]) -> Filter:
        return replace(self, authors=list(authors))

    def with_kinds(self, kinds: list[int]) -> Filter:
        return replace(self, kinds=list(kinds))

    def with_events(self, events: list[EventId]) -> Filter:
        return replace(self, events=list(events))

    def with_pubkeys(self, pubkeys: list[Pubkey]) -> Filter:
        return replace(self, pubkeys=list(pubkeys))

    def with_since(self, since: int) -> Filter:
        return replace(self, since=since)

    def with_until(self, until: int) -> Filter:
        return replace(self, until=until)

    def with_limit(self, limit: int) -> Filter:
        return replace(self, limit=limit)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.ids is not None:
            out["ids"] = [i.hex() for i in self.ids]
        if self.authors is not None:
            out["authors"] = [a.hex() for a in self.authors]
        if self.kinds is not None:
            out["kinds"] = list(self.kinds)
        if self.events is not None:
            out["#e"] = [e.hex() for e in self.events]
        if self.pubkeys is not None:
            out["#p"] = [p.hex() for p in self.pubkeys]
        if self.hashtags is not None:
            out["#t"] = list(self.hashtags)
        if self.since is not None:
            out["since"] = self.since
        if self.until is not None:
            out["until"] = self.until
        if self.limit is not None:
            out["limit"] = self.limit
        return out

    @classmethod
    def from_dict(cls, data: Any) -> Filter:
        if not isinstance(data, dict):
            raise JsonError("expected an object")

        def optional(key: str, parse: Callable[[Any], T]) -> T | None:
            value = data.get(key)
            return None if value is None else parse(value)

        return cls(
            ids=optional("ids", lambda v: _list_of(v, "ids", lambda s: EventId.from_hex(_hex_string(s)))),
            authors=optional(
                "authors", lambda v: _list_of(v, "authors", lambda s: Pubkey.from_hex(_hex_string(s)))
            ),
            kinds=optional("kinds", lambda v: _list_of(v, "kinds", lambda k: _int_in_range(k, "kinds", _U64_MAX))),
            events=optional("#e", lambda v: _list_of(v, "#e", lambda s: EventId.from_hex(_hex_string(s)))),
            pubkeys=optional("#p", lambda v: _list_of(v, "#p", lambda s: Pubkey.from_hex(_hex_string(s)))),
            hashtags=optional("#t", lambda v: _list_of(v, "#t", _string)),
            since=optional("since", lambda v: _int_in_range(v, "since", _U64_MAX)),
            until=optional("until", lambda v: _int_in_range(v, "until", _U64_MAX)),
            limit=optional("limit", lambda v: _int_in_range(v, "limit", _U16_MAX)),
        )