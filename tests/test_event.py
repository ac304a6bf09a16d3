import json
from dataclasses import replace

import pytest

from notedeck.errors import (
    HexDecodeFailedError,
    InvalidByteSizeError,
    InvalidSignatureError,
    JsonError,
)
from notedeck.event import Event, EventId
from notedeck.pubkey import Pubkey

ID = "70b10f70c1318967eddf12527799411b1a9780ad9c43858f5e5fcd45486a13a5"
PUBKEY = "379e863e8357163b5bce5d2688dc4f1dcc2d505222fb8d74db600f30535dfdfe"
SIG = (
    "273a9cd5d11455590f4359500bccb7a89428262b96b3ea87a756b770964472f8"
    "c3e87f5d5e64d8d2e859a71462a3f477b554565c4f2f326cb01dd7620db71502"
)
EVENT_JSON = (
    '{"id":"%s","pubkey":"%s","created_at":1612809991,"kind":1,'
    '"tags":[],"content":"test","sig":"%s"}' % (ID, PUBKEY, SIG)
)


def test_from_json_fields():
    ev = Event.from_json(EVENT_JSON)
    assert ev.id == EventId.from_hex(ID)
    assert ev.pubkey == Pubkey.from_hex(PUBKEY)
    assert ev.created_at == 1612809991
    assert ev.kind == 1
    assert ev.tags == []
    assert ev.content == "test"
    assert ev.sig == SIG


def test_round_trip():
    ev = Event.from_json(EVENT_JSON)
    assert ev.to_dict() == json.loads(EVENT_JSON)
    assert Event.from_dict(ev.to_dict()).to_dict() == ev.to_dict()


def test_equality_by_id():
    ev = Event.from_json(EVENT_JSON)
    other = replace(ev, content="changed")
    assert ev == other
    assert len({ev, other}) == 1


def test_verify_always_fails():
    with pytest.raises(InvalidSignatureError):
        Event.from_json(EVENT_JSON).verify()


def test_missing_field():
    data = json.loads(EVENT_JSON)
    del data["sig"]
    with pytest.raises(JsonError):
        Event.from_dict(data)


def test_invalid_json():
    with pytest.raises(JsonError):
        Event.from_json("{not json")


def test_bad_hex_id_is_json_error():
    data = json.loads(EVENT_JSON)
    data["id"] = "zz"
    with pytest.raises(JsonError):
        Event.from_dict(data)


def test_negative_kind_rejected():
    data = json.loads(EVENT_JSON)
    data["kind"] = -1
    with pytest.raises(JsonError):
        Event.from_dict(data)


def test_event_id_errors():
    assert EventId.from_hex(ID).hex() == ID
    with pytest.raises(HexDecodeFailedError):
        EventId.from_hex("xyz")
    with pytest.raises(InvalidByteSizeError):
        EventId.from_hex("abcd")