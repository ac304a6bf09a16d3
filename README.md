# notedeck

The core of a Nostr client as a Python library: public keys and event ids,
events, subscription filters, the messages a client sends to relays and the
messages relays send back, a pool of websocket relay connections that keeps
itself alive, and the helpers a user interface needs around them (colour
themes, text styles, font setup, frame timing and a profile-picture cache).

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Keys and events

```python
from notedeck.pubkey import Pubkey
from notedeck.event import Event
from notedeck.errors import NostrError

pk = Pubkey.from_hex("379e863e8357163b5bce5d2688dc4f1dcc2d505222fb8d74db600f30535dfdfe")
print(pk.hex())

try:
    Pubkey.from_hex("not hex")
except NostrError as err:
    print(err)          # hex decoding failed

event = Event.from_json(text)   # text: the JSON object of one event
print(event.id.hex(), event.kind, event.content)
print(event.to_dict())
```

- `Pubkey.try_from_bech32_string(s, verify)` accepts `npub1...` strings
  (bech32 or bech32m); with `verify=True` it also checks that the key is a
  point on secp256k1.
- `Pubkey.try_from_hex_str_with_verify` does the same check for hex input.
- `bech32_decode` and `is_valid_xonly_pubkey` are available on their own.
- `EventId` holds a 32-byte event id; two `Event`s compare equal when their
  ids do.

Every failure raises a subclass of `NostrError` from `notedeck.errors`:
`EmptyMessageError`, `DecodeFailedError`, `HexDecodeFailedError`,
`InvalidBech32Error`, `InvalidByteSizeError`, `InvalidSignatureError`,
`InvalidPublicKeyError` or `JsonError`. Errors of the same class with the
same message compare equal; all `JsonError`s compare equal. Application-level
failures raise `AppError` (or `NoActiveSubscriptionError`,
`LoadFailedError`).

`notedeck.profile.Profile` wraps decoded profile metadata; `name()`,
`display_name()`, `about()`, `picture()`, `website()`, `lud06()` and
`lud16()` return the string or `None`.

## Filters and client messages

Filters are built step by step; each `with_*` call returns a new filter.

```python
from notedeck.filters import Filter
from notedeck.client_message import ReqMessage, CloseMessage

home = Filter().with_kinds([1]).with_limit(100)
print(home.to_dict())   # {'kinds': [1], 'limit': 100}

req = ReqMessage("home", [home])
print(req.to_json())    # ["REQ","home",{"kinds":[1],"limit":100}]
print(CloseMessage("home").to_json())   # ["CLOSE","home"]
```

Only fields that are set appear in the dictionary form; tag filters use the
`#e`, `#p` and `#t` keys. `Filter.from_dict` reads that form back and raises
`JsonError` on bad values. `EventMessage(event).to_json()` publishes an event.

## Relay messages

```python
from notedeck.relay_message import parse_relay_message

msg = parse_relay_message('["EOSE","home"]')   # Eose(sub_id='home')
```

`parse_relay_message` recognises `NOTICE` (`Notice`), `EVENT`
(`EventReceived`, carrying the whole raw message), `EOSE` (`Eose`) and `OK`
(`CommandResult`) messages and raises `EmptyMessageError` or
`DecodeFailedError` for anything else. `relay_event_from_ws` turns a
`WsEvent` into a `RelayEvent`: opened, closed, a parsed message, an error, or
some other frame.

## Relay pools

```python
from notedeck.pool import RelayPool

pool = RelayPool()
pool.add_url("wss://relay.example.com", wakeup=lambda: None)
pool.send(req)

while True:
    pool.keepalive_ping(lambda: None)
    event = pool.try_recv()
    if event is None:
        break
    print(event.relay, event.event)
```

Each `Relay` runs a websocket on a background thread (`WebSocketConnection`)
and calls `wakeup` whenever something arrives. `try_recv` returns the first
pending `PoolEvent` from the relays in order, updates each relay's
`RelayStatus`, and answers pings with pongs.

`keepalive_ping` pings connected relays that have been quiet longer than the
ping rate (25 seconds unless changed with `set_ping_rate`) and reconnects
dropped relays, waiting 2 seconds at first and half as long again after every
attempt. `send_to` sends a message to one relay by URL; `has` tells whether a
URL is in the pool.

## Interface helpers

- `notedeck.colors`: `Color`, and the desktop dark, mobile dark and light
  `ColorTheme`s.
- `notedeck.style`: `NotedeckTextStyle` with `desktop_font_size`,
  `mobile_font_size` and `text_style_sizes`.
- `notedeck.fonts`: `font_families()` (fallback order per family) and
  `font_tweaks()`.
- `notedeck.frame_history`: `FrameHistory` for mean frame time and FPS over
  the last second.
- `notedeck.imgcache`: `ImageCache`, which stores pictures as lossless WebP
  under the Crockford base32 form of their URL (`crockford_encode`).
- `notedeck.images`: `process_pfp_bitmap` crops a picture to a centred
  square, scales it and cuts it to a circle (`round_image`);
  `parse_img_response` decodes a fetched picture; `fetch_img` returns a
  `concurrent.futures.Future` that loads the picture from the cache
  directory, or downloads, processes and caches it.
- `notedeck.abbrev`: `floor_char_boundary` to cut UTF-8 text safely.

## What this package does not do

- It has no user interface and no command to run; the colour, style, font
  and frame-timing helpers only supply values for one.
- It stores no events: there is no local database, no queries and no
  timelines.
- It does not check signatures: `Event.verify` always raises
  `InvalidSignatureError`, after first checking that the id matches the
  event's content.
- It has no account management or login; keys are parsed but never stored.
- SVG profile pictures are not supported; `parse_img_response` raises
  `AppError` for them.