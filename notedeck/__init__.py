"""Nostr client core: keys, events, filters, relay messaging and interface helpers."""

__version__ = "0.1.0"

__all__ = [
    "abbrev",
    "client_message",
    "colors",
    "errors",
    "event",
    "filters",
    "fonts",
    "frame_history",
    "images",
    "imgcache",
    "pool",
    "profile",
    "pubkey",
    "relay",
    "relay_message",
    "style",
]