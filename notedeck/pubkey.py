"""Public keys and the bech32 decoding they are exchanged in."""

from __future__ import annotations

import binascii
from dataclasses import dataclass

from .errors import (
    HexDecodeFailedError,
    InvalidBech32Error,
    InvalidByteSizeError,
    InvalidPublicKeyError,
)

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_BECH32_CONST = 1
_BECH32M_CONST = 0x2BC830A3

_FIELD_PRIME = 2**256 - 2**32 - 977
_NPUB_HRP = "npub"


def _polymod(values: list[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ value
        for i, gen in enumerate(_GENERATOR):
            if (top >> i) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _five_to_eight(values: list[int]) -> bytes:
    acc = 0
    bits = 0
    out = bytearray()
    for value in values:
        acc = (acc << 5) | value
        bits += 5
        while bits >= 8:
            bits -= 8
            out.append((acc >> bits) & 0xFF)
    if bits >= 5 or (acc << (8 - bits)) & 0xFF:
        raise InvalidBech32Error()
    return bytes(out)


def bech32_decode(s: str) -> tuple[str, bytes]:
    """Decode a bech32 or bech32m string into its human-readable part and data."""
    if not s or any(ord(c) < 33 or ord(c) > 126 for c in s):
        raise InvalidBech32Error()
    if s.lower() != s and s.upper() != s:
        raise InvalidBech32Error()
    s = s.lower()
    sep = s.rfind("1")
    if sep < 1 or sep + 7 > len(s):
        raise InvalidBech32Error()
    hrp = s[:sep]
    try:
        values = [_CHARSET.index(c) for c in s[sep + 1 :]]
    except ValueError:
        raise InvalidBech32Error() from None
    if _polymod(_hrp_expand(hrp) + values) not in (_BECH32_CONST, _BECH32M_CONST):
        raise InvalidBech32Error()
    return hrp, _five_to_eight(values[:-6])


def is_valid_xonly_pubkey(data: bytes) -> bool:
    """Whether the 32 bytes are the x coordinate of a secp256k1 curve point."""
    if len(data) != 32:
        return False
    x = int.from_bytes(data, "big")
    if x >= _FIELD_PRIME:
        return False
    y_squared = (pow(x, 3, _FIELD_PRIME) + 7) % _FIELD_PRIME
    return y_squared == 0 or pow(y_squared, (_FIELD_PRIME - 1) // 2, _FIELD_PRIME) == 1


def _decode_hex(hex_str: str) -> bytes:
    try:
        return binascii.unhexlify(hex_str)
    except (binascii.Error, ValueError):
        raise HexDecodeFailedError() from None


@dataclass(frozen=True)
class Pubkey:
    """A 32-byte x-only public key."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != 32:
            raise InvalidByteSizeError()

    def hex(self) -> str:
        return self.data.hex()

    @classmethod
    def from_hex(cls, hex_str: str) -> Pubkey:
        return cls(_decode_hex(hex_str))

    @classmethod
    def try_from_hex_str_with_verify(cls, hex_str: str) -> Pubkey:
        data = _decode_hex(hex_str)
        if len(data) != 32:
            raise HexDecodeFailedError()
        if not is_valid_xonly_pubkey(data):
            raise InvalidPublicKeyError()
        return cls(data)

    @classmethod
    def try_from_bech32_string(cls, s: str, verify: bool) -> Pubkey:
        hrp, data = bech32_decode(s)
        if hrp != _NPUB_HRP:
            raise InvalidBech32Error()
        if len(data) != 32:
            raise InvalidByteSizeError()
        if verify and not is_valid_xonly_pubkey(data):
            raise InvalidPublicKeyError()
        return cls(data)

    def __str__(self) -> str:
        return self.hex()