"""Exception types raised by the protocol layer and by the application."""

from __future__ import annotations


class NostrError(Exception):
    """Base error of the protocol layer; also used for free-form messages."""

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NostrError):
            return NotImplemented
        return type(self) is type(other) and str(self) == str(other)

    def __hash__(self) -> int:
        return hash((type(self), str(self)))


class EmptyMessageError(NostrError):
    default_message = "message is empty"


class DecodeFailedError(NostrError):
    default_message = "decoding failed"


class HexDecodeFailedError(NostrError):
    default_message = "hex decoding failed"


class InvalidBech32Error(NostrError):
    default_message = "invalid bech32 string"


class InvalidByteSizeError(NostrError):
    default_message = "invalid byte size"


class InvalidSignatureError(NostrError):
    default_message = "invalid signature"


class InvalidPublicKeyError(NostrError):
    default_message = "invalid public key"


class JsonError(NostrError):
    """A JSON document could not be decoded; all such errors compare equal."""

    default_message = "invalid json"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NostrError):
            return NotImplemented
        return type(other) is JsonError

    def __hash__(self) -> int:
        return hash(JsonError)


class AppError(Exception):
    """Base error of the application layer; also used for free-form messages."""

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class NoActiveSubscriptionError(AppError):
    default_message = "subscription not active in timeline"


class LoadFailedError(AppError):
    default_message = "load failed"