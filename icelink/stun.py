"""A small STUN message codec and the ICE attributes carried in it."""

from __future__ import annotations

import hashlib
import hmac
import secrets
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

from icelink.enums import Role
from icelink.errors import (
    AttributeNotFoundError,
    AttributeSizeError,
    IntegrityError,
    UsernameMismatchError,
)

MAGIC_COOKIE = 0x2112A442
HEADER_SIZE = 20
TRANSACTION_ID_SIZE = 12
BINDING_REQUEST = 0x0001
BINDING_SUCCESS = 0x0101

_INTEGRITY_SIZE = 20
_INTEGRITY_ATTR_SIZE = 4 + _INTEGRITY_SIZE
_TIEBREAKER_SIZE = 8
_PRIORITY_SIZE = 4


class AttrType(IntEnum):
    """STUN attribute types used by ICE."""

    MAPPED_ADDRESS = 0x0001
    USERNAME = 0x0006
    MESSAGE_INTEGRITY = 0x0008
    ERROR_CODE = 0x0009
    XOR_MAPPED_ADDRESS = 0x0020
    PRIORITY = 0x0024
    USE_CANDIDATE = 0x0025
    FINGERPRINT = 0x8028
    ICE_CONTROLLED = 0x8029
    ICE_CONTROLLING = 0x802A


def _attr_type(value: int) -> int:
    try:
        return AttrType(value)
    except ValueError:
        return value


def _padded(length: int) -> int:
    return (length + 3) & ~3


def _encode_attributes(attributes: list[tuple[int, bytes]]) -> bytes:
    parts = []
    for attr_type, value in attributes:
        padding = b"\x00" * (_padded(len(value)) - len(value))
        parts.append(struct.pack(">HH", attr_type, len(value)) + value + padding)
    return b"".join(parts)


def _header(message_type: int, length: int, transaction_id: bytes) -> bytes:
    return struct.pack(">HHI", message_type, length, MAGIC_COOKIE) + transaction_id


@dataclass
class Message:
    """A STUN message: type, transaction ID and ordered attributes."""

    message_type: int = BINDING_REQUEST
    transaction_id: bytes = field(default_factory=lambda: secrets.token_bytes(TRANSACTION_ID_SIZE))
    attributes: list[tuple[int, bytes]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.transaction_id) != TRANSACTION_ID_SIZE:
            raise ValueError("transaction ID must be 12 bytes long")

    def add(self, attr_type: int, value: bytes) -> None:
        """Append an attribute."""
        self.attributes.append((_attr_type(attr_type), bytes(value)))

    def get(self, attr_type: int) -> bytes:
        """Return the value of the first attribute of the given type."""
        for current, value in self.attributes:
            if current == attr_type:
                return value
        raise AttributeNotFoundError(f"attribute {attr_type!r} not found")

    def contains(self, attr_type: int) -> bool:
        return any(current == attr_type for current, _ in self.attributes)

    def encode(self) -> bytes:
        """Serialise the message to wire format."""
        body = _encode_attributes(self.attributes)
        return _header(self.message_type, len(body), self.transaction_id) + body


def parse_message(data: bytes) -> Message:
    """Decode a STUN message from wire format."""
    data = bytes(data)
    if len(data) < HEADER_SIZE:
        raise ValueError("STUN message is shorter than its header")
    message_type, length, cookie = struct.unpack_from(">HHI", data)
    if message_type & 0xC000:
        raise ValueError("not a STUN message: leading bits are set")
    if cookie != MAGIC_COOKIE:
        raise ValueError("STUN magic cookie mismatch")
    end = HEADER_SIZE + length
    if len(data) < end:
        raise ValueError("STUN message is shorter than its declared length")
    message = Message(message_type=message_type, transaction_id=data[8:HEADER_SIZE])
    offset = HEADER_SIZE
    while offset < end:
        if end - offset < 4:
            raise ValueError("truncated STUN attribute header")
        attr_type, attr_len = struct.unpack_from(">HH", data, offset)
        offset += 4
        if offset + attr_len > end:
            raise ValueError("truncated STUN attribute value")
        message.add(attr_type, data[offset:offset + attr_len])
        offset += _padded(attr_len)
    return message


def _key_bytes(key: str | bytes) -> bytes:
    return key.encode("utf-8") if isinstance(key, str) else bytes(key)


def _integrity(message: Message, attributes: list[tuple[int, bytes]], key: bytes) -> bytes:
    body = _encode_attributes(attributes)
    header = _header(message.message_type, len(body) + _INTEGRITY_ATTR_SIZE, message.transaction_id)
    return hmac.new(key, header + body, hashlib.sha1).digest()


def add_message_integrity(message: Message, key: str | bytes) -> None:
    """Append a MESSAGE-INTEGRITY attribute using a short-term credential key."""
    digest = _integrity(message, message.attributes, _key_bytes(key))
    message.add(AttrType.MESSAGE_INTEGRITY, digest)


def assert_inbound_username(message: Message, expected_username: str) -> None:
    """Raise UsernameMismatchError unless USERNAME equals expected_username."""
    actual = message.get(AttrType.USERNAME)
    expected = expected_username.encode("utf-8")
    if actual != expected:
        raise UsernameMismatchError(
            f"username mismatch expected({expected.hex()}) actual({actual.hex()})"
        )


def assert_inbound_message_integrity(message: Message, key: str | bytes) -> None:
    """Raise IntegrityError unless MESSAGE-INTEGRITY matches the key."""
    for index, (attr_type, value) in enumerate(message.attributes):
        if attr_type == AttrType.MESSAGE_INTEGRITY:
            break
    else:
        raise AttributeNotFoundError("MESSAGE-INTEGRITY not found")
    if len(value) != _INTEGRITY_SIZE:
        raise AttributeSizeError("MESSAGE-INTEGRITY has invalid size")
    expected = _integrity(message, message.attributes[:index], _key_bytes(key))
    if not hmac.compare_digest(expected, value):
        raise IntegrityError()


def _checked(message: Message, attr_type: AttrType, size: int) -> bytes:
    value = message.get(attr_type)
    if len(value) != size:
        raise AttributeSizeError(f"{attr_type.name}: got {len(value)} bytes, expected {size}")
    return value


@dataclass(frozen=True)
class AttrControlled:
    """ICE-CONTROLLED attribute holding the tiebreaker."""

    value: int = 0

    def add_to(self, message: Message) -> None:
        message.add(AttrType.ICE_CONTROLLED, self.value.to_bytes(_TIEBREAKER_SIZE, "big"))

    @classmethod
    def from_message(cls, message: Message) -> AttrControlled:
        return cls(int.from_bytes(_checked(message, AttrType.ICE_CONTROLLED, _TIEBREAKER_SIZE), "big"))


@dataclass(frozen=True)
class AttrControlling:
    """ICE-CONTROLLING attribute holding the tiebreaker."""

    value: int = 0

    def add_to(self, message: Message) -> None:
        message.add(AttrType.ICE_CONTROLLING, self.value.to_bytes(_TIEBREAKER_SIZE, "big"))

    @classmethod
    def from_message(cls, message: Message) -> AttrControlling:
        return cls(int.from_bytes(_checked(message, AttrType.ICE_CONTROLLING, _TIEBREAKER_SIZE), "big"))


@dataclass(frozen=True)
class AttrControl:
    """ICE-CONTROLLED or ICE-CONTROLLING, chosen by role."""

    role: Role = Role.CONTROLLING
    tiebreaker: int = 0

    def add_to(self, message: Message) -> None:
        if self.role == Role.CONTROLLING:
            AttrControlling(self.tiebreaker).add_to(message)
        else:
            AttrControlled(self.tiebreaker).add_to(message)

    @classmethod
    def from_message(cls, message: Message) -> AttrControl:
        if message.contains(AttrType.ICE_CONTROLLING):
            return cls(Role.CONTROLLING, AttrControlling.from_message(message).value)
        if message.contains(AttrType.ICE_CONTROLLED):
            return cls(Role.CONTROLLED, AttrControlled.from_message(message).value)
        raise AttributeNotFoundError("neither ICE-CONTROLLING nor ICE-CONTROLLED found")


@dataclass(frozen=True)
class PriorityAttr:
    """PRIORITY attribute."""

    value: int = 0

    def add_to(self, message: Message) -> None:
        message.add(AttrType.PRIORITY, self.value.to_bytes(_PRIORITY_SIZE, "big"))

    @classmethod
    def from_message(cls, message: Message) -> PriorityAttr:
        return cls(int.from_bytes(_checked(message, AttrType.PRIORITY, _PRIORITY_SIZE), "big"))


StunAttribute = Union[AttrControlled, AttrControlling, AttrControl, PriorityAttr]