"""Exception types raised by the ICE helpers."""

from __future__ import annotations


class IceError(Exception):
    """Base class for every error raised by this package."""

    default_message = "ice error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class AddressParseError(IceError, ValueError):
    """A candidate address could not be parsed as an IP address."""

    default_message = "failed to parse address"


class NetworkTypeError(IceError, ValueError):
    """The network type could not be determined."""

    default_message = "unable to determine networkType"


class InvalidNAT1To1IPMappingError(IceError, ValueError):
    """A 1:1 NAT IP mapping is malformed or conflicting."""

    default_message = "invalid 1:1 NAT IP mapping"


class UnsupportedNAT1To1IPCandidateTypeError(IceError, ValueError):
    """The candidate type given for 1:1 NAT IP mapping is not supported."""

    default_message = "unsupported 1:1 NAT IP candidate type"


class ExternalMappedIPNotFoundError(IceError, LookupError):
    """No external IP is mapped for the given local IP."""

    default_message = "external mapped IP not found"


class UnknownRoleError(IceError, ValueError):
    """Text did not name a known agent role."""

    default_message = "unknown role"


class UsernameMismatchError(IceError, ValueError):
    """An inbound STUN USERNAME did not match the expected one."""

    default_message = "username mismatch"


class AttributeNotFoundError(IceError, LookupError):
    """A STUN message does not carry the requested attribute."""

    default_message = "attribute not found"


class AttributeSizeError(IceError, ValueError):
    """A STUN attribute has an unexpected length."""

    default_message = "attribute size is invalid"


class IntegrityError(IceError, ValueError):
    """A STUN MESSAGE-INTEGRITY check failed."""

    default_message = "integrity check failed"