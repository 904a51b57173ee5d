"""Exception hierarchy for the ICE core package."""

from __future__ import annotations


class IceError(Exception):
    """Base class for every error raised by this package."""

    default_message = "ICE error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class UnknownTypeError(IceError, ValueError):
    """A value of an unknown kind was supplied."""

    default_message = "Unknown"


class AddressParseError(IceError, ValueError):
    """A candidate address could not be parsed."""

    default_message = "failed to parse address"


class DetermineNetworkTypeError(IceError, ValueError):
    """The network type could not be derived from a network name and IP."""

    default_message = "unable to determine networkType"


class PortError(IceError, OSError):
    """A port was malformed or no port in the allowed range was free."""

    default_message = "invalid port"


class InvalidNat1To1MappingError(IceError, ValueError):
    """The 1:1 NAT IP mapping is invalid."""

    default_message = "invalid 1:1 NAT IP mapping"


class UnsupportedNat1To1CandidateTypeError(IceError, ValueError):
    """The candidate type requested for 1:1 NAT mapping is unsupported."""

    default_message = "unsupported 1:1 NAT IP candidate type"


class ExternalMappedIPNotFoundError(IceError, LookupError):
    """No external IP is mapped for the given local IP."""

    default_message = "external mapped IP not found"


class InvalidMulticastDNSHostNameError(IceError, ValueError):
    """The mDNS host name is not of the form <name>.local."""

    default_message = (
        "invalid mDNS HostName, must end with .local and can only contain a single '.'"
    )


class UnknownRoleError(IceError, ValueError):
    """A role name other than controlling or controlled was given."""

    default_message = "unknown role"


class AttributeNotFoundError(IceError, LookupError):
    """A STUN message does not carry the requested attribute."""

    default_message = "attribute not found"


class AttributeSizeError(IceError, ValueError):
    """A STUN attribute has the wrong length."""

    default_message = "attribute size is invalid"


class StunDecodeError(IceError, ValueError):
    """Raw bytes could not be decoded as a STUN message."""

    default_message = "failed to decode STUN message"


class XorMappedAddressError(IceError):
    """The response carried no usable XOR-MAPPED-ADDRESS."""

    default_message = "failed to get XOR-MAPPED-ADDRESS response"


class UsernameMismatchError(IceError, ValueError):
    """The USERNAME attribute does not hold the expected value."""

    default_message = "username mismatch"


class ClosedError(IceError):
    """The agent is closed."""

    default_message = "the agent is closed"


class RunCanceledError(IceError):
    """A run operation was canceled."""

    default_message = "run was canceled by done"