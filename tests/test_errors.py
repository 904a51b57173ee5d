import pytest

from icecore.errors import (
    AddressParseError,
    AttributeNotFoundError,
    AttributeSizeError,
    ClosedError,
    DetermineNetworkTypeError,
    ExternalMappedIPNotFoundError,
    IceError,
    InvalidMulticastDNSHostNameError,
    InvalidNat1To1MappingError,
    PortError,
    RunCanceledError,
    StunDecodeError,
    UnknownRoleError,
    UnknownTypeError,
    UnsupportedNat1To1CandidateTypeError,
    UsernameMismatchError,
    XorMappedAddressError,
)


@pytest.mark.parametrize(
    "cls, text",
    [
        (UnknownTypeError, "Unknown"),
        (AddressParseError, "failed to parse address"),
        (DetermineNetworkTypeError, "unable to determine networkType"),
        (PortError, "invalid port"),
        (InvalidNat1To1MappingError, "invalid 1:1 NAT IP mapping"),
        (UnsupportedNat1To1CandidateTypeError, "unsupported 1:1 NAT IP candidate type"),
        (ExternalMappedIPNotFoundError, "external mapped IP not found"),
        (UnknownRoleError, "unknown role"),
        (ClosedError, "the agent is closed"),
        (RunCanceledError, "run was canceled by done"),
        (XorMappedAddressError, "failed to get XOR-MAPPED-ADDRESS response"),
        (
            InvalidMulticastDNSHostNameError,
            "invalid mDNS HostName, must end with .local and can only contain a single '.'",
        ),
    ],
)
def test_default_messages(cls, text):
    err = cls()
    assert str(err) == text
    assert err.message == text


def test_custom_message_overrides_default():
    err = PortError("no free port in 5000-5000")
    assert str(err) == "no free port in 5000-5000"


def test_all_errors_share_base():
    errors = [
        UnknownTypeError(),
        AddressParseError(),
        DetermineNetworkTypeError(),
        PortError(),
        InvalidNat1To1MappingError(),
        UnsupportedNat1To1CandidateTypeError(),
        ExternalMappedIPNotFoundError(),
        InvalidMulticastDNSHostNameError(),
        UnknownRoleError(),
        AttributeNotFoundError(),
        AttributeSizeError(),
        StunDecodeError(),
        XorMappedAddressError(),
        UsernameMismatchError(),
        ClosedError(),
        RunCanceledError(),
    ]
    for err in errors:
        assert isinstance(err, IceError)
        assert err.message
        assert str(err) == err.message


def test_errors_can_be_caught_as_base():
    err = ClosedError()
    caught_err = None
    try:
        raise err
    except IceError as caught:
        caught_err = caught
    assert caught_err is err
    assert caught_err.message == "the agent is closed"
    assert str(caught_err) == "the agent is closed"


def test_invalid_mapping_error_is_value_error():
    err = InvalidNat1To1MappingError()
    assert isinstance(err, ValueError)
    assert err.message == "invalid 1:1 NAT IP mapping"


def test_external_ip_not_found_error_is_lookup_error():
    err = ExternalMappedIPNotFoundError()
    assert isinstance(err, LookupError)
    assert err.message == "external mapped IP not found"