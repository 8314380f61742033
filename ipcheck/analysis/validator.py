"""
IP address format validation
"""

import re
from enum import Enum
from functools import lru_cache

from ..models import ParsedIPv4


_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"

IPV4_PATTERN = rf"(?:{_OCTET}\.){{3}}{_OCTET}"

# Simplified: eight full groups only, plus the two literals below.
IPV6_PATTERN = r"(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}"
IPV6_LITERALS = ("::1", "::")


class AddressFormat(Enum):
    """Syntactic form of an address string"""
    INVALID = "invalid"
    IPV4 = "ipv4"
    IPV6 = "ipv6"


@lru_cache(maxsize=None)
def _ipv4_regex() -> re.Pattern:
    return re.compile(IPV4_PATTERN)


@lru_cache(maxsize=None)
def _ipv6_regex() -> re.Pattern:
    return re.compile(IPV6_PATTERN)


def is_valid_ipv4(address: str) -> bool:
    """Check for a dotted-quad IPv4 literal"""
    return _ipv4_regex().fullmatch(address) is not None


def is_valid_ipv6(address: str) -> bool:
    """
    Check for an IPv6 literal in the simplified grammar.

    Accepts exactly eight colon-separated groups of 1-4 hex digits,
    or the literals ``::1`` and ``::``. Other compressed forms and
    embedded IPv4 suffixes are rejected.
    """
    return _ipv6_regex().fullmatch(address) is not None or address in IPV6_LITERALS


def classify_format(address: str) -> AddressFormat:
    """
    Determine the syntactic form of an address.

    Args:
        address: Candidate literal, already trimmed

    Returns:
        AddressFormat enum value
    """
    if not address:
        return AddressFormat.INVALID

    ipv4 = is_valid_ipv4(address)
    ipv6 = is_valid_ipv6(address)

    if ipv4:
        return AddressFormat.IPV4
    if ipv6:
        return AddressFormat.IPV6
    return AddressFormat.INVALID


def parse_ipv4(address: str) -> ParsedIPv4:
    """Split a validated IPv4 literal into its octets"""
    if not is_valid_ipv4(address):
        raise ValueError(f"not an IPv4 address: {address!r}")
    return ParsedIPv4(tuple(int(part) for part in address.split('.')))
