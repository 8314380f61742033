"""
Data models for IPCheck
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class IPVersion(Enum):
    """IP protocol version"""
    V4 = "IPv4"
    V6 = "IPv6"


class IPv4Class(Enum):
    """Legacy classful IPv4 address classes"""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    UNKNOWN = "Unknown"


class Scope(Enum):
    """Address scope"""
    PRIVATE = "Private"
    PUBLIC = "Public"


class SpecialCategory(Enum):
    """Special-use address categories"""
    LOOPBACK = "loopback"
    LINK_LOCAL = "linklocal"
    MULTICAST = "multicast"
    UNIQUE_LOCAL = "uniquelocal"
    NONE = "none"


class ErrorKind(Enum):
    """Failure states a query can end in"""
    EMPTY_INPUT = "empty_input"
    INVALID_FORMAT = "invalid_format"
    RESOLUTION_FAILURE = "resolution_failure"


class HostnameStatus(Enum):
    """Outcome of the reverse lookup"""
    RESOLVED = "resolved"
    SAME_AS_INPUT = "same_as_input"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ParsedIPv4:
    """Four decimal octets of a validated IPv4 literal"""
    octets: tuple[int, int, int, int]

    def __post_init__(self):
        if len(self.octets) != 4:
            raise ValueError(f"expected 4 octets, got {len(self.octets)}")
        for octet in self.octets:
            if not 0 <= octet <= 255:
                raise ValueError(f"octet out of range: {octet}")

    @property
    def first(self) -> int:
        return self.octets[0]

    @property
    def second(self) -> int:
        return self.octets[1]


@dataclass(frozen=True)
class ClassificationResult:
    """Complete classification of a single address query"""
    address: str
    is_valid: bool = False
    error: Optional[ErrorKind] = None
    ip_version: Optional[IPVersion] = None
    ip_class: Optional[IPv4Class] = None  # IPv4 only
    scope: Optional[Scope] = None
    special: Optional[SpecialCategory] = None
    octets: Optional[ParsedIPv4] = None  # IPv4 only
    binary: Optional[str] = None  # IPv4 only
    hostname: Optional[str] = None
    hostname_status: HostnameStatus = HostnameStatus.SKIPPED

    @property
    def is_private(self) -> bool:
        return self.scope == Scope.PRIVATE

    def to_dict(self) -> dict:
        """Plain, JSON-serializable view of the result"""
        return {
            "address": self.address,
            "is_valid": self.is_valid,
            "error": self.error.value if self.error else None,
            "ip_version": self.ip_version.value if self.ip_version else None,
            "ip_class": self.ip_class.value if self.ip_class else None,
            "scope": self.scope.value if self.scope else None,
            "special": self.special.value if self.special else None,
            "octets": list(self.octets.octets) if self.octets else None,
            "binary": self.binary,
            "hostname": self.hostname,
            "hostname_status": self.hostname_status.value,
        }
