"""
IPv4 and IPv6 address classifiers
"""

from ..models import IPv4Class, ParsedIPv4, Scope, SpecialCategory


# Human-readable range for each class, as shown in reports
CLASS_DESCRIPTIONS = {
    IPv4Class.A: "A (1.0.0.0 to 126.255.255.255)",
    IPv4Class.B: "B (128.0.0.0 to 191.255.255.255)",
    IPv4Class.C: "C (192.0.0.0 to 223.255.255.255)",
    IPv4Class.D: "D (224.0.0.0 to 239.255.255.255) - Multicast",
    IPv4Class.E: "E (240.0.0.0 to 255.255.255.255) - Reserved",
    IPv4Class.UNKNOWN: "Unknown",
}
LOOPBACK_CLASS_DESCRIPTION = "A (127.0.0.0 to 127.255.255.255) - Loopback"


class IPv4Classifier:
    """
    Classify IPv4 addresses.

    Class is taken from the first octet using the classful boundaries.
    Private scope covers 10/8, 172.16/12, 192.168/16 and 127/8; everything
    else is public. The special-use overlay is evaluated separately:
    - loopback: exactly 127.0.0.1
    - linklocal: 169.254.x.x
    - multicast: 224-239.x.x.x
    """

    LOOPBACK_LITERAL = "127.0.0.1"
    LINK_LOCAL_PREFIX = "169.254."

    @classmethod
    def get_class(cls, first_octet: int) -> IPv4Class:
        """Legacy class for a first octet"""
        if 1 <= first_octet <= 127:
            return IPv4Class.A
        elif 128 <= first_octet <= 191:
            return IPv4Class.B
        elif 192 <= first_octet <= 223:
            return IPv4Class.C
        elif 224 <= first_octet <= 239:
            return IPv4Class.D
        elif 240 <= first_octet <= 255:
            return IPv4Class.E

        return IPv4Class.UNKNOWN

    @classmethod
    def describe_class(cls, first_octet: int) -> str:
        """Class with its address range, e.g. 'C (192.0.0.0 to 223.255.255.255)'"""
        if first_octet == 127:
            return LOOPBACK_CLASS_DESCRIPTION
        return CLASS_DESCRIPTIONS[cls.get_class(first_octet)]

    @classmethod
    def get_scope(cls, parsed: ParsedIPv4) -> Scope:
        """
        Private/public scope.

        Rules are checked in order, first match wins.
        """
        first, second = parsed.first, parsed.second

        # 10.0.0.0/8
        if first == 10:
            return Scope.PRIVATE
        # 172.16.0.0/12
        if first == 172 and 16 <= second <= 31:
            return Scope.PRIVATE
        # 192.168.0.0/16
        if first == 192 and second == 168:
            return Scope.PRIVATE
        # 127.0.0.0/8, loopback counts as private
        if first == 127:
            return Scope.PRIVATE

        return Scope.PUBLIC

    @classmethod
    def get_special(cls, address: str, parsed: ParsedIPv4) -> SpecialCategory:
        """
        Special-use category.

        Args:
            address: The literal as entered (matched textually)
            parsed: Its octets

        Returns:
            SpecialCategory enum value
        """
        if address == cls.LOOPBACK_LITERAL:
            return SpecialCategory.LOOPBACK

        if address.startswith(cls.LINK_LOCAL_PREFIX):
            return SpecialCategory.LINK_LOCAL

        if 224 <= parsed.first <= 239:
            return SpecialCategory.MULTICAST

        return SpecialCategory.NONE

    @classmethod
    def to_binary(cls, parsed: ParsedIPv4) -> str:
        """Dotted binary form, 8 bits per octet"""
        return '.'.join(format(octet, '08b') for octet in parsed.octets)


class IPv6Classifier:
    """
    Classify IPv6 addresses by literal prefix.

    Input is lowercased first so that uppercase hex groups accepted by the
    validator match the same prefixes.

    Categories, first match wins:
    - loopback: ::1
    - linklocal: fe80:
    - uniquelocal: fc00: or fd00: (private)
    - multicast: ff00:
    - none: global unicast (public)
    """

    LOOPBACK_LITERAL = "::1"
    LINK_LOCAL_PREFIX = "fe80:"
    UNIQUE_LOCAL_PREFIXES = ("fc00:", "fd00:")
    MULTICAST_PREFIX = "ff00:"

    @classmethod
    def get_special(cls, address: str) -> SpecialCategory:
        """Special-use category for a validated IPv6 literal"""
        addr = address.lower()

        if addr == cls.LOOPBACK_LITERAL:
            return SpecialCategory.LOOPBACK

        if addr.startswith(cls.LINK_LOCAL_PREFIX):
            return SpecialCategory.LINK_LOCAL

        if addr.startswith(cls.UNIQUE_LOCAL_PREFIXES):
            return SpecialCategory.UNIQUE_LOCAL

        if addr.startswith(cls.MULTICAST_PREFIX):
            return SpecialCategory.MULTICAST

        return SpecialCategory.NONE

    @classmethod
    def get_scope(cls, address: str) -> Scope:
        """Private for loopback and unique-local, public otherwise"""
        special = cls.get_special(address)
        if special in (SpecialCategory.LOOPBACK, SpecialCategory.UNIQUE_LOCAL):
            return Scope.PRIVATE
        return Scope.PUBLIC
