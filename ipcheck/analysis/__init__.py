"""
Address analysis modules for IPCheck
"""

from .validator import AddressFormat, classify_format, parse_ipv4
from .ip_classifier import IPv4Classifier, IPv6Classifier
from .ptr_resolver import BaseResolver, SystemResolver, DNSResolver, create_resolver

__all__ = [
    'AddressFormat', 'classify_format', 'parse_ipv4',
    'IPv4Classifier', 'IPv6Classifier',
    'BaseResolver', 'SystemResolver', 'DNSResolver', 'create_resolver',
]
