"""
Address classification shared by the CLI and the form
"""

import logging
from typing import Optional

from .models import (
    ClassificationResult, ErrorKind, HostnameStatus, IPVersion,
)
from .analysis import (
    AddressFormat, BaseResolver, IPv4Classifier, IPv6Classifier,
    classify_format, parse_ipv4,
)


logger = logging.getLogger(__name__)


def lookup_hostname(address: str, resolver: BaseResolver) -> tuple[Optional[str], HostnameStatus]:
    """
    Best-effort reverse lookup.

    Never raises: any resolver error is reported as FAILED.

    Returns:
        (hostname, status) tuple
    """
    try:
        hostname = resolver.resolve(address)
    except Exception as e:
        logger.warning("Resolver error for %s: %s", address, e)
        return None, HostnameStatus.FAILED

    if not hostname:
        return None, HostnameStatus.FAILED
    if hostname == address:
        return hostname, HostnameStatus.SAME_AS_INPUT
    return hostname, HostnameStatus.RESOLVED


def classify(raw: Optional[str], resolver: Optional[BaseResolver] = None) -> ClassificationResult:
    """
    Validate and classify an address.

    Empty and malformed input end the query with no further analysis.
    Hostname lookup only runs for valid input when a resolver is given.

    Args:
        raw: Address as entered by the user
        resolver: Optional reverse lookup collaborator

    Returns:
        ClassificationResult
    """
    address = (raw or "").strip()

    if not address:
        return ClassificationResult(address=address, error=ErrorKind.EMPTY_INPUT)

    fmt = classify_format(address)
    logger.debug("%s classified as %s", address, fmt.value)

    if fmt == AddressFormat.INVALID:
        return ClassificationResult(address=address, error=ErrorKind.INVALID_FORMAT)

    if fmt == AddressFormat.IPV4:
        parsed = parse_ipv4(address)
        fields = dict(
            ip_version=IPVersion.V4,
            ip_class=IPv4Classifier.get_class(parsed.first),
            scope=IPv4Classifier.get_scope(parsed),
            special=IPv4Classifier.get_special(address, parsed),
            octets=parsed,
            binary=IPv4Classifier.to_binary(parsed),
        )
    else:
        fields = dict(
            ip_version=IPVersion.V6,
            scope=IPv6Classifier.get_scope(address),
            special=IPv6Classifier.get_special(address),
        )

    error = None
    hostname = None
    status = HostnameStatus.SKIPPED
    if resolver is not None:
        hostname, status = lookup_hostname(address, resolver)
        if status == HostnameStatus.FAILED:
            error = ErrorKind.RESOLUTION_FAILURE

    return ClassificationResult(
        address=address,
        is_valid=True,
        error=error,
        hostname=hostname,
        hostname_status=status,
        **fields
    )
