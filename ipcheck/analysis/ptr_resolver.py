"""
PTR (reverse DNS) resolvers
"""

import logging
import socket
import threading
from abc import ABC, abstractmethod
from typing import Optional

import dns.exception
import dns.resolver
import dns.reversename


logger = logging.getLogger(__name__)


class BaseResolver(ABC):
    """Abstract base class for reverse lookups"""

    DEFAULT_TIMEOUT = 2.0

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    @abstractmethod
    def resolve(self, address: str) -> Optional[str]:
        """
        Look up the hostname for an address.

        Args:
            address: IP address literal

        Returns:
            Hostname or None if it could not be resolved
        """
        pass

    def close(self):
        """Release resources"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class SystemResolver(BaseResolver):
    """
    Reverse lookup through the operating system resolver.

    socket.gethostbyaddr has no timeout of its own, so it runs on a
    daemon thread and the caller waits at most ``timeout`` seconds. An
    abandoned lookup never holds up interpreter exit.
    """

    def _resolve_sync(self, address: str, holder: dict):
        """Synchronous PTR lookup, result stored in holder"""
        try:
            hostname, _, _ = socket.gethostbyaddr(address)
            holder["hostname"] = hostname
        except (socket.herror, socket.gaierror, socket.timeout, OSError) as e:
            logger.debug("Reverse lookup for %s failed: %s", address, e)

    def resolve(self, address: str) -> Optional[str]:
        if not address:
            return None

        holder: dict = {}
        worker = threading.Thread(
            target=self._resolve_sync,
            args=(address, holder),
            name=f"ptr-{address}",
            daemon=True
        )
        worker.start()
        worker.join(self.timeout)

        if worker.is_alive():
            logger.debug("Reverse lookup for %s timed out after %.1fs", address, self.timeout)
            return None
        return holder.get("hostname")


class DNSResolver(BaseResolver):
    """
    Reverse lookup by querying PTR records directly with dnspython.

    Bypasses /etc/hosts and the system resolver cache.
    """

    def __init__(self, timeout: float = BaseResolver.DEFAULT_TIMEOUT,
                 nameservers: Optional[list[str]] = None):
        super().__init__(timeout)
        self._resolver: Optional[dns.resolver.Resolver] = None
        try:
            resolver = dns.resolver.Resolver(configure=not nameservers)
        except dns.exception.DNSException as e:
            # No usable resolver configuration; every lookup reports failure
            logger.warning("DNS resolver unavailable: %s", e)
            return

        if nameservers:
            resolver.nameservers = nameservers
        resolver.timeout = timeout
        resolver.lifetime = timeout
        self._resolver = resolver

    def resolve(self, address: str) -> Optional[str]:
        if not address or self._resolver is None:
            return None

        try:
            name = dns.reversename.from_address(address)
            answers = self._resolver.resolve(name, 'PTR')
            for rdata in answers:
                return str(rdata.target).rstrip('.')
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer,
                dns.resolver.NoNameservers, dns.exception.Timeout) as e:
            logger.debug("PTR query for %s failed: %s", address, e)
            return None
        except (dns.exception.DNSException, ValueError) as e:
            logger.debug("PTR query for %s rejected: %s", address, e)
            return None
        return None


RESOLVERS = {
    'system': SystemResolver,
    'dns': DNSResolver,
}


def create_resolver(name: str, timeout: float = BaseResolver.DEFAULT_TIMEOUT) -> BaseResolver:
    """Build a resolver by its CLI name"""
    try:
        resolver_cls = RESOLVERS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown resolver: {name}") from None
    return resolver_cls(timeout=timeout)
