"""Shared fixtures: resolvers that never touch the network."""

from typing import Optional

import pytest

from ipcheck.analysis import BaseResolver


class StaticResolver(BaseResolver):
    """Resolver answering from a fixed mapping."""

    def __init__(self, names: Optional[dict] = None):
        super().__init__(timeout=0.1)
        self.names = names or {}
        self.calls = []
        self.closed = False

    def resolve(self, address):
        self.calls.append(address)
        return self.names.get(address)

    def close(self):
        self.closed = True


class ExplodingResolver(BaseResolver):
    """Resolver whose lookup always raises."""

    def resolve(self, address):
        raise RuntimeError("resolver crashed")


@pytest.fixture
def static_resolver():
    return StaticResolver({
        "8.8.8.8": "dns.google",
        "127.0.0.1": "localhost",
        "192.168.1.1": "192.168.1.1",
    })


@pytest.fixture
def failing_resolver():
    return StaticResolver()


@pytest.fixture
def exploding_resolver():
    return ExplodingResolver()
