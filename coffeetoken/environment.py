"""An in-memory ledger environment that the token contract runs against."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Hashable


class ContractError(Exception):
    """Raised when a contract call is rejected."""


class AuthorizationError(ContractError):
    """Raised when an address has not authorized a call."""


@dataclass(frozen=True, order=True)
class Address:
    """An opaque account or contract identifier."""

    id: str

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class Event:
    """A published contract event."""

    topics: tuple
    data: Any


@dataclass(frozen=True)
class AuthorizedInvocation:
    """A record of one address authorizing one contract function call."""

    address: Address
    function: str
    args: tuple
    sub_invocations: tuple = ()


class Storage:
    """A key-value store whose entries carry a time-to-live in ledgers."""

    def __init__(self) -> None:
        self._values: dict[Hashable, Any] = {}
        self._ttls: dict[Hashable, int] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def has(self, key: Hashable) -> bool:
        return key in self._values

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: Hashable, value: Any) -> None:
        self._values[key] = value
        self._ttls.setdefault(key, 0)

    def remove(self, key: Hashable) -> None:
        self._values.pop(key, None)
        self._ttls.pop(key, None)

    def extend_ttl(self, key: Hashable, threshold: int, extend_to: int) -> None:
        """Raise the entry's TTL to ``extend_to`` if it is below ``threshold``."""
        if key not in self._values:
            raise KeyError(key)
        if self._ttls[key] < threshold:
            self._ttls[key] = extend_to

    def ttl(self, key: Hashable) -> int:
        if key not in self._values:
            raise KeyError(key)
        return self._ttls[key]


@dataclass
class Env:
    """Ledger state, event log and authorization record for contract calls."""

    ledger_sequence: int = 0
    instance: Storage = field(default_factory=Storage)
    persistent: Storage = field(default_factory=Storage)
    temporary: Storage = field(default_factory=Storage)
    events: list[Event] = field(default_factory=list)
    instance_ttl: int = 0
    _auths_mocked: bool = field(default=False, repr=False)
    _auths: list[AuthorizedInvocation] = field(default_factory=list, repr=False)
    _counter: itertools.count = field(default_factory=lambda: itertools.count(1), repr=False)

    def generate_address(self) -> Address:
        """Return a fresh address not handed out before by this environment."""
        return Address(f"ADDR{next(self._counter):08d}")

    def mock_all_auths(self) -> None:
        """Treat every authorization request as granted."""
        self._auths_mocked = True

    def require_auth(self, address: Address, function: str, args: tuple) -> None:
        if not self._auths_mocked:
            raise AuthorizationError(f"{address} has not authorized {function}")
        self._auths.append(AuthorizedInvocation(address, function, tuple(args)))

    def auths(self) -> list[AuthorizedInvocation]:
        """Authorizations recorded during the latest invocation."""
        return list(self._auths)

    def begin_invocation(self) -> None:
        """Start a new contract invocation, forgetting the previous authorizations."""
        self._auths.clear()

    def publish(self, topics: tuple, data: Any) -> None:
        self.events.append(Event(tuple(topics), data))

    def extend_instance_ttl(self, threshold: int, extend_to: int) -> None:
        if self.instance_ttl < threshold:
            self.instance_ttl = extend_to