"""Storage keys, stored value types and TTL constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from coffeetoken.environment import Address

DAY_IN_LEDGERS = 17280
INSTANCE_BUMP_AMOUNT = 7 * DAY_IN_LEDGERS
INSTANCE_LIFETIME_THRESHOLD = INSTANCE_BUMP_AMOUNT - DAY_IN_LEDGERS

BALANCE_BUMP_AMOUNT = 30 * DAY_IN_LEDGERS
BALANCE_LIFETIME_THRESHOLD = BALANCE_BUMP_AMOUNT - DAY_IN_LEDGERS

I128_MIN = -(2**127)
I128_MAX = 2**127 - 1
U32_MAX = 2**32 - 1


class KeyKind(Enum):
    ALLOWANCE = auto()
    BALANCE = auto()
    NONCE = auto()
    STATE = auto()
    ADMIN = auto()
    FROZEN = auto()
    COFFEE_POINTS = auto()
    FREE_COFFEE = auto()


@dataclass(frozen=True)
class AllowanceDataKey:
    owner: Address
    spender: Address


@dataclass(frozen=True)
class AllowanceValue:
    amount: int
    expiration_ledger: int


@dataclass(frozen=True)
class DataKey:
    """A typed storage key: a kind plus the account or pair it refers to."""

    kind: KeyKind
    subject: Union[Address, AllowanceDataKey, None] = None

    @classmethod
    def admin(cls) -> DataKey:
        return cls(KeyKind.ADMIN)

    @classmethod
    def balance(cls, address: Address) -> DataKey:
        return cls(KeyKind.BALANCE, address)

    @classmethod
    def frozen(cls, address: Address) -> DataKey:
        return cls(KeyKind.FROZEN, address)

    @classmethod
    def coffee_points(cls, address: Address) -> DataKey:
        return cls(KeyKind.COFFEE_POINTS, address)

    @classmethod
    def free_coffee(cls, address: Address) -> DataKey:
        return cls(KeyKind.FREE_COFFEE, address)

    @classmethod
    def allowance(cls, owner: Address, spender: Address) -> DataKey:
        return cls(KeyKind.ALLOWANCE, AllowanceDataKey(owner, spender))