"""Account token balances."""

from coffeetoken.environment import Address, ContractError, Env
from coffeetoken.storage_types import (
    BALANCE_BUMP_AMOUNT,
    BALANCE_LIFETIME_THRESHOLD,
    I128_MAX,
    I128_MIN,
    DataKey,
)


def read_balance(env: Env, address: Address) -> int:
    key = DataKey.balance(address)
    balance = env.persistent.get(key)
    if balance is None:
        return 0
    env.persistent.extend_ttl(key, BALANCE_LIFETIME_THRESHOLD, BALANCE_BUMP_AMOUNT)
    return balance


def _write_balance(env: Env, address: Address, amount: int) -> None:
    if not I128_MIN <= amount <= I128_MAX:
        raise ContractError("arithmetic overflow")
    key = DataKey.balance(address)
    env.persistent.set(key, amount)
    env.persistent.extend_ttl(key, BALANCE_LIFETIME_THRESHOLD, BALANCE_BUMP_AMOUNT)


def receive_balance(env: Env, address: Address, amount: int) -> None:
    _write_balance(env, address, read_balance(env, address) + amount)


def spend_balance(env: Env, address: Address, amount: int) -> None:
    balance = read_balance(env, address)
    if balance < amount:
        raise ContractError("insufficient balance")
    _write_balance(env, address, balance - amount)