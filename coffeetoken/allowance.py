"""Spending allowances granted by one account to another."""

from coffeetoken.environment import Address, ContractError, Env
from coffeetoken.storage_types import AllowanceValue, DataKey


def read_allowance(env: Env, owner: Address, spender: Address) -> AllowanceValue:
    """Return the allowance, with a zero amount once it has expired."""
    allowance = env.temporary.get(DataKey.allowance(owner, spender))
    if allowance is None:
        return AllowanceValue(amount=0, expiration_ledger=0)
    if allowance.expiration_ledger < env.ledger_sequence:
        return AllowanceValue(amount=0, expiration_ledger=allowance.expiration_ledger)
    return allowance


def write_allowance(
    env: Env, owner: Address, spender: Address, amount: int, expiration_ledger: int
) -> None:
    if amount > 0 and expiration_ledger < env.ledger_sequence:
        raise ContractError("expiration_ledger is less than ledger seq when amount > 0")

    key = DataKey.allowance(owner, spender)
    env.temporary.set(key, AllowanceValue(amount=amount, expiration_ledger=expiration_ledger))

    if amount > 0:
        live_for = expiration_ledger - env.ledger_sequence
        env.temporary.extend_ttl(key, live_for, live_for)


def spend_allowance(env: Env, owner: Address, spender: Address, amount: int) -> None:
    allowance = read_allowance(env, owner, spender)
    if allowance.amount < amount:
        raise ContractError("insufficient allowance")
    write_allowance(
        env, owner, spender, allowance.amount - amount, allowance.expiration_ledger
    )