"""The coffee loyalty token contract."""

from __future__ import annotations

import copy
from contextlib import contextmanager
from typing import Iterator

from coffeetoken.admin import has_administrator, read_administrator, write_administrator
from coffeetoken.allowance import read_allowance, spend_allowance, write_allowance
from coffeetoken.balance import read_balance, receive_balance, spend_balance
from coffeetoken.coffee import (
    read_coffee_points,
    read_free_coffee,
    write_coffee_points,
    write_free_coffee,
)
from coffeetoken.environment import Address, ContractError, Env
from coffeetoken.metadata import (
    TokenMetadata,
    read_decimal,
    read_name,
    read_symbol,
    write_metadata,
)
from coffeetoken.storage_types import (
    INSTANCE_BUMP_AMOUNT,
    INSTANCE_LIFETIME_THRESHOLD,
    DataKey,
)

POINTS_PER_FREE_COFFEE = 10
_U8_MAX = 255


def _check_nonnegative_amount(amount: int) -> None:
    if amount < 0:
        raise ContractError(f"negative amount is not allowed: {amount}")


class Token:
    """A fungible token with account freezing and coffee loyalty rewards.

    Every call runs as one invocation: if it raises, the ledger state and
    event log are left as they were before the call.
    """

    def __init__(self, env: Env) -> None:
        self.env = env

    @contextmanager
    def _invocation(self) -> Iterator[Env]:
        env = self.env
        env.begin_invocation()
        saved = (
            copy.deepcopy(env.instance),
            copy.deepcopy(env.persistent),
            copy.deepcopy(env.temporary),
            list(env.events),
            env.instance_ttl,
        )
        try:
            yield env
        except BaseException:
            (
                env.instance,
                env.persistent,
                env.temporary,
                env.events,
                env.instance_ttl,
            ) = saved
            raise

    def _bump_instance(self) -> None:
        self.env.extend_instance_ttl(INSTANCE_LIFETIME_THRESHOLD, INSTANCE_BUMP_AMOUNT)

    def _require_admin(self, function: str, args: tuple) -> Address:
        admin = read_administrator(self.env)
        self.env.require_auth(admin, function, args)
        return admin

    def _ensure_not_frozen(self, account: Address, message: str) -> None:
        if self.is_frozen(account):
            raise ContractError(message)

    # Administration

    def initialize(self, admin: Address, decimal: int, name: str, symbol: str) -> None:
        with self._invocation() as env:
            if has_administrator(env):
                raise ContractError("already initialized")
            write_administrator(env, admin)
            if not 0 <= decimal <= _U8_MAX:
                raise ContractError("Decimal must fit in a u8")
            write_metadata(env, TokenMetadata(decimal=decimal, name=name, symbol=symbol))

    def mint(self, to: Address, amount: int) -> None:
        with self._invocation() as env:
            _check_nonnegative_amount(amount)
            admin = self._require_admin("mint", (to, amount))
            self._bump_instance()
            receive_balance(env, to, amount)
            env.publish(("mint", admin, to), amount)

    def set_admin(self, new_admin: Address) -> None:
        with self._invocation() as env:
            admin = self._require_admin("set_admin", (new_admin,))
            self._bump_instance()
            write_administrator(env, new_admin)
            env.publish(("set_admin", admin), new_admin)

    def freeze_account(self, account: Address) -> None:
        with self._invocation() as env:
            admin = self._require_admin("freeze_account", (account,))
            self._bump_instance()
            env.instance.set(DataKey.frozen(account), True)
            env.publish(("freeze_account", admin, account), None)

    def unfreeze_account(self, account: Address) -> None:
        with self._invocation() as env:
            admin = self._require_admin("unfreeze_account", (account,))
            self._bump_instance()
            env.instance.remove(DataKey.frozen(account))
            env.publish(("unfreeze_account", admin, account), None)

    def is_frozen(self, account: Address) -> bool:
        return bool(self.env.instance.get(DataKey.frozen(account), False))

    # Coffee loyalty

    def add_coffee_point(self, account: Address) -> None:
        with self._invocation() as env:
            admin = self._require_admin("add_coffee_point", (account,))
            self._bump_instance()
            new_points = read_coffee_points(env, account) + 1
            write_coffee_points(env, account, new_points)
            env.publish(("add_coffee_point", admin, account), new_points)

    def check_free_coffee(self, account: Address) -> None:
        with self._invocation() as env:
            admin = self._require_admin("check_free_coffee", (account,))
            self._bump_instance()
            points = read_coffee_points(env, account)
            if points < POINTS_PER_FREE_COFFEE:
                raise ContractError(f"Not enough points: {points}")
            write_coffee_points(env, account, points - POINTS_PER_FREE_COFFEE)
            write_free_coffee(env, account, read_free_coffee(env, account) + 1)
            env.publish(("free_coffee_granted", admin, account), 1)

    def redeem_free_coffee(self, account: Address) -> None:
        with self._invocation() as env:
            admin = self._require_admin("redeem_free_coffee", (account,))
            self._bump_instance()
            free_coffees = read_free_coffee(env, account)
            if free_coffees <= 0:
                raise ContractError("No free coffee available")
            write_free_coffee(env, account, free_coffees - 1)
            env.publish(("free_coffee_redeemed", admin, account), 1)

    # Token interface

    def allowance(self, owner: Address, spender: Address) -> int:
        with self._invocation() as env:
            self._bump_instance()
            return read_allowance(env, owner, spender).amount

    def approve(
        self, owner: Address, spender: Address, amount: int, expiration_ledger: int
    ) -> None:
        with self._invocation() as env:
            env.require_auth(owner, "approve", (owner, spender, amount, expiration_ledger))
            _check_nonnegative_amount(amount)
            self._bump_instance()
            write_allowance(env, owner, spender, amount, expiration_ledger)
            env.publish(("approve", owner, spender), (amount, expiration_ledger))

    def balance(self, address: Address) -> int:
        with self._invocation() as env:
            self._bump_instance()
            return read_balance(env, address)

    def transfer(self, sender: Address, to: Address, amount: int) -> None:
        with self._invocation() as env:
            env.require_auth(sender, "transfer", (sender, to, amount))
            _check_nonnegative_amount(amount)
            self._bump_instance()
            self._ensure_not_frozen(sender, "account is frozen and tokens cannot be transferred")
            spend_balance(env, sender, amount)
            receive_balance(env, to, amount)
            env.publish(("transfer", sender, to), amount)

    def transfer_from(
        self, spender: Address, owner: Address, to: Address, amount: int
    ) -> None:
        with self._invocation() as env:
            env.require_auth(spender, "transfer_from", (spender, owner, to, amount))
            _check_nonnegative_amount(amount)
            self._bump_instance()
            self._ensure_not_frozen(owner, "account is frozen and tokens cannot be transferred")
            spend_allowance(env, owner, spender, amount)
            spend_balance(env, owner, amount)
            receive_balance(env, to, amount)
            env.publish(("transfer", owner, to), amount)

    def burn(self, owner: Address, amount: int) -> None:
        with self._invocation() as env:
            env.require_auth(owner, "burn", (owner, amount))
            _check_nonnegative_amount(amount)
            self._bump_instance()
            self._ensure_not_frozen(owner, "account is frozen and tokens cannot be burned")
            spend_balance(env, owner, amount)
            env.publish(("burn", owner), amount)

    def burn_from(self, spender: Address, owner: Address, amount: int) -> None:
        with self._invocation() as env:
            env.require_auth(spender, "burn_from", (spender, owner, amount))
            _check_nonnegative_amount(amount)
            self._bump_instance()
            self._ensure_not_frozen(owner, "account is frozen and tokens cannot be burned")
            spend_allowance(env, owner, spender, amount)
            spend_balance(env, owner, amount)
            env.publish(("burn", owner), amount)

    def decimals(self) -> int:
        return read_decimal(self.env)

    def name(self) -> str:
        return read_name(self.env)

    def symbol(self) -> str:
        return read_symbol(self.env)