# coffeetoken

An in-memory loyalty token ledger for a coffee shop. It keeps token
balances, spending allowances, frozen accounts and a coffee-point
scheme in which ten points earn one free coffee.

All state lives in an `Env` (from `coffeetoken.environment`), which
also records authorizations and published events, so the ledger can be
driven and inspected from ordinary Python code and tests.

## Installation

```
pip install .
```

## Usage

```python
from coffeetoken.environment import Env
from coffeetoken.contract import Token

env = Env()
env.mock_all_auths()

admin = env.generate_address()
alice = env.generate_address()
bob = env.generate_address()

token = Token(env)
token.initialize(admin, 7, "name", "symbol")

token.mint(alice, 1000)
token.transfer(alice, bob, 600)
assert token.balance(alice) == 400
assert token.balance(bob) == 600

# Allowances stop counting once env.ledger_sequence passes their expiration ledger.
token.approve(bob, alice, 100, 200)
token.transfer_from(alice, bob, alice, 50)
assert token.allowance(bob, alice) == 50

# Loyalty points: ten points become one free coffee.
for _ in range(10):
    token.add_coffee_point(alice)
token.check_free_coffee(alice)
token.redeem_free_coffee(alice)

# Frozen accounts can neither transfer nor burn.
token.freeze_account(bob)
assert token.is_frozen(bob)
token.unfreeze_account(bob)
```

`Token` offers `initialize`, `mint`, `set_admin`, `freeze_account`,
`unfreeze_account`, `is_frozen`, `add_coffee_point`,
`check_free_coffee`, `redeem_free_coffee`, `allowance`, `approve`,
`balance`, `transfer`, `transfer_from`, `burn`, `burn_from`,
`decimals`, `name` and `symbol`. Administrative and loyalty calls
require the administrator's authorization; transfers, burns and
approvals require the authorization of the sender, spender or owner.

## Errors

Operations that the ledger refuses raise `ContractError`, for example
"insufficient balance", "insufficient allowance", "already
initialized", "Decimal must fit in a u8" (decimals must lie in
0–255), "Not enough points: N", "No free coffee available", a negative
amount, or a transfer or burn from a frozen account. When
`mock_all_auths()` has not been called, every authorization request
raises `AuthorizationError`, a subclass of `ContractError`. Both live
in `coffeetoken.environment`.

A `Token` call that raises leaves the storage, the event log and the
instance TTL exactly as they were before the call.

## Inspecting the ledger

Every `Token` call other than `decimals`, `name`, `symbol` and
`is_frozen` starts a new invocation; afterwards `env.auths()` returns
the `AuthorizedInvocation` records (address, function name and
arguments) that the call required. Published events accumulate in
`env.events` as `Event(topics, data)` values.

State is kept in three `Storage` stores on the environment
(`instance`, `persistent` and `temporary`), keyed by `DataKey` values
from `coffeetoken.storage_types`. Entries carry a time-to-live that
can be read with `Storage.ttl`.

## What it does not do

The ledger lives only in memory: nothing is saved to disk and there is
no network interface or command-line tool. Time-to-live values are
recorded and extended but never count down, so entries are never
evicted; only allowance expiry, compared against `env.ledger_sequence`,
has an effect.

## Running the tests

```
pip install .[test]
pytest
```