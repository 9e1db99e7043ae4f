import pytest

from coffeetoken.allowance import read_allowance, spend_allowance, write_allowance
from coffeetoken.environment import ContractError, Env
from coffeetoken.storage_types import AllowanceValue, DataKey


@pytest.fixture
def env():
    return Env()


@pytest.fixture
def owner(env):
    return env.generate_address()


@pytest.fixture
def spender(env):
    return env.generate_address()


def test_missing_allowance_is_zero(env, owner, spender):
    assert read_allowance(env, owner, spender) == AllowanceValue(0, 0)


def test_write_then_read(env, owner, spender):
    write_allowance(env, owner, spender, 500, 200)
    assert read_allowance(env, owner, spender) == AllowanceValue(500, 200)
    assert read_allowance(env, spender, owner).amount == 0


def test_expired_allowance_reads_as_zero(env, owner, spender):
    write_allowance(env, owner, spender, 500, 200)
    env.ledger_sequence = 201
    assert read_allowance(env, owner, spender) == AllowanceValue(0, 200)


def test_write_expired_with_positive_amount_raises(env, owner, spender):
    env.ledger_sequence = 300
    with pytest.raises(ContractError, match="expiration_ledger is less than ledger seq"):
        write_allowance(env, owner, spender, 1, 200)


def test_write_zero_amount_with_past_expiration_is_allowed(env, owner, spender):
    env.ledger_sequence = 300
    write_allowance(env, owner, spender, 0, 200)
    assert read_allowance(env, owner, spender) == AllowanceValue(0, 200)


def test_ttl_lasts_until_expiration(env, owner, spender):
    env.ledger_sequence = 50
    write_allowance(env, owner, spender, 10, 200)
    assert env.temporary.ttl(DataKey.allowance(owner, spender)) == 150


@pytest.mark.parametrize("spent, remaining", [(500, 0), (200, 300), (0, 500)])
def test_spend_reduces_allowance(env, owner, spender, spent, remaining):
    write_allowance(env, owner, spender, 500, 200)
    spend_allowance(env, owner, spender, spent)
    assert read_allowance(env, owner, spender) == AllowanceValue(remaining, 200)


def test_spend_more_than_allowed_raises(env, owner, spender):
    write_allowance(env, owner, spender, 100, 200)
    with pytest.raises(ContractError, match="insufficient allowance"):
        spend_allowance(env, owner, spender, 101)
    assert read_allowance(env, owner, spender).amount == 100