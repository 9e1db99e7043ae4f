import pytest

from coffeetoken.balance import read_balance, receive_balance, spend_balance
from coffeetoken.environment import ContractError, Env
from coffeetoken.storage_types import BALANCE_BUMP_AMOUNT, I128_MAX, DataKey


@pytest.fixture
def env():
    return Env()


@pytest.fixture
def user(env):
    return env.generate_address()


def test_unknown_account_has_zero(env, user):
    assert read_balance(env, user) == 0


def test_receive_and_spend(env, user):
    receive_balance(env, user, 1000)
    spend_balance(env, user, 600)
    assert read_balance(env, user) == 400


def test_spend_more_than_balance_raises(env, user):
    receive_balance(env, user, 1000)
    with pytest.raises(ContractError, match="insufficient balance"):
        spend_balance(env, user, 1001)
    assert read_balance(env, user) == 1000


def test_balance_ttl_is_extended(env, user):
    receive_balance(env, user, 5)
    assert env.persistent.ttl(DataKey.balance(user)) == BALANCE_BUMP_AMOUNT


def test_overflow_raises(env, user):
    receive_balance(env, user, I128_MAX)
    with pytest.raises(ContractError):
        receive_balance(env, user, 1)
    assert read_balance(env, user) == I128_MAX