import pytest

from coffeetoken.admin import has_administrator, read_administrator, write_administrator
from coffeetoken.environment import ContractError, Env


@pytest.fixture
def env():
    return Env()


def test_no_administrator_initially(env):
    assert has_administrator(env) is False


def test_read_without_administrator_raises(env):
    with pytest.raises(ContractError):
        read_administrator(env)


@pytest.mark.parametrize("count", [1, 2, 3])
def test_last_written_administrator_wins(env, count):
    admins = [env.generate_address() for _ in range(count)]
    for admin in admins:
        write_administrator(env, admin)
    assert has_administrator(env) is True
    assert read_administrator(env) == admins[-1]