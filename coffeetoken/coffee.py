"""Coffee loyalty points and free-coffee credits per account."""

from coffeetoken.environment import Address, Env
from coffeetoken.storage_types import DataKey


def read_coffee_points(env: Env, account: Address) -> int:
    return env.instance.get(DataKey.coffee_points(account), 0)


def write_coffee_points(env: Env, account: Address, points: int) -> None:
    env.instance.set(DataKey.coffee_points(account), points)


def read_free_coffee(env: Env, account: Address) -> int:
    return env.instance.get(DataKey.free_coffee(account), 0)


def write_free_coffee(env: Env, account: Address, count: int) -> None:
    env.instance.set(DataKey.free_coffee(account), count)