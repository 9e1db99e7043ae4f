"""Reading and writing the token administrator."""

from coffeetoken.environment import Address, ContractError, Env
from coffeetoken.storage_types import DataKey


def has_administrator(env: Env) -> bool:
    return env.instance.has(DataKey.admin())


def read_administrator(env: Env) -> Address:
    admin = env.instance.get(DataKey.admin())
    if admin is None:
        raise ContractError("administrator is not set")
    return admin


def write_administrator(env: Env, admin: Address) -> None:
    env.instance.set(DataKey.admin(), admin)