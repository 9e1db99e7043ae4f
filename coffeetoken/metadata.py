"""Token name, symbol and decimal places."""

from dataclasses import dataclass

from coffeetoken.environment import ContractError, Env

METADATA_KEY = "METADATA"


@dataclass(frozen=True)
class TokenMetadata:
    decimal: int
    name: str
    symbol: str


def read_metadata(env: Env) -> TokenMetadata:
    metadata = env.instance.get(METADATA_KEY)
    if metadata is None:
        raise ContractError("metadata is not set")
    return metadata


def read_decimal(env: Env) -> int:
    return read_metadata(env).decimal


def read_name(env: Env) -> str:
    return read_metadata(env).name


def read_symbol(env: Env) -> str:
    return read_metadata(env).symbol


def write_metadata(env: Env, metadata: TokenMetadata) -> None:
    env.instance.set(METADATA_KEY, metadata)