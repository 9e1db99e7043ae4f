import pytest

from coffeetoken.environment import ContractError, Env
from coffeetoken.metadata import (
    TokenMetadata,
    read_decimal,
    read_metadata,
    read_name,
    read_symbol,
    write_metadata,
)


def test_round_trip():
    env = Env()
    metadata = TokenMetadata(decimal=7, name="name", symbol="symbol")
    write_metadata(env, metadata)
    assert read_metadata(env) == metadata
    assert read_decimal(env) == 7
    assert read_name(env) == "name"
    assert read_symbol(env) == "symbol"


def test_missing_metadata_raises():
    env = Env()
    with pytest.raises(ContractError):
        read_name(env)


def test_overwrite_replaces_metadata():
    env = Env()
    write_metadata(env, TokenMetadata(7, "name", "symbol"))
    write_metadata(env, TokenMetadata(2, "other", "OTH"))
    assert read_metadata(env) == TokenMetadata(2, "other", "OTH")