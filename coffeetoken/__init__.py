"""In-memory coffee loyalty token ledger: balances, allowances, freezing and free-coffee rewards."""

__version__ = "0.0.1"
__all__ = [
    "admin",
    "allowance",
    "balance",
    "coffee",
    "contract",
    "environment",
    "metadata",
    "storage_types",
]