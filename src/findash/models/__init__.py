"""ORM tables. Importing this package registers every mapper."""
from findash.models.finance import (
    Asset,
    Category,
    Investment,
    Transaction,
    TransactionType,
)

__all__ = ["Asset", "Category", "Investment", "Transaction", "TransactionType"]
