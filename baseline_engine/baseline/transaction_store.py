"""
Transaction store contract consumed by the baseline calculator.

The real store (database, bank sync) lives outside the engine; the in-memory
implementation backs the batch processor and the tests.
"""

from datetime import date
from typing import Dict, Iterable, List, Optional, Protocol

from ..models import Transaction


class TransactionStore(Protocol):
    """Returns every transaction (pending and posted) dated within [start, end]."""

    def find_by_user_and_date_range(
        self,
        user_id: str,
        start: date,
        end: date
    ) -> List[Transaction]:
        ...


class InMemoryTransactionStore:
    """Dictionary-backed TransactionStore."""

    def __init__(self, transactions_by_user: Optional[Dict[str, Iterable[Transaction]]] = None):
        self._transactions: Dict[str, List[Transaction]] = {}
        for user_id, transactions in (transactions_by_user or {}).items():
            self.add_transactions(user_id, transactions)

    def add_transactions(self, user_id: str, transactions: Iterable[Transaction]) -> None:
        self._transactions.setdefault(user_id, []).extend(transactions)

    def find_by_user_and_date_range(
        self,
        user_id: str,
        start: date,
        end: date
    ) -> List[Transaction]:
        return [
            t for t in self._transactions.get(user_id, [])
            if start <= t.date <= end
        ]
