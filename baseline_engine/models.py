"""
Transaction value object shared by the classifiers and the baseline calculator.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Optional


# Accepted spellings for each field (snake_case first, then camelCase / PLAID-style)
_FIELD_ALIASES = {
    "amount_cents": ("amount_cents", "amountCents"),
    "merchant_name": ("merchant_name", "merchantName"),
    "category_top": ("category_top", "categoryTop"),
    "category_sub": ("category_sub", "categorySub"),
}


def _lookup(data: Dict[str, Any], field_name: str) -> Any:
    for key in _FIELD_ALIASES.get(field_name, (field_name,)):
        if key in data and data[key] is not None:
            return data[key]
    return None


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()
        except ValueError:
            raise ValueError(f"Invalid transaction date: {value!r}")
    raise ValueError(f"Invalid transaction date: {value!r}")


def _parse_cents(data: Dict[str, Any]) -> int:
    cents = _lookup(data, "amount_cents")
    if cents is not None:
        if isinstance(cents, bool):
            raise ValueError(f"Invalid amount_cents: {cents!r}")
        try:
            as_decimal = Decimal(str(cents))
        except InvalidOperation:
            raise ValueError(f"Invalid amount_cents: {cents!r}")
        if as_decimal != as_decimal.to_integral_value():
            raise ValueError(f"amount_cents must be a whole number: {cents!r}")
        return int(as_decimal)

    amount = data.get("amount")
    if amount is None or isinstance(amount, bool):
        raise ValueError("Transaction is missing an amount")
    try:
        major = Decimal(str(amount))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount!r}")
    return int((major * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Transaction:
    """A single bank transaction, read-only to the engine."""
    date: date
    amount_cents: int  # negative = outflow, positive = inflow
    name: Optional[str] = None
    merchant_name: Optional[str] = None
    category_top: Optional[str] = None
    category_sub: Optional[str] = None
    pending: bool = False

    @property
    def is_inflow(self) -> bool:
        return self.amount_cents > 0

    @property
    def is_outflow(self) -> bool:
        return self.amount_cents < 0

    @property
    def month_key(self) -> date:
        """First day of the transaction's calendar month."""
        return self.date.replace(day=1)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transaction":
        """
        Build a Transaction from a raw dictionary.

        Accepts snake_case or camelCase keys. When no cents field is present,
        a decimal ``amount`` in major units is converted to cents (half-up).

        Raises:
            ValueError: if the date or amount is missing or malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f"Transaction must be a dict, got {type(data).__name__}")
        if data.get("date") is None:
            raise ValueError("Transaction is missing a date")

        return cls(
            date=_parse_date(data["date"]),
            amount_cents=_parse_cents(data),
            name=data.get("name"),
            merchant_name=_lookup(data, "merchant_name"),
            category_top=_lookup(data, "category_top"),
            category_sub=_lookup(data, "category_sub"),
            pending=bool(data.get("pending", False)),
        )
