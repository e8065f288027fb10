"""JSON snapshot repository for one user's financial records.

The snapshot is a single JSON object with the optional keys
``transactions``, ``splits``, ``accounts``, ``budgets``, ``debts`` and
``goals``, each holding a list of objects named after the record fields.
"""

from collections.abc import Callable
from datetime import date, datetime, timezone
from decimal import InvalidOperation
import json
from pathlib import Path
from typing import TypeVar

from src.application.ports.records_repository import FinancialRecordsPort
from src.domain.models import (
    Account,
    Budget,
    Debt,
    Goal,
    Transaction,
    TransactionSplit,
)
from src.utils.decimal_utils import coerce_decimal

T = TypeVar("T")

ROW_ERRORS = (
    AttributeError,
    InvalidOperation,
    KeyError,
    TypeError,
    ValueError,
)


class JsonFinancialRecordsRepository(FinancialRecordsPort):
    """Repository reading records from a JSON snapshot file."""

    def __init__(self, path: Path | str) -> None:
        """Initialize the repository.

        Args:
            path: Path to the snapshot file.
        """
        self._path = Path(path)
        self._payload: dict | None = None

    def fetch_transactions(self) -> list[Transaction]:
        """Return transactions ordered by occurrence."""
        transactions = self._map_rows("transactions", _transaction_from_row)
        return sorted(transactions, key=lambda tx: tx.occurred_at)

    def fetch_splits(self) -> list[TransactionSplit]:
        """Return the category splits of the transactions."""
        return self._map_rows("splits", _split_from_row)

    def fetch_accounts(self) -> list[Account]:
        """Return account snapshots with current balances."""
        return self._map_rows("accounts", _account_from_row)

    def fetch_budgets(self) -> list[Budget]:
        """Return the user's budgets."""
        return self._map_rows("budgets", _budget_from_row)

    def fetch_debts(self) -> list[Debt]:
        """Return active debts."""
        active = [
            row
            for row in self._rows("debts")
            if not isinstance(row, dict)
            or row.get("status", "active") == "active"
        ]
        return self._map_rows("debts", _debt_from_row, rows=active)

    def fetch_goals(self) -> list[Goal]:
        """Return savings goals."""
        return self._map_rows("goals", _goal_from_row)

    def _map_rows(
        self,
        key: str,
        build: Callable[[dict], T],
        rows: list | None = None,
    ) -> list[T]:
        records: list[T] = []
        for index, row in enumerate(self._rows(key) if rows is None else rows):
            try:
                records.append(build(row))
            except ROW_ERRORS as exc:
                raise RuntimeError(
                    f"Malformed {key} row {index} in {self._path}: "
                    f"{exc!r}"
                ) from exc
        return records

    def _rows(self, key: str) -> list:
        payload = self._load()
        rows = payload.get(key, [])
        if not isinstance(rows, list):
            raise RuntimeError(
                f"Records snapshot key '{key}' must hold a list: {self._path}"
            )
        return rows

    def _load(self) -> dict:
        if self._payload is not None:
            return self._payload
        try:
            with self._path.open(encoding="utf-8") as handle:
                payload = json.load(handle)
        except OSError as exc:
            raise RuntimeError(
                f"Unable to read records snapshot {self._path}: {exc}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise RuntimeError(
                f"Malformed records snapshot {self._path}: {exc}"
            ) from exc
        if not isinstance(payload, dict):
            raise RuntimeError(
                f"Records snapshot must be a JSON object: {self._path}"
            )
        self._payload = payload
        return payload


def _transaction_from_row(row: dict) -> Transaction:
    return Transaction(
        id=str(row["id"]),
        account_id=str(row["account_id"]),
        amount=coerce_decimal(row["amount"]),
        occurred_at=_parse_datetime(row["occurred_at"]),
        currency=row.get("currency", "EUR"),
        merchant=row.get("merchant"),
        category=row.get("category"),
        budget_id=row.get("budget_id"),
    )


def _split_from_row(row: dict) -> TransactionSplit:
    return TransactionSplit(
        transaction_id=str(row["transaction_id"]),
        amount=coerce_decimal(row["amount"]),
        category_id=row.get("category_id"),
    )


def _account_from_row(row: dict) -> Account:
    return Account(
        id=str(row["id"]),
        balance=coerce_decimal(row.get("balance")),
        name=row.get("name", ""),
        account_type=row.get("type", "bank"),
        currency=row.get("currency", "EUR"),
        hidden=bool(row.get("hidden", False)),
        archived=bool(row.get("archived", False)),
    )


def _budget_from_row(row: dict) -> Budget:
    threshold = row.get("alert_threshold")
    return Budget(
        id=str(row["id"]),
        start_date=_parse_date(row["start_date"]),
        total_amount=coerce_decimal(row["total_amount"]),
        name=row.get("name", ""),
        category_id=row.get("category_id"),
        end_date=_parse_optional_date(row.get("end_date")),
        alert_threshold=(
            coerce_decimal(threshold) if threshold is not None else None
        ),
        carry_over=bool(row.get("carry_over", False)),
    )


def _debt_from_row(row: dict) -> Debt:
    return Debt(
        id=str(row["id"]),
        current_balance=coerce_decimal(row["current_balance"]),
        interest_rate=coerce_decimal(row["interest_rate"]),
        minimum_payment=coerce_decimal(row["minimum_payment"]),
        name=row.get("name", ""),
        interest_type=row.get("interest_type", "simple"),
    )


def _goal_from_row(row: dict) -> Goal:
    return Goal(
        id=str(row["id"]),
        target_amount=coerce_decimal(row["target_amount"]),
        current_amount=coerce_decimal(row.get("current_amount")),
        monthly_contribution=coerce_decimal(row.get("monthly_contribution")),
        name=row.get("name", ""),
        target_date=_parse_optional_date(row.get("target_date")),
    )


def _parse_datetime(value: str) -> datetime:
    """Parse an ISO timestamp into naive UTC; naive input is kept as is."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed
    return parsed.astimezone(timezone.utc).replace(tzinfo=None)


def _parse_date(value: str) -> date:
    return date.fromisoformat(value[:10])


def _parse_optional_date(value: str | None) -> date | None:
    if not value:
        return None
    return _parse_date(value)


__all__ = ["JsonFinancialRecordsRepository"]
