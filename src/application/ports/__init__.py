"""Application ports package."""

from .records_repository import FinancialRecordsPort

__all__ = ["FinancialRecordsPort"]
