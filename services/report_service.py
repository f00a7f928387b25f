from decimal import Decimal

from models.expense import Expense
from utils.constants import FILTER_ALL


class ReportService:
    """Aggregates derived from the current expense list. Always recomputed from scratch."""

    def get_total(self, expenses: list[Expense]) -> Decimal:
        return sum((e.amount for e in expenses), Decimal("0"))

    def get_category_breakdown(self, expenses: list[Expense]) -> list[dict]:
        """Return [{category, total}, ...] for pie chart, in first-seen order."""
        totals: dict[str, Decimal] = {}
        for e in expenses:
            totals[e.category] = totals.get(e.category, Decimal("0")) + e.amount
        return [{"category": name, "total": total} for name, total in totals.items()]

    def get_categories(self, expenses: list[Expense]) -> list[str]:
        return list(dict.fromkeys(e.category for e in expenses))

    def get_filter_options(self, expenses: list[Expense]) -> list[str]:
        return [FILTER_ALL] + self.get_categories(expenses)

    def filter_by_category(self, expenses: list[Expense], category: str) -> list[Expense]:
        if category == FILTER_ALL:
            return list(expenses)
        return [e for e in expenses if e.category == category]
