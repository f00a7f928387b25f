from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional


@dataclass(frozen=True)
class Expense:
    id: Any                 # opaque, server-assigned
    title: str
    amount: Decimal
    category: str


@dataclass
class ExpenseDraft:
    """Form contents as typed; editing_id is None when creating a new expense."""
    title: str = ""
    amount: str = ""
    category: str = ""
    editing_id: Optional[Any] = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @classmethod
    def from_expense(cls, expense: Expense) -> "ExpenseDraft":
        return cls(
            title=expense.title,
            amount=str(expense.amount),
            category=expense.category,
            editing_id=expense.id,
        )
