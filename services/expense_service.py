import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from gateway.expense_api import ExpenseAPI
from models.expense import Expense, ExpenseDraft

logger = logging.getLogger(__name__)


class ExpenseService:
    def __init__(self, api: ExpenseAPI):
        self._api = api

    def get_all(self) -> list[Expense]:
        return self._api.get_all()

    def save(self, draft: ExpenseDraft) -> Optional[Expense]:
        """Create a new expense, or update draft.editing_id when it is set."""
        title, amount, category = self._validate(draft)
        if draft.is_editing:
            logger.info("Updating expense %s.", draft.editing_id)
            return self._api.update(draft.editing_id, title, amount, category)
        logger.info("Creating expense %r.", title)
        return self._api.create(title, amount, category)

    def delete(self, expense_id: Any):
        logger.info("Deleting expense %s.", expense_id)
        self._api.delete(expense_id)

    def _validate(self, draft: ExpenseDraft) -> tuple[str, Decimal, str]:
        title = draft.title.strip()
        amount_text = str(draft.amount).strip()
        category = draft.category.strip()
        if not title:
            raise ValueError("Title is required.")
        if not amount_text:
            raise ValueError("Amount is required.")
        if not category:
            raise ValueError("Category is required.")
        try:
            amount = Decimal(amount_text)
        except InvalidOperation:
            raise ValueError("Invalid amount.") from None
        if not amount.is_finite():
            raise ValueError("Invalid amount.")
        return title, amount, category
