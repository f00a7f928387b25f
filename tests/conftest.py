from __future__ import annotations

import itertools
from decimal import Decimal
from typing import Any, Optional

import pytest

from gateway.expense_api import GatewayError
from models.expense import Expense
from services.auth_service import AuthService
from services.expense_service import ExpenseService
from services.report_service import ReportService
from ui.state_controller import TrackerController


class FakeExpenseAPI:
    """In-memory stand-in for ExpenseAPI. Set fail_on to a method name to make it raise."""

    def __init__(self, expenses: list[Expense] | None = None):
        self.rows: dict[Any, Expense] = {e.id: e for e in (expenses or [])}
        self._ids = itertools.count(max([0] + [int(e.id) for e in self.rows.values()]) + 1)
        self.fail_on: set[str] = set()
        self.calls: list[str] = []

    def _check(self, name: str):
        self.calls.append(name)
        if name in self.fail_on:
            raise GatewayError(f"{name} failed")

    def get_all(self) -> list[Expense]:
        self._check("get_all")
        return list(self.rows.values())

    def create(self, title: str, amount: Decimal, category: str) -> Optional[Expense]:
        self._check("create")
        expense = Expense(id=next(self._ids), title=title, amount=amount, category=category)
        self.rows[expense.id] = expense
        return expense

    def update(self, expense_id, title: str, amount: Decimal, category: str) -> Optional[Expense]:
        self._check("update")
        if expense_id not in self.rows:
            raise GatewayError("404")
        expense = Expense(id=expense_id, title=title, amount=amount, category=category)
        self.rows[expense_id] = expense
        return expense

    def delete(self, expense_id) -> None:
        self._check("delete")
        if expense_id not in self.rows:
            raise GatewayError("404")
        del self.rows[expense_id]


@pytest.fixture
def sample_expenses() -> list[Expense]:
    return [
        Expense(id=1, title="Groceries", amount=Decimal("1200.50"), category="Food"),
        Expense(id=2, title="Bus pass", amount=Decimal("300"), category="Transport"),
        Expense(id=3, title="Dinner", amount=Decimal("450.25"), category="Food"),
        Expense(id=4, title="Electricity", amount=Decimal("899.99"), category="Utilities"),
    ]


@pytest.fixture
def fake_api(sample_expenses) -> FakeExpenseAPI:
    return FakeExpenseAPI(sample_expenses)


@pytest.fixture
def notifications() -> list[tuple[str, str]]:
    return []


@pytest.fixture
def controller(fake_api, notifications) -> TrackerController:
    return TrackerController(
        AuthService(),
        ExpenseService(fake_api),
        ReportService(),
        notify=lambda kind, message: notifications.append((kind, message)),
    )


@pytest.fixture
def logged_in(controller, notifications) -> TrackerController:
    assert controller.login("nagesh", "nagesh")
    notifications.clear()
    return controller
