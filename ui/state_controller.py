"""View state for the tracker window, kept free of any widget code.

The controller owns the expense list, the active category filter, the
form draft and the login state. Views call its operations (often from a
worker thread) and re-render when a change listener fires. User-facing
outcomes are reported through ``notify(kind, message)`` where kind is one
of ``TOAST_KINDS``.
"""
import logging
import threading
from decimal import Decimal
from typing import Any, Callable

from gateway.expense_api import GatewayError
from models.expense import Expense, ExpenseDraft
from services.auth_service import AuthService
from services.expense_service import ExpenseService
from services.report_service import ReportService
from utils.constants import FILTER_ALL

logger = logging.getLogger(__name__)

MSG_LOGIN_OK = "Login successful!"
MSG_LOGIN_FAILED = "Invalid credentials!"
MSG_LOGGED_OUT = "Logged out successfully!"
MSG_LOAD_FAILED = "Failed to load expenses!"
MSG_ADDED = "Expense added successfully!"
MSG_UPDATED = "Expense updated successfully!"
MSG_SAVE_FAILED = "Something went wrong while saving!"
MSG_DELETED = "Expense deleted!"
MSG_DELETE_FAILED = "Failed to delete expense!"


class TrackerController:
    def __init__(
        self,
        auth_service: AuthService,
        expense_service: ExpenseService,
        report_service: ReportService,
        notify: Callable[[str, str], None] | None = None,
    ):
        self._auth = auth_service
        self._expense_svc = expense_service
        self._report_svc = report_service
        self._notify = notify or (lambda kind, message: None)
        self._listeners: list[Callable[[], None]] = []
        self._gateway_lock = threading.Lock()
        # Bumped on every login/logout; results of requests started in an
        # earlier session are dropped.
        self._session_id = 0

        self.expenses: list[Expense] = []
        self.draft = ExpenseDraft()
        self.filter_category = FILTER_ALL

    # ── Observers ────────────────────────────────────────────────────────────
    def add_listener(self, callback: Callable[[], None]):
        self._listeners.append(callback)

    def set_notifier(self, notify: Callable[[str, str], None]):
        self._notify = notify

    def _changed(self):
        for callback in self._listeners:
            callback()

    # ── Derived views ────────────────────────────────────────────────────────
    @property
    def is_logged_in(self) -> bool:
        return self._auth.is_logged_in

    @property
    def is_busy(self) -> bool:
        return self._gateway_lock.locked()

    @property
    def visible_expenses(self) -> list[Expense]:
        return self._report_svc.filter_by_category(self.expenses, self.filter_category)

    @property
    def total(self) -> Decimal:
        return self._report_svc.get_total(self.expenses)

    @property
    def show_total(self) -> bool:
        """The Total line is shown whenever any expense exists, whatever the filter."""
        return bool(self.expenses)

    @property
    def filter_options(self) -> list[str]:
        return self._report_svc.get_filter_options(self.expenses)

    @property
    def category_breakdown(self) -> list[dict]:
        return self._report_svc.get_category_breakdown(self.expenses)

    # ── Session ──────────────────────────────────────────────────────────────
    def login(self, username: str, password: str) -> bool:
        if not self._auth.login(username, password):
            self._notify("error", MSG_LOGIN_FAILED)
            return False
        self._session_id += 1
        self._notify("success", MSG_LOGIN_OK)
        self._changed()
        self.refresh()
        return True

    def logout(self):
        self._auth.logout()
        self._session_id += 1
        self.expenses = []
        self.draft = ExpenseDraft()
        self.filter_category = FILTER_ALL
        self._notify("info", MSG_LOGGED_OUT)
        self._changed()

    def _require_login(self):
        if not self._auth.is_logged_in:
            raise RuntimeError("Not logged in.")

    def _is_stale(self, session_id: int, action: str) -> bool:
        if session_id == self._session_id and self._auth.is_logged_in:
            return False
        logger.info("Discarding %s result: the session ended while it was running.", action)
        return True

    # ── Filter & draft ───────────────────────────────────────────────────────
    def set_filter(self, category: str):
        self._require_login()
        self.filter_category = category
        self._changed()

    def begin_edit(self, expense: Expense):
        self._require_login()
        self.draft = ExpenseDraft.from_expense(expense)
        self._changed()

    def cancel_edit(self):
        self._require_login()
        self.draft = ExpenseDraft()
        self._changed()

    def update_draft(self, **fields: str):
        self._require_login()
        for name, value in fields.items():
            if name not in ("title", "amount", "category"):
                raise TypeError(f"Unknown draft field: {name}")
            setattr(self.draft, name, value)

    # ── Gateway-backed operations ────────────────────────────────────────────
    def refresh(self) -> bool:
        """Replace the expense list with the server's. Keeps the old list on failure."""
        self._require_login()
        if not self._gateway_lock.acquire(blocking=False):
            logger.warning("Refresh skipped: another request is in flight.")
            return False
        try:
            return self._refresh_locked(self._session_id)
        finally:
            self._gateway_lock.release()

    def submit(self) -> bool:
        self._require_login()
        if not self._gateway_lock.acquire(blocking=False):
            logger.warning("Save skipped: another request is in flight.")
            return False
        try:
            session_id = self._session_id
            editing = self.draft.is_editing
            try:
                self._expense_svc.save(self.draft)
            except ValueError as e:
                self._notify("error", str(e))
                return False
            except GatewayError:
                if not self._is_stale(session_id, "save"):
                    self._notify("error", MSG_SAVE_FAILED)
                return False
            if self._is_stale(session_id, "save"):
                return False
            self._notify("success", MSG_UPDATED if editing else MSG_ADDED)
            self.draft = ExpenseDraft()
            self._refresh_locked(session_id)
            return True
        finally:
            self._gateway_lock.release()

    def delete(self, expense_id: Any) -> bool:
        self._require_login()
        if not self._gateway_lock.acquire(blocking=False):
            logger.warning("Delete skipped: another request is in flight.")
            return False
        try:
            session_id = self._session_id
            try:
                self._expense_svc.delete(expense_id)
            except GatewayError:
                if not self._is_stale(session_id, "delete"):
                    self._notify("error", MSG_DELETE_FAILED)
                return False
            if self._is_stale(session_id, "delete"):
                return False
            self._notify("info", MSG_DELETED)
            self.draft = ExpenseDraft()
            self._refresh_locked(session_id)
            return True
        finally:
            self._gateway_lock.release()

    def _refresh_locked(self, session_id: int) -> bool:
        try:
            expenses = self._expense_svc.get_all()
        except GatewayError:
            if self._is_stale(session_id, "refresh"):
                return False
            self._notify("error", MSG_LOAD_FAILED)
            self._changed()
            return False
        if self._is_stale(session_id, "refresh"):
            return False
        self.expenses = expenses
        if self.filter_category not in self.filter_options:
            logger.debug("Filter %r no longer matches any expense; showing all.", self.filter_category)
            self.filter_category = FILTER_ALL
        self._changed()
        return True
