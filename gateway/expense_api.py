"""REST client for the remote expense collection.

One ``ExpenseAPI`` talks to a single collection endpoint::

    GET    {base}          get_all
    POST   {base}          create
    PUT    {base}{id}/     update
    DELETE {base}{id}/     delete

Every failure (transport, HTTP status, body that is not the expected JSON)
is raised as :class:`GatewayError`.
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import requests

from models.expense import Expense
from utils.constants import DEFAULT_API_URL, DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """A request to the expense endpoint failed or returned unusable data."""


class ExpenseAPI:
    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ):
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _detail_url(self, expense_id: Any) -> str:
        return f"{self._base_url}{expense_id}/"

    def _row_to_model(self, row: Any) -> Expense:
        if not isinstance(row, dict):
            raise GatewayError(f"Expected an expense object, got {type(row).__name__}.")
        try:
            amount = Decimal(str(row["amount"]))
            expense = Expense(
                id=row["id"],
                title=str(row["title"]),
                amount=amount,
                category=str(row["category"]),
            )
        except KeyError as e:
            raise GatewayError(f"Expense record is missing field {e}.") from e
        except InvalidOperation as e:
            raise GatewayError(f"Expense record has a non-numeric amount: {row['amount']!r}.") from e
        if not amount.is_finite():
            raise GatewayError(f"Expense record has a non-finite amount: {row['amount']!r}.")
        return expense

    @staticmethod
    def _payload(title: str, amount: Decimal, category: str) -> dict:
        # Amount travels as a decimal string so no precision is lost in JSON floats
        return {"title": title, "amount": str(amount), "category": category}

    def _request(self, method: str, url: str, payload: dict | None = None) -> requests.Response:
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, json=payload, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise GatewayError(f"{method} {url} failed.") from e
        return response

    def _json(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error("Response from %s is not valid JSON.", response.url)
            raise GatewayError("Server returned a response that is not JSON.") from e

    def get_all(self) -> list[Expense]:
        data = self._json(self._request("GET", self._base_url))
        # Paginated endpoints wrap the rows in {"results": [...]}
        if isinstance(data, dict) and "results" in data:
            data = data["results"]
        if not isinstance(data, list):
            raise GatewayError("Expected a list of expenses.")
        expenses = [self._row_to_model(row) for row in data]
        logger.debug("Fetched %d expenses.", len(expenses))
        return expenses

    def create(self, title: str, amount: Decimal, category: str) -> Optional[Expense]:
        response = self._request("POST", self._base_url, self._payload(title, amount, category))
        return self._echoed_record(response)

    def update(self, expense_id: Any, title: str, amount: Decimal, category: str) -> Optional[Expense]:
        response = self._request(
            "PUT", self._detail_url(expense_id), self._payload(title, amount, category)
        )
        return self._echoed_record(response)

    def delete(self, expense_id: Any) -> None:
        self._request("DELETE", self._detail_url(expense_id))

    def _echoed_record(self, response: requests.Response) -> Optional[Expense]:
        """Parse the record the server echoes back after a write, if it sent one."""
        if not response.content:
            return None
        return self._row_to_model(self._json(response))
