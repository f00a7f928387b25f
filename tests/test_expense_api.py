from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import requests

from gateway.expense_api import ExpenseAPI, GatewayError

BASE = "http://127.0.0.1:8000/api/expenses/"


def _response(json_data=None, status=200, content=b"x", json_error=False):
    response = MagicMock(spec=requests.Response)
    response.status_code = status
    response.content = content
    response.url = BASE
    if json_error:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = json_data
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


def test_get_all_parses_records(session):
    session.request.return_value = _response([
        {"id": 1, "title": "Tea", "amount": "12.50", "category": "Food"},
        {"id": 2, "title": "Bus", "amount": 30, "category": "Transport"},
    ])
    expenses = ExpenseAPI(BASE, session=session).get_all()

    session.request.assert_called_once_with("GET", BASE, json=None, timeout=10)
    assert [e.id for e in expenses] == [1, 2]
    assert expenses[0].amount == Decimal("12.50")
    assert expenses[1].amount == Decimal("30")
    assert expenses[1].category == "Transport"


def test_get_all_accepts_paginated_results(session):
    session.request.return_value = _response(
        {"count": 1, "results": [{"id": 7, "title": "Tea", "amount": "5", "category": "Food"}]}
    )
    assert [e.id for e in ExpenseAPI(BASE, session=session).get_all()] == [7]


def test_base_url_gets_trailing_slash(session):
    api = ExpenseAPI("http://example.test/api/expenses", session=session)
    assert api.base_url == "http://example.test/api/expenses/"


def test_create_posts_payload_with_decimal_string(session):
    session.request.return_value = _response(
        {"id": 9, "title": "Tea", "amount": "12.50", "category": "Food"}, status=201
    )
    created = ExpenseAPI(BASE, session=session).create("Tea", Decimal("12.50"), "Food")

    session.request.assert_called_once_with(
        "POST", BASE,
        json={"title": "Tea", "amount": "12.50", "category": "Food"},
        timeout=10,
    )
    assert created.id == 9


def test_update_puts_to_detail_url(session):
    session.request.return_value = _response(
        {"id": 3, "title": "Tea", "amount": "1", "category": "Food"}
    )
    ExpenseAPI(BASE, session=session, timeout=5).update(3, "Tea", Decimal("1"), "Food")

    session.request.assert_called_once_with(
        "PUT", BASE + "3/",
        json={"title": "Tea", "amount": "1", "category": "Food"},
        timeout=5,
    )


def test_write_without_body_returns_none(session):
    session.request.return_value = _response(content=b"")
    assert ExpenseAPI(BASE, session=session).update(3, "Tea", Decimal("1"), "Food") is None


def test_delete_hits_detail_url(session):
    session.request.return_value = _response(status=204, content=b"")
    ExpenseAPI(BASE, session=session).delete(4)
    session.request.assert_called_once_with("DELETE", BASE + "4/", json=None, timeout=10)


def test_http_error_becomes_gateway_error(session):
    session.request.return_value = _response(status=500)
    with pytest.raises(GatewayError) as excinfo:
        ExpenseAPI(BASE, session=session).delete(4)
    assert isinstance(excinfo.value.__cause__, requests.HTTPError)


def test_connection_error_becomes_gateway_error(session):
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(GatewayError):
        ExpenseAPI(BASE, session=session).get_all()


def test_non_json_body_is_gateway_error(session):
    session.request.return_value = _response(json_error=True)
    with pytest.raises(GatewayError):
        ExpenseAPI(BASE, session=session).get_all()


@pytest.mark.parametrize("body", [
    {"detail": "nope"},
    [{"id": 1, "title": "Tea", "category": "Food"}],
    [{"id": 1, "title": "Tea", "amount": "abc", "category": "Food"}],
    ["not a record"],
])
def test_malformed_payloads_are_gateway_errors(session, body):
    session.request.return_value = _response(body)
    with pytest.raises(GatewayError):
        ExpenseAPI(BASE, session=session).get_all()


@pytest.mark.parametrize("amount", ["NaN", "Infinity", "-Infinity", "sNaN", float("nan"), float("inf")])
def test_non_finite_amounts_are_gateway_errors(session, amount):
    session.request.return_value = _response([{"id": 1, "title": "Tea", "amount": amount, "category": "Food"}])
    with pytest.raises(GatewayError, match="non-finite"):
        ExpenseAPI(BASE, session=session).get_all()


def test_missing_amount_is_gateway_error(session):
    session.request.return_value = _response([{"id": 1, "title": "Tea", "category": "Food"}])
    with pytest.raises(GatewayError, match="missing field"):
        ExpenseAPI(BASE, session=session).get_all()
