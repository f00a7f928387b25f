from decimal import Decimal

from models.expense import Expense
from services.report_service import ReportService


def test_total_is_sum_of_all_amounts(sample_expenses):
    assert ReportService().get_total(sample_expenses) == Decimal("2850.74")


def test_total_of_empty_list_is_zero():
    assert ReportService().get_total([]) == Decimal("0")


def test_breakdown_groups_by_category_in_first_seen_order(sample_expenses):
    breakdown = ReportService().get_category_breakdown(sample_expenses)
    assert breakdown == [
        {"category": "Food", "total": Decimal("1650.75")},
        {"category": "Transport", "total": Decimal("300")},
        {"category": "Utilities", "total": Decimal("899.99")},
    ]


def test_breakdown_totals_add_up_to_grand_total(sample_expenses):
    svc = ReportService()
    assert sum(d["total"] for d in svc.get_category_breakdown(sample_expenses)) == svc.get_total(sample_expenses)


def test_filter_options_start_with_all(sample_expenses):
    assert ReportService().get_filter_options(sample_expenses) == ["All", "Food", "Transport", "Utilities"]
    assert ReportService().get_filter_options([]) == ["All"]


def test_filter_by_category_is_exact_match(sample_expenses):
    extra = sample_expenses + [Expense(id=9, title="Snack", amount=Decimal("20"), category="food")]
    result = ReportService().filter_by_category(extra, "Food")
    assert [e.id for e in result] == [1, 3]


def test_filter_all_returns_every_expense(sample_expenses):
    assert ReportService().filter_by_category(sample_expenses, "All") == sample_expenses


def test_filter_unknown_category_returns_nothing(sample_expenses):
    assert ReportService().filter_by_category(sample_expenses, "Travel") == []
