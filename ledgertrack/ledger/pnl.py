from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from ..models.accounting import EntryType

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def amount_of(entry) -> Decimal:
    """Entry amount as a Decimal; a missing amount counts as zero."""
    value = getattr(entry, "amount", None)
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _is(entry, entry_type):
    return entry.type == entry_type


@dataclass
class PnlReport:
    total_revenue: Decimal
    total_expense: Decimal
    net_result: Decimal
    margin_pct: Decimal
    revenue_lines: List = field(default_factory=list, repr=False)
    expense_lines: List = field(default_factory=list, repr=False)

    def to_dict(self, with_lines=True):
        data = {
            "totalRevenue": float(self.total_revenue),
            "totalExpense": float(self.total_expense),
            "netResult": float(self.net_result),
            "marginPct": float(self.margin_pct),
        }
        if with_lines:
            data["revenueLines"] = [_line(e) for e in self.revenue_lines]
            data["expenseLines"] = [_line(e) for e in self.expense_lines]
        return data


def _line(entry):
    return {
        "id": getattr(entry, "id", None),
        "date": entry.date.isoformat() if entry.date else None,
        "label": entry.label or "N/A",
        "amount": float(amount_of(entry)),
    }


def compute_pnl(entries) -> PnlReport:
    """
    Profit and loss over ``entries``.

    Revenue is the sum of PRODUCT amounts, expense the sum of EXPENSE amounts.
    The margin is ``net / revenue * 100`` and is zero when there is no revenue.
    An empty list yields an all-zero report.
    """
    revenue_lines = [e for e in entries if _is(e, EntryType.PRODUCT)]
    expense_lines = [e for e in entries if _is(e, EntryType.EXPENSE)]

    total_revenue = sum((amount_of(e) for e in revenue_lines), ZERO)
    total_expense = sum((amount_of(e) for e in expense_lines), ZERO)
    net_result = total_revenue - total_expense
    margin_pct = net_result / total_revenue * HUNDRED if total_revenue > 0 else ZERO

    return PnlReport(
        total_revenue=total_revenue,
        total_expense=total_expense,
        net_result=net_result,
        margin_pct=margin_pct,
        revenue_lines=revenue_lines,
        expense_lines=expense_lines,
    )


def compute_monthly(entries):
    """Revenue, expense and net per ``YYYY-MM``, oldest month first."""
    months = OrderedDict()
    for e in sorted(entries, key=lambda e: e.date):
        key = e.date.strftime("%Y-%m")
        bucket = months.setdefault(key, {"revenue": ZERO, "expense": ZERO})
        if _is(e, EntryType.PRODUCT):
            bucket["revenue"] += amount_of(e)
        elif _is(e, EntryType.EXPENSE):
            bucket["expense"] += amount_of(e)

    return [
        {
            "month": month,
            "revenue": float(b["revenue"]),
            "expense": float(b["expense"]),
            "net": float(b["revenue"] - b["expense"]),
        }
        for month, b in months.items()
    ]
