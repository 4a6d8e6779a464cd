"""
Balance sheet derived from accounting entries (OHADA / SYSCOHADA classes).

Balances are accumulated debit-positive: a debit adds the entry amount to the
bucket of its account class, a credit subtracts it. Classes are read by the
leading digit of the account code:

    1 permanent capital      5 cash and financial accounts
    2 fixed assets           6 expenses
    3 inventory              7 revenue
    4 third parties (receivables when debit-balanced, payables when credit-balanced)

Capital (1) and revenue (7) are credit-normal, so the totals read them as
credit balances. The report is recomputed from the full entry set on every
call; nothing is cached.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional

from ..errors import NoData
from .pnl import ZERO, amount_of

DEFAULT_TOLERANCE = Decimal("0.01")


def account_class(code, digits=1) -> Optional[str]:
    """Bucket key of an account code, or None when the code is blank."""
    if digits not in (1, 2):
        raise ValueError(f"Account class digits must be 1 or 2, got {digits}")
    if code is None:
        return None
    code = str(code).strip()
    if not code:
        return None
    return code[:digits]


@dataclass
class BalanceSheet:
    per_class_balance: Dict[str, Decimal]
    total_assets: Decimal
    total_liabilities: Decimal
    net_result: Decimal
    total_liabilities_and_equity: Decimal
    is_balanced: bool
    imbalance_amount: Optional[Decimal]
    class_digits: int = 1

    def class_total(self, cls: str) -> Decimal:
        """Balance of a single-digit class, summed over its sub-buckets."""
        return _class_total(self.per_class_balance, cls)

    @property
    def receivables(self) -> Decimal:
        return _receivables(self.per_class_balance)

    @property
    def payables(self) -> Decimal:
        return _payables(self.per_class_balance)

    def to_dict(self):
        return {
            "perClassBalance": {k: float(v) for k, v in sorted(self.per_class_balance.items())},
            "classDigits": self.class_digits,
            "totalAssets": float(self.total_assets),
            "totalLiabilities": float(self.total_liabilities),
            "netResult": float(self.net_result),
            "totalLiabilitiesAndEquity": float(self.total_liabilities_and_equity),
            "isBalanced": self.is_balanced,
            "imbalanceAmount": float(self.imbalance_amount) if self.imbalance_amount is not None else None,
        }


def _class_total(balances, cls):
    return sum((v for k, v in balances.items() if k[0] == cls), ZERO)


def _class4_buckets(balances):
    return [v for k, v in balances.items() if k[0] == "4"]


def _receivables(balances):
    # with 1-digit keys there is a single pooled class-4 bucket
    return sum((v for v in _class4_buckets(balances) if v > 0), ZERO)


def _payables(balances):
    return sum((-v for v in _class4_buckets(balances) if v < 0), ZERO)


def compute_balance_sheet(entries, class_digits=1, tolerance=DEFAULT_TOLERANCE) -> BalanceSheet:
    if not entries:
        raise NoData()

    balances: Dict[str, Decimal] = {}
    for entry in entries:
        amount = amount_of(entry)
        debit_cls = account_class(entry.debit_account, class_digits)
        credit_cls = account_class(entry.credit_account, class_digits)
        if debit_cls:
            balances[debit_cls] = balances.get(debit_cls, ZERO) + amount
        if credit_cls:
            balances[credit_cls] = balances.get(credit_cls, ZERO) - amount

    total_assets = (
        _class_total(balances, "2")
        + _class_total(balances, "3")
        + _class_total(balances, "5")
        + _receivables(balances)
    )
    total_liabilities = -_class_total(balances, "1") + _payables(balances)
    net_result = -_class_total(balances, "7") - _class_total(balances, "6")
    total_liabilities_and_equity = total_liabilities + net_result

    difference = abs(total_assets - total_liabilities_and_equity)
    is_balanced = difference < Decimal(str(tolerance))

    return BalanceSheet(
        per_class_balance=balances,
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_result=net_result,
        total_liabilities_and_equity=total_liabilities_and_equity,
        is_balanced=is_balanced,
        imbalance_amount=None if is_balanced else difference,
        class_digits=class_digits,
    )
