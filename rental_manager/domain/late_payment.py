from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True, slots=True)
class LateCharges:
    days_late: int
    late_payment_fee: int
    interest_amount: int


@dataclass(frozen=True, slots=True)
class LatePaymentPolicy:
    """Charges owed when a payment is settled after its due date.

    Semantics (amounts in cents):
    - late fee = value * late_fee_rate (flat, 2% by default)
    - interest = value * (monthly_interest_rate / 30) * days_late
      (1% a month prorated daily by default)
    - nothing is owed when paid on or before the due date

    Each amount is rounded half-up to a whole cent.
    """

    late_fee_rate: Decimal = Decimal("0.02")
    monthly_interest_rate: Decimal = Decimal("0.01")

    def charges_for(self, *, value: int, due_date: date, paid_on: date) -> LateCharges:
        days_late = (paid_on - due_date).days
        if days_late <= 0:
            return LateCharges(days_late=0, late_payment_fee=0, interest_amount=0)

        amount = Decimal(value)
        fee = amount * self.late_fee_rate
        interest = amount * self.monthly_interest_rate / Decimal(30) * days_late
        return LateCharges(
            days_late=days_late,
            late_payment_fee=_to_cents(fee),
            interest_amount=_to_cents(interest),
        )


def _to_cents(amount: Decimal) -> int:
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
