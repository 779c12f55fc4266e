from datetime import date
from decimal import Decimal

import pytest

from rental_manager.domain.contract_expiry import ContractExpiryPolicy
from rental_manager.domain.enums import ContractStatus
from rental_manager.domain.installments import (
    add_months,
    contract_end_date,
    installment_due_dates,
    installment_label,
)
from rental_manager.domain.late_payment import LatePaymentPolicy
from rental_manager.schemas.address import Address


# ============================================================================
# INSTALLMENT SCHEDULE
# ============================================================================


def test_due_dates_one_per_month_on_payment_day():
    due_dates = installment_due_dates(date(2024, 1, 15), 12, 10)

    assert len(due_dates) == 12
    assert due_dates[0] == date(2024, 1, 10)
    assert due_dates[-1] == date(2024, 12, 10)
    for previous, current in zip(due_dates, due_dates[1:]):
        assert (current.year * 12 + current.month) - (
            previous.year * 12 + previous.month
        ) == 1


def test_due_dates_cross_year_boundary():
    due_dates = installment_due_dates(date(2024, 11, 1), 4, 5)
    assert due_dates == [
        date(2024, 11, 5),
        date(2024, 12, 5),
        date(2025, 1, 5),
        date(2025, 2, 5),
    ]


def test_payment_day_clamped_to_month_end():
    due_dates = installment_due_dates(date(2024, 1, 5), 4, 31)
    assert due_dates == [
        date(2024, 1, 31),
        date(2024, 2, 29),
        date(2024, 3, 31),
        date(2024, 4, 30),
    ]


@pytest.mark.parametrize("duration", [0, -1])
def test_due_dates_reject_non_positive_duration(duration):
    with pytest.raises(ValueError):
        installment_due_dates(date(2024, 1, 1), duration, 10)


@pytest.mark.parametrize("payment_day", [0, 32])
def test_due_dates_reject_out_of_range_payment_day(payment_day):
    with pytest.raises(ValueError):
        installment_due_dates(date(2024, 1, 1), 3, payment_day)


def test_add_months_clamps_and_keeps_day():
    assert add_months(date(2023, 11, 30), 3) == date(2024, 2, 29)
    assert add_months(date(2024, 3, 15), 1) == date(2024, 4, 15)
    assert add_months(date(2024, 1, 31), 13) == date(2025, 2, 28)


def test_contract_end_date_adds_duration():
    assert contract_end_date(date(2024, 1, 15), 12) == date(2025, 1, 15)


def test_installment_label():
    assert installment_label(0, 12) == "Installment 1/12"
    assert installment_label(11, 12) == "Installment 12/12"


# ============================================================================
# LATE PAYMENT POLICY
# ============================================================================


def test_late_charges_ten_days_late():
    charges = LatePaymentPolicy().charges_for(
        value=100000, due_date=date(2024, 1, 10), paid_on=date(2024, 1, 20)
    )
    assert charges.days_late == 10
    assert charges.late_payment_fee == 2000
    assert charges.interest_amount == 333


@pytest.mark.parametrize("paid_on", [date(2024, 1, 10), date(2024, 1, 1)])
def test_no_charges_when_paid_on_time(paid_on):
    charges = LatePaymentPolicy().charges_for(
        value=100000, due_date=date(2024, 1, 10), paid_on=paid_on
    )
    assert charges.days_late == 0
    assert charges.late_payment_fee == 0
    assert charges.interest_amount == 0


def test_late_fee_rounds_half_up():
    # 2% of 12525 cents is 250.5 cents
    charges = LatePaymentPolicy().charges_for(
        value=12525, due_date=date(2024, 1, 10), paid_on=date(2024, 1, 11)
    )
    assert charges.late_payment_fee == 251


def test_custom_rates():
    policy = LatePaymentPolicy(
        late_fee_rate=Decimal("0.10"), monthly_interest_rate=Decimal("0.03")
    )
    charges = policy.charges_for(
        value=30000, due_date=date(2024, 3, 1), paid_on=date(2024, 3, 31)
    )
    assert charges.late_payment_fee == 3000
    assert charges.interest_amount == 900


# ============================================================================
# CONTRACT EXPIRY POLICY
# ============================================================================


def test_expiry_boundaries():
    policy = ContractExpiryPolicy(as_of=date(2024, 6, 1), window_days=30)
    active = ContractStatus.ACTIVE

    assert policy.is_expired(status=active, end_date=date(2024, 5, 31))
    assert not policy.is_expiring(status=active, end_date=date(2024, 5, 31))

    assert not policy.is_expired(status=active, end_date=date(2024, 6, 1))
    assert policy.is_expiring(status=active, end_date=date(2024, 6, 1))

    assert policy.is_expiring(status=active, end_date=date(2024, 7, 1))
    assert not policy.is_expiring(status=active, end_date=date(2024, 7, 2))


def test_closed_contracts_never_expired_or_expiring():
    policy = ContractExpiryPolicy(as_of=date(2024, 6, 1))
    closed = ContractStatus.CLOSED

    assert not policy.is_expired(status=closed, end_date=date(2020, 1, 1))
    assert not policy.is_expiring(status=closed, end_date=date(2024, 6, 10))


# ============================================================================
# ADDRESS
# ============================================================================


def test_address_round_trip(address_payload: dict):
    address = Address(**address_payload)
    assert address.model_dump(mode="json") == address_payload
    assert Address.model_validate(address.model_dump(mode="json")) == address


def test_address_complement_is_optional(address_payload: dict):
    address_payload.pop("complement")
    address = Address(**address_payload)
    assert address.complement is None
