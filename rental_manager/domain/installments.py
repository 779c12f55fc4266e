import calendar
from datetime import date


def add_months(start: date, months: int, day: int | None = None) -> date:
    """
    Advance ``start`` by ``months`` calendar months.

    The day of month is ``day`` (or ``start.day``), clamped to the last day of
    the target month: Jan 31 + 1 month is Feb 28/29, never a date in March.
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day or start.day, last_day))


def installment_due_dates(start_date: date, duration: int, payment_day: int) -> list[date]:
    """Due dates of a contract's ``duration`` monthly installments, one per month from ``start_date``."""
    if duration < 1:
        raise ValueError("duration must be at least 1 month")
    if not 1 <= payment_day <= 31:
        raise ValueError("payment_day must be between 1 and 31")
    return [add_months(start_date, i, day=payment_day) for i in range(duration)]


def installment_label(index: int, duration: int) -> str:
    return f"Installment {index + 1}/{duration}"


def contract_end_date(start_date: date, duration: int) -> date:
    return add_months(start_date, duration)
