"""Domain-level policies and business rules.

Rules here define *what* the business rules are (installment schedules,
late payment charges, contract expiry), independent from *where* they are
applied (services, repositories, etc.).
"""
