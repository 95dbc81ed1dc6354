"""Manager salary band checks against the average pay of direct reports."""

import logging
from collections.abc import Collection
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from orgaudit.config import AuditConfig
from orgaudit.hr.models import Employee, Finding, FindingKind

logger = logging.getLogger(__name__)

UNDERPAID_MESSAGE = "Earns less than expected"
OVERPAID_MESSAGE = "Earns more than expected"

# Head room so sum / count is exact to well past the quantization digit
_AVERAGE_PRECISION_DIGITS = 60


@dataclass(frozen=True)
class SalaryBand:
    average: Decimal
    floor: Decimal
    ceiling: Decimal


def average_salary(employees: Collection[Employee], precision: Decimal = Decimal("0.01")) -> Decimal:
    """Mean salary rounded half-up to ``precision``; 150 over 4 gives 37.50."""
    if not employees:
        raise ValueError("Cannot average the salary of an empty group")
    with localcontext() as ctx:
        ctx.prec = _AVERAGE_PRECISION_DIGITS
        total = sum((e.salary for e in employees), Decimal(0))
        return (total / len(employees)).quantize(precision, rounding=ROUND_HALF_UP)


def salary_band(subordinates: Collection[Employee], config: AuditConfig) -> SalaryBand:
    average = average_salary(subordinates, config.average_precision)
    return SalaryBand(
        average=average,
        floor=average * config.min_salary_multiplier,
        ceiling=average * config.max_salary_multiplier,
    )


def evaluate_salary_band(
    manager: Employee,
    subordinates: Collection[Employee],
    config: AuditConfig,
) -> list[Finding]:
    """Flag a manager paid below the band floor or above its ceiling.

    The two checks are independent; a band with floor above ceiling would
    report both.
    """
    band = salary_band(subordinates, config)
    findings = []

    if manager.salary < band.floor:
        findings.append(Finding(manager, FindingKind.UNDERPAID, UNDERPAID_MESSAGE, band.floor - manager.salary))

    if manager.salary > band.ceiling:
        findings.append(Finding(manager, FindingKind.OVERPAID, OVERPAID_MESSAGE, manager.salary - band.ceiling))

    logger.debug(
        "Manager %d: salary %s, band [%s, %s] over %d reports",
        manager.id, manager.salary, band.floor, band.ceiling, len(subordinates),
    )
    return findings
