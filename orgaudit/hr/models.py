"""Employee and finding records, plus the pandera schema for employee exports."""

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

import pandera as pa
from pandera import Column, Check

from orgaudit.errors import InvalidInputError

type EmployeeID = int
type SalaryAmount = Decimal

INTEGER_PATTERN = r"^[+-]?\d+$"
# Plain non-negative decimal literal: 55000, 55000.5, .75
SALARY_PATTERN = r"^(\d+(\.\d*)?|\.\d+)$"


@dataclass(frozen=True)
class Employee:
    id: EmployeeID
    first_name: str
    last_name: str
    salary: SalaryAmount
    manager_id: EmployeeID | None = None

    def __post_init__(self) -> None:
        if not self.first_name or not self.last_name:
            raise InvalidInputError(
                f"First name or last name cannot be empty for employee {self.id}"
            )
        if not isinstance(self.salary, Decimal) or not self.salary.is_finite():
            raise InvalidInputError(
                f"Salary must be a finite Decimal for employee {self.id}, got {self.salary!r}"
            )
        if self.salary < 0:
            raise InvalidInputError(f"Salary cannot be negative for employee {self.id}")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class FindingKind(StrEnum):
    UNDERPAID = "underpaid"
    OVERPAID = "overpaid"
    EXCESSIVE_CHAIN = "excessive_chain"


@dataclass(frozen=True)
class Finding:
    """One anomaly tied to one employee.

    ``amount`` is the salary discrepancy for band violations and ``None`` for
    excessive reporting lines, where the excess is carried in the message.
    """

    employee: Employee
    kind: FindingKind
    message: str
    amount: Decimal | None = None


employee_schema = pa.DataFrameSchema(
    {
        "id": Column(str, Check.str_matches(INTEGER_PATTERN), unique=True),
        "first_name": Column(str, Check.str_length(min_value=1)),
        "last_name": Column(str, Check.str_length(min_value=1)),
        "salary": Column(str, Check.str_matches(SALARY_PATTERN)),
        "manager_id": Column(str, Check.str_matches(INTEGER_PATTERN), nullable=True),
    },
    strict=False,
    coerce=True,
)
