"""
orgaudit - Test Configuration

Shared employee fixtures and CSV helpers.
"""

from decimal import Decimal
from pathlib import Path

import pytest

from orgaudit.hr.models import Employee
from orgaudit.hr.org_structure import HierarchyIndex


def make_employee(employee_id: int, salary: str | int, manager_id: int | None = None,
                  first_name: str = "First", last_name: str | None = None) -> Employee:
    return Employee(
        id=employee_id,
        first_name=first_name,
        last_name=last_name or f"Last{employee_id}",
        salary=Decimal(str(salary)),
        manager_id=manager_id,
    )


@pytest.fixture
def company() -> list[Employee]:
    """Eight people: an overpaid CEO, an underpaid manager and a six-level deep line."""
    return [
        Employee(1, "Manager", "Boss", Decimal("1000000"), None),
        Employee(2, "Subordinate", "One", Decimal("500"), 1),
        Employee(3, "Subordinate", "Two", Decimal("214000"), 1),
        Employee(4, "Deep", "Subordinate", Decimal("80000"), 2),
        Employee(5, "Jane", "Doe", Decimal("177700"), 3),
        Employee(6, "Ella", "Fitzgerald", Decimal("148000"), 5),
        Employee(7, "Mason", "Alexander", Decimal("120000"), 6),
        Employee(8, "Mason", "Alexander", Decimal("100000"), 7),
    ]


@pytest.fixture
def company_index(company) -> HierarchyIndex:
    return HierarchyIndex(company)


COMPANY_CSV = """Id,firstName,lastName,salary,managerId
1,Manager,Boss,1000000,
2,Subordinate,One,500,1
3,Subordinate,Two,214000,1
4,Deep,Subordinate,80000,2
5,Jane,Doe,177700,3
6,Ella,Fitzgerald,148000,5
7,Mason,Alexander,120000,6
8,Mason,Alexander,100000,7
"""

GOLDEN_REPORT = (
    "Employee ID: 1, Name: Manager Boss, Issue: Earns more than expected, Discrepancy: 839125.0000\n"
    "Employee ID: 2, Name: Subordinate One, Issue: Earns less than expected, Discrepancy: 95500.0000\n"
    "Employee ID: 8, Name: Mason Alexander, Issue: Too many managers in reporting line by 1 levels"
)


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a CSV file under tmp_path and return its path."""
    def _write(content: str, name: str = "employees.csv") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def company_csv(write_csv) -> Path:
    return write_csv(COMPANY_CSV)
