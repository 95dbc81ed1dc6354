"""
orgaudit - Employee CSV Loader Tests
"""

from decimal import Decimal

import pytest

from orgaudit.errors import InvalidInputError
from orgaudit.hr.ingest import load_employees
from orgaudit.hr.models import Employee


VALID_CSV = """Id,firstName,lastName,salary,managerId
1,John,Doe,55000,
2,Jane,Smith,60000,1
3,Alice,Johnson,65000,
4,Bob,Williams,50000,2
5,Charlie,Brown,70000,3
"""


class TestValidFiles:
    """Well-formed exports load in file order."""

    def test_load_valid_file(self, write_csv):
        employees = load_employees(write_csv(VALID_CSV))

        assert employees == [
            Employee(1, "John", "Doe", Decimal("55000"), None),
            Employee(2, "Jane", "Smith", Decimal("60000"), 1),
            Employee(3, "Alice", "Johnson", Decimal("65000"), None),
            Employee(4, "Bob", "Williams", Decimal("50000"), 2),
            Employee(5, "Charlie", "Brown", Decimal("70000"), 3),
        ]

    def test_salary_keeps_decimal_text(self, write_csv):
        path = write_csv("Id,firstName,lastName,salary,managerId\n1,Ann,Lee,1234.50,\n")
        [employee] = load_employees(path)
        assert employee.salary == Decimal("1234.50")
        assert str(employee.salary) == "1234.50"

    def test_header_is_case_insensitive_and_column_order_free(self, write_csv):
        path = write_csv("MANAGERID,salary,LastName,FirstName,ID\n,100,Lee,Ann,7\n7,80,Kim,Bo,8\n")
        employees = load_employees(path)
        assert employees == [
            Employee(7, "Ann", "Lee", Decimal("100"), None),
            Employee(8, "Bo", "Kim", Decimal("80"), 7),
        ]

    def test_whitespace_is_trimmed(self, write_csv):
        path = write_csv("Id, firstName , lastName,salary,managerId\n 1 , Ann , Lee , 100 ,  \n")
        assert load_employees(path) == [Employee(1, "Ann", "Lee", Decimal("100"), None)]

    def test_missing_trailing_manager_field(self, write_csv):
        path = write_csv("Id,firstName,lastName,salary,managerId\n1,Ann,Lee,100\n")
        assert load_employees(path)[0].manager_id is None

    def test_empty_file(self, write_csv):
        assert load_employees(write_csv("")) == []

    def test_header_only(self, write_csv):
        assert load_employees(write_csv("Id,firstName,lastName,salary,managerId\n")) == []


class TestInvalidFiles:
    """Every contract violation surfaces as InvalidInputError."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_employees(tmp_path / "nope.csv")

    def test_missing_column(self, write_csv):
        path = write_csv("Id,firstName,lastName,salary\n1,Ann,Lee,100\n")
        with pytest.raises(InvalidInputError, match="missing one or more required columns"):
            load_employees(path)

    def test_empty_last_name(self, write_csv):
        path = write_csv("Id,firstName,lastName,salary,managerId\n1,John,,55000,\n")
        with pytest.raises(InvalidInputError, match="last_name"):
            load_employees(path)

    def test_negative_salary(self, write_csv):
        path = write_csv("Id,firstName,lastName,salary,managerId\n1,Ann,Lee,-100,\n")
        with pytest.raises(InvalidInputError, match="salary"):
            load_employees(path)

    def test_non_numeric_salary(self, write_csv):
        path = write_csv("Id,firstName,lastName,salary,managerId\n1,Ann,Lee,lots,\n")
        with pytest.raises(InvalidInputError, match="salary"):
            load_employees(path)

    def test_non_numeric_manager(self, write_csv):
        path = write_csv("Id,firstName,lastName,salary,managerId\n1,Ann,Lee,100,boss\n")
        with pytest.raises(InvalidInputError, match="manager_id"):
            load_employees(path)

    def test_duplicate_ids(self, write_csv):
        path = write_csv("Id,firstName,lastName,salary,managerId\n1,Ann,Lee,100,\n1,Bo,Kim,90,\n")
        with pytest.raises(InvalidInputError, match="field_uniqueness"):
            load_employees(path)

    def test_all_failures_reported_together(self, write_csv):
        path = write_csv("Id,firstName,lastName,salary,managerId\nx,Ann,Lee,100,\n2,Bo,Kim,-1,\n")
        with pytest.raises(InvalidInputError) as exc_info:
            load_employees(path)
        message = str(exc_info.value)
        assert "'id'" in message
        assert "'salary'" in message

    def test_ids_equal_after_parsing_are_duplicates(self, write_csv):
        path = write_csv("Id,firstName,lastName,salary,managerId\n1,Ann,Lee,100,\n01,Bo,Kim,90,\n")
        with pytest.raises(InvalidInputError, match=r"Duplicate employee IDs .*\[1\]"):
            load_employees(path)

    def test_row_with_too_many_fields(self, write_csv):
        path = write_csv("Id,firstName,lastName,salary,managerId\n1,Ann,Lee,100,\n2,Bo,Kim,90,1,extra\n")
        with pytest.raises(InvalidInputError, match="Malformed CSV"):
            load_employees(path)


class TestEncodings:
    """Exports from older HR systems are often not UTF-8."""

    LATIN1_CSV = "Id,firstName,lastName,salary,managerId\n1,José,Muñoz,100,\n".encode("latin-1")

    def test_latin1_fallback(self, tmp_path):
        path = tmp_path / "employees.csv"
        path.write_bytes(self.LATIN1_CSV)
        assert load_employees(path) == [Employee(1, "José", "Muñoz", Decimal("100"), None)]

    def test_undecodable_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr("orgaudit.utils.io.ENCODINGS", ("utf-8",))
        path = tmp_path / "employees.csv"
        path.write_bytes(self.LATIN1_CSV)
        with pytest.raises(InvalidInputError, match="Could not decode"):
            load_employees(path)
