"""Normalize raw employee exports and convert rows into Employee records."""

import logging
from decimal import Decimal

import pandas as pd

from orgaudit.hr.models import Employee
from orgaudit.utils.transforms import normalize_columns, strip_text_cells

logger = logging.getLogger(__name__)

# Headers are matched case-insensitively: "firstName" lowers to "firstname"
COLUMN_ALIASES = {
    "employee_id": "id",
    "firstname": "first_name",
    "lastname": "last_name",
    "managerid": "manager_id",
}

REQUIRED_COLUMNS = ["id", "first_name", "last_name", "salary", "manager_id"]


def normalize_employee_records(raw_df: pd.DataFrame) -> pd.DataFrame:
    """Canonical column names and trimmed cell values."""
    df = normalize_columns(raw_df, COLUMN_ALIASES)
    df = strip_text_cells(df)
    logger.debug("Normalized %d employee rows", len(df))
    return df


def _parse_manager_id(value: str | None) -> int | None:
    return None if pd.isna(value) else int(value)


def to_employees(df: pd.DataFrame) -> list[Employee]:
    """Build Employee records from a validated, normalized frame in file order."""
    return [
        Employee(
            id=int(row.id),
            first_name=row.first_name,
            last_name=row.last_name,
            salary=Decimal(row.salary),
            manager_id=_parse_manager_id(row.manager_id),
        )
        for row in df[REQUIRED_COLUMNS].itertuples(index=False)
    ]
