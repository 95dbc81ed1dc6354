"""Load employee records from CSV exports.

Expected columns (case-insensitive): ``Id``, ``firstName``, ``lastName``,
``salary`` and ``managerId``. The manager column must be present but may be
blank for people at the top of the hierarchy.
"""

import logging
from collections import Counter

from orgaudit.errors import InvalidInputError
from orgaudit.hr.models import Employee, employee_schema
from orgaudit.hr.transform import REQUIRED_COLUMNS, normalize_employee_records, to_employees
from orgaudit.utils.io import FilePath, read_text_csv
from orgaudit.utils.validators import validate_dataframe, validate_required_columns

logger = logging.getLogger(__name__)


def load_employees(path: FilePath) -> list[Employee]:
    """Read, validate and convert an employee CSV.

    An empty file, or one with only a header, gives an empty list. Every
    validation failure in the file is reported in a single
    ``InvalidInputError``.
    """
    raw = read_text_csv(path)
    if raw.empty and len(raw.columns) == 0:
        return []

    df = normalize_employee_records(raw)

    columns = validate_required_columns(df, REQUIRED_COLUMNS)
    if not columns["valid"]:
        raise InvalidInputError("; ".join(columns["errors"]))

    rows = validate_dataframe(df, employee_schema)
    if not rows["valid"]:
        raise InvalidInputError(f"Invalid employee records in {path}: " + "; ".join(rows["errors"]))

    employees = to_employees(df)

    # "1", "01" and "+1" are distinct text but the same id
    counts = Counter(e.id for e in employees)
    duplicates = sorted(employee_id for employee_id, n in counts.items() if n > 1)
    if duplicates:
        raise InvalidInputError(f"Duplicate employee IDs in {path}: {duplicates}")

    logger.info("Loaded %d employee records from %s", len(employees), path)
    return employees
