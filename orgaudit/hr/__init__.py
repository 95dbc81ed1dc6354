"""HR hierarchy audit.

Loads employee exports, indexes the reporting structure, and reports
managers paid outside their salary band and overly long reporting lines.
"""

from orgaudit.config import DEFAULT_CONFIG, AuditConfig
from orgaudit.errors import OrgAuditError
from orgaudit.hr.anomalies import generate_report
from orgaudit.hr.ingest import load_employees
from orgaudit.hr.models import Employee, Finding, FindingKind
from orgaudit.hr.org_structure import EmployeeDirectory, HierarchyIndex
from orgaudit.utils.io import FilePath


def validate(path: FilePath) -> dict[str, str | int]:
    """Check that an employee export loads and every reporting line resolves."""
    try:
        employees = load_employees(path)
        index = HierarchyIndex(employees)
        for employee in index.get_all_employees():
            index.get_managers(employee)
        return {"status": "ok", "rows_available": len(index)}
    except FileNotFoundError as exc:
        return {"status": "error", "message": str(exc)}
    except OrgAuditError as exc:
        return {"status": "error", "message": str(exc)}


def run(path: FilePath, config: AuditConfig = DEFAULT_CONFIG) -> list[Finding]:
    """Execute the full audit for one employee export."""
    employees = load_employees(path)
    index = HierarchyIndex(employees)
    return generate_report(index, config)
