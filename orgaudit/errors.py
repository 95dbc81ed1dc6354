"""Error taxonomy for hierarchy indexing and report generation."""

from collections.abc import Iterable


class OrgAuditError(Exception):
    """Base class for errors that abort a report run."""


class InvalidInputError(OrgAuditError, ValueError):
    """Employee data or configuration does not satisfy its contract."""


class EmployeeNotFoundError(OrgAuditError, LookupError):
    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Employee with ID {employee_id} not found.")


class CircularHierarchyError(OrgAuditError):
    """A manager chain loops back onto an id already visited.

    ``manager_ids`` holds every manager id seen during the walk, including the
    repeated one, so the cycle can be traced in the source data.
    """

    def __init__(self, employee, manager_ids: Iterable[int]):
        self.employee = employee
        self.manager_ids = frozenset(manager_ids)
        ids = ", ".join(str(i) for i in sorted(self.manager_ids))
        super().__init__(
            f"Circular reporting line for employee {employee.id}: manager IDs {{{ids}}}"
        )
