"""Org hierarchy index: id lookups, reporting lines and direct reports."""

import logging
from collections import defaultdict
from collections.abc import Iterable
from typing import Protocol

from orgaudit.errors import CircularHierarchyError, EmployeeNotFoundError, InvalidInputError
from orgaudit.hr.models import Employee, EmployeeID

logger = logging.getLogger(__name__)

type ManagerChain = list[Employee]
type DirectReports = frozenset[Employee]


class EmployeeDirectory(Protocol):
    """Read-only queries the report generator needs from an employee source."""

    def get_by_id(self, employee_id: EmployeeID) -> Employee: ...

    def get_all_employees(self) -> frozenset[Employee]: ...

    def get_managers(self, employee: Employee) -> ManagerChain: ...

    def get_subordinates(self, employee: Employee) -> DirectReports: ...


class HierarchyIndex:
    """Immutable index over a flat collection of employees.

    Both maps are derived once from the ``manager_id`` fields. When several
    records share an id the first one wins and later ones are ignored
    entirely, so they never show up as anybody's direct report either.
    Dangling manager references are tolerated here and only surface when a
    reporting line is walked.
    """

    def __init__(self, employees: Iterable[Employee] | None):
        if employees is None:
            raise InvalidInputError("Employee collection is required to build the hierarchy index")

        by_id: dict[EmployeeID, Employee] = {}
        reports: dict[EmployeeID, set[Employee]] = defaultdict(set)
        for employee in employees:
            if employee.id in by_id:
                if by_id[employee.id] != employee:
                    logger.debug("Ignoring duplicate record for employee %d", employee.id)
                continue
            by_id[employee.id] = employee
            if employee.manager_id is not None:
                reports[employee.manager_id].add(employee)

        self._by_id = by_id
        self._direct_subordinates_by_manager_id: dict[EmployeeID, DirectReports] = {
            manager_id: frozenset(subs) for manager_id, subs in reports.items()
        }
        logger.debug(
            "Indexed %d employees under %d managers",
            len(self._by_id),
            len(self._direct_subordinates_by_manager_id),
        )

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._by_id

    def get_by_id(self, employee_id: EmployeeID) -> Employee:
        try:
            return self._by_id[employee_id]
        except KeyError:
            raise EmployeeNotFoundError(employee_id) from None

    def get_all_employees(self) -> frozenset[Employee]:
        return frozenset(self._by_id.values())

    def get_managers(self, employee: Employee) -> ManagerChain:
        """Return the reporting line from the direct manager up to the top.

        Raises:
            CircularHierarchyError: a manager id repeats during the walk.
            EmployeeNotFoundError: a manager id has no matching record.
        """
        managers: ManagerChain = []
        visited: set[EmployeeID] = set()
        manager_id = employee.manager_id
        while manager_id is not None:
            if manager_id in visited:
                visited.add(manager_id)
                raise CircularHierarchyError(employee, visited)
            visited.add(manager_id)
            manager = self.get_by_id(manager_id)
            managers.append(manager)
            manager_id = manager.manager_id
        return managers

    def get_subordinates(self, employee: Employee) -> DirectReports:
        return self._direct_subordinates_by_manager_id.get(employee.id, frozenset())
