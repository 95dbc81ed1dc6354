"""Report generation: salary band and reporting-line anomalies per employee."""

import logging

from orgaudit.config import DEFAULT_CONFIG, AuditConfig
from orgaudit.hr.compensation import evaluate_salary_band
from orgaudit.hr.models import Employee, Finding, FindingKind
from orgaudit.hr.org_structure import EmployeeDirectory

logger = logging.getLogger(__name__)

type Report = list[Finding]


def check_reporting_line(
    employee: Employee,
    directory: EmployeeDirectory,
    config: AuditConfig,
) -> Finding | None:
    line_length = len(directory.get_managers(employee))
    if line_length <= config.max_reporting_line:
        return None
    excess = line_length - config.max_reporting_line
    return Finding(
        employee,
        FindingKind.EXCESSIVE_CHAIN,
        f"Too many managers in reporting line by {excess} levels",
    )


def generate_report(directory: EmployeeDirectory, config: AuditConfig = DEFAULT_CONFIG) -> Report:
    """Scan every employee in ascending id order and collect findings.

    For each employee the salary band findings come first, then the
    reporting-line finding. Lookup and cycle errors from the directory
    propagate unchanged, so a report is either complete or not produced.
    """
    findings: Report = []
    for employee in sorted(directory.get_all_employees(), key=lambda e: e.id):
        subordinates = directory.get_subordinates(employee)
        if subordinates:
            findings.extend(evaluate_salary_band(employee, subordinates, config))

        chain_finding = check_reporting_line(employee, directory, config)
        if chain_finding is not None:
            findings.append(chain_finding)

    logger.debug("Generated report with %d findings", len(findings))
    return findings
