"""Finding report rendering.

Turns the ordered findings from ``generate_report`` into plain text lines,
a rich table, or a JSON document.
"""

import json
from decimal import Decimal

from rich.console import Console
from rich.table import Table

from orgaudit.hr.models import Finding

type ReportFormat = str  # "text" | "table" | "json"

BASE_ENTRY_FORMAT = "Employee ID: {id}, Name: {first} {last}, Issue: {message}"
DISCREPANCY_SUFFIX = ", Discrepancy: {amount}"


def format_amount(amount: Decimal) -> str:
    """Plain notation with the amount's own scale, e.g. 839125.0000."""
    return format(amount, "f")


def format_finding(finding: Finding) -> str:
    employee = finding.employee
    line = BASE_ENTRY_FORMAT.format(
        id=employee.id,
        first=employee.first_name,
        last=employee.last_name,
        message=finding.message,
    )
    if finding.amount is not None:
        line += DISCREPANCY_SUFFIX.format(amount=format_amount(finding.amount))
    return line


def format_report(findings: list[Finding]) -> str:
    """One line per finding; the empty string when there are none."""
    return "\n".join(format_finding(f) for f in findings)


def findings_to_table(findings: list[Finding]) -> Table:
    table = Table(title="Organization Audit")
    table.add_column("Employee ID", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Issue", style="bold")
    table.add_column("Discrepancy", justify="right")

    for f in findings:
        table.add_row(
            str(f.employee.id),
            f.employee.full_name,
            f.message,
            "" if f.amount is None else format_amount(f.amount),
        )
    return table


def findings_to_json(findings: list[Finding]) -> str:
    report = {
        "total": len(findings),
        "findings": [
            {
                "employee_id": f.employee.id,
                "name": f.employee.full_name,
                "kind": str(f.kind),
                "issue": f.message,
                "discrepancy": None if f.amount is None else format_amount(f.amount),
            }
            for f in findings
        ],
    }
    return json.dumps(report, indent=2)


def render_report(findings: list[Finding], output_format: ReportFormat = "text") -> str:
    match output_format:
        case "json":
            return findings_to_json(findings)
        case "table":
            if not findings:
                return ""
            buf = Console(file=None, force_terminal=False, width=120)
            with buf.capture() as capture:
                buf.print(findings_to_table(findings))
            return capture.get()
        case "text":
            return format_report(findings)
        case other:
            raise ValueError(f"Unsupported report format: {other}")
