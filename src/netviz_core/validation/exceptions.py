# src/netviz_core/validation/exceptions.py
"""
Defines the diagnosable exception raised when a caller asks for strict validation.

The validator itself never raises for netlist content; this error exists for callers
that want to refuse netlists with ERROR-level findings (see `process_netlist(strict=True)`).
"""
from typing import List

from .issues import ValidationIssue, ValidationIssueLevel
from ..errors import DiagnosableError, format_diagnostic_report


class NetlistValidationError(DiagnosableError):
    """Container for all ERROR-level issues found in a single validation pass."""

    def __init__(self, issues: List[ValidationIssue], source: str = ""):
        self.issues: List[ValidationIssue] = [
            issue for issue in issues if issue.level == ValidationIssueLevel.ERROR
        ]
        self.source = source
        if not self.issues:
            summary_message = "NetlistValidationError was raised with no error-level issues."
        else:
            summary_message = (
                f"Netlist validation failed with {len(self.issues)} error(s):\n"
                + "\n".join(f"  - {issue}" for issue in self.issues)
            )
        super().__init__(summary_message)

    def get_diagnostic_report(self) -> str:
        details = (
            f"One or more design-rule errors were found in the netlist.\n"
            f"Found {len(self.issues)} error(s). See details below:\n\n"
            + "\n".join(f"  - {issue}" for issue in self.issues)
        )
        context = {'source': self.source}
        if self.issues:
            first_issue = self.issues[0]
            context['component'] = first_issue.component
            context['net'] = first_issue.net
        return format_diagnostic_report(
            error_type="Netlist Validation Error",
            details=details,
            suggestion="Correct the listed components and nets, or process the netlist without strict mode to inspect it visually.",
            context=context
        )
