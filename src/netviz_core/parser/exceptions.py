# src/netviz_core/parser/exceptions.py
"""
Defines custom, diagnosable exceptions for the netlist loading stage.

`ParsingError` covers source-level problems (missing file, undecodable JSON/YAML,
a root that is not a mapping). `SchemaValidationError` covers documents that decode
fine but whose structure does not match the netlist format checked by Cerberus.
Both derive from `DiagnosableError`, so callers can catch either one and always
obtain a user-friendly report.
"""
from dataclasses import dataclass
from typing import Any, Dict

from ..errors import DiagnosableError, format_diagnostic_report


class BaseParsingError(DiagnosableError):
    """A local, concrete base class for all netlist loading errors."""
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Parsing Error",
            details=str(self),
            suggestion="Please check the format and content of the netlist file.",
            context={}
        )


@dataclass(frozen=True)
class ParsingError(BaseParsingError):
    """
    Raised when a netlist source cannot be read or decoded: a missing or unreadable
    file, invalid JSON/YAML syntax, or a document whose root is not a mapping.
    """
    details: str
    source: str

    def __str__(self):
        return f"Parsing error in '{self.source}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Netlist Parsing or File Error",
            details=self.details,
            suggestion="Ensure the file exists, is readable, and contains a single JSON object with 'components' and 'nets'.",
            context={'source': self.source}
        )


@dataclass(frozen=True)
class SchemaValidationError(BaseParsingError):
    """
    Raised when a decoded document does not conform to the netlist structure
    (e.g. 'components' is not a list, or a pin list contains a nested object).
    """
    errors: Dict[str, Any]
    source: str

    def _error_lines(self):
        return [
            f"  - Field '{field}': {messages}"
            for field, messages in sorted(self.errors.items(), key=lambda item: str(item[0]))
        ]

    def __str__(self):
        return (
            f"Netlist schema validation failed for '{self.source}':\n"
            + "\n".join(self._error_lines())
        )

    def get_diagnostic_report(self) -> str:
        details = (
            "The structure of the netlist does not conform to the required schema.\n"
            f"See details for {len(self.errors)} issue(s) below:\n\n"
            + "\n".join(self._error_lines())
        )
        return format_diagnostic_report(
            error_type="Netlist Schema Validation Error",
            details=details,
            suggestion="Each component needs string 'name' and 'type' fields and a list of 'pins'; "
                       "each net needs a string 'net' and a list of {component, pin} 'connections'.",
            context={'source': self.source}
        )
