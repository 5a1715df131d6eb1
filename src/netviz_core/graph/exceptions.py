# src/netviz_core/graph/exceptions.py
"""
Defines custom, diagnosable exceptions for the graph layout service.
"""
from dataclasses import dataclass
from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class LayoutError(DiagnosableError):
    """Custom exception for errors while computing node positions."""
    details: str
    node_count: int = 0

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Graph Layout Error",
            details=f"{self.details}\nGraph size: {self.node_count} node(s).",
            suggestion="Check the layout configuration (canvas size, margin, link distance) and any pinned node coordinates.",
            context={}
        )
