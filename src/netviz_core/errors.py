# src/netviz_core/errors.py
import logging
from typing import Any, Dict, Protocol, abstractmethod
from typing import runtime_checkable

logger = logging.getLogger(__name__)

# --- User-Facing Exception Hierarchy ---

class NetVizError(Exception):
    """Base class for all custom, user-facing errors in NetViz Core."""
    pass

class NetlistLoadError(NetVizError):
    """
    Raised when a netlist payload cannot be turned into a NetlistData object, either
    because the text/file is unreadable or because its structure is malformed.
    The message is a pre-formatted, user-friendly diagnostic report.
    """
    pass

class NetlistProcessingError(NetVizError):
    """
    Raised when processing a successfully loaded netlist fails, such as a strict-mode
    validation failure or a layout failure.
    The message is a pre-formatted, user-friendly diagnostic report.
    """
    pass


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """
    A protocol for exceptions that can generate their own rich diagnostic report.
    Code handling errors can rely on this without knowing the concrete type.
    """
    def get_diagnostic_report(self) -> str:
        """Generates a complete, user-friendly, multi-line report string."""
        ...

class DiagnosableError(Exception, Diagnosable):
    """
    A common, concrete base class for all internal exceptions that are diagnosable.

    It inherits from `Exception` so it can be used in `except` clauses, and declares
    `get_diagnostic_report` abstract so every subclass must provide a report.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        """
        Abstract method to generate the diagnostic report.
        Subclasses MUST implement this.
        """
        raise NotImplementedError


# --- Stateless Formatting Utility ---

def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    A stateless helper to format the final multi-line report string, ensuring a
    consistent look and feel for all user-facing diagnostics.

    Args:
        error_type: The high-level category of the error (e.g., "Schema Validation Error").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for the user to resolve the issue.
        context: A dictionary of contextual information (source name, component, net, ...).

    Returns:
        A formatted, user-friendly diagnostic report string ready for display.
    """
    lines = [
        "\n",
        "================ NetViz Core: Actionable Diagnostic Report ================",
        f"Error Type:     {error_type}",
    ]
    if source := context.get('source'):
        lines.append(f"Source:         {source}")
    if component := context.get('component'):
        lines.append(f"Component:      {component}")
    if net := context.get('net'):
        lines.append(f"Net:            {net}")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("=========================================================================")
    return "\n".join(lines)
