# src/netviz_core/pipeline.py
"""
Single entry point that takes an uploaded netlist from raw input to everything the
schematic viewer needs: the parsed netlist, validation findings and messages, the
node/link graph (optionally laid out), error highlights and circuit statistics.

Validation is advisory by default: a netlist with errors is still converted so that
problems can be located visually. `strict=True` turns ERROR-level findings into a
`NetlistProcessingError` instead.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .analysis import CircuitAnalysisResults, analyze_circuit
from .config import LayoutConfig
from .data_structures import GraphData, NetlistData
from .errors import DiagnosableError, NetlistLoadError, NetlistProcessingError, format_diagnostic_report
from .graph import ForceLayout, convert_to_graph
from .parser import NetlistParser
from .validation import (
    ErrorHighlights, NetlistValidationError, NetlistValidator, ValidationIssue,
    ValidationIssueLevel, parse_validation_errors,
)

logger = logging.getLogger(__name__)

NetlistSource = Union[NetlistData, Mapping[str, Any], Path, str]


@dataclass(frozen=True)
class NetlistReport:
    """Everything derived from one netlist in one processing pass."""
    netlist: NetlistData
    issues: List[ValidationIssue]
    errors: List[str]
    graph: GraphData
    analysis: CircuitAnalysisResults
    highlights: ErrorHighlights

    @property
    def has_errors(self) -> bool:
        return any(issue.level == ValidationIssueLevel.ERROR for issue in self.issues)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "errors": list(self.errors),
            "graph": self.graph.to_dict(),
            "analysis": self.analysis.to_dict(),
        }


def load_netlist(source: NetlistSource, parser: Optional[NetlistParser] = None) -> NetlistData:
    """
    Turns any supported source into NetlistData. Strings that start with '{' or '['
    are treated as JSON text, other strings as file paths.

    Raises:
        NetlistLoadError: with the diagnostic report of the underlying parsing error.
    """
    if isinstance(source, NetlistData):
        return source
    parser = parser if parser is not None else NetlistParser()
    try:
        if isinstance(source, Mapping):
            return parser.parse_dict(source)
        if isinstance(source, Path):
            return parser.parse_file(source)
        if isinstance(source, str):
            if source.lstrip().startswith(("{", "[")):
                return parser.parse_string(source)
            return parser.parse_file(source)
    except DiagnosableError as e:
        logger.error(f"Failed to load netlist: {e}")
        raise NetlistLoadError(e.get_diagnostic_report()) from e
    raise TypeError(f"Unsupported netlist source type: {type(source).__name__}")


def process_netlist(
    source: NetlistSource,
    *,
    layout: bool = False,
    strict: bool = False,
    config: Optional[LayoutConfig] = None,
) -> NetlistReport:
    """
    Parses, validates, converts and analyzes a netlist.

    Args:
        source: NetlistData, a decoded mapping, a file path, or JSON text.
        layout: When True, node positions are computed with ForceLayout.
        strict: When True, ERROR-level validation issues abort processing.
        config: Layout configuration; defaults to LayoutConfig().

    Raises:
        NetlistLoadError: the source could not be parsed.
        NetlistProcessingError: strict validation or layout failed.
    """
    netlist = load_netlist(source)

    try:
        issues = NetlistValidator(netlist).validate()
        if strict and any(issue.level == ValidationIssueLevel.ERROR for issue in issues):
            raise NetlistValidationError(issues)

        errors = [issue.message for issue in issues]
        graph = convert_to_graph(netlist)
        if layout:
            ForceLayout(config).apply(graph)

        report = NetlistReport(
            netlist=netlist,
            issues=issues,
            errors=errors,
            graph=graph,
            analysis=analyze_circuit(netlist),
            highlights=parse_validation_errors(errors),
        )
        logger.info(
            f"Processed netlist: {len(graph.nodes)} nodes, {len(graph.links)} links, {len(errors)} validation message(s)."
        )
        return report

    except DiagnosableError as e:
        logger.error(f"A diagnosable error occurred while processing the netlist: {e}")
        raise NetlistProcessingError(e.get_diagnostic_report()) from e

    except Exception as e:
        logger.critical(f"An unexpected internal error occurred while processing the netlist: {e}", exc_info=True)
        report = format_diagnostic_report(
            error_type=f"An Unexpected Processing Error Occurred ({type(e).__name__})",
            details=f"Netlist processing encountered an unexpected internal error: {e}",
            suggestion="This may be a bug. Review the traceback and consider filing a bug report.",
            context={}
        )
        raise NetlistProcessingError(report) from e
