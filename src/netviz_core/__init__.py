# src/netviz_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.info("NetViz Core package initialized.")

from .data_structures import (
    NetCategory, NetlistComponent, PinConnection, NetConnection, NetlistData,
    GraphNode, GraphLink, GraphData, PinPosition,
)
from .classification import classify_net, net_color, component_symbol, symbol_kind, symbol_size
from .parser import NetlistParser, ParsingError, SchemaValidationError
from .validation import (
    NetlistValidator, validate_netlist, ValidationIssue, ValidationIssueLevel, NetlistIssueCode,
    NetlistValidationError, ErrorHighlights, Severity, parse_validation_errors,
    component_error_severity, pin_error_severity,
)
from .graph import (
    convert_to_graph, to_networkx, pin_offset, pin_position, pin_positions, PinLayoutCalculator,
    ForceLayout, LayoutError, manhattan_route, trace_path, route_links, trace_style,
)
from .analysis import CircuitAnalysisResults, analyze_circuit
from .config import LayoutConfig, ConfigParsingError, load_layout_config
from .pipeline import NetlistReport, load_netlist, process_netlist
from .errors import NetVizError, NetlistLoadError, NetlistProcessingError

__all__ = [
    # Data Structures
    "NetCategory", "NetlistComponent", "PinConnection", "NetConnection", "NetlistData",
    "GraphNode", "GraphLink", "GraphData", "PinPosition",
    # Classification
    "classify_net", "net_color", "component_symbol", "symbol_kind", "symbol_size",
    # Parser
    "NetlistParser", "ParsingError", "SchemaValidationError",
    # Validation
    "NetlistValidator", "validate_netlist", "ValidationIssue", "ValidationIssueLevel",
    "NetlistIssueCode", "NetlistValidationError",
    "ErrorHighlights", "Severity", "parse_validation_errors",
    "component_error_severity", "pin_error_severity",
    # Graph
    "convert_to_graph", "to_networkx", "pin_offset", "pin_position", "pin_positions",
    "PinLayoutCalculator", "ForceLayout", "LayoutError",
    "manhattan_route", "trace_path", "route_links", "trace_style",
    # Analysis
    "CircuitAnalysisResults", "analyze_circuit",
    # Configuration
    "LayoutConfig", "ConfigParsingError", "load_layout_config",
    # Pipeline
    "NetlistReport", "load_netlist", "process_netlist",
    # Top-Level Errors (Actionable Diagnostics)
    "NetVizError", "NetlistLoadError", "NetlistProcessingError",
]
