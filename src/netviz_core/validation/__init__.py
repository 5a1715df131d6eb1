import logging
logger = logging.getLogger(__name__)

from .issues import ValidationIssue, ValidationIssueLevel
from .issue_codes import NetlistIssueCode
from .netlist_validator import NetlistValidator, validate_netlist
from .highlighting import (
    ErrorHighlights, Severity, parse_validation_errors,
    component_error_severity, pin_error_severity,
)
from .exceptions import NetlistValidationError

__all__ = [
    "ValidationIssue",
    "ValidationIssueLevel",
    "NetlistIssueCode",
    "NetlistValidator",
    "validate_netlist",
    "ErrorHighlights",
    "Severity",
    "parse_validation_errors",
    "component_error_severity",
    "pin_error_severity",
    "NetlistValidationError",
]
