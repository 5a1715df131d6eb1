# src/netviz_core/validation/highlighting.py
"""
Maps validation messages back onto the schematic for error highlighting.

Rendering clients only receive the message strings, so four message shapes act as
a small protocol between the validator and the highlighter. The patterns below are
the consuming side of that protocol and match the templates in `issue_codes`.
"""
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional, Set

from ..constants import ERROR_HIGHLIGHT_COLOR, WARNING_HIGHLIGHT_COLOR

logger = logging.getLogger(__name__)

GROUND_WARNING_REGEX = re.compile(r"^(\w+) is not connected to ground", re.ASCII)
MISSING_PIN_REGEX = re.compile(r"Component (\w+) does not have pin (\w+)", re.ASCII)
UNKNOWN_COMPONENT_REGEX = re.compile(r"references unknown component: (\w+)", re.ASCII)
INSUFFICIENT_NET_REGEX = re.compile(r"Net (\w+) has insufficient connections", re.ASCII)


class Severity(Enum):
    NONE = "none"
    WARNING = "warning"
    ERROR = "error"

    def __str__(self):
        return self.value

    @property
    def color(self) -> Optional[str]:
        if self is Severity.ERROR:
            return ERROR_HIGHLIGHT_COLOR
        if self is Severity.WARNING:
            return WARNING_HIGHLIGHT_COLOR
        return None


@dataclass
class ErrorHighlights:
    """Components, pins and nets named by validation messages."""
    component_errors: Set[str] = field(default_factory=set)
    pin_errors: Dict[str, Set[str]] = field(default_factory=dict)
    net_errors: Set[str] = field(default_factory=set)


def parse_validation_errors(messages: Iterable[str]) -> ErrorHighlights:
    """Categorizes validation messages into component, pin and net highlights."""
    highlights = ErrorHighlights()
    for message in messages:
        if match := GROUND_WARNING_REGEX.match(message):
            highlights.component_errors.add(match.group(1))

        if match := MISSING_PIN_REGEX.search(message):
            component_id, pin_name = match.groups()
            highlights.component_errors.add(component_id)
            highlights.pin_errors.setdefault(component_id, set()).add(pin_name)

        if match := UNKNOWN_COMPONENT_REGEX.search(message):
            highlights.component_errors.add(match.group(1))

        if match := INSUFFICIENT_NET_REGEX.search(message):
            highlights.net_errors.add(match.group(1))

    logger.debug(
        f"Parsed highlights: {len(highlights.component_errors)} components, "
        f"{len(highlights.pin_errors)} with pin errors, {len(highlights.net_errors)} nets."
    )
    return highlights


def component_error_severity(component_id: str, highlights: ErrorHighlights) -> Severity:
    """Pin problems make a component an error; any other mention makes it a warning."""
    if component_id in highlights.component_errors:
        return Severity.ERROR if component_id in highlights.pin_errors else Severity.WARNING
    return Severity.NONE


def pin_error_severity(component_id: str, pin_name: str, highlights: ErrorHighlights) -> Severity:
    if pin_name in highlights.pin_errors.get(component_id, ()):
        return Severity.ERROR
    return Severity.NONE
