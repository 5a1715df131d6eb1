# src/netviz_core/validation/issues.py
import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class ValidationIssueLevel(Enum):
    """Severity level of a validation issue."""
    ERROR = "ERROR"
    WARNING = "WARNING"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class ValidationIssue:
    """
    A single finding of the NetlistValidator.

    `message` is the exact user-facing text; `component`, `pin` and `net` carry the
    same information in structured form so callers do not need to re-parse it.
    """
    level: ValidationIssueLevel
    code: str
    message: str
    component: Optional[str] = None
    pin: Optional[str] = None
    net: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [f"[{self.level.name} - {self.code}]"]
        if self.component:
            parts.append(f"Component: {self.component}")
        if self.net:
            parts.append(f"Net: {self.net}")
        parts.append(f"Message: {self.message}")
        return " ".join(parts)
