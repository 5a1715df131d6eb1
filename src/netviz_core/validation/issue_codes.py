# src/netviz_core/validation/issue_codes.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class NetlistIssueCode(Enum):
    """
    Registry of netlist validation issue codes and their message templates.
    Each enum member's value is a tuple: (code_str, message_template_str).

    The rendered messages are consumed verbatim by error-highlighting clients that
    match them with regular expressions, so the wording of these templates must not
    change.
    """

    # --- Component Issues (COMP_...) ---
    COMP_NAME_BLANK = ("COMP_NAME_BLANK", "Component name cannot be blank.")
    COMP_TYPE_MISSING = ("COMP_TYPE_MISSING", "Component {component} has no type specified.")
    COMP_PINS_MISSING = ("COMP_PINS_MISSING", "Component {component} has no pins defined.")
    COMP_NAME_DUPLICATE = ("COMP_NAME_DUPLICATE", "Duplicate component names: {duplicate_names}")

    # --- Net Issues (NET_...) ---
    NET_NAME_BLANK = ("NET_NAME_BLANK", "Net name cannot be blank.")
    NET_CONN_INSUFFICIENT = ("NET_CONN_INSUFFICIENT", "Net {net} has insufficient connections (needs at least {min_connections}).")
    NET_REF_UNKNOWN_COMPONENT = ("NET_REF_UNKNOWN_COMPONENT", "Net {net} references unknown component: {component}")
    NET_REF_UNKNOWN_PIN = ("NET_REF_UNKNOWN_PIN", "Component {component} does not have pin {pin}")

    # --- Ground Issues (GND_...) ---
    GND_NET_MISSING = ("GND_NET_MISSING", "No ground net found. Every PCB should have a ground connection.")
    GND_CONN_MISSING = ("GND_CONN_MISSING", "{component} is not connected to ground - this may cause issues.")

    # --- Power Issues (PWR_...) ---
    PWR_NET_MISSING = ("PWR_NET_MISSING", "No power net found. Most PCBs require power distribution.")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def template(self) -> str:
        return self.value[1]

    def format_message(self, **kwargs) -> str:
        """Formats the message template with provided keyword arguments."""
        try:
            return self.template.format(**kwargs)
        except KeyError as e:
            logger.error(f"Missing key {e} for formatting message template of {self.name} (code: {self.code}): '{self.template}'. Provided args: {kwargs}")
            return f"Error formatting message for {self.code}: Missing key {e}. Template: '{self.template}' Args: {kwargs}"
