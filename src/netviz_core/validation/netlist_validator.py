# src/netviz_core/validation/netlist_validator.py
import logging
from typing import Dict, List, Optional

from ..classification import classify_net
from ..constants import GROUND_EXEMPT_COMPONENT_TYPES, MIN_NET_CONNECTIONS
from ..data_structures import NetCategory, NetConnection, NetlistComponent, NetlistData
from .issue_codes import NetlistIssueCode
from .issues import ValidationIssue, ValidationIssueLevel

logger = logging.getLogger(__name__)


class NetlistValidator:
    """
    Checks a parsed netlist against structural and PCB design rules.

    Validation is advisory: every check runs on every call, nothing short-circuits,
    and findings are returned rather than raised so a broken netlist can still be
    converted and drawn. The order of the returned issues is the order in which the
    checks run:

    1. per-component checks, in component order;
    2. the duplicate-name check;
    3. per-net checks in net order, each net's connections in connection order;
    4. the ground-net check (and ground connectivity of each component);
    5. the power-net check.
    """

    def __init__(self, netlist: NetlistData):
        if not isinstance(netlist, NetlistData):
            raise TypeError("NetlistValidator requires a NetlistData object.")
        self.netlist = netlist
        self.issues: List[ValidationIssue] = []

    def validate(self) -> List[ValidationIssue]:
        """
        Runs every check and returns all findings (errors and warnings).
        The issue list is rebuilt from scratch on each call.
        """
        self.issues = []

        for component in self.netlist.components:
            self._check_component(component)
        self._check_duplicate_names()

        # Later duplicates shadow earlier ones when resolving net references.
        component_map: Dict[str, NetlistComponent] = {c.name: c for c in self.netlist.components}
        for net in self.netlist.nets:
            self._check_net(net, component_map)

        self._check_ground()
        self._check_power()

        if self.issues:
            errors = sum(1 for i in self.issues if i.level == ValidationIssueLevel.ERROR)
            warnings = sum(1 for i in self.issues if i.level == ValidationIssueLevel.WARNING)
            logger.info(f"Validation complete. Found: {errors} errors, {warnings} warnings.")
        else:
            logger.info("Validation complete with no issues found.")
        return self.issues

    def _add_issue(self, level: ValidationIssueLevel, code_enum: NetlistIssueCode, **kwargs):
        """Creates a ValidationIssue from a code template and records it."""
        message = code_enum.format_message(**kwargs)
        self.issues.append(ValidationIssue(
            level=level,
            code=code_enum.code,
            message=message,
            component=kwargs.get('component'),
            pin=kwargs.get('pin'),
            net=kwargs.get('net'),
            details=kwargs,
        ))

    # --- Component Checks ---

    def _check_component(self, component: NetlistComponent):
        if not component.name.strip():
            self._add_issue(ValidationIssueLevel.ERROR, NetlistIssueCode.COMP_NAME_BLANK)
        if not component.type.strip():
            self._add_issue(ValidationIssueLevel.ERROR, NetlistIssueCode.COMP_TYPE_MISSING, component=component.name)
        if not component.pins:
            self._add_issue(ValidationIssueLevel.ERROR, NetlistIssueCode.COMP_PINS_MISSING, component=component.name)

    def _check_duplicate_names(self):
        names = [c.name for c in self.netlist.components]
        # Every occurrence after the first is reported, so a name used three times appears twice.
        duplicates = [name for index, name in enumerate(names) if names.index(name) != index]
        if duplicates:
            self._add_issue(
                ValidationIssueLevel.ERROR,
                NetlistIssueCode.COMP_NAME_DUPLICATE,
                duplicate_names=", ".join(duplicates),
            )

    # --- Net Checks ---

    def _check_net(self, net: NetConnection, component_map: Dict[str, NetlistComponent]):
        if not net.net.strip():
            self._add_issue(ValidationIssueLevel.ERROR, NetlistIssueCode.NET_NAME_BLANK)
        if len(net.connections) < MIN_NET_CONNECTIONS:
            self._add_issue(
                ValidationIssueLevel.ERROR,
                NetlistIssueCode.NET_CONN_INSUFFICIENT,
                net=net.net,
                min_connections=MIN_NET_CONNECTIONS,
            )

        for conn in net.connections:
            component = component_map.get(conn.component)
            if component is None:
                self._add_issue(
                    ValidationIssueLevel.ERROR,
                    NetlistIssueCode.NET_REF_UNKNOWN_COMPONENT,
                    net=net.net,
                    component=conn.component,
                )
            elif conn.pin not in component.pins:
                self._add_issue(
                    ValidationIssueLevel.ERROR,
                    NetlistIssueCode.NET_REF_UNKNOWN_PIN,
                    net=net.net,
                    component=conn.component,
                    pin=conn.pin,
                )

    # --- Global Design-Rule Checks ---

    def _find_ground_net(self) -> Optional[NetConnection]:
        for net in self.netlist.nets:
            if classify_net(net.net) is NetCategory.GROUND:
                return net
        return None

    def _check_ground(self):
        ground_net = self._find_ground_net()
        if ground_net is None:
            self._add_issue(ValidationIssueLevel.ERROR, NetlistIssueCode.GND_NET_MISSING)
            return

        grounded = {conn.component for conn in ground_net.connections}
        for component in self.netlist.components:
            if component.type.lower() in GROUND_EXEMPT_COMPONENT_TYPES:
                continue
            if component.name not in grounded:
                self._add_issue(
                    ValidationIssueLevel.WARNING,
                    NetlistIssueCode.GND_CONN_MISSING,
                    component=component.name,
                    net=ground_net.net,
                )

    def _check_power(self):
        if not any(classify_net(net.net) is NetCategory.POWER for net in self.netlist.nets):
            self._add_issue(ValidationIssueLevel.WARNING, NetlistIssueCode.PWR_NET_MISSING)


def validate_netlist(netlist: NetlistData) -> List[str]:
    """Returns the ordered list of human-readable validation messages for a netlist."""
    return [issue.message for issue in NetlistValidator(netlist).validate()]
