# src/netviz_core/parser/parser.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import cerberus
import yaml

from ..data_structures import NetConnection, NetlistComponent, NetlistData, PinConnection
from .exceptions import ParsingError, SchemaValidationError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class NetlistSchemaValidator(cerberus.Validator):
    """Cerberus validator with a coercer that turns numeric pin identifiers into strings."""

    def _normalize_coerce_pin_id(self, value: Any) -> Any:
        if isinstance(value, bool):
            return value  # Let the 'type: string' rule reject it.
        if isinstance(value, (int, float)):
            return str(value)
        return value


class NetlistParser:
    """
    Loads netlist documents (JSON or YAML text, files, or already-decoded mappings)
    and produces an immutable `NetlistData`.

    Only the *shape* of the document is enforced here. Content problems such as
    blank names, unknown components or missing ground are deliberately left for the
    NetlistValidator so they can be reported together and the netlist can still be
    drawn. Absent `components`, `nets`, `pins` or `connections` are read as empty.
    """
    _pin_id_rule = {"type": "string", "coerce": "pin_id"}

    _component_schema = {
        "name": {"type": "string", "nullable": True, "default": ""},
        "type": {"type": "string", "nullable": True, "default": ""},
        "pins": {"type": "list", "nullable": True, "default": [], "schema": _pin_id_rule},
    }

    _connection_schema = {
        "component": {"type": "string", "nullable": True, "default": ""},
        "pin": {"type": "string", "nullable": True, "default": "", "coerce": "pin_id"},
    }

    _net_schema = {
        "net": {"type": "string", "nullable": True, "default": ""},
        "connections": {
            "type": "list", "nullable": True, "default": [],
            "schema": {"type": "dict", "allow_unknown": True, "schema": _connection_schema},
        },
    }

    _schema = {
        "components": {
            "type": "list", "nullable": True, "default": [],
            "schema": {"type": "dict", "allow_unknown": True, "schema": _component_schema},
        },
        "nets": {
            "type": "list", "nullable": True, "default": [],
            "schema": {"type": "dict", "allow_unknown": True, "schema": _net_schema},
        },
    }

    def __init__(self):
        self._validator = NetlistSchemaValidator(self._schema)
        self._validator.allow_unknown = True
        logger.debug("NetlistParser initialized with structural validation rules.")

    def parse_file(self, path: Union[str, Path]) -> NetlistData:
        """Reads a .json, .yaml or .yml netlist file."""
        source = Path(path)
        source_name = str(source)
        if not source.is_file():
            raise ParsingError(details=f"Netlist file not found at path: {source}", source=source_name)
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParsingError(details=f"Could not read file: {e}", source=source_name) from e

        if source.suffix.lower() in YAML_SUFFIXES:
            return self.parse_dict(self._load_yaml(text, source_name), source_name=source_name)
        return self.parse_string(text, source_name=source_name)

    def parse_string(self, text: str, source_name: str = "<string>") -> NetlistData:
        """Decodes JSON text, as uploaded by a user, and parses it."""
        try:
            content = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParsingError(
                details=f"Invalid JSON file. {e.msg} (line {e.lineno}, column {e.colno})",
                source=source_name,
            ) from e
        return self.parse_dict(content, source_name=source_name)

    def parse_dict(self, content: Any, source_name: str = "<mapping>") -> NetlistData:
        """Validates the structure of a decoded document and builds the NetlistData."""
        if not isinstance(content, Mapping):
            raise ParsingError(
                details=f"The root of the netlist must be an object (mapping), got {type(content).__name__}.",
                source=source_name,
            )
        if not self._validator.validate(dict(content)):
            raise SchemaValidationError(errors=self._validator.errors, source=source_name)

        netlist = self._build(self._validator.document)
        logger.info(
            f"Parsed netlist '{source_name}': {len(netlist.components)} components, {len(netlist.nets)} nets."
        )
        return netlist

    def _build(self, document: Dict[str, Any]) -> NetlistData:
        components = tuple(
            NetlistComponent(
                name=raw.get("name") or "",
                type=raw.get("type") or "",
                pins=tuple(raw.get("pins") or ()),
            )
            for raw in document.get("components") or ()
        )
        nets = tuple(
            NetConnection(
                net=raw.get("net") or "",
                connections=tuple(
                    PinConnection(component=conn.get("component") or "", pin=conn.get("pin") or "")
                    for conn in raw.get("connections") or ()
                ),
            )
            for raw in document.get("nets") or ()
        )
        return NetlistData(components=components, nets=nets)

    def _load_yaml(self, text: str, source_name: str) -> Any:
        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML syntax: {e}", source=source_name) from e
        if content is None:
            raise ParsingError(details="The YAML file is empty or contains no valid content.", source=source_name)
        return content
