"""
JSON Schema parser that builds SchemaNode trees.

Raw JSON is decoded once by the json module and then matched explicitly
into SchemaNode fields. Only $ref, $schema, title, type, description,
extends, properties, additionalProperties and items are recognized; every
other keyword is ignored.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import ResolutionError
from .nodes import JsonValue, SchemaNode


class SchemaParser:
    """Decodes raw JSON values into SchemaNode objects."""

    # Keywords copied verbatim as strings
    STRING_FIELDS = {
        "$ref": "ref",
        "$schema": "schema",
        "title": "title",
        "description": "description",
    }

    def parse(self, raw: JsonValue, source_path: str = "#", base_dir: Path | None = None) -> SchemaNode:
        """
        Parse a raw JSON value into a new SchemaNode.

        Args:
            raw: Decoded JSON value (must be an object)
            source_path: Location of the value, used in error messages
            base_dir: Directory of the document the value comes from

        Returns:
            The decoded SchemaNode

        Raises:
            ResolutionError: If the value is not a schema object
        """
        node = SchemaNode(source_path=source_path, base_dir=base_dir)
        self.parse_into(node, raw, source_path, base_dir)
        return node

    def parse_into(
        self,
        node: SchemaNode,
        raw: JsonValue,
        source_path: str = "#",
        base_dir: Path | None = None,
    ) -> SchemaNode:
        """
        Decode a raw JSON value into an existing node.

        Keys present in `raw` replace the node's fields, absent keys leave
        them untouched and `properties` entries are merged key by key.
        Null values are ignored.

        Args:
            node: Destination node, modified in place
            raw: Decoded JSON value (must be an object)
            source_path: Location of the value, used in error messages
            base_dir: Directory of the document the value comes from

        Returns:
            The same node

        Raises:
            ResolutionError: If a recognized keyword has the wrong shape
        """
        match raw:
            case dict():
                pass
            case _:
                raise ResolutionError(f"{source_path}: expected a schema object, got {_kind(raw)}")

        node.source_path = source_path
        node.base_dir = base_dir
        node.resolved = False

        for key, value in raw.items():
            if value is None:
                continue
            if key in self.STRING_FIELDS:
                setattr(node, self.STRING_FIELDS[key], self._expect_string(value, f"{source_path}/{key}"))
            elif key == "type":
                node.type = value
            elif key == "extends":
                node.extends = self._parse_child(node.extends, value, f"{source_path}/extends", base_dir)
            elif key == "items":
                node.items = self._parse_child(node.items, value, f"{source_path}/items", base_dir)
            elif key == "properties":
                self._parse_properties(node, value, f"{source_path}/properties", base_dir)
            elif key == "additionalProperties":
                node.additional_properties_raw = value
                node.additional_properties = None

        return node

    def _parse_child(self, current: SchemaNode | None, value: JsonValue, path: str, base_dir: Path | None) -> SchemaNode:
        """Decode a nested schema, reusing the existing node when there is one."""
        if current is None:
            return self.parse(value, path, base_dir)
        return self.parse_into(current, value, path, base_dir)

    def _parse_properties(self, node: SchemaNode, value: JsonValue, path: str, base_dir: Path | None) -> None:
        match value:
            case dict():
                if node.properties is None:
                    node.properties = {}
                for name, child in value.items():
                    node.properties[name] = self.parse(child, f"{path}/{name}", base_dir)
            case _:
                raise ResolutionError(f"{path}: expected an object of schemas, got {_kind(value)}")

    @staticmethod
    def _expect_string(value: JsonValue, path: str) -> str:
        match value:
            case str():
                return value
            case _:
                raise ResolutionError(f"{path}: expected a string, got {_kind(value)}")


def _kind(value: JsonValue) -> str:
    """Name the JSON kind of a decoded value."""
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list():
            return "array"
        case dict():
            return "object"
        case _:
            return type(value).__name__
