"""
Inheritance resolver for $ref substitution and extends merging.

Resolution mutates a SchemaNode in place:

1. A $ref is loaded into the node and cleared (one level only)
2. properties is normalized to an empty mapping
3. additionalProperties is normalized to a nested, resolved node or None
4. extends is resolved and its fields merged in where the node has none
"""

from __future__ import annotations

import logging

from ..errors import ResolutionError
from ..schema_ast import SchemaNode
from .reference_loader import ReferenceLoader

logger = logging.getLogger(__name__)


class InheritanceResolver:
    """Resolves references and inheritance of schema nodes."""

    def __init__(self, loader: ReferenceLoader):
        self.loader = loader

    def resolve(self, node: SchemaNode) -> SchemaNode:
        """
        Resolve a node in place. Calling it again is a no-op.

        Args:
            node: The node to resolve

        Returns:
            The same node

        Raises:
            ResolutionError: If a reference cannot be loaded or is chained
        """
        if node.resolved:
            return node

        if node.ref:
            ref = node.ref
            node.ref = ""
            logger.debug("Resolving $ref %s at %s", ref, node.source_path)
            self.loader.load_into(ref, node, node.base_dir)
            if node.ref:
                raise ResolutionError(f"Schema {node.describe()} references a schema with a ref: {node.ref}")

        if node.properties is None:
            node.properties = {}

        node.additional_properties = self._additional_properties(node)

        if node.extends is not None:
            self._merge_extends(node, self.resolve(node.extends))

        node.resolved = True
        return node

    def _additional_properties(self, node: SchemaNode) -> SchemaNode | None:
        raw = node.additional_properties_raw
        match raw:
            case None | bool():
                return None
            case dict():
                child = self.loader.parser.parse(raw, f"{node.source_path}/additionalProperties", node.base_dir)
                return self.resolve(child)
            case _:
                raise ResolutionError(f"{node.source_path}/additionalProperties: unknown schema value {raw!r}")

    @staticmethod
    def _merge_extends(node: SchemaNode, base: SchemaNode) -> None:
        """Copy fields of the base into the node without overwriting any."""
        if not node.title:
            node.title = base.title
        if node.type is None:
            node.type = base.type
        if node.items is None:
            node.items = base.items
        for name, child in base.properties.items():
            node.properties.setdefault(name, child)
        logger.debug("Merged extends %s into %s", base.describe(), node.describe())
