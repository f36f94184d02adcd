"""
Type synthesizer: converts resolved schema nodes into type expressions.

Named composite types are registered in the TypeRegistry as a side effect,
so that after synthesizing the root node the registry holds every named
struct reachable from it.
"""

from __future__ import annotations

import logging

from ...utils import capitalize_words
from ..errors import SchemaError, SchemaTypeError
from ..schema_ast import SchemaNode
from .inheritance_resolver import InheritanceResolver
from .ir_nodes import FieldDef, StructDef, TypeRef
from .type_registry import TypeRegistry

logger = logging.getLogger(__name__)


class TypeSynthesizer:
    """Maps schema nodes to type expressions."""

    # Scalar type keywords
    PRIMITIVE_TYPES = {"boolean", "integer", "number", "string"}

    def __init__(self, resolver: InheritanceResolver, registry: TypeRegistry, struct_prefix: str = "Json"):
        """
        Initialize the synthesizer.

        Args:
            resolver: Resolver run on every node before it is mapped
            registry: Registry receiving named composite types
            struct_prefix: Prefix prepended to every derived type name
        """
        self.resolver = resolver
        self.registry = registry
        self.struct_prefix = struct_prefix

    def type_of(self, node: SchemaNode, collapse_named: bool = True) -> TypeRef:
        """
        Synthesize the type expression of a node.

        Args:
            node: Schema node (resolved on demand)
            collapse_named: Return a reference to a registered named type
                instead of its inline body

        Returns:
            The type expression

        Raises:
            ResolutionError: If resolving the node fails
            SchemaError: If an array has no items or a property key contains a backtick
            SchemaTypeError: If the type is not recognized
        """
        self.resolver.resolve(node)

        match node.type:
            case str() as keyword:
                return self._type_of_keyword(node, keyword, collapse_named)
            case [single]:
                # Only the title carries over to the unwrapped type
                inner = SchemaNode(title=node.title, type=single, source_path=node.source_path, base_dir=node.base_dir)
                return self.type_of(inner, collapse_named)
            case list():
                # Unions are not modeled
                return TypeRef.any()
            case _:
                raise SchemaTypeError(f"Unknown type: {node.type!r} in {node.describe()}")

    def _type_of_keyword(self, node: SchemaNode, keyword: str, collapse_named: bool) -> TypeRef:
        if keyword == "any":
            return TypeRef.any()
        if keyword in self.PRIMITIVE_TYPES:
            return TypeRef.primitive(keyword)
        if keyword == "array":
            if node.items is None:
                raise SchemaError(f"Schema {node.describe()} does not have an array type.")
            return TypeRef.array_of(self.type_of(node.items))
        if keyword == "object":
            return self._type_of_object(node, collapse_named)
        raise SchemaTypeError(f"Unknown type string: {keyword} in {node.describe()}")

    def _type_of_object(self, node: SchemaNode, collapse_named: bool) -> TypeRef:
        if not node.properties:
            if node.additional_properties is not None:
                return TypeRef.map_of(self.type_of(node.additional_properties))
            return TypeRef.any()

        for key in node.properties:
            # Keys end up inside a raw string struct tag
            if "`" in key:
                raise SchemaError(f"Property key {key!r} in {node.describe()} cannot contain a backtick")

        struct = StructDef(
            fields=[
                FieldDef(
                    name=capitalize_words(key),
                    json_name=key,
                    type_ref=self.type_of(node.properties[key]),
                )
                for key in sorted(node.properties)
            ]
        )

        name = capitalize_words(node.title)
        if name:
            type_name = self.struct_prefix + name
            self.registry.register(type_name, struct)
            if collapse_named:
                return TypeRef.named(type_name)
        return TypeRef.inline(struct)
