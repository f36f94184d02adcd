"""
Type expression definitions.

These nodes are the output of type synthesis: language-neutral type
expressions that a backend renders into target source code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(Enum):
    """Kind of type expression."""

    ANY = "any"  # Untyped value
    PRIMITIVE = "primitive"  # boolean, integer, number, string
    ARRAY = "array"  # Sequence of type_args[0]
    MAP = "map"  # Mapping from string to type_args[0]
    STRUCT = "struct"  # Inline composite
    NAMED = "named"  # Reference to a registered named type


@dataclass
class FieldDef:
    """A field of a composite type."""

    name: str = ""  # Capitalized field identifier
    json_name: str = ""  # Original property key, used as serialization tag
    type_ref: TypeRef | None = None


@dataclass
class StructDef:
    """A composite type body. Fields are in sorted property key order."""

    fields: list[FieldDef] = field(default_factory=list)


@dataclass
class TypeRef:
    """A synthesized type expression."""

    kind: TypeKind = TypeKind.ANY

    # Primitive keyword ("boolean", "integer", "number", "string") or registered name
    name: str = ""

    # Element type for ARRAY and value type for MAP
    type_args: list[TypeRef] = field(default_factory=list)

    # Body of an inline composite
    struct: StructDef | None = None

    @staticmethod
    def any() -> TypeRef:
        return TypeRef(kind=TypeKind.ANY)

    @staticmethod
    def primitive(keyword: str) -> TypeRef:
        return TypeRef(kind=TypeKind.PRIMITIVE, name=keyword)

    @staticmethod
    def array_of(item: TypeRef) -> TypeRef:
        return TypeRef(kind=TypeKind.ARRAY, type_args=[item])

    @staticmethod
    def map_of(value: TypeRef) -> TypeRef:
        return TypeRef(kind=TypeKind.MAP, type_args=[value])

    @staticmethod
    def inline(struct: StructDef) -> TypeRef:
        return TypeRef(kind=TypeKind.STRUCT, struct=struct)

    @staticmethod
    def named(name: str) -> TypeRef:
        return TypeRef(kind=TypeKind.NAMED, name=name)
