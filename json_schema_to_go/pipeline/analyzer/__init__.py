"""
Analyzer - resolves schema references and synthesizes type expressions.
"""

from __future__ import annotations

from .inheritance_resolver import InheritanceResolver
from .ir_nodes import FieldDef, StructDef, TypeKind, TypeRef
from .reference_loader import ReferenceLoader
from .type_registry import TypeRegistry
from .type_synthesizer import TypeSynthesizer

__all__ = [
    "FieldDef",
    "InheritanceResolver",
    "ReferenceLoader",
    "StructDef",
    "TypeKind",
    "TypeRef",
    "TypeRegistry",
    "TypeSynthesizer",
]
